"""Tests for the Graphviz subprocess adapter."""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from graphio.exceptions import (
    EngineNotFoundError,
    ExternalProcessError,
    RenderTimeoutError,
    UnsupportedDataError,
)
from graphio.providers.graphviz_provider import RENDER_FORMAT_DESCRIPTORS, SERIAL_FORMAT_DESCRIPTORS
from graphio.renderers import build_command, run_graphviz

SUBPROCESS_RUN = "graphio.renderers.process_adapter.subprocess.run"
PNG = RENDER_FORMAT_DESCRIPTORS["png"]
SVG = RENDER_FORMAT_DESCRIPTORS["svg"]
SOURCE = 'digraph "g" {\n  "é"\n}'


def test_build_command_minimal():
    assert build_command("dot", "png") == ["dot", "-Tpng"]


def test_build_command_with_output_and_input(tmp_path):
    out = tmp_path / "out.svg"
    src = tmp_path / "in.gv"
    assert build_command("neato", "svg:cairo", out, src) == ["neato", "-Tsvg:cairo", f"-o{out}", str(src)]


def test_build_command_makes_paths_absolute():
    command = build_command("dot", "png", "relative.png")
    assert command[2] == f"-o{Path('relative.png').absolute()}"


def test_binary_format_returns_bytes(completed):
    with patch(SUBPROCESS_RUN, return_value=completed(stdout=b"\x89PNG")) as run:
        result = run_graphviz(PNG, SOURCE)

    assert result.stdout == b"\x89PNG"
    assert result.command == ["dot", "-Tpng"]
    args, kwargs = run.call_args
    assert args[0] == ["dot", "-Tpng"]
    assert kwargs["input"] == SOURCE.encode("utf-8")
    assert kwargs["capture_output"] is True
    assert kwargs["timeout"] is None


def test_text_format_is_decoded(completed):
    with patch(SUBPROCESS_RUN, return_value=completed(stdout="<svg>é</svg>".encode())):
        result = run_graphviz(SVG, SOURCE, algorithm="circo")

    assert result.stdout == "<svg>é</svg>"
    assert result.command == ["circo", "-Tsvg"]


def test_explicit_encodings(completed):
    with patch(SUBPROCESS_RUN, return_value=completed(stdout="ok".encode("latin-1"))) as run:
        result = run_graphviz(SVG, SOURCE, in_encoding="latin-1", out_encoding=None)

    assert run.call_args.kwargs["input"] == SOURCE.encode("latin-1")
    assert result.stdout == b"ok"


def test_file_input_uses_devnull(completed, tmp_path):
    dot_file = tmp_path / "g.gv"
    with patch(SUBPROCESS_RUN, return_value=completed()) as run:
        run_graphviz(SERIAL_FORMAT_DESCRIPTORS["gv"], dot_file)

    args, kwargs = run.call_args
    assert args[0][-1] == str(dot_file)
    assert kwargs["stdin"] is subprocess.DEVNULL
    assert "input" not in kwargs


def test_output_file_argument(completed, tmp_path):
    target = tmp_path / "out.png"
    with patch(SUBPROCESS_RUN, return_value=completed()) as run:
        run_graphviz(PNG, SOURCE, target)

    assert run.call_args.args[0] == ["dot", "-Tpng", f"-o{target}"]


def test_nonzero_exit_raises(completed):
    with patch(SUBPROCESS_RUN, return_value=completed(returncode=1, stderr=b"syntax error in line 1")):
        with pytest.raises(ExternalProcessError) as excinfo:
            run_graphviz(PNG, SOURCE)

    error = excinfo.value
    assert error.returncode == 1
    assert error.stderr == "syntax error in line 1"
    assert error.source == SOURCE
    assert error.command == ["dot", "-Tpng"]


def test_zero_exit_with_stderr_is_failure(completed):
    with patch(SUBPROCESS_RUN, return_value=completed(stdout=b"\x89PNG", stderr=b"Warning: something odd")):
        with pytest.raises(ExternalProcessError, match="something odd"):
            run_graphviz(PNG, SOURCE)


def test_blank_stderr_is_success(completed):
    with patch(SUBPROCESS_RUN, return_value=completed(stdout=b"ok", stderr=b"\n  ")):
        assert run_graphviz(PNG, SOURCE).stdout == b"ok"


def test_missing_executable():
    with patch(SUBPROCESS_RUN, side_effect=FileNotFoundError("dot")):
        with pytest.raises(EngineNotFoundError) as excinfo:
            run_graphviz(PNG, SOURCE)

    assert isinstance(excinfo.value, ExternalProcessError)
    assert excinfo.value.returncode is None


def test_timeout():
    timeout_error = subprocess.TimeoutExpired(["dot"], 3, stderr=b"partial")
    with patch(SUBPROCESS_RUN, side_effect=timeout_error) as run:
        with pytest.raises(RenderTimeoutError) as excinfo:
            run_graphviz(PNG, SOURCE, timeout=3)

    assert run.call_args.kwargs["timeout"] == 3
    assert excinfo.value.timeout == 3
    assert excinfo.value.stderr == "partial"


def test_unsupported_input():
    with pytest.raises(UnsupportedDataError):
        run_graphviz(PNG, 42)


def test_unknown_engine_is_still_run(completed):
    with patch(SUBPROCESS_RUN, return_value=completed()) as run:
        run_graphviz(PNG, SOURCE, algorithm="my-engine")

    assert run.call_args.args[0][0] == "my-engine"
