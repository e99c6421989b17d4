"""Tests for the GraphIO facade and module-level defaults."""

from unittest.mock import MagicMock, patch

import pytest

import graphio
from graphio import GraphIO, get_default_io, set_default_io
from graphio.core import ConfigLoader
from graphio.exceptions import UnknownProviderError, UnsupportedOperationError
from graphio.providers import ProviderRegistry, renderer, serializer, viewer
from graphio.providers.graphviz_provider import GraphvizRenderer
from graphio.providers.python_provider import PythonSerializer
from graphio.providers.system_provider import SystemViewer
from graphio.renderers.process_adapter import GraphvizResult

RUN_GRAPHVIZ = "graphio.providers.graphviz_provider.run_graphviz"


def _config(tmp_path, text):
    config_file = tmp_path / "graphio.yaml"
    config_file.write_text(text, encoding="utf-8")
    return ConfigLoader(config_file)


def test_default_io_uses_builtin_defaults():
    io = get_default_io()
    assert isinstance(io.renderer, GraphvizRenderer)
    assert io.renderer.format_id == "png"
    assert isinstance(io.viewer, SystemViewer)
    assert isinstance(io.serializer, PythonSerializer)
    assert get_default_io() is io


def test_set_default_io_replaces_instance():
    custom = GraphIO(renderer("graphviz", "svg"), viewer("system"), serializer("python"))
    set_default_io(custom)
    assert get_default_io() is custom
    set_default_io(None)
    assert get_default_io() is not custom


def test_from_config_overrides(tmp_path):
    loader = _config(tmp_path, "defaults:\n  renderer:\n    format: png:cairo\n  serializer:\n    provider: graphviz\n")
    io = GraphIO.from_config(loader)
    assert io.renderer.format_id == "png:cairo"
    assert io.serializer.format_id == "gv"


def test_from_config_unsupported_format(tmp_path):
    loader = _config(tmp_path, "defaults:\n  renderer:\n    format: mp4\n")
    with pytest.raises(UnsupportedOperationError, match="mp4"):
        GraphIO.from_config(loader)


def test_from_config_unknown_provider(tmp_path):
    loader = _config(tmp_path, "defaults:\n  viewer:\n    provider: nowhere\n")
    with pytest.raises(UnknownProviderError):
        GraphIO.from_config(loader)


def test_from_config_with_custom_registry():
    with pytest.raises(UnknownProviderError):
        GraphIO.from_config(registry=ProviderRegistry())


def test_render_passes_graphviz_options(tmp_path, sample_graphs):
    loader = _config(tmp_path, "graphviz:\n  render_timeout: 7\n  graph_name: deps\n")
    io = GraphIO.from_config(loader)
    result = GraphvizResult(command=["dot"], stdout=b"PNG", stderr="", returncode=0)

    with patch(RUN_GRAPHVIZ, return_value=result) as run:
        assert io.render(sample_graphs["dag"], algorithm="dot") == b"PNG"

    source = run.call_args.args[1]
    assert source.startswith('digraph "deps" {')
    assert run.call_args.kwargs == {"timeout": 7, "in_encoding": "utf-8", "algorithm": "dot"}


def test_encode_decode_round_trip(sample_graphs):
    text = graphio.encode(sample_graphs["weighted_directed"])
    restored = graphio.decode(text)
    assert sorted(restored.edges(data="weight")) == sorted(sample_graphs["weighted_directed"].edges(data="weight"))


def test_encode_with_graphviz_serializer_uses_graph_name(tmp_path, sample_graphs):
    loader = _config(tmp_path, "defaults:\n  serializer:\n    provider: graphviz\ngraphviz:\n  graph_name: net\n")
    text = GraphIO.from_config(loader).encode(sample_graphs["undirected"])
    assert text.startswith('graph "net" {')


def test_view_graph_renders_then_opens_with_extension(sample_graphs):
    io = GraphIO(renderer("graphviz", "svg:cairo"), MagicMock(provider_id="system"), serializer("python"))
    result = GraphvizResult(command=["dot"], stdout="<svg/>", stderr="", returncode=0)

    with patch(RUN_GRAPHVIZ, return_value=result):
        io.view(sample_graphs["dag"])

    io.viewer.view_data.assert_called_once_with("<svg/>", extension="svg")


def test_view_graph_with_same_provider_viewer(sample_graphs):
    io = GraphIO(renderer("graphviz"), viewer("graphviz"), serializer("python"))
    result = GraphvizResult(command=["dot"], stdout=b"", stderr="", returncode=0)

    with patch(RUN_GRAPHVIZ, return_value=result) as run:
        io.view(sample_graphs["two_cycle"])

    assert run.call_args.args[0].id == "xlib"


def test_view_rendered_data_and_file(tmp_path):
    fake_viewer = MagicMock(provider_id="system")
    io = GraphIO(renderer("graphviz"), fake_viewer, serializer("python"))

    io.view(b"\x89PNG")
    io.view_file(tmp_path / "g.png")

    fake_viewer.view.assert_called_once_with(b"\x89PNG")
    fake_viewer.view_file.assert_called_once_with(tmp_path / "g.png")


def test_view_data_forwards_options():
    fake_viewer = MagicMock(provider_id="system")
    io = GraphIO(renderer("graphviz"), fake_viewer, serializer("python"), options={"timeout": 9})

    io.view("<svg/>", extension="svg")

    fake_viewer.view.assert_called_once_with("<svg/>", extension="svg")


def test_view_dot_text_with_graphviz_viewer_uses_options():
    io = GraphIO(renderer("graphviz"), viewer("graphviz"), serializer("python"), options={"timeout": 9})
    result = GraphvizResult(command=["neato"], stdout=b"", stderr="", returncode=0)

    with patch(RUN_GRAPHVIZ, return_value=result) as run:
        io.view('graph "g" {}', algorithm="neato")

    assert run.call_args.args[1] == 'graph "g" {}'
    assert run.call_args.kwargs == {"timeout": 9, "algorithm": "neato"}


def test_module_functions_delegate_to_default(sample_graphs, tmp_path):
    fake = MagicMock()
    set_default_io(fake)

    graphio.render(sample_graphs["dag"])
    graphio.render_to_file(sample_graphs["dag"], tmp_path / "g.png")
    graphio.view_file(tmp_path / "g.png")

    fake.render.assert_called_once_with(sample_graphs["dag"])
    fake.render_to_file.assert_called_once_with(sample_graphs["dag"], tmp_path / "g.png")
    fake.view_file.assert_called_once_with(tmp_path / "g.png")
