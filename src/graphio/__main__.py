# src/graphio/__main__.py
"""
GraphIO 主執行入口：`python -m graphio [config.yaml]`。
"""

# 1. 標準庫導入
import logging
import sys
from pathlib import Path

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from graphio.core.job_processor import JobProcessor
from graphio.utils.path_utils import find_project_root


def main(argv: list[str] | None = None):
    """主函式，讀取設定檔並執行其中所有的圖形工作。"""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if not root_logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    args = sys.argv[1:] if argv is None else argv
    if args:
        config_path = Path(args[0])
    else:
        try:
            project_root = find_project_root()
        except FileNotFoundError as e:
            logging.error(f"初始化失敗: {e}")
            return
        config_path = project_root / "configs" / "graphio.yaml"

    if not config_path.is_file():
        logging.error(f"設定檔 '{config_path}' 不存在。")
        logging.info("請從 'configs/graphio.yaml' 複製一份並進行設定。")
        return

    logging.info(f"GraphIO 工具啟動，使用設定檔: {config_path}")
    return JobProcessor(config_path).run()


if __name__ == "__main__":
    main()
