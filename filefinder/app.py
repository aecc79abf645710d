import logging
from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication

from filefinder.ui.main_window import MainWindow
from filefinder.utils.config import ConfigStore


def main() -> int:
    config = ConfigStore()
    _setup_logging(config.get_bool("debug_logging", False))
    app = QApplication(sys.argv)
    app.setApplicationName("filefinder")
    app.setApplicationDisplayName("File Finder")

    window = MainWindow(config=config)
    window.show()
    logging.getLogger(__name__).info("File Finder started")

    return app.exec()


def _setup_logging(debug: bool) -> None:
    log_dir = Path.home() / ".cache/filefinder/logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / "filefinder.log"
    handlers = [logging.FileHandler(log_path)]
    if debug:
        handlers.append(logging.StreamHandler())
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        handlers=handlers,
    )


if __name__ == "__main__":
    sys.exit(main())
