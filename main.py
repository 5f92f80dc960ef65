# main.py
from __future__ import annotations
import sys
import logging
from pathlib import Path

from PySide6.QtWidgets import QApplication, QMessageBox

from app.settings import load_settings
from ui.main_window import MainWindow


def setup_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler("app.log", encoding="utf-8"),
        ],
    )

    # Log any uncaught exceptions rather than silently dying
    def excepthook(exctype, value, tb):
        logging.critical("Unhandled exception", exc_info=(exctype, value, tb))
        try:
            if QApplication.instance() is not None:
                QMessageBox.critical(
                    None, "Application Error", f"{exctype.__name__}: {value}"
                )
        except Exception:
            logging.exception("Could not show the error dialog")
        # exit non-zero so run scripts do not think it succeeded
        sys.exit(1)

    sys.excepthook = excepthook


def load_stylesheet(app: QApplication) -> None:
    qss = Path("resources/style.qss")
    if qss.exists():
        try:
            app.setStyleSheet(qss.read_text(encoding="utf-8"))
        except OSError as e:
            logging.warning("Failed to load stylesheet: %s", e)


def main() -> int:
    setup_logging()

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Typing Exam")
    app.setOrganizationName("Typing Exam")

    load_stylesheet(app)

    win = MainWindow(load_settings())
    win.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
