"""Entry point for the Shopping Cart desktop app."""

import logging
import sys

from PyQt5.QtWidgets import QApplication

from shopcart import config
from shopcart.ui_main import MainWindow


def main() -> None:
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    app = QApplication(sys.argv)
    catalog_path = sys.argv[1] if len(sys.argv) > 1 else None
    window = MainWindow(catalog_path)
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
