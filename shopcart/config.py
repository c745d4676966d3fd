"""Configuration constants for the Shopping Cart app."""

import os
from pathlib import Path

# Path to the Excel workbook holding the price catalog.
CATALOG_PATH: Path = Path("data/catalog.xlsx")

# Sheet name inside the catalog workbook.
CATALOG_SHEET_NAME: str = "Catalog"

# Title of the main window.
WINDOW_TITLE: str = "Shopping Cart"

# Decimal places kept by discount strategies (currency cents).
CURRENCY_PLACES: int = 2

# Reject blank names, negative prices and non-positive quantities on add.
STRICT_ITEMS: bool = False

LOG_LEVEL: str = os.environ.get("SHOPCART_LOG_LEVEL", "INFO")
LOG_FORMAT: str = "%(asctime)s - %(levelname)s - %(message)s"
