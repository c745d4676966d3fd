"""Excel repository for the read-only price catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.worksheet.worksheet import Worksheet

from shopcart import config
from shopcart.errors import CatalogError
from shopcart.models.item import Item

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["Item_Name", "Price"]


def _normalize_name(name: str) -> str:
    return str(name).strip().lower()


@dataclass
class CatalogEntry:
    name: str
    price: float


class CatalogRepository:
    """Reads catalog rows from an Excel sheet and turns them into cart items."""

    def __init__(self, path: Optional[Path | str] = None, sheet_name: Optional[str] = None) -> None:
        self.path: Path = Path(path) if path else config.CATALOG_PATH
        self.sheet_name = sheet_name or config.CATALOG_SHEET_NAME
        self._entries: List[CatalogEntry] = []
        self._by_name: Dict[str, CatalogEntry] = {}
        self._load()

    def _load(self) -> None:
        if not self.path.exists():
            raise FileNotFoundError(f"Catalog file not found: {self.path}")

        try:
            workbook = load_workbook(self.path, data_only=True)
        except (BadZipFile, InvalidFileException) as exc:
            raise CatalogError(f"Catalog file is not a readable workbook: {self.path} ({exc})") from exc
        if self.sheet_name not in workbook.sheetnames:
            raise CatalogError(f"Sheet '{self.sheet_name}' not found in catalog file.")

        sheet: Worksheet = workbook[self.sheet_name]
        columns = self._detect_columns(sheet)
        self._read_rows(sheet, columns)
        logger.info("Loaded %d catalog entries from %s", len(self._entries), self.path)

    @staticmethod
    def _detect_columns(sheet: Worksheet) -> Dict[str, int]:
        """Map header names to 1-based column indexes; raises if any are missing."""
        headers: Dict[str, int] = {}
        for idx, cell in enumerate(sheet[1], start=1):
            if cell.value is not None:
                headers[str(cell.value).strip()] = idx

        missing = [col for col in REQUIRED_COLUMNS if col not in headers]
        if missing:
            raise CatalogError(f"Missing required columns in catalog: {', '.join(missing)}")
        return headers

    def _read_rows(self, sheet: Worksheet, columns: Dict[str, int]) -> None:
        for row in sheet.iter_rows(min_row=2, values_only=True):
            name = row[columns["Item_Name"] - 1]
            if name is None or not str(name).strip():
                continue

            raw_price = row[columns["Price"] - 1]
            price = self._to_float(raw_price, default=None)
            if price is None:
                logger.warning("Catalog price for '%s' is not a number (%r); using 0.00", name, raw_price)
                price = 0.0

            entry = CatalogEntry(name=str(name).strip(), price=price)
            self._entries.append(entry)
            self._by_name[_normalize_name(entry.name)] = entry

    @staticmethod
    def _to_float(value, default: Optional[float]) -> Optional[float]:
        if value in (None, ""):
            return default
        try:
            return float(value)
        except (TypeError, ValueError):
            return default

    def list_entries(self) -> List[CatalogEntry]:
        return list(self._entries)

    def get_all_names(self) -> List[str]:
        """Return display names in sheet order."""
        return [entry.name for entry in self._entries]

    def get_entry(self, name: str) -> Optional[CatalogEntry]:
        """Case-insensitive lookup; None if the name is not in the catalog."""
        return self._by_name.get(_normalize_name(name))

    def make_item(self, name: str, quantity: int = 1) -> Item:
        entry = self.get_entry(name)
        if entry is None:
            raise KeyError(f"Item '{name}' not found in catalog.")
        return Item(name=entry.name, price=entry.price, quantity=quantity)
