"""PyQt5 UI for the Shopping Cart."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PyQt5.QtCore import Qt, QStringListModel
from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import (
    QAbstractItemView,
    QApplication,
    QComboBox,
    QCompleter,
    QDoubleSpinBox,
    QFormLayout,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSpinBox,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from shopcart import config
from shopcart.cart import Cart, CartChange
from shopcart.data.catalog_repo import CatalogRepository
from shopcart.discounts import DiscountStrategy, make_discount
from shopcart.errors import CartError
from shopcart.models.item import Item

logger = logging.getLogger(__name__)

DISCOUNT_CHOICES = [
    ("No discount", "none"),
    ("Fixed amount", "fixed"),
    ("Percentage", "percentage"),
]


def format_currency(amount: float) -> str:
    """Return amount formatted to two decimals."""
    return f"{amount:.2f}"


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, catalog_path: Optional[Path | str] = None, validate: bool = config.STRICT_ITEMS) -> None:
        super().__init__()
        self.setWindowTitle(config.WINDOW_TITLE)
        self.resize(900, 560)

        self.catalog_path = catalog_path
        self.catalog: Optional[CatalogRepository] = None
        self.cart = Cart(validate=validate)
        self._name_model = QStringListModel()
        self._completer: Optional[QCompleter] = None

        self._build_ui()
        self._load_catalog()
        self._update_totals()

    def _build_ui(self) -> None:
        root = QWidget()
        main_layout = QVBoxLayout()

        content_layout = QHBoxLayout()
        content_layout.addLayout(self._build_left_panel(), 1)
        content_layout.addLayout(self._build_right_panel(), 2)

        main_layout.addLayout(content_layout)
        main_layout.addLayout(self._build_bottom_panel())
        root.setLayout(main_layout)
        self.setCentralWidget(root)

    def _build_left_panel(self) -> QVBoxLayout:
        layout = QVBoxLayout()

        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText("Search or type an item name...")
        self.search_input.textChanged.connect(self._on_search_text)
        self.search_input.returnPressed.connect(self._add_to_cart)
        layout.addWidget(QLabel("Item"))
        layout.addWidget(self.search_input)

        details = QFormLayout()
        self.price_spin = QDoubleSpinBox()
        self.price_spin.setRange(0, 1_000_000)
        self.price_spin.setDecimals(2)
        self.qty_spin = QSpinBox()
        self.qty_spin.setMinimum(1)
        self.qty_spin.setMaximum(1_000_000)
        details.addRow("Unit price:", self.price_spin)
        details.addRow("Qty:", self.qty_spin)
        layout.addLayout(details)

        self.add_button = QPushButton("Add to Cart")
        self.add_button.clicked.connect(self._add_to_cart)
        layout.addWidget(self.add_button)

        self.remove_button = QPushButton("Remove Selected")
        self.remove_button.clicked.connect(self._remove_selected)
        layout.addWidget(self.remove_button)

        layout.addStretch()
        return layout

    def _build_right_panel(self) -> QVBoxLayout:
        layout = QVBoxLayout()
        self.table = QTableWidget(0, 4)
        self.table.setHorizontalHeaderLabels(["Item", "Qty", "Price", "Total"])
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.horizontalHeader().setStretchLastSection(True)
        layout.addWidget(self.table, 1)
        return layout

    def _build_bottom_panel(self) -> QHBoxLayout:
        bottom = QHBoxLayout()

        totals_group = QGroupBox("Totals")
        totals_layout = QGridLayout()
        self.discount_combo = QComboBox()
        for label, kind in DISCOUNT_CHOICES:
            self.discount_combo.addItem(label, kind)

        self.discount_spin = QDoubleSpinBox()
        self.discount_spin.setRange(0, 1_000_000)
        self.discount_spin.setDecimals(2)
        self.discount_spin.setEnabled(False)
        self.discount_spin.valueChanged.connect(self._update_totals)

        self.discount_combo.currentIndexChanged.connect(self._on_discount_kind)

        self.subtotal_label = QLabel("0.00")
        self.total_label = QLabel("0.00")
        total_font = QFont()
        total_font.setPointSize(16)
        total_font.setBold(True)
        self.total_label.setFont(total_font)

        totals_layout.addWidget(QLabel("Discount"), 0, 0)
        totals_layout.addWidget(self.discount_combo, 0, 1)
        totals_layout.addWidget(self.discount_spin, 0, 2)
        totals_layout.addWidget(QLabel("Subtotal"), 1, 0)
        totals_layout.addWidget(self.subtotal_label, 1, 1)
        totals_layout.addWidget(QLabel("Total"), 2, 0)
        totals_layout.addWidget(self.total_label, 2, 1)
        totals_group.setLayout(totals_layout)

        buttons_layout = QVBoxLayout()
        self.clear_button = QPushButton("Clear")
        self.clear_button.clicked.connect(self._clear_cart)
        buttons_layout.addWidget(self.clear_button)
        buttons_layout.addStretch()

        bottom.addWidget(totals_group)
        bottom.addLayout(buttons_layout)
        return bottom

    def _load_catalog(self) -> None:
        try:
            self.catalog = CatalogRepository(self.catalog_path)
            names = self.catalog.get_all_names()
        except (OSError, CartError) as exc:
            logger.warning("Catalog unavailable, manual entry only: %s", exc)
            QMessageBox.warning(self, "Catalog Error", f"Failed to load catalog: {exc}")
            self.catalog = None
            names = []

        self._name_model.setStringList(names)
        completer = QCompleter(self._name_model, self)
        completer.setCaseSensitivity(Qt.CaseInsensitive)
        completer.setFilterMode(Qt.MatchContains)
        completer.setCompletionMode(QCompleter.PopupCompletion)
        completer.activated[str].connect(self._select_entry)
        self._completer = completer
        self.search_input.setCompleter(completer)

    def _on_search_text(self, text: str) -> None:
        if not text or not self.catalog:
            return
        if self._completer and self.search_input.hasFocus():
            self._completer.setCompletionPrefix(text)
            self._completer.complete()
        if self.catalog.get_entry(text):
            self._select_entry(text)

    def _select_entry(self, name: str) -> None:
        if not self.catalog:
            return
        entry = self.catalog.get_entry(name)
        if entry:
            self.price_spin.setValue(entry.price)

    def _add_to_cart(self) -> None:
        name = self.search_input.text().strip()
        if not name:
            QMessageBox.warning(self, "Missing item", "Please enter or select an item first.")
            return

        entry = self.catalog.get_entry(name) if self.catalog else None
        if entry:
            name = entry.name
        item = Item(name=name, price=self.price_spin.value(), quantity=int(self.qty_spin.value()))

        try:
            change = self.cart.upsert(item)
        except CartError as exc:
            QMessageBox.warning(self, "Invalid item", str(exc))
            return

        if change is CartChange.MERGED:
            self.statusBar().showMessage(f"Updated quantity of {item.name}", 3000)
        self._refresh_table()
        self._update_totals()

    def _remove_selected(self) -> None:
        row = self.table.currentRow()
        if row < 0:
            QMessageBox.information(self, "No selection", "Select a cart line to remove.")
            return
        name = self.table.item(row, 0).text()
        self.cart.remove_item(name)
        self._refresh_table()
        self._update_totals()

    def _refresh_table(self) -> None:
        items = self.cart.get_items()
        self.table.setRowCount(len(items))
        for row, item in enumerate(items):
            values = [
                item.name,
                str(item.quantity),
                format_currency(item.price),
                format_currency(item.line_total),
            ]
            for col, val in enumerate(values):
                self.table.setItem(row, col, QTableWidgetItem(val))
        self.table.resizeColumnsToContents()

    def _on_discount_kind(self) -> None:
        self.discount_spin.setEnabled(self.discount_combo.currentData() != "none")
        self._update_totals()

    def _current_discount(self) -> DiscountStrategy:
        return make_discount(self.discount_combo.currentData(), self.discount_spin.value())

    def _update_totals(self) -> None:
        self.subtotal_label.setText(format_currency(self.cart.get_subtotal()))
        total = self.cart.apply_discount(self._current_discount())
        self.total_label.setText(format_currency(total))

    def _clear_cart(self) -> None:
        self.cart.clear()
        self.table.setRowCount(0)
        self.discount_combo.setCurrentIndex(0)
        self.discount_spin.setValue(0.0)
        self.search_input.clear()
        self.qty_spin.setValue(1)
        self._update_totals()


if __name__ == "__main__":
    app = QApplication([])
    window = MainWindow()
    window.show()
    app.exec_()
