import pytest
from openpyxl import Workbook


@pytest.fixture
def catalog_file(tmp_path):
    """Write a small catalog workbook and return its path."""
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "Catalog"
    sheet.append(["Item_Name", "Price", "Notes"])
    sheet.append(["Apple", 1.50, "fruit"])
    sheet.append(["Banana", "0.50", None])
    sheet.append([None, 9.99, "blank name row"])
    sheet.append(["Mystery", "n/a", None])
    sheet.append(["  Grapes ", 2, None])
    path = tmp_path / "catalog.xlsx"
    workbook.save(path)
    return path
