"""Tests for turning uploads into rows."""

import io
from datetime import datetime

import pytest
from core.file_loader import decode_text, format_cell_value, is_excel_file, load_table
from core.stock_parser import parse_stock_file
from tests.conftest import build_workbook, stock_entry


class TestFormatCellValue:

    @pytest.mark.parametrize("value,expected", [
        (None, ""),
        (float("nan"), ""),
        (5.0, "5"),
        (2.5, "2.5"),
        (7, "7"),
        (datetime(2024, 3, 5, 10, 30), "2024-03-05"),
        ('  "CAMARA"  ', "CAMARA"),
    ])
    def test_values(self, value, expected):
        assert format_cell_value(value) == expected


class TestLoadTable:

    def test_csv_bytes_with_bom(self):
        rows, error = load_table("\ufeffIDC,TIPO\nANA,NOMINA".encode("utf-8"), "t.csv")
        assert error is None
        assert rows == [["IDC", "TIPO"], ["ANA", "NOMINA"]]

    def test_legacy_encoding(self):
        assert decode_text("REGIÓN".encode("cp1252")) == "REGIÓN"

    def test_file_like_uses_name(self):
        buffer = io.BytesIO(b"a,b")
        buffer.name = "upload.csv"
        rows, error = load_table(buffer)
        assert rows == [["a", "b"]]
        assert error is None

    def test_excel_first_sheet_keeps_positions(self):
        sheet = [[None] * 12 for _ in range(11)]
        for (row, col), value in stock_entry(10, 5, "CAMARA", "HIK", 3).items():
            sheet[row][col] = value
        data = build_workbook({"Stock": sheet, "Otra": [["x"]]})

        rows, error = load_table(data, "stock.xlsx")

        assert error is None
        lines = parse_stock_file(rows, "ANA")
        assert [(l.category, l.device, l.quantity) for l in lines] == [("CCTV", "CAMARA", 3)]

    def test_broken_excel_returns_error(self):
        rows, error = load_table(b"garbage", "stock.xlsx")
        assert rows is None
        assert "stock.xlsx" in error

    def test_excel_extension_detection(self):
        assert is_excel_file("A.XLSX")
        assert not is_excel_file("a.csv")
