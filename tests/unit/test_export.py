"""
Unit tests for CSV export.

serialize_csv is checked byte for byte; save_csv only touches pytest's tmp_path.
"""

import pytest

from app_utils.export import (
    cell_text,
    escape_cell,
    export_filename,
    save_csv,
    serialize_csv,
)

BOM = b"\xef\xbb\xbf"


def parse_semicolon_csv(text):
    """Minimal quote-aware reader for ';' / '\\n' CSV."""
    rows, row, cell = [], [], []
    in_quotes = False
    i = 0
    while i < len(text):
        ch = text[i]
        if in_quotes:
            if ch == '"' and text[i + 1:i + 2] == '"':
                cell.append('"')
                i += 1
            elif ch == '"':
                in_quotes = False
            else:
                cell.append(ch)
        elif ch == '"':
            in_quotes = True
        elif ch == ";":
            row.append("".join(cell))
            cell = []
        elif ch == "\n":
            row.append("".join(cell))
            rows.append(row)
            row, cell = [], []
        else:
            cell.append(ch)
        i += 1
    row.append("".join(cell))
    rows.append(row)
    return rows


class TestEscapeCell:

    @pytest.mark.parametrize("raw", ["a;b", 'say "hi"', "line\nbreak", "carriage\rreturn"])
    def test_special_characters_are_quoted(self, raw):
        """Delimiter, quote, CR and LF force quoting."""
        out = escape_cell(raw)
        assert out.startswith('"') and out.endswith('"')

    def test_quotes_are_doubled(self):
        assert escape_cell('a;b"c\nd') == '"a;b""c\nd"'

    def test_plain_cells_untouched(self):
        """The en dash range text needs no quoting."""
        assert escape_cell("48 – 60 g/jour") == "48 – 60 g/jour"

    def test_none_is_empty(self):
        """Missing values become empty cells, never 'None'."""
        assert escape_cell(None) == ""

    def test_numbers(self):
        """Whole floats drop the trailing .0."""
        assert cell_text(60) == "60"
        assert cell_text(60.0) == "60"
        assert cell_text(62.5) == "62.5"


class TestSerializeCsv:

    def test_starts_with_bom(self):
        assert serialize_csv([["x"]]).startswith(BOM)

    def test_layout(self):
        """';' between cells, bare '\\n' between rows, no trailing newline."""
        rows = [["Poids (kg)", "Sédentaire"], [50, "40 – 50 g/jour"], [60, "48 – 60 g/jour"]]
        expected = "\ufeffPoids (kg);Sédentaire\n50;40 – 50 g/jour\n60;48 – 60 g/jour"
        assert serialize_csv(rows) == expected.encode("utf-8")

    def test_none_cells(self):
        assert serialize_csv([[None, 1, None]]) == BOM + b";1;"

    def test_tricky_cell_survives_a_quote_aware_reader(self):
        """A cell with every special character comes back unchanged."""
        tricky = 'a;b"c\nd'
        data = serialize_csv([["head", "other"], [tricky, "x"]])
        assert b'"a;b""c\nd"' in data
        rows = parse_semicolon_csv(data.decode("utf-8")[1:])
        assert rows == [["head", "other"], [tricky, "x"]]


class TestExportFilename:

    def test_whole_numbers(self):
        assert export_filename(50.0, 100.0, 6) == "besoins-proteines_50-100kg_6lignes.csv"

    def test_decimal_weight(self):
        assert export_filename(50.5, 100, 12) == "besoins-proteines_50.5-100kg_12lignes.csv"


class TestSaveCsv:

    def test_writes_serialized_bytes(self, tmp_path):
        """The file holds exactly what serialize_csv returns."""
        rows = [["Poids (kg)", "Endurance"], [50, "60 – 80 g/jour"]]
        path = save_csv(rows, tmp_path / "exports", "table.csv")
        assert path == tmp_path / "exports" / "table.csv"
        assert path.read_bytes() == serialize_csv(rows)

    def test_two_exports_are_independent(self, tmp_path):
        first = save_csv([["a"]], tmp_path, "one.csv")
        second = save_csv([["b"]], tmp_path, "two.csv")
        assert first.read_bytes() == BOM + b"a"
        assert second.read_bytes() == BOM + b"b"

    def test_default_filename(self, tmp_path):
        assert save_csv([["a"]], tmp_path).name == "besoins-proteines.csv"

    def test_empty_table_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="empty"):
            save_csv([], tmp_path)
