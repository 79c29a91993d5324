# ABOUTME: Tests for wikitable row splitting, cell extraction and number coercion
# ABOUTME: Covers inline and one-cell-per-line layouts plus locale-style separators

import pytest

from wiki_visualizer.core.models import Cell, CellKind, Table
from wiki_visualizer.markup.table import coerce_number, extract_rows, normalize_table, parse_table, split_rows


class TestSplitRows:
    def test_splits_on_row_separator(self):
        assert split_rows("\n! a !! b\n|-\n| x || 1\n|-\n| y || 2") == [
            "\n! a !! b\n",
            "\n| x || 1\n",
            "\n| y || 2",
        ]

    def test_body_without_separator_is_one_row(self):
        assert split_rows("\n! a !! b") == ["\n! a !! b"]


class TestExtractRows:
    def test_inline_layout(self):
        table = extract_rows(["\n! en !! 2003 !! East\n", "\n| France || 68465 || 26843"])

        assert table.header_labels == ["en", "2003", "East"]
        assert table.rows == [[Cell.string("France"), Cell.string("68465"), Cell.string("26843")]]

    def test_one_cell_per_line_layout(self):
        table = extract_rows(["\n! en\n! 2003\n", "\n| France\n| 68465\n"])

        assert table.header_labels == ["en", "2003"]
        assert [cell.value for cell in table.rows[0]] == ["France", "68465"]

    def test_blank_rows_are_dropped_before_header_detection(self):
        table = extract_rows(["\n", "   ", "\n! a !! b\n", "", "\n| x || 1\n"])

        assert table.header_labels == ["a", "b"]
        assert table.row_count == 1

    def test_single_label_header_is_skipped(self):
        table = extract_rows(["\n! only\n", "\n| x || 1\n"])

        assert table.header == []
        assert table.column_count == 0
        assert table.row_count == 1

    def test_rows_keep_their_own_length(self):
        table = extract_rows(["! a !! b !! c", "| x || 1", "| lone"])

        assert [len(row) for row in table.rows] == [2, 1]
        assert table.rows[1] == [Cell.string("lone")]

    def test_cells_are_trimmed_strings(self):
        table = extract_rows(["!  a  !!  b  ", "|   x   ||   1  "])

        assert all(cell.kind == CellKind.STRING for cell in table.rows[0])
        assert [cell.value for cell in table.rows[0]] == ["x", "1"]

    def test_parse_table_combines_split_and_extract(self):
        table = parse_table("\n! a !! b\n|-\n| x || 1\n|-\n| y || 2")

        assert table.header_labels == ["a", "b"]
        assert [[cell.value for cell in row] for row in table.rows] == [["x", "1"], ["y", "2"]]


class TestCoerceNumber:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("68465", 68465.0),
            ("  42  ", 42.0),
            ("-4.5", -4.5),
            ("3,5", 3.5),
            ("1,234", 1234.0),
            ("1,234,567", 1234567.0),
            ("12 345,6", 12345.6),
            ("1.234,5", 1234.5),
            ("1,234.5", 1234.5),
            ("1.234.567", 1234567.0),
            ("68465[1]", 68465.0),
            ("12%", 12.0),
            ("1e3", 1000.0),
            (".5", 0.5),
        ],
    )
    def test_numeric_text(self, text, expected):
        assert coerce_number(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["", "abc", "n/a", "-", "N/A"])
    def test_text_without_leading_number_is_zero(self, text):
        assert coerce_number(text) == 0.0


class TestNormalizeTable:
    def _table(self):
        return Table(
            header=[Cell.string("year"), Cell.string("value")],
            rows=[[Cell.string(" 2003 "), Cell.string("1,5")], [Cell.string("2004"), Cell.string("x")]],
        )

    def test_first_column_stays_string_by_default(self):
        normalized = normalize_table(self._table())

        assert normalized.rows[0] == [Cell.string("2003"), Cell.number(1.5)]
        assert normalized.rows[1] == [Cell.string("2004"), Cell.number(0.0)]

    def test_numeric_first_column(self):
        normalized = normalize_table(self._table(), numeric_first_column=True)

        assert normalized.rows[0][0] == Cell.number(2003.0)
        assert all(cell.kind == CellKind.NUMBER for row in normalized.rows for cell in row)

    def test_header_is_untouched(self):
        assert normalize_table(self._table()).header == self._table().header
