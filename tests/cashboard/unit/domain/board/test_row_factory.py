"""Unit tests for the row factory and the row layout table."""

import pytest

from cashboard.domain.board import ColumnType, RowType, arity, create_row


class TestRowLayouts:
    """Tests for row type arity and column layouts."""

    @pytest.mark.parametrize(
        ("row_type", "expected"),
        [
            (RowType.SINGLE, 1),
            (RowType.WIDE_NARROW, 2),
            (RowType.NARROW_WIDE, 2),
            (RowType.TRIPLE, 3),
        ],
    )
    def test_arity(self, row_type, expected):
        assert arity(row_type) == expected
        assert row_type.arity == expected

    def test_column_spans_fill_the_row(self):
        """Every layout adds up to the full twelve-column grid."""
        for row_type in RowType:
            spans = [column.grid_span for column in row_type.column_types]
            assert sum(spans) == 12

    def test_parse_accepts_tags_and_members(self):
        assert RowType.parse("2a") is RowType.WIDE_NARROW
        assert RowType.parse(" 2B ") is RowType.NARROW_WIDE
        assert RowType.parse(RowType.TRIPLE) is RowType.TRIPLE

    @pytest.mark.parametrize("tag", ["", "4", "2c", "wide"])
    def test_parse_unknown_returns_none(self, tag):
        assert RowType.parse(tag) is None


class TestCreateRow:
    """Tests for create_row."""

    @pytest.mark.parametrize(
        ("row_type", "columns"),
        [
            ("1", [ColumnType.FULL]),
            ("2a", [ColumnType.WIDE, ColumnType.NARROW]),
            ("2b", [ColumnType.NARROW, ColumnType.WIDE]),
            ("3", [ColumnType.NARROW, ColumnType.NARROW, ColumnType.NARROW]),
        ],
    )
    def test_widgets_follow_layout(self, row_type, columns):
        row = create_row(sort_order=4, row_type=row_type, board_id=7)

        assert row is not None
        assert row.row_type is RowType(row_type)
        assert [w.column_type for w in row.widgets] == columns
        assert [w.sort_order for w in row.widgets] == list(range(1, len(columns) + 1))

    def test_draft_is_unpersisted_placeholders(self):
        row = create_row(sort_order=1, row_type=RowType.TRIPLE, board_id=7)

        assert row.id is None
        assert row.board_id == 7
        assert row.sort_order == 1
        for widget in row.widgets:
            assert widget.id is None
            assert widget.row_id is None
            assert widget.is_placeholder
            assert widget.linked_accounts == ()

    def test_unknown_row_type_returns_none(self, caplog):
        with caplog.at_level("WARNING"):
            assert create_row(sort_order=1, row_type="5", board_id=7) is None
        assert "Ignoring unknown row type" in caplog.text
