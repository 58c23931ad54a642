"""Unit tests for the Row entity."""

import pytest

from cashboard.domain.board import (
    ColumnType,
    Row,
    RowType,
    Widget,
    WidgetKind,
    WidgetNotFoundError,
)
from tests.shared.fixtures.factories import TestBoardFactory


class TestRowShape:
    """Tests that a row's widgets always match its layout."""

    def test_wrong_widget_count_is_rejected(self):
        with pytest.raises(ValueError, match="holds 3 widgets"):
            Row(
                row_type=RowType.TRIPLE,
                sort_order=1,
                widgets=(Widget(column_type=ColumnType.NARROW, sort_order=1),),
            )

    def test_wrong_column_types_are_rejected(self):
        with pytest.raises(ValueError, match="requires columns"):
            Row(
                row_type=RowType.WIDE_NARROW,
                sort_order=1,
                widgets=(
                    Widget(column_type=ColumnType.NARROW, sort_order=1),
                    Widget(column_type=ColumnType.WIDE, sort_order=2),
                ),
            )

    def test_widget_order_must_increase(self):
        with pytest.raises(ValueError, match="strictly increasing"):
            Row(
                row_type=RowType.NARROW_WIDE,
                sort_order=1,
                widgets=(
                    Widget(column_type=ColumnType.NARROW, sort_order=2),
                    Widget(column_type=ColumnType.WIDE, sort_order=2),
                ),
            )


class TestRowWidgets:
    """Tests for widget lookup and replacement inside a row."""

    def test_bound_widgets(self):
        row = TestBoardFactory.row(
            row_id=2,
            row_type=RowType.TRIPLE,
            bound={1: TestBoardFactory.spend_binding()},
        )

        assert row.has_bound_widgets
        assert [w.id for w in row.bound_widgets] == [22]

    def test_find_widget(self):
        row = TestBoardFactory.row(row_id=2)

        assert row.find_widget(21) is row.widgets[0]
        assert row.find_widget(99) is None

    def test_with_widget_replaces_only_the_match(self):
        row = TestBoardFactory.row(row_id=2, row_type=RowType.TRIPLE)
        kind, refs = TestBoardFactory.spend_binding()
        updated = Widget(
            id=22,
            row_id=2,
            column_type=ColumnType.NARROW,
            sort_order=2,
            kind=kind,
            linked_accounts=refs,
        )

        new_row = row.with_widget(updated)

        assert new_row.widgets[1] is updated
        assert new_row.widgets[0] is row.widgets[0]
        assert new_row.widgets[2] is row.widgets[2]
        assert row.widgets[1].is_placeholder

    def test_with_widget_refuses_column_change(self):
        row = TestBoardFactory.row(row_id=2, row_type=RowType.WIDE_NARROW)
        moved = Widget(
            id=21,
            row_id=2,
            column_type=ColumnType.NARROW,
            sort_order=1,
            kind=WidgetKind.TRANSACTIONS,
            linked_accounts=TestBoardFactory.spend_binding()[1],
        )

        with pytest.raises(ValueError, match="column type cannot change"):
            row.with_widget(moved)

    def test_with_unknown_widget_raises(self):
        row = TestBoardFactory.row(row_id=2, row_type=RowType.SINGLE)

        with pytest.raises(WidgetNotFoundError):
            row.with_widget(Widget(id=99, column_type=ColumnType.FULL, sort_order=1))
