"""Unit tests for WidgetKind and account compatibility."""

import pytest

from cashboard.domain.board import WidgetKind
from cashboard.domain.shared import ErrorCode, ValidationError


class TestCompatibility:
    """Tests for which account types each kind can display."""

    @pytest.mark.parametrize(
        "account_type",
        ["depository", "credit", "investment", "loan"],
    )
    def test_transactions_accepts_every_type(self, account_type):
        assert WidgetKind.TRANSACTIONS.accepts(account_type)

    def test_spend_analyzer(self):
        kind = WidgetKind.SPEND_ANALYZER
        assert kind.accepts("depository")
        assert kind.accepts("credit")
        assert not kind.accepts("investment")
        assert not kind.accepts("loan")

    def test_investment_graph(self):
        kind = WidgetKind.INVESTMENT_GRAPH
        assert kind.accepts("investment")
        assert kind.accepts("depository")
        assert not kind.accepts("credit")
        assert not kind.accepts("loan")

    def test_account_type_case_is_ignored(self):
        assert WidgetKind.SPEND_ANALYZER.accepts(" Credit ")

    def test_unknown_account_type_is_rejected(self):
        for kind in WidgetKind:
            assert not kind.accepts("crypto")


class TestParse:
    """Tests for WidgetKind.parse."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Spend Analyzer", WidgetKind.SPEND_ANALYZER),
            ("SpendAnalyzer", WidgetKind.SPEND_ANALYZER),
            ("spend_analyzer", WidgetKind.SPEND_ANALYZER),
            ("investment-graph", WidgetKind.INVESTMENT_GRAPH),
            ("TRANSACTIONS", WidgetKind.TRANSACTIONS),
            (WidgetKind.TRANSACTIONS, WidgetKind.TRANSACTIONS),
        ],
    )
    def test_parse(self, name, expected):
        assert WidgetKind.parse(name) is expected

    def test_unknown_kind_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            WidgetKind.parse("Net Worth")
        assert exc_info.value.code == ErrorCode.INVALID_WIDGET_KIND

    def test_wire_values(self):
        assert WidgetKind.SPEND_ANALYZER.value == "Spend Analyzer"
        assert WidgetKind.INVESTMENT_GRAPH.value == "Investment Graph"
        assert WidgetKind.TRANSACTIONS.value == "Transactions"
