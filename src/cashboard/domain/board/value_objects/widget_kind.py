"""Widget kinds and the account compatibility table."""

from __future__ import annotations

from enum import Enum

from cashboard.domain.shared.exceptions import ErrorCode, ValidationError


class WidgetKind(str, Enum):
    """Visualization a bound widget displays.

    Values are the labels exchanged with the remote store.
    """

    SPEND_ANALYZER = "Spend Analyzer"
    INVESTMENT_GRAPH = "Investment Graph"
    TRANSACTIONS = "Transactions"

    @classmethod
    def parse(cls, name: WidgetKind | str) -> WidgetKind:
        """Resolve a kind from its label or compact name ("SpendAnalyzer")."""
        if isinstance(name, WidgetKind):
            return name
        wanted = _compact(name)
        for kind in cls:
            if wanted in (_compact(kind.value), _compact(kind.name)):
                return kind
        msg = f"Unknown widget kind: {name!r}"
        raise ValidationError(
            msg,
            code=ErrorCode.INVALID_WIDGET_KIND,
            details={"kind": name},
        )

    @property
    def accepted_account_types(self) -> frozenset[str]:
        return ACCOUNT_COMPATIBILITY[self]

    def accepts(self, account_type: str) -> bool:
        return account_type.strip().lower() in ACCOUNT_COMPATIBILITY[self]


def _compact(name: str) -> str:
    return "".join(ch for ch in str(name) if ch.isalnum()).lower()


# Account types each widget kind can display
ACCOUNT_COMPATIBILITY: dict[WidgetKind, frozenset[str]] = {
    WidgetKind.SPEND_ANALYZER: frozenset({"depository", "credit"}),
    WidgetKind.INVESTMENT_GRAPH: frozenset({"investment", "depository"}),
    WidgetKind.TRANSACTIONS: frozenset(
        {"depository", "credit", "investment", "loan"},
    ),
}
