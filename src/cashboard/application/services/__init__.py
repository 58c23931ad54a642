"""Application services for the widget board."""

from cashboard.application.services.account_binder import (
    BIND_FAILED_ERROR,
    LOAD_ACCOUNTS_ERROR,
    AccountBinder,
    BinderPhase,
)
from cashboard.application.services.board_store import (
    GENERIC_LOAD_ERROR,
    BoardStore,
)
from cashboard.application.services.widget_unbinder import (
    UNBIND_FAILED_ERROR,
    UnbindPhase,
    WidgetUnbinder,
)

__all__ = [
    "BIND_FAILED_ERROR",
    "GENERIC_LOAD_ERROR",
    "LOAD_ACCOUNTS_ERROR",
    "UNBIND_FAILED_ERROR",
    "AccountBinder",
    "BinderPhase",
    "BoardStore",
    "UnbindPhase",
    "WidgetUnbinder",
]
