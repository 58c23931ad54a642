"""Widget board domain exceptions.

Four families matter to callers:

- load failures (``BoardLoadError``) put the whole board view into its
  error state until the user retries;
- rejected mutations (``MutationRejectedError``) leave the board as it was
  and are shown next to the control that triggered them;
- validation failures are raised before any request is sent;
- cancellation is plain ``asyncio.CancelledError`` and is never reported.
"""

from __future__ import annotations

from typing import Any

from cashboard.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)

# =============================================================================
# Remote store failures
# =============================================================================


class BoardLoadError(DomainException):
    """Raised when the persisted board cannot be fetched."""

    def __init__(self, message: str = "Could not load widget board.") -> None:
        super().__init__(message=message, code=ErrorCode.BOARD_LOAD_FAILED)


class MutationRejectedError(DomainException):
    """Raised when the remote store refuses a board mutation."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        merged = dict(details or {})
        if operation:
            merged["operation"] = operation
        super().__init__(
            message=message,
            code=ErrorCode.MUTATION_REJECTED,
            details=merged,
        )
        self.operation = operation


# =============================================================================
# Lookups
# =============================================================================


class RowNotFoundError(EntityNotFoundError):
    """Raised when no row with the given id is on the board."""

    def __init__(self, row_id: int | None) -> None:
        super().__init__(
            message=f"Row not found: {row_id}",
            code=ErrorCode.ROW_NOT_FOUND,
            details={"row_id": row_id},
        )
        self.row_id = row_id


class WidgetNotFoundError(EntityNotFoundError):
    """Raised when no widget with the given id is on the board."""

    def __init__(self, widget_id: int | None) -> None:
        super().__init__(
            message=f"Widget not found: {widget_id}",
            code=ErrorCode.WIDGET_NOT_FOUND,
            details={"widget_id": widget_id},
        )
        self.widget_id = widget_id


# =============================================================================
# Client-side preconditions
# =============================================================================


class InvalidRowTypeError(ValidationError):
    """Raised when a row type tag is not one of the known shapes."""

    def __init__(self, row_type: object) -> None:
        super().__init__(
            message=f"Unknown row type: {row_type!r}",
            code=ErrorCode.INVALID_ROW_TYPE,
            details={"row_type": str(row_type)},
        )


class RowHasBoundWidgetsError(ValidationError):
    """Raised when deleting a row that still carries a bound widget."""

    def __init__(self, row_id: int | None, widget_ids: list[int | None]) -> None:
        super().__init__(
            message="Remove every widget from this row before deleting it.",
            code=ErrorCode.ROW_HAS_BOUND_WIDGETS,
            details={"row_id": row_id, "bound_widget_ids": widget_ids},
        )
        self.row_id = row_id


class IncompatibleAccountError(ValidationError):
    """Raised when an account type cannot be shown by a widget kind."""

    def __init__(self, kind: str, account_type: str) -> None:
        super().__init__(
            message=f"{kind} cannot display {account_type} accounts.",
            code=ErrorCode.INCOMPATIBLE_ACCOUNT,
            details={"kind": kind, "account_type": account_type},
        )


class NoAccountSelectedError(ValidationError):
    """Raised when submitting a binding without choosing an account."""

    def __init__(self, message: str = "Please select an account to add.") -> None:
        super().__init__(message=message, code=ErrorCode.NO_ACCOUNT_SELECTED)


class WidgetNotBoundError(ValidationError):
    """Raised when unbinding a widget that is still a placeholder."""

    def __init__(self, widget_id: int | None) -> None:
        super().__init__(
            message="This widget has nothing to remove.",
            code=ErrorCode.WIDGET_NOT_BOUND,
            details={"widget_id": widget_id},
        )


# =============================================================================
# State machine and concurrency guards
# =============================================================================


class BoardNotReadyError(BusinessRuleViolation):
    """Raised when an operation is not legal in the board's current status."""

    def __init__(self, status: str, action: str) -> None:
        super().__init__(
            message=f"Cannot {action} while the board is {status}",
            code=ErrorCode.BOARD_NOT_READY,
            details={"status": status, "action": action},
        )


class OperationInProgressError(ConflictError):
    """Raised when an entity already has an outstanding request."""

    def __init__(self, entity: str, entity_id: int | None, operation: str) -> None:
        super().__init__(
            message=f"Another request for {entity} {entity_id} is still running",
            code=ErrorCode.OPERATION_IN_PROGRESS,
            details={
                "entity": entity,
                "entity_id": entity_id,
                "operation": operation,
            },
        )
