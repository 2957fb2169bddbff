from typing import Any, Dict, Optional

from fastapi import status


class AppError(Exception):
    """Base class for every error the ledger core raises."""

    code = "APP_ERROR"
    message = "Unexpected error."
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class ValidationError(AppError):
    code = "VALIDATION_ERROR"
    message = "Validation failed."
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: Optional[str] = None, field: Optional[str] = None):
        details = {"field": field} if field else None
        super().__init__(message, details)


class NotFoundError(AppError):
    code = "NOT_FOUND"
    message = "Resource not found."
    status_code = status.HTTP_404_NOT_FOUND


class UserNotFound(NotFoundError):
    code = "USER_NOT_FOUND"
    message = "User not found."


class InvestmentNotFound(NotFoundError):
    code = "INVESTMENT_NOT_FOUND"
    message = "Investment not found."


class CategoryNotFound(NotFoundError):
    code = "CATEGORY_NOT_FOUND"
    message = "Category not found."


class TransactionNotFound(NotFoundError):
    code = "TRANSACTION_NOT_FOUND"
    message = "Transaction not found."


class GoalNotFound(NotFoundError):
    code = "GOAL_NOT_FOUND"
    message = "Goal not found."


NOT_FOUND_BY_RESOURCE = {
    "user": UserNotFound,
    "investment": InvestmentNotFound,
    "category": CategoryNotFound,
    "transaction": TransactionNotFound,
    "goal": GoalNotFound,
}


class ResourceNotOwned(AppError):
    """The entity exists but belongs to another user.

    Rendered to clients as the not-found error of the same resource.
    """

    code = "RESOURCE_NOT_OWNED"
    message = "Resource does not belong to the user."
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, resource: str, resource_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(details={"resource": resource})

    def as_not_found(self) -> NotFoundError:
        return NOT_FOUND_BY_RESOURCE.get(self.resource, NotFoundError)()


class ConflictError(AppError):
    code = "CONFLICT"
    message = "Resource already exists."
    status_code = status.HTTP_409_CONFLICT


class DatabaseError(AppError):
    """Storage failure. The cause is kept for logs, never sent to clients."""

    code = "DATABASE_ERROR"
    message = "Database operation failed."
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__()
