from typing import Any


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    kind: str = 'error'
    retryable: bool = False

    def __init__(
        self, message: str, status_code: int, *, context: dict[str, Any] | None = None
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.context: dict[str, Any] = context or {}
        super().__init__(message)


class DomainError(CustomBaseError):
    kind = 'domain_error'

    def __init__(
        self, message: str, status_code: int = 400, *, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(message, status_code, context=context)


class InvalidTransitionError(DomainError):
    """Operation attempted from a status that does not allow it."""

    kind = 'invalid_transition'

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message, 400, context=context)


class AlreadyCheckedInError(DomainError):
    kind = 'already_checked_in'

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message, 400, context=context)


class PreconditionBatchMismatchError(DomainError):
    """Bulk operation aborted before any write."""

    kind = 'precondition_batch_mismatch'

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message, 409, context=context)


class InputValidationError(DomainError):
    kind = 'validation_error'

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message, 422, context=context)


class ConstraintViolationError(CustomBaseError):
    """Storage-level uniqueness / foreign-key failure. The caller may retry the whole operation."""

    kind = 'constraint_violation'
    retryable = True

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message, 409, context=context)


class ForbiddenError(CustomBaseError):
    kind = 'forbidden'

    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    kind = 'not_found'

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message, 404, context=context)


class AuthenticationError(CustomBaseError):
    kind = 'authentication_error'

    def __init__(self, message: str) -> None:
        super().__init__(message, 401)
