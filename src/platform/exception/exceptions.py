class CustomBaseError(Exception):
    """Base class for business errors - logged without traceback by @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    """A business rule was violated; recoverable by the caller."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    """The request collides with state owned by someone else (a seat, a time slot)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)
