class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ValidationFailureError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class InvalidStatusError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class UnauthorizedError(CustomBaseError):
    def __init__(self, message: str = 'Unauthorized') -> None:
        super().__init__(message, 401)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class UploadFailureError(CustomBaseError):
    """Object storage rejected a write or URL mint. The message is diagnostic only."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 500)
