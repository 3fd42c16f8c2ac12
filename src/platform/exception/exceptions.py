from enum import StrEnum


class ErrorType(StrEnum):
    VALIDATION = 'validation'
    CONFLICT = 'conflict'
    AUTHENTICATION = 'authentication'
    AUTHORIZATION = 'authorization'
    NOT_FOUND = 'not_found'
    SERVER = 'server'


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    error_type: ErrorType = ErrorType.SERVER

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    error_type = ErrorType.VALIDATION

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ConflictError(CustomBaseError):
    error_type = ErrorType.CONFLICT

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class AuthenticationError(CustomBaseError):
    error_type = ErrorType.AUTHENTICATION

    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class ForbiddenError(CustomBaseError):
    error_type = ErrorType.AUTHORIZATION

    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    error_type = ErrorType.NOT_FOUND

    def __init__(self, message: str) -> None:
        super().__init__(message, 404)
