class DomainError(Exception):
    """Base exception for payroll domain failures."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Raised when input data is malformed, missing or out of range."""

    status_code = 400

    def __init__(self, message: str, errors: list | None = None):
        super().__init__(message)
        self.errors = errors or []


class InvalidArgumentError(DomainError):
    """Raised when a required call parameter is absent."""

    status_code = 400


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

    status_code = 404


class PersistenceError(DomainError):
    """Raised when the storage layer fails (connection loss, constraint violation)."""

    status_code = 500
