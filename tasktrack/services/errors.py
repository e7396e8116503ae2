"""Domain errors raised by the account and task services.

Each error carries the client-facing message and the HTTP status the API layer
responds with. Services raise them; they never build responses themselves.
"""


class ServiceError(Exception):
    """Base class for expected, client-reportable service failures."""

    status_code = 400

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ServiceError):
    """Missing or empty required input."""

    status_code = 400


class ConflictError(ServiceError):
    """Resource already exists (duplicate registration)."""

    status_code = 409


class NotFoundError(ServiceError):
    """
    Resource does not exist or is not visible to the caller.

    Task lookups use this for both causes so that callers cannot tell another
    user's task apart from a missing one.
    """

    status_code = 404


class UnauthorizedError(ServiceError):
    """Credentials did not verify."""

    status_code = 401
