"""
Domain errors raised by the service layer.

The API layer turns any ``AirlineError`` into the error envelope with the
error's ``status_code``; see ``airline.main``.
"""


class AirlineError(Exception):
    """Base class for all errors the API reports to clients."""

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, explanation: str | list[str] | None = None):
        self.message = message
        self.explanation = explanation if explanation is not None else message
        super().__init__(message)


class NotFoundError(AirlineError):
    status_code = 404
    code = "NOT_FOUND"


class BadRequestError(AirlineError):
    status_code = 400
    code = "BAD_REQUEST"


class ConflictError(AirlineError):
    """Raised when a write violates a unique or foreign key constraint."""

    status_code = 409
    code = "CONFLICT"
