"""
Domain errors shared by services and routers.

Each error carries the HTTP status it maps to and a client-safe message.
The handlers in core.api turn them into responses.
"""


class ServiceError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500
    default_message = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ServiceError):
    status_code = 400
    default_message = "Invalid request"


class Conflict(ServiceError):
    status_code = 400
    default_message = "Already exists"


class Unauthorized(ServiceError):
    status_code = 401
    default_message = "Unauthorized"


class NotFound(ServiceError):
    status_code = 404
    default_message = "Not found"


class Internal(ServiceError):
    status_code = 500
    default_message = "Server error"
