"""Domain errors shared by repositories, services and the API layer.

Every error carries the HTTP status the API boundary answers with, so route
handlers never translate exceptions themselves.
"""


class JobBoardError(Exception):
    """Base class for recoverable domain errors."""

    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(JobBoardError):
    """Malformed or missing input."""

    status_code = 400
    default_message = "Invalid data"


InvalidArgument = ValidationError


class Unauthenticated(JobBoardError):
    status_code = 401
    default_message = "Unauthorized"


class AuthorizationError(JobBoardError):
    """Actor lacks rights over an existing entity."""

    status_code = 403
    default_message = "Forbidden"


class NotFoundError(JobBoardError):
    status_code = 404
    default_message = "Not found"


class ConflictError(JobBoardError):
    """Uniqueness violation, e.g. a duplicate username or application."""

    status_code = 409
    default_message = "Conflict"


class PreconditionFailed(JobBoardError):
    """Operation needs a prerequisite record (usually a profile) that does not exist yet."""

    status_code = 400
    default_message = "Precondition failed"
