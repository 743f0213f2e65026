"""Domain errors raised by services and mapped to HTTP responses in app.main."""


class ServiceError(Exception):
    """Base class for resource service errors."""

    status_code = 500

    def __init__(self, message: str, errors: list[dict] | None = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class InvalidInputError(ServiceError):
    """Malformed or out-of-range input that passed schema validation."""

    status_code = 400


class NotFoundError(ServiceError):
    """No record matches the requested id or key."""

    status_code = 404


class ConflictError(ServiceError):
    """A unique constraint would be violated."""

    status_code = 409


class PayloadTooLargeError(ServiceError):
    """Uploaded file exceeds the configured size ceiling."""

    status_code = 413
