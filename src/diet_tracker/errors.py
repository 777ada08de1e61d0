"""Error taxonomy surfaced at the HTTP boundary."""


class DietTrackerError(Exception):
    """Base error carrying an HTTP status and a user-facing message."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(DietTrackerError):
    """Malformed or missing required input."""

    status_code = 400


class NotFoundError(DietTrackerError):
    """Referenced entity does not exist."""

    status_code = 404


class UpstreamError(DietTrackerError):
    """The USDA nutrition API failed or answered with a non-success status."""

    status_code = 500

    def __init__(self, message: str, upstream_status: int | None = None) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status


class InternalError(DietTrackerError):
    """Anything else; the message never carries internal detail."""

    status_code = 500

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message)
