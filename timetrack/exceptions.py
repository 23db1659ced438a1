"""Error taxonomy shared by the store, the services and the routers."""


class TimeTrackingError(Exception):
    """Base class for expected, client-facing failures."""

    status_code = 500


class ValidationError(TimeTrackingError, ValueError):
    """Missing or malformed input, or a negative duration."""

    status_code = 400


class ConflictError(TimeTrackingError):
    """The user already has an active timer."""

    status_code = 409


class NotFoundError(TimeTrackingError, LookupError):
    """Unknown timer or time entry."""

    status_code = 404
