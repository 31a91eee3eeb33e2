"""Error taxonomy for the dashboard backend.

Request-level errors carry the HTTP status the dispatcher answers with.
MalformedSnapshotError never leaves the snapshot loader.
"""


class DashboardError(Exception):
    """Base class for all expected dashboard errors."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingParameterError(DashboardError):
    status_code = 400


class InvalidDateError(DashboardError):
    status_code = 400

    def __init__(self, value: str, reason: str | None = None):
        message = f"Invalid date: {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.value = value


class MalformedSnapshotError(DashboardError):
    """A snapshot file exists but its contents cannot be used."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Malformed snapshot {path}: {reason}")
        self.path = path
        self.reason = reason
