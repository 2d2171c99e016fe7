"""Error types raised by the moodboard client."""


class MoodboardError(Exception):
    """Base class for all moodboard errors."""


class ValidationError(MoodboardError):
    """Input rejected before any request was sent."""


class BackendUnavailable(MoodboardError):
    """The backend could not be reached at all."""

    def __init__(self, api_base: str) -> None:
        super().__init__(f"Cannot reach the backend at {api_base}. Check that the server is running.")
        self.api_base = api_base


class ApiError(MoodboardError):
    """The backend answered with a non-success status."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message


class RequestFailed(MoodboardError):
    """The request could not be sent, e.g. a malformed backend address."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Request to {url} failed: {reason}")
        self.url = url
        self.reason = reason
