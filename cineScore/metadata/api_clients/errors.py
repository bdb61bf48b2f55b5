"""Exceptions raised by the TMDb / OMDb wrappers."""


class ApiError(Exception):
    """Transport failure, non-2xx status or unreadable payload."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class RateLimitReached(ApiError):
    """HTTP 429 – caller should back off."""


class RatingsUnavailable(ApiError):
    """OMDb has no record (or no ratings) for the requested IMDb id."""
