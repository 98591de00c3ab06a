"""Exceptions shared across the ArchStats layers."""

from typing import Optional


class ArchStatsError(Exception):
    """Base exception for report generation errors."""

    pass


class ApiError(ArchStatsError):
    """Stats API returned an error, malformed JSON, or could not be reached."""

    def __init__(self, message: str, status: Optional[int] = None, body_snippet: str = ""):
        super().__init__(message)
        self.status = status
        self.body_snippet = body_snippet


class RequestTimeoutError(ArchStatsError):
    """Upstream request was aborted after its timeout."""

    pass


class InputError(ArchStatsError):
    """Caller supplied identifier failed validation."""

    pass


class NoDataError(ArchStatsError):
    """Upstream returned no data to render."""

    pass


class RenderError(ArchStatsError):
    """Unexpected failure while composing a report image."""

    pass


class AssetNotFoundError(ArchStatsError):
    """A required asset file is missing."""

    pass
