"""Exceptions raised while building or delivering a notification."""

from typing import Optional


class NotifyError(Exception):
    """Base class for every failure that aborts a notification."""


class InvalidInputError(NotifyError, ValueError):
    """Build metadata cannot be formatted (e.g. a truncated commit hash)."""


class RenderError(NotifyError):
    """A user-supplied template failed to expand."""


class AttachmentReadError(NotifyError, OSError):
    """The attachment file could not be read."""


class DispatchError(NotifyError):
    """The webhook call failed or returned a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
