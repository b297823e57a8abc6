"""
Exception classes for the versioning module.
"""

from typing import Optional


class TagVersionError(Exception):
    """Base exception for all tag versioning errors."""

    exit_code = 1


class ConfigError(TagVersionError):
    """Raised when the configuration is inconsistent or invalid."""

    def __init__(self, reason: str, detail: str = ""):
        self.reason = reason
        self.detail = detail
        if detail:
            super().__init__(f"{reason}: {detail}")
        else:
            super().__init__(reason)


class TagSourceError(TagVersionError):
    """Raised when the tags could not be retrieved from the repository."""

    def __init__(self, message: str, exit_code: Optional[int] = None, stderr: str = ""):
        self.stderr = stderr
        # git reports failures with a non-zero status; anything else maps to 1
        self.exit_code = exit_code if exit_code else 1
        super().__init__(message)


class NoMatchError(TagVersionError):
    """Raised when no tag matched the compiled tag pattern."""

    def __init__(self, message: str = "Unable to find a matching tag", ref: Optional[str] = None):
        self.ref = ref
        if ref:
            super().__init__(f"{message} for '{ref}'")
        else:
            super().__init__(message)
