"""
Source failure classifications for fetch and decode errors.

A source failure means the named source could not be used at all; the
loader substitutes the source's fallback dataset.
"""

from typing import Optional, Dict, Any


class SourceFailureError(Exception):
    """Base class for failures to obtain a named source."""

    def __init__(self, message: str, source: Optional[str] = None,
                 location: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.source = source
        self.location = location
        self.context = context or {}
        self.recoverable = True


class SourceUnavailableError(SourceFailureError):
    """Network error, non-success status or missing local file."""

    def __init__(self, message: str, status_code: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.status_code = status_code


class SourceParseError(SourceFailureError):
    """Source was fetched but is not valid JSON."""
    pass
