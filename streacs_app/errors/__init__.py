"""
Error classification system for source loading and data handling.

This module provides a structured exception hierarchy for the failures
encountered while fetching and parsing the dashboard's data sources. All of
them are handled at the loader boundary; none reach query callers.
"""

from .data_quality import (
    DataQualityError,
    MissingDataError,
    MalformedDataError,
)
from .source_failures import (
    SourceFailureError,
    SourceUnavailableError,
    SourceParseError,
)
from .recovery import (
    GracefulDegradationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    # Source Failures
    "SourceFailureError",
    "SourceUnavailableError",
    "SourceParseError",
    # Recovery Categories
    "GracefulDegradationError",
]
