"""
Data quality error classifications for raw item records.

These exceptions describe problems found while turning caller supplied
mappings into Item values.
"""

from typing import Any, Dict, Optional


class DataQualityError(Exception):
    """Base class for data quality issues that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MissingDataError(DataQualityError):
    """A required item field is completely missing."""

    def __init__(self, message: str, field_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field_name = field_name


class MalformedDataError(DataQualityError):
    """Item field exists but has the wrong type or format."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format
