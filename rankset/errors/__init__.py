"""
Structured exception hierarchy for RankSet.

Errors are split between recoverable data quality problems in raw item
records, partial operations invoked on empty collections, and invalid
configuration.
"""

from .collection import (
    CollectionError,
    EmptyCollectionError,
)
from .data_quality import (
    DataQualityError,
    MalformedDataError,
    MissingDataError,
)
from .configuration import ConfigurationError

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    # Collection Errors
    "CollectionError",
    "EmptyCollectionError",
    # Configuration
    "ConfigurationError",
]
