"""
Errors raised by partial operations on the persistent collections.

Only a handful of operations are partial: taking the maximum of a set and
taking the head or tail of a sequence. Each fails on the empty variant.
"""

from typing import Any, Dict, Optional


class CollectionError(Exception):
    """Base class for failures of collection operations."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class EmptyCollectionError(CollectionError, LookupError):
    """A partial operation was invoked on an empty set or sequence."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 collection: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.collection = collection
