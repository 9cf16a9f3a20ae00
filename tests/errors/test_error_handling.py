"""Tests for the error classification system."""

import pytest

from rankset.errors import (
    CollectionError,
    ConfigurationError,
    DataQualityError,
    EmptyCollectionError,
    MalformedDataError,
    MissingDataError,
)
from rankset.structures.item_sequence import ItemSequence
from rankset.structures.item_set import OrderedItemSet


class TestErrorClassification:
    """Test error hierarchy and attributes."""

    def test_data_quality_error_hierarchy(self):
        base_error = DataQualityError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}

        missing_error = MissingDataError("missing", field_name="key")
        assert isinstance(missing_error, DataQualityError)
        assert missing_error.field_name == "key"

        malformed_error = MalformedDataError("bad", raw_data="x", expected_format="int")
        assert isinstance(malformed_error, DataQualityError)
        assert malformed_error.raw_data == "x"

    def test_empty_collection_error(self):
        error = EmptyCollectionError("empty", operation="head", context={"size": 0})

        assert isinstance(error, CollectionError)
        assert isinstance(error, LookupError)
        assert error.recoverable is False
        assert error.context == {"size": 0}

    def test_configuration_error(self):
        error = ConfigurationError("invalid", errors=["e1"], source="rankset.yaml")

        assert error.errors == ["e1"]
        assert error.recoverable is False


class TestPartialOperations:
    """Only max_by_weight, head and tail fail, and only on empty collections."""

    @pytest.mark.parametrize("operation", [
        lambda: OrderedItemSet.empty().max_by_weight(),
        lambda: ItemSequence.empty().head,
        lambda: ItemSequence.empty().tail,
    ])
    def test_empty_collection_failures(self, operation):
        with pytest.raises(EmptyCollectionError):
            operation()

    def test_failure_leaves_callers_able_to_check_first(self, sample_set):
        ranked = sample_set.to_descending_by_weight()
        visited = []
        while not ranked.is_empty:
            visited.append(ranked.head.key)
            ranked = ranked.tail

        assert visited == ["k2", "k1", "k3"]
