"""
Parsing of raw item records into Item values.

Callers that read items from external sources hand over plain mappings;
this module checks the three required fields and converts them.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from ..errors import MalformedDataError, MissingDataError
from .models import Item

REQUIRED_FIELDS = ("owner", "key", "weight")


def parse_item(record: Mapping[str, Any]) -> Item:
    """
    Build an Item from a raw mapping.

    Args:
        record: Mapping with ``owner``, ``key`` and ``weight`` entries

    Returns:
        Parsed Item

    Raises:
        MissingDataError: If a required field is absent or None
        MalformedDataError: If a field has the wrong type
    """
    if not isinstance(record, Mapping):
        raise MalformedDataError(
            "Item record must be a mapping",
            raw_data=repr(record),
            expected_format="mapping",
        )

    for field_name in REQUIRED_FIELDS:
        if record.get(field_name) is None:
            raise MissingDataError(
                f"Item record is missing '{field_name}'",
                field_name=field_name,
                context={"record": dict(record)},
            )

    owner = record["owner"]
    key = record["key"]
    for field_name, value in (("owner", owner), ("key", key)):
        if not isinstance(value, str):
            raise MalformedDataError(
                f"Item field '{field_name}' must be a string",
                raw_data=repr(value),
                expected_format="str",
            )

    return Item(owner=owner, key=key, weight=_parse_weight(record["weight"]))


def parse_items(records: Iterable[Mapping[str, Any]]) -> list[Item]:
    """Parse every record, failing on the first malformed one."""
    return [parse_item(record) for record in records]


def _parse_weight(value: Any) -> int:
    # bool is an int subclass but never a meaningful weight
    if isinstance(value, bool):
        raise MalformedDataError(
            "Item weight must be an integer",
            raw_data=repr(value),
            expected_format="int",
        )
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as e:
            raise MalformedDataError(
                "Item weight must be an integer",
                raw_data=value,
                expected_format="int",
            ) from e
    raise MalformedDataError(
        "Item weight must be an integer",
        raw_data=repr(value),
        expected_format="int",
    )
