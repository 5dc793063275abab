# fakerest/schemas.py
"""
Field schemas for the two record kinds exposed by the service,
and the checks that compare a raw JSON record against them.
"""

from enum import Enum
from typing import Any, Dict, Iterable, List

from .errors import ShapeMismatch

RECORD_FIELD = "<record>"


class FieldType(Enum):
    INTEGER = "integer"
    TEXT = "text"
    TIMESTAMP = "timestamp"


BOOK_SCHEMA: Dict[str, FieldType] = {
    "id": FieldType.INTEGER,
    "title": FieldType.TEXT,
    "description": FieldType.TEXT,
    "pageCount": FieldType.INTEGER,
    "excerpt": FieldType.TEXT,
    "publishDate": FieldType.TIMESTAMP,
}

AUTHOR_SCHEMA: Dict[str, FieldType] = {
    "id": FieldType.INTEGER,
    "idBook": FieldType.INTEGER,
    "firstName": FieldType.TEXT,
    "lastName": FieldType.TEXT,
}

BOOK_FIELDS = list(BOOK_SCHEMA)
AUTHOR_FIELDS = list(AUTHOR_SCHEMA)


def _matches_type(value: Any, field_type: FieldType) -> bool:
    if field_type == FieldType.INTEGER:
        # bool is an int subclass but never a valid JSON integer here
        return isinstance(value, int) and not isinstance(value, bool)
    # TEXT and TIMESTAMP both travel as JSON strings
    return isinstance(value, str)


def _not_an_object(record: Any) -> ShapeMismatch:
    return ShapeMismatch(RECORD_FIELD, f"expected an object, got {type(record).__name__}", record)


def check_structure(record: Any, expected_fields: Iterable[str]) -> List[ShapeMismatch]:
    """Report every expected field absent from the record"""
    if not isinstance(record, dict):
        return [_not_an_object(record)]

    return [
        ShapeMismatch(name, "missing")
        for name in expected_fields
        if name not in record
    ]


def check_types(
    record: Any, schema: Dict[str, FieldType], allow_null: bool = False
) -> List[ShapeMismatch]:
    """Report every present field whose runtime type does not match the schema"""
    if not isinstance(record, dict):
        return [_not_an_object(record)]

    problems = []
    for name, field_type in schema.items():
        if name not in record:
            continue
        value = record[name]
        if value is None:
            if not allow_null:
                problems.append(ShapeMismatch(name, f"expected {field_type.value}, got null"))
            continue
        if not _matches_type(value, field_type):
            problems.append(
                ShapeMismatch(
                    name,
                    f"expected {field_type.value}, got {type(value).__name__}",
                    value,
                )
            )
    return problems


def check_record(record: Any, schema: Dict[str, FieldType]) -> List[ShapeMismatch]:
    """Structure first, then types with nulls tolerated"""
    return check_structure(record, schema) or check_types(record, schema, allow_null=True)
