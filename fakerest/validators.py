# fakerest/validators.py
"""
Shape validation and assertion helpers for API results.

The check_* predicates (from schemas) return every problem found;
the validate_* and expect_* functions raise the first one.
"""

from typing import Any, Dict, Iterable, Type, TypeVar

from .config import DEFAULT_LATENCY_BUDGET_MS
from .errors import AssertionFailure, ShapeMismatch, UnexpectedStatus
from .models import APIResult, Author, Book
from .schemas import RECORD_FIELD, FieldType, check_structure, check_types

Record = TypeVar("Record", Book, Author)


def validate_structure(record: Any, expected_fields: Iterable[str]) -> None:
    problems = check_structure(record, expected_fields)
    if problems:
        raise problems[0]


def validate_types(record: Any, schema: Dict[str, FieldType], allow_null: bool = False) -> None:
    problems = check_types(record, schema, allow_null=allow_null)
    if problems:
        raise problems[0]


def parse_record(record: Any, record_type: Type[Record]) -> Record:
    """
    Validate a raw JSON record against its kind's schema and build the model.

    Nulls are tolerated since the service guarantees no field is non-null.

    Raises:
        ShapeMismatch: naming the first missing or mistyped field
    """
    return record_type.from_dict(record)


def validate_response_structure(result: APIResult, expected_fields: Iterable[str]) -> None:
    """Validate the object body, or the first element of a list body"""
    body = result.body
    if isinstance(body, list):
        if body:
            validate_structure(body[0], expected_fields)
    else:
        validate_structure(body, expected_fields)


def is_empty_body(body: Any) -> bool:
    """True for null, empty string, empty object or empty list bodies"""
    if body is None or body == "":
        return True
    if isinstance(body, (dict, list)):
        return len(body) == 0
    return False


def expect_status(result: APIResult, *accepted: int) -> None:
    if result.status not in accepted:
        raise UnexpectedStatus(accepted, result.status, result.url)


def expect_response_time(result: APIResult, max_ms: int = DEFAULT_LATENCY_BUDGET_MS) -> None:
    if result.duration >= max_ms:
        raise AssertionFailure(
            f"{result.method} {result.url} took {result.duration}ms, budget is {max_ms}ms"
        )


def expect_equal(actual: Any, expected: Any, label: str = "value") -> None:
    if actual != expected:
        raise AssertionFailure(f"{label}: expected {expected!r}, got {actual!r}")


def expect_not_equal(actual: Any, unexpected: Any, label: str = "value") -> None:
    if actual == unexpected:
        raise AssertionFailure(f"{label}: expected a value other than {unexpected!r}")


def expect_json_content_type(result: APIResult) -> None:
    content_type = result.headers.get("content-type", "")
    if "application/json" not in content_type.lower():
        raise AssertionFailure(f"Expected JSON content type, got {content_type!r}")


def expect_list(result: APIResult) -> list:
    if not isinstance(result.body, list):
        raise ShapeMismatch(RECORD_FIELD, f"expected a list, got {type(result.body).__name__}", result.body)
    return result.body


def expect_not_found(result: APIResult) -> None:
    """A missing record reads back as 404, or as 200 with an empty body"""
    expect_status(result, 200, 404)
    if result.status == 200 and not is_empty_body(result.body):
        raise AssertionFailure(
            f"Expected no record at {result.url}, got populated body {result.body!r}"
        )
