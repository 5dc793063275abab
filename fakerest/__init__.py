"""
End-to-end API test harness for the FakeRESTApi Books and Authors resources.

Primary interfaces:
- APIClient: single-request HTTP client returning uniform APIResult objects
- BooksAPI / AuthorsAPI: per-resource path and method bindings
- ScenarioRunner: runs the registered scenario catalogue
"""

from .config import HarnessConfig
from .errors import (
    AssertionFailure,
    HarnessError,
    ScenarioFailure,
    ShapeMismatch,
    TransportError,
    UnexpectedStatus,
)
from .models import APIResult, Author, Book
from .schemas import AUTHOR_SCHEMA, BOOK_SCHEMA, FieldType
from .client import APIClient
from .resources import AuthorsAPI, BooksAPI, ResourceAPI
from .validators import check_structure, check_types, parse_record, validate_structure, validate_types
from .payloads import generate_author_data, generate_book_data, load_fixture
from .runner import Outcome, ScenarioResult, ScenarioRunner, load_and_display_results

__all__ = [
    "HarnessConfig",
    "AssertionFailure",
    "HarnessError",
    "ScenarioFailure",
    "ShapeMismatch",
    "TransportError",
    "UnexpectedStatus",
    "APIResult",
    "Author",
    "Book",
    "AUTHOR_SCHEMA",
    "BOOK_SCHEMA",
    "FieldType",
    "APIClient",
    "AuthorsAPI",
    "BooksAPI",
    "ResourceAPI",
    "check_structure",
    "check_types",
    "parse_record",
    "validate_structure",
    "validate_types",
    "generate_author_data",
    "generate_book_data",
    "load_fixture",
    "Outcome",
    "ScenarioResult",
    "ScenarioRunner",
    "load_and_display_results",
]
