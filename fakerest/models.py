# fakerest/models.py
"""
Data models for results and records exchanged with the service.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .schemas import AUTHOR_SCHEMA, BOOK_SCHEMA, FieldType, check_record


@dataclass
class APIResult:
    """Uniform outcome of a single HTTP request, whatever the status"""
    method: str
    url: str
    status: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: Any = None
    duration: int = 0  # milliseconds

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def summary(self) -> Dict[str, Any]:
        """Compact dict for logging and reporting"""
        return {
            "method": self.method,
            "url": self.url,
            "status": self.status,
            "duration_ms": self.duration,
        }


def _validated(record: Any, schema: Dict[str, FieldType]) -> Dict[str, Any]:
    problems = check_record(record, schema)
    if problems:
        raise problems[0]
    return record


@dataclass
class Book:
    """Book record as exposed by /Books"""
    title: Optional[str] = None
    description: Optional[str] = None
    page_count: Optional[int] = None
    excerpt: Optional[str] = None
    publish_date: Optional[str] = None
    id: Optional[int] = None

    schema = BOOK_SCHEMA

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "Book":
        """
        Build a Book from a JSON record.

        Every schema field must be present; nulls are accepted.

        Raises:
            ShapeMismatch: naming the first missing or mistyped field
        """
        record = _validated(record, cls.schema)
        return cls(
            id=record.get("id"),
            title=record.get("title"),
            description=record.get("description"),
            page_count=record.get("pageCount"),
            excerpt=record.get("excerpt"),
            publish_date=record.get("publishDate"),
        )

    def to_payload(self) -> Dict[str, Any]:
        """camelCase JSON body; id is left out until the server assigns one"""
        payload = {
            "title": self.title,
            "description": self.description,
            "pageCount": self.page_count,
            "excerpt": self.excerpt,
            "publishDate": self.publish_date,
        }
        if self.id is not None:
            payload["id"] = self.id
        return payload


@dataclass
class Author:
    """Author record as exposed by /Authors"""
    id_book: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    id: Optional[int] = None

    schema = AUTHOR_SCHEMA

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "Author":
        record = _validated(record, cls.schema)
        return cls(
            id=record.get("id"),
            id_book=record.get("idBook"),
            first_name=record.get("firstName"),
            last_name=record.get("lastName"),
        )

    def to_payload(self) -> Dict[str, Any]:
        payload = {
            "idBook": self.id_book,
            "firstName": self.first_name,
            "lastName": self.last_name,
        }
        if self.id is not None:
            payload["id"] = self.id
        return payload
