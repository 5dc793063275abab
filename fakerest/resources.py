# fakerest/resources.py
"""
Per-resource helpers binding endpoint paths to request methods.
"""

from typing import Any, Dict

from .client import APIClient
from .models import APIResult
from .schemas import AUTHOR_SCHEMA, BOOK_SCHEMA, FieldType
from .validators import validate_structure, validate_types


class ResourceAPI:
    """Path template + method binding for one resource kind"""

    def __init__(self, client: APIClient, resource: str, schema: Dict[str, FieldType]):
        self.client = client
        self.resource = resource
        self.schema = schema
        self.endpoint = f"/{resource}"

    def list(self) -> APIResult:
        return self.client.request("GET", self.endpoint)

    def get_by_id(self, record_id: Any) -> APIResult:
        return self.client.request("GET", f"{self.endpoint}/{record_id}")

    def create(self, record: Dict[str, Any]) -> APIResult:
        return self.client.request("POST", self.endpoint, record)

    def update(self, record_id: Any, record: Dict[str, Any]) -> APIResult:
        return self.client.request(
            "PUT", f"{self.endpoint}/{record_id}", {**record, "id": record_id}
        )

    def delete(self, record_id: Any) -> APIResult:
        return self.client.request("DELETE", f"{self.endpoint}/{record_id}")

    def validate_structure(self, record: Any) -> None:
        validate_structure(record, self.schema)

    def validate_types(self, record: Any) -> None:
        validate_types(record, self.schema)


class BooksAPI(ResourceAPI):
    """Helper for /Books"""

    def __init__(self, client: APIClient):
        super().__init__(client, "Books", BOOK_SCHEMA)


class AuthorsAPI(ResourceAPI):
    """Helper for /Authors"""

    def __init__(self, client: APIClient):
        super().__init__(client, "Authors", AUTHOR_SCHEMA)

    def get_authors_by_book_id(self, book_id: Any) -> APIResult:
        return self.client.request("GET", f"{self.endpoint}/authors/books/{book_id}")
