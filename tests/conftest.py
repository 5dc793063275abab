"""
Shared fixtures: an in-memory stand-in for the FakeRESTApi service.

FakeRestService mimics the routes, status codes and validation behavior of
the real service closely enough for the whole scenario catalogue to run
offline. It plugs into APIClient in place of a requests.Session.
"""

import copy
import json as jsonlib
import re
from datetime import datetime
from urllib.parse import urlsplit

import pytest

from fakerest.client import APIClient
from fakerest.config import HarnessConfig
from fakerest.resources import AuthorsAPI, BooksAPI

INT32_MAX = 2 ** 31 - 1
JSON_CONTENT_TYPE = "application/json; charset=utf-8; v=1.0"

BOOK_DEFAULTS = {
    "id": 0,
    "title": None,
    "description": None,
    "pageCount": 0,
    "excerpt": None,
    "publishDate": "0001-01-01T00:00:00",
}
AUTHOR_DEFAULTS = {"id": 0, "idBook": 0, "firstName": None, "lastName": None}

BOOK_INT_FIELDS = ("id", "pageCount")
BOOK_TEXT_FIELDS = ("title", "description", "excerpt")
AUTHOR_INT_FIELDS = ("id", "idBook")
AUTHOR_TEXT_FIELDS = ("firstName", "lastName")


class FakeResponse:
    """The slice of requests.Response that APIClient reads"""

    def __init__(self, status_code, body=None, headers=None):
        self.status_code = status_code
        if body is None:
            self.text = ""
        else:
            self.text = jsonlib.dumps(body)
        self.content = self.text.encode("utf-8")
        if headers is None:
            headers = {"Content-Type": JSON_CONTENT_TYPE} if self.content else {}
        self.headers = headers

    def json(self):
        return jsonlib.loads(self.text)


def _parse_id(raw):
    """Route ids must be base-10 int32 values"""
    if re.fullmatch(r"-?\d+", raw or "") and abs(int(raw)) <= INT32_MAX:
        return int(raw)
    return None


def _is_int32(value):
    return isinstance(value, int) and not isinstance(value, bool) and abs(value) <= INT32_MAX


def _is_timestamp(value):
    if not isinstance(value, str):
        return False
    try:
        datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return False
    return True


def _bad_request():
    return FakeResponse(
        400, {"title": "One or more validation errors occurred.", "status": 400}
    )


def _not_found():
    return FakeResponse(404, {"title": "Not Found", "status": 404})


class FakeRestService:
    """In-memory Books/Authors service usable as APIClient's session"""

    def __init__(self, base_path="/api/v1"):
        self.base_path = base_path
        self.headers = {}
        self.calls = []
        self.fail_with = None
        self.books = {
            i: {
                "id": i,
                "title": f"Book {i}",
                "description": f"Description of book {i}",
                "pageCount": i * 100,
                "excerpt": f"Excerpt of book {i}",
                "publishDate": "2024-01-0{}T00:00:00+00:00".format(i),
            }
            for i in (1, 2, 3)
        }
        self.authors = {
            1: {"id": 1, "idBook": 1, "firstName": "First Name 1", "lastName": "Last Name 1"},
            2: {"id": 2, "idBook": 1, "firstName": "First Name 2", "lastName": "Last Name 2"},
            3: {"id": 3, "idBook": 2, "firstName": "First Name 3", "lastName": "Last Name 3"},
            4: {"id": 4, "idBook": 3, "firstName": "First Name 4", "lastName": "Last Name 4"},
        }

    def close(self):
        pass

    def request(self, method, url, json=None, headers=None, timeout=None, **kwargs):
        self.calls.append(
            {"method": method, "url": url, "json": json, "headers": headers, "timeout": timeout}
        )
        if self.fail_with is not None:
            raise self.fail_with

        path = urlsplit(url).path
        if not path.startswith(self.base_path):
            return FakeResponse(404)
        parts = path[len(self.base_path):].split("/")[1:]

        if parts and parts[0] == "Books":
            return self._route(method, parts[1:], json, self.books, BOOK_DEFAULTS, self._valid_book)
        if parts[:3] == ["Authors", "authors", "books"] and len(parts) == 4:
            return self._authors_by_book(method, parts[3])
        if parts and parts[0] == "Authors":
            return self._route(method, parts[1:], json, self.authors, AUTHOR_DEFAULTS, self._valid_author)
        return FakeResponse(404)

    def _route(self, method, rest, body, store, defaults, is_valid):
        if not rest:
            if method == "GET":
                return FakeResponse(200, list(store.values()))
            if method == "POST":
                if not is_valid(body):
                    return _bad_request()
                record = {**defaults, **body, "id": max(store, default=0) + 1}
                store[record["id"]] = record
                return FakeResponse(200, record)
            return FakeResponse(405)

        if len(rest) != 1:
            return FakeResponse(404)
        record_id = _parse_id(rest[0])
        if record_id is None:
            return _bad_request()

        if method == "GET":
            if record_id not in store:
                return _not_found()
            return FakeResponse(200, store[record_id])
        if method == "PUT":
            if not is_valid(body):
                return _bad_request()
            record = {**store.get(record_id, defaults), **body, "id": record_id}
            store[record_id] = record
            return FakeResponse(200, record)
        if method == "DELETE":
            store.pop(record_id, None)
            return FakeResponse(200)
        return FakeResponse(405)

    def _authors_by_book(self, method, raw_book_id):
        if method != "GET":
            return FakeResponse(405)
        book_id = _parse_id(raw_book_id)
        if book_id is None:
            return _bad_request()
        return FakeResponse(200, [a for a in self.authors.values() if a["idBook"] == book_id])

    @staticmethod
    def _valid_fields(body, int_fields, text_fields):
        if not isinstance(body, dict):
            return False
        for name in int_fields:
            if name in body and not _is_int32(body[name]):
                return False
        for name in text_fields:
            if name in body and body[name] is not None and not isinstance(body[name], str):
                return False
        return True

    def _valid_book(self, body):
        if not self._valid_fields(body, BOOK_INT_FIELDS, BOOK_TEXT_FIELDS):
            return False
        return "publishDate" not in body or _is_timestamp(body["publishDate"])

    def _valid_author(self, body):
        return self._valid_fields(body, AUTHOR_INT_FIELDS, AUTHOR_TEXT_FIELDS)

    def snapshot(self):
        return copy.deepcopy({"books": self.books, "authors": self.authors})


@pytest.fixture
def config():
    return HarnessConfig(base_url="https://fakerest.test", read_back_delay_ms=0)


@pytest.fixture
def service():
    return FakeRestService()


@pytest.fixture
def client(config, service):
    return APIClient(config, session=service)


@pytest.fixture
def books(client):
    return BooksAPI(client)


@pytest.fixture
def authors(client):
    return AuthorsAPI(client)
