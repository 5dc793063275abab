import pytest

from fakerest.errors import ShapeMismatch


def test_books_list(books, service):
    result = books.list()

    assert result.status == 200
    assert [b["id"] for b in result.body] == [1, 2, 3]
    assert service.calls[-1]["url"].endswith("/api/v1/Books")


def test_get_by_id_interpolates_id_verbatim(books, service):
    books.get_by_id("abc")
    books.get_by_id(1.5)

    assert service.calls[0]["url"].endswith("/Books/abc")
    assert service.calls[1]["url"].endswith("/Books/1.5")


def test_create_posts_record(books, service):
    result = books.create({"title": "New", "pageCount": 5})

    assert result.status == 200
    assert result.body["title"] == "New"
    assert service.calls[-1]["method"] == "POST"
    assert service.books[result.body["id"]]["title"] == "New"


def test_update_injects_id_into_body(books, service):
    result = books.update(2, {"title": "Renamed"})

    assert service.calls[-1]["method"] == "PUT"
    assert service.calls[-1]["url"].endswith("/Books/2")
    assert service.calls[-1]["json"] == {"title": "Renamed", "id": 2}
    assert result.body["id"] == 2
    assert result.body["title"] == "Renamed"


def test_update_does_not_mutate_caller_record(authors):
    record = {"firstName": "Grace"}

    authors.update(1, record)

    assert record == {"firstName": "Grace"}


def test_delete(authors, service):
    result = authors.delete(3)

    assert result.status == 200
    assert 3 not in service.authors
    assert service.calls[-1]["url"].endswith("/Authors/3")


def test_authors_by_book_id(authors, service):
    result = authors.get_authors_by_book_id(1)

    assert result.status == 200
    assert {a["id"] for a in result.body} == {1, 2}
    assert service.calls[-1]["url"].endswith("/Authors/authors/books/1")


def test_resource_validators_use_resource_schema(books, authors):
    books.validate_structure(books.get_by_id(1).body)
    books.validate_types(books.get_by_id(1).body)
    authors.validate_structure(authors.get_by_id(1).body)

    with pytest.raises(ShapeMismatch) as excinfo:
        books.validate_structure(authors.get_by_id(1).body)
    assert excinfo.value.field == "title"

    with pytest.raises(ShapeMismatch):
        authors.validate_types({"id": 1, "idBook": "1", "firstName": "a", "lastName": "b"})


def test_resource_names_and_endpoints(books, authors):
    assert books.resource == "Books"
    assert books.endpoint == "/Books"
    assert authors.resource == "Authors"
    assert authors.endpoint == "/Authors"
