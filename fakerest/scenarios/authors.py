# fakerest/scenarios/authors.py
"""
CRUD scenarios for /Authors, including the authors-by-book lookup.
"""

from ..config import LARGE_DATASET_LATENCY_BUDGET_MS
from ..errors import AssertionFailure
from ..validators import (
    expect_equal,
    expect_json_content_type,
    expect_list,
    expect_not_equal,
    expect_not_found,
    expect_response_time,
    expect_status,
)
from .registry import scenario

GROUP = "authors"
NON_EXISTENT_ID = 999999


@scenario(GROUP)
def retrieve_all_authors(ctx):
    """GET /Authors returns a JSON list of well-formed authors"""
    result = ctx.authors.list()
    expect_status(result, 200)
    expect_response_time(result)

    authors = expect_list(result)
    expect_json_content_type(result)

    if authors:
        ctx.authors.validate_structure(authors[0])
        ctx.authors.validate_types(authors[0])


@scenario(GROUP)
def large_author_dataset(ctx):
    result = ctx.authors.list()
    expect_status(result, 200)
    expect_response_time(result, LARGE_DATASET_LATENCY_BUDGET_MS)

    if not expect_list(result):
        raise AssertionFailure("Expected at least one author in the list")


@scenario(GROUP)
def retrieve_author_by_valid_id(ctx):
    authors = expect_list(ctx.authors.list())
    if not authors:
        return

    valid_id = authors[0]["id"]
    result = ctx.authors.get_by_id(valid_id)
    expect_status(result, 200)
    expect_response_time(result)

    ctx.authors.validate_structure(result.body)
    ctx.authors.validate_types(result.body)
    expect_equal(result.body["id"], valid_id, "id")


@scenario(GROUP)
def retrieve_non_existent_author(ctx):
    expect_not_found(ctx.authors.get_by_id(NON_EXISTENT_ID))


@scenario(GROUP)
def authors_for_book(ctx):
    """Every author listed for a book references that book"""
    authors = expect_list(ctx.authors.list())
    if not authors:
        return

    book_id = authors[0]["idBook"]
    result = ctx.authors.get_authors_by_book_id(book_id)
    expect_status(result, 200)
    expect_response_time(result)

    for author in expect_list(result):
        ctx.authors.validate_structure(author)
        expect_equal(author["idBook"], book_id, "idBook")


@scenario(GROUP)
def authors_for_non_existent_book(ctx):
    result = ctx.authors.get_authors_by_book_id(NON_EXISTENT_ID)
    expect_status(result, 200)
    expect_equal(len(expect_list(result)), 0, "author count")


@scenario(GROUP)
def authors_for_invalid_book_ids(ctx):
    for invalid_id in ("abc", "!@#", ""):
        result = ctx.authors.get_authors_by_book_id(invalid_id)
        expect_status(result, 200, 400, 404)


@scenario(GROUP)
def create_valid_author(ctx):
    new_author = ctx.authors_data["validAuthor"]

    result = ctx.create(ctx.authors, new_author)
    expect_status(result, 200)
    expect_response_time(result)

    expect_equal(result.body["firstName"], new_author["firstName"], "firstName")
    expect_equal(result.body["lastName"], new_author["lastName"], "lastName")
    expect_equal(result.body["idBook"], new_author["idBook"], "idBook")


@scenario(GROUP)
def create_author_with_long_names(ctx):
    long_name_author = ctx.authors_data["authorWithLongNames"]

    result = ctx.create(ctx.authors, long_name_author)
    expect_status(result, 200)

    expect_equal(result.body["firstName"], long_name_author["firstName"], "firstName")
    expect_equal(result.body["lastName"], long_name_author["lastName"], "lastName")


@scenario(GROUP)
def create_invalid_author(ctx):
    result = ctx.create(ctx.authors, ctx.authors_data["invalidAuthor"])
    expect_status(result, 200, 400, 422)


@scenario(GROUP)
def create_co_authors_for_same_book(ctx):
    """Two authors may reference the same book"""
    book_id = 1
    author1 = {
        **ctx.authors_data["validAuthor"],
        "idBook": book_id,
        "firstName": "Author1",
        "lastName": "CoAuthor",
    }
    author2 = {**author1, "firstName": "Author2"}

    response1 = ctx.create(ctx.authors, author1)
    expect_status(response1, 200)

    response2 = ctx.create(ctx.authors, author2)
    expect_status(response2, 200)

    expect_equal(response1.body["idBook"], response2.body["idBook"], "idBook")
    expect_not_equal(response1.body["firstName"], response2.body["firstName"], "firstName")


@scenario(GROUP)
def update_existing_author(ctx):
    create_result = ctx.create(ctx.authors, ctx.authors_data["validAuthor"])
    expect_status(create_result, 200)

    author_id = create_result.body["id"]
    updated_data = {**ctx.authors_data["authorToUpdate"], "id": author_id}

    result = ctx.authors.update(author_id, updated_data)
    expect_status(result, 200)
    expect_response_time(result)

    expect_equal(result.body["id"], author_id, "id")
    expect_equal(result.body["firstName"], updated_data["firstName"], "firstName")
    expect_equal(result.body["lastName"], updated_data["lastName"], "lastName")


@scenario(GROUP)
def partial_author_update(ctx):
    create_result = ctx.create(ctx.authors, ctx.authors_data["validAuthor"])
    expect_status(create_result, 200)
    created = create_result.body

    partial_update = {
        "firstName": "Updated First Name",
        "lastName": created["lastName"],
        "idBook": created["idBook"],
    }

    result = ctx.authors.update(created["id"], partial_update)
    expect_status(result, 200)

    expect_equal(result.body["firstName"], partial_update["firstName"], "firstName")
    expect_equal(result.body["lastName"], created["lastName"], "lastName")


@scenario(GROUP)
def update_author_with_invalid_data(ctx):
    create_result = ctx.create(ctx.authors, ctx.authors_data["validAuthor"])
    expect_status(create_result, 200)

    result = ctx.authors.update(
        create_result.body["id"], {"firstName": None, "lastName": "", "idBook": -1}
    )
    expect_status(result, 200, 400, 422)


@scenario(GROUP)
def delete_existing_author(ctx):
    create_result = ctx.create(ctx.authors, ctx.authors_data["validAuthor"])
    expect_status(create_result, 200)
    author_id = create_result.body["id"]

    result = ctx.delete(ctx.authors, author_id)
    expect_status(result, 200)
    expect_response_time(result)

    expect_not_found(ctx.authors.get_by_id(author_id))


@scenario(GROUP)
def delete_non_existent_author(ctx):
    expect_status(ctx.authors.delete(NON_EXISTENT_ID), 200, 404)


@scenario(GROUP)
def delete_author_with_invalid_id(ctx):
    expect_status(ctx.authors.delete("invalid-id"), 400, 404)
