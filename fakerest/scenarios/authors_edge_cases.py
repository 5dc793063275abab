# fakerest/scenarios/authors_edge_cases.py
"""
Edge-case and error-handling scenarios for /Authors.
"""

from ..config import LARGE_DATASET_LATENCY_BUDGET_MS
from ..errors import AssertionFailure
from ..payloads import generate_author_data
from ..validators import expect_equal, expect_list, expect_response_time, expect_status, is_empty_body
from .registry import scenario

GROUP = "authors-edge"
ACCEPT_OR_REJECT = (200, 400, 422)
MAX_SAFE_INTEGER = 2 ** 53 - 1


def _author(**overrides):
    data = {"idBook": 1, "firstName": "Test", "lastName": "Author"}
    data.update(overrides)
    return data


# Data validation

@scenario(GROUP)
def extremely_long_author_names(ctx):
    long_name = "A" * 1000
    result = ctx.create(ctx.authors, _author(firstName=long_name, lastName=long_name))
    expect_status(result, *ACCEPT_OR_REJECT)

    if result.status == 200:
        expect_equal(result.body["firstName"], long_name, "firstName")


@scenario(GROUP)
def empty_author_values(ctx):
    result = ctx.create(ctx.authors, _author(idBook=0, firstName="", lastName=""))
    expect_status(result, *ACCEPT_OR_REJECT)


@scenario(GROUP)
def null_author_values(ctx):
    result = ctx.create(ctx.authors, _author(idBook=None, firstName=None, lastName=None))
    expect_status(result, *ACCEPT_OR_REJECT)


@scenario(GROUP)
def negative_author_book_id(ctx):
    expect_status(ctx.create(ctx.authors, _author(idBook=-100)), *ACCEPT_OR_REJECT)


@scenario(GROUP)
def zero_author_book_id(ctx):
    expect_status(ctx.create(ctx.authors, _author(idBook=0)), *ACCEPT_OR_REJECT)


@scenario(GROUP)
def very_large_author_book_id(ctx):
    expect_status(ctx.create(ctx.authors, _author(idBook=999999999)), *ACCEPT_OR_REJECT)


# ID handling

@scenario(GROUP)
def zero_author_id(ctx):
    expect_status(ctx.authors.get_by_id(0), 200, 400, 404)


@scenario(GROUP)
def decimal_author_id(ctx):
    expect_status(ctx.authors.get_by_id("1.5"), 200, 400, 404)


@scenario(GROUP)
def string_author_id(ctx):
    expect_status(ctx.authors.get_by_id("abc"), 200, 400, 404)


@scenario(GROUP)
def very_large_book_id_for_authors(ctx):
    expect_status(ctx.authors.get_authors_by_book_id(999999999), 200, 404)


@scenario(GROUP)
def zero_book_id_for_authors(ctx):
    expect_status(ctx.authors.get_authors_by_book_id(0), 200, 400, 404)


# Special characters

@scenario(GROUP)
def unicode_author_names(ctx):
    unicode_author = _author(firstName="José María 🚀", lastName="García-López 📚")
    result = ctx.create(ctx.authors, unicode_author)
    expect_status(result, *ACCEPT_OR_REJECT)

    if result.status == 200:
        expect_equal(result.body["firstName"], unicode_author["firstName"], "firstName")


@scenario(GROUP)
def sql_injection_author(ctx):
    result = ctx.create(
        ctx.authors, _author(firstName="'; DROP TABLE Authors; --", lastName="1' OR '1'='1")
    )
    expect_status(result, *ACCEPT_OR_REJECT)


@scenario(GROUP)
def xss_author(ctx):
    result = ctx.create(
        ctx.authors,
        _author(
            firstName='<script>alert("XSS")</script>',
            lastName='<img src=x onerror=alert("XSS")>',
        ),
    )
    expect_status(result, *ACCEPT_OR_REJECT)


@scenario(GROUP)
def special_characters_in_author_names(ctx):
    special_author = _author(firstName="Jean-Pierre", lastName="O'Connor-Smith")
    result = ctx.create(ctx.authors, special_author)
    expect_status(result, *ACCEPT_OR_REJECT)

    if result.status == 200:
        expect_equal(result.body["firstName"], special_author["firstName"], "firstName")


# Performance and load

@scenario(GROUP)
def rapid_sequential_author_requests(ctx):
    results = [ctx.authors.list() for _ in range(10)]

    for result in results:
        expect_status(result, 200, 429)
    served = [r for r in results if r.status == 200]
    if not served:
        raise AssertionFailure("every rapid request was rate limited")


@scenario(GROUP)
def concurrent_author_creates(ctx):
    for i in range(5):
        result = ctx.create(
            ctx.authors, generate_author_data(firstName=f"Concurrent Author {i}", lastName=f"Lastname {i}")
        )
        expect_status(result, 200, 400, 422, 429)


@scenario(GROUP)
def large_author_dataset_query(ctx):
    result = ctx.authors.list()
    expect_status(result, 200, 400)

    if result.status == 200:
        expect_response_time(result, LARGE_DATASET_LATENCY_BUDGET_MS)
        expect_list(result)


# Data consistency

@scenario(GROUP)
def author_integrity_during_updates(ctx):
    create_result = ctx.create(
        ctx.authors, _author(firstName="Original First", lastName="Original Last")
    )
    if create_result.status != 200:
        return

    author_id = create_result.body["id"]
    updated_author = {"idBook": 2, "firstName": "Updated First", "lastName": "Updated Last"}

    update_result = ctx.authors.update(author_id, updated_author)
    expect_status(update_result, *ACCEPT_OR_REJECT)
    if update_result.status != 200:
        return

    read_result = ctx.read_back(ctx.authors, author_id)
    expect_status(read_result, 200, 404)
    if read_result.status == 200 and not is_empty_body(read_result.body):
        if not isinstance(read_result.body, dict):
            raise AssertionFailure(f"Expected an author object, got {read_result.body!r}")
        expect_equal(read_result.body.get("firstName"), updated_author["firstName"], "firstName")


@scenario(GROUP)
def first_name_only_author_update(ctx):
    create_result = ctx.create(
        ctx.authors, _author(firstName="Partial Update Test", lastName="Original Last")
    )
    if create_result.status != 200:
        return

    result = ctx.authors.update(
        create_result.body["id"], {"firstName": "Partially Updated First"}
    )
    expect_status(result, *ACCEPT_OR_REJECT)


# Boundary testing

@scenario(GROUP)
def maximum_integer_book_id(ctx):
    result = ctx.create(ctx.authors, _author(idBook=MAX_SAFE_INTEGER, firstName="Max Int Test"))
    expect_status(result, *ACCEPT_OR_REJECT)


@scenario(GROUP)
def minimum_integer_book_id(ctx):
    result = ctx.create(ctx.authors, _author(idBook=-MAX_SAFE_INTEGER, firstName="Min Int Test"))
    expect_status(result, *ACCEPT_OR_REJECT)


@scenario(GROUP)
def floating_point_book_id(ctx):
    result = ctx.create(ctx.authors, _author(idBook=1.5, firstName="Float Test"))
    expect_status(result, *ACCEPT_OR_REJECT)
