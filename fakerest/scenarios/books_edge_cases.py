# fakerest/scenarios/books_edge_cases.py
"""
Edge-case and error-handling scenarios for /Books.

The service's validation rules were never pinned down, so most cases accept
either acceptance (200) or a client error (400/422).
"""

from datetime import datetime, timezone

from ..errors import AssertionFailure
from ..payloads import generate_book_data
from ..validators import expect_equal, expect_status, is_empty_body
from .registry import scenario

GROUP = "books-edge"
ACCEPT_OR_REJECT = (200, 400, 422)


def _book(**overrides):
    data = {
        "title": "Test Book",
        "description": "Test description",
        "pageCount": 100,
        "excerpt": "Test excerpt",
        "publishDate": "2023-01-01T00:00:00.000Z",
    }
    data.update(overrides)
    return data


# Data validation

@scenario(GROUP)
def extremely_long_book_title(ctx):
    long_title = "A" * 1000
    result = ctx.create(ctx.books, _book(title=long_title))
    expect_status(result, *ACCEPT_OR_REJECT)

    if result.status == 200:
        expect_equal(result.body["title"], long_title, "title")


@scenario(GROUP)
def empty_book_values(ctx):
    result = ctx.create(
        ctx.books,
        {"title": "", "description": "", "pageCount": 0, "excerpt": "", "publishDate": ""},
    )
    expect_status(result, *ACCEPT_OR_REJECT)


@scenario(GROUP)
def null_book_values(ctx):
    result = ctx.create(
        ctx.books,
        {"title": None, "description": None, "pageCount": None, "excerpt": None, "publishDate": None},
    )
    expect_status(result, *ACCEPT_OR_REJECT)


@scenario(GROUP)
def negative_page_count(ctx):
    result = ctx.create(ctx.books, _book(pageCount=-100))
    expect_status(result, *ACCEPT_OR_REJECT)


@scenario(GROUP)
def future_publish_date(ctx):
    now = datetime.now(timezone.utc)
    future = now.replace(year=now.year + 10, day=min(now.day, 28))
    publish_date = future.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    result = ctx.create(ctx.books, _book(title="Future Book", publishDate=publish_date))
    expect_status(result, *ACCEPT_OR_REJECT)


@scenario(GROUP)
def very_old_publish_date(ctx):
    result = ctx.create(
        ctx.books, _book(title="Old Book", publishDate="1800-01-01T00:00:00.000Z")
    )
    expect_status(result, *ACCEPT_OR_REJECT)


# ID handling

@scenario(GROUP)
def very_large_book_id(ctx):
    expect_status(ctx.books.get_by_id(999999999), 200, 404)


@scenario(GROUP)
def zero_book_id(ctx):
    expect_status(ctx.books.get_by_id(0), 200, 400, 404)


@scenario(GROUP)
def decimal_book_id(ctx):
    expect_status(ctx.books.get_by_id("1.5"), 200, 400, 404)


@scenario(GROUP)
def string_book_id(ctx):
    """Non-numeric ids never break the harness itself"""
    expect_status(ctx.books.get_by_id("abc"), 200, 400, 404)


# Special characters

@scenario(GROUP)
def unicode_book_data(ctx):
    unicode_book = _book(
        title="测试书籍 🚀 📚",
        description="Descripción con emojis 🎉",
        excerpt="Excerpt with special chars: @#$%^&*()",
    )
    result = ctx.create(ctx.books, unicode_book)
    expect_status(result, *ACCEPT_OR_REJECT)

    if result.status == 200:
        expect_equal(result.body["title"], unicode_book["title"], "title")


@scenario(GROUP)
def sql_injection_book(ctx):
    result = ctx.create(
        ctx.books,
        _book(
            title="'; DROP TABLE Books; --",
            description="1' OR '1'='1",
            excerpt="'; DELETE FROM Books; --",
        ),
    )
    expect_status(result, *ACCEPT_OR_REJECT)


@scenario(GROUP)
def xss_book(ctx):
    result = ctx.create(
        ctx.books,
        _book(
            title='<script>alert("XSS")</script>',
            description='<img src=x onerror=alert("XSS")>',
            excerpt='javascript:alert("XSS")',
        ),
    )
    expect_status(result, *ACCEPT_OR_REJECT)


@scenario(GROUP)
def script_title_stored_verbatim(ctx):
    """An accepted script title is stored byte-identical, not sanitized"""
    title = "<script>alert(1)</script>"
    result = ctx.create(ctx.books, _book(title=title))
    expect_status(result, *ACCEPT_OR_REJECT)

    if result.status == 200:
        expect_equal(result.body["title"], title, "title")


# Performance and load

@scenario(GROUP)
def rapid_sequential_book_requests(ctx):
    results = [ctx.books.list() for _ in range(10)]

    for result in results:
        expect_status(result, 200, 429)
    served = [r for r in results if r.status == 200]
    if not served:
        raise AssertionFailure("every rapid request was rate limited")


@scenario(GROUP)
def concurrent_book_creates(ctx):
    """Several creates in quick succession, tolerating rate limiting"""
    for i in range(5):
        result = ctx.create(
            ctx.books,
            generate_book_data(title=f"Concurrent Book {i}", pageCount=100 + i),
        )
        expect_status(result, 200, 400, 422, 429)


# Data consistency

@scenario(GROUP)
def book_integrity_during_updates(ctx):
    create_result = ctx.create(
        ctx.books,
        _book(
            title="Original Title",
            description="Original description",
            excerpt="Original excerpt",
        ),
    )
    if create_result.status != 200:
        return

    book_id = create_result.body["id"]
    updated_book = {
        "title": "Updated Title",
        "description": "Updated description",
        "pageCount": 200,
        "excerpt": "Updated excerpt",
        "publishDate": "2023-02-01T00:00:00.000Z",
    }

    update_result = ctx.books.update(book_id, updated_book)
    expect_status(update_result, *ACCEPT_OR_REJECT)
    if update_result.status != 200:
        return

    read_result = ctx.read_back(ctx.books, book_id)
    expect_status(read_result, 200, 404)
    if read_result.status == 200 and not is_empty_body(read_result.body):
        if not isinstance(read_result.body, dict):
            raise AssertionFailure(f"Expected a book object, got {read_result.body!r}")
        expect_equal(read_result.body.get("title"), updated_book["title"], "title")


@scenario(GROUP)
def title_only_book_update(ctx):
    create_result = ctx.create(
        ctx.books,
        _book(
            title="Partial Update Test",
            description="Original description",
            excerpt="Original excerpt",
        ),
    )
    if create_result.status != 200:
        return

    result = ctx.books.update(create_result.body["id"], {"title": "Partially Updated Title"})
    expect_status(result, *ACCEPT_OR_REJECT)
