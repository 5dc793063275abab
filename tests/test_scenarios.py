"""
The full scenario catalogue, run against the in-memory service.
"""

import pytest

from conftest import FakeResponse
from fakerest.runner import Outcome, ScenarioRunner
from fakerest.scenarios import ScenarioContext, registry


@pytest.mark.parametrize("scenario", registry.all(), ids=lambda s: f"{s.group}/{s.name}")
def test_scenario_passes_against_fake_service(scenario, client):
    runner = ScenarioRunner(client=client)

    result = runner.run_scenario(scenario)

    assert result.outcome == Outcome.PASSED.value, result.error_message


@pytest.mark.parametrize("scenario", registry.all(), ids=lambda s: f"{s.group}/{s.name}")
def test_scenario_leaves_no_records_behind(scenario, client, service):
    before = service.snapshot()

    with ScenarioContext(client) as ctx:
        try:
            scenario(ctx)
        except AssertionError:
            pass

    after = service.snapshot()
    # Updates to pre-existing records are allowed; new records must be gone
    assert set(after["books"]) <= set(before["books"])
    assert set(after["authors"]) <= set(before["authors"])


def test_lifecycle_detects_a_service_that_keeps_deleted_records(client, service):
    original_request = service.request

    def sticky_delete(method, url, **kwargs):
        if method == "DELETE":
            return original_request("GET", url, **kwargs)
        return original_request(method, url, **kwargs)

    service.request = sticky_delete
    runner = ScenarioRunner(client=client)

    result = runner.run_scenario(registry.get("book_lifecycle"))

    assert result.outcome == Outcome.FAILED.value


def test_verbatim_title_check_detects_sanitizing_service(client, service):
    original_request = service.request

    def sanitizing(method, url, json=None, **kwargs):
        if method == "POST" and isinstance(json, dict) and isinstance(json.get("title"), str):
            json = {**json, "title": json["title"].replace("<", "&lt;")}
        return original_request(method, url, json=json, **kwargs)

    service.request = sanitizing
    runner = ScenarioRunner(client=client)

    result = runner.run_scenario(registry.get("script_title_stored_verbatim"))

    assert result.outcome == Outcome.FAILED.value
    assert "title" in result.error_message


@pytest.mark.parametrize("name", ["rapid_sequential_book_requests", "rapid_sequential_author_requests"])
def test_rapid_requests_fail_when_the_service_errors(name, client, service):
    original_request = service.request

    def erroring_lists(method, url, **kwargs):
        if method == "GET" and url.endswith(("/Books", "/Authors")):
            return FakeResponse(500, {"title": "Internal Server Error"})
        return original_request(method, url, **kwargs)

    service.request = erroring_lists
    runner = ScenarioRunner(client=client)

    result = runner.run_scenario(registry.get(name))

    assert result.outcome == Outcome.FAILED.value
    assert "500" in result.error_message


def test_rapid_requests_tolerate_some_rate_limiting(client, service):
    original_request = service.request
    lists = []

    def rate_limited_lists(method, url, **kwargs):
        if method == "GET" and url.endswith("/Books"):
            lists.append(url)
            if len(lists) % 2 == 0:
                return FakeResponse(429, {"title": "Too Many Requests"})
        return original_request(method, url, **kwargs)

    service.request = rate_limited_lists
    runner = ScenarioRunner(client=client)

    result = runner.run_scenario(registry.get("rapid_sequential_book_requests"))

    assert result.outcome == Outcome.PASSED.value, result.error_message
