# fakerest/scenarios/registry.py
"""
Scenario registration and per-scenario execution context.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..client import APIClient
from ..config import HarnessConfig
from ..errors import TransportError
from ..models import APIResult
from ..payloads import load_fixture
from ..resources import AuthorsAPI, BooksAPI, ResourceAPI
from ..validators import is_empty_body


@dataclass
class Scenario:
    """One independent test case: setup, action, assertion"""
    name: str
    group: str
    func: Callable[["ScenarioContext"], None]
    description: str = ""

    def __call__(self, ctx: "ScenarioContext") -> None:
        self.func(ctx)


class ScenarioRegistry:
    """Named collection of scenarios, kept in registration order"""

    def __init__(self):
        self._scenarios: Dict[str, Scenario] = {}

    def scenario(self, group: str, name: Optional[str] = None):
        """Decorator registering a function as a scenario"""

        def decorator(func: Callable[["ScenarioContext"], None]):
            scenario_name = name or func.__name__
            if scenario_name in self._scenarios:
                raise ValueError(f"Duplicate scenario name: {scenario_name}")
            description = (func.__doc__ or "").strip().splitlines()
            self._scenarios[scenario_name] = Scenario(
                name=scenario_name,
                group=group,
                func=func,
                description=description[0] if description else "",
            )
            return func

        return decorator

    def get(self, name: str) -> Scenario:
        if name not in self._scenarios:
            raise KeyError(f"Unknown scenario: {name}")
        return self._scenarios[name]

    def all(self) -> List[Scenario]:
        return list(self._scenarios.values())

    def groups(self) -> List[str]:
        seen = []
        for s in self._scenarios.values():
            if s.group not in seen:
                seen.append(s.group)
        return seen

    def by_group(self, group: str) -> List[Scenario]:
        return [s for s in self._scenarios.values() if s.group == group]

    def __len__(self):
        return len(self._scenarios)

    def __contains__(self, name: str):
        return name in self._scenarios


class ScenarioContext:
    """
    Everything a scenario needs, scoped to that scenario.

    Records created through create() are deleted when the context exits,
    whether the scenario passed, failed or errored.
    """

    def __init__(self, client: APIClient, config: Optional[HarnessConfig] = None):
        self.client = client
        self.config = config or client.config
        self.books = BooksAPI(client)
        self.authors = AuthorsAPI(client)
        self._books_data = None
        self._authors_data = None
        self._created: List[Tuple[ResourceAPI, Any]] = []
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def books_data(self) -> Dict[str, Any]:
        if self._books_data is None:
            self._books_data = load_fixture("books", self.config.fixtures_path)
        return self._books_data

    @property
    def authors_data(self) -> Dict[str, Any]:
        if self._authors_data is None:
            self._authors_data = load_fixture("authors", self.config.fixtures_path)
        return self._authors_data

    def create(self, api: ResourceAPI, payload: Dict[str, Any]) -> APIResult:
        """POST a record and track the returned id for cleanup"""
        result = api.create(payload)
        if isinstance(result.body, dict) and result.body.get("id"):
            self._created.append((api, result.body["id"]))
        return result

    def delete(self, api: ResourceAPI, record_id: Any) -> APIResult:
        """DELETE a record; it stays tracked for cleanup unless the service let go of it"""
        result = api.delete(record_id)
        if result.ok or result.status == 404:
            self._created = [
                (a, rid) for a, rid in self._created if not (a is api and rid == record_id)
            ]
        return result

    def read_back(self, api: ResourceAPI, record_id: Any) -> APIResult:
        """
        Read a record, re-reading while it is not yet visible.

        The service is only eventually consistent, so an empty read right after
        a write is retried up to config.read_back_attempts times in total.
        """
        result = api.get_by_id(record_id)
        for _ in range(self.config.read_back_attempts - 1):
            if result.status == 200 and not is_empty_body(result.body):
                break
            time.sleep(self.config.read_back_delay_ms / 1000)
            result = api.get_by_id(record_id)
        return result

    def cleanup(self) -> None:
        while self._created:
            api, record_id = self._created.pop()
            try:
                result = self.client.cleanup_test_data(api.resource, record_id)
            except TransportError as e:
                self.logger.warning(f"Cleanup of {api.resource}/{record_id} failed: {e}")
                continue
            if not result.ok and result.status != 404:
                self.logger.warning(f"Cleanup of {api.resource}/{record_id} returned HTTP {result.status}")

    def __enter__(self) -> "ScenarioContext":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.cleanup()
        return False


registry = ScenarioRegistry()
scenario = registry.scenario
