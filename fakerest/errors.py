# fakerest/errors.py
"""
Error taxonomy for the API test harness.

Every error here is local to a single scenario; the runner turns them into
outcomes instead of aborting the run.
"""

from typing import Any, Iterable, Optional


class HarnessError(Exception):
    """Base class for harness errors that are not assertion failures"""
    pass


class TransportError(HarnessError):
    """No HTTP response was obtained (DNS, connect, timeout)"""

    def __init__(self, method: str, url: str, reason: str):
        self.method = method
        self.url = url
        self.reason = reason
        super().__init__(f"{method} {url} failed: {reason}")


class ScenarioFailure(AssertionError):
    """A scenario post-condition did not hold"""
    pass


class UnexpectedStatus(ScenarioFailure):
    """Response status outside the scenario's accepted set"""

    def __init__(self, expected: Iterable[int], actual: int, url: Optional[str] = None):
        self.expected = tuple(expected)
        self.actual = actual
        self.url = url
        expected_str = ", ".join(str(s) for s in self.expected)
        where = f" for {url}" if url else ""
        super().__init__(f"Expected status in [{expected_str}]{where}, got {actual}")


class ShapeMismatch(ScenarioFailure):
    """Record missing an expected field or holding a value of the wrong type"""

    def __init__(self, field: str, reason: str, value: Any = None):
        self.field = field
        self.reason = reason
        self.value = value
        super().__init__(f"Field '{field}': {reason}")

    def __eq__(self, other):
        if not isinstance(other, ShapeMismatch):
            return NotImplemented
        return (self.field, self.reason) == (other.field, other.reason)

    def __hash__(self):
        return hash((self.field, self.reason))


class AssertionFailure(ScenarioFailure):
    """Generic post-condition failure, e.g. an echoed value mismatch"""
    pass
