"""
Scenario catalogue for the Books and Authors endpoints.

Importing this package registers every built-in scenario on `registry`.
"""

from .registry import Scenario, ScenarioContext, ScenarioRegistry, registry, scenario

# Register the built-in catalogue
from . import books, books_edge_cases, authors, authors_edge_cases  # noqa: F401

__all__ = [
    "Scenario",
    "ScenarioContext",
    "ScenarioRegistry",
    "registry",
    "scenario",
]
