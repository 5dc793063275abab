# fakerest/payloads.py
"""
Fixture loading and generated payloads for scenarios.
"""

import json
import random
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .config import DEFAULT_FIXTURES_DIR


def _iso_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def load_fixture(name: str, fixtures_dir: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load a named JSON fixture (e.g. "books" or "authors").

    Fixtures are opaque payload collections keyed by case name,
    such as "validBook" or "authorToUpdate".
    """
    base = Path(fixtures_dir) if fixtures_dir else DEFAULT_FIXTURES_DIR
    path = base / f"{name}.json"
    if not path.exists():
        raise FileNotFoundError(f"Fixture not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def generate_book_data(**overrides) -> Dict[str, Any]:
    """Unique, well-formed Book payload; keyword overrides replace fields"""
    timestamp = int(time.time() * 1000)
    data = {
        "id": 0,
        "title": f"Test Book {timestamp}",
        "description": f"This is a test book description created at {_iso_now()}",
        "pageCount": random.randint(100, 599),
        "excerpt": f"Test excerpt for book {timestamp}",
        "publishDate": _iso_now(),
    }
    data.update(overrides)
    return data


def generate_author_data(**overrides) -> Dict[str, Any]:
    """Unique, well-formed Author payload; keyword overrides replace fields"""
    timestamp = int(time.time() * 1000)
    data = {
        "id": 0,
        "idBook": random.randint(1, 100),
        "firstName": f"TestFirstName{timestamp}",
        "lastName": f"TestLastName{timestamp}",
    }
    data.update(overrides)
    return data
