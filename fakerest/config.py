# fakerest/config.py
"""
Harness configuration for the FakeRESTApi test suite.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple

DEFAULT_BASE_URL = "https://fakerestapi.azurewebsites.net"
DEFAULT_FIXTURES_DIR = Path(__file__).parent / "fixtures"

# Latency budgets used by scenarios (informational, not enforced by the client)
DEFAULT_LATENCY_BUDGET_MS = 3000
LARGE_DATASET_LATENCY_BUDGET_MS = 5000

RUN_MODE = "run"
OPEN_MODE = "open"


def _default_headers() -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


@dataclass
class HarnessConfig:
    """Explicit configuration threaded through the client and the runner"""
    base_url: str = DEFAULT_BASE_URL
    api_version: str = "v1"
    request_timeout_ms: int = 15000
    response_timeout_ms: int = 15000
    command_timeout_ms: int = 10000
    run_mode_retries: int = 1
    open_mode_retries: int = 0
    read_back_attempts: int = 2
    read_back_delay_ms: int = 500
    fixtures_dir: Optional[str] = None
    results_dir: str = "results"
    default_headers: Dict[str, str] = field(default_factory=_default_headers)

    def __post_init__(self):
        for name in ("request_timeout_ms", "response_timeout_ms", "command_timeout_ms"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        for name in ("run_mode_retries", "open_mode_retries", "read_back_delay_ms"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")
        if self.read_back_attempts < 1:
            raise ValueError(
                f"read_back_attempts must be >= 1, got {self.read_back_attempts}"
            )

    @property
    def api_base_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/api/{self.api_version}"

    @property
    def timeout(self) -> Tuple[float, float]:
        """(connect, read) timeout in seconds, as requests expects it"""
        return self.request_timeout_ms / 1000, self.response_timeout_ms / 1000

    @property
    def fixtures_path(self) -> Path:
        return Path(self.fixtures_dir) if self.fixtures_dir else DEFAULT_FIXTURES_DIR

    def retries_for(self, mode: str) -> int:
        """Number of whole-run retries for the given runner mode"""
        if mode == RUN_MODE:
            return self.run_mode_retries
        if mode == OPEN_MODE:
            return self.open_mode_retries
        raise ValueError(f"Unknown run mode: {mode!r}")

    @classmethod
    def from_env(cls) -> "HarnessConfig":
        """Build a config from FAKEREST_* environment variables"""
        return cls(
            base_url=os.environ.get("FAKEREST_BASE_URL", DEFAULT_BASE_URL),
            api_version=os.environ.get("FAKEREST_API_VERSION", "v1"),
            request_timeout_ms=int(os.environ.get("FAKEREST_REQUEST_TIMEOUT_MS", 15000)),
            response_timeout_ms=int(os.environ.get("FAKEREST_RESPONSE_TIMEOUT_MS", 15000)),
            command_timeout_ms=int(os.environ.get("FAKEREST_COMMAND_TIMEOUT_MS", 10000)),
            run_mode_retries=int(os.environ.get("FAKEREST_RUN_MODE_RETRIES", 1)),
            open_mode_retries=int(os.environ.get("FAKEREST_OPEN_MODE_RETRIES", 0)),
            read_back_attempts=int(os.environ.get("FAKEREST_READ_BACK_ATTEMPTS", 2)),
            read_back_delay_ms=int(os.environ.get("FAKEREST_READ_BACK_DELAY_MS", 500)),
            fixtures_dir=os.environ.get("FAKEREST_FIXTURES_DIR"),
            results_dir=os.environ.get("FAKEREST_RESULTS_DIR", "results"),
        )
