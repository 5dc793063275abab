# fakerest/runner.py
"""
Scenario runner: executes scenarios, records outcomes and reports on a run.
"""

import json
import logging
import os
import time
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

import pandas as pd

from .client import APIClient
from .config import RUN_MODE, HarnessConfig
from .errors import TransportError
from .scenarios import Scenario, ScenarioContext, ScenarioRegistry, registry as default_registry


class Outcome(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"


@dataclass
class ScenarioResult:
    """Outcome of one scenario execution"""
    name: str
    group: str
    outcome: str
    duration: float  # seconds
    attempt: int = 1
    error_type: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.outcome == Outcome.PASSED.value


class ScenarioRunner:
    """Runs registered scenarios against the configured service"""

    def __init__(
        self,
        config: Optional[HarnessConfig] = None,
        client: Optional[APIClient] = None,
        registry: Optional[ScenarioRegistry] = None,
    ):
        self.config = config or (client.config if client else HarnessConfig.from_env())
        self._client = client
        self.registry = registry if registry is not None else default_registry
        self.results: List[Dict[str, Any]] = []
        self.attempts = 0
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def client(self) -> APIClient:
        """Client for the configured service, created on first use"""
        if self._client is None:
            self._client = APIClient(self.config)
        return self._client

    def select(self, names: Optional[List[str]] = None, group: Optional[str] = None) -> List[Scenario]:
        """Pick scenarios by name and/or group; no filter selects everything"""
        if names:
            selected = [self.registry.get(name) for name in names]
        else:
            selected = self.registry.all()

        if group:
            selected = [s for s in selected if s.group == group]
        return selected

    def run_scenario(self, scenario: Scenario, attempt: int = 1) -> ScenarioResult:
        """Execute one scenario with scenario-scoped setup and cleanup"""
        start_time = time.time()
        outcome = Outcome.PASSED
        error = None

        try:
            with ScenarioContext(self.client, self.config) as ctx:
                scenario(ctx)
        except AssertionError as e:
            outcome = Outcome.FAILED
            error = e
        except TransportError as e:
            outcome = Outcome.ERROR
            error = e
        except Exception as e:
            self.logger.exception(f"Scenario '{scenario.name}' raised unexpectedly")
            outcome = Outcome.ERROR
            error = e

        duration = time.time() - start_time
        if duration * 1000 > self.config.command_timeout_ms:
            self.logger.warning(
                f"Scenario '{scenario.name}' took {duration:.2f}s, "
                f"over the {self.config.command_timeout_ms}ms command timeout"
            )

        if error is None:
            self.logger.info(f"  ✓ {scenario.group}/{scenario.name} ({duration:.2f}s)")
        else:
            self.logger.info(f"  ✗ {scenario.group}/{scenario.name} [{outcome.value}]: {error}")

        return ScenarioResult(
            name=scenario.name,
            group=scenario.group,
            outcome=outcome.value,
            duration=duration,
            attempt=attempt,
            error_type=type(error).__name__ if error else None,
            error_message=str(error) if error else None,
        )

    def run(self, scenarios: Optional[List[Scenario]] = None, mode: str = RUN_MODE) -> pd.DataFrame:
        """
        Run scenarios sequentially, retrying the whole run on any non-pass.

        Args:
            scenarios: Scenarios to run (defaults to the full registry)
            mode: "run" or "open", selecting the configured retry count

        Returns:
            DataFrame of the final attempt's results
        """
        scenarios = scenarios if scenarios is not None else self.select()
        max_retries = self.config.retries_for(mode)

        self.logger.info("Starting test execution...")
        self.logger.info(f"Running {len(scenarios)} scenarios against {self.config.api_base_url}")

        for attempt in range(1, max_retries + 2):
            self.attempts = attempt
            results = [asdict(self.run_scenario(s, attempt)) for s in scenarios]
            self.results = results

            not_passed = [r for r in results if r["outcome"] != Outcome.PASSED.value]
            if not not_passed:
                break
            if attempt <= max_retries:
                self.logger.warning(
                    f"{len(not_passed)} scenario(s) did not pass on attempt {attempt}, "
                    f"retrying the run ({attempt}/{max_retries})"
                )

        self.logger.info("Test execution completed.")
        return pd.DataFrame(self.results)

    @property
    def all_passed(self) -> bool:
        return bool(self.results) and all(
            r["outcome"] == Outcome.PASSED.value for r in self.results
        )

    def generate_report(self) -> Dict[str, Any]:
        """Generate a per-group summary of the last run"""
        if not self.results:
            return {"error": "No results to analyze"}

        df = pd.DataFrame(self.results)
        report = {}

        for group in df["group"].unique():
            group_data = df[df["group"] == group]
            passed = group_data[group_data["outcome"] == Outcome.PASSED.value]
            durations = pd.to_numeric(group_data["duration"])

            report[group] = {
                "total": int(len(group_data)),
                "passed": int(len(passed)),
                "failed": int((group_data["outcome"] == Outcome.FAILED.value).sum()),
                "errors": int((group_data["outcome"] == Outcome.ERROR.value).sum()),
                "pass_rate": len(passed) / len(group_data) * 100,
                "avg_duration": float(durations.mean()),
                "min_duration": float(durations.min()),
                "max_duration": float(durations.max()),
            }

        return report

    def display_results(self) -> None:
        """Display the last run in human-readable format"""
        if not self.results:
            print("No results to display")
            return

        print("\n" + "=" * 80)
        print(f"SCENARIO RESULTS (attempt {self.attempts})")
        print("=" * 80)

        by_group: Dict[str, List[Dict[str, Any]]] = {}
        for result in self.results:
            by_group.setdefault(result["group"], []).append(result)

        for group, group_results in by_group.items():
            print(f"\n📚 {group}")
            print("-" * len(group))

            for result in group_results:
                if result["outcome"] == Outcome.PASSED.value:
                    print(f"  ✅ {result['name']} ({result['duration']:.2f}s)")
                elif result["outcome"] == Outcome.FAILED.value:
                    print(f"  ❌ {result['name']}: {result['error_message']}")
                else:
                    print(f"  💥 {result['name']}: {result['error_type']}: {result['error_message']}")

        report = self.generate_report()
        print("\n=== Summary ===")
        for group, stats in report.items():
            print(
                f"  {group}: {stats['passed']}/{stats['total']} passed "
                f"({stats['pass_rate']:.1f}%), {stats['failed']} failed, "
                f"{stats['errors']} errors, avg {stats['avg_duration']:.2f}s"
            )

    def save_results(
        self,
        csv_file: Optional[str] = None,
        json_file: Optional[str] = None,
    ) -> None:
        """Save results and the summary report to files"""
        csv_file = csv_file or os.path.join(self.config.results_dir, "scenario_results.csv")
        json_file = json_file or os.path.join(self.config.results_dir, "scenario_report.json")

        for path in (csv_file, json_file):
            directory = os.path.dirname(path)
            if directory:
                os.makedirs(directory, exist_ok=True)

        if self.results:
            pd.DataFrame(self.results).to_csv(csv_file, index=False)
            print(f"💾 Detailed results saved to '{csv_file}'")

        report = self.generate_report()
        if "error" not in report:
            with open(json_file, "w", encoding="utf-8") as f:
                json.dump(report, f, indent=2)
            print(f"📊 Summary report saved to '{json_file}'")


def load_and_display_results(csv_file: str = "results/scenario_results.csv") -> Optional[ScenarioRunner]:
    """Load saved results and display them"""
    try:
        df = pd.read_csv(csv_file)
    except FileNotFoundError:
        print(f"❌ Results file '{csv_file}' not found. Run the scenarios first!")
        return None
    except pd.errors.EmptyDataError:
        print(f"❌ Results file '{csv_file}' is empty")
        return None

    # Missing optional columns come back as NaN
    df = df.astype(object).where(pd.notna(df), None)

    runner = ScenarioRunner(config=HarnessConfig(), registry=ScenarioRegistry())
    runner.results = df.to_dict("records")
    runner.attempts = int(max((r.get("attempt") or 1) for r in runner.results)) if runner.results else 0
    runner.display_results()
    return runner
