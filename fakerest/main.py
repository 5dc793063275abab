#!/usr/bin/env python3
# fakerest/main.py
"""
Command-line entry point for running the FakeRESTApi scenarios.

Usage:
    python -m fakerest.main                 # run the whole catalogue (run mode)
    python -m fakerest.main list            # list registered scenarios
    python -m fakerest.main open NAME...    # run selected scenarios (open mode)
    python -m fakerest.main group GROUP     # run one group (run mode)
    python -m fakerest.main load [CSV]      # display saved results
"""

import logging
import os
import sys

from .config import OPEN_MODE, RUN_MODE, HarnessConfig
from .runner import ScenarioRunner, load_and_display_results
from .scenarios import registry


def _configure_logging():
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def list_scenarios():
    """Print the catalogue grouped by resource"""
    for group in registry.groups():
        print(f"\n{group}:")
        for s in registry.by_group(group):
            description = f" - {s.description}" if s.description else ""
            print(f"  • {s.name}{description}")
    print(f"\n{len(registry)} scenarios registered")


def run(names=None, group=None, mode=RUN_MODE) -> int:
    """Run scenarios and return a process exit code"""
    config = HarnessConfig.from_env()
    runner = ScenarioRunner(config=config)

    try:
        scenarios = runner.select(names=names, group=group)
    except KeyError as e:
        print(f"❌ {e.args[0]}")
        return 2

    if not scenarios:
        print("❌ No scenarios selected")
        return 2

    try:
        runner.run(scenarios, mode=mode)
    finally:
        runner.client.close()

    runner.display_results()
    runner.save_results()
    return 0 if runner.all_passed else 1


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    _configure_logging()

    if not argv:
        return run()

    command = argv[0]
    if command == "list":
        list_scenarios()
        return 0
    elif command == "open" and len(argv) > 1:
        return run(names=argv[1:], mode=OPEN_MODE)
    elif command == "group" and len(argv) > 1:
        return run(group=argv[1])
    elif command == "load":
        csv_file = argv[1] if len(argv) > 1 else "results/scenario_results.csv"
        return 0 if load_and_display_results(csv_file) else 1

    print(__doc__)
    return 2


if __name__ == "__main__":
    sys.exit(main())
