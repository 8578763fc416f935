# This file runs every enabled cheat-sheet note as a quick preflight check.
# It does not write report artifacts, so it is safe to run in CI or before a commit.
# ruff: noqa: E402

from __future__ import annotations

import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from cheatsheets.common.settings import get_settings
from cheatsheets.notes.catalog import load_catalog, select_entries
from cheatsheets.notes.runner import run_topic


def main() -> int:
    failures: list[str] = []
    total = 0
    settings = get_settings()
    for entry in select_entries(load_catalog(settings.NOTES_CATALOG_PATH)):
        checks = run_topic(entry, seed_override=settings.NOTES_RANDOM_SEED)
        total += len(checks)
        failures.extend(f"{check.topic}.{check.check_name}" for check in checks if not check.passed)

    if failures:
        for failure in failures:
            print(f"FAIL: {failure}")
        return 1

    print(f"All {total} note checks passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
