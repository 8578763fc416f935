"""
Run the cheat-sheet self-checks and write a per-run report.
Each enabled topic in the catalog is imported, its collect_checks() executed and every NoteCheck tabulated.
Run it via `python -m cheatsheets.notes.runner` or the `cheatsheets-run` console script.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pandas as pd

from cheatsheets.common.logging import configure_logging
from cheatsheets.common.settings import Settings, get_settings
from cheatsheets.notes.base import NoteCheck
from cheatsheets.notes.catalog import PROJECT_ROOT, NoteEntry, load_catalog, load_note_module, select_entries

LOGGER = logging.getLogger("notes")

REPORT_COLUMNS = ["topic", "check_name", "passed", "expected", "actual"]


class NoteCheckError(RuntimeError):
    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


@dataclass(frozen=True)
class NotesRunSummary:
    run_id: str
    started_at: datetime
    finished_at: datetime
    topics: list[str]
    total_checks: int
    failed_checks: int
    per_topic: dict[str, dict[str, int]] = field(default_factory=dict)
    failures: list[dict[str, Any]] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.failed_checks == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "run_id": self.run_id,
            "status": "passed" if self.passed else "failed",
            "started_at": self.started_at.isoformat(),
            "finished_at": self.finished_at.isoformat(),
            "topics": self.topics,
            "total_checks": self.total_checks,
            "failed_checks": self.failed_checks,
            "per_topic": self.per_topic,
            "failures": self.failures,
        }


def utc_now() -> datetime:
    return datetime.now(tz=UTC)


def run_topic(entry: NoteEntry, *, seed_override: int | None = None) -> list[NoteCheck]:
    module = load_note_module(entry)
    params = dict(entry.params)
    if seed_override is not None and "seed" in params:
        params["seed"] = seed_override

    checks = list(module.collect_checks(**params))

    names = [check.check_name for check in checks]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise ValueError(f"Topic {entry.topic!r} reports duplicate check names: {duplicates}")

    failed = sum(1 for check in checks if not check.passed)
    LOGGER.info("topic=%s checks=%d failed=%d", entry.topic, len(checks), failed)
    return checks


def checks_to_frame(checks: Iterable[NoteCheck]) -> pd.DataFrame:
    rows = [check.to_row() for check in checks]
    if not rows:
        return pd.DataFrame(columns=REPORT_COLUMNS)
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def summarize_checks(
    frame: pd.DataFrame,
    *,
    run_id: str,
    started_at: datetime,
    finished_at: datetime,
) -> NotesRunSummary:
    if frame.empty:
        return NotesRunSummary(
            run_id=run_id,
            started_at=started_at,
            finished_at=finished_at,
            topics=[],
            total_checks=0,
            failed_checks=0,
        )

    passed = frame["passed"].astype(bool)
    grouped = frame.assign(failed=~passed).groupby("topic", sort=False)
    per_topic = {
        str(topic): {"checks": int(len(group)), "failed": int(group["failed"].sum())}
        for topic, group in grouped
    }
    failures = frame.loc[~passed, ["topic", "check_name", "expected", "actual"]].to_dict(orient="records")

    return NotesRunSummary(
        run_id=run_id,
        started_at=started_at,
        finished_at=finished_at,
        topics=list(per_topic),
        total_checks=int(len(frame)),
        failed_checks=int((~passed).sum()),
        per_topic=per_topic,
        failures=failures,
    )


def write_report(frame: pd.DataFrame, summary: NotesRunSummary, output_dir: Path) -> Path:
    run_dir = output_dir / summary.run_id
    run_dir.mkdir(parents=True, exist_ok=True)

    frame.to_csv(run_dir / "note_checks.csv", index=False)
    with (run_dir / "run_summary.json").open("w", encoding="utf-8") as handle:
        json.dump(summary.to_dict(), handle, indent=2)
    return run_dir


def enforce_all_passed(summary: NotesRunSummary) -> None:
    if summary.passed:
        return
    raise NoteCheckError(
        f"{summary.failed_checks} of {summary.total_checks} note checks failed",
        details=summary.to_dict(),
    )


def _resolve_dir(value: str) -> Path:
    path = Path(value)
    return path if path.is_absolute() else PROJECT_ROOT / path


def run_notes(
    *,
    topics: list[str] | None = None,
    strict: bool | None = None,
    write: bool = True,
    output_dir: Path | None = None,
    settings: Settings | None = None,
) -> dict[str, Any]:
    configure_logging()
    current_settings = settings or get_settings()
    strict_mode = current_settings.NOTES_STRICT if strict is None else strict

    entries = select_entries(load_catalog(current_settings.NOTES_CATALOG_PATH), topics)
    run_id = str(uuid.uuid4())
    started_at = utc_now()
    LOGGER.info("notes run started run_id=%s topics=%d", run_id, len(entries))

    checks: list[NoteCheck] = []
    for entry in entries:
        try:
            checks.extend(run_topic(entry, seed_override=current_settings.NOTES_RANDOM_SEED))
        except Exception:
            LOGGER.exception("Topic %s failed to run for run_id=%s", entry.topic, run_id)
            raise

    frame = checks_to_frame(checks)
    summary = summarize_checks(frame, run_id=run_id, started_at=started_at, finished_at=utc_now())

    artifacts_path: str | None = None
    if write:
        report_dir = output_dir or _resolve_dir(current_settings.NOTES_REPORT_DIR)
        artifacts_path = str(write_report(frame, summary, report_dir))

    for failure in summary.failures:
        LOGGER.warning(
            "check failed topic=%s check=%s expected=%s actual=%s",
            failure["topic"],
            failure["check_name"],
            failure["expected"],
            failure["actual"],
        )

    if strict_mode:
        enforce_all_passed(summary)
    return summary.to_dict() | {"artifacts_path": artifacts_path}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the cheat-sheet self-checks")
    parser.add_argument("--topics", nargs="+", default=None, help="Topic ids to run (default: all enabled)")
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Fail with a non-zero exit code when any check fails (default: NOTES_STRICT)",
    )
    parser.add_argument("--no-report", action="store_true", help="Skip writing CSV/JSON artifacts")
    parser.add_argument("--output-dir", default=None, help="Override NOTES_REPORT_DIR")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        result = run_notes(
            topics=args.topics,
            strict=args.strict,
            write=not args.no_report,
            output_dir=Path(args.output_dir) if args.output_dir else None,
        )
    except NoteCheckError as exc:
        print(json.dumps(exc.details, indent=2, default=str))
        return 1
    except ValueError as exc:
        # Broken catalog or unknown --topics value.
        print(f"error: {exc}", file=sys.stderr)
        return 2
    print(json.dumps(result, indent=2, default=str))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
