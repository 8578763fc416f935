# This test file validates the note runner: per-topic execution, summaries, report files and strict gating.
# Failing checks are injected through a fake topic module so the real notes stay untouched.

from __future__ import annotations

import json
import sys
import types
from pathlib import Path

import pandas as pd
import pytest

from cheatsheets.common.settings import get_settings
from cheatsheets.notes import runner
from cheatsheets.notes.base import NoteCheck, expect_equal
from cheatsheets.notes.catalog import NoteEntry


@pytest.fixture()
def broken_topic(monkeypatch: pytest.MonkeyPatch) -> NoteEntry:
    module = types.ModuleType("fake_broken_topic")
    module.TOPIC = "broken"  # type: ignore[attr-defined]
    module.collect_checks = lambda: [  # type: ignore[attr-defined]
        expect_equal("broken", "holds", 1, 1),
        expect_equal("broken", "does_not_hold", [1, 2], [2, 1]),
    ]
    monkeypatch.setitem(sys.modules, "fake_broken_topic", module)
    return NoteEntry(topic="broken", title="Broken", module="fake_broken_topic")


def _use_catalog(monkeypatch: pytest.MonkeyPatch, entries: list[NoteEntry]) -> None:
    monkeypatch.setattr(runner, "load_catalog", lambda path=None: entries)


@pytest.fixture()
def seed_recorder(monkeypatch: pytest.MonkeyPatch) -> tuple[NoteEntry, list[int]]:
    seen: list[int] = []

    def collect_checks(*, seed: int) -> list[NoteCheck]:
        seen.append(seed)
        return [expect_equal("seeded", "records_seed", seed, seed)]

    module = types.ModuleType("fake_seeded_topic")
    module.TOPIC = "seeded"  # type: ignore[attr-defined]
    module.collect_checks = collect_checks  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "fake_seeded_topic", module)
    entry = NoteEntry(topic="seeded", title="Seeded", module="fake_seeded_topic", params={"seed": 3})
    return entry, seen


def test_run_topic_passes_catalog_params(seed_recorder: tuple[NoteEntry, list[int]]) -> None:
    entry, seen = seed_recorder
    checks = runner.run_topic(entry)
    assert seen == [3]
    assert [check.check_name for check in checks] == ["records_seed"]


def test_run_topic_seed_override_replaces_catalog_seed(seed_recorder: tuple[NoteEntry, list[int]]) -> None:
    entry, seen = seed_recorder
    runner.run_topic(entry, seed_override=11)
    assert seen == [11]
    assert entry.params == {"seed": 3}


def test_run_topic_seed_override_ignored_without_seed_param(broken_topic: NoteEntry) -> None:
    checks = runner.run_topic(broken_topic, seed_override=11)
    assert len(checks) == 2


def test_run_notes_applies_random_seed_setting(
    monkeypatch: pytest.MonkeyPatch, seed_recorder: tuple[NoteEntry, list[int]]
) -> None:
    entry, seen = seed_recorder
    _use_catalog(monkeypatch, [entry])
    monkeypatch.setenv("NOTES_RANDOM_SEED", "99")
    get_settings.cache_clear()

    result = runner.run_notes(write=False)

    assert seen == [99]
    assert result["status"] == "passed"


def test_sampling_topic_runs_with_overridden_seed() -> None:
    entry = NoteEntry(topic="sampling", title="Sampling", module="cheatsheets.notes.sampling", params={"seed": 3})
    checks = runner.run_topic(entry, seed_override=11)
    assert checks
    assert all(check.passed for check in checks)

def test_run_topic_rejects_duplicate_check_names(monkeypatch: pytest.MonkeyPatch) -> None:
    module = types.ModuleType("fake_duplicate_topic")
    module.TOPIC = "dup"  # type: ignore[attr-defined]
    module.collect_checks = lambda: [expect_equal("dup", "same", 1, 1), expect_equal("dup", "same", 2, 2)]  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "fake_duplicate_topic", module)

    with pytest.raises(ValueError, match="duplicate check names"):
        runner.run_topic(NoteEntry(topic="dup", title="Dup", module="fake_duplicate_topic"))


def test_summary_counts_failures(broken_topic: NoteEntry) -> None:
    frame = runner.checks_to_frame(runner.run_topic(broken_topic))
    now = runner.utc_now()
    summary = runner.summarize_checks(frame, run_id="r1", started_at=now, finished_at=now)

    assert list(frame.columns) == runner.REPORT_COLUMNS
    assert summary.total_checks == 2
    assert summary.failed_checks == 1
    assert summary.per_topic == {"broken": {"checks": 2, "failed": 1}}
    assert summary.failures == [
        {"topic": "broken", "check_name": "does_not_hold", "expected": "[2, 1]", "actual": "[1, 2]"}
    ]
    assert summary.passed is False


def test_empty_run_summary() -> None:
    frame = runner.checks_to_frame([])
    now = runner.utc_now()
    summary = runner.summarize_checks(frame, run_id="r0", started_at=now, finished_at=now)
    assert frame.empty
    assert summary.passed is True
    assert summary.to_dict()["status"] == "passed"


def test_write_report_creates_csv_and_summary(tmp_path: Path, broken_topic: NoteEntry) -> None:
    frame = runner.checks_to_frame(runner.run_topic(broken_topic))
    now = runner.utc_now()
    summary = runner.summarize_checks(frame, run_id="run-42", started_at=now, finished_at=now)

    run_dir = runner.write_report(frame, summary, tmp_path)

    assert run_dir == tmp_path / "run-42"
    written = pd.read_csv(run_dir / "note_checks.csv")
    assert len(written) == 2
    payload = json.loads((run_dir / "run_summary.json").read_text(encoding="utf-8"))
    assert payload["status"] == "failed"
    assert payload["failed_checks"] == 1


def test_strict_run_raises_with_details(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, broken_topic: NoteEntry
) -> None:
    _use_catalog(monkeypatch, [broken_topic])
    with pytest.raises(runner.NoteCheckError, match="1 of 2 note checks failed") as excinfo:
        runner.run_notes(strict=True, output_dir=tmp_path)
    assert excinfo.value.details["failed_checks"] == 1


def test_non_strict_run_reports_failures(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, broken_topic: NoteEntry
) -> None:
    _use_catalog(monkeypatch, [broken_topic])
    result = runner.run_notes(strict=False, output_dir=tmp_path)

    assert result["status"] == "failed"
    assert Path(result["artifacts_path"]).parent == tmp_path
    assert (Path(result["artifacts_path"]) / "note_checks.csv").exists()


def test_full_catalog_run_passes_without_report() -> None:
    result = runner.run_notes(write=False)
    assert result["status"] == "passed"
    assert result["artifacts_path"] is None
    assert result["total_checks"] > 0
    assert len(result["topics"]) == 13


def test_main_exit_codes(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, broken_topic: NoteEntry) -> None:
    assert runner.main(["--topics", "heaps", "strings", "--no-report"]) == 0

    _use_catalog(monkeypatch, [broken_topic])
    assert runner.main(["--strict", "--output-dir", str(tmp_path)]) == 1
    assert runner.main(["--no-strict", "--no-report"]) == 0


def test_main_unknown_topic_exits_with_usage_code(capsys: pytest.CaptureFixture[str]) -> None:
    assert runner.main(["--topics", "graphs", "--no-report"]) == 2
    assert "Unknown topics requested" in capsys.readouterr().err
