from __future__ import annotations

import json
from pathlib import Path

import pytest

from ordertone.telemetry import RunTelemetryLogger, append_jsonl, read_jsonl


def test_append_and_read_jsonl(tmp_path: Path):
    path = tmp_path / "nested" / "log.jsonl"
    append_jsonl(path, {"a": 1})
    append_jsonl(path, {"b": "two"})
    with path.open("a", encoding="utf-8") as handle:
        handle.write("\nnot json\n")
    assert read_jsonl(path) == [{"a": 1}, {"b": "two"}]


def test_run_logger_writes_run_and_steps(tmp_path: Path):
    log_path = tmp_path / "runs.jsonl"
    with RunTelemetryLogger(
        log_path=log_path,
        solver="greedy-contrast",
        config={"radius": 2},
        context={"command": "test"},
        step_interval=1,
    ) as logger:
        logger.log_step(step=1, colored=10, elapsed_ms=1.23456)
        logger.log_step(step=2, colored=5, elapsed_ms=0.5)
        logger.finalize(metrics={"orders": 15})

    record = json.loads(log_path.read_text(encoding="utf-8").strip())
    assert record["record_type"] == "run"
    assert record["status"] == "ok"
    assert record["metrics"] == {"orders": 15}
    assert record["config"] == {"radius": 2}
    assert record["context"] == {"command": "test"}

    assert logger.steps_path is not None
    steps = read_jsonl(logger.steps_path)
    assert [step["colored"] for step in steps] == [10, 5]
    assert steps[0]["elapsed_ms"] == 1.235
    assert all(step["run_id"] == logger.run_id for step in steps)


def test_run_logger_records_errors(tmp_path: Path):
    log_path = tmp_path / "runs.jsonl"
    with pytest.raises(RuntimeError):
        with RunTelemetryLogger(log_path=log_path, solver="greedy-contrast"):
            raise RuntimeError("boom")
    record = read_jsonl(log_path)[0]
    assert record["status"] == "error"
    assert "boom" in record["error"]


def test_run_logger_without_steps(tmp_path: Path):
    log_path = tmp_path / "runs.jsonl"
    with RunTelemetryLogger(log_path=log_path, solver="greedy-contrast") as logger:
        logger.log_step(step=1, colored=3, elapsed_ms=0.1)
    assert logger.steps_path is None
    assert not (tmp_path / "steps").exists()
    assert len(read_jsonl(log_path)) == 1
