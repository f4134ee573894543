"""Context manager for capturing coloring run telemetry."""

from __future__ import annotations

import time
from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping
from uuid import uuid4

from .jsonl import append_jsonl


def _iso_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


@dataclass(slots=True)
class RunTelemetryLogger(AbstractContextManager["RunTelemetryLogger"]):
    """Record high-level telemetry for one coloring run.

    Parameters
    ----------
    log_path:
        JSONL path where run records are appended.
    solver:
        Algorithm identifier (``"greedy-contrast"`` for the timeline colorer).
    source:
        Human-readable description of the order source (file path, view name).
    config:
        Dictionary capturing the coloring configuration (radius, shift count, ...).
    context:
        Additional metadata (CLI command, date window, selected lines).
    step_interval:
        Pass logging cadence. ``None`` or ``<= 0`` disables per-pass records.
    """

    log_path: Path
    solver: str
    source: str | None = None
    config: Mapping[str, Any] | None = None
    context: Mapping[str, Any] | None = None
    step_interval: int | None = None
    schema_version: str = "1.0"
    run_id: str = field(default_factory=lambda: uuid4().hex, init=False)
    _start_time: float = field(default=0.0, init=False)
    _start_timestamp: str | None = field(default=None, init=False)
    _closed: bool = field(default=False, init=False)
    _steps_path: Path | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.log_path = Path(self.log_path)
        if self.step_interval and self.step_interval > 0:
            self._steps_path = self.log_path.parent / "steps" / f"{self.run_id}.jsonl"

    def __enter__(self) -> "RunTelemetryLogger":
        self._start_time = time.perf_counter()
        self._start_timestamp = _iso_now()
        if self._steps_path:
            self._steps_path.parent.mkdir(parents=True, exist_ok=True)
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type:
            self._close(status="error", metrics=None, extra=None, error=repr(exc))
            return False
        self._close(status="ok", metrics=None, extra=None, error=None)
        return False

    def log_step(self, *, step: int, colored: int, elapsed_ms: float) -> None:
        """Persist a per-pass snapshot when step logging is enabled."""
        if not self._steps_path:
            return
        if step != 1 and step % self.step_interval:
            return
        record = {
            "record_type": "step",
            "schema_version": self.schema_version,
            "run_id": self.run_id,
            "timestamp": _iso_now(),
            "step": step,
            "colored": colored,
            "elapsed_ms": round(elapsed_ms, 3),
        }
        append_jsonl(self._steps_path, record)

    def elapsed(self) -> float:
        """Return the elapsed wall-clock seconds since the run started."""
        return time.perf_counter() - self._start_time

    @property
    def steps_path(self) -> Path | None:
        return self._steps_path

    def finalize(
        self,
        *,
        status: str = "ok",
        metrics: Mapping[str, Any] | None = None,
        extra: Mapping[str, Any] | None = None,
        error: str | None = None,
    ) -> None:
        """Write the terminal run record."""
        self._close(status=status, metrics=metrics, extra=extra, error=error)

    def _close(
        self,
        *,
        status: str,
        metrics: Mapping[str, Any] | None,
        extra: Mapping[str, Any] | None,
        error: str | None,
    ) -> None:
        if self._closed:
            return
        duration = self.elapsed() if self._start_time else 0.0
        record = {
            "record_type": "run",
            "schema_version": self.schema_version,
            "run_id": self.run_id,
            "solver": self.solver,
            "source": self.source,
            "status": status,
            "metrics": dict(metrics or {}),
            "config": dict(self.config or {}),
            "context": dict(self.context or {}),
            "extra": dict(extra or {}),
            "error": error,
            "started_at": self._start_timestamp,
            "finished_at": _iso_now(),
            "duration_seconds": round(duration, 3),
        }
        append_jsonl(self.log_path, record)
        self._closed = True


__all__ = ["RunTelemetryLogger"]
