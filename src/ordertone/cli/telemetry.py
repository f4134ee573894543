from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from ordertone.telemetry import read_jsonl

console = Console()
telemetry_app = typer.Typer(
    add_completion=False, no_args_is_help=True, help="Coloring run telemetry utilities."
)


def _run_id(raw: str) -> str | None:
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError:
        return None
    if isinstance(payload, dict) and isinstance(payload.get("run_id"), str):
        return payload["run_id"]
    return None


@telemetry_app.command("prune")
def prune(
    telemetry_log: Path = typer.Argument(
        Path("telemetry/runs.jsonl"), dir_okay=False, help="Telemetry JSONL file to prune."
    ),
    keep: int = typer.Option(1000, "--keep", "-k", min=1, help="Most-recent records to retain."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Preview without modifying files."),
) -> None:
    """Trim the run log to the newest records and delete orphaned pass logs."""
    if not telemetry_log.exists():
        typer.echo(f"No telemetry log found at {telemetry_log}. Nothing to prune.")
        raise typer.Exit(0)

    lines = [line for line in telemetry_log.read_text(encoding="utf-8").splitlines() if line]
    if len(lines) <= keep:
        typer.echo(f"Telemetry log contains {len(lines)} record(s); nothing to prune (keep={keep}).")
        raise typer.Exit(0)

    kept, removed = lines[-keep:], lines[:-keep]
    removed_ids = {run_id for run_id in map(_run_id, removed) if run_id}
    steps_root = telemetry_log.parent / "steps"
    if dry_run:
        typer.echo(f"[dry-run] Would keep {len(kept)} record(s) and prune {len(removed)}.")
        raise typer.Exit(0)

    tmp_path = telemetry_log.with_suffix(telemetry_log.suffix + ".tmp")
    tmp_path.write_text("\n".join(kept) + "\n", encoding="utf-8")
    tmp_path.replace(telemetry_log)

    steps_removed = 0
    for run_id in removed_ids:
        step_path = steps_root / f"{run_id}.jsonl"
        if step_path.exists():
            step_path.unlink()
            steps_removed += 1
    typer.echo(
        f"Pruned {len(removed)} record(s); kept {len(kept)}. Removed {steps_removed} step log(s)."
    )


@telemetry_app.command("show")
def show(
    telemetry_log: Path = typer.Argument(
        Path("telemetry/runs.jsonl"), exists=True, dir_okay=False, help="Telemetry JSONL file."
    ),
    limit: int = typer.Option(10, "--limit", "-n", min=1, help="Number of recent runs to show."),
) -> None:
    """Print the most recent coloring runs."""
    runs = [record for record in read_jsonl(telemetry_log) if record.get("record_type") == "run"]
    table = Table(title=f"Recent runs ({telemetry_log})")
    for column in ("Run", "Status", "Orders", "New", "Edges", "ms"):
        table.add_column(column)
    for record in runs[-limit:]:
        metrics = record.get("metrics") or {}
        elapsed = metrics.get("elapsed_ms")
        table.add_row(
            str(record.get("run_id", ""))[:8],
            str(record.get("status", "")),
            str(metrics.get("orders", "")),
            str(metrics.get("new_orders", "")),
            str(metrics.get("edges", "")),
            f"{elapsed:.2f}" if isinstance(elapsed, (int, float)) else "",
        )
    console.print(table)
