from __future__ import annotations

from dataclasses import asdict
from datetime import date
from pathlib import Path
from typing import Any, Dict

import typer
from rich.console import Console

from ordertone.config import read_config_mapping
from ordertone.core.errors import OrderToneValueError
from ordertone.scenario.synthetic import SyntheticScheduleSpec, generate_orders

console = Console()
synth_app = typer.Typer(no_args_is_help=True, help="Generate synthetic order schedules.")


def _parse_lines(value: str) -> tuple[int, ...]:
    try:
        return tuple(int(part) for part in value.split(",") if part.strip())
    except ValueError as exc:
        raise typer.BadParameter("Expected a comma separated list of line numbers.") from exc


def _load_config(path: Path) -> Dict[str, Any]:
    try:
        return read_config_mapping(path)
    except OrderToneValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _merge_spec(base: SyntheticScheduleSpec, overrides: Dict[str, Any]) -> SyntheticScheduleSpec:
    data = asdict(base)
    for key, value in overrides.items():
        if key not in data:
            raise typer.BadParameter(f"Unknown synthetic schedule field '{key}'.")
        if key == "lines":
            data[key] = _parse_lines(value) if isinstance(value, str) else tuple(int(v) for v in value)
        elif key == "start_date":
            data[key] = value if isinstance(value, date) else date.fromisoformat(str(value))
        else:
            data[key] = value
    return SyntheticScheduleSpec(**data)


def _describe(summary: Dict[str, Any]) -> None:
    console.print("[bold]Synthetic Schedule Summary[/bold]")
    for key in ("orders", "placed", "unassigned", "days", "lines", "seed"):
        console.print(f"{key.capitalize()}: {summary.get(key)}")


@synth_app.command("generate")
def generate_synthetic_schedule(
    output: Path = typer.Argument(
        Path("examples/synthetic/orders.csv"), dir_okay=False, help="CSV file to write."
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Optional config file (YAML/TOML/JSON) overriding SyntheticScheduleSpec fields.",
    ),
    days: int | None = typer.Option(None, "--days", min=1, help="Schedule length in days."),
    seed: int | None = typer.Option(None, "--seed", help="RNG seed (defaults to 123)."),
    fill: float | None = typer.Option(None, "--fill", min=0.0, max=1.0, help="Cell fill probability."),
    stack: int | None = typer.Option(None, "--stack", min=1, help="Maximum orders per filled cell."),
    unassigned: float | None = typer.Option(
        None, "--unassigned", min=0.0, max=1.0, help="Share of orders without a line."
    ),
    lines: str | None = typer.Option(None, "--lines", help="Comma separated line numbers."),
    overwrite: bool = typer.Option(False, "--overwrite", help="Replace an existing file."),
    preview: bool = typer.Option(False, "--preview", help="Print summary without writing files."),
) -> None:
    overrides: Dict[str, Any] = {}
    if config is not None:
        loaded = _load_config(config)
        if not isinstance(loaded, dict):
            raise typer.BadParameter("Config file must yield a mapping/dictionary.")
        overrides.update(loaded)
    cli_overrides = {
        "num_days": days,
        "seed": seed,
        "fill_ratio": fill,
        "max_stack": stack,
        "unassigned_ratio": unassigned,
        "lines": lines,
    }
    overrides.update({key: value for key, value in cli_overrides.items() if value is not None})

    try:
        spec = _merge_spec(SyntheticScheduleSpec(), overrides)
        bundle = generate_orders(spec)
    except (ValueError, TypeError) as exc:
        console.print(f"[red]Invalid synthetic schedule:[/red] {exc}")
        raise typer.Exit(1) from exc
    summary = bundle.summary()

    if preview:
        _describe(summary)
        return

    if output.exists() and not overwrite:
        console.print(f"[red]File {output} already exists. Use --overwrite to replace.[/red]")
        raise typer.Exit(1)
    bundle.write(output)
    console.print(f"[green]Synthetic schedule written to {output}[/green]")
    _describe(summary)
