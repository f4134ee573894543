from __future__ import annotations

import statistics
import time
from datetime import datetime
from pathlib import Path

import pandas as pd
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from ordertone.cli.synthetic import synth_app
from ordertone.cli.telemetry import telemetry_app
from ordertone.coloring import ColorCache, assign_colors, assign_colors_with_stats, project_orders
from ordertone.config import ColoringConfig, load_config
from ordertone.core.errors import OrderToneValueError
from ordertone.palette import CONTRAST_MATRIX, PALETTE, palette_color
from ordertone.scenario.io import read_orders
from ordertone.scenario.synthetic import SyntheticScheduleSpec, generate_orders
from ordertone.scenario.views import filter_orders
from ordertone.scheduling.timeline import DateRange

app = typer.Typer(add_completion=False, no_args_is_help=True)
app.add_typer(synth_app, name="synth")
app.add_typer(telemetry_app, name="telemetry")
console = Console()

_DATE_FORMATS = ["%Y-%m-%d"]
_PREVIEW_ROWS = 50


def _resolve_config(config: Path | None) -> ColoringConfig:
    if config is None:
        return ColoringConfig()
    return load_config(config)


def _resolve_window(start: datetime | None, end: datetime | None) -> DateRange | None:
    if start is None and end is None:
        return None
    if start is None or end is None:
        raise OrderToneValueError("--from and --to must be given together")
    return DateRange(start=start.date(), end=end.date())


@app.command()
def assign(
    orders_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Orders CSV/YAML/JSON."),
    config: Path | None = typer.Option(None, "--config", help="Coloring config (YAML/TOML/JSON)."),
    start: datetime | None = typer.Option(None, "--from", formats=_DATE_FORMATS, help="First visible day."),
    end: datetime | None = typer.Option(None, "--to", formats=_DATE_FORMATS, help="Last visible day."),
    line: list[int] | None = typer.Option(None, "--line", "-l", help="Restrict to a production line (repeatable)."),
    out: Path | None = typer.Option(None, "--out", help="Write id,color_index,background,border,text CSV."),
    telemetry_log: Path | None = typer.Option(
        None, "--telemetry-log", help="Append a JSONL run record to this file."
    ),
    show_all: bool = typer.Option(False, "--all", help="Print every order instead of a preview."),
):
    """Assign palette colors to the orders in a file and print the result."""
    try:
        cfg = _resolve_config(config)
        window = _resolve_window(start, end)
        orders = filter_orders(read_orders(orders_path), window, line or None)
    except (OrderToneValueError, ValidationError, FileNotFoundError) as exc:
        console.print(f"[red]Invalid input:[/red] {exc}")
        raise typer.Exit(1) from exc

    colors, stats = assign_colors_with_stats(
        orders,
        ColorCache(),
        config=cfg,
        telemetry_log=telemetry_log,
        telemetry_source=str(orders_path),
        telemetry_context={
            "command": "assign",
            "window": window.model_dump(mode="json") if window else None,
            "lines": list(line or []),
        },
    )

    table = Table(title=f"Order colors: {orders_path.name}")
    for column in ("Order", "Date", "Shift", "Line", "Color", "Background"):
        table.add_column(column)
    shown = orders if show_all else orders[:_PREVIEW_ROWS]
    for order in shown:
        color = palette_color(colors[order.id])
        table.add_row(
            str(order.id),
            order.date.isoformat(),
            str(order.shift),
            "-" if order.line is None else str(order.line),
            str(colors[order.id]),
            f"[on {color.background}]  [/] {color.background}",
        )
    console.print(table)
    if len(shown) < len(orders):
        console.print(f"[dim]... {len(orders) - len(shown)} more order(s); use --all to list them.[/dim]")
    console.print(
        f"Colored {stats.orders} order(s): {stats.unassigned_orders} off-grid, "
        f"{stats.edges} proximity edge(s), {stats.collisions} collision cell(s) "
        f"in {stats.elapsed_ms:.2f} ms."
    )

    if out is not None:
        rows = []
        for order in orders:
            color = palette_color(colors[order.id])
            rows.append(
                {
                    "id": order.id,
                    "color_index": colors[order.id],
                    "background": color.background,
                    "border": color.border,
                    "text": color.text,
                }
            )
        out.parent.mkdir(parents=True, exist_ok=True)
        pd.DataFrame(rows, columns=["id", "color_index", "background", "border", "text"]).to_csv(
            out, index=False
        )
        console.print(f"Saved to {out}")


@app.command()
def palette(
    matrix: bool = typer.Option(True, "--matrix/--no-matrix", help="Also print the contrast matrix."),
):
    """Show the palette entries and their pairwise contrast scores."""
    table = Table(title="Palette")
    for column in ("Index", "Name", "Background", "Border", "Text"):
        table.add_column(column)
    for idx, color in enumerate(PALETTE):
        table.add_row(
            str(idx),
            color.name,
            f"[on {color.background}]  [/] {color.background}",
            color.border,
            color.text,
        )
    console.print(table)
    if not matrix:
        return
    contrast_table = Table(title="Contrast (0-10)")
    contrast_table.add_column("")
    for idx in range(len(PALETTE)):
        contrast_table.add_column(str(idx), justify="right")
    for idx, row in enumerate(CONTRAST_MATRIX):
        contrast_table.add_row(str(idx), *(str(value) for value in row))
    console.print(contrast_table)


@app.command()
def bench(
    days: int = typer.Option(60, "--days", min=1, help="Schedule length in days."),
    seed: int = typer.Option(123, "--seed", help="RNG seed for the synthetic schedule."),
    fill: float = typer.Option(0.7, "--fill", min=0.0, max=1.0, help="Probability a cell holds orders."),
    repeats: int = typer.Option(5, "--repeats", min=1, help="Timed repetitions."),
    config: Path | None = typer.Option(None, "--config", help="Coloring config (YAML/TOML/JSON)."),
):
    """Time ``assign_colors`` on a synthetic day x shift x line schedule."""
    try:
        cfg = _resolve_config(config)
    except (OrderToneValueError, ValidationError, FileNotFoundError) as exc:
        console.print(f"[red]Invalid config:[/red] {exc}")
        raise typer.Exit(1) from exc
    bundle = generate_orders(SyntheticScheduleSpec(num_days=days, fill_ratio=fill, seed=seed))
    projection = project_orders(bundle.orders, shift_count=cfg.shift_count)

    timings: list[float] = []
    for _ in range(repeats):
        started = time.perf_counter()
        assign_colors(bundle.orders, config=cfg)
        timings.append((time.perf_counter() - started) * 1000.0)

    table = Table(title="assign_colors benchmark")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Orders", str(len(bundle.orders)))
    table.add_row("Grid rows", str(len(projection.line_rank)))
    table.add_row("Repeats", str(repeats))
    table.add_row("Min (ms)", f"{min(timings):.3f}")
    table.add_row("Mean (ms)", f"{statistics.fmean(timings):.3f}")
    table.add_row("Max (ms)", f"{max(timings):.3f}")
    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
