"""Order loading utilities (CSV tables, YAML/JSON record lists)."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any, cast

import pandas as pd
import yaml
from pydantic import TypeAdapter

from ordertone.core.errors import OrderToneValueError
from ordertone.scenario.contract import Order

__all__ = ["ORDER_COLUMNS", "orders_to_frame", "read_csv", "read_orders", "write_orders"]

ORDER_COLUMNS = ("id", "date", "shift", "line", "description")
_REQUIRED_COLUMNS = ("id", "date", "shift")
_ORDER_LIST = TypeAdapter(list[Order])


def read_csv(path: Path) -> pd.DataFrame:
    """Load a CSV file using pandas with UTF-8 defaults."""
    return pd.read_csv(path)


def _as_optional_int(value: object) -> int | None:
    if value is None:
        return None
    if isinstance(value, str):
        stripped = value.strip()
        return int(float(stripped)) if stripped else None
    if pd.isna(cast("Any", value)):
        return None
    return int(cast("Any", value))


def _rows_from_frame(df: pd.DataFrame, source: Path) -> list[dict[str, object]]:
    missing = [column for column in _REQUIRED_COLUMNS if column not in df.columns]
    if missing:
        raise OrderToneValueError(f"{source} is missing required column(s): {', '.join(missing)}")
    rows = cast("list[dict[str, object]]", df.to_dict(orient="records"))
    for row in rows:
        row["line"] = _as_optional_int(row.get("line"))
        description = row.get("description")
        if description is None or (not isinstance(description, str) and pd.isna(cast("Any", description))):
            row["description"] = ""
    return rows


def _rows_from_document(data: Any, source: Path) -> list[dict[str, object]]:
    if isinstance(data, dict):
        data = data.get("orders")
    if not isinstance(data, list):
        raise OrderToneValueError(f"{source} must contain a list of orders (or an 'orders' key)")
    return data


def read_orders(path: str | Path) -> list[Order]:
    """Load orders from ``.csv``, ``.yaml``/``.yml`` or ``.json``.

    CSV files need ``id``, ``date`` and ``shift`` columns; ``line`` and
    ``description`` are optional and blank lines become ``None``.
    """

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        rows = _rows_from_frame(read_csv(path), path)
    elif suffix in {".yaml", ".yml"}:
        rows = _rows_from_document(yaml.safe_load(path.read_text(encoding="utf-8")), path)
    elif suffix == ".json":
        rows = _rows_from_document(json.loads(path.read_text(encoding="utf-8")), path)
    else:
        raise OrderToneValueError(f"Unsupported order file format '{suffix}'. Use CSV, YAML, or JSON.")
    return _ORDER_LIST.validate_python(rows)


def orders_to_frame(orders: Iterable[Order]) -> pd.DataFrame:
    """Tabulate ``orders`` with the canonical column order (nullable integer ``line``)."""
    records = [
        {
            "id": order.id,
            "date": order.date.isoformat(),
            "shift": order.shift,
            "line": order.line,
            "description": order.description,
        }
        for order in orders
    ]
    frame = pd.DataFrame.from_records(records, columns=list(ORDER_COLUMNS))
    frame["line"] = frame["line"].astype("Int64")
    return frame


def write_orders(path: str | Path, orders: Iterable[Order]) -> Path:
    """Write ``orders`` as CSV."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    orders_to_frame(orders).to_csv(path, index=False)
    return path
