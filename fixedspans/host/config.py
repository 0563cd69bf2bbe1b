from __future__ import annotations

from pathlib import Path
import tomllib
from typing import Any, Mapping

from fixedspans.layout import DEFAULT_WHITESPACE_WEIGHT, JUSTIFY_MODES, JustificationSpec


def load_paragraph_config(path: str | Path, *, target_width: float | None = None) -> JustificationSpec:
    """Reads the `[justify]` table of a TOML file into a JustificationSpec.

    A `target_width` in the file wins over the keyword; one of them is required.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"paragraph config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    table = raw.get("justify", {})
    if not isinstance(table, Mapping):
        raise ValueError("config field `justify` must be a table")
    return parse_justify_table(table, target_width=target_width)


def parse_justify_table(table: Mapping[str, Any], *, target_width: float | None = None) -> JustificationSpec:
    mode = table.get("mode", "whitespace_only")
    if mode not in JUSTIFY_MODES:
        raise ValueError(f"config field `mode` must be one of {', '.join(JUSTIFY_MODES)}")
    width = _coerce_float(table.get("target_width", target_width), "target_width")
    if width is None:
        raise ValueError("config missing required field: target_width")
    weight = _coerce_float(table.get("whitespace_weight", DEFAULT_WHITESPACE_WEIGHT), "whitespace_weight")
    last_line = table.get("justify_last_line", False)
    if not isinstance(last_line, bool):
        raise ValueError("config field `justify_last_line` must be a boolean")
    try:
        return JustificationSpec(
            target_width=width,
            whitespace_weight=DEFAULT_WHITESPACE_WEIGHT if weight is None else weight,
            mode=mode,
            justify_last_line=last_line,
        )
    except ValueError as exc:
        raise ValueError(f"invalid justify config: {exc}") from exc


def _coerce_float(value: object, field_name: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"config field `{field_name}` must be a number")
    return float(value)
