from __future__ import annotations

from typing import Any, Dict, List, Sequence

from ..core.types import DayPhase
from .labels import long_label, short_label


def _fmt_attr(v: Any) -> str:
    if isinstance(v, float):
        return f"{v:.4f}"
    return str(v)


def today_card(info: DayPhase, *, show_age: bool = True) -> str:
    lines = [
        f"  {info.glyph}  {info.name}",
        f"  {long_label(info.instant.date())}",
    ]
    if show_age:
        lines.append(f"  age {info.age:.2f} d")
    for k, v in (info.attributes or {}).items():
        lines.append(f"  {k} = {_fmt_attr(v)}")
    return "\n".join(lines)


def cell(top: str, mid: str, bot: str, w: int = 16) -> tuple[str, str, str]:
    return (top[:w].center(w), mid[:w].center(w), bot[:w].center(w))


def forecast_row(days: Sequence[DayPhase], *, w: int = 16) -> str:
    """One column per day: glyph, short date, phase name."""
    cells: List[tuple[str, str, str]] = [
        cell(d.glyph, short_label(d.instant.date()), d.name, w) for d in days
    ]
    return "\n".join(" ".join(c[k] for c in cells) for k in range(3))


def as_dict(info: DayPhase) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "date": info.instant.date().isoformat(),
        "instant": info.instant.isoformat(),
        "model": info.model.name,
        "age": info.age,
        "name": info.name,
        "glyph": info.glyph,
    }
    if info.attributes:
        out["attributes"] = dict(info.attributes)
    return out
