from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence, Union

from ..core.types import DayPhase
from .labels import long_label, short_label
from .reveal import reveal_schedule

logger = logging.getLogger(__name__)

TEMPLATE = "page.html.j2"
TITLE = "Moon Phase Tracker"


def _need_jinja2():
    try:
        import jinja2
        return jinja2
    except ImportError as e:
        raise RuntimeError('Need jinja2. Install: pip install "moonphase[html]"') from e


def _environment():
    jinja2 = _need_jinja2()
    return jinja2.Environment(
        loader=jinja2.PackageLoader("moonphase", "templates"),
        autoescape=jinja2.select_autoescape(["html", "j2"]),
        keep_trailing_newline=True,
    )


def render_page(today: DayPhase, days: Sequence[DayPhase], *, title: str = TITLE) -> str:
    """
    Static page: today's card plus a hidden forecast grid that the
    "Show Next 7 Days" button reveals item by item.
    """
    steps = reveal_schedule(len(days))
    items = [
        {
            "glyph": d.glyph,
            "name": d.name,
            "label": short_label(d.instant.date()),
            "insert_ms": s.insert_ms,
            "fade_ms": s.fade_ms,
        }
        for d, s in zip(days, steps)
    ]
    tpl = _environment().get_template(TEMPLATE)
    return tpl.render(
        title=title,
        today={
            "glyph": today.glyph,
            "name": today.name,
            "label": long_label(today.instant.date()),
        },
        forecast=items,
        forecast_days=len(items),
    )


def write_page(out: Union[str, Path], today: DayPhase, days: Sequence[DayPhase], *, title: str = TITLE) -> Path:
    out = Path(out)
    html = render_page(today, days, title=title)
    out.write_text(html, encoding="utf-8")
    logger.debug("wrote %d bytes to %s", len(html), out)
    return out
