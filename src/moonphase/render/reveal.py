from __future__ import annotations

from dataclasses import dataclass
from typing import List

STAGGER_MS = 100
FADE_DELAY_MS = 10


@dataclass(frozen=True)
class RevealStep:
    index: int
    insert_ms: int  # when the item is added to the grid
    fade_ms: int    # when its glyph starts fading in


def reveal_schedule(n: int, *, stagger_ms: int = STAGGER_MS, fade_delay_ms: int = FADE_DELAY_MS) -> List[RevealStep]:
    """Item i is inserted at i*stagger_ms; its glyph fades in fade_delay_ms later."""
    return [RevealStep(i, i * stagger_ms, i * stagger_ms + fade_delay_ms) for i in range(n)]
