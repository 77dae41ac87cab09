from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, Tuple

from ..core.types import LunarModel, ModelId, PhaseDescriptor, PhaseThreshold


# ============================================================
# SHARED CONSTANTS
# ============================================================

# New moon of 2000 January 6, 18:14 UTC
EPOCH_2000 = datetime(2000, 1, 6, 18, 14, tzinfo=timezone.utc)

# Mean synodic month (days)
SYNODIC_MONTH = 29.53058867

NEW_MOON = PhaseDescriptor("New Moon", "\U0001F311")
WAXING_CRESCENT = PhaseDescriptor("Waxing Crescent", "\U0001F312")
FIRST_QUARTER = PhaseDescriptor("First Quarter", "\U0001F313")
WAXING_GIBBOUS = PhaseDescriptor("Waxing Gibbous", "\U0001F314")
FULL_MOON = PhaseDescriptor("Full Moon", "\U0001F315")
WANING_GIBBOUS = PhaseDescriptor("Waning Gibbous", "\U0001F316")
LAST_QUARTER = PhaseDescriptor("Last Quarter", "\U0001F317")
WANING_CRESCENT = PhaseDescriptor("Waning Crescent", "\U0001F318")

PRINCIPAL_PHASES = (
    NEW_MOON, WAXING_CRESCENT, FIRST_QUARTER, WAXING_GIBBOUS,
    FULL_MOON, WANING_GIBBOUS, LAST_QUARTER, WANING_CRESCENT,
)


def _table(bounds, names) -> Tuple[PhaseThreshold, ...]:
    return tuple(PhaseThreshold(b, p.name, p.glyph) for b, p in zip(bounds, names))


# ============================================================
# MEAN MODEL (literal bucket bounds of the web tracker)
# ============================================================

# Non-uniform upper bounds; the last one sits just under SYNODIC_MONTH
# and the remaining sliver falls through to default_phase.
MEAN_BOUNDS = (
    1.84566, 5.53699, 9.22831, 12.91963, 16.61096,
    20.30228, 23.99361, 27.68493, 29.53058,
)

MEAN = LunarModel(
    id=ModelId("mean", "mean", "1"),
    epoch=EPOCH_2000,
    synodic_month=SYNODIC_MONTH,
    phases=_table(MEAN_BOUNDS, PRINCIPAL_PHASES + (NEW_MOON,)),
    default_phase=NEW_MOON,
    meta={"description": "Mean synodic month, literal tracker thresholds"},
)


# ============================================================
# OCTANTS MODEL (unrounded bounds at odd sixteenths of the cycle)
# ============================================================

OCTANT_BOUNDS = tuple(SYNODIC_MONTH * (2 * k + 1) / 16 for k in range(8)) + (SYNODIC_MONTH,)

OCTANTS = LunarModel(
    id=ModelId("mean", "octants", "1"),
    epoch=EPOCH_2000,
    synodic_month=SYNODIC_MONTH,
    phases=_table(OCTANT_BOUNDS, PRINCIPAL_PHASES + (NEW_MOON,)),
    default_phase=NEW_MOON,
    meta={"description": "Mean synodic month, unrounded bounds at odd sixteenths"},
)


ALL_MODELS: Dict[str, LunarModel] = {
    "mean": MEAN,
    "octants": OCTANTS,
}
