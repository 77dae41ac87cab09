"""
moonphase.engines.age
---------------------
Moon age within the current synodic cycle, from a fixed new-moon epoch.
"""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from ..core.time import Instant, elapsed_days
from ..core.types import LunarModel
from .presets import MEAN


def wrap_age(days: float, synodic_month: float) -> float:
    """
    Reduce elapsed days into [0, synodic_month).

    fmod keeps the dividend's sign, so instants before the epoch come out
    negative and are shifted up by one cycle.
    """
    age = math.fmod(days, synodic_month)
    if age < 0:
        age += synodic_month
    # -1e-17 + L rounds to L
    if age >= synodic_month:
        age = 0.0
    return age


def compute_age(instant: Instant, *, model: LunarModel = MEAN) -> float:
    """Days since the most recent mean new moon, in [0, model.synodic_month)."""
    return wrap_age(elapsed_days(instant, model.epoch), model.synodic_month)


def compute_ages(instants: Iterable[Instant], *, model: LunarModel = MEAN) -> np.ndarray:
    """Vectorised compute_age over a sequence of instants."""
    days = np.fromiter((elapsed_days(t, model.epoch) for t in instants), dtype=float)
    ages = np.fmod(days, model.synodic_month)
    ages[ages < 0] += model.synodic_month
    ages[ages >= model.synodic_month] = 0.0
    return ages
