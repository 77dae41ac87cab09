from __future__ import annotations

from typing import Optional

from ..core.types import LunarModel, PhaseDescriptor
from .presets import MEAN


def phase_index(age: float, *, model: LunarModel = MEAN) -> Optional[int]:
    """Index of the first bucket whose upper bound is >= age, or None."""
    for i, p in enumerate(model.phases):
        if age <= p.threshold:
            return i
    return None


def classify(age: float, *, model: LunarModel = MEAN) -> PhaseDescriptor:
    """
    Map a moon age (days) to its named phase.

    Buckets are scanned in ascending order and the first upper bound that
    is >= age wins. Ages beyond the last bound get model.default_phase.
    """
    i = phase_index(age, model=model)
    if i is None:
        return model.default_phase
    return model.phases[i].descriptor
