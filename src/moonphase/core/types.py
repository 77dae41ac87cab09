from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Literal, Optional, Tuple

from .errors import InvalidModelError

@dataclass(frozen=True)
class ModelId:
    family: Literal["mean", "custom"]
    name: str
    version: str

@dataclass(frozen=True)
class PhaseDescriptor:
    name: str
    glyph: str

@dataclass(frozen=True)
class PhaseThreshold:
    """Upper bound (days, inclusive) of a named phase bucket."""
    threshold: float
    name: str
    glyph: str

    @property
    def descriptor(self) -> PhaseDescriptor:
        return PhaseDescriptor(self.name, self.glyph)

@dataclass(frozen=True)
class LunarModel:
    """
    Pure data payload for the mean-cycle phase computation.

    epoch          : a known new-moon instant (timezone-aware)
    synodic_month  : mean cycle length in days
    phases         : ascending threshold table
    default_phase  : returned when an age exceeds every threshold
    """
    id: ModelId
    epoch: datetime
    synodic_month: float
    phases: Tuple[PhaseThreshold, ...]
    default_phase: PhaseDescriptor
    meta: Optional[Dict[str, Any]] = None

    def __post_init__(self) -> None:
        if self.epoch.tzinfo is None:
            raise InvalidModelError(f"Model '{self.id.name}': epoch must be timezone-aware")
        if not self.synodic_month > 0:
            raise InvalidModelError(f"Model '{self.id.name}': synodic_month must be positive")
        if not self.phases:
            raise InvalidModelError(f"Model '{self.id.name}': phase table is empty")
        for a, b in zip(self.phases, self.phases[1:]):
            if b.threshold < a.threshold:
                raise InvalidModelError(
                    f"Model '{self.id.name}': thresholds must be non-decreasing "
                    f"({a.name} {a.threshold} > {b.name} {b.threshold})"
                )

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "epoch": self.epoch.isoformat(),
            "synodic_month": self.synodic_month,
            "phases": [(p.threshold, p.name, p.glyph) for p in self.phases],
            "default_phase": self.default_phase,
            "meta": dict(self.meta or {}),
        }

@dataclass(frozen=True)
class DayPhase:
    instant: datetime
    model: ModelId
    age: float
    phase: PhaseDescriptor
    attributes: Optional[Dict[str, Any]] = None

    @property
    def name(self) -> str:
        return self.phase.name

    @property
    def glyph(self) -> str:
        return self.phase.glyph
