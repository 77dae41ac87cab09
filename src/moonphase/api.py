from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional, Sequence

from .core.errors import InvalidArgumentError
from .core.model import ModelRegistry
from .core.time import Instant, add_days, now as _now, to_datetime
from .core.types import DayPhase, LunarModel, PhaseDescriptor
from .attributes.registry import compute_attributes, list_attributes
from .engines.age import compute_age
from .engines.classify import classify

logger = logging.getLogger(__name__)

FORECAST_DAYS = 7

_registry: Optional[ModelRegistry] = None

def set_registry(reg: ModelRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> ModelRegistry:
    if _registry is None:
        raise RuntimeError("Model registry not initialized")
    return _registry

def list_models() -> List[str]:
    return _reg().list()

def get_model(name: str) -> LunarModel:
    return _reg().get(name)

def model_info(name: str) -> Dict[str, Any]:
    return _reg().get(name).info()

def register_model(name: str, model: LunarModel, *, overwrite: bool = False) -> None:
    _reg().register(name, model, overwrite=overwrite)

def moon_age(instant: Instant, *, model: str = "mean") -> float:
    return compute_age(instant, model=_reg().get(model))

def phase_of(age: float, *, model: str = "mean") -> PhaseDescriptor:
    return classify(age, model=_reg().get(model))

def day_phase(
    instant: Optional[Instant] = None,
    *,
    model: str = "mean",
    attributes: Sequence[str] = (),
) -> DayPhase:
    """Age and phase at an instant (host clock when instant is None)."""
    m = _reg().get(model)
    t = _now() if instant is None else to_datetime(instant)
    age = compute_age(t, model=m)
    info = DayPhase(instant=t, model=m.id, age=age, phase=classify(age, model=m))
    logger.debug("%s: age=%.5f phase=%s (model=%s)", t.isoformat(), age, info.name, model)
    if attributes:
        info = replace(info, attributes=compute_attributes(info, m, attributes))
    return info

def today(*, model: str = "mean", attributes: Sequence[str] = ()) -> DayPhase:
    return day_phase(None, model=model, attributes=attributes)

def forecast(
    start: Optional[Instant] = None,
    *,
    days: int = FORECAST_DAYS,
    model: str = "mean",
    attributes: Sequence[str] = (),
) -> List[DayPhase]:
    """
    Phases for the `days` calendar days after `start`, at the same wall-clock
    time. Each day's age is computed from its own instant.
    """
    if isinstance(days, bool) or not isinstance(days, int) or days < 1:
        raise InvalidArgumentError(f"days must be a positive integer, got {days!r}")
    t0 = _now() if start is None else to_datetime(start)
    logger.debug("forecast: %d days after %s", days, t0.isoformat())
    return [
        day_phase(add_days(t0, i), model=model, attributes=attributes)
        for i in range(1, days + 1)
    ]

def attributes_available() -> List[str]:
    return list_attributes()
