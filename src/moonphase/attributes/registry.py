from __future__ import annotations
from typing import Any, Callable, Dict, Sequence

from ..core.errors import UnknownAttributeError
from ..core.types import DayPhase, LunarModel
from ..core.time import date_to_jdn

AttrFunc = Callable[[DayPhase, LunarModel], Dict[str, Any]]
_REGISTRY: Dict[str, AttrFunc] = {}

def register_attribute(name: str, fn: AttrFunc) -> None:
    _REGISTRY[name] = fn

def list_attributes() -> list[str]:
    return sorted(_REGISTRY)

def compute_attributes(info: DayPhase, model: LunarModel, names: Sequence[str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for name in names:
        if name not in _REGISTRY:
            raise UnknownAttributeError(f"Unknown attribute '{name}'. Available: {sorted(_REGISTRY)}")
        out.update(_REGISTRY[name](info, model))
    return out

# helper for attribute implementations
def jdn(info: DayPhase) -> int:
    return date_to_jdn(info.instant.date())
