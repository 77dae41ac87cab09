"""moonphase public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    moon_age,
    phase_of,
    day_phase,
    today,
    forecast,
    list_models,
    get_model,
    model_info,
    register_model,
    attributes_available,
)
from .core.types import DayPhase, LunarModel, ModelId, PhaseDescriptor, PhaseThreshold
from .core.errors import MoonPhaseError
from .engines.age import compute_age
from .engines.classify import classify

__all__ = [
    "moon_age",
    "phase_of",
    "day_phase",
    "today",
    "forecast",
    "list_models",
    "get_model",
    "model_info",
    "register_model",
    "attributes_available",
    "compute_age",
    "classify",
    "DayPhase",
    "LunarModel",
    "ModelId",
    "PhaseDescriptor",
    "PhaseThreshold",
    "MoonPhaseError",
]
