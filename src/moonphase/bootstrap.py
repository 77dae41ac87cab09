from __future__ import annotations
from moonphase.core.model import ModelRegistry
from moonphase.engines.presets import ALL_MODELS

def build_registry() -> ModelRegistry:
    return ModelRegistry(dict(ALL_MODELS))
