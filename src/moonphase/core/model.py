from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Dict, List

from .errors import DuplicateModelError, UnknownModelError
from .types import LunarModel

logger = logging.getLogger(__name__)

@dataclass
class ModelRegistry:
    _models: Dict[str, LunarModel]

    def get(self, name: str) -> LunarModel:
        if name not in self._models:
            raise UnknownModelError(f"Unknown model '{name}'. Available: {sorted(self._models)}")
        return self._models[name]

    def list(self) -> List[str]:
        return sorted(self._models.keys())

    def register(self, name: str, model: LunarModel, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._models):
            raise DuplicateModelError(f"Model '{name}' already exists. Use overwrite=True to replace.")
        logger.debug("registering lunar model %r (%s)", name, model.id)
        self._models[name] = model
