from __future__ import annotations
import math
from typing import Any, Dict

from .registry import register_attribute, jdn

def weekday(info, model) -> Dict[str, Any]:
    # Convention: 0=Mon..6=Sun (ISO-like).
    return {"weekday": int(jdn(info) % 7)}

def cycle_fraction(info, model) -> Dict[str, Any]:
    return {"cycle_fraction": info.age / model.synodic_month}

def illumination(info, model) -> Dict[str, Any]:
    # Mean-cycle approximation: the phase angle advances uniformly.
    theta = 2.0 * math.pi * info.age / model.synodic_month
    return {"illumination": (1.0 - math.cos(theta)) / 2.0}

def countdown(info, model) -> Dict[str, Any]:
    L = model.synodic_month
    to_full = (L / 2.0 - info.age) % L
    to_new = L - info.age
    return {"days_to_full": to_full, "days_to_new": to_new}

register_attribute("weekday", weekday)
register_attribute("cycle_fraction", cycle_fraction)
register_attribute("illumination", illumination)
register_attribute("countdown", countdown)
