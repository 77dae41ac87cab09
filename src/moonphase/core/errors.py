class MoonPhaseError(Exception):
    """Base error."""

class InvalidModelError(MoonPhaseError, ValueError):
    """Raised when a lunar model's constants or phase table are inconsistent."""

class UnknownModelError(MoonPhaseError, KeyError):
    """Raised when a model name is not in the registry."""

class UnknownAttributeError(MoonPhaseError, KeyError):
    """Raised when an attribute name is not registered."""

class DateParseError(MoonPhaseError, ValueError):
    """Raised when a date/datetime string cannot be parsed."""

class InvalidArgumentError(MoonPhaseError, ValueError):
    """Raised for out-of-range arguments (e.g. a non-positive forecast length)."""

class DuplicateModelError(MoonPhaseError, KeyError):
    """Raised when registering a model name that is already taken."""
