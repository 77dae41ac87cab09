"""Diagnostics package.

- phase_month: always available, plain-text month grid
- age_plot: requires the diagnostics extras (numpy + matplotlib)
"""

__all__ = ["phase_month", "age_plot"]
