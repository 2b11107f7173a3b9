"""Diagnostics package.

- directive_grid: always available, prints every directive for a fixed timestamp set
- iso_week_sweep: optional (requires the diagnostics extra for numpy)
"""

__all__ = ["directive_grid", "iso_week_sweep"]
