"""Diagnostics package.

- gregorian_drift: legacy day counts vs. the full Gregorian calendar (needs numpy; matplotlib for --plot)
"""

__all__ = ["gregorian_drift"]
