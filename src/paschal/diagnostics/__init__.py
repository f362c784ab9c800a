"""Diagnostics package.

- easter_table: Western/Eastern Easter table for a range of years
- conversion_check: Julian -> Gregorian conversion vs. JDN arithmetic
"""

__all__ = ["easter_table", "conversion_check"]
