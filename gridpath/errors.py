"""
gridpath/errors.py
------------------
Exceptions raised by the planner.

Only malformed input is an error. "No path" is a normal outcome and is
returned as an empty list, never raised.
"""


class InvalidInput(ValueError):
    """Bad grid, bad coordinates or bad planner settings. Raised before any search work."""
