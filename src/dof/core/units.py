"""Unit conversion utilities.

All internal calculations use millimeters. Focus distance is entered in
meters on the command line.
"""


def m_to_mm(value: float | int) -> float:
    """Convert meters to millimeters."""
    return float(value) * 1000.0


def mm_to_m(value: float | int) -> float:
    """Convert millimeters to meters."""
    return float(value) / 1000.0


__all__ = [
    "m_to_mm",
    "mm_to_m",
]
