"""Closed-form photographic geometry."""

from .geometry import (
    STANDARD_APERTURES,
    circle_of_confusion,
    depth_of_field,
    diagonal,
)

__all__ = [
    "STANDARD_APERTURES",
    "circle_of_confusion",
    "depth_of_field",
    "diagonal",
]
