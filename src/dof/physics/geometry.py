"""Format geometry and depth-of-field formulas.

All lengths are in millimeters. Values are evaluated as IEEE doubles through
numpy so degenerate inputs (zero focal length) yield inf or nan instead of
raising.
"""

from __future__ import annotations

import numpy as np

# Acceptable blur circle on a 35 mm frame.
REFERENCE_COC_MM = 0.025
REFERENCE_WIDTH_MM = 36.0
REFERENCE_HEIGHT_MM = 24.0

# Full and third stops, https://en.wikipedia.org/wiki/F-number
STANDARD_APERTURES: tuple[float, ...] = (
    1.0, 1.1, 1.2,
    1.4, 1.6, 1.8,
    2.0, 2.2, 2.5,
    2.8, 3.2, 3.6,
    4.0, 4.5, 5.0,
    5.6, 6.4, 7.1,
    8.0, 9.0, 10.0,
    11.0, 13.0, 14.0,
    16.0, 18.0, 20.0,
    22.0, 25.0, 29.0,
    32.0, 36.0, 40.0,
    45.0, 51.0,
)


def diagonal(width_mm: float, height_mm: float) -> float:
    """Euclidean diagonal of a width x height frame."""
    return float(np.sqrt(width_mm * width_mm + height_mm * height_mm))


def circle_of_confusion(width_mm: float, height_mm: float) -> float:
    """
    Circle of confusion for a frame, scaled linearly by diagonal.

    The 35 mm frame maps to exactly 0.025 mm; every other frame gets the
    same blur circle relative to its diagonal.

    Args:
        width_mm: Frame width
        height_mm: Frame height

    Returns:
        Circle of confusion in millimeters
    """
    basis = diagonal(REFERENCE_WIDTH_MM, REFERENCE_HEIGHT_MM)
    return diagonal(width_mm, height_mm) / basis * REFERENCE_COC_MM


def depth_of_field(
    focal_length_mm: float,
    aperture: float,
    focus_distance_mm: float,
    coc_mm: float,
) -> float:
    """
    Total depth of field, https://en.wikipedia.org/wiki/Depth_of_field

        dof = 2 * s^2 * N * c / f^2

    No range checks are applied to the inputs.

    Args:
        focal_length_mm: Lens focal length f
        aperture: f-number N
        focus_distance_mm: Subject distance s
        coc_mm: Circle of confusion c

    Returns:
        Depth of field in millimeters (inf or nan for degenerate input)
    """
    f = np.float64(focal_length_mm)
    s = np.float64(focus_distance_mm)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        dof = 2.0 * (s * s) * np.float64(aperture) * np.float64(coc_mm) / (f * f)
    return float(dof)


__all__ = [
    "REFERENCE_COC_MM",
    "REFERENCE_WIDTH_MM",
    "REFERENCE_HEIGHT_MM",
    "STANDARD_APERTURES",
    "diagonal",
    "circle_of_confusion",
    "depth_of_field",
]
