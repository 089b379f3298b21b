"""Fixed table of known sensor and film formats."""

from __future__ import annotations

from collections.abc import Iterator
from types import MappingProxyType

from ..physics.geometry import REFERENCE_HEIGHT_MM, REFERENCE_WIDTH_MM
from .config import SensorFormat
from .errors import FormatNotFoundError

REFERENCE_FORMAT = "35mm"

_TABLE: dict[str, tuple[float, float]] = {
    REFERENCE_FORMAT: (REFERENCE_WIDTH_MM, REFERENCE_HEIGHT_MM),
    "aps-c-canon": (22.5, 15.0),
    "aps-c-fuji": (23.6, 15.6),
    "apx-c-generic": (24.0, 16.0),
    "m43": (18.0, 13.5),
}

FORMATS: MappingProxyType[str, SensorFormat] = MappingProxyType(
    {
        name: SensorFormat(name=name, width_mm=width, height_mm=height)
        for name, (width, height) in _TABLE.items()
    }
)


def lookup_format(name: str) -> SensorFormat | None:
    """Return the named format, or None when unknown."""
    return FORMATS.get(name)


def get_format(name: str) -> SensorFormat:
    """Return the named format.

    Raises:
        FormatNotFoundError: If the name is not in the table
    """
    try:
        return FORMATS[name]
    except KeyError:
        raise FormatNotFoundError(name) from None


def iter_formats() -> Iterator[tuple[str, float, float]]:
    """Yield (name, width_mm, height_mm) for every known format."""
    for name, fmt in FORMATS.items():
        yield name, fmt.width_mm, fmt.height_mm


__all__ = [
    "REFERENCE_FORMAT",
    "FORMATS",
    "lookup_format",
    "get_format",
    "iter_formats",
]
