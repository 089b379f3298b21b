"""Depth-of-field calculator package.

Compute circle of confusion and depth of field for a small table of named
sensor and film formats. Deterministic, single computation per invocation.
"""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "core",
    "physics",
]
