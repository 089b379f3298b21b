"""Core module with errors, units, config models, format table and logging."""

__all__ = [
    "errors",
    "units",
    "config",
    "formats",
    "logging",
]
