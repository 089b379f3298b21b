"""Custom exception types for the depth-of-field calculator."""


class DofError(Exception):
    """Base exception for all dof errors."""

    pass


class ConfigError(DofError):
    """Runtime configuration errors."""

    pass


class FormatNotFoundError(DofError, KeyError):
    """Requested sensor format is not in the format table."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unknown format {self.name!r}"


class ParseError(DofError, ValueError):
    """A command-line token could not be parsed as a number."""

    def __init__(self, token: str, reason: str):
        super().__init__(token, reason)
        self.token = token
        self.reason = reason

    def __str__(self) -> str:
        return f"cannot parse {self.token}: {self.reason}"


__all__ = [
    "DofError",
    "ConfigError",
    "FormatNotFoundError",
    "ParseError",
]
