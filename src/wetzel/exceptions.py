"""Custom exceptions for wetzel."""


class WetzelError(Exception):
    """Base exception for all wetzel errors."""

    pass


class ConfigError(WetzelError):
    """Raised when a configuration file cannot be read or validated."""

    pass


class UnknownStyleError(WetzelError):
    """Raised when a style name has no registered implementation."""

    pass
