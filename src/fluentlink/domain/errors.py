"""Exceptions raised by the localisation core."""


class FluentError(Exception):
    """Base exception for all fluentlink errors."""


class LocaleNotFoundError(FluentError, LookupError):
    """Raised when a locale code is not registered but resolution is mandatory."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Locale not registered: {code!r}")
        self.code = code


class InvalidConfigurationError(FluentError, ValueError):
    """Raised when the locale/domain catalogue is malformed."""


class ContextStackUnderflowError(FluentError, RuntimeError):
    """Raised when popping past the base frame of a ContextStack."""


class ParentLinkUnavailableError(FluentError, LookupError):
    """Raised when a nested node's link needs its parent's but nothing can supply it."""
