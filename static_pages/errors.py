"""Exception hierarchy raised by the static site build.

Every stage of a build (configuration loading, cloning, conversion, template
rendering, and filesystem writes) wraps the underlying library or OS error in
one of these types. Nothing is retried; callers either let the error abort the
run or inspect it, as the CLI does before exiting with a non-zero status.
"""

from __future__ import annotations


class StaticSiteError(RuntimeError):
    """Base class for all errors raised while building a site."""


class ConfigLoadError(StaticSiteError):
    """Raised when ``config.json`` is missing, unreadable, or malformed."""


class TypeMismatchError(StaticSiteError):
    """Raised when a configuration value is not a string, map, or list of strings."""

    def __init__(self, key: str, value: object) -> None:
        self.key = key
        self.value = value
        kind = type(value).__name__
        super().__init__(
            f"Config value for '{key}' has unsupported type {kind}; expected a "
            "string, an object of strings, or an array of strings."
        )


class MissingConverterError(StaticSiteError):
    """Raised when the external markdown command cannot be found."""


class TemplateParseError(StaticSiteError):
    """Raised when a ``.template`` file fails to parse."""


class SourceReadError(StaticSiteError):
    """Raised when a page or static file cannot be read."""


class DestinationWriteError(StaticSiteError):
    """Raised when output cannot be written or the output directory cleared."""


class ConversionFailedError(StaticSiteError):
    """Raised when the markup converter fails on a page body."""


class TemplateNotFoundError(StaticSiteError):
    """Raised when a page selects a template that was never registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template {name} not found.")


class RenderFailedError(StaticSiteError):
    """Raised when template execution fails, e.g. on a missing key."""


__all__ = [
    "ConfigLoadError",
    "ConversionFailedError",
    "DestinationWriteError",
    "MissingConverterError",
    "RenderFailedError",
    "SourceReadError",
    "StaticSiteError",
    "TemplateNotFoundError",
    "TemplateParseError",
    "TypeMismatchError",
]
