"""Exception types raised by bindgen.

Every failure the package raises on its own derives from `BindgenError` so
callers can catch the whole family at once. Exceptions raised by user
supplied callables (cache initializers, processing steps) are never wrapped.
"""

from typing import Optional


class BindgenError(Exception):
    """Base class for all custom exceptions in bindgen."""

    pass


class ConfigError(BindgenError):
    """Raised when configuration cannot be loaded or validated."""

    pass


class MalformedIdentifierError(BindgenError, ValueError):
    """Raised when a resource identifier lacks its `<namespace>/` prefix.

    Attributes:
        identifier: The offending input.
    """

    def __init__(self, identifier: str, message: Optional[str] = None) -> None:
        self.identifier = identifier
        super().__init__(message or f"Malformed resource identifier: {identifier!r}")


class ProcessingError(BindgenError):
    """Raised when generated output cannot be produced or written."""

    pass


__all__ = [
    "BindgenError",
    "ConfigError",
    "MalformedIdentifierError",
    "ProcessingError",
]
