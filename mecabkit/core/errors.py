"""
Exception hierarchy for mecabkit.

Every error raised by the package derives from ``MecabKitError`` so callers
can catch the whole family at once.
"""

from __future__ import annotations

from typing import Optional

from mecabkit.core.constants import ERROR_MALFORMED_LINE, ERROR_UNSUPPORTED_ENGINE


class MecabKitError(Exception):
    """Base class for all mecabkit errors."""


class ConfigurationError(MecabKitError):
    """Invalid engine tag, option or dictionary location given at setup."""


class UnsupportedEngineError(MecabKitError):
    """Decoding was requested under an engine tag with no registered schema."""

    def __init__(self, engine: object) -> None:
        self.engine = engine
        super().__init__(ERROR_UNSUPPORTED_ENGINE.format(engine=engine))


class MalformedLineError(MecabKitError):
    """A non-sentinel output line lacks the tab between surface and features."""

    def __init__(self, line: str, line_number: Optional[int] = None) -> None:
        self.line = line
        self.line_number = line_number
        message = ERROR_MALFORMED_LINE.format(line=line)
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class EngineError(MecabKitError):
    """Opaque failure surfaced from the external analysis engine."""
