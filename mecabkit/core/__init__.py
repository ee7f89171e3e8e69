"""
Core Package.

Constants and the exception hierarchy shared by every layer. Models and
configuration live in ``mecabkit.core.models`` and ``mecabkit.core.config``.
"""

from mecabkit.core.errors import (
    ConfigurationError,
    EngineError,
    MalformedLineError,
    MecabKitError,
    UnsupportedEngineError,
)

__all__ = [
    "MecabKitError",
    "ConfigurationError",
    "EngineError",
    "MalformedLineError",
    "UnsupportedEngineError",
]
