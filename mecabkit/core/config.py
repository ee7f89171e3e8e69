"""
Tagger configuration.

Options are validated once, when the configuration is built; an invalid
engine tag or dictionary location raises ``ConfigurationError`` before any
analysis runs.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ValidationError, field_validator, model_validator

from mecabkit.core.constants import (
    DEFAULT_BINARY,
    DEFAULT_ENGINE,
    ERROR_INCOMPLETE_DICTIONARY,
    ERROR_MISSING_DICTIONARY,
    ERROR_UNSUPPORTED_ENGINE,
    REQUIRED_DICTIONARY_FILES,
)
from mecabkit.core.errors import ConfigurationError
from mecabkit.schemas.registry import is_supported


class MeCabConfig(BaseModel):
    """Configuration for a MeCab tagger.

    Attributes:
        engine: ``jp`` for original MeCab, ``ko`` for the Korean patch.
        dict_path: Compiled dictionary directory. None lets the binary use
            the dictionary named in its own ``mecabrc``.
        binary: MeCab executable name or path.
        check_dictionary: Verify that ``dict_path`` holds a compiled
            dictionary.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    engine: str = DEFAULT_ENGINE
    dict_path: Optional[Path] = None
    binary: str = DEFAULT_BINARY
    check_dictionary: bool = True

    @field_validator("engine", mode="before")
    @classmethod
    def _normalize_engine(cls, value: Any) -> Any:
        if value is None:
            return DEFAULT_ENGINE
        if isinstance(value, str):
            engine = value.strip().lower()
            if not is_supported(engine):
                raise ConfigurationError(ERROR_UNSUPPORTED_ENGINE.format(engine=value))
            return engine
        return value

    @field_validator("dict_path", mode="before")
    @classmethod
    def _normalize_dict_path(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            return Path(value).expanduser() if value else None
        if isinstance(value, Path):
            return value.expanduser()
        return value

    @model_validator(mode="after")
    def _check_dictionary(self) -> "MeCabConfig":
        if self.dict_path is not None and self.check_dictionary:
            validate_dictionary(self.dict_path)
        return self

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "MeCabConfig":
        """Build a configuration, reporting every problem as ConfigurationError."""
        values = dict(options or {})
        values.update(kwargs)
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigurationError(str(exc)) from exc


def validate_dictionary(path: Path) -> None:
    """Check that ``path`` is a directory holding a compiled dictionary.

    Raises:
        ConfigurationError: If the directory is missing or incomplete.
    """
    if not path.exists():
        raise ConfigurationError(ERROR_MISSING_DICTIONARY.format(path=path))
    try:
        found = {entry.name for entry in path.iterdir()}
    except OSError as exc:
        raise ConfigurationError(
            ERROR_INCOMPLETE_DICTIONARY.format(files=", ".join(REQUIRED_DICTIONARY_FILES))
        ) from exc
    missing = [name for name in REQUIRED_DICTIONARY_FILES if name not in found]
    if missing:
        raise ConfigurationError(
            ERROR_INCOMPLETE_DICTIONARY.format(files=", ".join(REQUIRED_DICTIONARY_FILES))
        )
