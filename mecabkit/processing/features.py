"""
Feature parser: one analyser line to a surface and its raw feature fields.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from mecabkit.core.constants import FIELD_DELIMITER, SURFACE_SEPARATOR
from mecabkit.core.errors import MalformedLineError
from mecabkit.schemas.rules import field_at

__all__ = ["field_at", "parse_line"]


def parse_line(line: str, line_number: Optional[int] = None) -> Tuple[str, List[str]]:
    """Split ``surface<TAB>f0,f1,...`` into ``(surface, [f0, f1, ...])``.

    Only the first tab separates the surface; commas are never escaped by
    MeCab, so the feature string is split on every one of them.

    Raises:
        MalformedLineError: If the line has no tab.
    """
    surface, separator, feature_string = line.partition(SURFACE_SEPARATOR)
    if not separator:
        raise MalformedLineError(line, line_number)
    return surface, feature_string.split(FIELD_DELIMITER)
