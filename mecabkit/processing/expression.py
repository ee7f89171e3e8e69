"""
Expression decomposition for mecab-ko-dic compound fields.

Korean analyses of agglutinated words carry their constituent morphemes in
the last feature field, e.g. ``가/VV/*+았/EP/*``: ``+`` separates morphemes
and each morpheme is ``surface/tag/semantic class``.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from mecabkit.core.constants import EXPRESSION_DELIMITER, EXPRESSION_PART_DELIMITER, PLACEHOLDER


class ExpressionToken(BaseModel):
    """One morpheme of a decomposed Korean expression."""

    model_config = {"frozen": True}

    morpheme: str
    pos: Optional[str] = None
    semantic_class: Optional[str] = None


def _present(value: Optional[str]) -> Optional[str]:
    if value is None or value == PLACEHOLDER or value == "":
        return None
    return value


def parse_segment(segment: str) -> ExpressionToken:
    """Parse ``morpheme/tag/class`` into an ExpressionToken.

    The split runs from the right so a morpheme that is itself a slash
    (``//SC/*``) keeps its surface.
    """
    parts = segment.split(EXPRESSION_PART_DELIMITER)
    if len(parts) > 3:
        parts = segment.rsplit(EXPRESSION_PART_DELIMITER, 2)
    morpheme = parts[0]
    pos = parts[1] if len(parts) > 1 else None
    semantic_class = parts[2] if len(parts) > 2 else None
    return ExpressionToken(
        morpheme=morpheme,
        pos=_present(pos),
        semantic_class=_present(semantic_class),
    )


def decompose_expression(field: Optional[str]) -> List[ExpressionToken]:
    """Split a compound expression field into its morphemes, left to right.

    Args:
        field: Raw expression field, e.g. ``가/JKS+는/JX``.

    Returns:
        ExpressionTokens in surface order; empty when the field is absent.
    """
    if field is None or field == PLACEHOLDER or not field:
        return []
    return [parse_segment(segment) for segment in field.split(EXPRESSION_DELIMITER) if segment]
