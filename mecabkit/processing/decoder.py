"""
Token decoder: applies the schema registry to parsed analyser lines.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from mecabkit.core.constants import DEFAULT_ENGINE
from mecabkit.core.errors import UnsupportedEngineError
from mecabkit.core.models import Token
from mecabkit.processing.features import parse_line
from mecabkit.processing.lexer import iter_lines
from mecabkit.schemas.registry import is_supported

logger = logging.getLogger(__name__)


def _require_engine(engine: object) -> str:
    if not is_supported(engine):
        raise UnsupportedEngineError(engine)
    return engine


def decode_line(engine: str, line: str, line_number: Optional[int] = None) -> Token:
    """Decode a single analyser line into a Token.

    Raises:
        UnsupportedEngineError: If ``engine`` has no registered schema.
        MalformedLineError: If the line lacks the surface/feature tab.
    """
    _require_engine(engine)
    surface, fields = parse_line(line, line_number)
    return Token(engine=engine, form=surface, features=fields)


def decode(raw: str, engine: str = DEFAULT_ENGINE) -> List[Token]:
    """Decode a full analyser result into Tokens, in output order.

    The whole call fails on the first malformed line; no partial result is
    returned.

    Args:
        raw: Raw output of one analysis call, terminated by ``EOS``.
        engine: Engine tag the output was produced by.

    Returns:
        Tokens for every line before the sentinel; empty for empty input.
    """
    _require_engine(engine)
    tokens = [
        decode_line(engine, line, line_number)
        for line_number, line in enumerate(iter_lines(raw), start=1)
    ]
    logger.debug("Decoded %d %s tokens", len(tokens), engine)
    return tokens
