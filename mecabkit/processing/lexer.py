"""
Output lexer: raw analyser text to token lines.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, List

from mecabkit.core.constants import EOS, LINE_TERMINATORS

logger = logging.getLogger(__name__)

_LINE_BREAK_PATTERN = re.compile(f"[{re.escape(LINE_TERMINATORS)}]+")


def iter_lines(raw: str) -> Iterator[str]:
    """Yield token lines in order, stopping at the ``EOS`` sentinel.

    Runs of ``\\r`` and ``\\n`` count as one break, so Windows and Unix line
    endings (and blank lines) are handled alike. Other lines are passed on
    untouched, whitespace-only ones included. The sentinel and everything
    after it are discarded.
    """
    if not raw or not raw.strip():
        return
    for line in _LINE_BREAK_PATTERN.split(raw):
        if line == EOS:
            logger.debug("Reached %s sentinel", EOS)
            return
        if not line:
            continue
        yield line


def split_output(raw: str) -> List[str]:
    """List form of ``iter_lines``."""
    return list(iter_lines(raw))


def iter_sentences(raw: str) -> Iterator[str]:
    """Split the output of a multi-sentence run into per-sentence blocks.

    Each block keeps its ``EOS`` line so it can be passed to ``iter_lines``.
    Trailing lines without a sentinel form a final block.
    """
    block: List[str] = []
    for line in _LINE_BREAK_PATTERN.split(raw):
        if not line:
            continue
        block.append(line)
        if line == EOS:
            yield "\n".join(block)
            block = []
    if block:
        yield "\n".join(block)
