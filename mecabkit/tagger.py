"""
High-level tagger: analyse text with MeCab and decode the result.

Usage:
    from mecabkit import MeCab

    with MeCab(engine="ko") as mecab:
        for token in mecab.parse("아버지가방에들어가신다"):
            print(token.surface, token.pos, token.lemma)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

from mecabkit.core.config import MeCabConfig
from mecabkit.core.errors import EngineError
from mecabkit.core.models import Token
from mecabkit.engine.adapter import EngineAdapter, MecabProcessAdapter
from mecabkit.processing.decoder import decode
from mecabkit.processing.lexer import iter_sentences

logger = logging.getLogger(__name__)


class MeCab:
    """A MeCab engine that parses text into Tokens.

    Args:
        engine: ``jp`` (original MeCab) or ``ko`` (the Korean patch).
            Defaults to ``jp``.
        dict_path: Path to a custom compiled dictionary.
        binary: MeCab executable used by the default adapter.
        check_dictionary: Verify that ``dict_path`` holds a compiled
            dictionary.
        adapter: Engine adapter to use instead of a mecab subprocess.

    Raises:
        ConfigurationError: On an unsupported engine or a bad dictionary.
    """

    def __init__(
        self,
        engine: Optional[str] = None,
        dict_path: Optional[Union[str, Path]] = None,
        *,
        binary: Optional[str] = None,
        check_dictionary: bool = True,
        adapter: Optional[EngineAdapter] = None,
    ) -> None:
        options = {"engine": engine, "dict_path": dict_path, "binary": binary}
        self.config = MeCabConfig.from_options(
            {key: value for key, value in options.items() if value is not None},
            check_dictionary=check_dictionary,
        )
        self.adapter = adapter if adapter is not None else MecabProcessAdapter(self.config)

    @property
    def engine(self) -> str:
        return self.config.engine

    def __enter__(self) -> "MeCab":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def close(self) -> None:
        close = getattr(self.adapter, "close", None)
        if close is not None:
            close()

    def _analyze(self, method: str, payload: Any) -> str:
        try:
            return getattr(self.adapter, method)(payload)
        except EngineError:
            raise
        except Exception as exc:
            raise EngineError(f"{type(exc).__name__}: {exc}") from exc

    def parse(self, text: str) -> List[Token]:
        """Parse the given text into tokens.

        Raises:
            EngineError: If the engine fails.
            MalformedLineError: If the engine output is structurally broken.
        """
        raw = self._analyze("analyze", text)
        return decode(raw, self.engine)

    def parse_many(self, texts: Iterable[str]) -> List[List[Token]]:
        """Parse several sentences, one token list per sentence.

        Uses the adapter's batch mode when it has one.
        """
        texts = list(texts)
        if not texts:
            return []
        if not hasattr(self.adapter, "analyze_batch"):
            return [self.parse(text) for text in texts]
        raw = self._analyze("analyze_batch", texts)
        sentences = [decode(block, self.engine) for block in iter_sentences(raw)]
        if len(sentences) != len(texts):
            logger.warning("Expected %d sentences from mecab, got %d", len(texts), len(sentences))
        return sentences
