"""
MeCab engine adapters.

The analysis engine is an external collaborator: it takes a sentence and
returns raw multi-line output terminated by an ``EOS`` line. Anything that
implements ``EngineAdapter.analyze`` can feed the decoder.

``MecabProcessAdapter`` drives the ``mecab`` executable. It keeps a single
persistent process for fast repeated analysis; use it as a context manager
or call ``close()`` when done:

    with MecabProcessAdapter(MeCabConfig(engine="ko")) as adapter:
        raw = adapter.analyze("아버지가방에들어가신다")
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import threading
from typing import List, Optional, Protocol

from mecabkit.core.config import MeCabConfig
from mecabkit.core.constants import EOS, ERROR_BINARY_NOT_FOUND
from mecabkit.core.errors import EngineError

logger = logging.getLogger(__name__)


class EngineAdapter(Protocol):
    """Produces raw analyser output for one sentence."""

    def analyze(self, text: str) -> str:
        ...


class MecabProcessAdapter:
    """Adapter around a persistent ``mecab`` subprocess.

    Calls are serialized with a lock, so one instance may be shared between
    threads; each call writes one sentence and reads until ``EOS``.

    ``timeout`` bounds the one-shot ``analyze_batch`` run only. Reads from
    the persistent process block until mecab answers or exits.
    """

    def __init__(self, config: Optional[MeCabConfig] = None, timeout: float = 30.0) -> None:
        self.config = config or MeCabConfig()
        self.timeout = timeout
        self._binary = shutil.which(self.config.binary)
        self._proc: Optional[subprocess.Popen] = None
        self._lock = threading.Lock()

    @property
    def available(self) -> bool:
        return self._binary is not None

    @property
    def command(self) -> List[str]:
        command = [self._binary or self.config.binary]
        if self.config.dict_path is not None:
            command.extend(["-d", str(self.config.dict_path)])
        return command

    # Context manager

    def __enter__(self) -> "MecabProcessAdapter":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def close(self) -> None:
        """Shut down the persistent mecab process."""
        with self._lock:
            self._stop()

    def __del__(self) -> None:
        self._stop()

    def _stop(self) -> None:
        proc = getattr(self, "_proc", None)
        if proc is None:
            return
        try:
            proc.stdin.close()
            proc.wait(timeout=2)
        except (OSError, subprocess.TimeoutExpired):
            proc.kill()
        self._proc = None
        logger.info("Stopped mecab process")

    # Process management

    def _get_proc(self) -> subprocess.Popen:
        """Get or lazily start the persistent mecab process."""
        if self._binary is None:
            raise EngineError(ERROR_BINARY_NOT_FOUND.format(binary=self.config.binary))
        if self._proc is None or self._proc.poll() is not None:
            logger.info("Starting mecab process: %s", " ".join(self.command))
            try:
                self._proc = subprocess.Popen(
                    self.command,
                    stdin=subprocess.PIPE,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.DEVNULL,
                    text=True,
                    encoding="utf-8",
                    bufsize=1,
                )
            except OSError as exc:
                raise EngineError(f"Could not start mecab: {exc}") from exc
        return self._proc

    def _query(self, text: str) -> str:
        proc = self._get_proc()
        try:
            proc.stdin.write(text + "\n")
            proc.stdin.flush()
            lines = []
            while True:
                line = proc.stdout.readline()
                if not line:
                    raise EngineError("mecab exited before producing EOS")
                line = line.rstrip("\r\n")
                lines.append(line)
                if line == EOS:
                    break
        except OSError as exc:
            self._proc = None
            raise EngineError(f"mecab I/O failed: {exc}") from exc
        return "\n".join(lines) + "\n"

    # Public API

    def analyze(self, text: str) -> str:
        """Analyse one sentence and return the raw output, ``EOS`` included.

        Embedded line breaks are replaced with spaces: mecab answers every
        input line with its own ``EOS``.
        """
        sentence = " ".join(text.splitlines())
        with self._lock:
            return self._query(sentence)

    def analyze_batch(self, texts: List[str]) -> str:
        """Analyse several sentences in one one-shot mecab run.

        Returns the concatenated output, one ``EOS``-terminated block per
        sentence.
        """
        if self._binary is None:
            raise EngineError(ERROR_BINARY_NOT_FOUND.format(binary=self.config.binary))
        input_text = "".join(" ".join(text.splitlines()) + "\n" for text in texts)
        try:
            result = subprocess.run(
                self.command,
                input=input_text,
                capture_output=True,
                text=True,
                encoding="utf-8",
                timeout=self.timeout,
                check=True,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            raise EngineError(f"mecab batch run failed: {exc}") from exc
        return result.stdout
