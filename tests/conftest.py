"""
Pytest configuration for test discovery and import path setup.

Ensures the project root is on sys.path so that imports like
`from mecabkit.processing.decoder import decode` work regardless of how
pytest is invoked, and the tests directory so suites can share `samples`.
"""

import os
import sys
from typing import List

import pytest


def _ensure_on_sys_path(sys_path: List[str], *paths: str) -> None:
    """
    Add directories to sys.path if they are not already present.

    :param sys_path: The current Python sys.path list.
    :param paths: Directories to add.
    :return: None
    """
    for path in paths:
        if path not in sys_path:
            sys_path.insert(0, path)


_TESTS_DIR = os.path.dirname(os.path.abspath(__file__))
_ensure_on_sys_path(sys.path, os.path.abspath(os.path.join(_TESTS_DIR, os.pardir)), _TESTS_DIR)

from samples import JP_PARTICLE, JP_SUMOMO, JP_VERB, KO_NOUN, KO_VERB  # noqa: E402


@pytest.fixture
def jp_output():
    """Raw Japanese analyser output, Unix line endings."""
    return "\n".join([JP_SUMOMO, JP_PARTICLE, JP_VERB, "EOS", ""])


@pytest.fixture
def ko_output():
    """Raw Korean analyser output, Windows line endings."""
    return "\r\n".join([KO_NOUN, KO_VERB, "EOS", ""])
