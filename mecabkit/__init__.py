"""
mecabkit: structured tokens from MeCab output.

This package decodes the raw output of the MeCab morphological analyser,
for Japanese (IPAdic or UniDic) and Korean (mecab-ko-dic), into immutable
token records with named attributes: part of speech, lemma, pronunciation,
conjugation and compound decomposition.
"""

from mecabkit.core.config import MeCabConfig
from mecabkit.core.errors import (
    ConfigurationError,
    EngineError,
    MalformedLineError,
    MecabKitError,
    UnsupportedEngineError,
)
from mecabkit.core.models import Conjugation, Token
from mecabkit.processing.decoder import decode, decode_line
from mecabkit.processing.expression import ExpressionToken, decompose_expression
from mecabkit.tagger import MeCab

__version__ = "0.1.0"

__all__ = [
    "MeCab",
    "MeCabConfig",
    "Token",
    "Conjugation",
    "ExpressionToken",
    "decode",
    "decode_line",
    "decompose_expression",
    "MecabKitError",
    "ConfigurationError",
    "EngineError",
    "MalformedLineError",
    "UnsupportedEngineError",
]
