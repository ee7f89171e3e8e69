"""
Core Constants Module.

This module defines the literals of the MeCab output format and the
configuration defaults used across the package.
"""

# Engine tags
ENGINE_JP = "jp"
ENGINE_KO = "ko"
DEFAULT_ENGINE = ENGINE_JP

# Output format
EOS = "EOS"
PLACEHOLDER = "*"
SURFACE_SEPARATOR = "\t"
FIELD_DELIMITER = ","
LINE_TERMINATORS = "\r\n"

# Korean compound fields
EXPRESSION_DELIMITER = "+"
EXPRESSION_PART_DELIMITER = "/"
JONGSEONG_TRUE = "T"

# Engine process
DEFAULT_BINARY = "mecab"

# Minimum contents of a compiled dictionary directory
REQUIRED_DICTIONARY_FILES = ("char.bin", "dicrc", "matrix.bin", "sys.dic", "unk.dic")

# Error messages
ERROR_UNSUPPORTED_ENGINE = '"{engine}" is not a supported mecab engine.'
ERROR_MISSING_DICTIONARY = '"{path}" doesn\'t exist.'
ERROR_INCOMPLETE_DICTIONARY = (
    "Ensure your dictionary path contains a compiled dictionary. "
    "The minimum viable contents should be {files}."
)
ERROR_MALFORMED_LINE = "Analyzer output line has no surface/feature separator: {line!r}"
ERROR_BINARY_NOT_FOUND = "MeCab executable {binary!r} not found on PATH."
