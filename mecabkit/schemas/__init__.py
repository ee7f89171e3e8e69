"""
Schema Package.

Decode rules and the per-engine field tables built from them.
"""

from mecabkit.schemas.registry import (
    CitationRule,
    Layout,
    get_layouts,
    get_schema,
    is_supported,
    supported_engines,
)
from mecabkit.schemas.rules import (
    BooleanEquals,
    Collect,
    Composite,
    DecodeRule,
    FieldSpec,
    Head,
    Identity,
    NullIfPlaceholder,
    SplitOn,
)

__all__ = [
    # Registry
    "CitationRule",
    "Layout",
    "get_layouts",
    "get_schema",
    "is_supported",
    "supported_engines",
    # Rules
    "DecodeRule",
    "FieldSpec",
    "Identity",
    "NullIfPlaceholder",
    "SplitOn",
    "Head",
    "BooleanEquals",
    "Composite",
    "Collect",
]
