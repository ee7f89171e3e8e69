"""
Decode rules for positional MeCab feature fields.

A rule turns the raw field found at a position into a typed value. Rules are
immutable and hold no per-token state, so one instance is shared by every
token decoded under a schema.

Every rule tolerates short field lists: an index past the end of the list
reads as absent and the rule returns its own "absent" value (``None``, an
empty list or ``False``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from mecabkit.core.constants import PLACEHOLDER


def field_at(fields: Sequence[str], index: int) -> Optional[str]:
    """Return the raw field at ``index`` or None when the line is too short."""
    if 0 <= index < len(fields):
        return fields[index]
    return None


def is_present(value: Optional[str]) -> bool:
    """True when a raw field exists and is not the ``*`` placeholder."""
    return value is not None and value != PLACEHOLDER


class DecodeRule:
    """Base class for all decode rules."""

    def apply(self, fields: Sequence[str], index: int) -> Any:
        raise NotImplementedError()


@dataclass(frozen=True)
class Identity(DecodeRule):
    """Pass the raw string through untouched."""

    def apply(self, fields: Sequence[str], index: int) -> Optional[str]:
        return field_at(fields, index)


@dataclass(frozen=True)
class NullIfPlaceholder(DecodeRule):
    """The raw string, or None when the field is ``*`` or missing."""

    def apply(self, fields: Sequence[str], index: int) -> Optional[str]:
        value = field_at(fields, index)
        return value if is_present(value) else None


@dataclass(frozen=True)
class SplitOn(DecodeRule):
    """Split the field into an ordered list, dropping placeholder leftovers."""

    delimiter: str

    def apply(self, fields: Sequence[str], index: int) -> List[str]:
        value = field_at(fields, index)
        if not is_present(value):
            return []
        return [part for part in value.split(self.delimiter) if part and part != PLACEHOLDER]


@dataclass(frozen=True)
class Head(DecodeRule):
    """First segment of a delimited field.

    ``requires`` lists other positions that must also be present for the
    rule to produce a value, e.g. the Korean base form is only read from the
    expression field when the morpheme type is set.
    """

    delimiter: str
    requires: Tuple[int, ...] = ()

    def apply(self, fields: Sequence[str], index: int) -> Optional[str]:
        value = field_at(fields, index)
        if not is_present(value):
            return None
        if not all(is_present(field_at(fields, other)) for other in self.requires):
            return None
        head = value.split(self.delimiter)[0]
        return head if is_present(head) and head else None


@dataclass(frozen=True)
class BooleanEquals(DecodeRule):
    """True iff the field equals a specific literal."""

    value: str

    def apply(self, fields: Sequence[str], index: int) -> bool:
        return field_at(fields, index) == self.value


@dataclass(frozen=True)
class FieldSpec:
    """One schema entry: attribute name, positional index and decode rule."""

    attribute: str
    index: int
    rule: DecodeRule

    def decode(self, fields: Sequence[str]) -> Any:
        return self.rule.apply(fields, self.index)


@dataclass(frozen=True)
class Composite(DecodeRule):
    """Combine several fields into a mapping of member name to value.

    Each member is decoded independently. The composite itself is None when
    every member is absent; otherwise absent members are left out.
    """

    members: Tuple[FieldSpec, ...]

    def apply(self, fields: Sequence[str], index: int) -> Optional[Dict[str, Any]]:
        values = {member.attribute: member.decode(fields) for member in self.members}
        present = {name: value for name, value in values.items() if value is not None}
        return present or None


@dataclass(frozen=True)
class Collect(DecodeRule):
    """Sequence form of ``Composite``: present member values, in order."""

    members: Tuple[FieldSpec, ...]

    def apply(self, fields: Sequence[str], index: int) -> List[str]:
        collected = []
        for member in self.members:
            value = member.decode(fields)
            if is_present(value):
                collected.append(value)
        return collected
