"""
Core domain models for decoded analyser output.

A ``Token`` stores only what the analyser printed: the engine tag, the
literal surface and the raw feature fields. Every linguistic attribute is a
read-only property computed from that state through the schema registry, so
two reads of the same attribute always agree.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, field_validator

from mecabkit.core.constants import FIELD_DELIMITER, SURFACE_SEPARATOR
from mecabkit.core.errors import UnsupportedEngineError
from mecabkit.processing.expression import ExpressionToken, decompose_expression
from mecabkit.schemas.registry import Layout, get_schema, is_supported


class Conjugation(BaseModel):
    """Japanese conjugation type (活用型) and form (活用形)."""

    model_config = {"frozen": True}

    type: Optional[str] = None
    form: Optional[str] = None


class Token(BaseModel):
    """One analysed morpheme of a MeCab result."""

    model_config = {"frozen": True}

    engine: str
    form: str
    features: Tuple[str, ...] = ()

    @field_validator("engine", mode="before")
    @classmethod
    def _check_engine(cls, value: Any) -> str:
        if not is_supported(value):
            raise UnsupportedEngineError(value)
        return value

    @property
    def layout(self) -> Layout:
        """Layout of the schema registry this token's fields follow."""
        return get_schema(self.engine, self.features)

    def _decode(self, attribute: str) -> Any:
        return self.layout.decode(attribute, self.features)

    @property
    def surface(self) -> str:
        """Surface form, honouring a dictionary-supplied override."""
        return self._decode("surface") or self.form

    @property
    def pos(self) -> List[str]:
        return self._decode("pos") or []

    @property
    def part_of_speech(self) -> List[str]:
        return self.pos

    @property
    def has_multiple_pos(self) -> bool:
        return len(self.pos) > 1

    @property
    def lemma(self) -> str:
        """Dictionary form; the surface when the analyser gives none."""
        lemma = self._decode("lemma") or self.surface
        citation = self.layout.citation
        if citation is not None:
            expression = self.expression or []
            head_pos = expression[0].pos if expression else None
            lemma = citation.apply(lemma, self.morpheme_type, head_pos)
        return lemma

    @property
    def base(self) -> str:
        return self.lemma

    @property
    def conjugation(self) -> Optional[Conjugation]:
        value = self._decode("conjugation")
        if value is None:
            return None
        return Conjugation(**value)

    @property
    def has_final_consonant(self) -> Optional[bool]:
        """Whether the last syllable has a final consonant (Korean only)."""
        return self._decode("has_final_consonant")

    @property
    def has_jongseong(self) -> Optional[bool]:
        return self.has_final_consonant

    @property
    def morpheme_type(self) -> Optional[str]:
        """Korean word type: Inflect, Compound or Preanalysis."""
        return self._decode("morpheme_type")

    @property
    def type(self) -> Optional[str]:
        return self.morpheme_type

    @property
    def pronunciation(self) -> Optional[str]:
        return self._decode("pronunciation")

    @property
    def reading(self) -> Optional[str]:
        return self._decode("reading")

    @property
    def semantic_class(self) -> Optional[str]:
        return self._decode("semantic_class")

    @property
    def start_pos(self) -> Optional[str]:
        return self._decode("start_pos")

    @property
    def end_pos(self) -> Optional[str]:
        return self._decode("end_pos")

    @property
    def lemma_pronunciation(self) -> Optional[str]:
        return self._decode("lemma_pronunciation")

    @property
    def origin(self) -> Optional[str]:
        """Word origin (語種), e.g. 和, 漢, 外."""
        return self._decode("origin")

    @property
    def grammatical_role(self) -> Optional[str]:
        return self._decode("grammatical_role")

    @property
    def pitch(self) -> Optional[str]:
        """Accent type (アクセント型)."""
        return self._decode("pitch")

    @property
    def expression(self) -> Optional[List[ExpressionToken]]:
        """Constituent morphemes of a Korean compound, or None."""
        field = self._decode("expression")
        if field is None:
            return None
        return decompose_expression(field)

    @property
    def raw(self) -> str:
        """The analyser line this token was decoded from."""
        return f"{self.form}{SURFACE_SEPARATOR}{FIELD_DELIMITER.join(self.features)}"

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict rendering of every derived attribute."""
        conjugation = self.conjugation
        expression = self.expression
        return {
            "engine": self.engine,
            "surface": self.surface,
            "pos": self.pos,
            "lemma": self.lemma,
            "pronunciation": self.pronunciation,
            "reading": self.reading,
            "conjugation": conjugation.model_dump() if conjugation else None,
            "has_final_consonant": self.has_final_consonant,
            "morpheme_type": self.morpheme_type,
            "semantic_class": self.semantic_class,
            "start_pos": self.start_pos,
            "end_pos": self.end_pos,
            "lemma_pronunciation": self.lemma_pronunciation,
            "origin": self.origin,
            "grammatical_role": self.grammatical_role,
            "pitch": self.pitch,
            "expression": [part.model_dump() for part in expression] if expression is not None else None,
            "raw": self.raw,
        }

    def __str__(self) -> str:
        return self.raw
