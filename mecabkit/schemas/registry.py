"""
Schema registry: per-engine tables mapping attribute names to feature fields.

This is the single place where the positional layouts of the supported
dictionaries are described. Token attributes never index the raw feature
list directly; they look the attribute up here and apply its rule.

Japanese output comes in two layouts. IPAdic writes at most nine fields
(unknown words get seven), UniDic writes well over twenty. The layout is
picked per line from its field count.

    品詞,品詞細分類1,品詞細分類2,品詞細分類3,活用型,活用形,原形,読み,発音     (IPAdic)
    pos1,pos2,pos3,pos4,cType,cForm,lForm,lemma,orth,pron,orthBase,pronBase,
    goshu,iType,iForm,fType,fForm,iConType,fConType,type,kana,kanaBase,form,
    formBase,aType,aConType,aModType,lid,lemma_id                         (UniDic)

Korean output (mecab-ko-dic) has eight fields:

    품사 태그,의미 부류,종성 유무,읽기,타입,첫번째 품사,마지막 품사,표현
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from mecabkit.core.constants import (
    ENGINE_JP,
    ENGINE_KO,
    EXPRESSION_DELIMITER,
    EXPRESSION_PART_DELIMITER,
    JONGSEONG_TRUE,
)
from mecabkit.core.errors import UnsupportedEngineError
from mecabkit.schemas.rules import (
    BooleanEquals,
    Collect,
    Composite,
    FieldSpec,
    Head,
    Identity,
    NullIfPlaceholder,
    SplitOn,
)


@dataclass(frozen=True)
class CitationRule:
    """Turns a bare predicate stem into its dictionary citation form.

    mecab-ko-dic marks conjugated words with the morpheme type ``Inflect``
    and spells out their parts in the expression field, e.g. ``갔`` is
    ``가/VV/*+았/EP/*``. When the first part is a predicate (verb,
    adjective, auxiliary, copula or predicate-forming suffix) the citation
    form is the stem plus ``다``: ``가다``. Inflected nominals such as
    ``NNG+JKS`` keep the bare stem.
    """

    morpheme_types: Tuple[str, ...]
    predicate_tags: Tuple[str, ...]
    suffix: str

    def applies(self, morpheme_type: Optional[str], head_pos: Optional[str]) -> bool:
        return morpheme_type in self.morpheme_types and head_pos in self.predicate_tags

    def apply(self, base: str, morpheme_type: Optional[str], head_pos: Optional[str]) -> str:
        if self.applies(morpheme_type, head_pos):
            return base + self.suffix
        return base


@dataclass(frozen=True)
class Layout:
    """Field table for one output layout of one engine."""

    engine: str
    name: str
    fields: Tuple[FieldSpec, ...]
    min_fields: int = 0
    max_fields: Optional[int] = None
    citation: Optional[CitationRule] = None

    def accepts(self, field_count: int) -> bool:
        if field_count < self.min_fields:
            return False
        return self.max_fields is None or field_count <= self.max_fields

    def lookup(self, attribute: str) -> Optional[FieldSpec]:
        for spec in self.fields:
            if spec.attribute == attribute:
                return spec
        return None

    def decode(self, attribute: str, fields: Sequence[str]) -> Any:
        """Apply the attribute's rule, or return None if this layout lacks it."""
        spec = self.lookup(attribute)
        if spec is None:
            return None
        return spec.decode(fields)

    @property
    def attributes(self) -> List[str]:
        return [spec.attribute for spec in self.fields]


# Largest line IPAdic produces; anything longer is UniDic.
IPADIC_MAX_FIELDS = 9

_JP_POS = FieldSpec(
    "pos",
    0,
    Collect(
        (
            FieldSpec("pos1", 0, Identity()),
            FieldSpec("pos2", 1, NullIfPlaceholder()),
            FieldSpec("pos3", 2, NullIfPlaceholder()),
            FieldSpec("pos4", 3, NullIfPlaceholder()),
        )
    ),
)

_JP_CONJUGATION = FieldSpec(
    "conjugation",
    4,
    Composite(
        (
            FieldSpec("type", 4, NullIfPlaceholder()),
            FieldSpec("form", 5, NullIfPlaceholder()),
        )
    ),
)

JP_IPADIC = Layout(
    engine=ENGINE_JP,
    name="ipadic",
    max_fields=IPADIC_MAX_FIELDS,
    fields=(
        _JP_POS,
        _JP_CONJUGATION,
        FieldSpec("lemma", 6, NullIfPlaceholder()),
        FieldSpec("reading", 7, NullIfPlaceholder()),
        FieldSpec("pronunciation", 8, NullIfPlaceholder()),
    ),
)

JP_UNIDIC = Layout(
    engine=ENGINE_JP,
    name="unidic",
    min_fields=IPADIC_MAX_FIELDS + 1,
    fields=(
        _JP_POS,
        _JP_CONJUGATION,
        FieldSpec("reading", 6, NullIfPlaceholder()),
        FieldSpec("lemma", 7, NullIfPlaceholder()),
        FieldSpec("surface", 8, NullIfPlaceholder()),
        FieldSpec("pronunciation", 9, NullIfPlaceholder()),
        FieldSpec("lemma_pronunciation", 11, NullIfPlaceholder()),
        FieldSpec("origin", 12, NullIfPlaceholder()),
        FieldSpec("grammatical_role", 19, NullIfPlaceholder()),
        FieldSpec("pitch", 24, NullIfPlaceholder()),
    ),
)

KO_CITATION = CitationRule(
    morpheme_types=("Inflect",),
    predicate_tags=("VV", "VA", "VX", "VCP", "VCN", "XSV", "XSA"),
    suffix="다",
)

KO_MECAB_KO_DIC = Layout(
    engine=ENGINE_KO,
    name="mecab-ko-dic",
    fields=(
        FieldSpec("pos", 0, SplitOn(EXPRESSION_DELIMITER)),
        FieldSpec("semantic_class", 1, NullIfPlaceholder()),
        FieldSpec("has_final_consonant", 2, BooleanEquals(JONGSEONG_TRUE)),
        FieldSpec("pronunciation", 3, NullIfPlaceholder()),
        FieldSpec("morpheme_type", 4, NullIfPlaceholder()),
        FieldSpec("start_pos", 5, NullIfPlaceholder()),
        FieldSpec("end_pos", 6, NullIfPlaceholder()),
        FieldSpec("lemma", 7, Head(EXPRESSION_PART_DELIMITER, requires=(4,))),
        FieldSpec("expression", 7, NullIfPlaceholder()),
    ),
    citation=KO_CITATION,
)

_REGISTRY: Dict[str, Tuple[Layout, ...]] = {
    ENGINE_JP: (JP_IPADIC, JP_UNIDIC),
    ENGINE_KO: (KO_MECAB_KO_DIC,),
}


def supported_engines() -> List[str]:
    """Engine tags with a registered schema."""
    return list(_REGISTRY)


def is_supported(engine: object) -> bool:
    return isinstance(engine, str) and engine in _REGISTRY


def get_layouts(engine: object) -> Tuple[Layout, ...]:
    """All layouts registered for an engine tag."""
    if not is_supported(engine):
        raise UnsupportedEngineError(engine)
    return _REGISTRY[engine]


def get_schema(engine: object, fields: Sequence[str] = ()) -> Layout:
    """Return the layout that applies to a line with the given fields.

    Args:
        engine: Engine tag (``jp`` or ``ko``).
        fields: Raw feature fields of the line; only their count is used.

    Raises:
        UnsupportedEngineError: If no schema is registered for ``engine``.
    """
    layouts = get_layouts(engine)
    for layout in layouts:
        if layout.accepts(len(fields)):
            return layout
    return layouts[0]
