"""
Tests for Token attributes derived from raw feature fields.

Tests cover the Japanese IPAdic and UniDic layouts, the Korean
mecab-ko-dic layout, placeholder normalization and the round-trip law.
"""

import pytest
from pydantic import ValidationError

from mecabkit.core.errors import UnsupportedEngineError
from mecabkit.core.models import Conjugation, Token
from mecabkit.processing.decoder import decode_line
from mecabkit.processing.expression import ExpressionToken
from samples import (
    JP_LINES,
    JP_SUMOMO,
    JP_UNIDIC,
    JP_UNKNOWN,
    JP_VERB,
    KO_COMPOUND,
    KO_LINES,
    KO_NOMINAL,
    KO_NOUN,
    KO_PLACE,
    KO_VERB,
)

DERIVED_ATTRIBUTES = [
    "surface",
    "pos",
    "part_of_speech",
    "has_multiple_pos",
    "lemma",
    "base",
    "conjugation",
    "has_final_consonant",
    "has_jongseong",
    "morpheme_type",
    "type",
    "pronunciation",
    "reading",
    "semantic_class",
    "start_pos",
    "end_pos",
    "lemma_pronunciation",
    "origin",
    "grammatical_role",
    "pitch",
    "expression",
    "raw",
]

ALL_LINES = [("jp", line) for line in JP_LINES] + [("ko", line) for line in KO_LINES]


class TestJapaneseIpadic:
    """Test attributes of IPAdic lines."""

    def test_sumomo(self):
        token = decode_line("jp", JP_SUMOMO)
        assert token.pos == ["名詞", "一般"]
        assert token.part_of_speech == ["名詞", "一般"]
        assert token.lemma == "すもも"
        assert token.base == "すもも"
        assert token.has_multiple_pos is True
        assert token.surface == "すもも"
        assert token.reading == "スモモ"
        assert token.pronunciation == "スモモ"
        assert token.conjugation is None

    def test_pronunciation_differs_from_reading(self):
        token = decode_line("jp", "は\t助詞,係助詞,*,*,*,*,は,ハ,ワ")
        assert token.reading == "ハ"
        assert token.pronunciation == "ワ"

    def test_conjugated_verb(self):
        token = decode_line("jp", JP_VERB)
        assert token.lemma == "食べる"
        assert token.conjugation == Conjugation(type="一段", form="連用形")

    def test_partial_conjugation(self):
        token = decode_line("jp", "だ\t助動詞,*,*,*,特殊・ダ,*,だ,ダ,ダ")
        assert token.conjugation == Conjugation(type="特殊・ダ", form=None)
        assert token.pos == ["助動詞"]
        assert token.has_multiple_pos is False

    def test_unknown_word_falls_back_to_surface(self):
        token = decode_line("jp", JP_UNKNOWN)
        assert token.pos == ["名詞", "固有名詞", "人名", "名"]
        assert token.lemma == "ジョン"
        assert token.reading is None
        assert token.pronunciation is None

    def test_korean_only_attributes_are_none(self):
        token = decode_line("jp", JP_SUMOMO)
        assert token.has_final_consonant is None
        assert token.has_jongseong is None
        assert token.morpheme_type is None
        assert token.type is None
        assert token.expression is None
        assert token.semantic_class is None


class TestJapaneseUnidic:
    """Test attributes of UniDic lines."""

    @pytest.fixture
    def token(self):
        return decode_line("jp", JP_UNIDIC)

    def test_layout(self, token):
        assert token.layout.name == "unidic"

    def test_attributes(self, token):
        assert token.pos == ["動詞", "一般"]
        assert token.lemma == "食べる"
        assert token.reading == "タベル"
        assert token.pronunciation == "タベ"
        assert token.lemma_pronunciation == "タベル"
        assert token.origin == "和"
        assert token.grammatical_role == "用"
        assert token.pitch == "2"
        assert token.conjugation == Conjugation(type="下一段-バ行", form="連用形-一般")

    def test_surface_override(self):
        line = JP_UNIDIC.replace("食べ\t", "たべ\t", 1)
        token = decode_line("jp", line)
        assert token.surface == "食べ"
        assert token.form == "たべ"
        assert token.raw == line

    def test_placeholder_override_keeps_literal_surface(self):
        fields = JP_UNIDIC.split("\t")[1].split(",")
        fields[8] = "*"
        token = decode_line("jp", "たべ\t" + ",".join(fields))
        assert token.surface == "たべ"


class TestKorean:
    """Test attributes of mecab-ko-dic lines."""

    def test_noun(self):
        token = decode_line("ko", KO_NOUN)
        assert token.pos == ["NNG"]
        assert token.has_final_consonant is False
        assert token.has_jongseong is False
        assert token.lemma == "아버지"
        assert token.pronunciation == "아버지"
        assert token.morpheme_type is None
        assert token.expression is None
        assert token.conjugation is None

    def test_semantic_class_and_final_consonant(self):
        token = decode_line("ko", KO_PLACE)
        assert token.semantic_class == "지명"
        assert token.has_final_consonant is True

    def test_inflected_verb(self):
        token = decode_line("ko", KO_VERB)
        assert token.pos == ["VV", "EP"]
        assert token.has_multiple_pos is True
        assert token.morpheme_type == "Inflect"
        assert token.type == "Inflect"
        assert token.start_pos == "VV"
        assert token.end_pos == "EP"
        assert token.expression == [
            ExpressionToken(morpheme="가", pos="VV"),
            ExpressionToken(morpheme="았", pos="EP"),
        ]
        assert token.lemma == "가다"
        assert token.base == "가다"

    def test_inflected_nominal_has_no_citation_suffix(self):
        assert decode_line("ko", KO_NOMINAL).lemma == "아버지"

    def test_compound_base_is_first_morpheme(self):
        token = decode_line("ko", KO_COMPOUND)
        assert token.lemma == "가락"
        assert [part.morpheme for part in token.expression] == ["가락", "국수"]

    def test_expression_without_type_keeps_surface(self):
        token = decode_line("ko", "가\tVV,*,F,가,*,*,*,가/VV/*")
        assert token.lemma == "가"
        assert token.expression == [ExpressionToken(morpheme="가", pos="VV")]

    def test_surface_is_always_literal(self):
        assert decode_line("ko", KO_VERB).surface == "갔"

    def test_japanese_only_attributes_are_none(self):
        token = decode_line("ko", KO_VERB)
        assert token.reading is None
        assert token.origin is None
        assert token.pitch is None


class TestInvariants:
    @pytest.mark.parametrize("engine,line", ALL_LINES)
    def test_round_trip(self, engine, line):
        assert decode_line(engine, line).raw == line

    @pytest.mark.parametrize("engine,line", ALL_LINES)
    def test_placeholder_never_surfaces(self, engine, line):
        token = decode_line(engine, line)
        for name in DERIVED_ATTRIBUTES:
            if name == "raw":
                continue
            value = getattr(token, name)
            assert value != "*", name
            if isinstance(value, list):
                assert "*" not in value, name
        for part in token.expression or []:
            assert "*" not in (part.morpheme, part.pos, part.semantic_class)
        if token.conjugation is not None:
            assert "*" not in (token.conjugation.type, token.conjugation.form)

    @pytest.mark.parametrize("engine,line", ALL_LINES)
    def test_accessors_are_deterministic(self, engine, line):
        token = decode_line(engine, line)
        for name in DERIVED_ATTRIBUTES:
            assert getattr(token, name) == getattr(token, name), name

    def test_short_lines_are_lenient(self):
        token = decode_line("ko", "아\tIC")
        assert token.pos == ["IC"]
        assert token.pronunciation is None
        assert token.has_final_consonant is False
        assert token.expression is None


class TestTokenModel:
    def test_features_are_read_only(self):
        token = decode_line("jp", JP_SUMOMO)
        assert isinstance(token.features, tuple)
        with pytest.raises(ValidationError):
            token.form = "もも"

    @pytest.mark.parametrize("engine", ["zh", "JP", "", None])
    def test_unsupported_engine(self, engine):
        with pytest.raises(UnsupportedEngineError):
            Token(engine=engine, form="a", features=("X",))

    def test_each_line_yields_new_token(self):
        first = decode_line("jp", JP_SUMOMO)
        second = decode_line("jp", JP_SUMOMO)
        assert first is not second
        assert first == second

    def test_to_dict(self):
        record = decode_line("ko", KO_VERB).to_dict()
        assert record["lemma"] == "가다"
        assert record["expression"][0] == {"morpheme": "가", "pos": "VV", "semantic_class": None}
        assert record["raw"] == KO_VERB

    def test_to_dict_conjugation(self):
        record = decode_line("jp", JP_VERB).to_dict()
        assert record["conjugation"] == {"type": "一段", "form": "連用形"}

    def test_str_is_raw(self):
        assert str(decode_line("jp", JP_SUMOMO)) == JP_SUMOMO
