"""
Tests for splitting one analyser line into surface and feature fields.
"""

import pytest

from mecabkit.core.errors import MalformedLineError
from mecabkit.processing.features import field_at, parse_line


class TestParseLine:
    def test_splits_surface_and_fields(self):
        surface, fields = parse_line("すもも\t名詞,一般,*,*,*,*,すもも,スモモ,スモモ")
        assert surface == "すもも"
        assert fields == ["名詞", "一般", "*", "*", "*", "*", "すもも", "スモモ", "スモモ"]

    def test_only_first_tab_separates(self):
        surface, fields = parse_line("a\tX,Y\tZ")
        assert surface == "a"
        assert fields == ["X", "Y\tZ"]

    def test_empty_feature_string(self):
        assert parse_line("a\t") == ("a", [""])

    def test_variable_field_count(self):
        assert len(parse_line("ジョン\t名詞,固有名詞,人名,名,*,*,*")[1]) == 7

    def test_short_lines_resolve_to_absent(self):
        _, fields = parse_line("a\tX")
        assert field_at(fields, 5) is None

    @pytest.mark.parametrize("line", ["no separator", "名詞,一般,*", ""])
    def test_missing_tab_is_malformed(self, line):
        with pytest.raises(MalformedLineError) as excinfo:
            parse_line(line, line_number=3)
        assert excinfo.value.line == line
        assert excinfo.value.line_number == 3
        assert "line 3" in str(excinfo.value)
