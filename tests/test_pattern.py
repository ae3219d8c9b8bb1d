"""Tests for glob pattern compilation."""

import os

import pytest

from eradicate.errors import InvalidPatternError
from eradicate.pattern import compile_pattern


def _component(pattern, case_sensitive=True):
    compiled = compile_pattern(pattern, case_sensitive=case_sensitive)
    assert len(compiled.components) == 1
    return compiled.components[0]


class TestSplitting:
    def test_relative_pattern_has_empty_root(self):
        compiled = compile_pattern("src/*.py")
        assert compiled.root == ""
        assert [c.text for c in compiled.components] == ["src", "*.py"]

    def test_absolute_pattern_keeps_root(self):
        compiled = compile_pattern("/tmp/*.log")
        assert compiled.root == os.sep
        assert [c.text for c in compiled.components] == ["tmp", "*.log"]

    def test_repeated_separators_are_collapsed(self):
        compiled = compile_pattern("a//b/")
        assert [c.text for c in compiled.components] == ["a", "b"]

    def test_empty_pattern_has_no_components(self):
        assert compile_pattern("").components == ()


class TestMatching:
    @pytest.mark.parametrize(
        "pattern,name,expected",
        [
            ("*.txt", "a.txt", True),
            ("*.txt", "notes.md", False),
            ("*", ".hidden", True),
            ("?.txt", "a.txt", True),
            ("?.txt", "ab.txt", False),
            ("[ab].txt", "b.txt", True),
            ("[ab].txt", "c.txt", False),
            ("[a-c]x", "bx", True),
            ("[!a-c]x", "bx", False),
            ("[!a-c]x", "dx", True),
            ("[]]", "]", True),
            ("[!]]", "a", True),
            ("a+b(1).txt", "a+b(1).txt", True),
        ],
    )
    def test_component_matches(self, pattern, name, expected):
        assert _component(pattern).matches(name) is expected

    def test_case_sensitive_wildcard(self):
        assert _component("*.TXT").matches("a.txt") is False

    def test_case_insensitive_wildcard(self):
        assert _component("*.TXT", case_sensitive=False).matches("a.txt") is True

    def test_literal_is_looked_up_directly_when_case_sensitive(self):
        component = _component("README")
        assert component.is_literal
        assert component.matches("README")
        assert not component.matches("readme")

    def test_literal_is_listed_when_case_insensitive(self):
        component = _component("README", case_sensitive=False)
        assert not component.is_literal
        assert component.matches("readme")

    def test_recursive_component(self):
        compiled = compile_pattern("**/*.py")
        assert compiled.components[0].is_recursive
        assert not compiled.components[0].is_literal


class TestInvalidPatterns:
    @pytest.mark.parametrize(
        "pattern,position",
        [
            ("[", 0),
            ("abc[", 3),
            ("dir/[ab", 4),
            ("[]", 0),
            ("[z-a]", 0),
        ],
    )
    def test_bad_classes(self, pattern, position):
        with pytest.raises(InvalidPatternError) as exc:
            compile_pattern(pattern)
        assert exc.value.position == position
        assert exc.value.reason == "invalid range pattern"
        assert exc.value.pattern == pattern

    @pytest.mark.parametrize("pattern", ["a**", "**b", "x/a**/y"])
    def test_recursive_must_be_whole_component(self, pattern):
        with pytest.raises(InvalidPatternError, match="single path component"):
            compile_pattern(pattern)

    def test_triple_star(self):
        with pytest.raises(InvalidPatternError, match="regular `\\*` or recursive `\\*\\*`"):
            compile_pattern("***")

    def test_error_message_names_pattern(self):
        with pytest.raises(InvalidPatternError) as exc:
            compile_pattern("foo[")
        assert "'foo['" in str(exc.value)
