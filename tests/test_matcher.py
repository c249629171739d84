"""Tests for authormap.matcher: glob compilation and matching."""

from __future__ import annotations

import pytest

from authormap.matcher import (
    InvalidPatternError,
    MultiMatcher,
    compile_glob,
    glob_to_regex,
)


# ---------------------------------------------------------------------------
# compile_glob
# ---------------------------------------------------------------------------


class TestCompileGlob:
    def test_star_prefix(self) -> None:
        m = compile_glob("llama*")
        assert m.match("llama-3-8b")
        assert m.match("llama")
        assert not m.match("meta-llama-3")

    def test_star_both_sides(self) -> None:
        m = compile_glob("*-llama-*")
        assert m.match("meta-llama-3")
        assert not m.match("llama-3-8b")

    def test_question_mark_matches_one_char(self) -> None:
        m = compile_glob("gpt-4?")
        assert m.match("gpt-4o")
        assert not m.match("gpt-4")
        assert not m.match("gpt-4o-mini")

    def test_whole_identifier_is_matched(self) -> None:
        m = compile_glob("claude")
        assert m.match("claude")
        assert not m.match("claude-3")
        assert not m.match("my-claude")

    def test_case_insensitive_by_default(self) -> None:
        m = compile_glob("llama*")
        assert m.match("LLAMA-BIG")
        assert compile_glob("LLAMA*").match("llama-3")

    def test_case_sensitive_when_requested(self) -> None:
        m = compile_glob("llama*", case_insensitive=False)
        assert m.match("llama-3")
        assert not m.match("LLAMA-BIG")

    def test_star_crosses_slash(self) -> None:
        assert compile_glob("meta-llama/*").match("meta-llama/Llama-3.1-8B")
        assert compile_glob("*llama*").match("groq/meta-llama/llama-3")

    def test_regex_metacharacters_are_literal(self) -> None:
        m = compile_glob("gpt-3.5-turbo+")
        assert m.match("gpt-3.5-turbo+")
        assert not m.match("gpt-345-turbo+")

    def test_character_class(self) -> None:
        m = compile_glob("claude-[23]-*")
        assert m.match("claude-3-opus")
        assert m.match("claude-2-instant")
        assert not m.match("claude-1-instant")

    def test_character_range(self) -> None:
        m = compile_glob("model-[a-c]")
        assert m.match("model-b")
        assert not m.match("model-d")

    def test_negated_class(self) -> None:
        for pattern in ("[!a]*", "[^a]*"):
            m = compile_glob(pattern)
            assert m.match("bert")
            assert not m.match("albert")

    def test_escaped_metacharacter(self) -> None:
        m = compile_glob(r"what\*")
        assert m.match("what*")
        assert not m.match("whatever")

    def test_repeated_stars_collapse(self) -> None:
        assert glob_to_regex("a**b") == glob_to_regex("a*b")

    def test_match_all(self) -> None:
        m = compile_glob("qwen*")
        assert m.match_all("qwen-7b", "llama", "Qwen2") == ["qwen-7b", "Qwen2"]


# ---------------------------------------------------------------------------
# Invalid patterns
# ---------------------------------------------------------------------------


class TestInvalidPatterns:
    @pytest.mark.parametrize(
        "pattern",
        ["[invalid", "model-[abc", "[]", "[!]", "trailing\\", "[a\\"],
    )
    def test_invalid_syntax_raises(self, pattern: str) -> None:
        with pytest.raises(InvalidPatternError) as exc_info:
            compile_glob(pattern)
        assert exc_info.value.pattern == pattern
        assert "pattern" in str(exc_info.value)
        assert pattern in str(exc_info.value)

    def test_reversed_range_raises(self) -> None:
        with pytest.raises(InvalidPatternError):
            compile_glob("[z-a]")

    def test_unterminated_class_reason(self) -> None:
        with pytest.raises(InvalidPatternError) as exc_info:
            compile_glob("[invalid")
        assert exc_info.value.reason == "unterminated character class"

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            compile_glob("[invalid")


# ---------------------------------------------------------------------------
# MultiMatcher
# ---------------------------------------------------------------------------


class TestMultiMatcher:
    def test_matches_any_pattern(self) -> None:
        mm = MultiMatcher(["llama*", "*-llama-*"])
        assert mm.match("llama-3-8b")
        assert mm.match("meta-llama-3")
        assert not mm.match("mixtral-8x7b")

    def test_empty_matches_nothing(self) -> None:
        mm = MultiMatcher([])
        assert len(mm) == 0
        assert not mm.match("anything")

    def test_first_invalid_pattern_propagates(self) -> None:
        with pytest.raises(InvalidPatternError) as exc_info:
            MultiMatcher(["ok-*", "[bad", "[worse"])
        assert exc_info.value.pattern == "[bad"

    def test_patterns_preserved_in_order(self) -> None:
        mm = MultiMatcher(["b*", "a*"])
        assert mm.patterns == ("b*", "a*")

    def test_match_all_dedupes(self) -> None:
        mm = MultiMatcher(["gpt*", "*turbo"])
        assert mm.match_all("gpt-turbo", "gpt-turbo", "o1", "gpt-4") == [
            "gpt-turbo",
            "gpt-4",
        ]
