"""Glob pattern matching for model identifiers.

Patterns are compiled once into regular expressions and matched against
the whole identifier::

    llama*        -> llama-3-8b, LLAMA-BIG (case-insensitive by default)
    *-llama-*     -> meta-llama-3
    gpt-4?        -> gpt-4o
    claude-[23]-* -> claude-3-opus
    [!a]*         -> anything not starting with "a"

``*`` matches any run of characters, including ``/``, so ``meta-llama/*``
and ``*llama*`` both work against repo-style IDs.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable


class InvalidPatternError(ValueError):
    """Raised when a glob pattern is syntactically invalid."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid glob pattern {pattern!r}: {reason}")


def _translate_class(pattern: str, start: int) -> tuple[int, str]:
    """Translate the class opened at ``pattern[start]``.

    Returns the index of the closing ``]`` and the regex fragment.
    """
    n = len(pattern)
    j = start + 1
    negate = False
    if j < n and pattern[j] in "!^":
        negate = True
        j += 1

    parts: list[str] = []
    while j < n and pattern[j] != "]":
        c = pattern[j]
        if c == "\\":
            j += 1
            if j >= n:
                break
            parts.append(re.escape(pattern[j]))
        elif c == "-" and parts and j + 1 < n and pattern[j + 1] != "]":
            parts.append("-")
        else:
            parts.append(re.escape(c))
        j += 1

    if j >= n:
        raise InvalidPatternError(pattern, "unterminated character class")
    if not parts:
        raise InvalidPatternError(pattern, "empty character class")
    return j, "[" + ("^" if negate else "") + "".join(parts) + "]"


def glob_to_regex(pattern: str) -> str:
    """Translate a glob pattern into an (unanchored) regex string."""
    out: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        c = pattern[i]
        if c == "*":
            while i + 1 < n and pattern[i + 1] == "*":
                i += 1
            out.append(".*")
        elif c == "?":
            out.append(".")
        elif c == "[":
            i, fragment = _translate_class(pattern, i)
            out.append(fragment)
        elif c == "\\":
            if i + 1 >= n:
                raise InvalidPatternError(pattern, "trailing backslash")
            i += 1
            out.append(re.escape(pattern[i]))
        else:
            out.append(re.escape(c))
        i += 1
    return "".join(out)


@dataclass(frozen=True)
class GlobMatcher:
    """A compiled glob pattern."""

    pattern: str
    regex: re.Pattern = field(repr=False, compare=False)
    case_insensitive: bool = True

    def match(self, text: str) -> bool:
        return self.regex.fullmatch(text) is not None

    def match_all(self, *texts: str) -> list[str]:
        return [t for t in texts if self.match(t)]


def compile_glob(pattern: str, case_insensitive: bool = True) -> GlobMatcher:
    """Compile a glob pattern.

    Raises
    ------
    InvalidPatternError
        If the pattern has an unterminated or empty character class, a
        trailing backslash, or a reversed range such as ``[z-a]``.
    """
    flags = re.DOTALL
    if case_insensitive:
        flags |= re.IGNORECASE
    try:
        regex = re.compile(glob_to_regex(pattern), flags)
    except re.error as exc:
        raise InvalidPatternError(pattern, str(exc)) from exc
    return GlobMatcher(pattern=pattern, regex=regex, case_insensitive=case_insensitive)


class MultiMatcher:
    """Matches when any one of several glob patterns matches.

    All patterns are compiled up front; the first invalid one raises
    :class:`InvalidPatternError`.
    """

    def __init__(self, patterns: Iterable[str], case_insensitive: bool = True) -> None:
        self._matchers = tuple(compile_glob(p, case_insensitive) for p in patterns)

    @property
    def patterns(self) -> tuple[str, ...]:
        return tuple(m.pattern for m in self._matchers)

    def match(self, text: str) -> bool:
        return any(m.match(text) for m in self._matchers)

    def match_all(self, *texts: str) -> list[str]:
        """Return matching inputs, without duplicates, in input order."""
        seen: set[str] = set()
        results: list[str] = []
        for text in texts:
            if text not in seen and self.match(text):
                seen.add(text)
                results.append(text)
        return results

    def __len__(self) -> int:
        return len(self._matchers)

    def __repr__(self) -> str:
        return f"MultiMatcher({list(self.patterns)!r})"
