"""Trie of literal regex prefixes for matching many patterns against one input."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from itertools import zip_longest

from .errors import RegexCompilationError

SPECIALS = frozenset(".?*+()[]{}")

Scorer = Callable[[str, bool], int]

# Stands in for a regex until it is compiled; it fully matches only "".
_PLACEHOLDER = re.compile("")


def default_scorer(pattern: str, is_regex: bool) -> int:
    """Score regexes by length; plain strings score 0 so they beat any regex."""
    return len(pattern) if is_regex else 0


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    pattern_indices: list[int] = field(default_factory=list)
    is_literal_end: bool = False
    is_escaped: bool = False


@dataclass
class _Entry:
    pattern: str
    regex: re.Pattern[str]
    score: int


class RegexTrie:
    """Indexes regexes by their literal prefix to find full matches quickly.

    A lower score wins in :meth:`find_best_match`.
    """

    def __init__(self, scorer: Scorer = default_scorer) -> None:
        self._root = _Node()
        self._entries: list[_Entry] = []
        self._scorer = scorer

    @classmethod
    def from_patterns(
        cls, patterns: Iterable[str], scorer: Scorer = default_scorer
    ) -> RegexTrie:
        """Build a trie holding all ``patterns``."""
        trie = cls(scorer)
        trie.insert_many(patterns)
        return trie

    def __repr__(self) -> str:
        return f"{type(self).__name__}(patterns={[e.pattern for e in self._entries]!r})"

    def insert(self, pattern: str) -> None:
        """Insert one pattern, raising RegexCompilationError if it is invalid."""
        self.insert_many([pattern])

    def insert_many(self, patterns: Iterable[str]) -> None:
        """Insert several patterns.

        The regexes are compiled once the whole batch is placed in the trie;
        if any fails, none of the batch's regexes is installed and the error
        is raised.
        """
        pending: list[int] = []
        for pattern in patterns:
            node, is_regex = self._descend(pattern)
            if is_regex:
                index = len(self._entries)
                self._entries.append(
                    _Entry(pattern, _PLACEHOLDER, self._scorer(pattern, True))
                )
                node.pattern_indices.append(index)
                pending.append(index)
            else:
                node.is_literal_end = True

        compiled = [(index, _compile(self._entries[index].pattern)) for index in pending]
        for index, regex in compiled:
            self._entries[index].regex = regex

    def _descend(self, pattern: str) -> tuple[_Node, bool]:
        """Walk (creating) the path of the pattern's literal prefix."""
        node = self._root
        previous = None
        for ch, following in zip_longest(pattern, pattern[1:], fillvalue=""):
            if ch == "\\" and following in SPECIALS:
                previous = ch
                continue
            escaped = False
            if ch in SPECIALS:
                if previous != "\\":
                    return node, True
                escaped = True
            node = node.children.setdefault(ch, _Node())
            node.is_escaped = escaped
            previous = ch
        return node, False

    def _candidates(self, text: str) -> tuple[list[int], str | None]:
        """Return candidate regex indices and the plain pattern equal to text, if any."""
        node = self._root
        found = set(node.pattern_indices)
        escaped: list[str] = []
        for ch in text:
            child = node.children.get(ch)
            if child is None:
                return sorted(found), None
            if child.is_escaped:
                escaped.append("\\")
            escaped.append(ch)
            node = child
            found.update(node.pattern_indices)
        literal = "".join(escaped) if node.is_literal_end else None
        return sorted(found), literal

    def _matching_entries(self, indices: list[int], text: str):
        for index in indices:
            entry = self._entries[index]
            match = entry.regex.search(text)
            if match is not None and match.start() == 0 and match.end() == len(text):
                yield entry

    def find_matches(self, text: str) -> list[str]:
        """Return every stored pattern that matches the whole of ``text``."""
        indices, literal = self._candidates(text)
        matches = [] if literal is None else [literal]
        matches.extend(entry.pattern for entry in self._matching_entries(indices, text))
        return matches

    def find_best_match(self, text: str) -> str | None:
        """Return the matching pattern with the lowest score, or None."""
        indices, literal = self._candidates(text)
        best: tuple[str, int] | None = None
        if literal is not None:
            best = (literal, self._scorer(literal, False))
        for entry in self._matching_entries(indices, text):
            if best is None or entry.score < best[1]:
                best = (entry.pattern, entry.score)
        return None if best is None else best[0]


def _compile(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise RegexCompilationError(pattern, str(exc)) from exc