"""Exceptions raised by the regex trie."""

from __future__ import annotations


class RegexTrieError(Exception):
    """Base class for every error the regex trie raises."""


class RegexCompilationError(RegexTrieError, ValueError):
    """A pattern could not be compiled into a regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"failed to compile pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason