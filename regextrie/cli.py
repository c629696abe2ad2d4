"""Command that demonstrates matching inputs against sets of patterns."""

from __future__ import annotations

import argparse
import sys

from .errors import RegexTrieError
from .trie import RegexTrie

_RULE = "\n---------------------------------"


def _build(patterns: list[str]) -> RegexTrie:
    trie = RegexTrie()
    print("Inserting patterns...")
    for pattern in patterns:
        try:
            trie.insert(pattern)
        except RegexTrieError as exc:
            print(f"Failed to insert pattern '{pattern}': {exc}", file=sys.stderr)
    return trie


def _show(trie: RegexTrie, text: str, *, sort: bool = False) -> None:
    matches = trie.find_matches(text)
    print("\nFound matching regex patterns:")
    if not matches:
        print("  No matches found.")
        return
    for match in sorted(matches) if sort else matches:
        print(f"  - {match}")


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration and print the matches found."""
    parser = argparse.ArgumentParser(
        prog="regextrie",
        description="Show which patterns of a few sample sets match sample inputs.",
    )
    parser.parse_args(argv)

    trie = _build(
        [
            "something[0-9]+",
            "hello.*",
            "hello.*test",
            "hello[a-z]+test",
            "anotherpattern",
            ".*test",
        ]
    )
    text = "helloabctest"
    print(_RULE)
    print(f'Input string: "{text}"')
    _show(trie, text, sort=True)
    print(_RULE)

    text = "something12345"
    print(f'\nInput string: "{text}"')
    _show(trie, text)
    print(_RULE)

    samples = [
        (
            [".*", ".*test", "test", "test.*", ".*test.*", ".*(test).*", ".*(test|toto).*"],
            "test",
        ),
        (
            [
                "https://google.com/.*",
                "https://google.com/user/.*",
                "https://google.com/user/.*/photos/*",
                "https://facebook.com",
            ],
            "https://google.com/user/1234",
        ),
        ([".*", ".*ac", ".*bc", ".*abcd"], "https://google.com/user/1234"),
    ]
    for patterns, text in samples:
        trie = _build(patterns)
        print(f'\nInput string: "{text}"')
        _show(trie, text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())