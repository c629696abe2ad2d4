# regextrie

`regextrie` matches one input string against many regular expressions at once.

Each pattern is stored in a trie under its literal prefix. The literal prefix is every character before the first metacharacter that is not escaped. The metacharacters are `. ? * + ( ) [ ] { }`. To look up an input, the trie is walked along the input to collect a small set of candidate patterns. Each candidate is then checked against the input with Python's `re` module, and only a match of the whole input counts.

A pattern with no unescaped metacharacters is a plain string. It matches only the input that is exactly equal to it, with any `\` escapes removed. For example, `test\[bracket\]` matches the input `test[bracket]`.

## Installation

```
pip install .
```

## Usage

```python
from regextrie.trie import RegexTrie

trie = RegexTrie.from_patterns([
    "https://www.google.com/.*",
    "https://www.google.com/.*/toto/.*",
    "https://www.yahoo.com/.*",
])

trie.find_matches("https://www.google.com/test/toto/")
# ['https://www.google.com/.*', 'https://www.google.com/.*/toto/.*']

trie.find_best_match("https://www.google.com/test/toto/")
# 'https://www.google.com/.*'
```

`find_matches` returns a list of the matching patterns in this order:

1. A plain pattern equal to the input, if there is one.
2. The matching regex patterns, in the order they were inserted.

A plain pattern is reported in its escaped form. For example, the pattern `\[` is reported as `\[` when the input is `[`.

You can add patterns one at a time or several at a time:

```python
trie = RegexTrie()
trie.insert("test[0-9]+")
trie.insert_many(["test(abc|def)", "hello.*"])
```

### Choosing the best match

`find_best_match` returns the matching pattern with the lowest score. If nothing matches, it returns `None`. When two patterns have the same score, the one found first keeps its place.

A scorer is a callable `scorer(pattern, is_regex) -> int`. The default, `regextrie.trie.default_scorer`, works as follows:

- A plain pattern scores `0`, so an exact literal match always wins.
- A regex pattern scores its length, so the shortest matching regex wins.

To score patterns another way, pass your own scorer to `RegexTrie(scorer)` or `RegexTrie.from_patterns(patterns, scorer)`:

```python
trie = RegexTrie.from_patterns(
    ["a.*", "a123bbb"],
    scorer=lambda pattern, is_regex: len(pattern),
)
trie.find_best_match("a123bbb")  # 'a.*'
```

### Errors

If a pattern cannot be compiled, `regextrie.errors.RegexCompilationError` is raised. It is a subclass of both `regextrie.errors.RegexTrieError` and `ValueError`. The error has two attributes: `pattern` holds the pattern, and `reason` holds the compiler's message.

`insert_many` places the whole batch in the trie first. It compiles the regexes only after that. If any regex in the batch fails to compile, the error is raised and none of that batch's regex patterns will match a non-empty input. Plain patterns in the batch are kept.

If you add patterns one by one with `insert`, a bad pattern fails only its own call. Patterns added before or after it work as usual.

## Command line

```
regextrie
```

This runs a fixed demonstration. It builds a few sample tries and prints which of their patterns match some sample inputs. It takes no options other than `-h`/`--help`. It does not read patterns or inputs from the command line or from files.

## Running the tests

```
pip install .[test]
pytest
```