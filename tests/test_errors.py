import pytest

from regextrie.errors import RegexCompilationError, RegexTrieError
from regextrie.trie import RegexTrie


def test_compilation_error_keeps_pattern_and_reason():
    err = RegexCompilationError("abc[", "unterminated set")
    assert err.pattern == "abc["
    assert err.reason == "unterminated set"
    assert "abc[" in str(err)
    assert "unterminated set" in str(err)


def test_compilation_error_caught_as_value_error():
    trie = RegexTrie()
    with pytest.raises(ValueError) as info:
        trie.insert("x(")
    assert isinstance(info.value, RegexTrieError)
    assert info.value.pattern == "x("


def test_trie_raises_compilation_error_for_bad_pattern():
    with pytest.raises(RegexCompilationError) as info:
        RegexTrie.from_patterns(["https://www.google.com/["])
    assert info.value.pattern == "https://www.google.com/["


def test_compilation_error_caught_as_base_class():
    trie = RegexTrie()
    with pytest.raises(RegexTrieError) as info:
        trie.insert("test(abc")
    assert info.value.pattern == "test(abc"