"""Match an input string against many regular expressions via a literal-prefix trie."""

__version__ = "0.1.0"
__all__ = ["cli", "errors", "trie"]