"""Word frequency counting for text files: tokenizer, ordered list and command."""

__version__ = "0.1.0"