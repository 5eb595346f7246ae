"""Character-level tokenizing of text streams."""

from __future__ import annotations

from typing import Callable, Iterator, Optional, TextIO

_CHUNK_SIZE = 0x100

CharPredicate = Callable[[str], bool]
CharTransform = Callable[[str], str]


def isnewline(c: str) -> bool:
    """Return True if ``c`` is a newline character."""
    return c == "\n"


def _chars(stream: TextIO) -> Iterator[str]:
    while chunk := stream.read(_CHUNK_SIZE):
        yield from chunk


def tokenize(
    stream: TextIO,
    min_length: int = 1,
    split: Optional[CharPredicate] = None,
    keep: Optional[CharPredicate] = None,
    transform: Optional[CharTransform] = None,
) -> list[str]:
    """Split the text of ``stream`` into tokens, in the order they appear.

    ``split`` marks characters that end a token; ``keep`` decides which other
    characters go into the token (all of them if omitted); ``transform`` maps
    each kept character before it is added. Tokens shorter than
    ``min_length`` are dropped. The end of the stream also ends a token.
    """
    if stream is None:
        raise ValueError("stream is None")

    tokens: list[str] = []
    current: list[str] = []

    def flush() -> None:
        if len(current) >= min_length:
            tokens.append("".join(current))
        current.clear()

    for c in _chars(stream):
        if split is not None and split(c):
            flush()
        elif keep is None or keep(c):
            current.append(transform(c) if transform is not None else c)
    flush()
    return tokens