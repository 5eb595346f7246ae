"""Command line tool that counts how often each word occurs in a file."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from wordtally.common import basename
from wordtally.futil import tokenize
from wordtally.linkedlist import LinkedList

_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_C_SPACE = frozenset(" \t\n\v\f\r")


class UsageError(Exception):
    """Raised when the command line arguments cannot be used."""


@dataclass
class WordFreq:
    """A word and how many times it occurs."""

    word: str
    count: int = 1


@dataclass(frozen=True)
class Options:
    """Settings taken from the command line."""

    path: str
    min_count: int
    min_length: int
    limit: int


def compare_word_freq_by_count(a: WordFreq, b: WordFreq) -> int:
    """Order word frequencies by descending count."""
    if a.count > b.count:
        return -1
    if a.count < b.count:
        return 1
    return 0


def _strcmp(a: str, b: str) -> int:
    return (a > b) - (a < b)


def _c_isspace(c: str) -> bool:
    return c in _C_SPACE


def _c_isalnum(c: str) -> bool:
    return c.isascii() and c.isalnum()


def _c_tolower(c: str) -> str:
    return c.lower() if c.isascii() else c


def create_wordfreqs_list(words: Iterable[str]) -> LinkedList[WordFreq]:
    """Count runs of equal words in a sorted sequence, most frequent first."""
    freqs: LinkedList[WordFreq] = LinkedList(compare_word_freq_by_count)
    freq: Optional[WordFreq] = None
    for word in words:
        if freq is not None and freq.word == word:
            freq.count += 1
            continue
        freq = WordFreq(word)
        freqs.add_first(freq)
    freqs.sort()
    return freqs


def format_wordfreqs(freqs: Sequence[WordFreq], min_count: int, limit: int) -> str:
    """Render the frequency table; ``limit`` of 0 means no limit."""
    lines = [f"Number of distinct words: {len(freqs)}", ""]
    heading = f"--- Words that occured at least {min_count} times"
    if limit:
        heading += f", limiting to max {limit} results"
    lines.append(heading + " ---")
    lines.append(f"{'TERM':<30}   COUNT")

    printed = 0
    for freq in freqs:
        if limit and printed >= limit:
            break
        if freq.count >= min_count:
            lines.append(f"{freq.word:<30} | {freq.count}")
            printed += 1
    return "\n".join(lines) + "\n"


def _usage(prog: str) -> str:
    return "\n".join(
        [
            "Error: Missing one or more required positional arguments. ",
            f"Usage: ./{prog} <fpath> <min_wc> <min_wl> <lim_n_results>",
            "* <fpath>: Path to a readable file. The file will never be modified. ",
            "* <min_wc>: Exclude words that occur less times than this value. 1 to include all. ",
            "* <min_wl>: Exclude words shorter than this value. 1 to include all. ",
            "* <lim_n_results>: Print at most this many results. 0 to print all. ",
            "--- ",
            f"Example 1: {prog} src/wordfreq.c 10 2 10 ",
            f"Example 2: {prog} data/oxford_dict.txt 1 13 25 ",
        ]
    )


def _parse_long(text: str, name: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    value = int(match.group(1))
    if not _LONG_MIN <= value <= _LONG_MAX:
        raise UsageError(
            f'Error: Bad argument "{text}" for {name}: Numerical result out of range'
        )
    return value


def parse_args(argv: Sequence[str], prog: str = "wordtally") -> Options:
    """Turn the four positional arguments into Options."""
    if len(argv) != 4:
        raise UsageError(_usage(prog))
    path, min_wc, min_wl, lim = argv
    min_count = _parse_long(min_wc, "<min_wc>")
    min_length = _parse_long(min_wl, "<min_wl>")
    limit = _parse_long(lim, "<lim_n_results>")
    return Options(
        path=path,
        min_count=max(min_count, 1),
        min_length=max(min_length, 1),
        limit=max(limit, 0),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the word counter; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    prog = basename(sys.argv[0]) if sys.argv and sys.argv[0] else "wordtally"
    try:
        opts = parse_args(args, prog)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 1

    try:
        with open(opts.path, encoding="latin-1") as infile:
            tokens = tokenize(infile, opts.min_length, _c_isspace, _c_isalnum, _c_tolower)
    except OSError as exc:
        print(f"Error: Failed to open {opts.path}: {exc.strerror}")
        return 1

    if not tokens:
        return 0

    words: LinkedList[str] = LinkedList(_strcmp)
    for token in tokens:
        words.add_last(token)
    words.sort()

    freqs = create_wordfreqs_list(words)
    print(
        f"\n--- {basename(opts.path)} | Words consisting of at least "
        f"{opts.min_length} chars --- "
    )
    print(f"Total number of words: {len(words)}")
    print(format_wordfreqs(list(freqs), opts.min_count, opts.limit), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())