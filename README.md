# wordtally

Reads a text file, breaks it into words and shows how often each distinct
word occurs. The most frequent words come first.

The command reads the file as Latin-1 text. Whitespace (space, tab,
newline, vertical tab, form feed, carriage return) separates words. Only
ASCII letters and digits are kept inside a word, and every other
character is dropped. Each word is lower-cased before it is counted.

## Installation

```
pip install .
```

## Command line

```
wordfrequency <fpath> <min_wc> <min_wl> <lim_n_results>
```

The same command also runs as `python -m wordtally.cli`.

- `fpath`: path to a readable text file. The file is never modified.
- `min_wc`: leave out words that occur fewer times than this. Use 1 to
  keep every word.
- `min_wl`: leave out words shorter than this. Use 1 to keep every word.
- `lim_n_results`: print at most this many results. Use 0 to print all.

Only the leading integer of each numeric argument is read. An argument
with no leading digits counts as 0. A value outside the signed 64-bit
range is an error. If `min_wc` or `min_wl` is below 1 it counts as 1, and
a negative limit counts as 0.

Example:

```
wordfrequency notes.txt 2 4 10
```

The output starts with the file name, the minimum word length and the
total number of words. The number of distinct words comes next. Then a
`TERM | COUNT` table lists the words in descending order of count. If the
file holds no words, nothing is printed.

When the arguments are wrong, a usage message goes to standard error.
When the file cannot be opened, an error message is printed. In both
cases the command exits with status 1.

## Library use

You can also use the parts of the command on their own.

- `wordtally.futil.tokenize(stream, min_length, split, keep, transform)`
  reads a text stream and returns its tokens as a list, in the order they
  appear. The three callables are optional:
  - `split` marks the characters that end a token.
  - `keep` chooses which of the other characters go into the token.
  - `transform` maps each kept character.

  Tokens shorter than `min_length` are dropped. `wordtally.futil.isnewline(c)`
  tests for `"\n"`.
- `wordtally.linkedlist.LinkedList(cmpfn)` is a double-ended list that is
  ordered by a three-way comparison function.
  - It has `add_first`, `add_last`, `pop_first` and `pop_last`. Popping
    from an empty list raises `IndexError`.
  - `sort()` sorts the list in place with a merge sort.
  - It supports `len()` and iteration.
  - `in` checks membership with the comparison function.
- `wordtally.cli.create_wordfreqs_list(words)` counts runs of equal words
  in a sorted sequence. It returns a `LinkedList` of `WordFreq(word, count)`
  entries ordered by descending count.
- `wordtally.cli.format_wordfreqs(freqs, min_count, limit)` renders those
  entries as the report table, as a string.
- `wordtally.cli.parse_args(argv, prog)` turns the four positional
  arguments into an `Options` value. Bad arguments raise
  `wordtally.cli.UsageError`.
- `wordtally.common` provides `intcmp`, `charcmp` and `basename`. The
  `basename` function returns the part of a path after its last `/`.

```python
import io

from wordtally.cli import create_wordfreqs_list, format_wordfreqs
from wordtally.futil import tokenize

words = tokenize(io.StringIO("the cat and the hat"), 1,
                 str.isspace, str.isalnum, str.lower)
words.sort()
print(format_wordfreqs(create_wordfreqs_list(words), 1, 0))
```

## Running the tests

```
pip install .[test]
pytest
```