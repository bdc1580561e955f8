"""Small text exercises: a greeting, vowel counting and word frequency."""

import argparse
import sys
from collections import Counter
from collections.abc import Iterable

VOWELS = "aeiou"
GREETING = "Hello World"


def hello() -> str:
    """Return the greeting line."""
    return GREETING


def count_vowels(word: str) -> dict[str, int]:
    """Count the lower-case vowels of ``word``.

    Only vowels that occur are included, in the order a, e, i, o, u.
    """
    counts = Counter(ch for ch in word if ch in VOWELS)
    return {vowel: counts[vowel] for vowel in VOWELS if counts[vowel]}


def most_frequent(words: Iterable[str]) -> str:
    """Return the most frequent word; ties go to the alphabetically first."""
    counts = Counter(words)
    if not counts:
        raise ValueError("no words given")
    return min(counts, key=lambda word: (-counts[word], word))


def hello_main(argv=None) -> int:
    """Check that no arguments were given, then print the greeting."""
    parser = argparse.ArgumentParser(prog="hello", description="Print a greeting.")
    try:
        parser.parse_args([] if argv is None else argv)
    except SystemExit as exit_:
        return int(exit_.code or 0)
    sys.stdout.write(f"{hello()}\n")
    return 0


def vowels_main(argv=None) -> int:
    """Read one word from standard input and print its vowel counts."""
    tokens = sys.stdin.read().split()
    word = tokens[0] if tokens else ""
    for vowel, count in count_vowels(word).items():
        print(f"{vowel} {count}")
    return 0


def frequent_main(argv=None) -> int:
    """Read words from standard input and print the most frequent one."""
    try:
        print(most_frequent(sys.stdin.read().split()))
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0