"""String puzzles: frequency ordering, run-length coding, justification and shifts."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Sequence
from itertools import accumulate, groupby

_ALPHABET = string.ascii_lowercase


def frequency_sort(s: str) -> str:
    """Characters of ``s`` grouped by descending frequency; ties favour the larger character."""
    counts = sorted(Counter(s).items(), key=lambda item: (item[1], item[0]), reverse=True)
    return "".join(char * count for char, count in counts)


def is_anagram(s: str, t: str) -> bool:
    """Whether ``t`` is a rearrangement of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def find_naive(text: str, pattern: str) -> int:
    """Index of the first occurrence of ``pattern`` in ``text`` by direct comparison, or -1."""
    for start in range(len(text)):
        if text.startswith(pattern, start):
            return start
    return -1


def length_of_last_word(s: str) -> int:
    """Length of the last space-separated word in ``s``; 0 if there is none."""
    words = s.split()
    return len(words[-1]) if words else 0


def reverse_words(s: str) -> str:
    """The words of ``s`` in reverse order, separated by single spaces."""
    return " ".join(reversed(s.split()))


def compress(s: str) -> str:
    """Run-length encoding: each run becomes its character followed by the run length."""
    return "".join(f"{char}{sum(1 for _ in run)}" for char, run in groupby(s))


def word_pattern(pattern: str, s: str) -> bool:
    """Whether the words of ``s`` follow ``pattern`` one-to-one."""
    words = s.split()
    if len(words) != len(pattern):
        return False
    letter_seen: dict[str, int] = {}
    word_seen: dict[str, int] = {}
    for index, (letter, word) in enumerate(zip(pattern, words)):
        if letter_seen.get(letter) != word_seen.get(word):
            return False
        letter_seen[letter] = word_seen[word] = index
    return True


def _justify_line(words: list[str], letters: int, max_width: int) -> str:
    if len(words) == 1:
        return words[0].ljust(max_width)
    gaps = len(words) - 1
    space, extra = divmod(max_width - letters, gaps)
    pieces = []
    for gap, word in enumerate(words[:-1]):
        pieces.append(word + " " * (space + (1 if gap < extra else 0)))
    pieces.append(words[-1])
    return "".join(pieces)


def full_justify(words: Sequence[str], max_width: int) -> list[str]:
    """Lay ``words`` out in lines of exactly ``max_width`` characters.

    Spaces are spread evenly, extra ones going to the leftmost gaps; the last
    line is left-justified.
    """
    lines: list[str] = []
    current: list[str] = []
    letters = 0
    for word in words:
        if len(word) > max_width:
            raise ValueError(f"word {word!r} is longer than {max_width}")
        if current and letters + len(current) + len(word) > max_width:
            lines.append(_justify_line(current, letters, max_width))
            current, letters = [], 0
        current.append(word)
        letters += len(word)
    if current:
        lines.append(" ".join(current).ljust(max_width))
    return lines


def is_palindrome_number(n: int) -> bool:
    """Whether the decimal digits of ``n`` read the same backwards; negatives never do."""
    if n < 0:
        return False
    digits = str(n)
    return digits == digits[::-1]


def _require_lowercase(s: str) -> None:
    if any(char not in _ALPHABET for char in s):
        raise ValueError("only lowercase ASCII letters are supported")


def _shift(char: str, amount: int) -> str:
    return _ALPHABET[(_ALPHABET.index(char) + amount) % 26]


def roll_string(s: str, rolls: Sequence[int]) -> str:
    """Apply each roll ``r`` by advancing the first ``r`` letters one step, z wrapping to a."""
    _require_lowercase(s)
    if any(not 0 <= roll <= len(s) for roll in rolls):
        raise ValueError("each roll must lie between 0 and the string length")
    return "".join(
        _shift(char, sum(1 for roll in rolls if roll > index)) for index, char in enumerate(s)
    )


def shifting_letters(s: str, shifts: Sequence[int]) -> str:
    """Shift letter ``i`` by the sum of ``shifts[i:]``, wrapping around the alphabet."""
    _require_lowercase(s)
    if len(shifts) != len(s):
        raise ValueError("shifts must have one entry per letter")
    totals = list(accumulate(reversed(shifts)))[::-1]
    return "".join(_shift(char, total) for char, total in zip(s, totals))


def error_rounds(values: Sequence[int], primary: int, secondary: int) -> int:
    """Rounds until no value stays positive.

    Each round the largest value (the first, on ties) drops by ``primary`` and
    every other value by ``secondary``.
    """
    if primary <= 0 or secondary < 0:
        raise ValueError("primary must be positive and secondary not negative")
    remaining = list(values)
    rounds = 0
    while any(value > 0 for value in remaining):
        top = remaining.index(max(remaining))
        remaining = [
            value - (primary if index == top else secondary)
            for index, value in enumerate(remaining)
        ]
        rounds += 1
    return rounds