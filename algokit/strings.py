"""String searches: IP restoration, keypad letters, palindromes, brackets, word breaks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import lru_cache
from itertools import product

_KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}

_DECIMAL_DIGITS = frozenset("0123456789")


def restore_ip_addresses(s: str) -> list[str]:
    """Return every dotted IPv4 address that can be formed by splitting the digits of s.

    Octets have no leading zeros and lie in 0..255; addresses come out with
    shorter leading octets first.
    """
    if any(ch not in _DECIMAL_DIGITS for ch in s):
        raise ValueError(f"expected a string of decimal digits, got {s!r}")

    def walk(start: int, parts: list[str]) -> Iterator[str]:
        if len(parts) == 4:
            if start == len(s):
                yield ".".join(parts)
            return
        for end in range(start + 1, min(start + 3, len(s)) + 1):
            part = s[start:end]
            if (len(part) > 1 and part[0] == "0") or int(part) > 255:
                continue
            yield from walk(end, [*parts, part])

    return list(walk(0, []))


def letter_combinations(digits: str) -> list[str]:
    """Return every letter string a phone keypad can spell for digits, in keypad order.

    Digits without letters (0, 1 or anything else) leave nothing to spell.
    """
    if not digits:
        return []
    return ["".join(letters) for letters in product(*(_KEYPAD.get(d, "") for d in digits))]


def palindrome_partitions(s: str) -> list[list[str]]:
    """Return every way to cut s into pieces that are all palindromes."""

    def walk(start: int, pieces: list[str]) -> Iterator[list[str]]:
        if start == len(s):
            yield pieces
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if piece == piece[::-1]:
                yield from walk(end, [*pieces, piece])

    return list(walk(0, []))


def generate_parentheses(n: int) -> list[str]:
    """Return every balanced string of n bracket pairs, opening brackets tried first."""

    def walk(opened: int, closed: int, text: str) -> Iterator[str]:
        if opened == n and closed == n:
            yield text
            return
        if opened < n:
            yield from walk(opened + 1, closed, text + "(")
        if closed < opened:
            yield from walk(opened, closed + 1, text + ")")

    return list(walk(0, 0, ""))


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Tell whether s can be split into a sequence of words from word_dict."""
    words = frozenset(word_dict)

    @lru_cache(maxsize=None)
    def breakable(start: int) -> bool:
        if start == len(s):
            return True
        return any(
            s[start:end] in words and breakable(end) for end in range(start + 1, len(s) + 1)
        )

    return breakable(0)