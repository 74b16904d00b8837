"""Algorithms over strings: anagrams, justification, decoding and more."""

from __future__ import annotations

import heapq
from collections import Counter, defaultdict
from typing import Iterable, Sequence


def group_anagrams(words: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of one another, in order of first sight."""
    groups: defaultdict[str, list[str]] = defaultdict(list)
    for word in words:
        groups["".join(sorted(word))].append(word)
    return list(groups.values())


def _justify_line(line: Sequence[str], width: int, last: bool) -> str:
    if last or len(line) == 1:
        return " ".join(line).ljust(width)
    gaps = len(line) - 1
    spaces, extra = divmod(width - sum(map(len, line)), gaps)
    pieces = [
        word + " " * (spaces + (1 if index < extra else 0))
        for index, word in enumerate(line[:-1])
    ]
    return "".join(pieces) + line[-1]


def full_justify(words: Sequence[str], max_width: int) -> list[str]:
    """Pack words greedily into lines of ``max_width`` and justify them.

    Inner lines spread spaces evenly, extra ones to the left; the last line
    and single-word lines are left-justified and padded on the right.
    """
    lines: list[list[str]] = []
    current: list[str] = []
    letters = 0
    for word in words:
        if current and letters + len(current) + len(word) > max_width:
            lines.append(current)
            current, letters = [], 0
        current.append(word)
        letters += len(word)
    if current:
        lines.append(current)
    return [
        _justify_line(line, max_width, index == len(lines) - 1)
        for index, line in enumerate(lines)
    ]


def reverse_words(s: str) -> str:
    """Reverse the order of space-separated words, collapsing extra spaces."""
    return " ".join(reversed([word for word in s.split(" ") if word]))


def remove_duplicate_letters(s: str) -> str:
    """Keep one of each letter, giving the smallest such subsequence."""
    remaining = Counter(s)
    stack: list[str] = []
    on_stack: set[str] = set()
    for ch in s:
        remaining[ch] -= 1
        if ch in on_stack:
            continue
        while stack and ch < stack[-1] and remaining[stack[-1]] > 0:
            on_stack.discard(stack.pop())
        stack.append(ch)
        on_stack.add(ch)
    return "".join(stack)


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Tell whether the note can be cut from the magazine's letters."""
    return not Counter(ransom_note) - Counter(magazine)


def find_the_difference(s: str, t: str) -> str:
    """Return the letter added to a shuffle of ``s`` to make ``t``."""
    if len(t) != len(s) + 1:
        raise ValueError("t must be exactly one character longer than s")
    ordered_t = sorted(t)
    for original, extended in zip(sorted(s), ordered_t):
        if original != extended:
            return extended
    return ordered_t[-1]


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether ``s`` can be got from ``t`` by deleting characters."""
    remaining = iter(t)
    return all(ch in remaining for ch in s)


def repeated_substring_pattern(s: str) -> bool:
    """Tell whether ``s`` is some shorter string repeated several times."""
    n = len(s)
    return any(n % shift == 0 and s[: n - shift] == s[shift:] for shift in range(n - 1, 0, -1))


def reverse_each_word(s: str) -> str:
    """Reverse the characters of each word, keeping every space in place."""
    return " ".join(word[::-1] for word in s.split(" "))


def reorganize_string(s: str) -> str:
    """Rearrange ``s`` so no two neighbours are equal, or return ``""``."""
    heap = [(-count, -ord(ch), ch) for ch, count in Counter(s).items()]
    heapq.heapify(heap)
    result: list[str] = []
    while len(heap) >= 2:
        first = heapq.heappop(heap)
        second = heapq.heappop(heap)
        for negative_count, key, ch in (first, second):
            result.append(ch)
            if negative_count + 1 < 0:
                heapq.heappush(heap, (negative_count + 1, key, ch))
    if heap:
        negative_count, _, ch = heap[0]
        if negative_count < -1:
            return ""
        result.append(ch)
    return "".join(result)


def _typed(text: str) -> str:
    kept: list[str] = []
    for ch in text:
        if ch == "#":
            if kept:
                kept.pop()
        else:
            kept.append(ch)
    return "".join(kept)


def backspace_compare(s: str, t: str) -> bool:
    """Tell whether two strings type out the same text, ``#`` being backspace."""
    return _typed(s) == _typed(t)


def decode_at_index(s: str, k: int) -> str:
    """Return the ``k``-th (1-based) letter of the decoded tape.

    Reading ``s``, a letter is written to the tape and a digit ``d`` makes the
    whole tape repeat ``d`` times in all.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    length = 0
    for end, ch in enumerate(s):
        length = length * int(ch) if ch.isdecimal() else length + 1
        if length >= k:
            break
    else:
        raise ValueError("k is past the end of the decoded string")

    for ch in reversed(s[: end + 1]):
        if ch.isdecimal():
            length //= int(ch)
            k %= length
        else:
            if k in (0, length):
                return ch
            length -= 1
    raise ValueError("encoded string must start with a letter")


def min_deletions(s: str) -> int:
    """Return the fewest deletions that leave every letter a distinct count."""
    used: set[int] = set()
    deletions = 0
    for freq in Counter(s).values():
        while freq > 0 and freq in used:
            freq -= 1
            deletions += 1
        used.add(freq)
    return deletions


def take_characters(s: str, k: int) -> int:
    """Return the fewest characters taken from the two ends of ``s`` (made of
    ``a``, ``b`` and ``c``) to hold ``k`` of each letter, or -1."""
    if set(s) - set("abc"):
        raise ValueError("s may only contain 'a', 'b' and 'c'")
    counts = Counter(s)

    def short() -> bool:
        return any(counts[letter] < k for letter in "abc")

    if short():
        return -1
    n = len(s)
    best = n
    left = 0
    for right, ch in enumerate(s):
        counts[ch] -= 1
        while left <= right and short():
            counts[s[left]] += 1
            left += 1
        best = min(best, n - (right - left + 1))
    return best