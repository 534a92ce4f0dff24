"""Solutions to string problems from an online judge."""

from __future__ import annotations

from collections import Counter
from collections.abc import MutableSequence


def defang_ip_addr(address: str) -> str:
    """Replace every ``.`` of an address with ``[.]``."""
    return address.replace(".", "[.]")


def are_almost_equal(s1: str, s2: str) -> bool:
    """Whether at most one swap of two characters in ``s1`` gives ``s2``."""
    if s1 == s2:
        return True
    if len(s1) != len(s2):
        return False
    differences = [(a, b) for a, b in zip(s1, s2) if a != b]
    return (
        len(differences) == 2
        and differences[0][0] == differences[1][1]
        and differences[0][1] == differences[1][0]
    )


def is_isomorphic(s: str, t: str) -> bool:
    """Whether the characters of ``s`` can be consistently replaced to get ``t``."""
    if len(s) != len(t):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for a, b in zip(s, t):
        if a not in forward and b not in backward:
            forward[a] = b
            backward[b] = a
        elif forward.get(a) != b and backward.get(b) != a:
            return False
    return True


def reverse_string(chars: MutableSequence[str]) -> None:
    """Reverse ``chars`` in place."""
    left, right = 0, len(chars) - 1
    while left < right:
        chars[left], chars[right] = chars[right], chars[left]
        left += 1
        right -= 1


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Whether the letters of ``magazine`` suffice to write ``ransom_note``."""
    return not Counter(ransom_note) - Counter(magazine)


def is_subsequence(s: str, t: str) -> bool:
    """Whether ``s`` can be obtained from ``t`` by deleting characters."""
    if len(s) > len(t):
        return False
    if s == t:
        return True
    remaining = iter(t)
    return all(char in remaining for char in s)


def longest_palindrome(s: str) -> int:
    """Length of the longest palindrome buildable from the letters of ``s``."""
    length = 0
    counts = Counter(s)
    for char in sorted(counts):
        count = counts[char]
        if length % 2 == 0:
            length += count
        else:
            length += count - count % 2
    return length


def fizz_buzz(n: int) -> list[str]:
    """The FizzBuzz sequence for 1..n."""
    result = []
    for i in range(1, n + 1):
        if i % 15 == 0:
            result.append("FizzBuzz")
        elif i % 3 == 0:
            result.append("Fizz")
        elif i % 5 == 0:
            result.append("Buzz")
        else:
            result.append(str(i))
    return result


def reverse_words(s: str) -> str:
    """Reverse the characters of every space-separated word, keeping word order."""
    return " ".join(word[::-1] for word in s.split(" "))