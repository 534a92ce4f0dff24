"""Solutions to a collection of classic stack-based judge problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_MASSES = {"H": 1, "C": 12, "O": 16}
_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}


def min_brace_changes(braces: str) -> int:
    """Fewest brace flips that make ``braces`` balanced."""
    stack: list[str] = []
    for char in braces:
        if char == "{":
            stack.append(char)
        elif stack and stack[-1] == "{":
            stack.pop()
        else:
            stack.append(char)

    changes = 0
    while stack:
        char = stack.pop()
        if stack and stack[-1] == char:
            stack.pop()
        changes += 1
    return changes


def largest_rectangle(heights: Sequence[int]) -> int:
    """Area of the largest rectangle inside a histogram."""
    n = len(heights)

    previous: list[int] = []
    stack: list[int] = []
    for index, height in enumerate(heights):
        while stack and height <= heights[stack[-1]]:
            stack.pop()
        previous.append(stack[-1] if stack else -1)
        stack.append(index)

    following = [n] * n
    stack.clear()
    for index in reversed(range(n)):
        while stack and heights[index] <= heights[stack[-1]]:
            stack.pop()
        following[index] = stack[-1] if stack else n
        stack.append(index)

    return max(
        (h * (nxt - prv - 1) for h, prv, nxt in zip(heights, previous, following)),
        default=0,
    )


def next_permutation_digits(digits: Sequence[int]) -> list[int] | None:
    """Next larger arrangement of ``digits``, or None if there is none."""
    if any(not 0 <= digit <= 9 for digit in digits):
        raise ValueError("digits must lie in 0..9")
    result = list(digits)
    counts = [0] * 10
    for index in reversed(range(len(result))):
        counts[result[index]] += 1
        larger = next(
            (d for d in range(result[index] + 1, 10) if counts[d]), None
        )
        if larger is not None:
            result[index] = larger
            counts[larger] -= 1
            result[index + 1 :] = [
                d for d in range(10) for _ in range(counts[d])
            ]
            return result
    return None


def next_larger_number(digits: Sequence[int]) -> int | None:
    """Smallest number above the one ``digits`` spell using the same digits."""
    if not digits:
        raise ValueError("digits must not be empty")
    stack = list(digits)
    suffix = [stack.pop()]
    while stack:
        digit = stack.pop()
        suffix.append(digit)
        larger = next((d for d in suffix if digit < d), None)
        if larger is not None:
            suffix.remove(larger)
            stack.append(larger)
            stack.extend(sorted(suffix))
            number = 0
            for d in stack:
                number = number * 10 + d
            return number
    return None


def molecular_mass(formula: str) -> int:
    """Mass of a formula built from H, C, O, brackets and multipliers 2..9."""
    stack: list[int | None] = []
    for char in formula:
        if char == "(":
            stack.append(None)
        elif char in _MASSES:
            stack.append(_MASSES[char])
        elif "2" <= char <= "9":
            if not stack or stack[-1] is None:
                raise ValueError(f"multiplier {char!r} has nothing to multiply")
            stack[-1] *= int(char)
        elif char == ")":
            total = 0
            while stack and stack[-1] is not None:
                total += stack.pop()
            if not stack:
                raise ValueError("unbalanced ')'")
            stack.pop()
            stack.append(total)
        else:
            raise ValueError(f"unexpected character {char!r}")
    if None in stack:
        raise ValueError("unclosed '('")
    return sum(stack)


def to_reverse_polish(expression: str) -> str:
    """Convert a fully bracketed infix expression to reverse Polish notation."""
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if char == "(":
            stack.append(char)
        elif "a" <= char <= "z":
            output.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced ')'")
            stack.pop()
        elif char in _PRECEDENCE:
            if not stack:
                raise ValueError("expression must be bracketed")
            top = stack[-1]
            if top == "(" or _PRECEDENCE[char] > _PRECEDENCE[top]:
                stack.append(char)
            else:
                output.append(stack.pop())
                stack.append(char)
        else:
            raise ValueError(f"unexpected character {char!r}")
    return "".join(output)


def can_reorder_trucks(order: Iterable[int]) -> bool:
    """Whether trucks arriving in ``order`` can leave as 1, 2, ..., n via a side street."""
    side_street: list[int] = []
    last = 0
    arrivals = 0
    for truck in order:
        arrivals += 1
        if truck == last + 1:
            last = truck
            while side_street and side_street[-1] == last + 1:
                last = side_street.pop()
        else:
            side_street.append(truck)
    return last == arrivals