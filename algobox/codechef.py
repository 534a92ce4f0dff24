"""Solutions to a collection of short contest problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def bob_bank(w: int, x: int, y: int, z: int) -> int:
    """Balance after ``z`` days of depositing ``x`` and withdrawing ``y``."""
    return w + z * x - z * y


def chef_rich(a: int, b: int, x: int) -> int:
    """Days needed to grow from ``a`` to ``b`` earning ``x`` per day."""
    return _trunc_div(b - a, x)


def lucky_days(k: int, values: Iterable[int]) -> int:
    """Count values that become a multiple of seven once ``k`` is added."""
    return sum(1 for value in values if (value + k) % 7 == 0)


def choose_notebook(
    x: int, y: int, k: int, notebooks: Iterable[tuple[int, int]]
) -> str:
    """Decide whether some ``(pages, cost)`` notebook covers the missing pages."""
    required = x - y
    if any(required <= pages and cost <= k for pages, cost in notebooks):
        return "LuckyChef"
    return "UnluckyChef"


def longest_valid_prefix(expression: str) -> int:
    """Length of the longest balanced prefix of a ``<``/``>`` expression."""
    longest = 0
    depth = 0
    for position, char in enumerate(expression, start=1):
        depth += 1 if char == "<" else -1
        if depth < 0:
            break
        if depth == 0:
            longest = position
    return longest


def safe_houses(speed: int, minutes: int, cop_houses: Iterable[int]) -> int:
    """Number of houses among 1..100 that no cop can reach in time."""
    reach = speed * minutes
    covered: set[int] = set()
    for house in cop_houses:
        covered.update(range(max(1, house - reach), min(100, house + reach) + 1))
    return 100 - len(covered)


def count_one_substrings(s: str) -> int:
    """Count substrings that start and end with ``1``."""
    ones = s.count("1")
    return ones * (ones + 1) // 2


def wireframe_cost(n: int, m: int, x: int) -> int:
    """Cost of a wire frame around an ``n`` by ``m`` rectangle."""
    return 2 * (n + m) * x


def forgotten_words(
    words: Iterable[str], phrases: Iterable[Iterable[str]]
) -> list[str]:
    """For each word, report whether it still appears in any modern phrase."""
    known = {word for phrase in phrases for word in phrase}
    return ["YES" if word in known else "NO" for word in words]


def hoops_winner(n: int) -> int:
    """Number of the hoop the winning player shoots last."""
    return _trunc_div(n, 2) + 1


def best_movie_rating(space: int, movies: Iterable[tuple[int, int]]) -> int:
    """Highest rating among ``(size, rating)`` movies that fit in ``space``."""
    movies = list(movies)
    ratings = [rating for size, rating in movies if size <= space]
    # The candidate list starts with one empty (0, 0) slot per movie.
    if movies and space >= 0:
        ratings.append(0)
    return max(ratings, default=-1)


def is_lapindrome(s: str) -> bool:
    """Whether both halves of ``s`` hold the same characters equally often."""
    half = len(s) // 2
    return Counter(s[:half]) == Counter(s[len(s) - half:])


def can_feed_elephants(candies: int, counts: Iterable[int]) -> bool:
    """Whether ``candies`` suffice to give every elephant its wanted count."""
    return sum(counts) <= candies


def max_difference(n: int, s: int) -> int:
    """Largest difference between two numbers up to ``n`` summing to ``s``."""
    if n >= s:
        return s
    return n - (s - n)


def can_stop(u: int, v: int, a: int, s: int) -> bool:
    """Whether braking at ``a`` over ``s`` brings speed ``u`` down to ``v``."""
    if u <= v:
        return True
    return u * u - 2 * a * s <= v * v


def problem_category(rating: int) -> str:
    """Difficulty label for a problem rating in the range 1..299."""
    if 1 <= rating < 100:
        return "EASY"
    if 100 <= rating < 200:
        return "MEDIUM"
    if 200 <= rating < 300:
        return "HARD"
    raise ValueError(f"rating out of range: {rating}")


def language_chef(a: int, b: int, a1: int, b1: int, a2: int, b2: int) -> int:
    """Which of two chefs knows both features ``a`` and ``b`` (0 for none)."""
    if {a, b} <= {a1, b1}:
        return 1
    if {a, b} <= {a2, b2}:
        return 2
    return 0


def is_rainbow_array(values: Sequence[int]) -> bool:
    """Whether ``values`` is a symmetric 1..7..1 run with no gaps."""
    if not values:
        raise ValueError("values must not be empty")
    n = len(values)
    if values[0] != 1 or values[-1] != 1:
        return False
    half = n // 2
    current = 1
    for previous, value, mirror in zip(
        values[:half], values[1 : half + 1], reversed(values[n - half - 1 : n - 1])
    ):
        if value != mirror:
            return False
        if value != current:
            if previous == current and value == current + 1:
                current += 1
            else:
                return False
    return current == 7


def equalise_salaries(salaries: Iterable[int]) -> int:
    """Moves needed to make all salaries equal to the lowest one."""
    salaries = list(salaries)
    lowest = min([10000, *salaries])
    return sum(salary - lowest for salary in salaries)


def speed_test(a: int, x: int, b: int, y: int) -> str:
    """Who downloads faster: ``a`` bytes in ``x`` seconds or ``b`` in ``y``."""
    alice = a * y
    bob = b * x
    if alice > bob:
        return "Alice"
    if alice < bob:
        return "Bob"
    return "Equal"


def can_serve_dishes(n: int, a: int, b: int, c: int) -> bool:
    """Whether ``n`` two-ingredient dishes can be served."""
    return not (b < n or a + c < n)


def vaccine_advice(d: int, l: int, r: int) -> str:
    """Advice for a second dose on day ``d`` given the window ``l``..``r``."""
    if d > r:
        return "Too Late"
    if d < l:
        return "Too Early"
    return "Take second dose now"


def max_xor_secondary(values: Iterable[int]) -> int:
    """Largest XOR of maximum and second maximum over all subarrays."""
    best = 0
    stack: list[int] = []
    for value in values:
        while stack:
            best = max(best, value ^ stack[-1])
            if value < stack[-1]:
                break
            stack.pop()
        stack.append(value)
    return best