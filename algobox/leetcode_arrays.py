"""Solutions to array and number problems from an online judge."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from itertools import accumulate


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices of two numbers in ``nums`` that add up to ``target``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        if target - value in seen:
            return [seen[target - value], index]
        seen[value] = index
    raise ValueError("no two numbers add up to the target")


def max_profit(prices: Iterable[int]) -> int:
    """Best profit from one buy followed by one later sell."""
    best = 0
    lowest: int | None = None
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        best = max(best, price - lowest)
    return best


def subtract_product_and_sum(n: int) -> int:
    """Product of the digits of ``n`` minus their sum."""
    sign = -1 if n < 0 else 1
    n = abs(n)
    total = 0
    product = 1
    while n:
        n, digit = divmod(n, 10)
        total += sign * digit
        product *= sign * digit
    return product - total


def number_of_steps(num: int) -> int:
    """Steps to reach zero by halving even numbers and decrementing odd ones."""
    steps = 0
    while num > 0:
        num = num // 2 if num % 2 == 0 else num - 1
        steps += 1
    return steps


def running_sum(nums: Iterable[int]) -> list[int]:
    """Prefix sums of ``nums``."""
    return list(accumulate(nums))


def average_salary(salary: Sequence[int]) -> float:
    """Mean salary leaving out one lowest and one highest value."""
    if len(salary) < 3:
        raise ValueError("at least three salaries are needed")
    ordered = sorted(salary)
    return sum(ordered[1:-1]) / (len(ordered) - 2)


def can_make_arithmetic_progression(arr: Sequence[int]) -> bool:
    """Whether the values of ``arr`` can be arranged as an arithmetic progression."""
    if len(arr) < 2:
        raise ValueError("at least two values are needed")
    ordered = sorted(arr)
    step = ordered[1] - ordered[0]
    return all(b - a == step for a, b in zip(ordered, ordered[1:]))


def count_odds(low: int, high: int) -> int:
    """Number of odd integers between ``low`` and ``high`` inclusive."""
    count = _trunc_div(high - low, 2)
    if low % 2 != 0 or high % 2 != 0:
        count += 1
    return count


def sum_odd_length_subarrays(arr: Sequence[int]) -> int:
    """Sum of all contiguous subarrays of odd length."""
    prefix = [0, *accumulate(arr)]
    n = len(arr)
    return sum(
        prefix[end + 1] - prefix[start]
        for start in range(n)
        for end in range(start, n, 2)
    )


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """One-based positions of two entries of sorted ``numbers`` summing to ``target``."""
    left = 0
    right = len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total == target:
            break
        if total > target:
            right -= 1
        else:
            left += 1
    return [left + 1, right + 1]


def maximum_wealth(accounts: Iterable[Iterable[int]]) -> int:
    """Largest total held by one customer across their accounts."""
    return max([0, *(sum(customer) for customer in accounts)])


def array_sign(nums: Iterable[int]) -> int:
    """Sign of the product of ``nums``: 1, -1 or 0."""
    negatives = 0
    for num in nums:
        if num == 0:
            return 0
        if num < 0:
            negatives += 1
    return 1 if negatives % 2 == 0 else -1


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` places, in place."""
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = [*nums[-k:], *nums[:-k]]


def hamming_weight(n: int) -> int:
    """Number of set bits in ``n`` taken as an unsigned 32-bit value."""
    return (n & 0xFFFFFFFF).bit_count()


def is_happy(n: int) -> bool:
    """Whether repeatedly summing squared digits of ``n`` reaches 1."""
    seen: set[int] = set()
    while n not in seen:
        if n == 1:
            return True
        seen.add(n)
        total = 0
        while n > 0:
            n, digit = divmod(n, 10)
            total += digit * digit
        n = total
    return False


def first_bad_version(n: int, is_bad_version: Callable[[int], bool]) -> int:
    """First version among 1..n for which ``is_bad_version`` holds, or 0."""
    low, high = 0, n
    while low <= high:
        mid = (low + high) // 2
        if is_bad_version(mid) and not is_bad_version(mid - 1):
            return mid
        if not is_bad_version(mid):
            low = mid + 1
        else:
            high = mid - 1
    return 0


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero of ``nums`` to its end, keeping other values in order."""
    non_zero = [num for num in nums if num != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or where it would be inserted."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return low


def search(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or -1 if absent."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def pivot_index(nums: Sequence[int]) -> int:
    """First index whose left and right sums are equal, or -1."""
    total = sum(nums)
    left = 0
    for index, value in enumerate(nums):
        if left == total - left - value:
            return index
        left += value
    return -1


def subarrays_div_by_k(nums: Iterable[int], k: int) -> int:
    """Number of non-empty subarrays whose sum is divisible by ``k``."""
    if k <= 0:
        raise ValueError("k must be positive")
    remainders = Counter({0: 1})
    running = 0
    result = 0
    for num in nums:
        running += num
        remainder = running % k
        result += remainders[remainder]
        remainders[remainder] += 1
    return result


def largest_perimeter(nums: Sequence[int]) -> int:
    """Largest perimeter of a triangle with positive area from ``nums``, or 0."""
    ordered = sorted(nums)
    for a, b, c in reversed(list(zip(ordered, ordered[1:], ordered[2:]))):
        if a + b > c:
            return a + b + c
    return 0


def sorted_squares(nums: Sequence[int]) -> list[int]:
    """Squares of sorted ``nums`` in ascending order."""
    result = [0] * len(nums)
    left, right = 0, len(nums) - 1
    for position in reversed(range(len(nums))):
        if abs(nums[left]) > abs(nums[right]):
            result[position] = nums[left] * nums[left]
            left += 1
        else:
            result[position] = nums[right] * nums[right]
            right -= 1
    return result