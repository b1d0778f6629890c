"""Sort positive integers with a merge sort and report timings."""

from __future__ import annotations

import re
import sys
import time
from collections import deque
from collections.abc import Iterable, Sequence

_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"[+-]?\d+")
_WHITESPACE = " \t\n\v\f\r"


def parse_numbers(args: Iterable[str]) -> list[int]:
    """Read each argument's leading integer; every one must be positive."""
    numbers = []
    for arg in args:
        match = _LEADING_INT.match(arg.lstrip(_WHITESPACE))
        number = int(match.group()) if match else 0
        if number <= 0 or number > _INT_MAX:
            raise ValueError("Error")
        numbers.append(number)
    return numbers


def merge(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list."""
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_insert_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted, splitting in halves and merging."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return merge(merge_insert_sort(items[:mid]), merge_insert_sort(items[mid:]))


def format_container(message: str, values: Iterable[int]) -> str:
    """Render a message followed by each value and a trailing space."""
    return f"{message} " + "".join(f"{value} " for value in values)


def _timed_sort(values: Iterable[int]) -> tuple[list[int], float]:
    start = time.perf_counter()
    result = merge_insert_sort(values)
    elapsed_us = (time.perf_counter() - start) * 1_000_000
    return result, elapsed_us


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Error", file=sys.stderr)
        return 1
    try:
        numbers = parse_numbers(args)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(format_container("Before:", numbers))
    sorted_list, list_time = _timed_sort(list(numbers))
    print(format_container("After: ", sorted_list))
    _, deque_time = _timed_sort(deque(numbers))

    print(f"Time to process a range of {len(numbers)} elements with list  : {list_time:.5f} us")
    print(f"Time to process a range of {len(numbers)} elements with deque : {deque_time:.5f} us")
    return 0


if __name__ == "__main__":
    sys.exit(main())