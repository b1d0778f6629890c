import random
from collections import deque

import pytest

from cppnine.pmergeme import format_container, main, merge, merge_insert_sort, parse_numbers


def test_parse_numbers():
    assert parse_numbers(["3", "5", "42"]) == [3, 5, 42]


def test_parse_numbers_takes_leading_digits():
    assert parse_numbers(["12abc", " 7"]) == [12, 7]


@pytest.mark.parametrize("arg", ["0", "-1", "abc", "", "99999999999"])
def test_parse_numbers_rejects(arg):
    with pytest.raises(ValueError, match="Error"):
        parse_numbers(["1", arg])


def test_merge_sorted_halves():
    left, right = [3, 4], [1, 5]
    assert merge(left, right) == sorted(left + right)


def test_merge_with_empty_side():
    assert merge([], [1, 2]) == [1, 2]
    assert merge([1, 2], []) == [1, 2]


@pytest.mark.parametrize("seed", range(5))
def test_merge_insert_sort_matches_sorted(seed):
    rng = random.Random(seed)
    values = [rng.randint(1, 1000) for _ in range(rng.randint(0, 60))]
    assert merge_insert_sort(values) == sorted(values)


def test_merge_insert_sort_leaves_input_alone():
    values = [5, 3, 9, 1]
    merge_insert_sort(values)
    assert values == [5, 3, 9, 1]


def test_merge_insert_sort_accepts_deque():
    values = deque([9, 2, 7, 2])
    assert merge_insert_sort(values) == sorted(values)


def test_format_container():
    assert format_container("Before:", [3, 1]) == "Before: 3 1 "
    assert format_container("After: ", []) == "After:  "


def test_main_output(capsys):
    assert main(["3", "5", "9", "7", "4"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Before: 3 5 9 7 4 "
    assert lines[1] == "After:  3 4 5 7 9 "
    assert lines[2].startswith("Time to process a range of 5 elements with list")
    assert lines[3].startswith("Time to process a range of 5 elements with deque")
    assert all(line.endswith(" us") for line in lines[2:])


def test_main_no_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_main_bad_number(capsys):
    assert main(["3", "-2"]) == 1
    assert capsys.readouterr().err == "Error\n"