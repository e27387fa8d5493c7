from decimal import Decimal

import pytest

from judgekit.strings import (
    MODULUS,
    count_free_parking,
    describe_positions,
    divide_by_power_of_ten,
    mastermind_score,
    max_sleep_distance,
    ordered_binary_value,
    trim,
)


def test_trim_all_blank():
    assert trim(" \t\n ") == ""
    assert trim("") == ""


def test_trim_without_leading_blank_strips_the_end():
    text = "hello world \t\n"
    assert trim(text) == text.rstrip()


def test_trim_keeps_plain_text():
    assert trim("abc") == "abc"


def test_trim_result_never_starts_blank():
    result = trim("   padded  ")
    assert result == result.lstrip()
    assert result.startswith("padded")


@pytest.mark.parametrize(
    "n, m",
    [("1234", "100"), ("5", "1000"), ("1200", "100"), ("100", "100"), ("98765", "10")],
)
def test_divide_matches_decimal(n, m):
    result = divide_by_power_of_ten(n, m)
    assert Decimal(result) == Decimal(n) / Decimal(m)
    if "." in result:
        assert not result.endswith("0")


def test_divide_by_one_is_identity():
    assert divide_by_power_of_ten("1234", "1") == "1234"


def test_mastermind_identical():
    assert mastermind_score("ABCD", "ABCD") == (len("ABCD"), 0)


def test_mastermind_permutation_matches_everything():
    code, guess = "ABCDE", "BCAED"
    exact, near = mastermind_score(code, guess)
    assert exact + near == len(code)


def test_mastermind_length_mismatch():
    with pytest.raises(ValueError):
        mastermind_score("AB", "ABC")


def test_ordered_binary_single_digit():
    assert ordered_binary_value("1") == 1


def test_ordered_binary_zeros_and_empty_agree():
    assert ordered_binary_value("") == ordered_binary_value("0000")


@pytest.mark.parametrize("length", [1, 5, 40, 64])
def test_ordered_binary_all_ones(length):
    assert ordered_binary_value("1" * length) == int("1" * length, 2) % MODULUS


def test_ordered_binary_stays_below_modulus():
    assert 0 <= ordered_binary_value("10" * 50) < MODULUS


def test_parking_sample_street():
    assert count_free_parking("---B--S-D--S--") == 4


def test_parking_open_street():
    street = "-----"
    assert count_free_parking(street) == len(street)


def test_sleep_distance_single_seat_at_end():
    assert max_sleep_distance("...X") == 2


def test_sleep_distance_more_people_never_helps():
    row = "X.........X"
    crowded = "X....X....X"
    assert max_sleep_distance(crowded) <= max_sleep_distance(row)


def test_describe_known_names():
    names = ["ANA", "BOB", "CID"]
    assert describe_positions(names, [2, 3]) == ["BOB", "CID"]


def test_describe_middle():
    assert describe_positions(["A", "?", "B"], [2]) == ["middle of A and B"]


def test_describe_trailing_unknowns():
    assert describe_positions(["A", "?", "?", "?"], [4]) == ["right of right of right of A"]


def test_describe_leading_unknowns():
    assert describe_positions(["?", "?", "A"], [1]) == ["left of left of A"]


def test_describe_out_of_range_query():
    with pytest.raises(ValueError):
        describe_positions(["A"], [2])