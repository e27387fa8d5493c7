import pytest

from judgekit.numbers import (
    MODULUS,
    PrimeTable,
    binary_exponent,
    coin_combinations,
    goldbach,
    gp_sum,
    max_and_queries,
    max_potency_sum,
    split_bits,
)


@pytest.fixture(scope="module")
def table():
    return PrimeTable(1000)


def test_prime_table_small_values(table):
    assert table.is_prime(2)
    assert table.is_prime(97)
    assert not table.is_prime(91)
    assert not table.is_prime(1)
    assert not table.is_prime(0)


def test_prime_table_beyond_sieve():
    small = PrimeTable(10)
    assert small.is_prime(97)
    assert not small.is_prime(91)


def test_prime_list_agrees_with_is_prime(table):
    assert all(table.is_prime(p) for p in table.primes)
    assert len(table.primes) == sum(table.is_prime(n) for n in range(1001))


def test_goldbach_sample(table):
    assert goldbach(8, table) == (3, 5)


@pytest.mark.parametrize("n", range(6, 300, 2))
def test_goldbach_invariant(table, n):
    pair = goldbach(n, table)
    assert pair is not None
    p, q = pair
    assert p + q == n
    assert table.is_prime(p) and table.is_prime(q)
    assert all(not table.is_prime(n - r) for r in table.primes[1:] if r < p)


def test_goldbach_no_split_for_small_n(table):
    assert goldbach(4, table) is None


@pytest.mark.parametrize("x,y,mod", [(3, 200, 1000), (97, 12345, MODULUS), (2, 1, 5)])
def test_binary_exponent_matches_pow(x, y, mod):
    assert binary_exponent(x, y, mod) == pow(x, y, mod)


def test_binary_exponent_zero_power():
    assert binary_exponent(5, 0, 7) == 1


@pytest.mark.parametrize("a,n", [(2, 3), (97, 1000), (5, 1), (12, 65)])
def test_gp_sum_geometric_identity(a, n):
    total = gp_sum(a, n, MODULUS)
    assert ((a - 1) * total) % MODULUS == (pow(a, n, MODULUS) - 1) % MODULUS


def test_gp_sum_of_ones_counts_terms():
    assert gp_sum(1, 37, MODULUS) == 37


def test_gp_sum_zero_terms():
    assert gp_sum(9, 0, MODULUS) == 0


def test_split_bits_sample():
    assert split_bits(7) == (5, 2)


@pytest.mark.parametrize("n", [1, 6, 13, 255, 123456789, 2**31 - 1])
def test_split_bits_partition(n):
    a, b = split_bits(n)
    assert a | b == n
    assert a & b == 0
    assert bin(a).count("1") - bin(b).count("1") in (0, 1)


def test_coin_combinations_small():
    assert coin_combinations([1, 2], 3) == 1


def test_coin_combinations_order_independent():
    assert coin_combinations([5, 2, 3], 9) == coin_combinations([2, 3, 5], 9)


def test_coin_combinations_requires_coins():
    with pytest.raises(ValueError):
        coin_combinations([], 5)


def test_max_potency_sum_invariant_under_cube_symmetry():
    weights = [3, 8, 1, 4, 9, 2, 7, 5]
    for k in range(8):
        shifted = [weights[i ^ k] for i in range(8)]
        assert max_potency_sum(shifted) == max_potency_sum(weights)


def test_max_potency_sum_single_corner():
    assert max_potency_sum([42]) == 0


def test_max_potency_sum_rejects_bad_length():
    with pytest.raises(ValueError):
        max_potency_sum([1, 2, 3])


def test_max_and_queries_invariants():
    values = [12, 7, 200, 33, 95]
    queries = [5, 230, 64, 5, 1]
    answers = max_and_queries(values, queries)
    assert len(answers) == len(queries)
    for a, answer in zip(queries, answers):
        assert answer in {v & a for v in values}
        assert all(answer >= (v & a) for v in values)
    assert answers[0] == answers[3]


def test_max_and_queries_without_values():
    assert max_and_queries([], [5]) == [-1]