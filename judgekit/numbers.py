"""Number-theory and bit-manipulation routines."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

MODULUS = 1_000_000_007


class PrimeTable:
    """Sieve of Eratosthenes over ``[0, upper_bound]`` with trial division beyond it."""

    def __init__(self, upper_bound: int) -> None:
        self.sieve_size = upper_bound + 1
        flags = bytearray([1]) * self.sieve_size
        flags[: min(2, self.sieve_size)] = bytes(min(2, self.sieve_size))
        primes: list[int] = []
        for i in range(2, self.sieve_size):
            if flags[i]:
                flags[i * i :: i] = bytes(len(range(i * i, self.sieve_size, i)))
                primes.append(i)
        self._flags = flags
        self.primes: tuple[int, ...] = tuple(primes)

    def is_prime(self, n: int) -> bool:
        """Tell whether ``n`` is prime; exact for ``n`` up to the square of the largest prime."""
        if n < 0:
            return False
        if n < self.sieve_size:
            return bool(self._flags[n])
        for p in self.primes:
            if p * p > n:
                break
            if n % p == 0:
                return False
        return True


def goldbach(n: int, table: PrimeTable) -> tuple[int, int] | None:
    """Split ``n`` into two odd primes with the widest gap, or None if none exists."""
    for p in table.primes[1:]:
        if p > n // 2:
            break
        if table.is_prime(n - p):
            return p, n - p
    return None


def binary_exponent(x: int, y: int, mod: int) -> int:
    """Return ``x ** y % mod`` by repeated squaring; ``y == 0`` gives 1."""
    if y == 0:
        return 1
    return pow(x % mod, y, mod)


def gp_sum(a: int, n: int, mod: int) -> int:
    """Return ``(1 + a + ... + a**(n-1)) % mod`` without division."""
    block = 1
    bit = 0
    result = 0
    degree = 1
    while n:
        if n & (1 << bit):
            n &= ~(1 << bit)
            result = (result + block * binary_exponent(a, n, mod)) % mod
        block = (block + block * binary_exponent(a, degree, mod)) % mod
        degree *= 2
        bit += 1
    return result


def _to_signed32(value: int) -> int:
    return value - (1 << 32) if value & (1 << 31) else value


def split_bits(n: int) -> tuple[int, int]:
    """Deal the set bits of a 32-bit ``n`` alternately to ``a`` and ``b``, lowest first."""
    value = n & 0xFFFFFFFF
    a = b = 0
    to_b = False
    for bit in range(32):
        mask = 1 << bit
        if value & mask:
            if to_b:
                b |= mask
            else:
                a |= mask
            to_b = not to_b
    return _to_signed32(a), _to_signed32(b)


def coin_combinations(coins: Sequence[int], x: int) -> int:
    """Count combinations of coins summing to ``x`` with the table method, modulo 1e9+7."""
    if not coins:
        raise ValueError("at least one coin is required")
    values = sorted(coins)
    smallest = values[0]
    memo = [0] * (x + 1)
    for value in range(0, x + 1, smallest):
        if value != 0 or x % smallest == 0:
            memo[value] = 1

    result = 0
    for current in values[1:]:
        if current % x == 0:
            result = (result + 1) % MODULUS
        for value in range(current, x + 1, current):
            memo[value] = (memo[value] + 1) % MODULUS
        for value in range(1, x):
            if memo[value] and (x - value) % current == 0:
                result = (result + memo[value]) % MODULUS
    return result


def max_potency_sum(weights: Sequence[int]) -> int:
    """Return the best sum of potencies of two neighbouring corners of a weighted hypercube."""
    size = len(weights)
    if size == 0 or size & (size - 1):
        raise ValueError("the number of weights must be a power of two")
    dims = size.bit_length() - 1
    bits = [1 << b for b in range(dims)]
    potencies = [sum(weights[i ^ m] for m in bits) for i in range(size)]
    return max(
        (potencies[i] + potencies[i ^ m] for i in range(size) for m in bits),
        default=0,
    ) if dims else 0


def max_and_queries(values: Sequence[int], queries: Iterable[int]) -> list[int]:
    """For each query ``a``, return the largest ``v & a`` over values, or -1 if there are none."""
    cache: dict[int, int] = {}
    answers: list[int] = []
    for a in queries:
        if a not in cache:
            cache[a] = max((v & a for v in values), default=-1)
        answers.append(cache[a])
    return answers