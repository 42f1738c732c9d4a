"""Prime numbers from a pipeline of chained filters."""

from __future__ import annotations

from itertools import count as _count
from typing import Iterable, Iterator


def generate() -> Iterator[int]:
    """Yield 2, 3, 4, ... without end."""
    return _count(2)


def sieve_filter(numbers: Iterable[int], prime: int) -> Iterator[int]:
    """Pass on the numbers that ``prime`` does not divide."""
    for number in numbers:
        if number % prime != 0:
            yield number


def primes(count: int) -> list[int]:
    """Return the first ``count`` primes.

    Each prime found adds one more filter to the pipeline, so the depth of
    the pipeline grows with ``count``.
    """
    found: list[int] = []
    stream: Iterator[int] = generate()
    for _ in range(count):
        prime = next(stream)
        found.append(prime)
        stream = sieve_filter(stream, prime)
    return found