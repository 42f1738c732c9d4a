"""Random red-packet splitting with the double-mean method."""

from __future__ import annotations

import random
from typing import Optional


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def random_packets(
    amount: int,
    minimum: int,
    count: int,
    rng: Optional[random.Random] = None,
    clamp: bool = False,
) -> list[int]:
    """Split ``amount`` into ``count`` packets of at least ``minimum`` each.

    Each packet but the last takes a random share of up to twice the mean
    of what remains above the minimums; the last takes the rest. With
    ``clamp`` the count is lowered to ``amount`` when it exceeds it.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    if rng is None:
        rng = random.Random()
    if clamp and amount < count:
        count = amount
    remain = amount - minimum * count
    packets: list[int] = []
    for index in range(count):
        share = rng.randrange(100)
        if index == count - 1:
            extra = remain
        else:
            extra = _trunc_div(_trunc_div(remain * share * 2, count - index), 100)
        remain = remain - extra if remain > extra else 0
        packets.append(minimum + extra)
    return packets