"""Bloom filter sizing, partitioning and hashing."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, Sequence

INFO_KEY_NAME = "name"
INFO_KEY_N = "n"
INFO_KEY_P = "p"
INFO_KEY_M = "m"
INFO_KEY_K = "k"
INFO_KEY_PARTS = "parts"

PART_BIT_COUNT = 1 << 32
"""Bits held by one part; a stored string is limited to 2**32 - 1 bits."""

_MASK64 = (1 << 64) - 1
_MAX_UINT32 = (1 << 32) - 1
_MAX_UINT64 = _MASK64

_C1 = 0x87C37B91114253D5
_C2 = 0x4CF5AD432745937F


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (64 - shift))) & _MASK64


def _fmix(value: int) -> int:
    value ^= value >> 33
    value = (value * 0xFF51AFD7ED558CCD) & _MASK64
    value ^= value >> 33
    value = (value * 0xC4CEB9FE1A85EC53) & _MASK64
    value ^= value >> 33
    return value


def murmur3_sum64(data: bytes, seed: int = 0) -> int:
    """First 64 bits of MurmurHash3 x64 128 with both halves seeded by ``seed``."""
    seed &= _MASK64
    h1 = h2 = seed
    length = len(data)
    block_end = length - length % 16

    for start in range(0, block_end, 16):
        k1 = int.from_bytes(data[start:start + 8], "little")
        k2 = int.from_bytes(data[start + 8:start + 16], "little")

        k1 = (k1 * _C1) & _MASK64
        k1 = _rotl(k1, 31)
        k1 = (k1 * _C2) & _MASK64
        h1 ^= k1
        h1 = _rotl(h1, 27)
        h1 = (h1 + h2) & _MASK64
        h1 = (h1 * 5 + 0x52DCE729) & _MASK64

        k2 = (k2 * _C2) & _MASK64
        k2 = _rotl(k2, 33)
        k2 = (k2 * _C1) & _MASK64
        h2 ^= k2
        h2 = _rotl(h2, 31)
        h2 = (h2 + h1) & _MASK64
        h2 = (h2 * 5 + 0x38495AB5) & _MASK64

    tail = data[block_end:]
    if len(tail) > 8:
        k2 = int.from_bytes(tail[8:], "little")
        k2 = (k2 * _C2) & _MASK64
        k2 = _rotl(k2, 33)
        k2 = (k2 * _C1) & _MASK64
        h2 ^= k2
    if tail:
        k1 = int.from_bytes(tail[:8], "little")
        k1 = (k1 * _C1) & _MASK64
        k1 = _rotl(k1, 31)
        k1 = (k1 * _C2) & _MASK64
        h1 ^= k1

    h1 ^= length
    h2 ^= length
    h1 = (h1 + h2) & _MASK64
    h2 = (h2 + h1) & _MASK64
    h1 = _fmix(h1)
    h2 = _fmix(h2)
    h1 = (h1 + h2) & _MASK64
    return h1


class BloomFilter(ABC):
    """The operations every bloom filter offers."""

    @abstractmethod
    def add(self, value: bytes) -> None:
        """Record ``value``."""

    @abstractmethod
    def adds(self, keys: Iterable[bytes]) -> None:
        """Record every key."""

    @abstractmethod
    def exists(self, value: bytes) -> bool:
        """True if ``value`` may have been recorded."""

    @abstractmethod
    def batch_exists(self, keys: Sequence[bytes]) -> list[bool]:
        """``exists`` for each key, in order."""

    @abstractmethod
    def clear(self) -> None:
        """Forget everything recorded."""


@dataclass
class PartInfo:
    """One part of the bitmap and the highest offset it holds."""

    name: str
    max: int
    index: int


@dataclass
class Location:
    """Where one hash of a value falls: the part and the offset inside it."""

    name: str
    offset: int
    index: int


@dataclass
class BFInfo:
    """Parameters of a bloom filter: capacity, error rate, size and hash count."""

    n: int = 0
    p: float = 0.0
    name: str = ""
    m: int = 0
    k: int = 0
    parts: list[PartInfo] = field(default_factory=list)

    @classmethod
    def create(cls, name: str, n: int, p: float) -> "BFInfo":
        """Build the parameters for ``n`` items at false-positive rate ``p``."""
        info = cls(n=n, p=p, name=name)
        info.estimate_params()
        info.calculate_parts()
        return info

    def estimate_params(self) -> None:
        """Derive the bitmap size ``m`` and hash count ``k`` from ``n`` and ``p``."""
        if self.n <= 0:
            raise ValueError("n must be positive")
        if not 0.0 < self.p < 1.0:
            raise ValueError("p must lie strictly between 0 and 1")
        m = math.ceil(
            self.n * math.log(self.p) / math.log(1.0 / math.pow(2.0, math.log(2)))
        )
        k = math.log(2) * m / self.n + 0.5
        self.m = int(m)
        self.k = int(k)

    def calculate_parts(self) -> None:
        """Split the bitmap into parts of at most PART_BIT_COUNT bits."""
        count = self.m // PART_BIT_COUNT + 1
        self.parts = [
            PartInfo(name=f"{self.name}:{index}", max=_MAX_UINT32, index=index)
            for index in range(count)
        ]
        self.parts[-1].max = self.m % PART_BIT_COUNT

    def _rejection_sample(self, random: int) -> int | None:
        if self.m <= 0:
            raise ValueError("bitmap size m must be positive")
        if random > _MAX_UINT64 - _MAX_UINT64 % self.m or random == 0:
            return None
        return random % self.m

    def hashes(self, value: bytes) -> list[int]:
        """Return ``k`` bit positions for ``value``, each below ``m``."""
        result: list[int] = []
        seed = 0
        while len(result) < self.k:
            seed = murmur3_sum64(value, seed)
            position = self._rejection_sample(seed)
            if position is not None:
                result.append(position)
        return result

    def locations(self, value: bytes) -> list[Location]:
        """Return the part and offset of each of the ``k`` positions of ``value``."""
        result = []
        for position in self.hashes(value):
            index = position // PART_BIT_COUNT
            result.append(
                Location(
                    name=self.parts[index].name,
                    offset=position % (PART_BIT_COUNT - 1),
                    index=index,
                )
            )
        return result