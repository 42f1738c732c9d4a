"""An in-memory bloom filter that serialises its bitmaps to bytes."""

from __future__ import annotations

import base64
import json
import struct
import threading
from typing import Iterable, Optional, Sequence

from algoplay.bloom.info import BFInfo, BloomFilter


def _encode_bitmap(bits: set[int]) -> bytes:
    ordered = sorted(bits)
    return struct.pack(f"<Q{len(ordered)}Q", len(ordered), *ordered)


def _decode_bitmap(data: bytes) -> set[int]:
    if len(data) < 8:
        raise ValueError("bitmap data too short")
    (count,) = struct.unpack_from("<Q", data)
    if len(data) != 8 + 8 * count:
        raise ValueError("bitmap data has the wrong length")
    return set(struct.unpack_from(f"<{count}Q", data, 8))


class Config(BFInfo):
    """Bloom filter parameters that can build a filter."""

    @classmethod
    def default(cls) -> "Config":
        """One million items at a false-positive rate of 0.0001."""
        return cls(n=1000000, p=0.0001, name="bf_byte")

    def get_or_build(self, data: bytes = b"") -> "BFByte":
        """Build an empty filter, or restore one from ``marshal`` output.

        Raises ValueError when ``data`` cannot be decoded.
        """
        if not data:
            self.estimate_params()
            self.calculate_parts()
            return BFByte(self)

        decoded = json.loads(data)
        if not isinstance(decoded, dict):
            raise ValueError("serialised filter must be a JSON object")
        bitmaps: dict[int, set[int]] = {}
        for key, encoded in decoded.items():
            if not isinstance(encoded, str):
                raise ValueError("bitmap must be a base64 string")
            bitmaps[int(key)] = _decode_bitmap(
                base64.b64decode(encoded, validate=True)
            )
        self.estimate_params()
        self.calculate_parts()
        return BFByte(self, bitmaps)


class BFByte(BloomFilter):
    """A bloom filter holding one bitmap per part in memory."""

    def __init__(
        self, config: Config, bitmaps: Optional[dict[int, set[int]]] = None
    ) -> None:
        self.config = config
        self._lock = threading.Lock()
        self._bitmaps: dict[int, set[int]] = dict(bitmaps or {})
        for part in config.parts:
            self._bitmaps.setdefault(part.index, set())

    def marshal(self) -> bytes:
        """Serialise the bitmaps to JSON bytes that ``get_or_build`` reads."""
        with self._lock:
            payload = {
                str(index): base64.b64encode(_encode_bitmap(bits)).decode("ascii")
                for index, bits in self._bitmaps.items()
            }
        return json.dumps(payload, sort_keys=True).encode("utf-8")

    def add(self, value: bytes) -> None:
        locations = self.config.locations(value)
        with self._lock:
            for location in locations:
                self._bitmaps[location.index].add(location.offset)

    def adds(self, keys: Iterable[bytes]) -> None:
        for key in keys:
            self.add(key)

    def exists(self, value: bytes) -> bool:
        locations = self.config.locations(value)
        with self._lock:
            return all(
                location.offset in self._bitmaps[location.index]
                for location in locations
            )

    def batch_exists(self, keys: Sequence[bytes]) -> list[bool]:
        return [self.exists(key) for key in keys]

    def clear(self) -> None:
        with self._lock:
            self._bitmaps = {part.index: set() for part in self.config.parts}