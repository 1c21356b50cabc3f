"""Park–Miller minimal standard pseudo-random generator."""

from __future__ import annotations

import struct
from collections.abc import MutableSequence
from typing import Any

_A = 16807
_P = 2147483647
_B15 = 32768
_B16 = 65536
_SCALE = 4.656612875e-10


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _as_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class Random:
    """Deterministic multiplicative congruential generator (a = 7**5, m = 2**31 - 1)."""

    def __init__(self, seed: int) -> None:
        self.seed = int(seed)
        self.randp()

    def randp(self) -> float:
        """Advance the state and return it scaled to (0, 1) in single precision."""
        seed = self.seed
        xhi = _trunc_div(seed, _B16)
        xalo = (seed - xhi * _B16) * _A
        leftlo = _trunc_div(xalo, _B16)
        fhi = xhi * _A + leftlo
        k = _trunc_div(fhi, _B15)
        seed = (((xalo - leftlo * _B16) - _P) + (fhi - k * _B15) * _B16) + k
        if seed < 0:
            seed += _P
        self.seed = seed
        return _as_float32(seed * _SCALE)

    def rand_int(self, low: int, high: int) -> int:
        """Return an integer in the closed range [low, high]."""
        self.randp()
        return int(self.seed / (_P / (high - low + 1)) + low)

    def rand_size(self, size: int) -> int:
        """Return an integer in the closed range [1, size]."""
        self.randp()
        return int(self.seed / (_P / size) + 1)

    def rand01(self) -> float:
        """Return a float in [0, 1)."""
        self.randp()
        return self.seed / _P

    def shuffle(self, items: MutableSequence[Any]) -> None:
        """Shuffle ``items`` in place using this generator."""
        for i in range(1, len(items)):
            j = self.rand_int(0, i)
            if i != j:
                items[i], items[j] = items[j], items[i]


def self_check() -> bool:
    """Verify the generator against its reference value after 1000 steps from seed 1."""
    rng = Random(1)
    rng.seed = 1
    for _ in range(1000):
        rng.randp()
    return rng.seed == 522329230