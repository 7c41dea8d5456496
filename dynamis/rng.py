"""A 32-bit Mersenne Twister source with the random helpers used by the simulations."""

from __future__ import annotations

_N = 624
_M = 397
_MATRIX_A = 0x9908B0DF
_UPPER = 0x80000000
_LOWER = 0x7FFFFFFF
_MASK = 0xFFFFFFFF

DEFAULT_SEED = 5489


class RandomSource:
    """MT19937 generator producing the same stream as the standard 32-bit engine."""

    min = 0
    max = _MASK

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        state = [seed & _MASK]
        for i in range(1, _N):
            prev = state[-1]
            state.append((1812433253 * (prev ^ (prev >> 30)) + i) & _MASK)
        self._state = state
        self._pos = _N

    def _twist(self) -> None:
        mt = self._state
        for i in range(_N):
            y = (mt[i] & _UPPER) | (mt[(i + 1) % _N] & _LOWER)
            mt[i] = mt[(i + _M) % _N] ^ (y >> 1) ^ (_MATRIX_A if y & 1 else 0)
        self._pos = 0

    def __call__(self) -> int:
        """Next raw 32-bit output."""
        if self._pos >= _N:
            self._twist()
        y = self._state[self._pos]
        self._pos += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self()

    def f_rand(self, f_min: float, f_max: float) -> float:
        """Uniform float in [f_min, f_max]."""
        fraction = (self() - self.min) / float(self.max - self.min)
        return fraction * (f_max - f_min) + f_min

    def b_rand(self) -> bool:
        """A fair coin: True when the next output is even."""
        return self() % 2 == 0

    def rand(self, low: int, high: int) -> int:
        """Integer in [low, high], truncated from a uniform float."""
        return int(self.f_rand(low, high))