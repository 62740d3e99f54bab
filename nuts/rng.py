import time
from typing import Optional

_MULTIPLIER = 1664525
_INCREMENT = 1013904223
_MODULUS = 0x100000000


class Rng:
    """32-bit linear congruential generator used for dealing practice flops.

    Every instance owns its state, so two generators built from the same seed
    produce the same sequence.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = int(time.time() * 1000)
        self.state = seed % _MODULUS

    def seed(self, n: int):
        self.state = n % _MODULUS

    def _step(self) -> float:
        self.state = (self.state * _MULTIPLIER + _INCREMENT) % _MODULUS
        return self.state / _MODULUS

    def next(self) -> float:
        return self._step()

    def rand_int(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"rand_int bound must be positive, got {n}")
        return int(self._step() * n)
