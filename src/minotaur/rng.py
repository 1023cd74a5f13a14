# PCG32 (XSH-RR output over a 64-bit LCG), the generator family every carver
# draws from. Pure Python so a seed reproduces the same maze on any platform.

import os
from dataclasses import dataclass
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF
MUL = 6364136223846793005
# Stream constant used when expanding a u64 seed into state+increment.
SEED_INC = 11634580027462260723


def pcg_step(state: int, increment: int) -> int:
    return (state * MUL + increment) & MASK64


def xsh_rr(state: int) -> int:
    """PCG output permutation: xorshift high bits, then random rotate."""
    xorshifted = (((state >> 18) ^ state) >> 27) & MASK32
    rot = state >> 59
    return ((xorshifted >> rot) | (xorshifted << ((32 - rot) & 31))) & MASK32


def expand_seed(seed: int) -> bytes:
    """Stretch a 64-bit seed into 16 bytes of (state, increment) material."""
    if not (0 <= seed <= MASK64):
        raise ValueError(f"seed must be a 64-bit unsigned integer, got {seed}")
    out = bytearray()
    s = seed
    for _ in range(4):
        s = pcg_step(s, SEED_INC)
        out += xsh_rr(s).to_bytes(4, "little")
    return bytes(out)


@dataclass
class Pcg32:
    state: int
    increment: int

    @classmethod
    def from_state(cls, state: int, increment: int) -> "Pcg32":
        inc = (increment | 1) & MASK64
        rng = cls(state=(state + inc) & MASK64, increment=inc)
        rng.state = pcg_step(rng.state, rng.increment)
        return rng

    @classmethod
    def from_seed(cls, seed: int) -> "Pcg32":
        raw = expand_seed(seed)
        return cls.from_state(
            int.from_bytes(raw[:8], "little"),
            int.from_bytes(raw[8:], "little"),
        )

    @classmethod
    def from_entropy(cls) -> "Pcg32":
        raw = os.urandom(16)
        return cls.from_state(
            int.from_bytes(raw[:8], "little"),
            int.from_bytes(raw[8:], "little"),
        )

    def next32(self) -> int:
        old = self.state
        self.state = pcg_step(self.state, self.increment)
        return xsh_rr(old)

    def below(self, n: int) -> int:
        """Uniform integer in [0, n). Lemire's multiply with rejection, so no modulo bias."""
        assert n > 0
        threshold = ((1 << 32) - n) % n
        while True:
            m = self.next32() * n
            if (m & MASK32) >= threshold:
                return m >> 32

    def coin(self) -> bool:
        return (self.next32() >> 31) == 1

    def choice(self, seq: Sequence[T]) -> T:
        return seq[self.below(len(seq))]


def resolve_rng(seed: Optional[int] = None, rng: Optional[Pcg32] = None) -> Pcg32:
    """An explicit generator wins; else seed a fresh one (entropy when seed is None)."""
    if rng is not None:
        return rng
    if seed is None:
        return Pcg32.from_entropy()
    return Pcg32.from_seed(seed)
