"""Uniform sampling of arbitrarily large integers.

Every function takes ``rng``, any object with the interface of
:class:`random.Random` (only ``getrandbits`` is used). Random bits are drawn
as 32-bit words, least significant first. A given generator state therefore
always yields the same value, whatever the platform.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

_WORD_BITS = 32


class BitSource(Protocol):
    """Anything that can produce random bits like :class:`random.Random`."""

    def getrandbits(self, k: int) -> int: ...


def _require_unsigned(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def gen_biguint(rng: BitSource, bit_size: int) -> int:
    """Return a random non-negative integer of at most ``bit_size`` bits."""
    if bit_size < 0:
        raise ValueError(f"bit_size must not be negative, got {bit_size}")
    full_words, rem = divmod(bit_size, _WORD_BITS)
    words = [rng.getrandbits(_WORD_BITS) for _ in range(full_words + (rem > 0))]
    if rem:
        words[-1] >>= _WORD_BITS - rem
    return sum(word << (_WORD_BITS * position) for position, word in enumerate(words))


def gen_bigint(rng: BitSource, bit_size: int) -> int:
    """Return a random integer whose magnitude has at most ``bit_size`` bits.

    The sign is chosen at random. A zero magnitude is redrawn half of the time
    so that zero is no more likely than any other value.
    """
    while True:
        magnitude = gen_biguint(rng, bit_size)
        if magnitude == 0:
            if rng.getrandbits(1):
                continue
            return 0
        return magnitude if rng.getrandbits(1) else -magnitude


def gen_biguint_below(rng: BitSource, bound: int) -> int:
    """Return a random integer in ``[0, bound)``; ``bound`` must be positive."""
    if bound <= 0:
        raise ValueError(f"bound must be positive, got {bound}")
    bits = bound.bit_length()
    while True:
        candidate = gen_biguint(rng, bits)
        if candidate < bound:
            return candidate


def gen_biguint_range(rng: BitSource, lbound: int, ubound: int) -> int:
    """Return a random non-negative integer in ``[lbound, ubound)``."""
    _require_unsigned(lbound, "lbound")
    _require_unsigned(ubound, "ubound")
    if not lbound < ubound:
        raise ValueError(f"empty range: {lbound} is not below {ubound}")
    if lbound == 0:
        return gen_biguint_below(rng, ubound)
    return lbound + gen_biguint_below(rng, ubound - lbound)


def gen_bigint_range(rng: BitSource, lbound: int, ubound: int) -> int:
    """Return a random integer in ``[lbound, ubound)``."""
    if not lbound < ubound:
        raise ValueError(f"empty range: {lbound} is not below {ubound}")
    if lbound == 0:
        return gen_biguint_below(rng, abs(ubound))
    if ubound == 0:
        return lbound + gen_biguint_below(rng, abs(lbound))
    return lbound + gen_biguint_below(rng, abs(ubound - lbound))


class UniformBigUint:
    """Uniform sampler over the half-open non-negative range ``[low, high)``."""

    __slots__ = ("base", "length")

    def __init__(self, low: int, high: int) -> None:
        _require_unsigned(low, "low")
        _require_unsigned(high, "high")
        if not low < high:
            raise ValueError(f"empty range: {low} is not below {high}")
        self.base = low
        self.length = high - low

    @classmethod
    def inclusive(cls, low: int, high: int) -> UniformBigUint:
        """Build a sampler over the closed range ``[low, high]``."""
        if not low <= high:
            raise ValueError(f"empty range: {low} is above {high}")
        return cls(low, high + 1)

    def sample(self, rng: BitSource) -> int:
        """Draw one value from the range."""
        return self.base + gen_biguint_below(rng, self.length)

    @staticmethod
    def sample_single(low: int, high: int, rng: BitSource) -> int:
        """Draw one value from ``[low, high)`` without building a sampler."""
        return gen_biguint_range(rng, low, high)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniformBigUint):
            return NotImplemented
        return (self.base, self.length) == (other.base, other.length)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.base, self.length))

    def __repr__(self) -> str:
        return f"UniformBigUint(base={self.base}, length={self.length})"


class UniformBigInt:
    """Uniform sampler over the half-open signed range ``[low, high)``."""

    __slots__ = ("base", "length")

    def __init__(self, low: int, high: int) -> None:
        if not low < high:
            raise ValueError(f"empty range: {low} is not below {high}")
        self.base = low
        self.length = high - low

    @classmethod
    def inclusive(cls, low: int, high: int) -> UniformBigInt:
        """Build a sampler over the closed range ``[low, high]``."""
        if not low <= high:
            raise ValueError(f"empty range: {low} is above {high}")
        return cls(low, high + 1)

    def sample(self, rng: BitSource) -> int:
        """Draw one value from the range."""
        return self.base + gen_biguint_below(rng, self.length)

    @staticmethod
    def sample_single(low: int, high: int, rng: BitSource) -> int:
        """Draw one value from ``[low, high)`` without building a sampler."""
        return gen_bigint_range(rng, low, high)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniformBigInt):
            return NotImplemented
        return (self.base, self.length) == (other.base, other.length)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.base, self.length))

    def __repr__(self) -> str:
        return f"UniformBigInt(base={self.base}, length={self.length})"


@dataclass(frozen=True)
class RandomBits:
    """A distribution of integers with a magnitude of at most ``bits`` bits."""

    bits: int

    def __post_init__(self) -> None:
        if self.bits < 0:
            raise ValueError(f"bits must not be negative, got {self.bits}")

    def sample_biguint(self, rng: BitSource) -> int:
        """Draw a non-negative value."""
        return gen_biguint(rng, self.bits)

    def sample_bigint(self, rng: BitSource) -> int:
        """Draw a value of random sign."""
        return gen_bigint(rng, self.bits)