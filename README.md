# randbig

Draw random integers of any size from Python's `random.Random` generators.

The generator can be any object with a `getrandbits(k)` method, such as
`random.Random` or `random.SystemRandom`; nothing else on it is used. Bits are
drawn in 32-bit words, least significant word first, so a seeded generator
gives the same values on every platform.

## Functions

All of these live in `randbig.sampling` and take the generator as their first
argument:

- `gen_biguint(rng, bit_size)`: a non-negative integer with at most `bit_size`
  random bits. A negative `bit_size` raises `ValueError`.
- `gen_bigint(rng, bit_size)`: an integer of random sign whose magnitude has at
  most `bit_size` bits. A zero magnitude is redrawn half of the time, so zero
  is no more likely than any other value.
- `gen_biguint_below(rng, bound)`: uniform in `[0, bound)`. Raises `ValueError`
  unless `bound` is positive.
- `gen_biguint_range(rng, lbound, ubound)`: uniform in `[lbound, ubound)`.
  Raises `ValueError` if either bound is negative.
- `gen_bigint_range(rng, lbound, ubound)`: uniform in `[lbound, ubound)`; the
  bounds may be negative.

Both range functions raise `ValueError` unless `lbound < ubound`.

## Samplers

If you draw from the same range many times, build a sampler once and call its
`sample` method:

```python
import random
from randbig.sampling import UniformBigInt, UniformBigUint, RandomBits

rng = random.Random(42)

dice = UniformBigUint.inclusive(1, 6)
roll = dice.sample(rng)

span = UniformBigInt(-(1 << 200), 1 << 200)
value = span.sample(rng)

bits = RandomBits(256)
unsigned = bits.sample_biguint(rng)
signed = bits.sample_bigint(rng)
```

- `UniformBigUint(low, high)` covers the half-open range `[low, high)` of
  non-negative integers; negative bounds raise `ValueError`.
- `UniformBigInt(low, high)` covers `[low, high)` for any integers.
- `inclusive(low, high)`, a class method on both, covers the closed range
  `[low, high]`.
- Both raise `ValueError` for an empty range.
- Both keep their range as `base` (the low end) and `length` (the number of
  values). Two samplers compare equal when these match.
- For a single draw there is also the static method
  `sample_single(low, high, rng)`, which takes the generator last and builds
  no sampler.

`RandomBits(bits)` is a frozen dataclass. `sample_biguint` calls
`gen_biguint`, and `sample_bigint` calls `gen_bigint`, both with its bit count.
A negative `bits` raises `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```