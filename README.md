# edcurve

Group operations on Curve25519 in twisted Edwards form, written in plain
Python with no dependencies beyond the standard library.

## Modules

- `edcurve.field` — `FieldElement`, arithmetic modulo 2^255 − 19 (addition,
  subtraction, multiplication, negation, `square`, `invert`, `invsqrt`,
  `to_bytes` / `from_bytes`, `is_negative`, `is_zero`), the function
  `sqrt_ratio_i(u, v)`, and the constants `SQRT_M1`, `EDWARDS_D`,
  `EDWARDS_D2` and `SQRT_AD_MINUS_ONE`.
- `edcurve.scalar` — scalars as plain `int`s below 2^255: `reduce` (modulo
  the group order `BASEPOINT_ORDER`), `from_bits`, and the digit recodings
  `to_radix_16`, `to_radix_2w`, `radix_2w_size_hint` and
  `non_adjacent_form`.
- `edcurve.edwards` — `CompressedEdwardsY`, the 32-byte point encoding
  (`from_slice`, `identity`, `to_bytes`, `decompress`), and `EdwardsPoint`
  with `+`, `-`, negation, `*` by an `int`, `double`, `mul_by_pow_2`,
  `mul_by_cofactor`, `is_small_order`, `is_torsion_free`, `is_identity`,
  `is_valid`, `compress` and `to_montgomery`; plus the functions
  `variable_base_mul` and `sum_points`.
- `edcurve.table` — `EdwardsBasepointTable`, precomputed multiples of a
  basepoint for fast fixed-base multiplication (`create`, `basepoint`, `mul`,
  or `scalar * table`).
- `edcurve.constants` — `ED25519_BASEPOINT_COMPRESSED`,
  `ED25519_BASEPOINT_POINT`, `ED25519_BASEPOINT_TABLE`, `BASEPOINT_ORDER`,
  `X25519_BASEPOINT`, `RISTRETTO_BASEPOINT_COMPRESSED`, the field constants,
  and `eight_torsion()`, the eight points of small order.
- `edcurve.straus` — `straus_multiscalar_mul`,
  `straus_optional_multiscalar_mul`, `vartime_double_scalar_mul_basepoint`
  (computes `a * A + b * B` for the Ed25519 basepoint `B`) and
  `VartimeEdwardsPrecomputation` for repeated products with a fixed set of
  points.
- `edcurve.pippenger` — `pippenger_multiscalar_mul` and
  `pippenger_optional_multiscalar_mul`, the bucket method.
- `edcurve.multiscalar` — `multiscalar_mul`, `vartime_multiscalar_mul` and
  `optional_vartime_multiscalar_mul`. The variable-time functions use
  Straus's method below `PIPPENGER_THRESHOLD` (190) terms and Pippenger's
  method from there on.

## Installation

```
pip install .
```

## Example

```python
from edcurve import constants
from edcurve.edwards import CompressedEdwardsY, variable_base_mul
from edcurve.multiscalar import vartime_multiscalar_mul

B = constants.ED25519_BASEPOINT_POINT
P = variable_base_mul(B, 999)

encoded = P.compress().to_bytes()
assert CompressedEdwardsY(encoded).decompress() == P

Q = vartime_multiscalar_mul([2, 3], [B, P])
assert Q == variable_base_mul(B, 2 + 3 * 999)

assert constants.ED25519_BASEPOINT_TABLE * 999 == P
assert not B.is_small_order()
assert all(T.is_small_order() for T in constants.eight_torsion())
```

`CompressedEdwardsY.decompress()` returns `None` when the bytes are not the
encoding of a curve point. The `optional_*` multiscalar functions return
`None` when any point given to them is `None`; the others raise
`ValueError` in that case. All multiscalar functions raise `ValueError` when
the number of scalars and points differ.

## What it does not do

The package covers the Edwards group only. There are no Ristretto or
Montgomery-curve operations: `RISTRETTO_BASEPOINT_COMPRESSED` and
`X25519_BASEPOINT` are plain byte strings, and `EdwardsPoint.to_montgomery()`
returns the 32-byte u-coordinate without a point type to go with it. There is
no signature scheme, key exchange or command-line tool.

Python integers are not constant time. `multiscalar_mul` and
`variable_base_mul` follow a schedule that does not depend on the scalars,
but the package makes no side-channel guarantees and is meant for testing,
teaching and prototyping.

## Running the tests

```
pip install .[test]
pytest
```