# kiammath

A small, dependency-free toolkit of numerical building blocks.

## Modules

- `kiammath.vect2` — `Vect2` (free vector) and `Point2` (position) with
  component access, arithmetic, lexicographic ordering, clipping
  (`clip`, `clip_lower`, `clip_higher`, `val_to_range`) and normalisation
  (`normalize`, `mod_normalize`, `sum_normalize`, `max_normalize`).
  Free functions: `dot_prod`, `cross_prod`, `sqr_length`, `length`,
  `cos`, `sin`, `sqr_dist`, `dist`, `center` (of two or three points),
  `trg_area`, `trg_perimeter`, and tolerance checks `about_zero`,
  `about_equal`, `near_zero`, `near_equal`.
- `kiammath.bbox2` — `BBox2`, an axis-aligned box with `includes`,
  `intersects`, `include`, `intersect`, `translate`, `diag`, `center`,
  `width`, `height` and `area`.
- `kiammath.matrix2` — `Matrix2`, a 2x2 matrix stored as two row vectors,
  with `diagonal`, `identity`, `from_values`, matrix/vector/scalar
  products, `det`, `inversed` (raises `ValueError` when singular),
  `transposed`, `transpose`, `get_col` and `set_col`.
- `kiammath.rnd` — `Rnd`, a deterministic generator combining three small
  congruential sequences, seeded with three integers. It offers `drnd`,
  `drnd_range`, `irnd`, and direction sampling on the sphere:
  `sphr_unif` (uniform), `sphr_bilin` and `sphr_lin` (rejection sampling
  for bilinear and linear densities).
- `kiammath.blockarray` — `BlockArray`, a growable array whose storage
  grows by whole blocks, with `add`, `extend`, `insert`, `put`, `exclude`,
  `remove`, `truncate`, `resize`, `allocate`, `zero_allocate`, `grow`,
  `copy` and `swap`.
- `kiammath.garray` — `GArray`, a `list` subclass with `find`, returning
  the index of the first equal element or `None`.
- `kiammath.matrix3d` — `Matrix3D`, a dense `n1 x n2 x n3` grid indexed
  as `m[i, j, k]` (or `m[i, j]` for a row along the last axis), with
  `allocate`, `resize`, `fill`, `vert_flip`, `hor_flip` and `crop`.
- `kiammath.cholesky` — `choldc(a)`, the lower-triangular Cholesky factor
  of a square symmetric matrix given as nested sequences. A non-positive
  pivot issues a `RuntimeWarning` and its magnitude is used instead.

## Example

```python
from kiammath.vect2 import Vect2, dot_prod
from kiammath.matrix2 import Matrix2
from kiammath.rnd import Rnd

v = Vect2(3.0, 4.0)
print(v.length())                  # 5.0
print(dot_prod(v, Vect2(1.0, 0.0)))  # 3.0

m = Matrix2.from_values(2.0, 0.0, 0.0, 4.0)
print(m.det())                     # 8.0
print(m * v)                       # Vect2(x=6.0, y=16.0)

rng = Rnd(1, 2, 3)
print(rng.drnd())                  # value in [0, 1)
```

## What it does not do

This is a library only: it has no command-line tool. It does not include
a path-sampling solver or scene model built on these pieces, `Rnd` has no
Gaussian sampler and no seeding from the clock, and there are no 3D or
4x4 vector and matrix types beyond what `choldc` accepts as nested lists.

## Running the tests

```
pip install -e ".[test]"
pytest
```