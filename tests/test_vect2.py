import math

import pytest

from kiammath.vect2 import (
    Point2,
    Vect2,
    about_equal,
    about_zero,
    center,
    cos,
    cross_prod,
    dist,
    dot_prod,
    length,
    near_equal,
    near_zero,
    sin,
    sqr_dist,
    sqr_length,
    trg_area,
    trg_perimeter,
)


def test_indexing_and_iteration():
    v = Vect2(1.5, -2.0)
    assert v[0] == 1.5 and v[1] == -2.0
    v[1] = 7.0
    assert list(v) == [1.5, 7.0]
    with pytest.raises(IndexError):
        v[2]
    with pytest.raises(IndexError):
        v[-1] = 3


def test_point_indexing():
    p = Point2(4, 5)
    p[0] = 9
    assert tuple(p) == (9, 5)
    with pytest.raises(IndexError):
        p[2]


def test_lexicographic_order():
    assert Vect2(1, 9) < Vect2(2, 0)
    assert Vect2(1, 1) < Vect2(1, 2)
    assert not (Vect2(1, 2) < Vect2(1, 2))
    assert sorted([Point2(2, 1), Point2(1, 3), Point2(1, 2)]) == [
        Point2(1, 2),
        Point2(1, 3),
        Point2(2, 1),
    ]


def test_arithmetic_round_trip():
    a = Vect2(3.0, -1.5)
    b = Vect2(0.5, 2.0)
    assert (a + b) - b == a
    assert (a * b) / b == a
    assert (a * 4.0) / 4.0 == a
    assert 2 * a == a * 2
    assert -(-a) == a
    assert (a + 1.0) - 1.0 == a


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        Vect2(1, 1) / 0
    with pytest.raises(ZeroDivisionError):
        Vect2(1, 1) / Vect2(1, 0)
    with pytest.raises(ZeroDivisionError):
        Point2(1, 1) / 0


def test_copy_is_independent():
    v = Vect2(1, 2)
    c = v.copy()
    c.x = 10
    assert v == Vect2(1, 2)


def test_less_and_less_or_equal():
    assert Vect2(1, 2).less_or_equal(Vect2(1, 2))
    assert not Vect2(1, 2).less(Vect2(1, 2))
    assert Vect2(0, 1).less(Vect2(1, 2))
    assert not Point2(0, 3).less_or_equal(Point2(1, 2))


def test_is_ok():
    assert Vect2(1, 2).is_ok()
    assert not Vect2(math.nan, 0).is_ok()
    assert not Point2(0, math.inf).is_ok()


def test_add_with_weight_and_negate():
    v = Vect2(1, 1)
    u = Vect2(2, -4)
    result = v.add_with_weight(u, 0.5)
    assert result is v
    assert v == Vect2(1, 1) + u * 0.5
    v.negate()
    assert v == -(Vect2(1, 1) + u * 0.5)


def test_clip_and_clip_bounds():
    v = Vect2(-5, 5)
    v.clip(-1, 1)
    assert v == Vect2(-1, 1)
    with pytest.raises(ValueError):
        v.clip(2, 1)

    v = Vect2(-3, 4)
    assert v.clip_lower(0)
    assert v == Vect2(0, 4)
    assert not v.clip_lower(0)
    assert v.clip_higher(2)
    assert v == Vect2(0, 2)
    assert not v.clip_higher(2)


def test_val_to_range_does_not_modify():
    v = Vect2(-3, 4)
    r = v.val_to_range(-1, 1)
    assert r == Vect2(-1, 1)
    assert v == Vect2(-3, 4)
    p = Point2(0.5, 9)
    assert p.val_to_range(0, 1) == Point2(0.5, 1)


def test_in_range():
    assert Vect2(0.2, 0.8).in_range(0, 1)
    assert not Vect2(0.2, 1.8).in_range(0, 1)


def test_max_element():
    v = Vect2(-7, 3)
    assert v.max_element_index() == 0
    assert v.max_element() == 7
    assert Vect2(2, -2).max_element_index() == 0
    assert Vect2(1, -2).max_element_index() == 1


def test_length_pinned_and_invariants():
    v = Vect2(3, 4)
    assert v.length() == 5.0
    assert v.sqr_length() == sqr_length(v)
    assert length(v) == v.length()
    assert v.sum() == v.x + v.y


def test_normalize_family():
    v = Vect2(3, -4)
    assert v.normalize() is v
    assert v.is_normalized()
    with pytest.raises(ValueError):
        Vect2(0, 0).normalize()

    w = Vect2(6, 8)
    original = w.length()
    assert w.mod_normalize() == original
    assert w.is_normalized()
    z = Vect2(0, 0)
    assert z.mod_normalize() == 0.0
    assert z == Vect2(0, 0)


def test_sum_normalize():
    v = Vect2(1, 3)
    total = v.sum_normalize()
    assert total == 4
    assert math.isclose(v.sum(), 1.0)
    z = Vect2(1, -1)
    assert z.sum_normalize() == 0
    assert z == Vect2(0.5, 0.5)


def test_max_normalize():
    v = Vect2(2, -8)
    assert v.max_normalize() == 8
    assert v.max_element() == 1.0
    z = Vect2(0, 0)
    assert z.max_normalize() == 0
    assert z == Vect2(1, 1)


def test_project_and_orthogonal():
    a = Vect2(2.0, 5.0)
    u = Vect2(3.0, 1.0)
    p = a.project(u)
    assert math.isclose(cross_prod(p, u), 0.0, abs_tol=1e-12)
    assert math.isclose(dot_prod(a - p, u), 0.0, abs_tol=1e-12)
    with pytest.raises(ValueError):
        a.project(Vect2(0, 0))

    o = a.any_orthogonal()
    assert math.isclose(dot_prod(o, a), 0.0, abs_tol=1e-12)
    assert o.is_normalized()
    with pytest.raises(ValueError):
        Vect2(0, 0).any_orthogonal()


def test_orient():
    v = Vect2(1, 0)
    v.orient(Vect2(-1, 0.1))
    assert v == Vect2(-1, 0)
    v.orient(Vect2(-2, 0))
    assert v == Vect2(-1, 0)


def test_point_vector_conversions():
    v = Vect2(1.5, 2.5)
    assert v.to_point() == Point2(1.5, 2.5)
    assert v.to_point().to_vector() == v


def test_point_arithmetic_types():
    a = Point2(1, 2)
    b = Point2(4, 6)
    d = b - a
    assert isinstance(d, Vect2)
    assert a + d == b
    assert b - d == a
    assert isinstance(a + b, Point2)
    assert (a * 3) / 3 == a
    assert 3 * a == a * 3
    assert -(-a) == a
    assert (a - 1) + 1 == a


def test_point_mutators():
    p = Point2(-2, 5)
    p.clip(0, 3)
    assert p == Point2(0, 3)
    q = Point2(-2, 5)
    q.clip_lower(0)
    assert q == Point2(0, 5)
    r = Point2(1, 1)
    r.add_with_weight(Vect2(2, 2), 0.5)
    assert r == Point2(2, 2)
    r.negate()
    assert r == Point2(-2, -2)


def test_dot_and_cross_invariants():
    a = Vect2(2.0, -3.0)
    b = Vect2(0.5, 4.0)
    assert dot_prod(a, b) == dot_prod(b, a)
    assert cross_prod(a, b) == -cross_prod(b, a)
    assert cross_prod(a, a) == 0


def test_cos_sin_identity():
    a = Vect2(2.0, 1.0)
    b = Vect2(-1.0, 3.0)
    assert math.isclose(cos(a, b) ** 2 + sin(a, b) ** 2, 1.0)
    assert cos(a, a * 5) == 1.0
    assert sin(a, a * 5) == 0.0
    with pytest.raises(ValueError):
        cos(a, Vect2(0, 0))
    with pytest.raises(ValueError):
        sin(Vect2(0, 0), b)


def test_distances():
    a = Point2(1, 1)
    b = Point2(4, 5)
    assert dist(a, b) == length(b - a)
    assert sqr_dist(a, b) == sqr_length(b - a)
    assert dist(a, b) == dist(b, a)


def test_center():
    a = Point2(0, 0)
    b = Point2(4, 2)
    c = Point2(2, 7)
    m = center(a, b)
    assert dist(a, m) == dist(m, b)
    g = center(a, b, c)
    assert about_equal(g * 3, Point2(a.x + b.x + c.x, a.y + b.y + c.y))
    with pytest.raises(TypeError):
        center(a)


def test_triangle_measures():
    a = Point2(0, 0)
    b = Point2(4, 0)
    c = Point2(0, 3)
    assert trg_area(a, b, c) == 6.0
    assert trg_area(a, b, c) == trg_area(c, b, a)
    assert trg_perimeter(a, b, c) == dist(a, b) + dist(b, c) + dist(c, a)
    assert trg_area(a, b, center(a, b)) == 0


def test_about_and_near():
    assert about_zero(Vect2(1e-9, -1e-9))
    assert not about_zero(Vect2(1e-3, 0))
    assert about_zero(Vect2(0.05, 0.05), 0.1)
    assert about_equal(Point2(1, 1), Point2(1 + 1e-9, 1))
    assert not about_equal(Point2(1, 1), Point2(1.5, 1), 0.1)
    assert near_zero(Vect2(0, 0))
    assert not near_zero(Vect2(1e-9, 0))
    assert near_equal(Vect2(2, 3), Vect2(2, 3))
    assert not near_equal(Vect2(2, 3), Vect2(2, 3 + 1e-6))