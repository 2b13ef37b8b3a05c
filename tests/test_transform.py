"""
test_transform.py
-----------------

Concat, Repeat, Rotate, Translate, Scale and RotateTranslate.
"""

import math
import pytest

from paracurve import (
    T, Segment, Circle, BezierThird,
    Concat, Repeat, Rotate, Translate, Scale, RotateTranslate,
)

ATOL = 1e-12


# ---------------------------------------------------------------------------
# Concat
# ---------------------------------------------------------------------------
def test_concat(zigzag):
    assert zigzag.evaluate(T.start()) == pytest.approx((0.0, 0.0))
    assert zigzag.evaluate(T.end()) == pytest.approx((0.0, 2.0))
    assert zigzag.evaluate(T(0.5)) == pytest.approx((1.0, 1.0))
    assert zigzag.evaluate(0.25) == pytest.approx((0.5, 0.5))
    assert zigzag.evaluate(0.75) == pytest.approx((0.5, 1.5))


def test_concat_continuous_at_joint(zigzag):
    eps = 1e-9
    left = zigzag.evaluate(0.5 - eps)
    right = zigzag.evaluate(0.5 + eps)
    assert left == pytest.approx((1.0, 1.0), abs=1e-6)
    assert right == pytest.approx((1.0, 1.0), abs=1e-6)


def test_concat_just_below_end_stays_on_last_child():
    c = Concat([Segment((0, 0), (1, 0)), Segment((1, 0), (1, 1)), Segment((1, 1), (0, 1))])
    t = math.nextafter(1.0, 0.0)
    assert c.evaluate(t) == pytest.approx((0.0, 1.0), abs=1e-9)


def test_concat_single_child_is_identity():
    s = Segment((2, 3), (4, 7))
    c = Concat([s])
    for t in (0.0, 0.2, 0.5, 0.9, 1.0):
        assert c.evaluate(t) == pytest.approx(s.evaluate(t))


def test_concat_nested():
    inner = Concat([Segment((0, 0), (1, 0)), Segment((1, 0), (2, 0))])
    outer = Concat([inner, Segment((2, 0), (2, 2))])
    assert outer.evaluate(0.25) == pytest.approx((1.0, 0.0))
    assert outer.evaluate(0.75) == pytest.approx((2.0, 1.0))


def test_concat_empty_raises():
    with pytest.raises(ValueError):
        Concat([])


def test_concat_rejects_non_curves():
    with pytest.raises(TypeError):
        Concat([Segment((0, 0), (1, 1)), lambda t: (0, 0)])


def test_concat_shares_children(diagonal):
    c = Concat([diagonal, diagonal])
    assert c.functions[0] is c.functions[1] is diagonal


# ---------------------------------------------------------------------------
# Repeat
# ---------------------------------------------------------------------------
def test_repeat(diagonal):
    rep = Repeat(diagonal, 2)
    assert rep.evaluate(T.start()) == pytest.approx((0.0, 0.0))
    assert rep.evaluate(T.end()) == pytest.approx((1.0, 1.0))
    assert rep.evaluate(T(0.5)) == pytest.approx((0.0, 0.0))


def test_concat_repeat(zigzag):
    repeat = Repeat(zigzag, 2)
    assert repeat.evaluate(T.start()) == pytest.approx((0.0, 0.0))
    assert repeat.evaluate(T.end()) == pytest.approx((0.0, 2.0))
    assert repeat.evaluate(T(0.5)) == pytest.approx((0.0, 0.0))
    assert repeat.evaluate(T(0.75)) == pytest.approx((1.0, 1.0))
    assert repeat.evaluate(T(0.125)) == pytest.approx((0.5, 0.5))


@pytest.mark.parametrize("n", [1, 3, 5])
def test_repeat_replays_closed_curve(unit_circle, n):
    rep = Repeat(unit_circle, n)
    for k in range(n):
        for x in (0.0, 0.1, 0.25, 0.5, 0.9, 1.0):
            got = rep.evaluate((k + x) / n)
            assert got == pytest.approx(unit_circle.evaluate(x), abs=1e-9)


@pytest.mark.parametrize("k", range(4))
@pytest.mark.parametrize("x", [0.1, 0.25, 0.5, 0.75, 0.9])
def test_repeat_replays_open_curve(k, x):
    wave = BezierThird((0, 0), (1, 0), (0, 1), (1, 1))
    rep = Repeat(wave, 4)
    assert rep.evaluate((k + x) / 4) == pytest.approx(wave.evaluate(x))


@pytest.mark.parametrize("n", [0, -2])
def test_repeat_requires_positive_count(diagonal, n):
    with pytest.raises(ValueError):
        Repeat(diagonal, n)


# ---------------------------------------------------------------------------
# Rotate / Translate / Scale
# ---------------------------------------------------------------------------
def test_rotate(diagonal):
    r = Rotate(diagonal, (0.5, 0.5), T(0.25))
    assert r.evaluate(T.start()) == pytest.approx((1.0, 0.0), abs=ATOL)
    assert r.evaluate(T.end()) == pytest.approx((0.0, 1.0), abs=ATOL)


def test_rotate_preserves_distance_to_centre():
    curve = BezierThird((0, 0), (3, 1), (1, 2), (2, -1))
    centre = (0.7, -0.4)
    r = Rotate(curve, centre, 0.37)
    for t in (i / 20 for i in range(21)):
        p, q = curve.evaluate(t), r.evaluate(t)
        d0 = math.hypot(p.x - centre[0], p.y - centre[1])
        d1 = math.hypot(q.x - centre[0], q.y - centre[1])
        assert d1 == pytest.approx(d0)


def test_rotate_full_turn_is_identity(diagonal):
    r = Rotate(diagonal, (3.0, -2.0), 1.0)
    assert r.evaluate(0.3) == pytest.approx(diagonal.evaluate(0.3), abs=1e-9)


def test_translate(diagonal):
    tr = Translate(diagonal, (0.5, 0.5))
    assert tr.evaluate(T.start()) == pytest.approx((0.5, 0.5), abs=ATOL)
    assert tr.evaluate(T.end()) == pytest.approx((1.5, 1.5), abs=ATOL)


def test_scale_identity(unit_circle):
    s = Scale(unit_circle, (0.3, 0.8), 1.0, 1.0)
    for t in (0.0, 0.13, 0.5, 0.77, 1.0):
        assert s.evaluate(t) == pytest.approx(unit_circle.evaluate(t))


def test_scale_about_centre():
    s = Scale(Segment((2, 2), (3, 3)), (1, 1), 2.0, 3.0)
    assert s.start() == pytest.approx((3.0, 4.0))
    assert s.end() == pytest.approx((5.0, 7.0))


def test_scale_uniform_default():
    s = Scale(Segment((0, 0), (1, 2)), (0, 0), 2.0)
    assert s.scale_y == 2.0
    assert s.end() == pytest.approx((2.0, 4.0))


def test_scale_centre_is_fixed_point(unit_circle):
    s = Scale(unit_circle, (0.0, 0.0), 3.0, 0.5)
    assert s.evaluate(0.25) == pytest.approx((0.0, 0.5), abs=ATOL)
    assert s.evaluate(0.5) == pytest.approx((-3.0, 0.0), abs=ATOL)


def test_transforms_reject_non_curves():
    with pytest.raises(TypeError):
        Rotate((0, 0), (0, 0), 0.1)
    with pytest.raises(TypeError):
        Translate(None, (1, 1))


# ---------------------------------------------------------------------------
# RotateTranslate
# ---------------------------------------------------------------------------
def test_rotate_translate(diagonal):
    r_tr = RotateTranslate(diagonal, by=(0.5, 0.5), centre=(0.5, 0.5), angle=T(0.25),
                           rotate_first=True)
    assert r_tr.evaluate(T.start()) == pytest.approx((1.5, 0.5), abs=ATOL)
    assert r_tr.evaluate(T.end()) == pytest.approx((0.5, 1.5), abs=ATOL)

    tr_r = RotateTranslate(diagonal, by=(0.5, 0.5), centre=(0.5, 0.5), angle=T(0.25),
                           rotate_first=False)
    assert tr_r.evaluate(T.start()) == pytest.approx((0.5, 0.5), abs=ATOL)
    assert tr_r.evaluate(T.end()) == pytest.approx((-0.5, 1.5), abs=ATOL)


def test_rotate_translate_matches_explicit_chain(diagonal):
    by, centre, angle = (1.0, -2.0), (0.2, 0.3), 0.1
    rt = RotateTranslate(diagonal, by, centre, angle)
    chain = Translate(Rotate(diagonal, centre, angle), by)
    tr = RotateTranslate(diagonal, by, centre, angle, rotate_first=False)
    chain2 = Rotate(Translate(diagonal, by), centre, angle)
    for t in (0.0, 0.4, 1.0):
        assert rt.evaluate(t) == pytest.approx(chain.evaluate(t))
        assert tr.evaluate(t) == pytest.approx(chain2.evaluate(t))


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------
def test_deep_composition_keeps_endpoints():
    petal = BezierThird((0, 0), (1, 0), (0.2, 0.8), (0.8, 0.8))
    flower = Repeat(Rotate(Scale(petal, (0, 0), 2.0, 1.5), (0, 0), 0.125), 3)
    moved = Translate(flower, (10, 10))
    assert moved.start() == pytest.approx((10.0, 10.0), abs=ATOL)
    end = Rotate(Scale(petal, (0, 0), 2.0, 1.5), (0, 0), 0.125).end()
    assert moved.end() == pytest.approx((end.x + 10, end.y + 10), abs=ATOL)


def test_evaluation_is_idempotent(zigzag):
    curve = RotateTranslate(Repeat(zigzag, 3), (1, 1), (0, 0), 0.3)
    assert curve.linspace(30) == curve.linspace(30)


def test_concurrent_evaluation_matches_serial(zigzag):
    from concurrent.futures import ThreadPoolExecutor

    curve = Rotate(Repeat(zigzag, 4), (0.5, 0.5), 0.2)
    ts = [i / 200 for i in range(201)]
    serial = [curve.evaluate(t) for t in ts]
    with ThreadPoolExecutor(max_workers=4) as pool:
        parallel = list(pool.map(curve.evaluate, ts))
    assert parallel == serial
