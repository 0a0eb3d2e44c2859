import pytest

from envs.game.geometry import Rect, overlaps

PAIRS = [
    (Rect(0, 0, 10, 10), Rect(5, 5, 10, 10)),
    (Rect(0, 0, 10, 10), Rect(20, 20, 5, 5)),
    (Rect(0, 0, 100, 4), Rect(50, -10, 2, 30)),
    (Rect(0, 0, 10, 10), Rect(2, 2, 3, 3)),
    (Rect(0.5, 0.5, 0.25, 0.25), Rect(0.6, 0.6, 1, 1)),
    (Rect(0, 0, 10, 10), Rect(10, 0, 10, 10)),
]


@pytest.mark.parametrize("a,b", PAIRS)
def test_overlap_is_symmetric(a, b):
    assert overlaps(a, b) == overlaps(b, a)


def test_overlap_detects_penetration_and_containment():
    assert overlaps(Rect(0, 0, 10, 10), Rect(9.99, 9.99, 5, 5))
    assert overlaps(Rect(0, 0, 10, 10), Rect(2, 2, 3, 3))


@pytest.mark.parametrize("other", [
    Rect(10, 0, 5, 10),    # right edge
    Rect(-5, 0, 5, 10),    # left edge
    Rect(0, 10, 10, 5),    # bottom edge
    Rect(0, -5, 10, 5),    # top edge
    Rect(10, 10, 5, 5),    # corner
])
def test_touching_edges_do_not_overlap(other):
    assert not overlaps(Rect(0, 0, 10, 10), other)
    assert not overlaps(other, Rect(0, 0, 10, 10))


def test_derived_edges():
    r = Rect(3, 4, 10, 20)
    assert r.right == 13
    assert r.bottom == 24


@pytest.mark.parametrize("w,h", [(0, 5), (5, 0), (-1, 5), (5, -2), (float("nan"), 5), (5, float("nan"))])
def test_non_positive_size_is_rejected(w, h):
    with pytest.raises(ValueError):
        Rect(0, 0, w, h)


def test_copy_is_independent():
    r = Rect(1, 2, 3, 4)
    c = r.copy()
    c.x = 50
    assert r.x == 1
    assert c == Rect(50, 2, 3, 4)


def test_to_pygame_truncates_for_drawing():
    r = Rect(1.7, 2.2, 26, 30).to_pygame()
    assert (r.x, r.y, r.width, r.height) == (1, 2, 26, 30)
