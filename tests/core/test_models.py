from __future__ import annotations

import dataclasses

import pytest

from mondrian.core.models import Leaf, Rect


def test_rect_dimensions_and_centroid() -> None:
    r = Rect(10, 20, 31, 45)
    assert (r.width, r.height) == (21, 25)
    # Integer division rounds the midpoint down
    assert r.centroid == (20, 32)


@pytest.mark.parametrize(
    "rect,expected",
    [
        (Rect(0, 0, 3, 3), Rect(1, 1, 2, 2)),
        (Rect(5, 5, 15, 8), Rect(6, 6, 14, 7)),
        (Rect(0, 0, 2, 10), None),
        (Rect(0, 0, 10, 2), None),
    ],
)
def test_rect_inset(rect: Rect, expected: Rect | None) -> None:
    assert rect.inset() == expected


def test_rect_is_a_plain_frozen_dataclass() -> None:
    r = Rect(1, 2, 3, 4)
    assert repr(r) == "Rect(x0=1, y0=2, x1=3, y1=4)"
    assert r == Rect(1, 2, 3, 4) and hash(r) == hash(Rect(1, 2, 3, 4))
    with pytest.raises(dataclasses.FrozenInstanceError):
        r.x0 = 5  # type: ignore[misc]


def test_leaf_pairs_rect_and_color() -> None:
    leaf = Leaf(Rect(0, 0, 4, 4), (255, 0, 0))
    assert leaf.rect.width == 4 and leaf.color == (255, 0, 0)
