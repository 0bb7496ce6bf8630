from __future__ import annotations

import dataclasses

import pytest

from core.errors import InvalidArgumentType
from core.maths import Rect, Vector


def test_vector_plus_is_componentwise() -> None:
    a = Vector(30, 50)
    b = Vector(5, 10)

    out = a.plus(b)

    assert out == Vector(35, 60)
    assert a == Vector(30, 50)
    assert b == Vector(5, 10)


@pytest.mark.parametrize("scalar", [2, -1, 0.5, 0])
def test_vector_times_scales_both_components(scalar: float) -> None:
    v = Vector(3.0, -4.0)

    out = v.times(scalar)

    assert out.x == pytest.approx(3.0 * scalar)
    assert out.y == pytest.approx(-4.0 * scalar)
    assert v == Vector(3.0, -4.0)


def test_vector_defaults_to_origin() -> None:
    assert Vector() == Vector(0, 0)


def test_vector_is_immutable() -> None:
    v = Vector(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5  # type: ignore[misc]


@pytest.mark.parametrize("other", [5, (1, 2), None, "v"])
def test_vector_plus_rejects_non_vector(other) -> None:
    with pytest.raises(InvalidArgumentType):
        Vector(1, 1).plus(other)


def test_invalid_argument_type_is_a_type_error() -> None:
    with pytest.raises(TypeError):
        Vector(1, 1).plus(1)  # type: ignore[arg-type]


def test_start_plus_scaled_move() -> None:
    finish = Vector(30, 50).plus(Vector(5, 10).times(2))
    assert finish.to_tuple() == (40, 70)


def test_rect_bounds_offset_and_scale() -> None:
    rect = Rect.from_bounds(1.0, 3.0, 2.0, 5.0)
    assert (rect.w, rect.h) == (2.0, 3.0)
    assert rect.max_x == 3.0
    assert rect.max_y == 5.0

    moved = rect.offset(-1.0, -2.0).scaled(10)
    assert moved == Rect(0.0, 0.0, 20.0, 30.0)
