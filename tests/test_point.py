from types import SimpleNamespace

import pytest

from domgeometry import DOMMatrix, DOMPoint, DOMPointReadOnly


def test_defaults() -> None:
    p = DOMPointReadOnly()
    assert (p.x, p.y, p.z, p.w) == (0, 0, 0, 1)
    assert p.tojson() == {'x': 0, 'y': 0, 'z': 0, 'w': 1}


def test_read_only() -> None:
    p = DOMPointReadOnly(1, 2)
    with pytest.raises(AttributeError):
        p.x = 3


def test_setters() -> None:
    p = DOMPoint()
    p.x = 1
    p.y = 2.5
    p.z = -3
    p.w = 0.5
    assert p == DOMPointReadOnly(1, 2.5, -3, 0.5)
    with pytest.raises(TypeError):
        p.x = '1'
    with pytest.raises(TypeError):
        p.w = None
    assert p.x == 1


@pytest.mark.parametrize('args', [
    ('1', 0),
    (0, None),
    (True, 0),
])
def test_init_non_numeric(args) -> None:
    with pytest.raises(TypeError):
        DOMPoint(*args)


def test_from_point() -> None:
    p = DOMPoint.from_point({'x': 1, 'y': 2})
    assert isinstance(p, DOMPoint)
    assert (p.x, p.y, p.z, p.w) == (1, 2, 0, 1)

    p = DOMPointReadOnly.from_point(SimpleNamespace(x=1, y=2, z=3, w=4))
    assert type(p) is DOMPointReadOnly
    assert p.tojson() == {'x': 1, 'y': 2, 'z': 3, 'w': 4}

    p2 = DOMPoint.from_point(p)
    assert p2 == p
    assert p2 is not p


def test_from_point_invalid() -> None:
    with pytest.raises(TypeError):
        DOMPoint.from_point({'y': 2})
    with pytest.raises(TypeError):
        DOMPoint.from_point({'x': 'a', 'y': 2})
    with pytest.raises(TypeError):
        DOMPoint.from_point(object())


def test_matrix_transform() -> None:
    p = DOMPointReadOnly(1, 2)
    m = DOMMatrix().translate(10, 20).scale(2)
    result = p.matrix_transform(m)
    assert isinstance(result, DOMPoint)
    assert (result.x, result.y, result.z, result.w) == (12, 24, 0, 1)
    assert (p.x, p.y) == (1, 2)


def test_matrix_transform_3d() -> None:
    p = DOMPoint(1, 0, 0, 1)
    result = p.matrix_transform(DOMMatrix().rotate(0, 90, 0))
    assert (result.x, result.y, result.z, result.w) == pytest.approx(
        (0, 0, -1, 1), abs=1e-12)


def test_equality() -> None:
    assert DOMPoint(1, 2) == DOMPointReadOnly(1, 2, 0, 1)
    assert DOMPoint(1, 2) != DOMPoint(1, 2, 1)
    assert DOMPoint(1, 2) != (1, 2)
