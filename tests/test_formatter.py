import math

import pytest

from domgeometry import DOMMatrix, formatter


@pytest.mark.parametrize('value, expected', [
    (0, '0'),
    (-0.0, '0'),
    (1, '1'),
    (-1.5, '-1.5'),
    (100, '100'),
    (0.1 + 0.2, '0.3'),
    (6.123233995736766e-17, '0'),
    (-6.123233995736766e-17, '0'),
    (0.9999999999999999, '1'),
    (1e-12, '0.000000000001'),
    (123456789.125, '123456789.125'),
    (math.inf, 'inf'),
    (math.nan, 'nan'),
])
def test_format_number(value, expected) -> None:
    assert formatter.format_number(value) == expected


def test_format_number_sequence() -> None:
    assert formatter.format_number_sequence((1.0, -0.0, 0.25)) == [
        '1', '0', '0.25']


def test_precision(monkeypatch) -> None:
    monkeypatch.setattr(formatter, 'precision', 2)
    assert formatter.format_number(3.14159) == '3.14'
    assert formatter.format_number(-0.001) == '0'
    assert (DOMMatrix([1 / 3, 0, 0, 1, 0, 0]).tostring()
            == 'matrix(0.33, 0, 0, 1, 0, 0)')


def test_nan_matrix_tostring() -> None:
    m = DOMMatrix().scale(0).invert_self()
    assert m.tostring() == 'matrix3d({})'.format(', '.join(['nan'] * 16))
