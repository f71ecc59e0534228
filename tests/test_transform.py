import logging

import pytest

from domgeometry import (
    CSSTransformFunction, CSSTransformList, DOMException, DOMMatrix,
    TransformSyntaxError, parse_transform_list,
)


@pytest.mark.parametrize('text, expected', [
    ('translate(10px, 20px)', 'matrix(1, 0, 0, 1, 10, 20)'),
    ('translate(10px)', 'matrix(1, 0, 0, 1, 10, 0)'),
    ('translate(-3.5, 0)', 'matrix(1, 0, 0, 1, -3.5, 0)'),
    ('translateX(5px)', 'matrix(1, 0, 0, 1, 5, 0)'),
    ('translateY(-5)', 'matrix(1, 0, 0, 1, 0, -5)'),
    ('scale(2)', 'matrix(2, 0, 0, 2, 0, 0)'),
    ('scale(2, 3)', 'matrix(2, 0, 0, 3, 0, 0)'),
    ('scale(50%, 200%)', 'matrix(0.5, 0, 0, 2, 0, 0)'),
    ('scaleX(2)', 'matrix(2, 0, 0, 1, 0, 0)'),
    ('scaleY(25%)', 'matrix(1, 0, 0, 0.25, 0, 0)'),
    ('rotate(90deg)', 'matrix(0, 1, -1, 0, 0, 0)'),
    ('rotate(-90deg)', 'matrix(0, -1, 1, 0, 0, 0)'),
    ('rotate(0.25turn)', 'matrix(0, 1, -1, 0, 0, 0)'),
    ('rotate(1.5707963267948966rad)', 'matrix(0, 1, -1, 0, 0, 0)'),
    ('rotateZ(90deg)', 'matrix(0, 1, -1, 0, 0, 0)'),
    ('rotate3d(0, 0, 1, 90deg)', 'matrix(0, 1, -1, 0, 0, 0)'),
    ('skewX(45deg)', 'matrix(1, 0, 1, 1, 0, 0)'),
    ('skewY(45deg)', 'matrix(1, 1, 0, 1, 0, 0)'),
    ('skew(0deg, 45deg)', 'matrix(1, 1, 0, 1, 0, 0)'),
    ('matrix(1, 2, 3, 4, 5, 6)', 'matrix(1, 2, 3, 4, 5, 6)'),
    ('matrix3d(1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 5, 6, 0, 1)',
     'matrix(1, 0, 0, 1, 5, 6)'),
    ('translateZ(5px)',
     'matrix3d(1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 5, 1)'),
    ('translate3d(1px, 2px, 3px)',
     'matrix3d(1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 1, 2, 3, 1)'),
    ('scaleZ(2)',
     'matrix3d(1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 2, 0, 0, 0, 0, 1)'),
    ('scale3d(1, 2, 3)',
     'matrix3d(1, 0, 0, 0, 0, 2, 0, 0, 0, 0, 3, 0, 0, 0, 0, 1)'),
    ('rotateX(90deg)',
     'matrix3d(1, 0, 0, 0, 0, 0, 1, 0, 0, -1, 0, 0, 0, 0, 0, 1)'),
    ('translate(10px) scale(2)', 'matrix(2, 0, 0, 2, 10, 0)'),
    ('translate(10px) , scale(2)', 'matrix(2, 0, 0, 2, 10, 0)'),
    ('translate(10px)scale(2)', 'matrix(2, 0, 0, 2, 10, 0)'),
    ('scale(2) translate(10px)', 'matrix(2, 0, 0, 2, 20, 0)'),
    ('/* move */ translate(1px) /* done */', 'matrix(1, 0, 0, 1, 1, 0)'),
    ('TRANSLATE(1PX, 2Px) RotateZ(0DEG)', 'matrix(1, 0, 0, 1, 1, 2)'),
    ('translate(1px)/**/scale(2)', 'matrix(2, 0, 0, 2, 1, 0)'),
])
def test_parse(text, expected) -> None:
    m = parse_transform_list(text)
    assert isinstance(m, DOMMatrix)
    assert m.tostring() == expected
    assert DOMMatrix(text).tostring() == expected


@pytest.mark.parametrize('text', [
    '', '   ', '/* nothing */',
    'none', 'NONE', ' none ',
    'inherit', 'initial', 'revert', 'revert-layer', 'unset',
])
def test_parse_identity(text) -> None:
    m = parse_transform_list(text)
    assert m.is2d
    assert m.isidentity
    assert len(CSSTransformList(text)) == 0


@pytest.mark.parametrize('text', [
    'rotate(5)',
    'rotate(0)',
    'rotate(10grad)',
    'rotate(1deg, 2deg)',
    'rotate3d(1, 0, 0, 90)',
    'rotate3d(1deg, 0, 0, 90deg)',
    'bogus(1, 2)',
    'translate(1px) foo(1)',
    'translate(10px',
    'translate(10px /* ) */',
    'trans/**/late(1px)',
    'translate(1px) sc/* */ale(2)',
    'translate(10px) )',
    '(translate(1px))',
    'translate(10em)',
    'translate(10%)',
    'translate(1px 2px)',
    'translate()',
    'translate(1, 2, 3)',
    'translate(1px,)',
    'translate(1px,,2px)',
    ', translate(1px)',
    'translate(1px),',
    'translate(1px),, scale(2)',
    'translate(1px) scale(2) foo',
    'none translate(1px)',
    'none none',
    'foo',
    'scale(2px)',
    'matrix(1, 2, 3)',
    'matrix(1px, 0, 0, 1, 0, 0)',
    'matrix(1, 0, 0, 1, 0, 0%)',
    'matrix3d(1, 0, 0, 1, 0, 0)',
])
def test_parse_error(text) -> None:
    with pytest.raises(TransformSyntaxError):
        parse_transform_list(text)
    with pytest.raises(TransformSyntaxError):
        DOMMatrix(text)


def test_parse_error_messages() -> None:
    with pytest.raises(TransformSyntaxError, match="'deg', 'rad', or 'turn'"):
        parse_transform_list('rotate(5)')
    with pytest.raises(TransformSyntaxError, match='bogus'):
        parse_transform_list('bogus(1, 2)')
    with pytest.raises(TransformSyntaxError, match='matrix'):
        parse_transform_list('matrix(1, 2, 3)')
    with pytest.raises(TransformSyntaxError, match="'trans'"):
        parse_transform_list('trans/**/late(1px)')


def test_syntax_error_is_dom_exception() -> None:
    with pytest.raises(DOMException) as excinfo:
        parse_transform_list('rotate(5)')
    assert excinfo.value.name == 'TransformSyntaxError'
    assert excinfo.value.code == DOMException.SYNTAX_ERR


def test_parse_round_trip() -> None:
    text = ('translate(12px, -4px) rotate(33deg) scale(1.5, 0.75)'
            ' skewX(10deg) translateZ(8px) rotateY(20deg)')
    m = parse_transform_list(text)
    assert not m.is2d
    parsed = parse_transform_list(m.tostring())
    assert parsed.to_float64_array().tolist() == pytest.approx(
        m.to_float64_array().tolist(), abs=1e-9)


def test_parse_logs_debug(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger='domgeometry.transform')
    CSSTransformList.parse('translate(1px, 2px)')
    assert any('translate(1, 2)' in record.getMessage()
               for record in caplog.records)


def test_function_names_are_canonical() -> None:
    t = CSSTransformFunction('ROTATEX', 30)
    assert t.name == 'rotateX'
    assert t.values == (30.0,)
    assert t.tostring() == 'rotateX(30deg)'

    t = CSSTransformList.parse('SCALEy(2)')[0]
    assert t.name == 'scaleY'
    assert t.tostring() == 'scaleY(2)'


def test_function_tostring() -> None:
    assert (CSSTransformFunction('rotate3d', 1, 0, 0, 45).tostring()
            == 'rotate3d(1, 0, 0, 45deg)')
    assert (CSSTransformFunction('skew', 10, 20).tostring()
            == 'skew(10deg, 20deg)')
    assert (CSSTransformFunction('translate', 1.5, 2).tostring(',')
            == 'translate(1.5,2)')
    assert CSSTransformFunction('scale', 0.5).tostring() == 'scale(0.5)'


def test_function_arguments() -> None:
    assert (CSSTransformFunction('scaleY', 3).arguments
            == ('scale_self', (1.0, 3.0, 1.0)))
    assert (CSSTransformFunction('translateZ', 4).arguments
            == ('translate_self', (0.0, 0.0, 4.0)))
    assert (CSSTransformFunction('rotateX', 30).arguments
            == ('rotate_self', (30.0, 0.0, 0.0)))
    assert (CSSTransformFunction('rotate', 30).arguments
            == ('rotate_self', (30.0,)))
    assert (CSSTransformFunction('skewY', 10).arguments
            == ('skew_y_self', (10.0,)))
    method, args = CSSTransformFunction('matrix', 1, 2, 3, 4, 5, 6).arguments
    assert method == 'multiply_self'
    assert args[0].tolist() == [1, 2, 3, 4, 5, 6]


def test_function_apply() -> None:
    m = DOMMatrix().translate(10, 0)
    assert CSSTransformFunction('scale', 2).apply(m) is m
    assert m == DOMMatrix().translate(10, 0).scale(2)
    assert (CSSTransformFunction('rotate', 45).matrix
            == DOMMatrix().rotate(45))


@pytest.mark.parametrize('name, values', [
    ('bogus', (1,)),
    ('matrix', (1, 2, 3)),
    ('translate', ()),
    ('translate', (1, 2, 3)),
    ('rotate3d', (0, 0, 1)),
])
def test_function_invalid(name, values) -> None:
    with pytest.raises(TransformSyntaxError):
        CSSTransformFunction(name, *values)


def test_function_non_numeric() -> None:
    with pytest.raises(TypeError):
        CSSTransformFunction('translate', '1px')
    with pytest.raises(TypeError):
        CSSTransformFunction('scale', True)


def test_function_from_matrix() -> None:
    t = CSSTransformFunction.from_matrix(DOMMatrix([1, 2, 3, 4, 5, 6]))
    assert t.name == 'matrix'
    assert t.tostring() == 'matrix(1, 2, 3, 4, 5, 6)'
    t = CSSTransformFunction.from_matrix(DOMMatrix().translate(0, 0, 1))
    assert t.name == 'matrix3d'
    assert len(t.values) == 16


def test_transform_list() -> None:
    t = CSSTransformList('translate(1px, 2px) scale(2)')
    assert len(t) == 2
    assert repr(t) == "['translate(1, 2)', 'scale(2)']"
    assert t.tostring() == 'translate(1, 2) scale(2)'
    assert t.tostring(',') == 'translate(1,2) scale(2)'

    t.append(CSSTransformFunction('rotate', 90))
    t.insert(0, CSSTransformFunction('translateX', 5))
    assert [x.name for x in t] == ['translateX', 'translate', 'scale',
                                   'rotate']
    del t[0]
    t[0] = CSSTransformFunction('translate', 3, 4)
    assert t.tostring() == 'translate(3, 4) scale(2) rotate(90deg)'

    t[1:] = [CSSTransformFunction('skewX', 10)]
    assert t.tostring() == 'translate(3, 4) skewX(10deg)'


def test_transform_list_rejects_other_items() -> None:
    t = CSSTransformList()
    with pytest.raises(TypeError):
        t.append('translate(1px)')
    with pytest.raises(TypeError):
        CSSTransformList([DOMMatrix()])
    t.append(CSSTransformFunction('scale', 2))
    with pytest.raises(TypeError):
        t[0] = None
    with pytest.raises(TypeError):
        t[0:1] = [None]
    assert t.tostring() == 'scale(2)'


def test_transform_list_matrix() -> None:
    assert CSSTransformList().matrix.isidentity
    t = CSSTransformList('translate(10px, 20px) matrix(1, 2, 3, 4, 5, 6)')
    assert t.matrix.tostring() == 'matrix(1, 2, 3, 4, 15, 26)'
    assert CSSTransformList(t.tostring()).matrix == t.matrix


def test_transform_list_consolidate() -> None:
    assert CSSTransformList().consolidate() is None

    t = CSSTransformList('translate(10px) scale(2)')
    expected = t.matrix
    transform = t.consolidate()
    assert len(t) == 1
    assert t[0] is transform
    assert transform.name == 'matrix'
    assert t.matrix == expected

    t = CSSTransformList('translate3d(1px, 2px, 3px)')
    assert t.consolidate().name == 'matrix3d'
