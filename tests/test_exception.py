import pytest

from domgeometry import DOMException, NotSupportedError, TransformSyntaxError


def test_dom_exception() -> None:
    e = DOMException('bad', 'value')
    assert e.message == 'bad value'
    assert e.name == 'Error'
    assert e.code == 0
    assert str(e) == "('bad', 'value')"

    e = DOMException(message='oops', name='NotSupportedError')
    assert e.message == 'oops'
    assert e.code == DOMException.NOT_SUPPORTED_ERR
    assert repr(e) == "DOMException(message='oops', name='NotSupportedError')"

    e = DOMException(message='oops', name='InvalidStateError')
    assert e.code == 0


def test_dom_exception_invalid_keyword() -> None:
    with pytest.raises(TypeError):
        DOMException(reason='bad')


@pytest.mark.parametrize('cls, code', [
    (NotSupportedError, DOMException.NOT_SUPPORTED_ERR),
    (TransformSyntaxError, DOMException.SYNTAX_ERR),
])
def test_subclasses(cls, code) -> None:
    e = cls('failed')
    assert isinstance(e, DOMException)
    assert e.name == cls.__name__
    assert e.code == code
    assert e.message == 'failed'
    assert str(e) == 'failed'
