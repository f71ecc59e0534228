# Copyright (C) 2018 Tetsuya Miura <miute.dev@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


import math
import re
from collections.abc import MutableSequence
from logging import getLogger
from numbers import Real

import tinycss2

from .exception import TransformSyntaxError
from .formatter import format_number_sequence
from .geometry.matrix import DOMMatrix, DOMMatrixReadOnly

logger = getLogger(__name__)

css_wide_keyword_set = {
    'inherit', 'initial', 'revert', 'revert-layer', 'unset', 'none',
}

_RE_COMMENT = re.compile(r'/\*.*?\*/', re.DOTALL)

_RE_VECTOR_FUNCTION = re.compile(r'^(?P<op>rotate|translate|scale)'
                                 r'(?P<dim>3d|X|Y|Z)?$')

# <transform-function> name -> (value syntax, min count, max count)
_ARGUMENT_SYNTAX = {
    'matrix': ('number', 6, 6),
    'matrix3d': ('number', 16, 16),
    'translate': ('length', 1, 2),
    'translate3d': ('length', 3, 3),
    'translateX': ('length', 1, 1),
    'translateY': ('length', 1, 1),
    'translateZ': ('length', 1, 1),
    'scale': ('scale', 1, 2),
    'scale3d': ('scale', 3, 3),
    'scaleX': ('scale', 1, 1),
    'scaleY': ('scale', 1, 1),
    'scaleZ': ('scale', 1, 1),
    'rotate': ('angle', 1, 1),
    'rotate3d': ('axis-angle', 4, 4),
    'rotateX': ('angle', 1, 1),
    'rotateY': ('angle', 1, 1),
    'rotateZ': ('angle', 1, 1),
    'skew': ('angle', 1, 2),
    'skewX': ('angle', 1, 1),
    'skewY': ('angle', 1, 1),
}

_FUNCTION_NAME_MAP = dict((name.lower(), name) for name in _ARGUMENT_SYNTAX)


def _serialize(tokens):
    return tinycss2.serialize(tokens).replace('/**/', '').strip()


def _parse_angle(token):
    if token.type == 'dimension':
        unit = token.lower_unit
        if unit == 'deg':
            return float(token.value)
        elif unit == 'rad':
            return math.degrees(token.value)
        elif unit == 'turn':
            return token.value * 360.0
    raise TransformSyntaxError(
        "Angles must be in 'deg', 'rad', or 'turn' units (got: {})".format(
            repr(_serialize([token]))))


def _parse_length(token):
    if token.type == 'number':
        return float(token.value)
    elif token.type == 'dimension' and token.lower_unit == 'px':
        return float(token.value)
    raise TransformSyntaxError(
        "Lengths must be in 'px' or numeric units (got: {})".format(
            repr(_serialize([token]))))


def _parse_scale(token):
    if token.type == 'number':
        return float(token.value)
    elif token.type == 'percentage':
        return token.value / 100
    raise TransformSyntaxError(
        "Scales must be in '%' or numeric units (got: {})".format(
            repr(_serialize([token]))))


def _parse_number(token):
    if token.type == 'number':
        return float(token.value)
    raise TransformSyntaxError(
        'Matrix values must be in plain, numeric units (got: {})'.format(
            repr(_serialize([token]))))


_VALUE_PARSERS = {
    'angle': _parse_angle,
    'length': _parse_length,
    'number': _parse_number,
    'scale': _parse_scale,
}


def _split_arguments(function):
    groups = [[]]
    for token in function.arguments:
        if token.type in ('whitespace', 'comment'):
            continue
        elif token.type == 'error':
            raise TransformSyntaxError('{}(): {}'.format(function.name,
                                                         token.message))
        elif token.type == 'literal' and token.value == ',':
            groups.append([])
            continue
        groups[-1].append(token)
    if len(groups) == 1 and len(groups[0]) == 0:
        return []
    for group in groups:
        if len(group) != 1:
            raise TransformSyntaxError(
                '{}(): expected a single value between commas'
                ' (got: {})'.format(function.name, repr(_serialize(group))))
    return [group[0] for group in groups]


class CSSTransformFunction(object):
    """Represents a single CSS <transform-function>."""

    def __init__(self, name, *values):
        """Constructs a CSSTransformFunction object.

        Arguments:
            name (str): The function name, such as 'translate' or 'rotateX'.
            *values: The values of the function, in px, degrees or plain
                numbers.
        Examples:
            >>> t = CSSTransformFunction('translate', 100, -200)
            >>> t.tostring()
            'translate(100, -200)'
            >>> t.matrix.tostring()
            'matrix(1, 0, 0, 1, 100, -200)'
        """
        canonical_name = _FUNCTION_NAME_MAP.get(name.lower())
        if canonical_name is None:
            raise TransformSyntaxError(
                'Unknown transform function: ' + repr(name))
        _, min_count, max_count = _ARGUMENT_SYNTAX[canonical_name]
        if not min_count <= len(values) <= max_count:
            if min_count == max_count:
                expected = str(min_count)
            else:
                expected = '{} to {}'.format(min_count, max_count)
            raise TransformSyntaxError(
                '{}() requires {} numeric values (got {})'.format(
                    canonical_name, expected, len(values)))
        for value in values:
            if isinstance(value, bool) or not isinstance(value, Real):
                raise TypeError('Expected number, got ' + repr(type(value)))
        self._name = canonical_name
        self._values = tuple(float(value) for value in values)

    def __repr__(self):
        return '<{}.{} object at {} {{{}, {}}}>'.format(
            type(self).__module__, type(self).__name__, hex(id(self)),
            repr(self._name), repr(self._values))

    @property
    def arguments(self):
        """tuple[str, tuple[float, ...]]: The name of the DOMMatrix method
        and its arguments equivalent to the function.
        """
        name = self._name
        values = self._values
        if name in ('matrix', 'matrix3d'):
            return 'multiply_self', (DOMMatrixReadOnly(list(values)),)
        elif name == 'rotate3d':
            return 'rotate_axis_angle_self', values
        elif name == 'skew':
            return 'skew_self', values
        elif name == 'skewX':
            return 'skew_x_self', values
        elif name == 'skewY':
            return 'skew_y_self', values
        op, dim = _RE_VECTOR_FUNCTION.match(name).group('op', 'dim')
        method = op + '_self'
        if dim in ('X', 'Y', 'Z'):
            fill = 1.0 if op == 'scale' else 0.0
            vector = [fill, fill, fill]
            vector['XYZ'.index(dim)] = values[0]
            return method, tuple(vector)
        return method, values

    @property
    def matrix(self):
        """DOMMatrix: A new matrix equivalent to the function."""
        return self.apply(DOMMatrix())

    @property
    def name(self):
        """str: The function name."""
        return self._name

    @property
    def values(self):
        """tuple[float, ...]: The values of the function."""
        return self._values

    def apply(self, matrix):
        """Post-multiplies the function on the matrix.

        Arguments:
            matrix (DOMMatrix): The matrix to be modified.
        Returns:
            DOMMatrix: The given matrix.
        """
        method, args = self.arguments
        return getattr(matrix, method)(*args)

    @staticmethod
    def from_matrix(matrix):
        """Creates a new matrix() or matrix3d() function from the matrix.

        Arguments:
            matrix (DOMMatrixReadOnly): A matrix object.
        Returns:
            CSSTransformFunction: A new CSSTransformFunction object.
        """
        name = 'matrix' if matrix.is2d else 'matrix3d'
        return CSSTransformFunction(name, *matrix.tolist())

    @staticmethod
    def from_token(function):
        """Creates a new CSSTransformFunction from a tinycss2 function block.

        Arguments:
            function (tinycss2.ast.FunctionBlock): The function to convert.
        Returns:
            CSSTransformFunction: A new CSSTransformFunction object.
        """
        name = _FUNCTION_NAME_MAP.get(function.lower_name)
        if name is None:
            raise TransformSyntaxError(
                'Unknown transform operation: ' + repr(function.name))
        syntax, _, _ = _ARGUMENT_SYNTAX[name]
        tokens = _split_arguments(function)
        if syntax == 'axis-angle':
            parsers = [_parse_length] * (len(tokens) - 1) + [_parse_angle]
        else:
            parsers = [_VALUE_PARSERS[syntax]] * len(tokens)
        values = [parse(token) for parse, token in zip(parsers, tokens)]
        return CSSTransformFunction(name, *values)

    def tostring(self, delimiter=None):
        syntax, _, _ = _ARGUMENT_SYNTAX[self._name]
        number_sequence = format_number_sequence(self._values)
        if syntax == 'angle':
            number_sequence = [x + 'deg' for x in number_sequence]
        elif syntax == 'axis-angle':
            number_sequence[-1] += 'deg'
        if delimiter is None or len(delimiter) == 0:
            delimiter = ', '
        return '{}({})'.format(self._name, delimiter.join(number_sequence))


class CSSTransformList(MutableSequence):
    """Represents a CSS <transform-list>.

    Examples:
        >>> t = CSSTransformList('translate(10px, 20px) matrix(1, 2, 3, 4, 5, 6)')
        >>> len(t)
        2
        >>> t.matrix.tostring()
        'matrix(1, 2, 3, 4, 15, 26)'
    """

    def __init__(self, iterable=None):
        """Constructs the transform list.

        Arguments:
            iterable (list[CSSTransformFunction], str, optional): The
                transform list.
        """
        self._items = list()
        if iterable is not None:
            if isinstance(iterable, str):
                self.extend(CSSTransformList.parse(iterable))
            else:
                self.extend(iterable)

    def __delitem__(self, index):
        del self._items[index]

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self):
        return len(self._items)

    def __repr__(self):
        return '[{}]'.format(
            ', '.join(['\'{}\''.format(x.tostring()) for x in self]))

    def __setitem__(self, index, item):
        if isinstance(index, slice):
            item = list(item)
            for it in item:
                _check_item(it)
        else:
            _check_item(item)
        self._items[index] = item

    @property
    def matrix(self):
        """DOMMatrix: A new matrix with every function applied in order.
        An empty list gives the identity matrix.
        """
        matrix = DOMMatrix()
        for transform in iter(self):
            transform.apply(matrix)
        return matrix

    def consolidate(self):
        """Converts the transform list into a single matrix() or matrix3d()
        function and returns it.

        Returns:
            CSSTransformFunction: The resulting function or None.
        """
        if len(self) == 0:
            return None
        transform = CSSTransformFunction.from_matrix(self.matrix)
        self.clear()
        self.append(transform)
        return transform

    def insert(self, index, item):
        _check_item(item)
        self._items.insert(index, item)

    @staticmethod
    def parse(text):
        """Parses a text into a list of CSSTransformFunction objects and
        returns it.

        Arguments:
            text (str): A CSS <transform-list>, or one of the CSS-wide
                keywords or 'none'.
        Returns:
            CSSTransformList: A list of CSSTransformFunction objects. The
                keywords give an empty list.
        Raises:
            TransformSyntaxError: If the text is not a valid transform list.
        Examples:
            >>> t = CSSTransformList.parse('translate(50px, 30px)rotate(30deg)')
            >>> for x in iter(t):
            ...     print(x.tostring())
            ...
            translate(50, 30)
            rotate(30deg)
        """
        transform_list = CSSTransformList()
        tokens = tinycss2.parse_component_value_list(text,
                                                     skip_comments=True)
        tokens = [token for token in tokens
                  if token.type not in ('whitespace', 'comment')]
        if len(tokens) == 0:
            return transform_list
        if (len(tokens) == 1
                and tokens[0].type == 'ident'
                and tokens[0].lower_value in css_wide_keyword_set):
            return transform_list
        # unterminated functions are closed silently at the end of input
        if not _RE_COMMENT.sub(' ', text).rstrip().endswith(')'):
            raise TransformSyntaxError(
                "Expected a closing ')' (got: {})".format(repr(text)))

        separated = True
        for token in tokens:
            if token.type == 'error':
                raise TransformSyntaxError(token.message)
            elif token.type == 'literal' and token.value == ',':
                if separated:
                    raise TransformSyntaxError(
                        'Unexpected \',\' in transform list: ' + repr(text))
                separated = True
                continue
            elif token.type != 'function':
                raise TransformSyntaxError(
                    'Expected a transform function (got: {})'.format(
                        repr(_serialize([token]))))
            transform_list.append(CSSTransformFunction.from_token(token))
            separated = False
        if separated:
            raise TransformSyntaxError(
                'Unexpected \',\' in transform list: ' + repr(text))

        logger.debug('parsed {} into {}'.format(repr(text),
                                                repr(transform_list)))
        return transform_list

    def tostring(self, delimiter=None):
        items = [transform.tostring(delimiter=delimiter)
                 for transform in iter(self)]
        return ' '.join(items)


def _check_item(item):
    if not isinstance(item, CSSTransformFunction):
        raise TypeError('Expected CSSTransformFunction, got {}'.format(
            type(item)))


def parse_transform_list(text):
    """Parses a CSS <transform-list> and returns the equivalent matrix.

    Arguments:
        text (str): A CSS <transform-list>.
    Returns:
        DOMMatrix: A new matrix object.
    Examples:
        >>> parse_transform_list('rotate(0.5turn)').tostring()
        'matrix(-1, 0, 0, -1, 0, 0)'
    """
    return CSSTransformList.parse(text).matrix
