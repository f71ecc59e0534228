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


from collections.abc import Mapping
from numbers import Real


def _to_number(value):
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError('Expected number, got ' + repr(type(value)))
    return float(value)


def _get_field(other, name, default=None):
    if isinstance(other, Mapping):
        value = other.get(name, default)
    else:
        value = getattr(other, name, default)
    if value is None:
        raise TypeError('Expected point-like object with {}, got {}'.format(
            repr(name), repr(other)))
    return value


class DOMPointReadOnly(object):
    """Represents the [geometry] DOMPointReadOnly."""

    def __init__(self, x=0, y=0, z=0, w=1):
        """Constructs a DOMPointReadOnly object.

        Arguments:
            x (float, optional): The x-coordinate.
            y (float, optional): The y-coordinate.
            z (float, optional): The z-coordinate.
            w (float, optional): The perspective value.
        Examples:
            >>> p = DOMPointReadOnly(1, 2)
            >>> p.tojson()
            {'x': 1.0, 'y': 2.0, 'z': 0.0, 'w': 1.0}
        """
        self._x = _to_number(x)
        self._y = _to_number(y)
        self._z = _to_number(z)
        self._w = _to_number(w)

    def __eq__(self, other):
        if not isinstance(other, DOMPointReadOnly):
            return NotImplemented
        return (self._x == other.x
                and self._y == other.y
                and self._z == other.z
                and self._w == other.w)

    def __repr__(self):
        return '<{}.{} object at {} {}>'.format(
            type(self).__module__, type(self).__name__, hex(id(self)),
            self.tojson())

    @property
    def w(self):
        """float: The perspective value of the point."""
        return self._w

    @property
    def x(self):
        """float: The x-coordinate of the point."""
        return self._x

    @property
    def y(self):
        """float: The y-coordinate of the point."""
        return self._y

    @property
    def z(self):
        """float: The z-coordinate of the point."""
        return self._z

    @staticmethod
    def _fields_from_point(other):
        if isinstance(other, DOMPointReadOnly):
            return other.x, other.y, other.z, other.w
        return (_get_field(other, 'x'),
                _get_field(other, 'y'),
                _get_field(other, 'z', 0),
                _get_field(other, 'w', 1))

    @staticmethod
    def from_point(other):
        """Creates a new DOMPointReadOnly object from a point-like value,
        and returns it.

        Arguments:
            other (DOMPointReadOnly, dict): A point, or a mapping or object
                with x and y (and optionally z and w) fields.
        Returns:
            DOMPointReadOnly: A new DOMPointReadOnly object.
        """
        return DOMPointReadOnly(*DOMPointReadOnly._fields_from_point(other))

    def matrix_transform(self, matrix):
        """Post-multiplies the matrix on the point and returns the resulting
        point.
        The current point is not modified.

        Arguments:
            matrix (DOMMatrixReadOnly): A matrix to be applied.
        Returns:
            DOMPoint: The resulting point.
        """
        return matrix.transform_point(self)

    def tojson(self):
        serialized = {
            'x': self.x,
            'y': self.y,
            'z': self.z,
            'w': self.w,
        }
        return serialized


class DOMPoint(DOMPointReadOnly):
    """Represents the [geometry] DOMPoint."""

    @DOMPointReadOnly.w.setter
    def w(self, value):
        self._w = _to_number(value)

    @DOMPointReadOnly.x.setter
    def x(self, value):
        self._x = _to_number(value)

    @DOMPointReadOnly.y.setter
    def y(self, value):
        self._y = _to_number(value)

    @DOMPointReadOnly.z.setter
    def z(self, value):
        self._z = _to_number(value)

    @staticmethod
    def from_point(other):
        """Creates a new DOMPoint object from a point-like value, and
        returns it.

        Arguments:
            other (DOMPointReadOnly, dict): See DOMPointReadOnly.from_point().
        Returns:
            DOMPoint: A new DOMPoint object.
        """
        return DOMPoint(*DOMPointReadOnly._fields_from_point(other))
