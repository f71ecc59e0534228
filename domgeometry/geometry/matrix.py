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


import array
import math
from collections.abc import Mapping, Sequence
from logging import getLogger
from numbers import Real

import numpy as np

from ..exception import NotSupportedError
from ..formatter import format_number_sequence
from .point import DOMPoint, DOMPointReadOnly, _to_number

logger = getLogger(__name__)

MATRIX_2D_FIELDS = ('a', 'b', 'c', 'd', 'e', 'f')

MATRIX_3D_FIELDS = ('m11', 'm12', 'm13', 'm14',
                    'm21', 'm22', 'm23', 'm24',
                    'm31', 'm32', 'm33', 'm34',
                    'm41', 'm42', 'm43', 'm44')

# (row, column) -> identity value of the coefficients outside the 2d subset
_DEFAULTS_3D = {
    (0, 2): 0.0, (0, 3): 0.0,
    (1, 2): 0.0, (1, 3): 0.0,
    (2, 0): 0.0, (2, 1): 0.0, (2, 2): 1.0, (2, 3): 0.0,
    (3, 2): 0.0, (3, 3): 1.0,
}


def _get_number_field(other, name):
    if isinstance(other, Mapping):
        value = other.get(name)
    else:
        value = getattr(other, name, None)
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    return value


def matrix_like_values(other):
    """Returns the elements of a matrix-like value.

    A matrix-like value is a mapping or an object that provides all of the
    m11...m44 fields (16 elements are returned), or else all of the a...f
    fields (6 elements are returned).

    Arguments:
        other (dict, object): A matrix-like value.
    Returns:
        list[float]: A list of 16 or 6 elements of the matrix.
    """
    for fields in (MATRIX_3D_FIELDS, MATRIX_2D_FIELDS):
        values = [_get_number_field(other, name) for name in fields]
        if all(value is not None for value in values):
            return values
    raise TypeError('Expected DOMMatrixReadOnly or matrix-like object, got '
                    + repr(type(other)))


def matrix2d(a, b, c, d, e, f):
    """Returns a 2d (4x4) matrix.

    Arguments:
        a (float): The a component of the matrix.
        b (float): The b component of the matrix.
        c (float): The c component of the matrix.
        d (float): The d component of the matrix.
        e (float): The e component of the matrix.
        f (float): The f component of the matrix.
    Returns:
        numpy.array: A 4x4 matrix object.
    """
    return np.array([[float(a), float(b), 0.0, 0.0],
                     [float(c), float(d), 0.0, 0.0],
                     [0.0, 0.0, 1.0, 0.0],
                     [float(e), float(f), 0.0, 1.0]])


def matrix3d(m11, m12, m13, m14,
             m21, m22, m23, m24,
             m31, m32, m33, m34,
             m41, m42, m43, m44):
    """Returns a 3d (4x4) matrix, laid out in row-major order.

    Returns:
        numpy.array: A 4x4 matrix object.
    """
    return np.array([[float(m11), float(m12), float(m13), float(m14)],
                     [float(m21), float(m22), float(m23), float(m24)],
                     [float(m31), float(m32), float(m33), float(m34)],
                     [float(m41), float(m42), float(m43), float(m44)]])


def _has_2d_defaults(m):
    return all(m[index] == value for index, value in _DEFAULTS_3D.items())


class DOMMatrixReadOnly(object):
    """Represents the [geometry] DOMMatrixReadOnly.

    The matrix is stored in row-major order and points are row vectors, so
    the translation lives in m41, m42 and m43.
    """

    def __init__(self, init=None):
        """Constructs a DOMMatrixReadOnly object.

        Arguments:
            init (optional): One of the following.
                None: the identity matrix.
                str: a CSS <transform-list>, such as
                    'translate(10px, 20px) rotate(45deg)'.
                list[float]: 6 elements (a, b, c, d, e, f) of a 2d matrix
                    or 16 elements (m11, ..., m44) of a 4x4 matrix.
                DOMMatrixReadOnly: a matrix to be copied.
                dict: a matrix-like mapping, see matrix_like_values().
        Examples:
            >>> DOMMatrixReadOnly().tostring()
            'matrix(1, 0, 0, 1, 0, 0)'
            >>> DOMMatrixReadOnly([11, 12, 21, 22, 41, 42]).tolist()
            [11.0, 12.0, 21.0, 22.0, 41.0, 42.0]
            >>> DOMMatrixReadOnly('translate(12px, 50px)').tostring()
            'matrix(1, 0, 0, 1, 12, 50)'
        """
        self._matrix = None
        self._is2d = None
        if init is None:
            self._init_from_array([1, 0, 0, 1, 0, 0])
        elif isinstance(init, str):
            self._init_from_string(init)
        elif isinstance(init, DOMMatrixReadOnly):
            self._matrix = init._matrix.copy()
            self._is2d = init._is2d
        elif isinstance(init, (bytes, bytearray, memoryview)):
            raise TypeError('Expected a sequence of numbers, got '
                            + repr(type(init)))
        elif isinstance(init, (Sequence, np.ndarray, array.array)):
            self._init_from_array(init)
        else:
            self._init_from_array(matrix_like_values(init))

    def __eq__(self, other):
        if not isinstance(other, DOMMatrixReadOnly):
            return NotImplemented
        return bool((self._matrix == other._matrix).all())

    def __mul__(self, other):
        if not isinstance(other, DOMMatrixReadOnly):
            return NotImplemented
        return self.multiply(other)

    def __repr__(self):
        return '<{}.{} object at {} {}>'.format(
            type(self).__module__, type(self).__name__, hex(id(self)),
            self.tolist())

    def __str__(self):
        return self.tostring()

    @property
    def a(self):
        """float: The a component of the matrix."""
        return self._matrix.item(0, 0)

    @property
    def b(self):
        """float: The b component of the matrix."""
        return self._matrix.item(0, 1)

    @property
    def c(self):
        """float: The c component of the matrix."""
        return self._matrix.item(1, 0)

    @property
    def d(self):
        """float: The d component of the matrix."""
        return self._matrix.item(1, 1)

    @property
    def e(self):
        """float: The e component of the matrix."""
        return self._matrix.item(3, 0)

    @property
    def f(self):
        """float: The f component of the matrix."""
        return self._matrix.item(3, 1)

    @property
    def is2d(self):
        """bool: The 2d matrix flag.
        Once a 3d operation clears the flag, it is never set again by later
        operations even if the 3d components return to their defaults.
        """
        return self._is2d

    @property
    def isidentity(self):
        """bool: True if the matrix is exactly the identity matrix."""
        return bool(np.array_equal(self._matrix, np.identity(4)))

    @property
    def m11(self):
        """float: The m11 component of the matrix."""
        return self._matrix.item(0, 0)

    @property
    def m12(self):
        """float: The m12 component of the matrix."""
        return self._matrix.item(0, 1)

    @property
    def m13(self):
        """float: The m13 component of the matrix."""
        return self._matrix.item(0, 2)

    @property
    def m14(self):
        """float: The m14 component of the matrix."""
        return self._matrix.item(0, 3)

    @property
    def m21(self):
        """float: The m21 component of the matrix."""
        return self._matrix.item(1, 0)

    @property
    def m22(self):
        """float: The m22 component of the matrix."""
        return self._matrix.item(1, 1)

    @property
    def m23(self):
        """float: The m23 component of the matrix."""
        return self._matrix.item(1, 2)

    @property
    def m24(self):
        """float: The m24 component of the matrix."""
        return self._matrix.item(1, 3)

    @property
    def m31(self):
        """float: The m31 component of the matrix."""
        return self._matrix.item(2, 0)

    @property
    def m32(self):
        """float: The m32 component of the matrix."""
        return self._matrix.item(2, 1)

    @property
    def m33(self):
        """float: The m33 component of the matrix."""
        return self._matrix.item(2, 2)

    @property
    def m34(self):
        """float: The m34 component of the matrix."""
        return self._matrix.item(2, 3)

    @property
    def m41(self):
        """float: The m41 component of the matrix."""
        return self._matrix.item(3, 0)

    @property
    def m42(self):
        """float: The m42 component of the matrix."""
        return self._matrix.item(3, 1)

    @property
    def m43(self):
        """float: The m43 component of the matrix."""
        return self._matrix.item(3, 2)

    @property
    def m44(self):
        """float: The m44 component of the matrix."""
        return self._matrix.item(3, 3)

    def _init_from_array(self, values):
        if isinstance(values, np.ndarray):
            if values.ndim != 1:
                raise TypeError('Expected a flat array, got an array of shape '
                                + repr(values.shape))
            values = values.tolist()
        values = [_to_number(x) for x in values]
        if len(values) == 6:
            self._matrix = matrix2d(*values)
            self._is2d = True
        elif len(values) == 16:
            self._matrix = matrix3d(*values)
            self._is2d = _has_2d_defaults(self._matrix)
        else:
            raise TypeError("'values' required 6 elements for a 2d matrix"
                            " or 16 elements for a 3d matrix, got "
                            + str(len(values)))

    def _init_from_string(self, text):
        from ..transform import CSSTransformList
        matrix = CSSTransformList.parse(text).matrix
        self._matrix = matrix._matrix
        self._is2d = matrix._is2d

    def flip_x(self):
        """Post-multiplies the transformation [-1 0 0 1 0 0] on the current
        matrix and returns the resulting matrix.
        The current matrix is not modified.

        Returns:
            DOMMatrix: The resulting matrix.
        """
        m = DOMMatrix(self)
        m._matrix = np.dot(matrix2d(-1, 0, 0, 1, 0, 0), m._matrix)
        return m

    def flip_y(self):
        """Post-multiplies the transformation [1 0 0 -1 0 0] on the current
        matrix and returns the resulting matrix.
        The current matrix is not modified.

        Returns:
            DOMMatrix: The resulting matrix.
        """
        m = DOMMatrix(self)
        m._matrix = np.dot(matrix2d(1, 0, 0, -1, 0, 0), m._matrix)
        return m

    @classmethod
    def from_float32_array(cls, values):
        """Creates a new matrix from a float32 array of 6 or 16 elements.

        Arguments:
            values (numpy.ndarray, array.array): A float32 array.
        Returns:
            DOMMatrixReadOnly: A new matrix object.
        """
        if ((isinstance(values, np.ndarray) and values.dtype == np.float32)
                or (isinstance(values, array.array)
                    and values.typecode == 'f')):
            return cls(values)
        raise TypeError('Expected float32 array, got ' + repr(type(values)))

    @classmethod
    def from_float64_array(cls, values):
        """Creates a new matrix from a float64 array of 6 or 16 elements.

        Arguments:
            values (numpy.ndarray, array.array): A float64 array.
        Returns:
            DOMMatrixReadOnly: A new matrix object.
        """
        if ((isinstance(values, np.ndarray) and values.dtype == np.float64)
                or (isinstance(values, array.array)
                    and values.typecode == 'd')):
            return cls(values)
        raise TypeError('Expected float64 array, got ' + repr(type(values)))

    @classmethod
    def from_matrix(cls, other):
        """Creates a new matrix from another matrix or a matrix-like value,
        and returns it.

        Arguments:
            other (DOMMatrixReadOnly, dict, object): See
                matrix_like_values().
        Returns:
            DOMMatrixReadOnly: A new matrix object.
        """
        if isinstance(other, DOMMatrixReadOnly):
            return cls(other)
        return cls(matrix_like_values(other))

    def inverse(self):
        """Returns the inverse matrix.
        The current matrix is not modified.

        Returns:
            DOMMatrix: The resulting matrix.
        """
        m = DOMMatrix(self)
        m.invert_self()
        return m

    def multiply(self, other):
        """Post-multiplies the other matrix on the current matrix and returns
        the resulting matrix.
        The current matrix is not modified.

        Arguments:
            other (DOMMatrixReadOnly): A matrix to be multiplied.
        Returns:
            DOMMatrix: The resulting matrix.
        """
        m = DOMMatrix(self)
        m.multiply_self(other)
        return m

    def rotate(self, rot_x=0, rot_y=None, rot_z=None):
        """Post-multiplies a rotation transformation on the current matrix and
        returns the resulting matrix.
        The current matrix is not modified.

        Arguments:
            rot_x (float, optional): The x-axis rotation angle in degrees, or
                the z-axis rotation angle if it is the only argument.
            rot_y (float, optional): The y-axis rotation angle in degrees.
            rot_z (float, optional): The z-axis rotation angle in degrees.
        Returns:
            DOMMatrix: The resulting matrix.
        """
        m = DOMMatrix(self)
        m.rotate_self(rot_x, rot_y, rot_z)
        return m

    def rotate_axis_angle(self, x=0, y=0, z=0, angle=0):
        m = DOMMatrix(self)
        m.rotate_axis_angle_self(x, y, z, angle)
        return m

    def rotate_from_vector(self, x=0, y=0):
        m = DOMMatrix(self)
        m.rotate_from_vector_self(x, y)
        return m

    def scale(self, scale_x=1, scale_y=None, scale_z=1,
              origin_x=0, origin_y=0, origin_z=0):
        """Post-multiplies a non-uniform scale transformation on the current
        matrix and returns the resulting matrix.
        The current matrix is not modified.

        Arguments:
            scale_x (float, optional): The scale amount in X.
            scale_y (float, optional): The scale amount in Y.
            scale_z (float, optional): The scale amount in Z.
            origin_x (float, optional): The transform origin in X.
            origin_y (float, optional): The transform origin in Y.
            origin_z (float, optional): The transform origin in Z.
        Returns:
            DOMMatrix: The resulting matrix.
        """
        m = DOMMatrix(self)
        m.scale_self(scale_x, scale_y, scale_z, origin_x, origin_y, origin_z)
        return m

    def scale3d(self, scale=1, origin_x=0, origin_y=0, origin_z=0):
        m = DOMMatrix(self)
        m.scale3d_self(scale, origin_x, origin_y, origin_z)
        return m

    def skew(self, angle_x=None, angle_y=None):
        m = DOMMatrix(self)
        m.skew_self(angle_x, angle_y)
        return m

    def skew_x(self, angle):
        """Post-multiplies a skewX transformation on the current matrix and
        returns the resulting matrix.
        The current matrix is not modified.

        Arguments:
            angle (float): The skew angle in degrees.
        Returns:
            DOMMatrix: The resulting matrix.
        """
        m = DOMMatrix(self)
        m.skew_x_self(angle)
        return m

    def skew_y(self, angle):
        """Post-multiplies a skewY transformation on the current matrix and
        returns the resulting matrix.
        The current matrix is not modified.

        Arguments:
            angle (float): The skew angle in degrees.
        Returns:
            DOMMatrix: The resulting matrix.
        """
        m = DOMMatrix(self)
        m.skew_y_self(angle)
        return m

    def to_float32_array(self):
        return self._matrix.astype(np.float32).ravel()

    def to_float64_array(self):
        return self._matrix.flatten()

    def tojson(self):
        serialized = {name: getattr(self, name)
                      for name in MATRIX_2D_FIELDS + MATRIX_3D_FIELDS}
        serialized['is2D'] = self.is2d
        serialized['isIdentity'] = self.isidentity
        return serialized

    def tolist(self):
        if self._is2d:
            return [self.a, self.b, self.c, self.d, self.e, self.f]
        return self._matrix.ravel().tolist()

    def tostring(self, delimiter=None):
        """Returns the canonical CSS text of the matrix.

        Examples:
            >>> DOMMatrixReadOnly([2, 0, 0, 0.5, 0, 0]).tostring()
            'matrix(2, 0, 0, 0.5, 0, 0)'
        """
        if self._is2d:
            name = 'matrix'
        else:
            name = 'matrix3d'
        number_sequence = format_number_sequence(self.tolist())
        if delimiter is None or len(delimiter) == 0:
            delimiter = ', '
        return '{}({})'.format(name, delimiter.join(number_sequence))

    def transform_point(self, point=None):
        """Post-multiplies the matrix on the point and returns the resulting
        point.

        Arguments:
            point (DOMPointReadOnly, dict, optional): The point to transform.
                Defaults to the origin.
        Returns:
            DOMPoint: The resulting point.
        """
        if point is None:
            point = DOMPointReadOnly()
        x, y, z, w = (_to_number(value) for value
                      in DOMPointReadOnly._fields_from_point(point))
        if self._is2d and z == 0 and w == 1:
            return DOMPoint(x * self.a + y * self.c + self.e,
                            x * self.b + y * self.d + self.f,
                            0, 1)
        m = self._matrix
        return DOMPoint(
            x * m[0, 0] + y * m[1, 0] + z * m[2, 0] + w * m[3, 0],
            x * m[0, 1] + y * m[1, 1] + z * m[2, 1] + w * m[3, 1],
            x * m[0, 2] + y * m[1, 2] + z * m[2, 2] + w * m[3, 2],
            x * m[0, 3] + y * m[1, 3] + z * m[2, 3] + w * m[3, 3])

    def translate(self, tx=0, ty=0, tz=0):
        """Post-multiplies a translation transformation on the current matrix
        and returns the resulting matrix.
        The current matrix is not modified.

        Arguments:
            tx (float, optional): The translation amount in X.
            ty (float, optional): The translation amount in Y.
            tz (float, optional): The translation amount in Z.
        Returns:
            DOMMatrix: The resulting matrix.
        """
        m = DOMMatrix(self)
        m.translate_self(tx, ty, tz)
        return m


class DOMMatrix(DOMMatrixReadOnly):
    """Represents the [geometry] DOMMatrix."""

    def __imul__(self, other):
        if not isinstance(other, DOMMatrixReadOnly):
            return NotImplemented
        self.multiply_self(other)
        return self

    def _set_2d(self, index, value):
        self._matrix[index] = _to_number(value)

    def _set_3d(self, index, value):
        value = _to_number(value)
        self._matrix[index] = value
        if value != _DEFAULTS_3D[index]:
            self._is2d = False

    @DOMMatrixReadOnly.a.setter
    def a(self, value):
        self._set_2d((0, 0), value)

    @DOMMatrixReadOnly.b.setter
    def b(self, value):
        self._set_2d((0, 1), value)

    @DOMMatrixReadOnly.c.setter
    def c(self, value):
        self._set_2d((1, 0), value)

    @DOMMatrixReadOnly.d.setter
    def d(self, value):
        self._set_2d((1, 1), value)

    @DOMMatrixReadOnly.e.setter
    def e(self, value):
        self._set_2d((3, 0), value)

    @DOMMatrixReadOnly.f.setter
    def f(self, value):
        self._set_2d((3, 1), value)

    @DOMMatrixReadOnly.m11.setter
    def m11(self, value):
        self._set_2d((0, 0), value)

    @DOMMatrixReadOnly.m12.setter
    def m12(self, value):
        self._set_2d((0, 1), value)

    @DOMMatrixReadOnly.m13.setter
    def m13(self, value):
        self._set_3d((0, 2), value)

    @DOMMatrixReadOnly.m14.setter
    def m14(self, value):
        self._set_3d((0, 3), value)

    @DOMMatrixReadOnly.m21.setter
    def m21(self, value):
        self._set_2d((1, 0), value)

    @DOMMatrixReadOnly.m22.setter
    def m22(self, value):
        self._set_2d((1, 1), value)

    @DOMMatrixReadOnly.m23.setter
    def m23(self, value):
        self._set_3d((1, 2), value)

    @DOMMatrixReadOnly.m24.setter
    def m24(self, value):
        self._set_3d((1, 3), value)

    @DOMMatrixReadOnly.m31.setter
    def m31(self, value):
        self._set_3d((2, 0), value)

    @DOMMatrixReadOnly.m32.setter
    def m32(self, value):
        self._set_3d((2, 1), value)

    @DOMMatrixReadOnly.m33.setter
    def m33(self, value):
        self._set_3d((2, 2), value)

    @DOMMatrixReadOnly.m34.setter
    def m34(self, value):
        self._set_3d((2, 3), value)

    @DOMMatrixReadOnly.m41.setter
    def m41(self, value):
        self._set_2d((3, 0), value)

    @DOMMatrixReadOnly.m42.setter
    def m42(self, value):
        self._set_2d((3, 1), value)

    @DOMMatrixReadOnly.m43.setter
    def m43(self, value):
        self._set_3d((3, 2), value)

    @DOMMatrixReadOnly.m44.setter
    def m44(self, value):
        self._set_3d((3, 3), value)

    def clone(self):
        return DOMMatrix(self)

    def invert_self(self):
        """Inverts the current matrix.
        A singular matrix becomes a 3d matrix filled with NaN.

        Returns:
            DOMMatrix: Returns itself.
        Raises:
            NotSupportedError: If the current matrix is not a 2d matrix.
        """
        if not self._is2d:
            raise NotSupportedError('3D matrix inversion is not implemented')
        a, b, c, d, e, f = self.tolist()
        det = a * d - b * c
        if det == 0:
            logger.debug('id={}: singular matrix {}'.format(
                hex(id(self)), self.tolist()))
            self._matrix = np.full((4, 4), np.nan)
            self._is2d = False
            return self
        self._matrix = matrix2d(d / det,
                                -b / det,
                                -c / det,
                                a / det,
                                (c * f - d * e) / det,
                                (b * e - a * f) / det)
        return self

    def multiply_self(self, other):
        """Post-multiplies the other matrix on the current matrix.

        Arguments:
            other (DOMMatrixReadOnly, dict): A matrix to be multiplied.
        Returns:
            DOMMatrix: Returns itself.
        """
        if not isinstance(other, DOMMatrixReadOnly):
            other = DOMMatrixReadOnly.from_matrix(other)
        self._matrix = np.dot(other._matrix, self._matrix)
        if not other._is2d:
            self._is2d = False
        return self

    def pre_multiply_self(self, other):
        """Pre-multiplies the other matrix on the current matrix.

        Arguments:
            other (DOMMatrixReadOnly, dict): A matrix to be multiplied.
        Returns:
            DOMMatrix: Returns itself.
        """
        if not isinstance(other, DOMMatrixReadOnly):
            other = DOMMatrixReadOnly.from_matrix(other)
        self._matrix = np.dot(self._matrix, other._matrix)
        if not other._is2d:
            self._is2d = False
        return self

    def rotate_axis_angle_self(self, x=0, y=0, z=0, angle=0):
        """Post-multiplies a rotation around the given axis on the current
        matrix. A zero-length axis leaves the matrix unchanged.

        Arguments:
            x (float, optional): The x component of the axis.
            y (float, optional): The y component of the axis.
            z (float, optional): The z component of the axis.
            angle (float, optional): The rotation angle in degrees.
        Returns:
            DOMMatrix: Returns itself.
        """
        length = math.sqrt(x ** 2 + y ** 2 + z ** 2)
        if length == 0:
            return self
        elif length != 1:
            x /= length
            y /= length
            z /= length

        t = math.radians(angle)
        sin = math.sin(t)
        cos = math.cos(t)
        k = 1 - cos
        r = matrix3d(k * x * x + cos, k * x * y + sin * z,
                     k * x * z - sin * y, 0,
                     k * x * y - sin * z, k * y * y + cos,
                     k * y * z + sin * x, 0,
                     k * x * z + sin * y, k * y * z - sin * x,
                     k * z * z + cos, 0,
                     0, 0, 0, 1)
        self._matrix = np.dot(r, self._matrix)
        if x != 0 or y != 0:
            self._is2d = False
        return self

    def rotate_from_vector_self(self, x=0, y=0):
        if x == 0 and y == 0:
            rot_z = 0
        else:
            rot_z = math.degrees(math.atan2(y, x))
        return self.rotate_self(rot_z)

    def rotate_self(self, rot_x=0, rot_y=None, rot_z=None):
        """Post-multiplies a rotation transformation on the current matrix.
        With a single argument the rotation is around the z-axis; otherwise
        points are rotated around the x-axis, then the y-axis, then the
        z-axis.

        Arguments:
            rot_x (float, optional): The x-axis rotation angle in degrees, or
                the z-axis rotation angle if it is the only argument.
            rot_y (float, optional): The y-axis rotation angle in degrees.
            rot_z (float, optional): The z-axis rotation angle in degrees.
        Returns:
            DOMMatrix: Returns itself.
        """
        if rot_y is None and rot_z is None:
            rot_x, rot_z = 0, rot_x
        if rot_y is None:
            rot_y = 0
        if rot_z is None:
            rot_z = 0

        if rot_x != 0 or rot_y != 0:
            self._is2d = False

        if rot_z != 0:
            t = math.radians(rot_z)
            sin = math.sin(t)
            cos = math.cos(t)
            r = matrix2d(cos, sin, -sin, cos, 0, 0)
            self._matrix = np.dot(r, self._matrix)

        if rot_y != 0:
            t = math.radians(rot_y)
            sin = math.sin(t)
            cos = math.cos(t)
            r = matrix3d(cos, 0, -sin, 0,
                         0, 1, 0, 0,
                         sin, 0, cos, 0,
                         0, 0, 0, 1)
            self._matrix = np.dot(r, self._matrix)

        if rot_x != 0:
            t = math.radians(rot_x)
            sin = math.sin(t)
            cos = math.cos(t)
            r = matrix3d(1, 0, 0, 0,
                         0, cos, sin, 0,
                         0, -sin, cos, 0,
                         0, 0, 0, 1)
            self._matrix = np.dot(r, self._matrix)

        return self

    def scale_self(self, scale_x=1, scale_y=None, scale_z=1,
                   origin_x=0, origin_y=0, origin_z=0):
        """Post-multiplies a non-uniform scale transformation on the current
        matrix.

        Arguments:
            scale_x (float, optional): The scale amount in X.
            scale_y (float, optional): The scale amount in Y. Defaults to
                scale_x.
            scale_z (float, optional): The scale amount in Z.
            origin_x (float, optional): The transform origin in X.
            origin_y (float, optional): The transform origin in Y.
            origin_z (float, optional): The transform origin in Z.
        Returns:
            DOMMatrix: Returns itself.
        """
        if scale_y is None:
            scale_y = scale_x
        self.translate_self(origin_x, origin_y, origin_z)
        m = matrix3d(scale_x, 0, 0, 0,
                     0, scale_y, 0, 0,
                     0, 0, scale_z, 0,
                     0, 0, 0, 1)
        self._matrix = np.dot(m, self._matrix)
        self.translate_self(-origin_x, -origin_y, -origin_z)
        if scale_z != 1 or origin_z != 0:
            self._is2d = False
        return self

    def scale3d_self(self, scale=1, origin_x=0, origin_y=0, origin_z=0):
        return self.scale_self(scale, scale, scale,
                               origin_x, origin_y, origin_z)

    def set_matrix_value(self, transform_list):
        """Replaces the current matrix with the matrix described by a CSS
        <transform-list>. The current matrix is unchanged if parsing fails.

        Arguments:
            transform_list (str): A CSS <transform-list>.
        Returns:
            DOMMatrix: Returns itself.
        """
        if not isinstance(transform_list, str):
            raise TypeError('Expected str, got ' + repr(type(transform_list)))
        matrix = DOMMatrixReadOnly(transform_list)
        self._matrix = matrix._matrix
        self._is2d = matrix._is2d
        return self

    def skew_self(self, angle_x=None, angle_y=None):
        """Post-multiplies a skew transformation on the current matrix.

        Arguments:
            angle_x (float, optional): The skew angle along the x-axis in
                degrees.
            angle_y (float, optional): The skew angle along the y-axis in
                degrees.
        Returns:
            DOMMatrix: Returns itself.
        """
        if angle_x is None and angle_y is None:
            return self
        tan_x = 0 if angle_x is None else math.tan(math.radians(angle_x))
        tan_y = 0 if angle_y is None else math.tan(math.radians(angle_y))
        m = matrix2d(1, tan_y, tan_x, 1, 0, 0)
        self._matrix = np.dot(m, self._matrix)
        return self

    def skew_x_self(self, angle):
        """Post-multiplies a skewX transformation on the current matrix.

        Arguments:
            angle (float): The skew angle in degrees.
        Returns:
            DOMMatrix: Returns itself.
        """
        m = matrix2d(1, 0, math.tan(math.radians(angle)), 1, 0, 0)
        self._matrix = np.dot(m, self._matrix)
        return self

    def skew_y_self(self, angle):
        """Post-multiplies a skewY transformation on the current matrix.

        Arguments:
            angle (float): The skew angle in degrees.
        Returns:
            DOMMatrix: Returns itself.
        """
        m = matrix2d(1, math.tan(math.radians(angle)), 0, 1, 0, 0)
        self._matrix = np.dot(m, self._matrix)
        return self

    def translate_self(self, tx=0, ty=0, tz=0):
        """Post-multiplies a translation transformation on the current
        matrix.

        Arguments:
            tx (float, optional): The translation amount in X.
            ty (float, optional): The translation amount in Y.
            tz (float, optional): The translation amount in Z.
        Returns:
            DOMMatrix: Returns itself.
        """
        if tx == 0 and ty == 0 and tz == 0:
            return self
        m = matrix3d(1, 0, 0, 0,
                     0, 1, 0, 0,
                     0, 0, 1, 0,
                     tx, ty, tz, 1)
        self._matrix = np.dot(m, self._matrix)
        if tz != 0:
            self._is2d = False
        return self
