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

import numpy as np

from .point import DOMPointReadOnly, _to_number


class DOMRectReadOnly(object):
    """Represents the [geometry] DOMRectReadOnly."""

    def __init__(self, x=0, y=0, width=0, height=0):
        """Constructs a DOMRectReadOnly object.

        Arguments:
            x (float, optional): The x-coordinate of the rectangle's origin.
            y (float, optional): The y-coordinate of the rectangle's origin.
            width (float, optional): The width of the rectangle.
            height (float, optional): The height of the rectangle.
        """
        self._x = _to_number(x)
        self._y = _to_number(y)
        self._width = _to_number(width)
        self._height = _to_number(height)

    def __eq__(self, other):
        if not isinstance(other, DOMRectReadOnly):
            return NotImplemented
        return (self.x == other.x
                and self.y == other.y
                and self.width == other.width
                and self.height == other.height)

    def __repr__(self):
        return (
            "<{}.{} object at {}"
            " ('x': {:g}, 'y': {:g}, 'width': {:g}, 'height': {:g})>".format(
                type(self).__module__, type(self).__name__, hex(id(self)),
                self._x, self._y, self._width, self._height))

    @property
    def bottom(self):
        """float: The y-coordinate of the rectangle's bottom edge."""
        return self._y + self._height

    @property
    def height(self):
        """float: The height of the rectangle."""
        return self._height

    @property
    def left(self):
        """float: The x-coordinate of the rectangle's left edge.
        Equivalent to DOMRectReadOnly.x.
        """
        return self._x

    @property
    def right(self):
        """float: The x-coordinate of the rectangle's right edge."""
        return self._x + self._width

    @property
    def top(self):
        """float: The y-coordinate of the rectangle's top edge.
        Equivalent to DOMRectReadOnly.y.
        """
        return self._y

    @property
    def width(self):
        """float: The width of the rectangle."""
        return self._width

    @property
    def x(self):
        """float: The x-coordinate of the rectangle's origin."""
        return self._x

    @property
    def y(self):
        """float: The y-coordinate of the rectangle's origin."""
        return self._y

    @staticmethod
    def _fields_from_rect(other):
        if isinstance(other, DOMRectReadOnly):
            return other.x, other.y, other.width, other.height
        if isinstance(other, Mapping):
            get = other.get
        else:
            def get(name, default):
                return getattr(other, name, default)
        return (get('x', 0), get('y', 0),
                get('width', 0), get('height', 0))

    @staticmethod
    def from_rect(other):
        """Creates a new DOMRectReadOnly object from a rectangle-like value,
        and returns it.

        Arguments:
            other (DOMRectReadOnly, dict): A rectangle, or a mapping or object
                with x, y, width and height fields.
        Returns:
            DOMRectReadOnly: A new DOMRectReadOnly object.
        """
        return DOMRectReadOnly(*DOMRectReadOnly._fields_from_rect(other))

    def tojson(self):
        serialized = {
            'x': self.x,
            'y': self.y,
            'width': self.width,
            'height': self.height,
            'top': self.top,
            'right': self.right,
            'bottom': self.bottom,
            'left': self.left,
        }
        return serialized

    def transform(self, matrix):
        """Returns the bounding box of the rectangle transformed by the
        matrix.
        The current rectangle is not modified.

        Arguments:
            matrix (DOMMatrixReadOnly): A matrix to be applied.
        Returns:
            DOMRect: The resulting rectangle.
        """
        rect = DOMRect(self.x, self.y, self.width, self.height)
        rect.transform_self(matrix)
        return rect


class DOMRect(DOMRectReadOnly):
    """Represents the [geometry] DOMRect."""

    @DOMRectReadOnly.height.setter
    def height(self, height):
        self._height = _to_number(height)

    @DOMRectReadOnly.width.setter
    def width(self, width):
        self._width = _to_number(width)

    @DOMRectReadOnly.x.setter
    def x(self, x):
        self._x = _to_number(x)

    @DOMRectReadOnly.y.setter
    def y(self, y):
        self._y = _to_number(y)

    @staticmethod
    def from_rect(other):
        """Creates a new DOMRect object from a rectangle-like value, and
        returns it.

        Arguments:
            other (DOMRectReadOnly, dict): See DOMRectReadOnly.from_rect().
        Returns:
            DOMRect: A new DOMRect object.
        """
        return DOMRect(*DOMRectReadOnly._fields_from_rect(other))

    def transform_self(self, matrix):
        """Replaces the rectangle with the bounding box of its four corners
        transformed by the matrix.

        Arguments:
            matrix (DOMMatrixReadOnly): A matrix to be applied.
        Returns:
            DOMRect: Returns itself.
        """
        corners = [(self.left, self.top), (self.right, self.top),
                   (self.right, self.bottom), (self.left, self.bottom)]
        points = np.array([
            [point.x, point.y, point.w] for point in (
                matrix.transform_point(DOMPointReadOnly(x, y))
                for x, y in corners)])
        # projective points are normalized back to w == 1; w == 0 gives
        # infinite or NaN coordinates
        with np.errstate(divide='ignore', invalid='ignore'):
            xs = points[:, 0] / points[:, 2]
            ys = points[:, 1] / points[:, 2]
            left = xs.min()
            top = ys.min()
            width = xs.max() - left
            height = ys.max() - top
        self._x = float(left)
        self._y = float(top)
        self._width = float(width)
        self._height = float(height)
        return self
