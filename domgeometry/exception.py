# Copyright (C) 2019 Tetsuya Miura <miute.dev@gmail.com>
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


class DOMException(Exception):
    """Represents the [WebIDL] DOMException."""

    NOT_SUPPORTED_ERR = 9
    SYNTAX_ERR = 12

    def __init__(self, *args, **kwargs):
        message = kwargs.pop('message', '')
        name = kwargs.pop('name', 'Error')
        if len(kwargs) > 0:
            raise TypeError('Invalid keyword argument(s): '
                            + repr(list(kwargs.keys())).strip('[]'))

        if len(message) == 0 and len(args) > 0:
            t = [x if isinstance(x, str) else str(x) for x in args]
            message = ' '.join(t)
        self._message = message
        if len(args) == 0 and len(message) > 0:
            args = (message,)
        super().__init__(*args)
        if self.__class__ is not DOMException:
            name = self.__class__.__name__
        self._name = name
        self._code = _error_names_map.get(name, 0)

    def __repr__(self):
        s = "{}(message='{}', name='{}')".format(
            self.__class__.__name__,
            self._message,
            self._name,
        )
        return s

    @property
    def code(self):
        return self._code

    @property
    def message(self):
        return self._message

    @property
    def name(self):
        return self._name


class NotSupportedError(DOMException):
    """Raised for operations the matrix cannot perform exactly, such as
    inverting a 3d matrix.
    """


class TransformSyntaxError(DOMException):
    """Raised when a CSS transform list does not match the
    <transform-list> grammar.
    """


_error_names_map = {
    'NotSupportedError': DOMException.NOT_SUPPORTED_ERR,
    'TransformSyntaxError': DOMException.SYNTAX_ERR,
}
