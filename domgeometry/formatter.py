# Copyright (C) 2017 Tetsuya Miura <miute.dev@gmail.com>
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


precision = 12
"""int: The precision is a decimal number indicating how many digits should
be displayed after the decimal point for a floating point value.
The precision must be greater than zero.
"""


def format_number(x):
    """Returns the shortest fixed-point text of a number.

    Examples:
        >>> format_number(0.5)
        '0.5'
        >>> format_number(-0.0)
        '0'
        >>> format_number(12)
        '12'
    """
    text = '{:.{precision}f}'.format(
        x, precision=precision).rstrip('0').rstrip('.')
    return text if text != '-0' else '0'


def format_number_sequence(s):
    return [format_number(x) for x in iter(s)]
