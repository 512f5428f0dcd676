# Copyright (C) 2025 Anthony (Lonnie) Hutchinson <chinacat@chinacat.org>
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
'''
Kinds classify values by what can be done with them rather than by their
exact type. expect_kind_is() checks them, and the other expect_* functions
use them to decide how to evaluate operands of any type.
'''
from array import array
from collections.abc import Mapping, MutableSequence, Sequence, Set
from ctypes import _CFuncPtr, _Pointer, c_char_p, c_void_p, c_wchar_p
from decimal import Decimal
from enum import Enum
from numbers import Complex, Integral, Real
from weakref import ReferenceType

from .channel import is_channel


__all__ = ['Kind', 'kind_of', 'is_null', 'NILLABLE_KINDS']


class Kind(Enum):
    NONE = 'none'
    BOOL = 'bool'
    INT = 'int'
    FLOAT = 'float'
    COMPLEX = 'complex'
    STRING = 'string'
    BYTES = 'bytes'
    ARRAY = 'array'
    '''immutable sequences (tuple, range, ...)'''
    SLICE = 'slice'
    '''variable length sequences (list, array.array, deque, ...)'''
    MAP = 'map'
    SET = 'set'
    CHANNEL = 'channel'
    FUNCTION = 'function'
    POINTER = 'pointer'
    '''references to other values: ctypes pointers and weak references'''
    ERROR = 'error'
    TYPE = 'type'
    STRUCT = 'struct'
    '''everything else'''

    def __str__(self) -> str:
        return self.value

    __repr__ = __str__


_POINTERS = (_Pointer, c_void_p, c_char_p, c_wchar_p, ReferenceType)

NILLABLE_KINDS = (Kind.FUNCTION, Kind.POINTER)
'''the kinds that have values that are null without being None'''


def kind_of(value: object) -> Kind:
    '''the kind of value'''
    # Order matters: bool is an int, str is a sequence, ctypes function
    # pointers and classes are callable, and so on.
    if value is None:
        return Kind.NONE
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, Integral):
        return Kind.INT
    if isinstance(value, (Real, Decimal)):
        return Kind.FLOAT
    if isinstance(value, Complex):
        return Kind.COMPLEX
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, (bytes, bytearray, memoryview)):
        return Kind.BYTES
    if isinstance(value, BaseException):
        return Kind.ERROR
    if isinstance(value, type):
        return Kind.TYPE
    if isinstance(value, _POINTERS):
        return Kind.POINTER
    if isinstance(value, _CFuncPtr):
        return Kind.FUNCTION
    if isinstance(value, (MutableSequence, array)):
        return Kind.SLICE
    if isinstance(value, Sequence):
        return Kind.ARRAY
    if isinstance(value, Mapping):
        return Kind.MAP
    if isinstance(value, Set):
        return Kind.SET
    if is_channel(value):
        return Kind.CHANNEL
    if callable(value):
        return Kind.FUNCTION
    return Kind.STRUCT


def is_null(value: object) -> bool:
    '''
    Is value a null reference. A NULL ctypes pointer, or a weak reference
    whose referent is gone, is not None but doesn't refer to anything either.
    '''
    if isinstance(value, ReferenceType):
        return value() is None
    if isinstance(value, (c_void_p, c_char_p, c_wchar_p)):
        return value.value is None
    if isinstance(value, (_Pointer, _CFuncPtr)):
        return not value
    return False
