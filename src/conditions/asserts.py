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
assert_* functions raise AssertionFailed if their expect_* is false.
'''
from collections.abc import Callable
from numbers import Real
from typing import Any

from .expect import (expect_equal, expect_not_equal,
                     expect_less_than, expect_not_less_than,
                     expect_greater_than, expect_not_greater_than,
                     expect_zero, expect_not_zero,
                     expect_nil, expect_not_nil,
                     expect_empty, expect_not_empty,
                     expect_kind_is, expect_kind_is_not,
                     expect_same_type, expect_not_same_type,
                     expect_writable, expect_not_writable,
                     expect_readable, expect_not_readable,
                     expect_error_is, expect_error_is_not,
                     expect_contains, expect_not_contains,
                     expect_raises, expect_true, expect_false)
from .kind import Kind


__all__ = ['assert_equal', 'assert_not_equal',
           'assert_less_than', 'assert_not_less_than',
           'assert_greater_than', 'assert_not_greater_than',
           'assert_zero', 'assert_not_zero',
           'assert_nil', 'assert_not_nil',
           'assert_empty', 'assert_not_empty',
           'assert_kind_is', 'assert_kind_is_not',
           'assert_same_type', 'assert_not_same_type',
           'assert_writable', 'assert_not_writable',
           'assert_readable', 'assert_not_readable',
           'assert_error_is', 'assert_error_is_not',
           'assert_contains', 'assert_not_contains',
           'assert_raises', 'assert_true', 'assert_false']


def assert_equal(a: object, b: object) -> None:
    expect_equal(a, b).assert_()

def assert_not_equal(a: object, b: object) -> None:
    expect_not_equal(a, b).assert_()

def assert_less_than[T: Real](a: T, b: T) -> None:
    expect_less_than(a, b).assert_()

def assert_not_less_than[T: Real](a: T, b: T) -> None:
    expect_not_less_than(a, b).assert_()

def assert_greater_than[T: Real](a: T, b: T) -> None:
    expect_greater_than(a, b).assert_()

def assert_not_greater_than[T: Real](a: T, b: T) -> None:
    expect_not_greater_than(a, b).assert_()

def assert_zero(a: Real) -> None:
    expect_zero(a).assert_()

def assert_not_zero(a: Real) -> None:
    expect_not_zero(a).assert_()

def assert_nil(a: object) -> None:
    expect_nil(a).assert_()

def assert_not_nil(a: object) -> None:
    expect_not_nil(a).assert_()

def assert_empty(a: object) -> None:
    expect_empty(a).assert_()

def assert_not_empty(a: object) -> None:
    expect_not_empty(a).assert_()

def assert_kind_is(value: object, *kinds: Kind) -> None:
    expect_kind_is(value, *kinds).assert_()

def assert_kind_is_not(value: object, *kinds: Kind) -> None:
    expect_kind_is_not(value, *kinds).assert_()

def assert_same_type(*values: object) -> None:
    expect_same_type(*values).assert_()

def assert_not_same_type(*values: object) -> None:
    expect_not_same_type(*values).assert_()

def assert_writable(channel: object) -> None:
    expect_writable(channel).assert_()

def assert_not_writable(channel: object) -> None:
    expect_not_writable(channel).assert_()

def assert_readable(channel: object) -> None:
    expect_readable(channel).assert_()

def assert_not_readable(channel: object) -> None:
    expect_not_readable(channel).assert_()

def assert_error_is(error: BaseException|None,
                    *targets: type[BaseException]|BaseException|None) -> None:
    expect_error_is(error, *targets).assert_()

def assert_error_is_not(error: BaseException|None,
                        *targets: type[BaseException]|BaseException|None
                       ) -> None:
    expect_error_is_not(error, *targets).assert_()

def assert_contains(element: object, container: object) -> None:
    expect_contains(element, container).assert_()

def assert_not_contains(element: object, container: object) -> None:
    expect_not_contains(element, container).assert_()

def assert_raises(expected: object, func: Callable[..., object],
                  *args: Any, **kwargs: Any) -> None:
    expect_raises(expected, func, *args, **kwargs).assert_()

def assert_true(value: object) -> None:
    expect_true(value).assert_()

def assert_false(value: object) -> None:
    expect_false(value).assert_()
