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
The expect_* functions evaluate a check and return the Condition for it.

Each function renders both the message for when the check is false and the
message for when it is true. The expect_not_* functions are the revert() of
their counterpart so they share the messages.

Operands that the check can't be evaluated for (expect_readable() on
something that isn't a channel, for example) raise ContractViolation
immediately since they are a bug in the caller rather than a false check.
'''
from asyncio import current_task
from collections.abc import Awaitable, Callable, Iterable
from logging import getLogger
from numbers import Real
from typing import Any

from .channel import ChanDir, channel_direction, channel_length
from .condition import Condition, Op
from .error import violate
from .kind import NILLABLE_KINDS, Kind, kind_of, is_null
from .logging_config import VERBOSE
from .membership import membership_for
from .render import render
from .unwrap import error_matches, is_error_target


__all__ = ['expect_equal', 'expect_not_equal',
           'expect_less_than', 'expect_not_less_than',
           'expect_greater_than', 'expect_not_greater_than',
           'expect_zero', 'expect_not_zero',
           'expect_nil', 'expect_not_nil',
           'expect_empty', 'expect_not_empty',
           'expect_kind_is', 'expect_kind_is_not',
           'expect_same_type', 'expect_not_same_type',
           'expect_writable', 'expect_not_writable',
           'expect_readable', 'expect_not_readable',
           'expect_error_is', 'expect_error_is_not',
           'expect_contains', 'expect_not_contains',
           'expect_raises', 'expect_raises_async',
           'expect_true', 'expect_false']


logger = getLogger('conditions.expect')

_SIZED_KINDS = (Kind.STRING, Kind.BYTES, Kind.ARRAY, Kind.SLICE, Kind.MAP,
                Kind.SET, Kind.CHANNEL)


def _condition(result: object, op: Op,
               true_message: str, false_message: str) -> Condition:
    condition = Condition(bool(result), true_message, false_message, op)
    logger.log(VERBOSE, 'evaluated %r', condition)
    return condition


def _render_all(values: Iterable[object]) -> str:
    return f'[{", ".join(render(value) for value in values)}]'


def expect_equal(a: object, b: object) -> Condition:
    '''true if a == b'''
    ra, rb = render(a), render(b)
    return _condition(a == b, Op.EQUAL, f'{ra} == {rb}', f'{ra} != {rb}')


def expect_not_equal(a: object, b: object) -> Condition:
    '''true if a != b'''
    return expect_equal(a, b).revert()


def expect_less_than[T: Real](a: T, b: T) -> Condition:
    '''true if a < b'''
    ra, rb = render(a), render(b)
    return _condition(a < b, Op.LESS_THAN,
                      f'{ra} is less than {rb}',
                      f'{ra} is not less than {rb}')


def expect_not_less_than[T: Real](a: T, b: T) -> Condition:
    '''true if a >= b'''
    return expect_less_than(a, b).revert()


def expect_greater_than[T: Real](a: T, b: T) -> Condition:
    '''true if a > b'''
    ra, rb = render(a), render(b)
    return _condition(a > b, Op.GREATER_THAN,
                      f'{ra} is greater than {rb}',
                      f'{ra} is not greater than {rb}')


def expect_not_greater_than[T: Real](a: T, b: T) -> Condition:
    '''true if a <= b'''
    return expect_greater_than(a, b).revert()


def expect_zero(a: Real) -> Condition:
    '''true if a is the zero of its type'''
    return expect_equal(a, type(a)())


def expect_not_zero(a: Real) -> Condition:
    '''true if a is not the zero of its type'''
    return expect_not_equal(a, type(a)())


def expect_nil(a: object) -> Condition:
    '''
    true if a is None or a null reference (a NULL ctypes pointer or a dead
    weak reference).
    '''
    result = a is None or (kind_of(a) in NILLABLE_KINDS and is_null(a))
    ra = render(a)
    return _condition(result, Op.NIL,
                      f'expect a non-nil value, but got {ra}',
                      f'expect a nil value, but got {ra}')


def expect_not_nil(a: object) -> Condition:
    '''true if a is neither None nor a null reference'''
    return expect_nil(a).revert()


def expect_empty(a: object) -> Condition:
    '''
    true if a has no entries. a must be a string, bytes, array, slice, map,
    set, or channel.
    '''
    kind = kind_of(a)
    if kind not in _SIZED_KINDS:
        violate('expect_empty() requires a string, bytes, array, slice, map, '
                'set, or channel, got %s (%s)', render(a), kind)
    length = channel_length(a) if kind is Kind.CHANNEL else len(a)  # type: ignore
    if length is None:
        violate('the length of channel %s is unknown', render(a))
    ra = render(a)
    return _condition(length == 0, Op.EMPTY,
                      f'expect a non-empty {kind}, but got {ra}',
                      f'expect an empty {kind}, but got {ra}')


def expect_not_empty(a: object) -> Condition:
    '''true if a has entries. See expect_empty().'''
    return expect_empty(a).revert()


def expect_kind_is(value: object, *kinds: Kind) -> Condition:
    '''true if the kind of value is one of kinds'''
    kind = kind_of(value)
    rkinds = _render_all(kinds)
    return _condition(kind in kinds, Op.KIND_IS,
                      f'expect a value of kind not in {rkinds}, but got {kind}',
                      f'expect a value of kind in {rkinds}, but got {kind}')


def expect_kind_is_not(value: object, *kinds: Kind) -> Condition:
    '''true if the kind of value is not any of kinds'''
    return expect_kind_is(value, *kinds).revert()


def expect_same_type(*values: object) -> Condition:
    '''true if all the values are of exactly the same type'''
    if not values:
        violate('expect_same_type() requires at least one value')
    types = list(dict.fromkeys(type(value) for value in values))
    return _condition(len(types) == 1, Op.SAME_TYPE,
                      'expect values not to be the same type, but got only '
                      f'{render(types[0])}',
                      'expect values to be the same type, but got '
                      f'{_render_all(types)}')


def expect_not_same_type(*values: object) -> Condition:
    '''true if at least one value is of a different type than the others'''
    return expect_same_type(*values).revert()


def _direction(channel: object) -> ChanDir:
    direction = channel_direction(channel)
    if direction is None:
        violate('%s (%s) is not a channel', render(channel), kind_of(channel))
    return direction


def expect_writable(channel: object) -> Condition:
    '''true if values can be sent on channel'''
    rchannel = render(channel)
    return _condition(ChanDir.SEND in _direction(channel), Op.WRITABLE,
                      f'expect a non-writable channel, but {rchannel} is',
                      f"expect a writable channel, but {rchannel} isn't")


def expect_not_writable(channel: object) -> Condition:
    '''true if values can not be sent on channel'''
    return expect_writable(channel).revert()


def expect_readable(channel: object) -> Condition:
    '''true if values can be received from channel'''
    rchannel = render(channel)
    return _condition(ChanDir.RECV in _direction(channel), Op.READABLE,
                      f'expect a non-readable channel, but {rchannel} is',
                      f"expect a readable channel, but {rchannel} isn't")


def expect_not_readable(channel: object) -> Condition:
    '''true if values can not be received from channel'''
    return expect_readable(channel).revert()


def expect_error_is(error: BaseException|None,
                    *targets: type[BaseException]|BaseException|None
                   ) -> Condition:
    '''
    true if error, or an error it wraps, matches one of the targets. See
    unwrap.error_matches().
    '''
    if error is not None and not isinstance(error, BaseException):
        violate('%s (%s) is not an error', render(error), kind_of(error))
    result = any(error_matches(error, target) for target in targets)
    rerror, rtargets = render(error), _render_all(targets)
    return _condition(result, Op.ERROR_IS,
                      f'expect an error not in {rtargets}, but got {rerror}',
                      f'expect an error in {rtargets}, but got {rerror}')


def expect_error_is_not(error: BaseException|None,
                        *targets: type[BaseException]|BaseException|None
                       ) -> Condition:
    '''true if neither error nor the errors it wraps match any targets'''
    return expect_error_is(error, *targets).revert()


def expect_contains(element: object, container: object) -> Condition:
    '''
    true if element is in container. container must be a map, set, array,
    slice, string, or bytes, and element must be of a type that can be in it.
    See membership.
    '''
    membership = membership_for(container)
    membership.check_element(element, container)
    result = membership.contains(element, container)
    relement, rcontainer = render(element), render(container)
    return _condition(result, Op.CONTAINS,
                      f'{relement} in {rcontainer}',
                      f'{relement} not in {rcontainer}')


def expect_not_contains(element: object, container: object) -> Condition:
    '''true if element is not in container. See expect_contains().'''
    return expect_contains(element, container).revert()


def _payload(error: BaseException) -> object:
    '''the value an error was raised with'''
    return error.args[0] if len(error.args) == 1 else error.args


def _raised(expected: object, raised: BaseException|None) -> Condition:
    '''the condition for expected being raised when raised was'''
    rexpected, rraised = render(expected), render(raised)
    if expected is None:
        return _condition(raised is None, Op.RAISES,
                          f'expect an exception, but got {rraised}',
                          f'expect no exception, but got {rraised}')
    if raised is None:
        result = False
    elif is_error_target(expected):
        result = error_matches(raised, expected)
    else:
        result = _payload(raised) == expected
    return _condition(result, Op.RAISES,
                      f'expect no exception of {rexpected}, '
                      f'but got {rraised}',
                      f'expect an exception of {rexpected}, '
                      f'but got {rraised}')


def expect_raises(expected: object, func: Callable[..., object],
                  *args: Any, **kwargs: Any) -> Condition:
    '''
    Call func(*args, **kwargs) and return a condition for whether it raised
    expected. Whatever func raises is caught, it never escapes.
        expected is None: true if func didn't raise
        expected is an exception class or instance: true if func raised an
            error that matches it (see unwrap.error_matches())
        anything else: true if func raised an error whose argument (or args,
            if it has several) equals expected
    '''
    raised: BaseException|None = None
    try:
        func(*args, **kwargs)
    except BaseException as error:
        raised = error
    return _raised(expected, raised)


async def expect_raises_async(expected: object,
                              func: Callable[..., Awaitable[object]],
                              *args: Any, **kwargs: Any) -> Condition:
    '''
    expect_raises() for coroutine functions. Cancellation of the task awaiting
    the condition is not caught.
    '''
    raised: BaseException|None = None
    try:
        await func(*args, **kwargs)
    except BaseException as error:
        task = current_task()
        if task is not None and task.cancelling():
            raise
        raised = error
    return _raised(expected, raised)


def expect_true(value: object) -> Condition:
    '''true if value is true'''
    rvalue = render(value)
    return _condition(value, Op.TRUE,
                      f'expect false, but got {rvalue}',
                      f'expect true, but got {rvalue}')


def expect_false(value: object) -> Condition:
    '''true if value is false'''
    return expect_true(value).revert()
