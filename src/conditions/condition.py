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
Conditions are the result of evaluating an expect_* function.
'''
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from logging import getLogger
from typing import Self
import sys

from .error import InvalidConditionExpression, abort, abortf
from .reporter import Reporter


__all__ = ['Op', 'Condition']


logger = getLogger('conditions.condition')


class Op(Enum):
    '''The check a Condition is the result of.'''
    EQUAL = 'equal'
    NOT_EQUAL = 'not equal'
    LESS_THAN = 'less than'
    NOT_LESS_THAN = 'not less than'
    GREATER_THAN = 'greater than'
    NOT_GREATER_THAN = 'not greater than'
    RAISES = 'raises'
    NOT_RAISES = 'not raises'
    NIL = 'nil'
    NOT_NIL = 'not nil'
    EMPTY = 'empty'
    NOT_EMPTY = 'not empty'
    KIND_IS = 'kind is'
    KIND_IS_NOT = 'kind is not'
    SAME_TYPE = 'same type'
    NOT_SAME_TYPE = 'not same type'
    WRITABLE = 'writable'
    NOT_WRITABLE = 'not writable'
    READABLE = 'readable'
    NOT_READABLE = 'not readable'
    ERROR_IS = 'error is'
    ERROR_IS_NOT = 'error is not'
    CONTAINS = 'contains'
    NOT_CONTAINS = 'not contains'
    TRUE = 'true'
    FALSE = 'false'

    @property
    def negated(self) -> Op:
        '''the op that is true when this one is false'''
        return _NEGATIONS[self]

    def __str__(self) -> str:
        return self.value


# Ops are declared in pairs of (op, negated op).
_ops = list(Op)
_NEGATIONS = {op: neg for op, neg in zip(_ops[0::2], _ops[1::2])}
_NEGATIONS |= {neg: op for op, neg in _NEGATIONS.items()}
del _ops


@dataclass(frozen=True)
class Condition:
    '''
    The outcome of a check and the explanation of it.

    Conditions are created by the expect_* functions and are immutable. Both
    messages are rendered when the condition is created so that revert() can
    swap them and so they describe the operands as they were at the time of
    the check rather than when they are reported.

    The reaction methods decide what to do with the outcome:
        expect_equal(a, b).assert_()              # raise AssertionFailed
        expect_equal(a, b).test(reporter)         # soft failure
        expect_equal(a, b).on_true(f).on_false(g) # callbacks
    '''
    result: bool
    true_message: str
    '''the message for a true result, the false_message of revert()'''
    false_message: str
    '''the message for a false result, used by assert_() and test()'''
    op: Op

    def __str__(self) -> str:
        return f'({self.op} {self.result})'

    # Disallow evaluation of condition truthiness since 'if condition:' would
    # look like it checks the result.
    __bool__ = InvalidConditionExpression(None,
        "bool(Condition) not supported, use Condition.result, on_true(), "
        "or on_false() instead")

    def assert_(self, msg: str = '') -> None:
        '''
        Raise AssertionFailed if the condition is false. The message is msg if
        it is given, the false message otherwise.
        '''
        if not self.result:
            logger.debug('asserted false condition %s', self)
            abort(msg or self.false_message)

    def assertf(self, msg: str, *args: object) -> None:
        '''
        Raise AssertionFailed with msg % args if the condition is false.
        '''
        if not self.result:
            logger.debug('asserted false condition %s', self)
            abortf(msg, *args)

    def test(self, reporter: Reporter) -> None:
        '''
        Report a soft failure if the condition is false. The false message is
        logged with the file and line test() was called from and the reporter
        is failed. Execution continues.
        '''
        if self.result:
            return
        caller = sys._getframe(1)
        logger.error('%s:%d: %s', caller.f_code.co_filename, caller.f_lineno,
                     self.false_message, stacklevel=2)
        reporter.fail()

    def on_true(self, func: Callable[[], object]) -> Self:
        '''call func if the condition is true'''
        if self.result:
            func()
        return self

    def on_false(self, func: Callable[[], object]) -> Self:
        '''call func if the condition is false'''
        if not self.result:
            func()
        return self

    def revert(self) -> Condition:
        '''the condition that is true when this one is false'''
        return Condition(not self.result,
                         self.false_message,
                         self.true_message,
                         self.op.negated)
