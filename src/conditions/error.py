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
Error definitions and the functions that raise assertion failures.
'''
from collections.abc import Callable
from logging import getLogger
from typing import NoReturn


__all__ = ['ConditionError', 'AssertionFailed', 'ContractViolation',
           'MustNotBeCalled', 'InvalidConditionExpression',
           'abort', 'abortf', 'just_abort', 'violate']


logger = getLogger('conditions.error')


class ConditionError(RuntimeError):
    '''base class for condition errors'''


class AssertionFailed(ConditionError, AssertionError):
    '''
    Raised when a false Condition is asserted.

    It is an AssertionError so test runners report it as a failed test rather
    than an error. It carries nothing but the message.
    '''


class ContractViolation(AssertionFailed):
    '''
    Raised by an expect_* function when it is given operands it can not
    evaluate, for example expect_readable() on something that is not a
    channel or expect_contains() on something that is not a container.

    This is a bug in the caller, not a false condition, so it is raised
    immediately rather than waiting for the Condition to be asserted.
    '''


class MustNotBeCalled(ConditionError):
    '''
    Raised by methods that are easy to call when they really aren't what should
    be called.
    '''
    def __init__(self, func: Callable[..., object]|None,
                 *args: object) -> None:
        if func:
            # subclasses don't have to pass func if they already handled it.
            super().__init__(f'{func} must not be called', *args)
        else:
            super().__init__(*args)

    def __call__(self, *args: object, **kwargs: object) -> NoReturn:
        '''raises self to indicate a MustNotBeCalled was in fact called'''
        raise self


class InvalidConditionExpression(MustNotBeCalled):
    '''
    Raised when a Condition is used where a bool is expected. Conditions are
    not truthy, 'if expect_equal(a, b):' reads like it checks the result but
    would silently ignore it if it worked like most objects do.
    '''


def abortf(msg: str, *args: object) -> NoReturn:
    '''raise an AssertionFailed with a %-formatted message'''
    raise AssertionFailed(msg % args if args else msg)


def abort(*args: object) -> NoReturn:
    '''raise an AssertionFailed with the args joined by spaces'''
    raise AssertionFailed(' '.join(str(arg) for arg in args))


def just_abort() -> NoReturn:
    '''raise an AssertionFailed with no message'''
    abort('')


def violate(msg: str, *args: object) -> NoReturn:
    '''raise a ContractViolation with a %-formatted message'''
    message = msg % args if args else msg
    logger.debug('contract violation: %s', message)
    raise ContractViolation(message)
