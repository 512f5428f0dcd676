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
Matching errors against the errors they wrap.

An error "is" a target if it, or any error it was raised from, matches the
target. The wrapped errors are the explicit cause ('raise ... from err'), the
implicit context when there is no cause, and the members of exception groups.
'''
from collections.abc import Iterator


__all__ = ['error_chain', 'error_matches', 'is_error_target']


def error_chain(error: BaseException|None) -> Iterator[BaseException]:
    '''yield error and every error it wraps, each one once'''
    seen: set[int] = set()
    pending = [] if error is None else [error]
    while pending:
        error = pending.pop()
        if id(error) in seen:
            continue
        seen.add(id(error))
        yield error
        if isinstance(error, BaseExceptionGroup):
            pending.extend(error.exceptions)
        if error.__cause__ is not None:
            pending.append(error.__cause__)
        elif error.__context__ is not None and not error.__suppress_context__:
            pending.append(error.__context__)


def is_error_target(target: object) -> bool:
    '''is target an exception class or exception instance'''
    return (isinstance(target, BaseException) or
            (isinstance(target, type) and issubclass(target, BaseException)))


def error_matches(error: BaseException|None, target: object) -> bool:
    '''
    Does error match target. Exception classes match instances of them,
    anything else matches errors that are or compare equal to it. None only
    matches None.
    '''
    if error is None or target is None:
        return error is target
    if isinstance(target, type) and issubclass(target, BaseException):
        return any(isinstance(e, target) for e in error_chain(error))
    return any(e is target or e == target for e in error_chain(error))
