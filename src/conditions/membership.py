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
Membership implements element lookup for the kinds of containers
expect_contains() supports. There is one Membership per family of container
kinds:
    keyed       maps and sets, the element is a key
    sequence    tuples, lists, and other sequences, the element is an entry
    text        strings and bytes, the element is a substring or character

Python containers don't declare the type of what they hold, so the element
type is the type all the entries (or keys) share. An element that isn't an
instance of it can't be in the container and indicates the wrong thing is
being looked for, so it is a ContractViolation rather than a false
condition. Empty and mixed type containers accept elements of any type.
'''
from abc import ABC, abstractmethod
from array import array
from collections.abc import Iterable
from typing import Any, ClassVar

from .error import violate
from .kind import Kind, kind_of
from .render import render


__all__ = ['Membership', 'membership_for']


def _entry_type(entries: Iterable[object]) -> type|None:
    '''the type all entries share, None if there are none or they differ'''
    entry_type = None
    for entry in entries:
        if entry_type is None:
            entry_type = type(entry)
        elif type(entry) is not entry_type:
            return None
    return entry_type


def _check_type(element: object, entry_type: type|None, what: str) -> None:
    if entry_type is not None and not isinstance(element, entry_type):
        violate('element %s is a %s but the container %s are %s',
                render(element), type(element).__qualname__, what,
                entry_type.__qualname__)


class Membership(ABC):
    '''Element lookup for a family of container kinds.'''

    kinds: ClassVar[tuple[Kind, ...]]
    '''the container kinds this membership handles'''

    @abstractmethod
    def check_element(self, element: object, container: Any) -> None:
        '''raise ContractViolation if element can't be in container'''

    @abstractmethod
    def contains(self, element: object, container: Any) -> bool:
        '''is element in container'''

    def __str__(self) -> str:
        return f'{type(self).__name__}({", ".join(map(str, self.kinds))})'


class KeyedMembership(Membership):
    kinds = (Kind.MAP, Kind.SET)

    def check_element(self, element: object, container: Any) -> None:
        _check_type(element, _entry_type(container), 'keys')

    def contains(self, element: object, container: Any) -> bool:
        try:
            return element in container
        except TypeError as err:
            # unhashable element
            violate('%s can not be a key of %s: %s',
                    render(element), render(container), err)


class SequenceMembership(Membership):
    kinds = (Kind.ARRAY, Kind.SLICE)

    _array_types: ClassVar[dict[str, type]] = {'f': float, 'd': float,
                                               'u': str, 'w': str}

    def check_element(self, element: object, container: Any) -> None:
        if isinstance(container, range):
            entry_type: type|None = int
        else:
            entry_type = _entry_type(container)
        if entry_type is None and isinstance(container, array):
            # empty arrays still know what they hold
            entry_type = self._array_types.get(container.typecode, int)
        _check_type(element, entry_type, 'entries')

    def contains(self, element: object, container: Any) -> bool:
        return element in container


class TextMembership(Membership):
    kinds = (Kind.STRING, Kind.BYTES)

    def check_element(self, element: object, container: Any) -> None:
        if isinstance(container, str):
            if not isinstance(element, str):
                violate('only strings can be in a string, got %s',
                        render(element))
        elif isinstance(element, int) and not isinstance(element, bool):
            if not 0 <= element <= 255:
                violate('byte values are 0 to 255, got %s', element)
        elif not isinstance(element, (bytes, bytearray, memoryview)):
            violate('only bytes or byte values can be in bytes, got %s',
                    render(element))

    def contains(self, element: object, container: Any) -> bool:
        if isinstance(container, memoryview):
            container = container.tobytes()
        return element in container


_MEMBERSHIPS: dict[Kind, Membership] = {
    kind: membership
    for membership in (KeyedMembership(), SequenceMembership(),
                       TextMembership())
    for kind in membership.kinds}


def membership_for(container: object) -> Membership:
    '''
    The Membership for container. Raises ContractViolation if container isn't
    a kind of container that has members.
    '''
    kind = kind_of(container)
    membership = _MEMBERSHIPS.get(kind)
    if membership is None:
        violate('%s is a %s, not a map, set, array, slice, string, or bytes',
                render(container), kind)
    return membership
