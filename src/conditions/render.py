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
Rendering of operands into condition messages.

Messages are rendered when the condition is evaluated so they are a snapshot
of the operands. Containers are truncated so a check against a huge container
doesn't produce a huge message. Scalars (strings, bytes, ints) are rendered in
full so operands that differ anywhere are rendered differently.

Maps are rendered in iteration order. Sets have no order and are rendered
sorted when their members can be sorted.
'''
from itertools import islice
from reprlib import Repr
from sys import maxsize


__all__ = ['render', 'MAX_RENDERED_ENTRIES']


MAX_RENDERED_ENTRIES = 10
'''the number of container entries rendered before eliding the rest'''


class _Repr(Repr):
    '''Repr that truncates containers but not scalars.'''

    def repr_dict(self, x: dict, level: int) -> str:
        if not x:
            return '{}'
        if level <= 0:
            return '{' + self.fillvalue + '}'
        pieces = [f'{self.repr1(key, level - 1)}: '
                  f'{self.repr1(value, level - 1)}'
                  for key, value in islice(x.items(), self.maxdict)]
        if len(x) > self.maxdict:
            pieces.append(self.fillvalue)
        return '{' + ', '.join(pieces) + '}'


_repr = _Repr(maxlevel=3,
              maxtuple=MAX_RENDERED_ENTRIES,
              maxlist=MAX_RENDERED_ENTRIES,
              maxarray=MAX_RENDERED_ENTRIES,
              maxdict=MAX_RENDERED_ENTRIES,
              maxset=MAX_RENDERED_ENTRIES,
              maxfrozenset=MAX_RENDERED_ENTRIES,
              maxdeque=MAX_RENDERED_ENTRIES,
              maxstring=maxsize,
              maxlong=maxsize,
              maxother=maxsize)


def render(value: object) -> str:
    '''render value for inclusion in a message'''
    if isinstance(value, type):
        return value.__qualname__
    return _repr.repr(value)
