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
Channels are the objects values are passed through between threads, tasks,
or processes. Python doesn't have a single channel type, so this module
recognizes the standard library ones and knows which direction each can be
used in:
    queue.Queue, queue.SimpleQueue, asyncio.Queue,
    multiprocessing queues                      send and receive
    multiprocessing.connection.Connection       per readable/writable
    asyncio.StreamReader                        receive
    asyncio.StreamWriter                        send
'''
from asyncio import Queue as AsyncQueue, StreamReader, StreamWriter
from enum import Flag
from multiprocessing.connection import Connection
from multiprocessing.queues import Queue as ProcessQueue, SimpleQueue
from queue import Queue, SimpleQueue as ThreadSimpleQueue


__all__ = ['ChanDir', 'is_channel', 'channel_direction', 'channel_length']


class ChanDir(Flag):
    '''The directions a channel can be used in.'''
    RECV = 1
    SEND = 2
    BOTH = RECV | SEND


_QUEUES = (Queue, ThreadSimpleQueue, AsyncQueue, ProcessQueue, SimpleQueue)
_CHANNELS = _QUEUES + (Connection, StreamReader, StreamWriter)


def is_channel(value: object) -> bool:
    '''is value one of the recognized channel types'''
    return isinstance(value, _CHANNELS)


def channel_direction(value: object) -> ChanDir|None:
    '''
    The direction value can be used in, or None if it isn't a channel.
    A Connection that can do neither (it is closed) has no direction, which
    is ChanDir(0).
    '''
    if isinstance(value, _QUEUES):
        return ChanDir.BOTH
    if isinstance(value, Connection):
        if value.closed:
            return ChanDir(0)
        direction = ChanDir(0)
        if value.readable:
            direction |= ChanDir.RECV
        if value.writable:
            direction |= ChanDir.SEND
        return direction
    if isinstance(value, StreamReader):
        return ChanDir.RECV
    if isinstance(value, StreamWriter):
        return ChanDir.SEND
    return None


def channel_length(value: object) -> int|None:
    '''
    The number of values buffered in the channel, or None if the channel
    doesn't say.
    '''
    if isinstance(value, (Queue, ThreadSimpleQueue, AsyncQueue)):
        return value.qsize()
    if isinstance(value, SimpleQueue):
        return 0 if value.empty() else 1
    if isinstance(value, ProcessQueue):
        try:
            return value.qsize()
        except NotImplementedError:
            # qsize() isn't implemented on macOS
            return 0 if value.empty() else 1
    return None
