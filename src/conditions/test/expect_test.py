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
Tests for the expect_* functions.
'''
from asyncio import CancelledError, create_task, sleep
from collections.abc import Callable
from ctypes import POINTER, c_int
from decimal import Decimal
from fractions import Fraction
from queue import Queue
from unittest import TestCase, main

from ..condition import Condition, Op
from ..error import AssertionFailed, ContractViolation
from ..expect import (expect_equal, expect_not_equal,
                      expect_less_than, expect_not_less_than,
                      expect_greater_than, expect_not_greater_than,
                      expect_zero, expect_not_zero,
                      expect_nil, expect_not_nil,
                      expect_empty, expect_not_empty,
                      expect_kind_is, expect_kind_is_not,
                      expect_same_type, expect_not_same_type,
                      expect_error_is, expect_error_is_not,
                      expect_contains, expect_not_contains,
                      expect_raises, expect_raises_async,
                      expect_true, expect_false)
from ..kind import Kind
from .async_helpers import asynctest


class ExpectTest(TestCase):

    def assertCondition(self, condition: Condition) -> None:
        '''assert the condition is true'''
        self.assertTrue(condition.result, condition.false_message)

    def test_negations_agree(self) -> None:
        '''each expect_not_* is the revert of its expect_*'''
        pairs: list[tuple[Callable[..., Condition],
                          Callable[..., Condition],
                          tuple[object, ...]]] = [
            (expect_equal, expect_not_equal, (1, 2)),
            (expect_equal, expect_not_equal, ('a', 'a')),
            (expect_less_than, expect_not_less_than, (1, 2)),
            (expect_greater_than, expect_not_greater_than, (1, 1)),
            (expect_zero, expect_not_zero, (0,)),
            (expect_nil, expect_not_nil, (None,)),
            (expect_empty, expect_not_empty, ([],)),
            (expect_kind_is, expect_kind_is_not, (1, Kind.INT)),
            (expect_same_type, expect_not_same_type, (1, 'a')),
            (expect_error_is, expect_error_is_not, (KeyError(), KeyError)),
            (expect_contains, expect_not_contains, (1, [1, 2])),
            (expect_true, expect_false, (True,)),
        ]
        for expect, expect_not, args in pairs:
            with self.subTest(expect=expect.__name__, args=args):
                condition = expect(*args)
                negation = expect_not(*args)
                self.assertEqual(condition.result, not negation.result)
                self.assertEqual(condition.revert(), negation)

    def test_equal(self) -> None:
        self.assertCondition(expect_equal(1, 1))
        self.assertCondition(expect_equal('foo', 'foo'))
        self.assertCondition(expect_equal(True, True))
        self.assertCondition(expect_not_equal(1, 2))
        self.assertCondition(expect_not_equal('foo', 'bar'))

    def test_equal_identity(self) -> None:
        obj = object()
        self.assertCondition(expect_equal(obj, obj))
        self.assertCondition(expect_not_equal(obj, object()))
        queue: Queue[int] = Queue()
        self.assertCondition(expect_equal(queue, queue))
        self.assertCondition(expect_not_equal(queue, Queue()))

    def test_equal_messages(self) -> None:
        condition = expect_equal(1, 2)
        self.assertEqual('1 != 2', condition.false_message)
        self.assertEqual('1 == 2', condition.true_message)
        self.assertIs(Op.EQUAL, condition.op)
        self.assertEqual("'a' == 'a'", expect_not_equal('a', 'a').false_message)

    def test_equal_messages_render_long_operands_in_full(self) -> None:
        a = 'x' * 50 + 'A' + 'x' * 50
        b = 'x' * 50 + 'B' + 'x' * 50
        self.assertEqual(f'{a!r} != {b!r}', expect_equal(a, b).false_message)
        n = 10 ** 100
        self.assertEqual(f'{n} != {n + 1}',
                         expect_equal(n, n + 1).false_message)
        data = b'y' * 100
        self.assertEqual(f'{data!r} == {data!r}',
                         expect_not_equal(data, data).false_message)

    def test_less_than(self) -> None:
        self.assertCondition(expect_less_than(1, 2))
        self.assertCondition(expect_less_than(1.5, 2.5))
        self.assertCondition(expect_not_less_than(1, 0))
        self.assertCondition(expect_not_less_than(1, 1))
        self.assertEqual('2 is not less than 1',
                         expect_less_than(2, 1).false_message)

    def test_greater_than(self) -> None:
        self.assertCondition(expect_greater_than(1, 0))
        self.assertCondition(expect_greater_than(Fraction(1, 2),
                                                 Fraction(1, 3)))
        self.assertCondition(expect_not_greater_than(1, 1))
        self.assertCondition(expect_not_greater_than(1, 2))
        self.assertEqual('1 is greater than 0',
                         expect_not_greater_than(1, 0).false_message)

    def test_zero(self) -> None:
        self.assertCondition(expect_zero(0))
        self.assertCondition(expect_zero(0.0))
        self.assertCondition(expect_zero(Decimal('0.00')))
        self.assertCondition(expect_not_zero(1))
        self.assertCondition(expect_not_zero(-0.5))

    def test_nil(self) -> None:
        self.assertCondition(expect_nil(None))
        self.assertCondition(expect_nil(POINTER(c_int)()))

    def test_not_nil(self) -> None:
        self.assertCondition(expect_not_nil([]))
        self.assertCondition(expect_not_nil(0))
        self.assertCondition(expect_not_nil(''))
        self.assertCondition(expect_not_nil(ValueError('foo')))
        self.assertCondition(expect_not_nil(lambda: None))

    def test_nil_pointer_is_nil_but_empty_container_is_empty(self) -> None:
        null: object = POINTER(c_int)()
        self.assertIsNotNone(null)
        self.assertCondition(expect_nil(null))
        self.assertFalse(expect_not_nil(null).result)

        empty: list[int] = []
        self.assertFalse(expect_nil(empty).result)
        self.assertCondition(expect_empty(empty))

    def test_nil_messages(self) -> None:
        self.assertEqual('expect a nil value, but got 1',
                         expect_nil(1).false_message)
        self.assertEqual('expect a non-nil value, but got None',
                         expect_not_nil(None).false_message)

    def test_empty(self) -> None:
        self.assertCondition(expect_empty(''))
        self.assertCondition(expect_empty(b''))
        self.assertCondition(expect_empty([]))
        self.assertCondition(expect_empty([1, 2, 3][0:0]))
        self.assertCondition(expect_empty(()))
        self.assertCondition(expect_empty({}))
        self.assertCondition(expect_empty(set()))
        self.assertCondition(expect_empty(Queue()))

    def test_not_empty(self) -> None:
        self.assertCondition(expect_not_empty('a'))
        self.assertCondition(expect_not_empty([1]))
        self.assertCondition(expect_not_empty((1,)))
        self.assertCondition(expect_not_empty({1: 1}))
        queue: Queue[int] = Queue()
        queue.put(1)
        self.assertCondition(expect_not_empty(queue))

    def test_empty_messages(self) -> None:
        self.assertEqual('expect an empty slice, but got [1]',
                         expect_empty([1]).false_message)
        self.assertEqual("expect a non-empty string, but got ''",
                         expect_not_empty('').false_message)

    def test_empty_invalid(self) -> None:
        for value in (1, None, object(), 1.5):
            with self.subTest(value=value):
                with self.assertRaises(ContractViolation):
                    expect_empty(value)

    def test_kind_is(self) -> None:
        tests = [(1, Kind.INT),
                 ('foo', Kind.STRING),
                 (1.1, Kind.FLOAT),
                 (True, Kind.BOOL),
                 ((1,), Kind.ARRAY)]
        for value, kind in tests:
            with self.subTest(value=value):
                self.assertCondition(expect_kind_is(value, kind))
                self.assertCondition(expect_kind_is(value, Kind.MAP, kind))
                self.assertCondition(expect_kind_is_not(value, Kind.MAP))

    def test_kind_is_no_kinds(self) -> None:
        self.assertFalse(expect_kind_is(1).result)
        self.assertCondition(expect_kind_is_not(1))

    def test_kind_is_messages(self) -> None:
        self.assertEqual('expect a value of kind in [string, map], but got int',
                         expect_kind_is(1, Kind.STRING, Kind.MAP).false_message)

    def test_same_type(self) -> None:
        self.assertCondition(expect_same_type(1))
        self.assertCondition(expect_same_type(1, 2))
        self.assertCondition(expect_same_type(1, 2, 3, 4, 5))
        self.assertCondition(expect_same_type(Queue(), Queue()))

    def test_not_same_type(self) -> None:
        self.assertCondition(expect_not_same_type(1, 'a'))
        self.assertCondition(expect_not_same_type(1, True))
        self.assertCondition(expect_not_same_type('a', 1))
        self.assertCondition(expect_not_same_type(1, 2, 3, 'a'))
        self.assertCondition(expect_not_same_type([1], (1,)))

    def test_same_type_messages(self) -> None:
        self.assertEqual('expect values to be the same type, but got '
                         '[int, str]',
                         expect_same_type(1, 'a', 2, 'b').false_message)
        self.assertEqual('expect values not to be the same type, but got only '
                         'int',
                         expect_not_same_type(1, 2).false_message)

    def test_same_type_requires_values(self) -> None:
        with self.assertRaises(ContractViolation):
            expect_same_type()

    def test_error_is(self) -> None:
        error = ValueError('foo')
        self.assertCondition(expect_error_is(error, ValueError))
        self.assertCondition(expect_error_is(error, KeyError, ValueError))
        self.assertCondition(expect_error_is(error, error))
        self.assertCondition(expect_error_is(error, Exception))
        self.assertCondition(expect_error_is_not(error, AssertionFailed))
        self.assertCondition(expect_error_is_not(error, ValueError('foo')))

    def test_error_is_wrapped(self) -> None:
        cause = KeyError('foo')
        try:
            try:
                raise cause
            except KeyError as err:
                raise RuntimeError('wrapped') from err
        except RuntimeError as err:
            error = err
        self.assertCondition(expect_error_is(error, KeyError))
        self.assertCondition(expect_error_is(error, cause))
        self.assertCondition(expect_error_is(error, RuntimeError))

    def test_error_is_nil(self) -> None:
        self.assertFalse(expect_error_is(None).result)
        self.assertFalse(expect_error_is(None, ValueError).result)
        self.assertCondition(expect_error_is(None, None))
        self.assertFalse(expect_error_is(ValueError(), None).result)

    def test_error_is_requires_error(self) -> None:
        for value in ('boom', 1, [ValueError()], ValueError):
            with self.subTest(value=value):
                with self.assertRaises(ContractViolation):
                    expect_error_is(value, ValueError)
                with self.assertRaises(ContractViolation):
                    expect_error_is_not(value, ValueError)

    def test_error_is_messages(self) -> None:
        self.assertEqual("expect an error in [KeyError], but got "
                         "ValueError('foo')",
                         expect_error_is(ValueError('foo'),
                                         KeyError).false_message)

    def test_true(self) -> None:
        self.assertCondition(expect_true(True))
        self.assertCondition(expect_false(False))
        self.assertFalse(expect_true(False).result)
        self.assertFalse(expect_false(True).result)
        self.assertEqual('expect true, but got False',
                         expect_true(False).false_message)
        self.assertEqual('expect false, but got True',
                         expect_false(True).false_message)


class ExpectRaisesTest(TestCase):

    def test_raises_value(self) -> None:
        def raise_empty() -> None:
            raise ValueError('')
        self.assertTrue(expect_raises('', raise_empty).result)
        self.assertFalse(expect_raises('foo', raise_empty).result)

    def test_raises_nothing(self) -> None:
        self.assertTrue(expect_raises(None, lambda: None).result)
        self.assertFalse(expect_raises(ValueError, lambda: None).result)
        self.assertFalse(expect_raises('', lambda: None).result)

    def test_raises_error_class(self) -> None:
        self.assertTrue(expect_raises(ZeroDivisionError, divmod, 1, 0).result)
        self.assertTrue(expect_raises(ArithmeticError, divmod, 1, 0).result)
        self.assertFalse(expect_raises(KeyError, divmod, 1, 0).result)

    def test_raises_wrapped_error(self) -> None:
        target = KeyError('foo')
        def wrapper() -> None:
            try:
                raise target
            except KeyError as err:
                raise RuntimeError('wrapped') from err
        self.assertTrue(expect_raises(target, wrapper).result)
        self.assertTrue(expect_raises(KeyError, wrapper).result)
        self.assertFalse(expect_raises(KeyError('foo'), wrapper).result)

    def test_raises_args(self) -> None:
        def raise_args() -> None:
            raise ValueError('foo', 1)
        self.assertTrue(expect_raises(('foo', 1), raise_args).result)

    def test_raises_captures_everything(self) -> None:
        def interrupt() -> None:
            raise KeyboardInterrupt()
        self.assertTrue(expect_raises(KeyboardInterrupt, interrupt).result)
        self.assertFalse(expect_raises(None, interrupt).result)

    def test_raises_contract_violation(self) -> None:
        self.assertTrue(expect_raises(AssertionFailed,
                                      expect_contains, 1, 2).result)
        self.assertTrue(expect_raises(ContractViolation,
                                      expect_empty, 1).result)

    def test_raises_messages(self) -> None:
        def raise_foo() -> None:
            raise ValueError('foo')
        self.assertEqual("expect no exception, but got ValueError('foo')",
                         expect_raises(None, raise_foo).false_message)
        self.assertEqual('expect an exception of KeyError, but got None',
                         expect_raises(KeyError, lambda: None).false_message)
        self.assertEqual("expect no exception of ValueError, but got "
                         "ValueError('foo')",
                         expect_raises(ValueError, raise_foo)
                             .revert().false_message)

    @asynctest
    async def test_raises_async(self) -> None:
        async def raise_foo() -> None:
            raise ValueError('foo')
        async def nothing() -> None: ...

        self.assertTrue((await expect_raises_async(ValueError,
                                                   raise_foo)).result)
        self.assertTrue((await expect_raises_async('foo', raise_foo)).result)
        self.assertTrue((await expect_raises_async(None, nothing)).result)
        self.assertFalse((await expect_raises_async(None, raise_foo)).result)

    @asynctest
    async def test_raises_async_does_not_catch_cancellation(self) -> None:
        task = create_task(expect_raises_async(None, sleep, 10))
        await sleep(0)
        task.cancel()
        with self.assertRaises(CancelledError):
            await task
        self.assertTrue(task.cancelled())

    @asynctest
    async def test_raises_async_catches_cancelled_error_from_func(self) -> None:
        async def cancelled() -> None:
            raise CancelledError()

        condition = await expect_raises_async(None, cancelled)
        self.assertFalse(condition.result)
        self.assertEqual('expect no exception, but got CancelledError()',
                         condition.false_message)
        self.assertTrue(
            (await expect_raises_async(CancelledError, cancelled)).result)


if __name__ == "__main__":
    main()
