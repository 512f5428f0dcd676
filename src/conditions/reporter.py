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
Reporters record soft failures from Condition.test(). Unlike assert_() a
soft failure doesn't stop the test, so several checks can fail in one run.
'''
from logging import getLogger
from typing import Protocol, runtime_checkable
from unittest import TestCase


__all__ = ['Reporter', 'Recorder', 'SoftFailures']


logger = getLogger('conditions.reporter')


@runtime_checkable
class Reporter(Protocol):
    '''Anything that can mark the current test as failed.'''

    def fail(self) -> None:
        '''mark the current test as failed, without raising'''


class Recorder:
    '''A Reporter that counts how many times it was failed.'''

    failures: int

    def __init__(self) -> None:
        self.failures = 0

    @property
    def failed(self) -> bool:
        return self.failures > 0

    def fail(self) -> None:
        self.failures += 1

    def __str__(self) -> str:
        return f'{type(self).__name__}(failures={self.failures})'


class SoftFailures(Recorder):
    '''
    A Reporter for unittest. TestCase.fail() raises, which is exactly what a
    soft failure must not do, so this records the failures and registers a
    cleanup with the test case that fails it once the test body is done.

    class FooTest(TestCase):
        def test_foo(self) -> None:
            soft = SoftFailures(self)
            expect_equal(1, foo()).test(soft)
            expect_equal(2, bar()).test(soft)  # runs even if foo() failed
    '''

    def __init__(self, test_case: TestCase) -> None:
        super().__init__()
        self.test_case = test_case
        test_case.addCleanup(self.verify)

    def verify(self) -> None:
        '''fail the test case if any soft failures were recorded'''
        if self.failed:
            logger.debug('%s recorded %d soft failures',
                         self.test_case.id(), self.failures)
            self.test_case.fail(f'{self.failures} condition(s) failed, '
                                'see the log for details')
