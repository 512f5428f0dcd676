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
Conditions are checks that are values rather than branches. Evaluate a check
with an expect_* function and decide what to do about it afterwards:

    expect_equal(response.status, 200).assert_()
    expect_contains('id', body).test(reporter)
    expect_empty(errors).on_false(lambda: log_errors(errors))

A false condition that is asserted raises AssertionFailed. Passing operands
a check can't be evaluated for, like expect_readable(42), is a bug in the
caller and raises ContractViolation (an AssertionFailed) immediately.

The assert_* functions are shorthand for expect_*(...).assert_().
'''

from . import asserts
from . import channel
from . import condition
from . import error
from . import expect
from . import kind
from . import reporter
from .asserts import *
from .channel import *
from .condition import *
from .error import *
from .expect import *
from .kind import *
from .reporter import *


__all__ = (
           asserts.__all__ +
           channel.__all__ +
           condition.__all__ +
           error.__all__ +
           expect.__all__ +
           kind.__all__ +
           reporter.__all__ +
          [])
