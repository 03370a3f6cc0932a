# This file is part of qcheck, a property based testing library.
#
# Copyright (C) 2026 the qcheck authors. See the git log if you need to
# determine who owns an individual contribution.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at http://mozilla.org/MPL/2.0/.
#
# END HEADER

import sys
import traceback
import contextlib
from io import StringIO

from qcheck.reporting import default, with_reporter
from qcheck.internal.reflection import impersonate


@contextlib.contextmanager
def capture_out():
    old_out = sys.stdout
    try:
        new_out = StringIO()
        sys.stdout = new_out
        with with_reporter(default):
            yield new_out
    finally:
        sys.stdout = old_out


class ExcInfo:
    pass


@contextlib.contextmanager
def raises(exctype):
    e = ExcInfo()
    try:
        yield e
    except exctype as err:
        traceback.print_exc()
        e.value = err
    else:
        raise AssertionError("Expected to raise an exception but didn't")


def fails_with(e):
    def accepts(f):
        @impersonate(f)
        def inverted_test(*arguments, **kwargs):
            with raises(e):
                f(*arguments, **kwargs)
        return inverted_test
    return accepts


fails = fails_with(AssertionError)


def all_shrinks(arbitrary, value):
    return list(arbitrary.shrink(value))
