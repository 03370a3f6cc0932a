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

from qcheck.errors import InvalidArgument


def check_type(typ, arg, name=''):
    if name:
        name += '='
    if not isinstance(arg, typ):
        if isinstance(typ, type):
            typ_string = typ.__name__
        else:
            typ_string = 'one of %s' % (
                ', '.join(t.__name__ for t in typ))
        raise InvalidArgument('Expected %s but got %s%r (type=%s)'
                              % (typ_string, name, arg, type(arg).__name__))


def check_valid_count(value, name):
    """Checks that value is a non-negative integer, which is what every count
    and size qcheck accepts must be.

    Otherwise raises InvalidArgument.

    """
    if isinstance(value, bool):
        raise InvalidArgument(
            'Expected an integer but got %s=%r' % (name, value))
    check_type(int, value, name)
    if value < 0:
        raise InvalidArgument(
            'Invalid %s=%r. Must be non-negative' % (name, value))


def check_valid_range(start, end):
    check_type(int, start, 'start')
    check_type(int, end, 'end')
    if start > end:
        raise InvalidArgument('Invalid range [%d, %d]' % (start, end))
