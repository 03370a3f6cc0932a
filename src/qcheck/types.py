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

"""Wrapper types that change how the values they hold are generated."""

import attr

from qcheck.errors import InvalidArgument


class SmallN(int):
    """A non-negative integer that stays small no matter how large the size
    of the run gets."""

    def __new__(cls, value=0):
        result = int.__new__(cls, value)
        if result < 0:
            raise InvalidArgument('SmallN must be non-negative, got %d' % (
                result,))
        return result

    def __repr__(self):
        return 'SmallN(%d)' % (self,)


class Unicode(str):
    """Text drawn from words in many scripts instead of the ASCII
    alphabet."""

    def __repr__(self):
        return 'Unicode(%s)' % (str.__repr__(self),)


class NonEmpty(list):
    """A list with at least one element.

    As a descriptor, ``NonEmpty([d])`` means non-empty lists of ``d``.

    """

    def __init__(self, iterable=()):
        super().__init__(iterable)
        if not self:
            raise InvalidArgument('NonEmpty requires at least one element')

    def __repr__(self):
        return 'NonEmpty(%s)' % (list.__repr__(self),)


@attr.s(slots=True, frozen=True, repr=False)
class Ok:
    value = attr.ib()

    def __repr__(self):
        return 'Ok(%r)' % (self.value,)


@attr.s(slots=True, frozen=True, repr=False)
class Err:
    value = attr.ib()

    def __repr__(self):
        return 'Err(%r)' % (self.value,)


@attr.s(slots=True, repr=False)
class Box:
    """A mutable cell holding a single value."""
    value = attr.ib()

    def __repr__(self):
        return 'Box(%r)' % (self.value,)
