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

"""Descriptors for the types qcheck can't name with a plain Python value.

``int``, ``[int]`` and ``(int, bool)`` describe themselves. These cover
the rest: bounded integers, fixed values, optional values, results, maps,
boxes and raw draws from the random source.

"""

from collections import namedtuple

from qcheck.internal.validation import check_valid_range

Just = namedtuple('Just', 'value')
just = Just


IntegerRange = namedtuple('IntegerRange', ('start', 'end'))


def integers_in_range(start, end):
    check_valid_range(start, end)
    return IntegerRange(start, end)


u8 = integers_in_range(0, 2 ** 8 - 1)
u16 = integers_in_range(0, 2 ** 16 - 1)
u32 = integers_in_range(0, 2 ** 32 - 1)
u64 = integers_in_range(0, 2 ** 64 - 1)
i8 = integers_in_range(-2 ** 7, 2 ** 7 - 1)
i16 = integers_in_range(-2 ** 15, 2 ** 15 - 1)
i32 = integers_in_range(-2 ** 31, 2 ** 31 - 1)
i64 = integers_in_range(-2 ** 63, 2 ** 63 - 1)


Optional = namedtuple('Optional', 'element')


def optional(element):
    """Either None or a value described by element."""
    return Optional(element)


Results = namedtuple('Results', ('ok', 'err'))


def results(ok, err):
    """Either Ok(v) for v described by ok or Err(e) for e described by
    err."""
    return Results(ok, err)


Dictionaries = namedtuple('Dictionaries', ('keys', 'values'))


def dictionaries(keys, values):
    return Dictionaries(keys, values)


Boxed = namedtuple('Boxed', 'element')


def boxed(element):
    return Boxed(element)


FromRandom = namedtuple('FromRandom', 'draw')


def _uniform(random):
    return random.random()


def from_random(draw=_uniform):
    """Values that are whatever draw(random) returns.

    These are never shrunk.

    """
    return FromRandom(draw)
