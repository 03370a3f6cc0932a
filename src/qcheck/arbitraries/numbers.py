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
import math

from qcheck.lazy import Lazy
from qcheck.types import SmallN
from qcheck.arbitraries.base import Arbitrary
import qcheck.internal.distributions as dist


def natural_shrinks(n):
    """Candidates simpler than the natural number n, smallest first.

    These are 0, n // 2, and then n minus ever smaller powers of two
    fractions of n, finishing with n - 1. Each candidate appears once and n
    never does.

    """
    if n <= 0:
        return
    seen = set()

    def fresh(c):
        if c in seen:
            return False
        seen.add(c)
        return True

    for c in (0, n // 2):
        if fresh(c):
            yield c
    div = 4
    while n // div > 0:
        c = n - n // div
        if fresh(c):
            yield c
        div *= 2
    if fresh(n - 1):
        yield n - 1


def integer_shrinks(n):
    if n < 0:
        yield 0
        yield -n
        for c in natural_shrinks(-n):
            if c:
                yield -c
    else:
        yield from natural_shrinks(n)


class BoolArbitrary(Arbitrary):
    has_immutable_data = True

    def generate(self, random, size):
        return bool(random.getrandbits(1))

    def shrink(self, value):
        if value:
            return Lazy.singleton(False)
        return Lazy.empty()


class IntArbitrary(Arbitrary):

    """Integers whose magnitude has a uniformly chosen number of bits up to
    the size and whose sign is a fair coin."""

    has_immutable_data = True

    def generate(self, random, size):
        value = dist.scaled_magnitude(random, size)
        if dist.biased_coin(random, 0.5):
            value = -value
        return value

    def shrink(self, value):
        return Lazy(integer_shrinks(value))


class BoundedIntArbitrary(Arbitrary):

    """Integers in the closed interval [start, end].

    Values are distributed around the point of the interval closest to zero
    just as unbounded ints are distributed around zero, and that is also
    where they shrink to.

    """

    has_immutable_data = True

    def __init__(self, start, end):
        self.start = start
        self.end = end
        self.origin = min(max(0, start), end)

    def __repr__(self):
        return 'BoundedIntArbitrary(%d, %d)' % (self.start, self.end)

    def generate(self, random, size):
        value = dist.scaled_magnitude(random, size)
        if self.origin == self.end or (
            self.origin != self.start and dist.biased_coin(random, 0.5)
        ):
            value = -value
        value += self.origin
        if not (self.start <= value <= self.end):
            value = random.randint(self.start, self.end)
        return value

    def shrink(self, value):
        origin = self.origin
        return Lazy(
            integer_shrinks(value - origin)
        ).map(
            lambda c: origin + c
        ).filter(
            lambda c: self.start <= c <= self.end
        )


class FloatArbitrary(Arbitrary):

    """Floats spread uniformly over [-size, size], with an occasional exact
    integer thrown in."""

    has_immutable_data = True

    def generate(self, random, size):
        if dist.biased_coin(random, 0.1):
            return float(random.randint(-size, size))
        return random.uniform(-1.0, 1.0) * size

    def shrink(self, value):
        return Lazy(self.__shrinks(value))

    def __shrinks(self, x):
        if math.isnan(x):
            yield 0.0
            return
        if math.isinf(x):
            yield 0.0
            yield math.copysign(sys.float_info.max, x)
            return
        if x == 0:
            return
        seen = {x}

        def fresh(c):
            if c in seen:
                return False
            seen.add(c)
            return True

        if fresh(0.0):
            yield 0.0
        if x < 0 and fresh(-x):
            yield -x
        truncated = float(int(x))
        if fresh(truncated):
            yield truncated
        if x == truncated:
            for c in integer_shrinks(int(x)):
                c = float(c)
                if fresh(c):
                    yield c


class SmallNArbitrary(Arbitrary):

    """Small natural numbers. Unlike every other number these ignore the size
    of the run."""

    has_immutable_data = True
    scale = 8

    def generate(self, random, size):
        return SmallN(dist.small_n(random, self.scale))

    def shrink(self, value):
        return Lazy(natural_shrinks(int(value))).map(SmallN)
