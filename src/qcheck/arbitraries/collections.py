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

from itertools import chain

from qcheck.lazy import Lazy
from qcheck.types import Ok, Err, Box
from qcheck.arbitraries.base import Arbitrary
import qcheck.internal.distributions as dist


class TupleArbitrary(Arbitrary):

    """Fixed length tuples based on heterogenous arbitraries for each of their
    elements."""

    def __init__(self, element_arbitraries, tuple_type=tuple):
        self.element_arbitraries = tuple(element_arbitraries)
        self.tuple_type = tuple_type
        self.has_immutable_data = all(
            e.has_immutable_data for e in self.element_arbitraries)

    def __repr__(self):
        return 'TupleArbitrary(%r)' % (self.element_arbitraries,)

    def newtuple(self, xs):
        """Produce a new tuple of the correct type."""
        if self.tuple_type == tuple:
            return tuple(xs)
        else:
            return self.tuple_type(*xs)

    def generate(self, random, size):
        return self.newtuple(
            e.generate(random, size) for e in self.element_arbitraries
        )

    def copy(self, value):
        if self.has_immutable_data:
            return value
        return self.newtuple(
            e.copy(v) for e, v in zip(self.element_arbitraries, value)
        )

    def shrink(self, x):
        """We don't change the length of the tuple, we only shrink one
        element at a time, working left to right."""
        def shrink_single(i):
            for s in self.element_arbitraries[i].shrink(x[i]):
                z = list(x)
                z[i] = s
                yield self.newtuple(z)

        return Lazy(chain.from_iterable(
            shrink_single(i) for i in range(len(x))
        ))


class ListArbitrary(Arbitrary):

    """Lists of values from a single element arbitrary, with lengths drawn
    from dist.small_n.

    min_size is how short the list may be. It is 0 for plain lists and 1
    for NonEmpty ones, and shrinking respects it.

    """

    def __init__(self, element_arbitrary, list_type=list, min_size=0):
        self.element_arbitrary = element_arbitrary
        self.list_type = list_type
        self.min_size = min_size

    def __repr__(self):
        return 'ListArbitrary(%r, min_size=%d)' % (
            self.element_arbitrary, self.min_size)

    def generate(self, random, size):
        length = self.min_size + dist.small_n(random, size)
        return self.list_type(
            self.element_arbitrary.generate(random, size)
            for _ in range(length)
        )

    def copy(self, value):
        return self.list_type(map(self.element_arbitrary.copy, value))

    def shrink(self, x):
        return Lazy(self.__shrinks(list(x))).map(self.list_type)

    def __shrinks(self, x):
        n = len(x)
        shortest = max(1, self.min_size)

        if self.min_size == 0 and n > 0:
            yield []

        for length in range(shortest, n):
            yield x[:length]

        if n > 2:
            yield x[n // 2:]

        if n - 1 >= shortest:
            for i in range(n - 1):
                yield x[:i] + x[i + 1:]

        for i in range(n):
            for s in self.element_arbitrary.shrink(x[i]):
                z = list(x)
                z[i] = s
                yield z


class DictArbitrary(Arbitrary):

    """Dicts built from a list of generated key value pairs. Later pairs win
    when keys collide, so these are often shorter than the list was.

    These are never shrunk.

    """

    def __init__(self, pairs):
        self.pairs = pairs

    def __repr__(self):
        return 'DictArbitrary(%r)' % (self.pairs,)

    def generate(self, random, size):
        return dict(self.pairs.generate(random, size))


class OptionalArbitrary(Arbitrary):

    """Either None or a value of the element arbitrary. None becomes rarer
    as the size grows and is certain at size 0."""

    def __init__(self, element_arbitrary):
        self.element_arbitrary = element_arbitrary
        self.has_immutable_data = element_arbitrary.has_immutable_data

    def __repr__(self):
        return 'optional(%r)' % (self.element_arbitrary,)

    def generate(self, random, size):
        if dist.biased_coin(random, 2.0 / (size + 2)):
            return None
        return self.element_arbitrary.generate(random, size)

    def copy(self, value):
        if value is None:
            return None
        return self.element_arbitrary.copy(value)

    def shrink(self, value):
        if value is None:
            return Lazy.empty()
        return Lazy.singleton(None).concat(
            lambda: self.element_arbitrary.shrink(value))


class ResultArbitrary(Arbitrary):

    def __init__(self, ok_arbitrary, err_arbitrary):
        self.ok_arbitrary = ok_arbitrary
        self.err_arbitrary = err_arbitrary
        self.has_immutable_data = (
            ok_arbitrary.has_immutable_data and
            err_arbitrary.has_immutable_data
        )

    def __repr__(self):
        return 'results(%r, %r)' % (self.ok_arbitrary, self.err_arbitrary)

    def __branch(self, value):
        if isinstance(value, Ok):
            return Ok, self.ok_arbitrary
        return Err, self.err_arbitrary

    def generate(self, random, size):
        if dist.biased_coin(random, 0.5):
            return Ok(self.ok_arbitrary.generate(random, size))
        return Err(self.err_arbitrary.generate(random, size))

    def copy(self, value):
        tag, arbitrary = self.__branch(value)
        return tag(arbitrary.copy(value.value))

    def shrink(self, value):
        tag, arbitrary = self.__branch(value)
        return Lazy(arbitrary.shrink(value.value)).map(tag)


class BoxArbitrary(Arbitrary):

    def __init__(self, element_arbitrary):
        self.element_arbitrary = element_arbitrary

    def __repr__(self):
        return 'boxed(%r)' % (self.element_arbitrary,)

    def generate(self, random, size):
        return Box(self.element_arbitrary.generate(random, size))

    def copy(self, value):
        return Box(self.element_arbitrary.copy(value.value))

    def shrink(self, value):
        return Lazy(self.element_arbitrary.shrink(value.value)).map(Box)
