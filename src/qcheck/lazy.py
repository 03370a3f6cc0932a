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

"""Lazy sequences of values, which is how shrink candidates are described.

A Lazy wraps an iterator. Nothing is computed until a consumer pulls from
it, and a Lazy may be infinite. Like any iterator it can only be traversed
once: if you want to go over the candidates again, ask for them again.

"""

from itertools import chain, islice


class Lazy:

    def __init__(self, iterable=()):
        self.__iterator = iter(iterable)

    @classmethod
    def empty(cls):
        return cls()

    @classmethod
    def singleton(cls, value):
        return cls((value,))

    @classmethod
    def defer(cls, thunk):
        """A sequence whose contents come from calling thunk, which is not
        called until the first element is pulled."""
        def run():
            yield from thunk()
        return cls(run())

    def __iter__(self):
        return self

    def __next__(self):
        return next(self.__iterator)

    def __repr__(self):
        return 'Lazy(...)'

    def map(self, f):
        return Lazy(f(v) for v in self)

    def filter(self, predicate):
        return Lazy(v for v in self if predicate(v))

    def concat(self, other):
        if isinstance(other, Lazy) or not callable(other):
            return Lazy(chain(self, other))
        return Lazy(chain(self, Lazy.defer(other)))

    def take(self, n):
        return Lazy(islice(self, n))
