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

from copy import deepcopy

from qcheck.lazy import Lazy
from qcheck.internal.reflection import get_pretty_function_description


class Arbitrary:

    """An Arbitrary is an object that knows how to produce random values of
    some type and how to find simpler versions of a value it was given.

    Subclasses must implement generate. The default shrink offers nothing,
    which is always a correct if unhelpful answer.

    """

    # A subclass should set this if its values can never be mutated, so they
    # are safe to hand to a property without copying them first.
    has_immutable_data = False

    def __repr__(self):
        return '%s()' % (self.__class__.__name__,)

    def generate(self, random, size):
        """Given a random number generator and a non-negative size, produce a
        value.

        The size scales the distribution: larger sizes should tend to
        produce larger values, but it is not a bound. Implementations must
        succeed for every size including 0.

        """
        raise NotImplementedError('%s.generate()' % (
            self.__class__.__name__,))

    def shrink(self, value):
        """Return a Lazy of values that are in some sense simpler than value.

        This must never include value itself, and repeatedly shrinking
        must eventually run out of candidates. Candidates that are more
        likely to be interesting should come first.

        """
        return Lazy.empty()

    def copy(self, value):
        """Return a version of value such that if it is mutated this will not
        be reflected in value. If value is immutable it is perfectly acceptable
        to just return value itself."""
        if self.has_immutable_data:
            return value
        else:
            return deepcopy(value)


class MappedArbitrary(Arbitrary):

    """An Arbitrary which is defined purely by conversion to and from another
    Arbitrary.

    Either subclass it and define pack and unpack, or pass them in.

    """

    def __init__(self, mapped_arbitrary, pack=None, unpack=None):
        self.mapped_arbitrary = mapped_arbitrary
        if pack is not None:
            self.pack = pack
        if unpack is not None:
            self.unpack = unpack

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self.mapped_arbitrary)

    def pack(self, x):
        """Take a value produced by the underlying mapped_arbitrary and turn it
        into a value suitable for outputting from this one."""
        raise NotImplementedError('%s.pack()' % (self.__class__.__name__,))

    def unpack(self, x):
        """Take a value produced from pack and convert it back to a value that
        could have been produced by the underlying arbitrary."""
        raise NotImplementedError('%s.unpack()' % (self.__class__.__name__,))

    def generate(self, random, size):
        return self.pack(self.mapped_arbitrary.generate(random, size))

    def shrink(self, value):
        return Lazy(
            self.mapped_arbitrary.shrink(self.unpack(value))
        ).map(self.pack)


class JustArbitrary(Arbitrary):

    """An Arbitrary which always returns a single fixed value."""

    def __init__(self, value):
        self.value = value
        try:
            hash(value)
            self.has_immutable_data = True
        except TypeError:
            pass

    def __repr__(self):
        return 'just(%r)' % (self.value,)

    def generate(self, random, size):
        return self.value


class FromRandomArbitrary(Arbitrary):

    """Values are whatever draw returns when called with the random source.

    qcheck has no idea how to simplify these so they are never shrunk.

    """

    def __init__(self, draw):
        self.draw = draw

    def __repr__(self):
        return 'from_random(%s)' % (
            get_pretty_function_description(self.draw),)

    def generate(self, random, size):
        return self.draw(random)
