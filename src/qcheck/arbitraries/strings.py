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

import string

from qcheck.lazy import Lazy
from qcheck.types import Unicode
from qcheck.arbitraries.base import Arbitrary, MappedArbitrary
import qcheck.internal.distributions as dist


class CharArbitrary(Arbitrary):

    """Single character strings drawn from the ASCII alphanumerics and a
    little whitespace."""

    has_immutable_data = True
    alphabet = '0123456789' + string.ascii_letters + ' \t\n'

    def generate(self, random, size):
        return random.choice(self.alphabet)

    def shrink(self, value):
        return Lazy(self.__shrinks(value))

    def __shrinks(self, c):
        simplest = self.alphabet[0]
        if c == simplest:
            return
        yield simplest
        lower = c.lower()
        if len(lower) == 1 and lower not in (c, simplest):
            yield lower


class StringArbitrary(MappedArbitrary):

    """Text, generated and shrunk as the list of its characters."""

    has_immutable_data = True

    def pack(self, chars):
        return ''.join(chars)

    def unpack(self, s):
        return list(s)


class BytesArbitrary(MappedArbitrary):

    """Byte strings, generated and shrunk as a list of integers in
    [0, 255]."""

    has_immutable_data = True

    def pack(self, xs):
        return bytes(xs)

    def unpack(self, b):
        return list(b)


WORDS = (
    'a b c 0 $ ⇌ [ˈʏpsilɔn] \\ " ‚dsch‘ „füh“ ‡ € ⁿ ２ � 🈘 '
    'ἀπὸ состоится ทรงนับถือขันทีเป็นที่พึ่ง Hello world '
    'Καλημέρα κόσμε コンニチハ'
).split() + [' ', ' ', '\n']


class UnicodeArbitrary(Arbitrary):

    """Text assembled from words in a variety of scripts.

    Shrinking treats the text as a list of characters, so the
    characters of a shrunk value need not come from the words.

    """

    has_immutable_data = True

    def __init__(self, chars):
        self.chars = chars

    def generate(self, random, size):
        target = dist.small_n(random, size)
        result = ''
        while len(result) < target:
            result += random.choice(WORDS)
        return Unicode(result)

    def shrink(self, value):
        return Lazy(self.chars.shrink(list(value))).map(
            lambda cs: Unicode(''.join(cs)))
