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

"""Package defining Arbitrary, the type that knows how to generate and shrink
the values qcheck tests properties against."""

from qcheck.arbitraries.base import Arbitrary, MappedArbitrary, \
    JustArbitrary, FromRandomArbitrary
from qcheck.arbitraries.numbers import BoolArbitrary, IntArbitrary, \
    BoundedIntArbitrary, FloatArbitrary, SmallNArbitrary
from qcheck.arbitraries.strings import CharArbitrary, StringArbitrary, \
    BytesArbitrary, UnicodeArbitrary
from qcheck.arbitraries.collections import TupleArbitrary, ListArbitrary, \
    DictArbitrary, OptionalArbitrary, ResultArbitrary, BoxArbitrary

__all__ = [
    'Arbitrary',
    'MappedArbitrary',
    'JustArbitrary',
    'FromRandomArbitrary',
    'BoolArbitrary',
    'IntArbitrary',
    'BoundedIntArbitrary',
    'FloatArbitrary',
    'SmallNArbitrary',
    'CharArbitrary',
    'StringArbitrary',
    'BytesArbitrary',
    'UnicodeArbitrary',
    'TupleArbitrary',
    'ListArbitrary',
    'DictArbitrary',
    'OptionalArbitrary',
    'ResultArbitrary',
    'BoxArbitrary',
]
