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

"""qcheck is a library for property based testing.

You describe the values a property should hold for, and qcheck generates
random ones, checks the property against them and, when one fails, shrinks
it to a simpler value that still does.

"""

from qcheck.core import quick_check, for_all, quick_check_occurs, \
    quick_shrink, arbitrary, Checker
from qcheck.lazy import Lazy
from qcheck.types import SmallN, Unicode, NonEmpty, Ok, Err, Box
from qcheck.config import Config, default_config
from qcheck.errors import QCheckException, Falsified, NoSuchExample, \
    InvalidArgument, MissingArbitrary
from qcheck.version import __version_info__, __version__
from qcheck.reporting import report, with_reporter
from qcheck.descriptors import just, integers_in_range, optional, results, \
    dictionaries, boxed, from_random, u8, u16, u32, u64, i8, i16, i32, i64
from qcheck.arbitraries import Arbitrary, MappedArbitrary
from qcheck.arbitrarytable import ArbitraryTable, arbitrary_for, \
    arbitrary_for_instances

__all__ = [
    'quick_check',
    'for_all',
    'quick_check_occurs',
    'quick_shrink',
    'arbitrary',
    'Checker',
    'Lazy',
    'SmallN',
    'Unicode',
    'NonEmpty',
    'Ok',
    'Err',
    'Box',
    'Config',
    'default_config',
    'QCheckException',
    'Falsified',
    'NoSuchExample',
    'InvalidArgument',
    'MissingArbitrary',
    'report',
    'with_reporter',
    'just',
    'integers_in_range',
    'optional',
    'results',
    'dictionaries',
    'boxed',
    'from_random',
    'u8',
    'u16',
    'u32',
    'u64',
    'i8',
    'i16',
    'i32',
    'i64',
    'Arbitrary',
    'MappedArbitrary',
    'ArbitraryTable',
    'arbitrary_for',
    'arbitrary_for_instances',
    '__version__',
    '__version_info__',
]
