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

"""The table mapping descriptors to the Arbitrary that handles them.

Built in types are registered on ArbitraryTable.default() when this module
is imported. Register your own with the arbitrary_for and
arbitrary_for_instances decorators, or on a child table if you only want
them visible in one place:

>>> table = ArbitraryTable.default().new_child_table()
>>> table.define_arbitrary_for(MyType, lambda table, descriptor: MyArb())

"""

import qcheck.descriptors as descriptors
import qcheck.arbitraries as arb
from qcheck.types import NonEmpty, SmallN, Unicode
from qcheck.errors import InvalidArgument
from qcheck.internal.specmapper import SpecificationMapper


def convert_arbitrary(fn):
    if isinstance(fn, arb.Arbitrary):
        return lambda table, descriptor: fn
    return fn


def arbitrary_for(value):
    """Register the decorated function as the handler for descriptors equal
    to value. The function is called with the table and the descriptor and
    returns an Arbitrary. You can also decorate an Arbitrary directly."""
    def accept_function(fn):
        ArbitraryTable.default().define_arbitrary_for(value, fn)
        return fn
    return accept_function


def arbitrary_for_instances(cls):
    """As arbitrary_for, but for every descriptor whose class is exactly
    cls."""
    def accept_function(fn):
        ArbitraryTable.default().define_arbitrary_for_instances(cls, fn)
        return fn
    return accept_function


class ArbitraryTable(SpecificationMapper):

    def define_arbitrary_for(self, value, arbitrary):
        self.define_specification_for(value, convert_arbitrary(arbitrary))

    def define_arbitrary_for_instances(self, cls, arbitrary):
        self.define_specification_for_instances(
            cls, convert_arbitrary(arbitrary))

    def new_child_table(self):
        return self.new_child_mapper()

    def arbitrary(self, descriptor):
        if isinstance(descriptor, arb.Arbitrary):
            return descriptor
        return self.specification_for(descriptor)


arbitrary_for(bool)(arb.BoolArbitrary())
arbitrary_for(int)(arb.IntArbitrary())
arbitrary_for(float)(arb.FloatArbitrary())
arbitrary_for(SmallN)(arb.SmallNArbitrary())
arbitrary_for(None)(arb.JustArbitrary(None))


@arbitrary_for(str)
def define_str_arbitrary(table, descriptor):
    return arb.StringArbitrary(arb.ListArbitrary(arb.CharArbitrary()))


@arbitrary_for(bytes)
def define_bytes_arbitrary(table, descriptor):
    return arb.BytesArbitrary(table.arbitrary([descriptors.u8]))


@arbitrary_for(Unicode)
def define_unicode_arbitrary(table, descriptor):
    return arb.UnicodeArbitrary(arb.ListArbitrary(arb.CharArbitrary()))


@arbitrary_for_instances(descriptors.IntegerRange)
def define_integer_range_arbitrary(table, descriptor):
    return arb.BoundedIntArbitrary(descriptor.start, descriptor.end)


@arbitrary_for_instances(descriptors.Just)
def define_just_arbitrary(table, descriptor):
    return arb.JustArbitrary(descriptor.value)


@arbitrary_for_instances(descriptors.FromRandom)
def define_from_random_arbitrary(table, descriptor):
    return arb.FromRandomArbitrary(descriptor.draw)


@arbitrary_for_instances(tuple)
def define_tuple_arbitrary(table, descriptor):
    return arb.TupleArbitrary(tuple(map(table.arbitrary, descriptor)))


def element_of(descriptor):
    if len(descriptor) != 1:
        raise InvalidArgument(
            'A list descriptor takes exactly one element descriptor but got '
            '%r' % (descriptor,))
    return descriptor[0]


@arbitrary_for_instances(list)
def define_list_arbitrary(table, descriptor):
    return arb.ListArbitrary(table.arbitrary(element_of(descriptor)))


@arbitrary_for_instances(NonEmpty)
def define_non_empty_arbitrary(table, descriptor):
    return arb.ListArbitrary(
        table.arbitrary(element_of(descriptor)),
        list_type=NonEmpty, min_size=1,
    )


@arbitrary_for_instances(descriptors.Optional)
def define_optional_arbitrary(table, descriptor):
    return arb.OptionalArbitrary(table.arbitrary(descriptor.element))


@arbitrary_for_instances(descriptors.Results)
def define_results_arbitrary(table, descriptor):
    return arb.ResultArbitrary(
        table.arbitrary(descriptor.ok), table.arbitrary(descriptor.err))


@arbitrary_for_instances(descriptors.Dictionaries)
def define_dictionaries_arbitrary(table, descriptor):
    return arb.DictArbitrary(
        table.arbitrary([(descriptor.keys, descriptor.values)]))


@arbitrary_for_instances(descriptors.Boxed)
def define_boxed_arbitrary(table, descriptor):
    return arb.BoxArbitrary(table.arbitrary(descriptor.element))
