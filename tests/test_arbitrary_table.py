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

import pytest

import qcheck.arbitraries as arb
from qcheck import SmallN, Unicode, NonEmpty, just, boxed, optional, \
    results, from_random, dictionaries, integers_in_range, u8
from qcheck.errors import MissingArbitrary, InvalidArgument
from qcheck.arbitrarytable import ArbitraryTable, arbitrary_for, \
    arbitrary_for_instances


def table():
    return ArbitraryTable.default()


@pytest.mark.parametrize(('descriptor', 'kind'), [
    (bool, arb.BoolArbitrary),
    (int, arb.IntArbitrary),
    (float, arb.FloatArbitrary),
    (SmallN, arb.SmallNArbitrary),
    (str, arb.StringArbitrary),
    (bytes, arb.BytesArbitrary),
    (Unicode, arb.UnicodeArbitrary),
    (None, arb.JustArbitrary),
    (just(3), arb.JustArbitrary),
    (from_random(), arb.FromRandomArbitrary),
    (u8, arb.BoundedIntArbitrary),
    ((int, bool), arb.TupleArbitrary),
    ((), arb.TupleArbitrary),
    ([int], arb.ListArbitrary),
    (NonEmpty([int]), arb.ListArbitrary),
    (optional(int), arb.OptionalArbitrary),
    (results(int, str), arb.ResultArbitrary),
    (dictionaries(int, str), arb.DictArbitrary),
    (boxed(int), arb.BoxArbitrary),
])
def test_built_in_descriptors(descriptor, kind):
    assert isinstance(table().arbitrary(descriptor), kind)


def test_arbitrary_is_its_own_descriptor():
    a = arb.IntArbitrary()
    assert table().arbitrary(a) is a


def test_bounded_int_remembers_its_bounds():
    a = table().arbitrary(integers_in_range(3, 7))
    assert (a.start, a.end) == (3, 7)


def test_unknown_descriptor_is_missing():
    class Unknown:
        pass

    with pytest.raises(MissingArbitrary):
        table().arbitrary(Unknown)


def test_subclass_descriptors_are_not_handled_by_their_parent():
    class MyList(list):
        pass

    with pytest.raises(MissingArbitrary):
        table().arbitrary(MyList([int]))


def test_missing_arbitrary_is_an_invalid_argument():
    with pytest.raises(InvalidArgument):
        table().arbitrary(object())


def test_list_descriptor_needs_exactly_one_element():
    with pytest.raises(InvalidArgument):
        table().arbitrary([int, str])
    with pytest.raises(InvalidArgument):
        table().arbitrary([])


def test_nested_missing_descriptor_is_reported():
    with pytest.raises(MissingArbitrary):
        table().arbitrary([(int, complex)])


class Temperature:
    def __init__(self, degrees):
        self.degrees = degrees


class TemperatureArbitrary(arb.MappedArbitrary):
    def pack(self, x):
        return Temperature(x)

    def unpack(self, t):
        return t.degrees


def test_can_register_with_decorator():
    @arbitrary_for(Temperature)
    def define_temperature(table, descriptor):
        return TemperatureArbitrary(table.arbitrary(int))

    assert isinstance(table().arbitrary(Temperature), TemperatureArbitrary)


def test_can_register_an_arbitrary_instance():
    instance = TemperatureArbitrary(arb.IntArbitrary())
    arbitrary_for(Temperature)(instance)
    assert table().arbitrary(Temperature) is instance


def test_can_register_for_instances():
    @arbitrary_for_instances(Temperature)
    def define_temperature(table, descriptor):
        return arb.JustArbitrary(descriptor.degrees)

    assert table().arbitrary(Temperature(10)).value == 10


def test_latest_registration_wins():
    arbitrary_for(Temperature)(arb.JustArbitrary(1))
    arbitrary_for(Temperature)(arb.JustArbitrary(2))
    assert table().arbitrary(Temperature).value == 2


def test_child_table_registrations_are_local():
    child = table().new_child_table()
    child.define_arbitrary_for(Temperature, arb.JustArbitrary(1))
    assert child.arbitrary(Temperature).value == 1
    assert isinstance(child.arbitrary(int), arb.IntArbitrary)
    with pytest.raises(MissingArbitrary):
        table().arbitrary(Temperature)


def test_child_table_can_override_built_ins():
    child = table().new_child_table()
    child.define_arbitrary_for(int, arb.JustArbitrary(0))
    assert isinstance(child.arbitrary([int]).element_arbitrary,
                      arb.JustArbitrary)
    assert isinstance(table().arbitrary(int), arb.IntArbitrary)
