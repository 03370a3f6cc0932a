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

from collections import namedtuple

import pytest

from qcheck import SmallN, NonEmpty, Ok, Err, Box, u8, arbitrary, \
    quick_shrink, optional, results, boxed, dictionaries, just
from qcheck.arbitraries import BoolArbitrary, IntArbitrary, \
    TupleArbitrary, ListArbitrary, OptionalArbitrary, ResultArbitrary, \
    BoxArbitrary, DictArbitrary
from tests.common.debug import generate_many, minimal
from tests.common.utils import all_shrinks


def test_tuple_shrinks_one_position_at_a_time_in_order():
    a = TupleArbitrary((BoolArbitrary(), BoolArbitrary()))
    assert all_shrinks(a, (True, True)) == [(False, True), (True, False)]


def test_empty_tuple_is_unit():
    assert arbitrary(()) == ()
    assert all_shrinks(TupleArbitrary(()), ()) == []


def test_tuple_of_small_ns_shrinks_coordinatewise():
    value = (SmallN(1), SmallN(10), SmallN(3))
    assert quick_shrink(
        (SmallN, SmallN, SmallN), value, lambda t: sum(t) == 0
    ) == (0, 0, 1)


def test_shrinks_everything_in_a_big_tuple():
    descriptor = (int, (), [int], optional(int), u8, str)
    value = (5, (), [1, 2], 7, 200, 'abc')
    assert quick_shrink(descriptor, value, lambda t: False) == (
        0, (), [], None, 0, '')


Point = namedtuple('Point', ('x', 'y'))


def test_named_tuples_keep_their_type():
    a = TupleArbitrary((IntArbitrary(), IntArbitrary()), tuple_type=Point)
    assert all(isinstance(s, Point) for s in all_shrinks(a, Point(3, -2)))


def test_list_shrink_order():
    a = ListArbitrary(IntArbitrary())
    assert all_shrinks(a, [3, 4, 5]) == [
        [], [3], [3, 4],
        [4, 5],
        [4, 5], [3, 5],
        [0, 4, 5], [1, 4, 5], [2, 4, 5],
        [3, 0, 5], [3, 2, 5], [3, 3, 5],
        [3, 4, 0], [3, 4, 2], [3, 4, 4],
    ]


def test_truncations_precede_substitutions():
    a = ListArbitrary(IntArbitrary())
    x = [7, 1, 9, 4, 2]
    shrinks = all_shrinks(a, x)
    lengths = [len(s) for s in shrinks]
    first_full_length = lengths.index(len(x))
    assert all(n == len(x) for n in lengths[first_full_length:])


def test_empty_list_does_not_shrink():
    assert all_shrinks(ListArbitrary(IntArbitrary()), []) == []


def test_list_shrinks_never_yield_input():
    a = ListArbitrary(IntArbitrary())
    for x in ([0], [0, 0], [1, 1, 1], [5, 0, 3]):
        assert x not in all_shrinks(a, x)


def test_lists_are_empty_at_size_zero():
    assert arbitrary([int], size=0) == []


def test_list_lengths_are_bounded_by_size():
    assert all(len(xs) <= 16 * 4 for xs in generate_many([int], size=4))


def test_lists_of_u8_are_in_range():
    for xs in generate_many([u8], size=20):
        assert all(0 <= x <= 255 for x in xs)


def test_shrinks_list_to_single_element():
    assert quick_shrink([int], [10, 3, 7, 2], lambda xs: sum(xs) < 5) == [5]


def test_shrinks_list_of_optional_strings():
    value = ['hi', None, 'more', None]
    assert quick_shrink(
        [optional(str)], value,
        lambda xs: not any(x is not None and 'e' in x for x in xs)
    ) == ['e']


def test_non_empty_lists_are_never_empty():
    for size in (0, 1, 8):
        xs = generate_many(NonEmpty([int]), size=size)
        assert all(isinstance(x, NonEmpty) and len(x) >= 1 for x in xs)


def test_non_empty_shrinks_never_empty():
    a = ListArbitrary(IntArbitrary(), list_type=NonEmpty, min_size=1)
    for x in ([5], [1, 2], [3, 0, 4, 1]):
        shrinks = all_shrinks(a, NonEmpty(x))
        assert all(len(s) >= 1 for s in shrinks)
        assert all(isinstance(s, NonEmpty) for s in shrinks)


def test_single_element_non_empty_only_shrinks_its_element():
    a = ListArbitrary(IntArbitrary(), list_type=NonEmpty, min_size=1)
    assert all_shrinks(a, NonEmpty([2])) == [[0], [1]]


def test_minimal_non_empty_list():
    assert minimal(NonEmpty([int])) == [0]


def test_optional_is_none_at_size_zero():
    assert set(generate_many(optional(int), size=0)) == {None}


def test_optional_is_mostly_present_at_large_size():
    values = generate_many(optional(int), size=100)
    assert sum(v is None for v in values) < len(values) // 4


def test_optional_shrinks_to_none_first():
    shrinks = all_shrinks(OptionalArbitrary(IntArbitrary()), 5)
    assert shrinks[0] is None
    assert 0 in shrinks[1:]
    assert all(s < 5 for s in shrinks[1:])
    assert shrinks == [None, 0, 2, 4]


def test_none_does_not_shrink():
    assert all_shrinks(OptionalArbitrary(IntArbitrary()), None) == []


def test_optional_list_shrinks_to_none():
    assert quick_shrink(
        optional([int]), [1, 2, 3], lambda x: False) is None


def test_results_generate_both_branches():
    values = generate_many(results(int, str))
    assert any(isinstance(v, Ok) for v in values)
    assert any(isinstance(v, Err) for v in values)


def test_result_shrinks_keep_their_tag():
    a = ResultArbitrary(IntArbitrary(), IntArbitrary())
    assert all_shrinks(a, Ok(4)) == [Ok(0), Ok(2), Ok(3)]
    assert all_shrinks(a, Err(2)) == [Err(0), Err(1)]


def test_shrinks_ok_string():
    assert quick_shrink(
        results(str, int), Ok('xyz'), lambda r: False) == Ok('')


def test_dictionaries():
    for d in generate_many(dictionaries(u8, bool)):
        assert isinstance(d, dict)
        assert all(0 <= k <= 255 for k in d)
        assert all(isinstance(v, bool) for v in d.values())


def test_dictionaries_do_not_shrink():
    a = DictArbitrary(ListArbitrary(TupleArbitrary(
        (IntArbitrary(), IntArbitrary()))))
    assert all_shrinks(a, {1: 2, 3: 4}) == []


def test_boxes():
    assert all(isinstance(b, Box) for b in generate_many(boxed(int)))


def test_box_shrinks_rewrap():
    assert all_shrinks(BoxArbitrary(IntArbitrary()), Box(2)) == [
        Box(0), Box(1)]


def test_box_copies_are_independent():
    a = BoxArbitrary(IntArbitrary())
    original = Box(3)
    copy = a.copy(original)
    copy.value = 10
    assert original.value == 3


def test_list_copies_are_independent():
    a = ListArbitrary(ListArbitrary(IntArbitrary()))
    original = [[1], [2]]
    copy = a.copy(original)
    copy[0].append(3)
    assert original == [[1], [2]]


def test_just_always_gives_its_value():
    assert set(generate_many(just('hello'))) == {'hello'}


@pytest.mark.parametrize('descriptor', [
    [int], NonEmpty([u8]), (int, str), optional(bool), results(int, int),
    boxed(float), dictionaries(int, int), [[optional(SmallN)]],
])
def test_generates_at_size_zero(descriptor):
    generate_many(descriptor, n=20, size=0)
