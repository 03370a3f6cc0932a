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

"""The main entry points of qcheck: checking a property, searching for an
example, shrinking a known counterexample and generating raw values."""

from random import Random

from qcheck.config import default_config
from qcheck.errors import Falsified, NoSuchExample
from qcheck.reporting import verbose_report
from qcheck.arbitrarytable import ArbitraryTable
from qcheck.internal.validation import check_valid_count
from qcheck.internal.reflection import impersonate, nicerepr, \
    get_pretty_function_description


def falsifies(prop, value):
    """A property fails when it raises AssertionError or returns something
    falsey. None is not a failure, so properties written as a sequence of
    assert statements work. Any other exception propagates."""
    try:
        result = prop(value)
    except AssertionError:
        return True
    return result is not None and not result


def satisfies(condition, value):
    try:
        return bool(condition(value))
    except AssertionError:
        return False


class Checker:

    """A wrapper object holding the state for checking properties: the
    configuration, the random source and the table to look arbitraries up
    in."""

    def __init__(self, config=None, random=None, table=None):
        if config is None:
            config = default_config()
        if random is None:
            random = Random()
        if table is None:
            table = ArbitraryTable.default()
        self.config = config
        self.random = random
        self.table = table

    def report(self, message):
        verbose_report(self.config, message)

    def search(self, arbitrary, condition):
        """Run the trials until one generates a value satisfying condition.

        Returns the number of trials run, whether such a value was found and
        the value itself.

        """
        for i in range(self.config.trials):
            value = arbitrary.generate(
                self.random, self.config.size_for_trial(i))
            self.report(lambda: 'Trying example: %s' % (nicerepr(value),))
            if condition(arbitrary.copy(value)):
                return i + 1, True, value
        return self.config.trials, False, None

    def minimize(self, arbitrary, value, condition):
        """Greedily walk shrink candidates, moving to the first one that
        still satisfies condition, until the current value has no such
        candidate."""
        current = value
        while True:
            for candidate in arbitrary.shrink(current):
                if condition(arbitrary.copy(candidate)):
                    self.report(lambda: 'Shrunk to: %s' % (
                        nicerepr(candidate),))
                    current = candidate
                    break
            else:
                break
        self.report(lambda: 'Shrink finished: %s' % (nicerepr(current),))
        return current

    def check(self, descriptor, prop, name=None):
        if name is None:
            name = get_pretty_function_description(prop)
        arbitrary = self.table.arbitrary(descriptor)

        def fails(value):
            return falsifies(prop, value)

        trials, failed, original = self.search(arbitrary, fails)
        if failed:
            self.report(lambda: '%s: first falsification with value %s' % (
                name, nicerepr(original)))
            example = self.minimize(arbitrary, original, fails)
            raise Falsified(name, trials, example, original)
        self.report(lambda: '%s: passed %d trials' % (name, trials))

    def occurs(self, descriptor, condition, name=None):
        if name is None:
            name = get_pretty_function_description(condition)
        arbitrary = self.table.arbitrary(descriptor)

        def holds(value):
            return satisfies(condition, value)

        trials, succeeded, found = self.search(arbitrary, holds)
        if not succeeded:
            raise NoSuchExample(name, trials)
        self.report(lambda: '%s: occurred after %d trials with value %s' % (
            name, trials, nicerepr(found)))
        return self.minimize(arbitrary, found, holds)

    def shrink(self, descriptor, value, prop):
        arbitrary = self.table.arbitrary(descriptor)

        def fails(v):
            return falsifies(prop, v)

        if not fails(arbitrary.copy(value)):
            raise ValueError('%r does not falsify %s' % (
                value, get_pretty_function_description(prop)))
        return self.minimize(arbitrary, value, fails)

    def generate(self, descriptor, size):
        check_valid_count(size, 'size')
        return self.table.arbitrary(descriptor).generate(self.random, size)


def quick_check(
    descriptor, prop, name=None, config=None, random=None, table=None
):
    """Check that prop holds for config.trials values described by
    descriptor.

    Returns None if it does. Otherwise raises Falsified carrying the
    shrunk counterexample.

    """
    Checker(config, random, table).check(descriptor, prop, name)


def for_all(descriptor, config=None, random=None, table=None):
    """Decorator turning a single argument property into a test function
    that takes no arguments and runs quick_check on it."""
    def accept(prop):
        @impersonate(prop)
        def run_property():
            quick_check(
                descriptor, prop, name=prop.__qualname__,
                config=config, random=random, table=table,
            )
        run_property.prop = prop
        return run_property
    return accept


def quick_check_occurs(
    descriptor, condition, name=None, config=None, random=None, table=None
):
    """Search for a value described by descriptor that satisfies condition,
    and return the simplest such value found.

    Raises NoSuchExample if none of the trials satisfied it.

    """
    return Checker(config, random, table).occurs(descriptor, condition, name)


def quick_shrink(descriptor, value, prop, config=None, table=None):
    """Shrink value, which must falsify prop, to a locally minimal value
    that still does."""
    return Checker(config, table=table).shrink(descriptor, value, prop)


def arbitrary(descriptor, size=8, random=None, table=None):
    """A single value for descriptor, generated at the given size."""
    return Checker(random=random, table=table).generate(descriptor, size)
