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

"""The knobs controlling a quick_check run.

A Config is an immutable value. You get a new one either by constructing it
directly with keyword arguments or by chaining the with_* methods off an
existing one:

>>> Config.default().with_trials(100).with_verbose(True)
Config(trials=100, size=8, verbose=True, grow=True)

"""

import attr

from qcheck.errors import InvalidArgument
from qcheck.internal.validation import check_valid_count


def _validate_count(instance, attribute, value):
    check_valid_count(value, attribute.name)


def _validate_flag(instance, attribute, value):
    if not isinstance(value, bool):
        raise InvalidArgument(
            'Expected a bool but got %s=%r (type=%s)' % (
                attribute.name, value, type(value).__name__))


@attr.s(frozen=True, slots=True)
class Config:
    # Number of random values to test a property against.
    trials = attr.ib(default=25, validator=_validate_count)

    # Size passed to generators on the first trial.
    size = attr.ib(default=8, validator=_validate_count)

    # Report every value tried and every shrink step.
    verbose = attr.ib(default=False, validator=_validate_flag)

    # Increase the size by one every eight trials.
    grow = attr.ib(default=True, validator=_validate_flag)

    @classmethod
    def default(cls):
        return cls()

    def with_trials(self, trials):
        return attr.evolve(self, trials=trials)

    def with_size(self, size):
        return attr.evolve(self, size=size)

    def with_verbose(self, verbose):
        return attr.evolve(self, verbose=verbose)

    def with_grow(self, grow):
        return attr.evolve(self, grow=grow)

    def size_for_trial(self, i):
        if self.grow:
            return self.size + i // 8
        return self.size


def default_config():
    return Config.default()
