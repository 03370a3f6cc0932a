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


class QCheckException(Exception):

    """Generic parent class for exceptions thrown by qcheck."""
    pass


class Falsified(QCheckException, AssertionError):

    """A property did not hold for some generated value.

    This is the one failure qcheck expects to surface to a test runner.
    It is raised after shrinking has finished, so ``example`` is the
    locally minimal counterexample and ``original`` is the value that
    first falsified the property.

    """

    def __init__(self, name, trials, example, original):
        super().__init__(
            '%s: falsified after %d trials with value %r' % (
                name, trials, example))
        self.name = name
        self.trials = trials
        self.example = example
        self.original = original


class NoSuchExample(QCheckException):

    """The condition we have been asked to satisfy appears to be always false.

    This does not guarantee that no example exists, only that we were
    unable to find one in the trials we were allowed.

    """

    def __init__(self, name, trials):
        super().__init__(
            '%s: could not find an example in %d trials' % (name, trials))
        self.name = name
        self.trials = trials


class InvalidArgument(QCheckException, TypeError):

    """Used to indicate that the arguments to a qcheck function were in some
    manner incorrect."""


class MissingArbitrary(InvalidArgument):

    """No Arbitrary has been registered for this descriptor."""

    def __init__(self, descriptor):
        super().__init__(
            'Unable to find an arbitrary for descriptor %r' % (descriptor,))
        self.descriptor = descriptor
