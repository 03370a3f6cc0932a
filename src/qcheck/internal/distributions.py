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


# Upper bound on how far small_n may stretch past its scale, as a multiple
# of that scale.
SMALL_N_STRETCH = 16


def biased_coin(random, p):
    return random.random() <= p


def small_n(random, size):
    """A natural number with an exponential distribution of mean ``size``,
    capped at ``SMALL_N_STRETCH * size``.

    This is what collection lengths are drawn from, so it is 0 at size 0.

    """
    n = int(random.expovariate(1.0) * size)
    return min(n, SMALL_N_STRETCH * size)


def scaled_magnitude(random, size):
    """A natural number with at most ``randint(0, size)`` bits.

    Larger sizes make much larger numbers likely without ever ruling out
    small ones.

    """
    bits = random.randint(0, size)
    if bits == 0:
        return 0
    return random.getrandbits(bits)
