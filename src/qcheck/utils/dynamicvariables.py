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

"""Values that can be overridden for the extent of a with block.

Each thread sees its own overrides, so two threads running properties at
once can each capture their own reports.

"""

import threading
from contextlib import contextmanager


class DynamicVariable:

    def __init__(self, name, default):
        self.name = name
        self.default = default
        self.local = threading.local()

    def __repr__(self):
        return 'DynamicVariable(%r, %r)' % (self.name, self.value)

    def __overrides(self):
        try:
            return self.local.overrides
        except AttributeError:
            self.local.overrides = []
            return self.local.overrides

    @property
    def value(self):
        overrides = self.__overrides()
        if overrides:
            return overrides[-1]
        return self.default

    @contextmanager
    def with_value(self, value):
        """Make value current until the block exits, then restore whatever
        was current before, and yield it to the block."""
        overrides = self.__overrides()
        depth = len(overrides)
        overrides.append(value)
        try:
            yield value
        finally:
            del overrides[depth:]
