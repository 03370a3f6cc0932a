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

import gc

import pytest

from qcheck.arbitrarytable import ArbitraryTable


@pytest.fixture(scope='function', autouse=True)
def gc_before_each_test():
    gc.collect()


@pytest.fixture(scope='function', autouse=True)
def restore_default_table():
    """Tests are free to register arbitraries on the default table. Anything
    they add is gone again by the next test."""
    table = ArbitraryTable.default()
    value_mappers = {k: list(v) for k, v in table.value_mappers.items()}
    instance_mappers = {
        k: list(v) for k, v in table.instance_mappers.items()}
    yield
    table.value_mappers = value_mappers
    table.instance_mappers = instance_mappers
