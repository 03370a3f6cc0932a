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

"""Where qcheck sends its progress and failure messages.

Everything goes through the current reporter, a plain callable taking a
string. Messages may be passed as zero-argument functions so that the cost
of formatting a large example is only paid when somebody is listening.

"""

import inspect

from qcheck.utils.dynamicvariables import DynamicVariable


def silent(value):
    pass


def default(value):
    print(value)


reporter = DynamicVariable('reporter', default)


def current_reporter():
    return reporter.value


def with_reporter(new_reporter):
    return reporter.with_value(new_reporter)


def to_text(textish):
    if inspect.isfunction(textish):
        textish = textish()
    if isinstance(textish, bytes):
        textish = textish.decode('utf-8')
    return textish


def report(text):
    current_reporter()(to_text(text))


def verbose_report(config, text):
    if config.verbose:
        report(text)
