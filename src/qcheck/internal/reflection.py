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

"""Turning functions and values into strings a person can read in a failure
message."""

import io
import ast
import tokenize
import textwrap
import types
import inspect


lambda_source_cache = {}


def extract_lambda_source(f):
    try:
        return lambda_source_cache[f.__code__]
    except KeyError:
        pass
    result = _extract_lambda_source(f)
    lambda_source_cache[f.__code__] = result
    return result


def _extract_lambda_source(f):
    """Extracts a single lambda expression from the source of the line it
    was defined on. Returns a string indicating an unknown body if it gets
    confused in any way."""
    args = inspect.signature(f)
    arg_string = ', '.join(
        str(p) for p in args.parameters.values()
    )
    if arg_string:
        if_confused = 'lambda %s: <unknown>' % (arg_string,)
    else:
        if_confused = 'lambda: <unknown>'
    try:
        source = textwrap.dedent(inspect.getsource(f))
    except (OSError, TypeError):
        return if_confused

    # Blank out comments and note where each lambda keyword starts.
    line_starts = [0]
    for line in source.splitlines(True):
        line_starts.append(line_starts[-1] + len(line))
    chars = list(source)
    starts = []
    try:
        for token in tokenize.generate_tokens(io.StringIO(source).readline):
            (srow, scol), (erow, ecol) = token.start, token.end
            begin = line_starts[srow - 1] + scol
            if token.type == tokenize.COMMENT:
                chars[begin:line_starts[erow - 1] + ecol] = ' ' * (
                    line_starts[erow - 1] + ecol - begin)
            elif token.type == tokenize.NAME and token.string == 'lambda':
                starts.append(begin)
    except (tokenize.TokenError, IndentationError, SyntaxError):
        pass
    source = ''.join(chars)

    arg_names = list(f.__code__.co_varnames[:f.__code__.co_argcount])
    matches = []
    for start in starts:
        candidate = ' '.join(source[start:].split())
        for end in range(len(candidate), 0, -1):
            try:
                tree = ast.parse(candidate[:end], mode='eval')
            except SyntaxError:
                continue
            if isinstance(tree.body, ast.Lambda):
                if [a.arg for a in tree.body.args.args] == arg_names:
                    matches.append(candidate[:end].strip())
                break
    if len(matches) != 1:
        return if_confused
    return matches[0]


def get_pretty_function_description(f):
    if not hasattr(f, '__name__'):
        return repr(f)
    name = f.__name__
    if name == '<lambda>':
        return extract_lambda_source(f)
    elif isinstance(f, types.MethodType):
        self = f.__self__
        if not (self is None or inspect.isclass(self)):
            return '%r.%s' % (self, name)
    return name


def nicerepr(v):
    if inspect.isfunction(v):
        return get_pretty_function_description(v)
    elif isinstance(v, type):
        return v.__name__
    else:
        return repr(v)


def impersonate(target):
    """Decorator to update the attributes of a function so that to external
    introspectors it will appear to be the target function.

    Unlike functools.wraps this does not set __wrapped__, so the signature
    of the decorated function is what tools such as pytest see.

    """
    def accept(f):
        f.__name__ = target.__name__
        f.__qualname__ = target.__qualname__
        f.__module__ = target.__module__
        f.__doc__ = target.__doc__
        return f
    return accept
