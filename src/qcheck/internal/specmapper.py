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

from qcheck.errors import MissingArbitrary


class SpecificationMapper:

    """Maps descriptions of some type to a type. Has configurable handlers for
    what a description may look like. Handlers for descriptions may take either
    a specific value or all instances of a type and have access to the mapper
    to look up types.

    Instance handlers match on the exact class of a descriptor. A handler
    for list will not be used for a subclass of list: register the subclass
    too if you want it handled.

    Also supports prototype based inheritance, with children being able to
    override specific handlers.

    There is a single default() object per subclass of SpecificationMapper
    which everything has as a prototype if it's not assigned any other
    prototype. This allows you to define the mappers on the default object
    and have them inherited by any custom mappers you want.

    """

    @classmethod
    def default(cls):
        key = '_%s_default_mapper' % (cls.__name__,)
        try:
            return cls.__dict__[key]
        except KeyError:
            pass
        result = cls()
        setattr(cls, key, result)
        return result

    def __init__(self, prototype=None):
        self.value_mappers = {}
        self.instance_mappers = {}
        self.__prototype = prototype

    def prototype(self):
        if self.__prototype is not None:
            return self.__prototype
        if self is self.default():
            return None
        return self.default()

    def define_specification_for(self, value, specification):
        self.value_mappers.setdefault(value, []).append(specification)

    def define_specification_for_instances(self, cls, specification):
        self.instance_mappers.setdefault(cls, []).append(specification)

    def new_child_mapper(self):
        return self.__class__(prototype=self)

    def specification_for(self, descriptor):
        for h in self.find_specification_handlers_for(descriptor):
            return h(self, descriptor)
        return self.missing_specification(descriptor)

    def find_specification_handlers_for(self, descriptor):
        if safe_in(descriptor, self.value_mappers):
            for h in reversed(self.value_mappers[descriptor]):
                yield h
        for h in reversed(self.instance_mappers.get(typekey(descriptor), ())):
            yield h
        if self.prototype() is not None:
            for h in self.prototype().find_specification_handlers_for(
                    descriptor):
                yield h

    def missing_specification(self, descriptor):
        raise MissingArbitrary(descriptor)


def typekey(x):
    return x.__class__


def safe_in(x, ys):
    """Test if x is present in ys even if x is unhashable."""
    try:
        return x in ys
    except TypeError:
        return False
