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

"""This is a tutorial for teaching qcheck about a type of your own.

We're going to build an Arbitrary for binary trees with labelled nodes.
Every tree is either Nil, the empty tree, or a Node which has a label and
a left and a right subtree that are themselves trees.

Note: This file contains both tests and implementation, mostly for ease of
following. Normally you would of course separate these into their own files.

To run these tests, install pytest (ideally in a virtualenv) and from the root
of a qcheck checkout run

PYTHONPATH=src python -m pytest examples/user_tree.py

"""

from collections import namedtuple

from qcheck import Config, Lazy, quick_check, quick_check_occurs, \
    arbitrary_for, arbitrary_for_instances
from qcheck.errors import Falsified
from qcheck.arbitraries import Arbitrary, TupleArbitrary


class Tree:
    pass


class Nil(Tree):

    def __repr__(self):
        return 'Nil()'

    def __eq__(self, other):
        return isinstance(other, Nil)

    def __hash__(self):
        return 0


class Node(Tree):

    def __init__(self, label, left, right):
        self.label = label
        self.left = left
        self.right = right

    def __repr__(self):
        return 'Node(%r, %r, %r)' % (self.label, self.left, self.right)

    def __eq__(self, other):
        return (
            isinstance(other, Node) and
            self.label == other.label and
            self.left == other.left and
            self.right == other.right
        )

    def __hash__(self):
        return hash((self.label, self.left, self.right))


class TreeArbitrary(Arbitrary):

    """An implementation of Arbitrary for Tree instances.

    There are only two things to provide: how to make a random tree of a
    given size, and how to find simpler trees than a given one.

    """

    # Our trees are never mutated after construction, so qcheck can hand the
    # same tree to a property repeatedly without copying it.
    has_immutable_data = True

    def __init__(self, labels):
        """In order to generate trees, we need an Arbitrary for their labels.

        Everything else we can handle ourselves.

        """
        self.labels = labels

    def generate(self, random, size):
        """Generation is recursive, and recursion needs to stop somewhere.

        The rule is that a recursive generator passes a strictly smaller
        size to its recursive calls and produces a leaf when the size runs
        out. Here each subtree gets half our size, so the depth of a tree
        is at most logarithmic in the size we were given. We also stop
        early with a quarter chance at every node, which keeps some trees
        small even when the size is large.

        """
        if size <= 0 or random.random() < 0.25:
            return Nil()
        return Node(
            self.labels.generate(random, size),
            self.generate(random, size // 2),
            self.generate(random, size // 2),
        )

    def shrink(self, tree):
        """Shrink candidates should come roughly most drastic first, because
        the shrink search moves to the first candidate that still fails.

        For a Node that means: the empty tree, then each subtree on its own,
        then the same node with one of its components shrunk. The last of
        those we get for free by treating a node as a tuple of label, left
        and right and letting TupleArbitrary do the work.

        Nil is as simple as it gets, so it has nothing to offer.

        """
        if isinstance(tree, Nil):
            return Lazy.empty()

        # We've already offered Nil, so there's no point offering a subtree
        # that is Nil as well.
        subtrees = Lazy([tree.left, tree.right]).filter(
            lambda t: isinstance(t, Node))

        components = TupleArbitrary((self.labels, self, self))

        return Lazy.singleton(Nil()).concat(subtrees).concat(
            lambda: components.shrink(
                (tree.label, tree.left, tree.right)
            ).map(lambda t: Node(*t))
        )


# Now we register our Arbitrary so that qcheck can find it. Registering
# against the Tree class means that Tree can be used as a descriptor
# directly, with integer labels.

@arbitrary_for(Tree)
def define_tree_arbitrary(table, descriptor):
    return TreeArbitrary(table.arbitrary(int))


# It's also useful to be able to say what the labels should be. For that we
# define a descriptor type of our own and register against its instances,
# using the table to look up whatever the labels descriptor asks for.

TreeOf = namedtuple('TreeOf', 'labels')


@arbitrary_for_instances(TreeOf)
def define_tree_of_arbitrary(table, descriptor):
    return TreeArbitrary(table.arbitrary(descriptor.labels))


# Now let's check that it all works. First some convenience functions for
# looking at trees.

def labels(tree):
    """All labels in a tree, no matter how deep they are."""
    if isinstance(tree, Node):
        yield tree.label
        yield from labels(tree.left)
        yield from labels(tree.right)


def depth(tree):
    if isinstance(tree, Nil):
        return 0
    return 1 + max(depth(tree.left), depth(tree.right))


def test_simplest_tree_is_nil():
    assert quick_check_occurs(Tree, lambda t: True) == Nil()


def test_simplifies_to_a_single_node():
    assert quick_check_occurs(
        Tree, lambda t: isinstance(t, Node), config=Config(trials=100)
    ) == Node(0, Nil(), Nil())


def test_simplifies_labels_deep_in_the_tree():
    """Make sure that labels are fully simplified even if they are deep in
    the tree rather than at the surface, and that shrinking stops exactly at
    the depth we asked for."""
    tree = quick_check_occurs(
        Tree, lambda t: depth(t) >= 3, config=Config(trials=500))
    assert depth(tree) == 3
    assert all(label == 0 for label in labels(tree))


def test_labels_follow_the_descriptor():
    tree = quick_check_occurs(
        TreeOf(str), lambda t: any(labels(t)), config=Config(trials=500))
    assert list(filter(None, labels(tree))) == ['0']


def test_finds_counterexample_with_sum_at_the_boundary():
    def small_sum(tree):
        return sum(labels(tree)) < 10

    try:
        quick_check(Tree, small_sum, config=Config(trials=500, size=16))
    except Falsified as e:
        assert sum(labels(e.example)) == 10
        assert all(label >= 0 for label in labels(e.example))
    else:
        assert False, 'Expected a tree with a large sum'


def test_size_zero_trees_are_nil():
    quick_check(
        Tree, lambda t: t == Nil(), config=Config(size=0, grow=False))
