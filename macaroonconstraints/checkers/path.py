# Copyright 2017 Canonical Ltd.
# Licensed under the LGPLv3, see LICENCE file for details.
'''Payment path constraints.

A payment path constraint restricts the node found at one position of the
payment path to (or away from) a set of nodes. Examples of valid
predicates:

    path[0] in {node1, node2, node3}
    path[-1] not in {node1, node2}

Negative indexes count from the end of the path. Node identifiers are
opaque strings, trimmed of surrounding spaces; they must not contain
commas or braces.
'''

import collections
import re

from macaroonconstraints.error import (
    CaveatNotSatisfied, PathConstraintSyntaxError, PathIndexError
)

_PREDICATE_RE = re.compile(
    r'\s*path\[([^\]]*)\]\s+(?:(.*?)\s+)?in\s+\{([^{}]*)\}\s*')
_INDEX_RE = re.compile(r'-?[0-9]+')

_PathConstraint = collections.namedtuple('PathConstraint',
                                         'index negate node_set')


class PathConstraint(_PathConstraint):
    '''The parsed form of a payment path predicate.

    index holds the (possibly negative) path position, negate reports
    whether the predicate reads "not in" and node_set holds the node
    identifiers in the order they were written.
    '''
    __slots__ = ()

    def __new__(cls, index, negate=False, node_set=()):
        return super(PathConstraint, cls).__new__(
            cls, index, negate, tuple(node_set))

    def __str__(self):
        return 'path[{}] {}in {{{}}}'.format(
            self.index,
            'not ' if self.negate else '',
            ', '.join(self.node_set))


def parse_path_constraint(predicate):
    '''Parse a payment path predicate.

    The index is not checked against any path length here, since the
    path is only known when the constraint is checked.

    @param predicate the predicate text, for example "path[0] in {a, b}".
    @return a PathConstraint.
    @raise PathConstraintSyntaxError when the predicate is malformed.
    '''
    match = _PREDICATE_RE.fullmatch(predicate)
    if match is None:
        raise PathConstraintSyntaxError('path constraint syntax error')
    index, negation, nodes = match.groups()

    if _INDEX_RE.fullmatch(index) is None:
        raise PathConstraintSyntaxError('unable to parse path index')
    try:
        index = int(index)
    except ValueError:
        # Too many digits for int().
        raise PathConstraintSyntaxError('unable to parse path index')

    if negation == 'not':
        negate = True
    elif not negation:
        negate = False
    else:
        raise PathConstraintSyntaxError('incorrect path constraint negation')

    if nodes.strip(' ') == '':
        node_set = ()
    else:
        node_set = tuple(node.strip(' ') for node in nodes.split(','))
    return PathConstraint(index, negate, node_set)


def check_path_constraint(arg, path):
    '''Check that the given payment path satisfies a path predicate.

    The predicate is parsed again on every call.

    @param arg the predicate text held in the caveat.
    @param path the sequence of node identifiers of the payment path.
    @raise PathConstraintSyntaxError when the predicate is malformed.
    @raise PathIndexError when the index falls outside the path.
    @raise CaveatNotSatisfied when the predicate does not hold.
    '''
    constraint = parse_path_constraint(arg)

    index = constraint.index
    if index >= len(path) or index < -len(path):
        raise PathIndexError('path constraint index exceeds path length')
    if index < 0:
        index += len(path)

    ok = path[index] in constraint.node_set
    if constraint.negate:
        ok = not ok
    if not ok:
        raise CaveatNotSatisfied(
            'path does not satisfy constraint "{}"'.format(arg))
