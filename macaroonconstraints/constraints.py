# Copyright 2017 Canonical Ltd.
# Licensed under the LGPLv3, see LICENCE file for details.
'''Constraints attenuate a macaroon by adding a single first party caveat.

Each constraint function returns a function taking a Macaroon and adding
a restriction to it. add_constraints applies any number of them to a copy
of a macaroon. For each constraint, the checker that understands its
caveat is found in macaroonconstraints.checkers:

    allow_constraint         allow_checker
    timeout_constraint       timeout_checker
    ip_lock_constraint       ip_lock_checker
    payment_path_constraint  payment_path_checker
'''
from datetime import timedelta

from macaroonconstraints import checkers
from macaroonconstraints.error import CaveatFormatError


def add_constraints(macaroon, *constraints):
    '''Returns a new macaroon derived from the given one by applying every
    constraint in order.

    The given macaroon is left untouched. If a constraint raises, the
    exception is propagated and no macaroon is returned.
    @param macaroon the Macaroon to restrict.
    @param constraints functions taking a Macaroon and adding a caveat to it.
    @return a Macaroon.
    '''
    new_macaroon = macaroon.copy()
    for constraint in constraints:
        constraint(new_macaroon)
    return new_macaroon


def allow_constraint(*ops):
    '''Restricts the allowed operations to the ones passed.'''
    def constraint(macaroon):
        macaroon.add_caveat(checkers.allow_caveat(ops))
    return constraint


def timeout_constraint(seconds, clock=None):
    '''Restricts the lifetime of the macaroon to the given amount of
    seconds from now. A zero or negative amount yields a macaroon that
    has already expired.
    '''
    if clock is None:
        clock = checkers.SYSTEM_CLOCK

    def constraint(macaroon):
        deadline = clock.utcnow() + timedelta(seconds=seconds)
        macaroon.add_caveat(checkers.time_before_caveat(deadline))
    return constraint


def ip_lock_constraint(ip_addr):
    '''Locks the macaroon to a specific IP address.

    An empty address adds nothing, so that an unset option leaves the
    macaroon unrestricted.
    '''
    def constraint(macaroon):
        if ip_addr == '':
            return
        try:
            addr = checkers.parse_ip_addr(ip_addr)
        except ValueError:
            raise CaveatFormatError('incorrect macaroon IP-lock address')
        macaroon.add_caveat(checkers.client_ip_addr_caveat(addr))
    return constraint


def payment_path_constraint(predicate):
    '''Limits the nodes allowed at some position of the payment path,
    for example "path[-1] in {node1, node2}".

    An empty predicate adds nothing. A malformed one raises
    PathConstraintSyntaxError before anything is added.
    '''
    def constraint(macaroon):
        if predicate == '':
            return
        checkers.parse_path_constraint(predicate)
        macaroon.add_caveat(checkers.payment_path_caveat(predicate))
    return constraint
