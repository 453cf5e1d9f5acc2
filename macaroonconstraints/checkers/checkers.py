# Copyright 2017 Canonical Ltd.
# Licensed under the LGPLv3, see LICENCE file for details.
from collections import namedtuple
import logging

from macaroonconstraints.checkers.caveat import parse_caveat
from macaroonconstraints.checkers.conditions import (
    COND_ALLOW, COND_CLIENT_IP_ADDR, COND_ERROR, COND_PAYMENT_PATH,
    COND_TIME_BEFORE
)
from macaroonconstraints.checkers.ipaddr import parse_ip_addr
from macaroonconstraints.checkers.path import check_path_constraint
from macaroonconstraints.checkers.time import SYSTEM_CLOCK, parse_time
from macaroonconstraints.error import (
    CaveatFormatError, CaveatNotRecognizedError, CaveatNotSatisfied,
    ConstraintError, RegisterError, VerificationError
)

log = logging.getLogger(__name__)


class CheckerInfo(namedtuple('CheckerInfo', 'condition check')):
    '''Describes a checker for a single caveat condition.

    @param condition holds the condition keyword the checker is
    registered under.
    @param check holds the function that checks the caveat. It is called
    with the condition and the rest of the caveat text, returns None when
    the caveat is satisfied and raises otherwise.
    '''


def allow_checker(op):
    '''Returns a checker that succeeds when op is one of the operations
    listed in an allow caveat.
    '''
    def check(_, arg):
        if op not in arg.split():
            raise CaveatNotSatisfied('{} not allowed'.format(op))
    return CheckerInfo(COND_ALLOW, check)


def timeout_checker(clock=None):
    '''Returns a checker for time-before caveats.

    @param clock holds an object with a utcnow method returning the
    current time as a naive UTC datetime. The system clock is used
    by default.
    '''
    if clock is None:
        clock = SYSTEM_CLOCK

    def check(_, arg):
        try:
            deadline = parse_time(arg)
        except ValueError as exc:
            raise CaveatFormatError(exc.args[0])
        if deadline <= clock.utcnow():
            raise CaveatNotSatisfied('macaroon has expired')
    return CheckerInfo(COND_TIME_BEFORE, check)


def ip_lock_checker(client_ip):
    '''Returns a checker comparing the address held in a client-ip-addr
    caveat with the address the request came from.
    '''
    def check(_, arg):
        try:
            locked = parse_ip_addr(arg)
        except ValueError:
            raise CaveatFormatError(
                'cannot parse IP address "{}"'.format(arg))
        try:
            client = parse_ip_addr(client_ip)
        except ValueError:
            client = None
        if locked != client:
            raise CaveatNotSatisfied(
                'macaroon locked to different IP address')
    return CheckerInfo(COND_CLIENT_IP_ADDR, check)


def payment_path_checker(path):
    '''Returns a checker evaluating payment path caveats against the
    given path, a sequence of node identifiers (for example base58
    encoded node public keys).
    '''
    path = tuple(path)

    def check(_, arg):
        check_path_constraint(arg, path)
    return CheckerInfo(COND_PAYMENT_PATH, check)


def error_checker():
    '''Returns a checker that fails every error caveat.'''
    def check(_, arg):
        raise CaveatNotSatisfied(arg)
    return CheckerInfo(COND_ERROR, check)


class Checker(object):
    '''Checks first party caveats by dispatching each of them to the
    checker registered under its condition.

    Only caveats are checked; the macaroon signature is not verified.
    '''
    def __init__(self, checkers=()):
        self._checkers = {}
        for info in checkers:
            self.register(info)

    def register(self, info):
        '''Registers the given CheckerInfo.
        @raise RegisterError if the condition is empty or already taken.
        '''
        if not info.condition:
            raise RegisterError('no condition for checker')
        if info.condition in self._checkers:
            raise RegisterError(
                'checker for "{}" already registered'.format(info.condition))
        self._checkers[info.condition] = info
        log.debug('registered checker for %s', info.condition)

    def info(self):
        '''Returns information on all the registered checkers, sorted by
        condition.
        '''
        return sorted(self._checkers.values(), key=lambda x: x.condition)

    def check_first_party_caveat(self, cav):
        '''Checks the caveat condition cav.
        @raise CaveatNotRecognizedError if no checker handles it.
        @raise VerificationError if it is not satisfied.
        '''
        try:
            cond, arg = parse_caveat(cav)
        except ValueError as exc:
            raise VerificationError(
                'cannot parse caveat "{}": {}'.format(
                    cav, exc.args[0])) from exc
        info = self._checkers.get(cond)
        if info is None:
            log.debug('caveat %r not recognized', cav)
            raise CaveatNotRecognizedError(
                'caveat "{}" not satisfied: caveat not recognized'.format(cav))
        try:
            info.check(cond, arg)
        except ConstraintError as exc:
            log.debug('caveat %r not satisfied: %s', cav, exc)
            raise VerificationError(
                'caveat "{}" not satisfied: {}'.format(cav, exc)) from exc

    def check(self, macaroon):
        '''Checks every caveat of the given Macaroon in order, stopping at
        the first one that fails.
        '''
        for caveat in macaroon.macaroon.caveats:
            if not caveat.first_party():
                raise VerificationError('third party caveats not supported')
            # caveat_id is bytes for version 2 macaroons.
            self.check_first_party_caveat(
                caveat.caveat_id_bytes.decode('utf-8'))
