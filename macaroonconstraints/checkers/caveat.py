# Copyright 2017 Canonical Ltd.
# Licensed under the LGPLv3, see LICENCE file for details.

import collections

from macaroonconstraints.checkers.conditions import (
    COND_ALLOW, COND_CLIENT_IP_ADDR, COND_ERROR, COND_PAYMENT_PATH,
    COND_TIME_BEFORE
)

TIME_FORMAT = '%Y-%m-%dT%H:%M:%S.%fZ'

_Caveat = collections.namedtuple('Caveat', 'condition location')


class Caveat(_Caveat):
    '''Represents a condition that must be true for a check to complete
    successfully.

    If location is provided, the caveat must be discharged by
    a third party at the given location. Such caveats are not
    supported by this package and are rejected when added to a macaroon.
    '''
    __slots__ = ()

    def __new__(cls, condition, location=None):
        return super(Caveat, cls).__new__(cls, condition, location)


def error_caveat(f):
    '''Returns a caveat that will never be satisfied, holding f
    as the text of the caveat.

    This should only be used for highly unusual conditions that are never
    expected to happen in practice, such as a malformed operation name.
    '''
    return _first_party(COND_ERROR, f)


def allow_caveat(ops):
    '''Returns a caveat that will deny attempts to use the macaroon to
    perform any operation other than those listed. Operations must not
    contain a space.
    '''
    if ops is None or len(ops) == 0:
        return error_caveat('no operations allowed')
    for op in ops:
        if op.find(' ') != -1:
            return error_caveat('invalid operation name "{}"'.format(op))
    return _first_party(COND_ALLOW, ' '.join(ops))


def time_before_caveat(t):
    '''Return a caveat that specifies that the time that it is checked at
    should be before t.
    :param t: a naive UTC datetime.
    '''
    return _first_party(COND_TIME_BEFORE, t.strftime(TIME_FORMAT))


def client_ip_addr_caveat(addr):
    '''Returns a caveat that restricts the macaroon to requests made
    from the given address.
    :param addr: an ipaddress.IPv4Address or ipaddress.IPv6Address.
    '''
    return _first_party(COND_CLIENT_IP_ADDR, str(addr))


def payment_path_caveat(predicate):
    '''Returns a caveat holding a payment path predicate verbatim.'''
    return _first_party(COND_PAYMENT_PATH, predicate)


def parse_caveat(cav):
    '''Parses a caveat into an identifier, identifying the checker that should
    be used, and the argument to the checker (the rest of the string).

    The identifier is taken from all the characters before the first
    space character.
    :return two string, identifier and arg
    '''
    if cav == '':
        raise ValueError('empty caveat')
    try:
        i = cav.index(' ')
    except ValueError:
        return cav, ''
    if i == 0:
        raise ValueError('caveat starts with space character')
    return cav[0:i], cav[i + 1:]


def _first_party(name, arg):
    condition = name
    if arg != '':
        condition += ' ' + arg
    return Caveat(condition=condition)
