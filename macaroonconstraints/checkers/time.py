# Copyright 2017 Canonical Ltd.
# Licensed under the LGPLv3, see LICENCE file for details.

import datetime

from macaroonconstraints.checkers.caveat import TIME_FORMAT

# Go encodes whole seconds without a fractional part.
_TIME_FORMATS = (TIME_FORMAT, '%Y-%m-%dT%H:%M:%SZ')


class SystemClock(object):
    '''A clock reading the current UTC time. Any object with a
    utcnow method returning a naive UTC datetime can stand in for it.
    '''
    def utcnow(self):
        now = datetime.datetime.now(datetime.timezone.utc)
        return now.replace(tzinfo=None)


SYSTEM_CLOCK = SystemClock()


def parse_time(s):
    '''Parse a time-before caveat argument into a naive UTC datetime.
    @raise ValueError when s is not in a recognized format.
    '''
    for fmt in _TIME_FORMATS:
        try:
            return datetime.datetime.strptime(s, fmt)
        except ValueError:
            continue
    raise ValueError('cannot parse "{}" as RFC 3339'.format(s))
