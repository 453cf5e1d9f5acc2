# Copyright 2017 Canonical Ltd.
# Licensed under the LGPLv3, see LICENCE file for details.
from macaroonconstraints.checkers.conditions import (
    COND_ALLOW, COND_CLIENT_IP_ADDR, COND_ERROR, COND_PAYMENT_PATH,
    COND_TIME_BEFORE
)
from macaroonconstraints.checkers.caveat import (
    allow_caveat, client_ip_addr_caveat, error_caveat, parse_caveat,
    payment_path_caveat, time_before_caveat, Caveat, TIME_FORMAT
)
from macaroonconstraints.checkers.ipaddr import parse_ip_addr
from macaroonconstraints.checkers.path import (
    check_path_constraint, parse_path_constraint, PathConstraint
)
from macaroonconstraints.checkers.time import (
    parse_time, SystemClock, SYSTEM_CLOCK
)
from macaroonconstraints.checkers.checkers import (
    allow_checker, error_checker, ip_lock_checker, payment_path_checker,
    timeout_checker, Checker, CheckerInfo
)

__all__ = [
    'allow_caveat',
    'allow_checker',
    'Caveat',
    'check_path_constraint',
    'Checker',
    'CheckerInfo',
    'client_ip_addr_caveat',
    'COND_ALLOW',
    'COND_CLIENT_IP_ADDR',
    'COND_ERROR',
    'COND_PAYMENT_PATH',
    'COND_TIME_BEFORE',
    'error_caveat',
    'error_checker',
    'ip_lock_checker',
    'parse_caveat',
    'parse_ip_addr',
    'parse_path_constraint',
    'parse_time',
    'PathConstraint',
    'payment_path_caveat',
    'payment_path_checker',
    'SYSTEM_CLOCK',
    'SystemClock',
    'TIME_FORMAT',
    'time_before_caveat',
    'timeout_checker',
]
