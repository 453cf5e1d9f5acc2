# Copyright 2017 Canonical Ltd.
# Licensed under the LGPLv3, see LICENCE file for details.
from datetime import datetime, timedelta
from unittest import TestCase

import macaroonconstraints
from macaroonconstraints import checkers


class FixedClock(object):
    def __init__(self, t):
        self.t = t

    def utcnow(self):
        return self.t


NOW = datetime(2017, 6, 1, 12, 0, 0)


class TestCheckers(TestCase):
    def test_allow_checker(self):
        info = checkers.allow_checker('read')
        assert info.condition == checkers.COND_ALLOW
        info.check('allow', 'write read')
        with self.assertRaises(macaroonconstraints.CaveatNotSatisfied) as cm:
            info.check('allow', 'write')
        assert cm.exception.args[0] == 'read not allowed'
        with self.assertRaises(macaroonconstraints.CaveatNotSatisfied):
            info.check('allow', '')

    def test_timeout_checker(self):
        info = checkers.timeout_checker(FixedClock(NOW))
        assert info.condition == checkers.COND_TIME_BEFORE
        later = (NOW + timedelta(seconds=1)).strftime(checkers.TIME_FORMAT)
        info.check('time-before', later)
        for t in [NOW, NOW - timedelta(seconds=1)]:
            with self.assertRaises(
                    macaroonconstraints.CaveatNotSatisfied) as cm:
                info.check('time-before', t.strftime(checkers.TIME_FORMAT))
            assert cm.exception.args[0] == 'macaroon has expired'

    def test_timeout_checker_bad_time(self):
        info = checkers.timeout_checker(FixedClock(NOW))
        with self.assertRaises(macaroonconstraints.CaveatFormatError):
            info.check('time-before', 'tomorrow')

    def test_timeout_checker_system_clock(self):
        info = checkers.timeout_checker()
        info.check('time-before', '2999-01-01T00:00:00Z')
        with self.assertRaises(macaroonconstraints.CaveatNotSatisfied):
            info.check('time-before', '2000-01-01T00:00:00Z')

    def test_ip_lock_checker(self):
        tests = [
            ('127.0.0.1', '127.0.0.1'),
            ('::ffff:127.0.0.1', '127.0.0.1'),
            ('2001:db8::1', '2001:0db8:0:0:0:0:0:1'),
            ('fe80::1%eth0', 'fe80::1'),
        ]
        for client, arg in tests:
            checkers.ip_lock_checker(client).check('client-ip-addr', arg)

    def test_ip_lock_checker_mismatch(self):
        for client in ['127.0.0.2', '::1', '', 'not an ip']:
            info = checkers.ip_lock_checker(client)
            assert info.condition == checkers.COND_CLIENT_IP_ADDR
            with self.assertRaises(
                    macaroonconstraints.CaveatNotSatisfied) as cm:
                info.check('client-ip-addr', '127.0.0.1')
            assert cm.exception.args[0] == \
                'macaroon locked to different IP address'

    def test_ip_lock_checker_bad_caveat(self):
        info = checkers.ip_lock_checker('127.0.0.1')
        with self.assertRaises(macaroonconstraints.CaveatFormatError):
            info.check('client-ip-addr', '127.0.0')

    def test_payment_path_checker(self):
        path = ['n1', 'n2', 'n3']
        info = checkers.payment_path_checker(path)
        assert info.condition == checkers.COND_PAYMENT_PATH
        info.check('payment-path-constraint', 'path[-1] in {n3}')
        path.append('n4')
        info.check('payment-path-constraint', 'path[-1] in {n3}')
        with self.assertRaises(macaroonconstraints.PathIndexError):
            info.check('payment-path-constraint', 'path[3] in {n4}')

    def test_error_checker(self):
        info = checkers.error_checker()
        with self.assertRaises(macaroonconstraints.CaveatNotSatisfied) as cm:
            info.check('error', 'no operations allowed')
        assert cm.exception.args[0] == 'no operations allowed'


class TestChecker(TestCase):
    def test_register(self):
        c = checkers.Checker([checkers.allow_checker('read'),
                              checkers.error_checker()])
        c.register(checkers.payment_path_checker([]))
        assert [i.condition for i in c.info()] == [
            'allow', 'error', 'payment-path-constraint']

    def test_register_errors(self):
        c = checkers.Checker([checkers.allow_checker('read')])
        with self.assertRaises(macaroonconstraints.RegisterError):
            c.register(checkers.allow_checker('write'))
        with self.assertRaises(macaroonconstraints.RegisterError):
            c.register(checkers.CheckerInfo('', lambda cond, arg: None))

    def test_check_first_party_caveat(self):
        c = checkers.Checker([checkers.allow_checker('read')])
        c.check_first_party_caveat('allow read write')
        with self.assertRaises(macaroonconstraints.VerificationError) as cm:
            c.check_first_party_caveat('allow write')
        assert cm.exception.args[0] == \
            'caveat "allow write" not satisfied: read not allowed'
        assert isinstance(cm.exception.__cause__,
                          macaroonconstraints.CaveatNotSatisfied)

    def test_check_unrecognized(self):
        c = checkers.Checker([checkers.allow_checker('read')])
        with self.assertRaises(macaroonconstraints.CaveatNotRecognizedError):
            c.check_first_party_caveat('deny read')

    def test_check_unparsable(self):
        c = checkers.Checker()
        with self.assertRaises(macaroonconstraints.VerificationError) as cm:
            c.check_first_party_caveat(' allow read')
        assert isinstance(cm.exception.__cause__, ValueError)

    def test_check_format_error(self):
        c = checkers.Checker([checkers.payment_path_checker(['n1'])])
        with self.assertRaises(macaroonconstraints.VerificationError) as cm:
            c.check_first_party_caveat('payment-path-constraint path[x] in {}')
        assert isinstance(cm.exception.__cause__,
                          macaroonconstraints.PathConstraintSyntaxError)

    def test_check_macaroon(self):
        m = macaroonconstraints.Macaroon(b'rootkey', b'id', 'here')
        m.add_caveat(checkers.allow_caveat(['read']))
        m.add_caveat(checkers.payment_path_caveat('path[0] in {n1}'))
        c = checkers.Checker([checkers.allow_checker('read'),
                              checkers.payment_path_checker(['n1', 'n2'])])
        c.check(m)
        c = checkers.Checker([checkers.allow_checker('read'),
                              checkers.payment_path_checker(['n2', 'n1'])])
        with self.assertRaises(macaroonconstraints.VerificationError):
            c.check(m)
