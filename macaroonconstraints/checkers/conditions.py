# Copyright 2017 Canonical Ltd.
# Licensed under the LGPLv3, see LICENCE file for details.

# Constants for all the standard caveat conditions.
COND_ALLOW = 'allow'
COND_TIME_BEFORE = 'time-before'
COND_CLIENT_IP_ADDR = 'client-ip-addr'
COND_ERROR = 'error'

# Restricts the nodes that may appear at a position of the payment path.
COND_PAYMENT_PATH = 'payment-path-constraint'
