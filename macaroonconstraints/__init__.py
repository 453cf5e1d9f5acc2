# Copyright 2017 Canonical Ltd.
# Licensed under the LGPLv3, see LICENCE file for details.

from macaroonconstraints.versions import (
    LATEST_BAKERY_VERSION, BAKERY_V3, BAKERY_V2, BAKERY_V1, BAKERY_V0,
    macaroon_version
)
from macaroonconstraints.error import (
    CaveatFormatError, CaveatNotRecognizedError, CaveatNotSatisfied,
    ConstraintError, PathConstraintSyntaxError, PathIndexError,
    RegisterError, VerificationError
)
from macaroonconstraints.keys import generate_root_key, ROOT_KEY_LEN
from macaroonconstraints.macaroon import Macaroon
from macaroonconstraints.constraints import (
    add_constraints, allow_constraint, ip_lock_constraint,
    payment_path_constraint, timeout_constraint
)


__all__ = [
    'add_constraints',
    'allow_constraint',
    'BAKERY_V0',
    'BAKERY_V1',
    'BAKERY_V2',
    'BAKERY_V3',
    'CaveatFormatError',
    'CaveatNotRecognizedError',
    'CaveatNotSatisfied',
    'ConstraintError',
    'generate_root_key',
    'ip_lock_constraint',
    'LATEST_BAKERY_VERSION',
    'Macaroon',
    'macaroon_version',
    'PathConstraintSyntaxError',
    'PathIndexError',
    'payment_path_constraint',
    'RegisterError',
    'ROOT_KEY_LEN',
    'timeout_constraint',
    'VerificationError',
]
