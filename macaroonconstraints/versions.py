# Copyright 2017 Canonical Ltd.
# Licensed under the LGPLv3, see LICENCE file for details.

from pymacaroons.macaroon import MACAROON_V1, MACAROON_V2

BAKERY_V0 = 0
BAKERY_V1 = 1
BAKERY_V2 = 2
BAKERY_V3 = 3
LATEST_BAKERY_VERSION = BAKERY_V3


def macaroon_version(bakery_version):
    '''Return the macaroon serialization version that corresponds to
    the given bakery version.

    @param bakery_version: one of the BAKERY_V* constants.
    @return: pymacaroons.MACAROON_V1 or pymacaroons.MACAROON_V2.
    '''
    if bakery_version in [BAKERY_V0, BAKERY_V1]:
        return MACAROON_V1
    return MACAROON_V2
