# Copyright 2017 Canonical Ltd.
# Licensed under the LGPLv3, see LICENCE file for details.

import pymacaroons

from macaroonconstraints.checkers import parse_caveat
from macaroonconstraints.versions import (
    LATEST_BAKERY_VERSION, macaroon_version
)


class Macaroon(object):
    '''Represent a macaroon that can be attenuated with first party
    caveats. Third party caveats are not supported.
    '''
    def __init__(self, root_key, id, location=None,
                 version=LATEST_BAKERY_VERSION):
        '''Creates a new macaroon with the given root key, id and location.

        @param root_key the root key used to sign the macaroon (bytes).
        @param id the macaroon identifier.
        @param location the location of the macaroon.
        @param version the bakery version, one of the BAKERY_V* constants.
        '''
        self._version = version
        self._macaroon = pymacaroons.Macaroon(
            location=location, key=root_key, identifier=id,
            version=macaroon_version(version))

    @property
    def macaroon(self):
        ''' Return the underlying pymacaroons.Macaroon.
        '''
        return self._macaroon

    @property
    def version(self):
        return self._version

    def add_caveat(self, cav):
        '''Add a first party caveat to the macaroon.

        @param cav the checkers.Caveat to be added.
        @return the macaroon itself.
        @raise ValueError if the caveat has a location or its condition
        is malformed.
        '''
        if cav.location is not None:
            raise ValueError('third party caveats not supported')
        parse_caveat(cav.condition)
        self._macaroon.add_first_party_caveat(cav.condition)
        return self

    def first_party_caveats(self):
        return self._macaroon.first_party_caveats()

    def copy(self):
        ''' Returns an independent copy of the macaroon. Caveats added to
        the copy do not affect the original.
        :return a Macaroon
        '''
        m1 = Macaroon(None, None, version=self._version)
        m1._macaroon = self._macaroon.copy()
        return m1
