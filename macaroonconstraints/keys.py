# Copyright 2017 Canonical Ltd.
# Licensed under the LGPLv3, see LICENCE file for details.

import nacl.utils

ROOT_KEY_LEN = 24


def generate_root_key(size=ROOT_KEY_LEN):
    '''Generate a new random root key for minting macaroons.
    :return: the key as bytes.
    '''
    if size <= 0:
        raise ValueError('root key size must be positive')
    return nacl.utils.random(size)
