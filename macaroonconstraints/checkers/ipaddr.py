# Copyright 2017 Canonical Ltd.
# Licensed under the LGPLv3, see LICENCE file for details.

import ipaddress


def parse_ip_addr(s):
    '''Parse an IPv4 or IPv6 address into a form that compares equal
    for every textual variant of the same address.

    A non-empty zone is dropped from an IPv6 address and an IPv4-mapped
    IPv6 address is returned as its IPv4 address.
    @raise ValueError when s is not an IP address.
    '''
    host, sep, zone = s.partition('%')
    if sep:
        if zone == '':
            raise ValueError('empty zone in IP address "{}"'.format(s))
        addr = ipaddress.ip_address(host)
        if addr.version != 6:
            raise ValueError('zone on non IPv6 address "{}"'.format(s))
    else:
        addr = ipaddress.ip_address(s)
    if addr.version == 6 and addr.ipv4_mapped is not None:
        return addr.ipv4_mapped
    return addr
