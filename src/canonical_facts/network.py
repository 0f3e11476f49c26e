# Copyright (c) 2016 Red Hat, Inc.
#
# This software is licensed to you under the GNU General Public License,
# version 2 (GPLv2). There is NO WARRANTY for this software, express or
# implied, including the implied warranties of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. You should have received a copy of GPLv2
# along with this software; if not, see
# http://www.gnu.org/licenses/old-licenses/gpl-2.0.txt.
#
# Red Hat trademarks are not licensed under GPLv2. No permission is
# granted to use or replicate Red Hat trademarks that are incorporated
# in this software or its documentation.
#
"""Network interface enumeration for the address canonical facts.

Collection works against a NetworkInterfaceProvider so that it can run on
synthetic interface data. PsutilInterfaceProvider reads the live host.
"""
import ipaddress
import logging
import socket

import psutil

from canonical_facts import exceptions

log = logging.getLogger('rhsm-app.' + __name__)

INET_FAMILIES = (socket.AF_INET, socket.AF_INET6)

wrap_interface_errors = exceptions.source_errors(OSError, psutil.Error)


class NetworkInterface(object):
    def __init__(self, name, addresses=None, hardware_address=None):
        self.name = name
        self.addresses = list(addresses or [])
        self.hardware_address = hardware_address or ''

    def __eq__(self, other):
        if not isinstance(other, NetworkInterface):
            return NotImplemented
        return (self.name, self.addresses, self.hardware_address) == \
            (other.name, other.addresses, other.hardware_address)

    def __repr__(self):
        return "<NetworkInterface name=%s addresses=%s hardware_address=%s>" % \
            (self.name, self.addresses, self.hardware_address)


class NetworkInterfaceProvider(object):
    def interfaces(self):
        """Return a list of NetworkInterface in enumeration order."""
        raise NotImplementedError('Subclasses should define how interfaces are enumerated')


class StaticInterfaceProvider(NetworkInterfaceProvider):
    def __init__(self, interfaces=None):
        self._interfaces = list(interfaces or [])

    def interfaces(self):
        return list(self._interfaces)


class PsutilInterfaceProvider(NetworkInterfaceProvider):
    @wrap_interface_errors
    def interfaces(self):
        result = []
        for name, snics in psutil.net_if_addrs().items():
            addresses = []
            hardware_address = ''
            for snic in snics:
                if snic.family in INET_FAMILIES:
                    # IPv6 link-local addresses carry a "%iface" zone suffix
                    addresses.append(snic.address.split('%', 1)[0])
                elif snic.family == psutil.AF_LINK:
                    hardware_address = normalize_hardware_address(snic.address)
            result.append(NetworkInterface(name, addresses, hardware_address))
        return result


def normalize_hardware_address(address):
    """Lowercase, colon separated hardware address; '' when unset or all zero."""
    if not address:
        return ''
    address = address.lower().replace('-', ':')
    if not address.replace(':', '').strip('0'):
        return ''
    return address


def parse_address(address):
    """Parse a bare or CIDR address string, returning None if it is malformed."""
    try:
        return ipaddress.ip_interface(address.split('%', 1)[0]).ip
    except ValueError:
        return None


def is_link_local(address):
    ip = parse_address(address)
    return ip is not None and ip.is_link_local


@wrap_interface_errors
def collect_ip_addresses(provider):
    addresses = []
    for iface in provider.interfaces():
        for address in iface.addresses:
            ip = parse_address(address)
            if ip is None:
                log.warning("Skipping malformed address %r on interface %s", address, iface.name)
                continue
            if ip.is_link_local:
                continue
            addresses.append(address)
    return addresses


@wrap_interface_errors
def collect_mac_addresses(provider):
    return [iface.hardware_address for iface in provider.interfaces() if iface.hardware_address]
