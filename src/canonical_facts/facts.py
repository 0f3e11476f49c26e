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
import collections
import json

# Order matches the serialized form.
SCALAR_FIELDS = ('insights_id', 'machine_id', 'bios_uuid', 'subscription_manager_id', 'fqdn')
SEQUENCE_FIELDS = ('ip_addresses', 'mac_addresses')
FIELDS = ('insights_id', 'machine_id', 'bios_uuid', 'subscription_manager_id',
          'ip_addresses', 'fqdn', 'mac_addresses')

_CanonicalFactsBase = collections.namedtuple('_CanonicalFactsBase', FIELDS)


class CanonicalFacts(_CanonicalFactsBase):
    """Identification strings that together identify a system to the
    platform inventory.

    Every field is optional. A missing scalar is the empty string and a
    missing address list is the empty tuple. Instances are immutable.
    """
    __slots__ = ()

    def __new__(cls, insights_id='', machine_id='', bios_uuid='', subscription_manager_id='',
                ip_addresses=(), fqdn='', mac_addresses=()):
        return super(CanonicalFacts, cls).__new__(
            cls,
            insights_id=insights_id,
            machine_id=machine_id,
            bios_uuid=bios_uuid,
            subscription_manager_id=subscription_manager_id,
            ip_addresses=tuple(ip_addresses),
            fqdn=fqdn,
            mac_addresses=tuple(mac_addresses),
        )

    def to_dict(self):
        result = {}
        for name in FIELDS:
            value = getattr(self, name)
            if name in SEQUENCE_FIELDS:
                value = list(value)
            result[name] = value
        return result

    def to_json(self, **kwargs):
        return json.dumps(self.to_dict(), **kwargs)

    def __str__(self):
        return "<CanonicalFacts machine_id=%s insights_id=%s subscription_manager_id=%s fqdn=%s>" % \
            (self.machine_id, self.insights_id, self.subscription_manager_id, self.fqdn)
