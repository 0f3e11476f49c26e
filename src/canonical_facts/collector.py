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
import logging

from canonical_facts import network
from canonical_facts import readers
from canonical_facts.config import Config, DEFAULTS, FACTS_SECTION
from canonical_facts.facts import CanonicalFacts

log = logging.getLogger('rhsm-app.' + __name__)


class CanonicalFactsCollector(object):
    """Collect canonical facts from the local host.

    Sources are read one after another and the first failure is raised;
    no facts are returned unless every source could be read.
    """

    def __init__(self, config=None, interface_provider=None, hostname_func=None):
        if config is None:
            config = Config()
        elif not isinstance(config, Config):
            config = Config(config)
        self.config = config
        self.interface_provider = interface_provider or network.PsutilInterfaceProvider()
        self.hostname_func = hostname_func or readers.read_hostname

    def _path(self, option):
        section = self.config.get(FACTS_SECTION) or {}
        return section.get(option) or DEFAULTS[FACTS_SECTION][option]

    def collect(self):
        facts = {}

        insights_id_path = self._path('insights_id_path')
        log.debug("Reading insights id from %s", insights_id_path)
        facts['insights_id'] = readers.read_file(insights_id_path)

        machine_id_path = self._path('machine_id_path')
        log.debug("Reading machine id from %s", machine_id_path)
        facts['machine_id'] = readers.read_file(machine_id_path)

        bios_uuid_path = self._path('bios_uuid_path')
        log.debug("Reading BIOS UUID from %s", bios_uuid_path)
        facts['bios_uuid'] = readers.read_file(bios_uuid_path)

        consumer_cert_path = self._path('consumer_cert_path')
        log.debug("Reading consumer certificate %s", consumer_cert_path)
        facts['subscription_manager_id'] = readers.read_cert(consumer_cert_path)

        facts['ip_addresses'] = network.collect_ip_addresses(self.interface_provider)
        log.debug("Collected %d IP addresses", len(facts['ip_addresses']))

        facts['fqdn'] = self.hostname_func()

        facts['mac_addresses'] = network.collect_mac_addresses(self.interface_provider)
        log.debug("Collected %d MAC addresses", len(facts['mac_addresses']))

        return CanonicalFacts(**facts)


def get_canonical_facts(config=None):
    return CanonicalFactsCollector(config=config).collect()
