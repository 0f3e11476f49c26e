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
import configparser
import logging
import os

log = logging.getLogger('rhsm-app.' + __name__)

DEFAULT_CONFIG_DIR = os.path.join('/', 'etc', 'rhsm')
DEFAULT_CONFIG_FILE = os.path.join(DEFAULT_CONFIG_DIR, 'canonical-facts.conf')

FACTS_SECTION = 'canonical_facts'
LOGGING_SECTION = 'logging'

DEFAULTS = {
    FACTS_SECTION: {
        'insights_id_path': '/etc/insights-client/machine-id',
        'machine_id_path': '/etc/machine-id',
        'bios_uuid_path': '/sys/devices/virtual/dmi/id/product_uuid',
        'consumer_cert_path': '/etc/pki/consumer/cert.pem',
    },
    LOGGING_SECTION: {
        'default_log_level': 'INFO',
    },
}


def init_config(config_file=None):
    """Return a parser holding the defaults, overridden by config_file.

    A config file that does not exist leaves the defaults in place.
    """
    parser = configparser.RawConfigParser()
    parser.read_dict(DEFAULTS)
    config_file = config_file or DEFAULT_CONFIG_FILE
    read = parser.read(config_file)
    if read:
        log.debug("Loaded configuration from %s", config_file)
    else:
        log.debug("No configuration at %s, using defaults", config_file)
    return parser


class ProtoDict(object):
    """Standard dict methods that are not dependent on underlying structure."""
    def keys(self):
        return list(self)

    def values(self):
        return [self[key] for key in self]

    def items(self):
        return [(key, self[key]) for key in self]

    def get(self, key, default=None):
        if key not in self:
            return default
        return self[key]


class Config(ProtoDict):
    def __init__(self, parser=None):
        if parser is not None:
            self._parser = parser
        else:
            self._parser = init_config()

        self._sections = {}
        for s in self._parser.sections():
            self._sections[s] = ConfigSection(self._parser, s)
        super(Config, self).__init__()

    def __getitem__(self, name):
        if name in self:
            return self._sections[name]
        raise KeyError("No configuration section '%s' exists" % name)

    def __contains__(self, key):
        return key in self._sections

    def __iter__(self):
        return iter(self._parser.sections())

    def __len__(self):
        return len(self._parser.sections())

    def __repr__(self):
        result = {}
        for name, s in self._sections.items():
            result[name] = repr(s)
        return "%s" % result


class ConfigSection(ProtoDict):
    def __init__(self, parser, section):
        self._parser = parser
        self._section = section

    def __iter__(self):
        return iter(self._parser.options(self._section))

    def __getitem__(self, key):
        if key in self:
            return self._parser.get(self._section, key)
        raise KeyError("Property '%s' does not exist in section '%s'" % (key, self._section))

    def __contains__(self, key):
        return self._parser.has_option(self._section, key)

    def __len__(self):
        return len(self._parser.options(self._section))

    def __repr__(self):
        return "%s" % self._parser.items(self._section)
