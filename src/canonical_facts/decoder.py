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
"""Build CanonicalFacts from an untyped mapping, such as a decoded JSON object."""
import logging

from canonical_facts.exceptions import InvalidValueTypeError
from canonical_facts.facts import CanonicalFacts, FIELDS, SEQUENCE_FIELDS

log = logging.getLogger('rhsm-app.' + __name__)


def extract_string(key, value):
    if not isinstance(value, str):
        raise InvalidValueTypeError(key, value)
    return value


def extract_string_list(key, value):
    # A bare string is iterable, but it is not a list of addresses.
    if not isinstance(value, (list, tuple)):
        raise InvalidValueTypeError(key, value)
    for item in value:
        if not isinstance(item, str):
            raise InvalidValueTypeError(key, value)
    return tuple(value)


def _extractor_for(key):
    if key in SEQUENCE_FIELDS:
        return extract_string_list
    return extract_string


EXTRACTORS = [(key, _extractor_for(key)) for key in FIELDS]


def canonical_facts_from_map(m):
    """Create a CanonicalFacts from the key-value pairs in m.

    Keys that are absent leave the field empty and unknown keys are ignored.
    A value of the wrong type raises InvalidValueTypeError and no facts are
    returned.
    """
    fields = {}
    for key, extract in EXTRACTORS:
        if key not in m:
            continue
        fields[key] = extract(key, m[key])

    ignored = set(m) - set(FIELDS)
    if ignored:
        log.debug("Ignoring unknown canonical fact keys: %s", ", ".join(sorted(str(k) for k in ignored)))

    return CanonicalFacts(**fields)
