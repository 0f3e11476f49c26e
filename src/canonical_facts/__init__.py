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
from canonical_facts.collector import CanonicalFactsCollector, get_canonical_facts
from canonical_facts.decoder import canonical_facts_from_map
from canonical_facts.exceptions import (FactCollectorError, SourceUnavailableError,
                                        MalformedCertificateError, InvalidValueTypeError)
from canonical_facts.facts import CanonicalFacts

__all__ = [
    'CanonicalFacts',
    'CanonicalFactsCollector',
    'FactCollectorError',
    'InvalidValueTypeError',
    'MalformedCertificateError',
    'SourceUnavailableError',
    'canonical_facts_from_map',
    'get_canonical_facts',
]
