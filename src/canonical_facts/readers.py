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
import os
import socket

from cryptography import x509
from cryptography.x509.oid import NameOID

from canonical_facts import exceptions

log = logging.getLogger('rhsm-app.' + __name__)

PEM_EXTENSION = '.pem'


def _read(path):
    try:
        with open(path, 'rb') as f:
            return f.read()
    except OSError as e:
        log.error("Unable to read %s: %s", path, e)
        raise exceptions.SourceUnavailableError(path, e)


def read_file(path):
    """Return the contents of path with surrounding whitespace removed."""
    # Undecodable bytes are replaced rather than treated as a read failure
    return _read(path).decode('utf-8', 'replace').strip()


def load_certificate(path):
    data = _read(path)
    try:
        if os.path.splitext(path)[1] == PEM_EXTENSION:
            return x509.load_pem_x509_certificate(data)
        return x509.load_der_x509_certificate(data)
    except ValueError as e:
        log.error("Unable to parse certificate %s: %s", path, e)
        raise exceptions.MalformedCertificateError(path, e)


def read_cert(path):
    """Return the subject common name of the certificate at path.

    Files ending in .pem are PEM encoded; anything else is read as raw DER.
    A subject without a common name gives the empty string.
    """
    cert = load_certificate(path)
    # The subject is only decoded when it is first accessed
    try:
        names = cert.subject.get_attributes_for_oid(NameOID.COMMON_NAME)
    except ValueError as e:
        log.error("Unable to parse certificate subject %s: %s", path, e)
        raise exceptions.MalformedCertificateError(path, e)
    if not names:
        log.debug("Certificate %s has no subject common name", path)
        return ''
    return names[0].value


@exceptions.wrap_source_errors
def read_hostname():
    return socket.gethostname()
