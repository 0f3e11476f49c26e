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
import socket

import mock

from canonical_facts import readers
from canonical_facts.exceptions import MalformedCertificateError, SourceUnavailableError

from canonical_facts_test.base import (CONSUMER_UUID, TempDirTest, der_bytes, make_certificate,
                                       pem_bytes)


class TestReadFile(TempDirTest):
    def test_strips_whitespace(self):
        path = self.write_file('machine-id', '  0c5b2e1f4e1c4a0bbd2f1f4a9e2d3c4b\n\n')
        self.assertEqual('0c5b2e1f4e1c4a0bbd2f1f4a9e2d3c4b', readers.read_file(path))

    def test_empty_file(self):
        path = self.write_file('machine-id', '\n')
        self.assertEqual('', readers.read_file(path))

    def test_missing_file(self):
        path = self.missing_path('machine-id')
        with self.assertRaises(SourceUnavailableError) as cm:
            readers.read_file(path)
        self.assertEqual(path, cm.exception.source)
        self.assertTrue(isinstance(cm.exception.error, OSError))

    def test_undecodable_bytes_replaced(self):
        path = self.write_file('machine-id', b'\xff\xfe0c5b2e1f\n')
        self.assertEqual('\ufffd\ufffd0c5b2e1f', readers.read_file(path))

    def test_directory_is_unreadable(self):
        with self.assertRaises(SourceUnavailableError):
            readers.read_file(self.tmp_dir)


class TestReadCert(TempDirTest):
    def setUp(self):
        super(TestReadCert, self).setUp()
        self.cert = make_certificate()

    def test_pem(self):
        path = self.write_file('cert.pem', pem_bytes(self.cert))
        self.assertEqual(CONSUMER_UUID, readers.read_cert(path))

    def test_der(self):
        path = self.write_file('cert.der', der_bytes(self.cert))
        self.assertEqual(CONSUMER_UUID, readers.read_cert(path))

    def test_der_content_in_pem_file(self):
        path = self.write_file('cert.pem', der_bytes(self.cert))
        with self.assertRaises(MalformedCertificateError) as cm:
            readers.read_cert(path)
        self.assertEqual(path, cm.exception.path)

    def test_pem_content_without_pem_extension(self):
        path = self.write_file('cert.crt', pem_bytes(self.cert))
        with self.assertRaises(MalformedCertificateError):
            readers.read_cert(path)

    def test_garbage(self):
        path = self.write_file('cert.pem', b'-----BEGIN CERTIFICATE-----\nnope\n-----END CERTIFICATE-----\n')
        with self.assertRaises(MalformedCertificateError):
            readers.read_cert(path)

    def test_corrupt_subject(self):
        data = der_bytes(make_certificate(common_name='ZZZZZZZZ'))
        self.assertIn(b'ZZZZZZZZ', data)
        path = self.write_file('cert.der', data.replace(b'ZZZZZZZZ', b'\xff' * 8))
        with self.assertRaises(MalformedCertificateError) as cm:
            readers.read_cert(path)
        self.assertEqual(path, cm.exception.path)

    def test_no_common_name(self):
        path = self.write_file('cert.pem', pem_bytes(make_certificate(common_name=None)))
        self.assertEqual('', readers.read_cert(path))

    def test_missing_cert(self):
        with self.assertRaises(SourceUnavailableError):
            readers.read_cert(self.missing_path('cert.pem'))


class TestReadHostname(TempDirTest):
    @mock.patch('canonical_facts.readers.socket.gethostname')
    def test_hostname(self, mock_gethostname):
        mock_gethostname.return_value = 'host.example.com'
        self.assertEqual('host.example.com', readers.read_hostname())

    @mock.patch('canonical_facts.readers.socket.gethostname')
    def test_hostname_failure(self, mock_gethostname):
        mock_gethostname.side_effect = socket.error('no hostname')
        with self.assertRaises(SourceUnavailableError) as cm:
            readers.read_hostname()
        self.assertEqual('read_hostname', cm.exception.source)
