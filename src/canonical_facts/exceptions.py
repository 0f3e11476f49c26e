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

import decorator

log = logging.getLogger('rhsm-app.' + __name__)


class FactCollectorError(Exception):
    """Base exception for everything raised while building canonical facts."""
    pass


class SourceUnavailableError(FactCollectorError):
    """A file, certificate or OS facility could not be read."""

    def __init__(self, source, error=None):
        self.source = source
        self.error = error
        msg = "Unable to read %s" % source
        if error is not None:
            msg = "%s: %s" % (msg, error)
        super(SourceUnavailableError, self).__init__(msg)


class MalformedCertificateError(FactCollectorError):
    def __init__(self, path, error=None):
        self.path = path
        self.error = error
        msg = "Unable to parse certificate %s" % path
        if error is not None:
            msg = "%s: %s" % (msg, error)
        super(MalformedCertificateError, self).__init__(msg)


class InvalidValueTypeError(FactCollectorError):
    """A value in a fact map does not have the type its key requires."""

    def __init__(self, key, value):
        self.key = key
        self.value = value
        super(InvalidValueTypeError, self).__init__(
            "Invalid value type for '%s': %r (%s)" % (key, value, type(value).__name__)
        )


def source_errors(*error_classes):
    """Decorator factory turning errors raised by an OS facility into
    SourceUnavailableError.

    The wrapped function's name is used as the source unless the function
    raises a FactCollectorError of its own, which is passed through.
    """
    error_classes = error_classes or (OSError,)

    @decorator.decorator
    def wrapper(func, *args, **kwargs):
        try:
            return func(*args, **kwargs)
        except FactCollectorError:
            raise
        except error_classes as e:
            log.exception(e)
            raise SourceUnavailableError(func.__name__, e)

    return wrapper


wrap_source_errors = source_errors()
