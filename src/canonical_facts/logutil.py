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

from canonical_facts.config import Config, LOGGING_SECTION

ROOT_LOGGER = 'rhsm-app'
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s:%(lineno)s - %(message)s'
DEFAULT_LOG_LEVEL = logging.INFO


def get_log_level(config):
    section = config.get(LOGGING_SECTION) or {}
    level_name = section.get('default_log_level', '')
    level = logging.getLevelName(level_name.strip().upper())
    # getLevelName hands back a "Level x" string for names it does not know
    if not isinstance(level, int):
        return DEFAULT_LOG_LEVEL
    return level


def init_logger(config=None):
    """Configure the rhsm-app logger from the [logging] section.

    Safe to call more than once; only one handler is attached.
    """
    if config is None:
        config = Config()
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(get_log_level(config))

    if not any(getattr(h, '_canonical_facts', False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._canonical_facts = True
        logger.addHandler(handler)
    return logger
