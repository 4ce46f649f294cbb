# Logging set-up shared by the session tools.

# Copyright 2017, 2018 Tadej Janež.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import os


# Setting this environment variable (to any value) enables debug output.
DEBUG_FLAG_NAME = 'DEBUG_MODE'

_PACKAGE_LOGGER = 'tbsessions'


class _BraceString(str):
    def __mod__(self, other):
        return self.format(*other)
    def __str__(self):
        return self


class _StyleAdapter(logging.LoggerAdapter):

    def __init__(self, logger, extra=None):
        super().__init__(logger, extra)

    def process(self, msg, kwargs):
        return _BraceString(msg), kwargs


def get_logger(name):
    """Return a logger that accepts ``str.format()`` style messages."""
    return _StyleAdapter(logging.getLogger(name))


def setup_logging(log_file=None, debug=None):
    """Set up logging for the package's loggers.

    Messages go to stderr at WARNING level, or at DEBUG level if ``debug`` is
    true or the ``DEBUG_MODE`` environment variable is set. If ``log_file`` is
    given, DEBUG messages and higher are also written to the given file.

    """
    if debug is None:
        debug = DEBUG_FLAG_NAME in os.environ

    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG)
    # Calling this more than once must not duplicate output.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Create a custom log messages formatter.
    formatter = logging.Formatter(
        fmt='{asctime} {levelname:8} {name}: {message}',
        datefmt='%Y-%m-%d %H:%M:%S',
        style='{'
    )

    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG if debug else logging.WARNING)
    console.setFormatter(formatter)
    logger.addHandler(console)

    # Configure logging to a file if log file is given
    if log_file:
        # Define a Handler which writes DEBUG messages or higher to log_file.
        file_handler = logging.FileHandler(log_file, mode='w')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return _StyleAdapter(logger)
