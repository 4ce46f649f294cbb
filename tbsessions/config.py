# Settings shared by the session tools.

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

import os

from . import ui
from .log import get_logger


ENV_PREFIX = 'TB'

FIREFOX_SESSIONS_SUBPATH = os.path.join(
    '.mozilla', 'firefox', 'profile.default', 'sessionstore-backups'
)
QUTEBROWSER_SESSIONS_SUBPATH = os.path.join(
    '.local', 'share', 'qutebrowser', 'sessions'
)


def env_var(name):
    """Return the name of the environment variable for the given setting."""
    return f'{ENV_PREFIX}_{name}'


def firefox_sessions_path():
    return os.path.join(os.path.expanduser('~'), FIREFOX_SESSIONS_SUBPATH)


def qutebrowser_sessions_path():
    return os.path.join(os.path.expanduser('~'), QUTEBROWSER_SESSIONS_SUBPATH)


class Context:
    """Settings and collaborators of a single tool invocation.

    The command line layer builds one and passes it to the pipeline.

    """

    def __init__(self, selector_tool=ui.DEFAULT_SELECTOR_TOOL,
                 selector_font=None, logger=None):
        self.selector_tool = selector_tool
        self.selector_font = selector_font
        self.logger = logger or get_logger('tbsessions')

    def select(self, options, prompt):
        return ui.select(options, prompt, tool=self.selector_tool,
                         font=self.selector_font)

    def notify(self, title, message, critical=False):
        ui.notify(title, message, critical=critical)
