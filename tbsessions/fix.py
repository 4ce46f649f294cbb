# Pruning dead pages from saved Qutebrowser sessions.

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

import dataclasses

from .log import get_logger
from .model import SessionTree, Tab, Window


logger = get_logger(__name__)

DEAD_TITLE_PREFIX = 'Error loading'
DEAD_URL_PREFIX = 'data:text/html'


def _is_dead(entry):
    return (entry.title.startswith(DEAD_TITLE_PREFIX) or
            entry.url.startswith(DEAD_URL_PREFIX))


def _fix_tab(tab):
    entries = [dataclasses.replace(e) for e in tab.entries if not _is_dead(e)]
    dropped = len(tab.entries) - len(entries)
    if dropped:
        logger.debug("Dropped {0} dead page(s) from tab", dropped)
    if entries:
        entries[-1] = dataclasses.replace(
            entries[-1], scroll_pos=(0, 0), active=True, zoom=1.0
        )
    return Tab(entries=entries, active=tab.active)


def fix_session(tree):
    """Return a copy of the given session with dead pages removed.

    Every history entry that is an error page (its title starts with
    "Error loading") or an inline placeholder (its URL starts with
    "data:text/html") is dropped. The last remaining entry of each tab is then
    made the active one, scrolled to the top and reset to 100% zoom.

    Tabs and windows that end up empty are kept. The given tree is not
    modified.

    """
    windows = [
        Window(tabs=[_fix_tab(t) for t in w.tabs], geometry=w.geometry)
        for w in tree.windows
    ]
    return SessionTree(windows=windows, format=tree.format)
