# The generic in-memory session tree: windows, tabs and history entries.

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

import enum
from dataclasses import dataclass, field


class Format(enum.Enum):
    """Source format of a session, i.e. the browser family it comes from."""

    # JSON payload, stored inside a mozLz4 container on disk.
    FIREFOX = 'firefox'
    # Plain YAML.
    QUTEBROWSER = 'qutebrowser'


@dataclass
class HistoryEntry:
    """A single page in a tab's history.

    ``original_uri`` is only tracked for Firefox sessions. ``last_visited``,
    ``pinned``, ``scroll_pos`` and ``zoom`` are only tracked for Qutebrowser
    sessions; they are kept so that native dumps round-trip, but Org outlines
    ignore them.

    """
    url: str = ''
    title: str = ''
    active: bool = False
    original_uri: str = None
    last_visited: str = None
    pinned: bool = False
    scroll_pos: tuple = (0, 0)
    zoom: float = 1.0


@dataclass
class Tab:
    # Oldest entry first.
    entries: list = field(default_factory=list)
    active: bool = False


@dataclass
class Window:
    tabs: list = field(default_factory=list)
    # Passed through verbatim, never interpreted.
    geometry: object = None


@dataclass
class SessionTree:
    windows: list = field(default_factory=list)
    format: Format = Format.FIREFOX

    def iter_entries(self):
        """Yield ``(window_index, tab, entry)`` for every history entry."""
        for i, window in enumerate(self.windows):
            for tab in window.tabs:
                for entry in tab.entries:
                    yield i, tab, entry
