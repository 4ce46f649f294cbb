# Rendering session trees as native dumps or Org outlines.

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

from . import codec
from .errors import EmptySessionError
from .log import get_logger
from .model import Format


logger = get_logger(__name__)

# Pages of browser extensions (e.g. Tridactyl's new tab page) can't be opened
# from a pasted link, so they are left out of the outlines.
EXTENSION_URL_PREFIX = 'moz-extension'


class OutputMode(enum.Enum):
    NATIVE = 'native'
    ORG = 'org'
    ORG_FLAT = 'org-flat'


def org_link(entry, raw_urls=False):
    if raw_urls:
        return entry.url
    if not entry.title:
        return f"[[{entry.url}]]"
    return f"[[{entry.url}][{entry.title}]]"


def _firefox_tab_lines(tab, stars, history_stars, raw_urls, with_history):
    lines = []
    for entry in tab.entries:
        if not entry.url or entry.url.startswith(EXTENSION_URL_PREFIX):
            logger.debug("Skipping {0!r}", entry.url)
            continue
        lines.append(f"{stars} {org_link(entry, raw_urls)}")
        if not with_history:
            break
        stars = history_stars
    return lines


def _firefox_lines(tree, flat, raw_urls, with_history):
    lines = []
    for i, window in enumerate(tree.windows, start=1):
        if not flat:
            lines.append(f"* window {i}")
        for tab in window.tabs:
            if flat:
                lines.extend(_firefox_tab_lines(tab, '*', '*', raw_urls,
                                                with_history))
            else:
                lines.extend(_firefox_tab_lines(tab, '**', '***', raw_urls,
                                                with_history))
    return lines


def _active_entry(tab):
    for entry in tab.entries:
        if entry.active:
            return entry
    return None


def _qutebrowser_lines(tree, flat, raw_urls):
    lines = []
    stars = '*' if flat else '**'
    for i, window in enumerate(tree.windows, start=1):
        if not flat:
            lines.append(f"* window {i}")
        for tab in window.tabs:
            entry = _active_entry(tab)
            if entry is None or not entry.url:
                continue
            lines.append(f"{stars} {org_link(entry, raw_urls)}")
    return lines


def render_org(tree, flat=False, raw_urls=False, with_history=False):
    """Return the lines of an Org outline of the given session.

    Firefox sessions list the first page of every tab, or the whole tab
    history if ``with_history`` is true. Qutebrowser sessions list the active
    page of every tab. Unless ``flat`` is true, tabs are grouped under a
    ``* window N`` heading per window.

    """
    if tree.format is Format.QUTEBROWSER:
        return _qutebrowser_lines(tree, flat, raw_urls)
    if not with_history:
        logger.debug("Dropping tab history")
    return _firefox_lines(tree, flat, raw_urls, with_history)


def render(tree, mode, raw_urls=False, with_history=False):
    """Return the lines of the given session rendered in the given mode."""
    if tree is None:
        raise EmptySessionError("Cannot render an empty session")
    if mode is OutputMode.NATIVE:
        # Split on newlines only, JSON strings may hold other line breaks.
        return codec.encode(tree).decode('utf-8').rstrip('\n').split('\n')
    return render_org(tree, flat=(mode is OutputMode.ORG_FLAT),
                      raw_urls=raw_urls, with_history=with_history)


def dump(path, tree, mode, raw_urls=False, with_history=False):
    """Write the given session rendered in the given mode to ``path``.

    An existing file is truncated. If writing fails midway, the file is left
    as it is.

    """
    logger.debug("Dumping session to {0} (mode: {1}, raw URLs: {2}, "
                 "history: {3})", path, mode.value, raw_urls, with_history)
    lines = render(tree, mode, raw_urls=raw_urls, with_history=with_history)
    with open(path, 'w', encoding='utf-8', newline='\n') as f:
        for line in lines:
            f.write(f"{line}\n")
