# Converting Firefox and Qutebrowser session files to and from session trees.

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

# NOTE: The Firefox sessionstore format is loosely documented at:
# https://wiki.mozilla.org/Firefox/session_restore#The_structure_of_sessionstore.js
# Only the windows -> tabs -> entries skeleton is kept, other fields are
# dropped.

import datetime
import json

import yaml

from . import mozlz4
from .errors import ParseError
from .log import get_logger
from .model import Format, HistoryEntry, SessionTree, Tab, Window


logger = get_logger(__name__)

# Errors that reveal a payload which is valid JSON/YAML, but doesn't have the
# shape of a session.
_STRUCTURE_ERRORS = (AttributeError, KeyError, TypeError, ValueError)


def _text(value):
    return '' if value is None else str(value)


def _firefox_tree(raw):
    windows = []
    for w in raw.get('windows') or []:
        tabs = []
        for t in w.get('tabs') or []:
            entries = [
                HistoryEntry(
                    url=_text(e.get('url')),
                    title=_text(e.get('title')),
                    original_uri=e.get('originalURI'),
                )
                for e in t.get('entries') or []
            ]
            tabs.append(Tab(entries=entries))
        windows.append(Window(tabs=tabs))
    return SessionTree(windows=windows, format=Format.FIREFOX)


def _decode_firefox(data):
    try:
        raw = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"Invalid Firefox session JSON: {e}", e) from e
    if raw is None:
        return SessionTree(format=Format.FIREFOX)
    try:
        return _firefox_tree(raw)
    except _STRUCTURE_ERRORS as e:
        raise ParseError(f"Unexpected Firefox session layout: {e!r}", e) from e


def _encode_firefox(tree):
    windows = []
    for w in tree.windows:
        tabs = []
        for t in w.tabs:
            entries = []
            for e in t.entries:
                entry = {'url': e.url, 'title': e.title}
                if e.original_uri is not None:
                    entry['originalURI'] = e.original_uri
                entries.append(entry)
            tabs.append({'entries': entries})
        windows.append({'tabs': tabs})
    return json.dumps({'windows': windows}, ensure_ascii=False).encode('utf-8')


def _last_visited(value):
    # PyYAML resolves unquoted ISO 8601 timestamps to datetime objects.
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return None if value is None else str(value)


def _qutebrowser_entry(h):
    scroll_pos = h.get('scroll_pos') or {}
    return HistoryEntry(
        url=_text(h.get('url')),
        title=_text(h.get('title')),
        active=bool(h.get('active', False)),
        last_visited=_last_visited(h.get('last_visited')),
        pinned=bool(h.get('pinned', False)),
        scroll_pos=(int(scroll_pos.get('x', 0)), int(scroll_pos.get('y', 0))),
        zoom=float(h.get('zoom', 1.0)),
    )


def _qutebrowser_tree(raw):
    windows = []
    for w in raw.get('windows') or []:
        tabs = [
            Tab(entries=[_qutebrowser_entry(h) for h in t.get('history') or []],
                active=bool(t.get('active', False)))
            for t in w.get('tabs') or []
        ]
        windows.append(Window(tabs=tabs, geometry=w.get('geometry')))
    return SessionTree(windows=windows, format=Format.QUTEBROWSER)


def _decode_qutebrowser(data):
    try:
        raw = yaml.safe_load(data)
    except yaml.YAMLError as e:
        raise ParseError(f"Invalid Qutebrowser session YAML: {e}", e) from e
    if raw is None:
        return SessionTree(format=Format.QUTEBROWSER)
    try:
        return _qutebrowser_tree(raw)
    except _STRUCTURE_ERRORS as e:
        raise ParseError(
            f"Unexpected Qutebrowser session layout: {e!r}", e
        ) from e


def _encode_qutebrowser(tree):
    windows = []
    for w in tree.windows:
        window = {}
        if w.geometry is not None:
            window['geometry'] = w.geometry
        window['tabs'] = []
        for t in w.tabs:
            history = []
            for e in t.entries:
                entry = {'active': e.active}
                if e.last_visited is not None:
                    entry['last_visited'] = e.last_visited
                entry['pinned'] = e.pinned
                entry['scroll_pos'] = {'x': e.scroll_pos[0],
                                       'y': e.scroll_pos[1]}
                entry['title'] = e.title
                entry['url'] = e.url
                entry['zoom'] = e.zoom
                history.append(entry)
            window['tabs'].append({'active': t.active, 'history': history})
        windows.append(window)
    text = yaml.safe_dump({'windows': windows}, default_flow_style=False,
                          allow_unicode=True, sort_keys=False)
    return text.encode('utf-8')


_CODECS = {
    Format.FIREFOX: (_decode_firefox, _encode_firefox),
    Format.QUTEBROWSER: (_decode_qutebrowser, _encode_qutebrowser),
}


def decode(data, fmt):
    """Deserialize the given session payload into a session tree."""
    decoder, _ = _CODECS[fmt]
    return decoder(data)


def encode(tree):
    """Serialize the given session tree into its native format."""
    _, encoder = _CODECS[tree.format]
    return encoder(tree)


def load(path, fmt):
    """Load the session file at the given path.

    Firefox files starting with the mozLz4 magic (e.g. ``recovery.jsonlz4`` or
    ``upgrade.jsonlz4-<build id>``) are decompressed first, all other files are
    parsed as they are.

    """
    logger.debug("Loading {0} session from {1}", fmt.value, path)
    with open(path, 'rb') as f:
        data = f.read()
    if fmt is Format.FIREFOX and data.startswith(mozlz4.MAGIC):
        data = mozlz4.decompress(data)
    tree = decode(data, fmt)
    logger.debug("Loaded {0} window(s) with {1} history entries",
                 len(tree.windows), sum(1 for _ in tree.iter_entries()))
    return tree
