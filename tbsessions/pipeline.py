# Load, fix and dump steps combined for the command line tools.

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

from . import codec, render
from .fix import fix_session
from .model import Format
from .render import OutputMode


def dump_session(context, source, destination, fmt, mode, raw_urls=False,
                 with_history=False, fix=False):
    """Load the session at ``source`` and dump it to ``destination``."""
    context.logger.info("Dumping {0} to {1}...", source, destination)
    tree = codec.load(source, fmt)
    if fix:
        tree = fix_session(tree)
    render.dump(destination, tree, mode, raw_urls=raw_urls,
                with_history=with_history)
    context.logger.info("Successfully dumped {0}", destination)
    return destination


def export_session(context, sessions_path, name, export_path,
                   mode=OutputMode.ORG, raw_urls=True):
    """Export the Qutebrowser session ``name`` as an Org outline.

    The outline is written to ``export_path`` and named after the session,
    with everything after the first dot replaced by ``.org``.

    """
    basename = name.split('.')[0]
    return dump_session(
        context,
        os.path.join(sessions_path, name),
        os.path.join(export_path, f'{basename}.org'),
        Format.QUTEBROWSER,
        mode,
        raw_urls=raw_urls,
    )


def fix_session_file(context, path, destination=None):
    """Remove dead pages from the Qutebrowser session at ``path``.

    The fixed session overwrites the original unless ``destination`` is
    given.

    """
    return dump_session(context, path, destination or path,
                        Format.QUTEBROWSER, OutputMode.NATIVE, fix=True)
