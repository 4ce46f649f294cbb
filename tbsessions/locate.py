# Finding, picking and rotating session files on disk.

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

import datetime
import os
import re
import time

from .log import get_logger


logger = get_logger(__name__)

RECOVERY_SESSION = 'recovery.jsonlz4'
PREVIOUS_SESSION = 'previous.jsonlz4'

TIMED_SESSION_NAME = (
    r'session-(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})'
    r'-[0-9]{2}-[0-9]{2}-[0-9]{2}'
)


def timestamp(now=None):
    """Return a ``YYYY-MM-DD-HH-MM-SS`` time stamp for file names."""
    now = now or datetime.datetime.now()
    return now.strftime('%Y-%m-%d-%H-%M-%S')


def latest_session_file(root):
    """Return the path of the Firefox session to dump from ``root``.

    The recovery session is preferred whenever it exists, no matter how old
    it is compared to the previous session.

    """
    recovery = os.path.join(root, RECOVERY_SESSION)
    if os.path.exists(recovery):
        return recovery
    return os.path.join(root, PREVIOUS_SESSION)


def _regular_files(root):
    with os.scandir(root) as it:
        return sorted(e.name for e in it if e.is_file())


def collect_files(root, patterns=None, full_path=False):
    """Return the sorted names of files in ``root`` matching any pattern.

    ``patterns`` are regular expressions searched for in file names. If it is
    ``None``, all regular files are returned.

    """
    regexes = [re.compile(p) for p in patterns] if patterns is not None else None
    result = []
    for name in _regular_files(root):
        if regexes is not None and not any(r.search(name) for r in regexes):
            continue
        result.append(os.path.join(root, name) if full_path else name)
    logger.debug("Collected {0} file(s) from {1}", len(result), root)
    return result


def select_session(context, root, prompt, patterns=None):
    """Let the user pick one of the session files in ``root``.

    Return the selected file name, or ``None`` if nothing was selected.

    """
    files = collect_files(root, patterns)
    selection = context.select(files, prompt)
    logger.debug("Selected session: {0}", selection)
    return selection


def _change_time(path):
    return os.stat(path).st_ctime


def files_older_than(root, threshold, pattern=None, now=None):
    """Return paths of files in ``root`` changed before ``now - threshold``.

    ``threshold`` is a :class:`datetime.timedelta`. If ``pattern`` is given,
    files whose names don't match this regular expression are never
    returned.

    """
    now = time.time() if now is None else now
    cutoff = now - threshold.total_seconds()
    regex = re.compile(pattern) if pattern is not None else None
    result = []
    for name in _regular_files(root):
        if regex is not None and not regex.search(name):
            continue
        path = os.path.join(root, name)
        if _change_time(path) < cutoff:
            result.append(path)
    return result


def rotate_older_than(root, threshold, pattern=None, now=None):
    """Delete files in ``root`` changed before ``now - threshold``.

    Return the paths of the deleted files.

    """
    removed = []
    for path in files_older_than(root, threshold, pattern, now):
        os.remove(path)
        logger.info("Removed {0}", path)
        removed.append(path)
    return removed
