# Talking to a running Qutebrowser through its IPC socket.

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

import getpass
import hashlib
import json
import os
import socket

from .log import get_logger


logger = get_logger(__name__)

PROTOCOL_VERSION = 1


def socket_path(uid=None, username=None):
    """Return the path of the IPC socket of the user's Qutebrowser."""
    uid = os.getuid() if uid is None else uid
    username = getpass.getuser() if username is None else username
    digest = hashlib.md5(username.encode('utf-8')).hexdigest()
    path = f'/run/user/{uid}/qutebrowser/ipc-{digest}'
    logger.debug("Qutebrowser socket path: {0}", path)
    return path


def ipc_request(commands):
    """Return the IPC request running the given commands."""
    request = {
        'args': list(commands),
        'target_arg': '',
        'protocol_version': PROTOCOL_VERSION,
    }
    return json.dumps(request).encode('utf-8') + b'\n'


def send_commands(path, commands):
    """Send the given commands to the Qutebrowser listening on ``path``."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Qutebrowser socket {path} doesn't exist")
    logger.debug("Sending {0} to {1}", commands, path)
    with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
        sock.connect(path)
        sock.sendall(ipc_request(commands))


def save_session(path, name):
    """Ask Qutebrowser to save its session as ``name`` and as the default."""
    send_commands(path, [
        f':session-save --quiet {name}',
        ':session-save --quiet',
    ])
