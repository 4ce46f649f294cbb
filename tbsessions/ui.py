# Selector (dmenu, rofi, bemenu) and desktop notification helpers.

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

import shutil
import subprocess

from .errors import SelectorError
from .log import get_logger


logger = get_logger(__name__)

SELECTOR_TOOLS = ('dmenu', 'rofi', 'bemenu')
DEFAULT_SELECTOR_TOOL = 'dmenu'
# Maximum number of lines a vertical dmenu/bemenu list is allowed to occupy.
MAX_LINES = 15

APP_NAME = 'toolbox'

FONT_FLAGS = {
    'dmenu': '-fn',
    'rofi': '-font',
    'bemenu': '--fn',
}


def _selector_command(tool, options, prompt, case_insensitive, font):
    if tool == 'rofi':
        command = ['rofi', '-dmenu', '-sep', '\n', '-p', prompt]
    else:
        lines = min(len(options), MAX_LINES) or 1
        command = [tool, '-p', prompt, '-l', str(lines)]
    if case_insensitive:
        command.append('-i')
    if font:
        command.extend([FONT_FLAGS[tool], font])
    return command


def select(options, prompt, tool=DEFAULT_SELECTOR_TOOL, font=None,
           case_insensitive=True):
    """Let the user pick one of the given options.

    With no options, the selector works as a free-text prompt. Return the
    selected (or entered) text, or ``None`` if the user made no selection.

    """
    if tool not in SELECTOR_TOOLS:
        raise SelectorError(f"Unknown selector tool: '{tool}'")
    if shutil.which(tool) is None:
        raise SelectorError(f"Selector tool '{tool}' is not installed")
    options = sorted(options)
    command = _selector_command(tool, options, prompt, case_insensitive, font)
    logger.debug("Running {0} with {1} option(s)", command, len(options))
    result = subprocess.run(
        command,
        input='\n'.join(options),
        stdout=subprocess.PIPE,
        universal_newlines=True,
    )
    # dmenu and friends exit with 1 when the selection is cancelled.
    selection = result.stdout.strip()
    if result.returncode != 0 or not selection:
        logger.debug("No selection (exit status {0})", result.returncode)
        return None
    return selection


def notify(title, message, critical=False):
    """Show a desktop notification, ignoring any failure to do so."""
    urgency = 'critical' if critical else 'normal'
    if shutil.which('notify-send') is None:
        logger.warning("Can't notify '{0}: {1}', notify-send is not installed",
                       title, message)
        return
    subprocess.run(
        ['notify-send', '--app-name', APP_NAME, '--urgency', urgency,
         title, message],
    )
