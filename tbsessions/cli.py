# Pieces shared by the ffsessions and qbsessions command line tools.

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

import contextlib
import functools

import click

from . import ui
from .config import Context, env_var
from .errors import SelectorError, SessionError
from .log import setup_logging


def common_options(func):
    """Add the selector and logging options to a command group."""
    @click.option('--selector-tool', '-T', envvar=env_var('SELECTOR_TOOL'),
                  type=click.Choice(ui.SELECTOR_TOOLS),
                  default=ui.DEFAULT_SELECTOR_TOOL, show_default=True,
                  help="Selector tool to use, e.g. dmenu, rofi, etc.")
    @click.option('--selector-font', '-f', envvar=env_var('SELECTOR_FONT'),
                  help="Font to use for the selector tool.")
    @click.option('--log-file', '-l', type=click.Path(dir_okay=False),
                  help="Path to log file.")
    @functools.wraps(func)
    def wrapper(*args, selector_tool, selector_font, log_file, **kwargs):
        logger = setup_logging(log_file)
        context = Context(selector_tool=selector_tool,
                          selector_font=selector_font, logger=logger)
        return func(context, *args, **kwargs)
    return wrapper


@contextlib.contextmanager
def reported_failures(context, title):
    """Turn pipeline failures into a notification and a non-zero exit."""
    try:
        yield
    except (SessionError, SelectorError, OSError) as e:
        error_msg = f"{type(e).__name__}: {e}"
        context.logger.error("{0}", error_msg)
        context.notify(title, error_msg, critical=True)
        raise click.ClickException(error_msg) from e
