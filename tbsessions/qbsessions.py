# A script for saving, exporting and managing Qutebrowser sessions.

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

import click

from . import config, locate, qutebrowser
from .cli import common_options, reported_failures
from .pipeline import export_session, fix_session_file
from .render import OutputMode


TITLE = '[qbsessions]'

SESSION_FILE_PATTERNS = [r'\.ya?ml$']

_export_path_option = click.option(
    '--export-path', '-p',
    type=click.Path(exists=True, file_okay=False, writable=True),
    envvar=config.env_var('DEFAULT_BROWSER_SESSIONS_STORE'),
    required=True,
    help="Directory to export sessions to.",
)
_flat_option = click.option(
    '--flat', is_flag=True,
    help="Export sessions in flat layout, instead of per-window layout.",
)


@click.group()
@click.option('--sessions-path', '-s',
              type=click.Path(file_okay=False),
              default=config.qutebrowser_sessions_path,
              help="Directory holding Qutebrowser's sessions.")
@common_options
@click.pass_context
def cli(ctx, context, sessions_path):
    """Qutebrowser sessions management tool."""
    ctx.obj = {'context': context, 'sessions_path': sessions_path}


@cli.command()
@click.option('--name', '-n', help="Name to save the session under.")
@click.option('--named', is_flag=True,
              help="Ask for the name to save the session under.")
@click.pass_obj
def save(obj, name, named):
    """Save the current session of a running Qutebrowser."""
    context = obj['context']
    with reported_failures(context, TITLE):
        if named:
            name = context.select([], 'save as')
            if name is None:
                return
        name = name or f'session-{locate.timestamp()}'
        path = qutebrowser.socket_path()
        try:
            qutebrowser.save_session(path, name)
        except FileNotFoundError:
            context.logger.warning("Qutebrowser socket {0} not found", path)
            context.notify(TITLE, f"cannot access socket at `{path}`\n"
                           "Is qutebrowser running?", critical=True)
            return
    context.logger.info("Saved session {0}", name)


def _export_mode(flat):
    return OutputMode.ORG_FLAT if flat else OutputMode.ORG


@cli.command()
@_export_path_option
@_flat_option
@click.pass_obj
def export(obj, export_path, flat):
    """Select a session and export it to Org format."""
    context = obj['context']
    sessions_path = obj['sessions_path']
    with reported_failures(context, TITLE):
        name = locate.select_session(context, sessions_path, 'export',
                                     patterns=SESSION_FILE_PATTERNS)
        if name is None:
            return
        click.echo(export_session(context, sessions_path, name, export_path,
                                  _export_mode(flat)))


@cli.command(name='export-all')
@_export_path_option
@_flat_option
@click.pass_obj
def export_all(obj, export_path, flat):
    """Export all sessions to Org format."""
    context = obj['context']
    sessions_path = obj['sessions_path']
    with reported_failures(context, TITLE):
        for name in locate.collect_files(sessions_path,
                                         SESSION_FILE_PATTERNS):
            click.echo(export_session(context, sessions_path, name,
                                      export_path, _export_mode(flat)))


@cli.command()
@click.option('--out', '-o', type=click.Path(dir_okay=False),
              help="Write the fixed session here instead of in place.")
@click.pass_obj
def fix(obj, out):
    """Select a session and remove error pages from its tabs' history."""
    context = obj['context']
    sessions_path = obj['sessions_path']
    with reported_failures(context, TITLE):
        name = locate.select_session(context, sessions_path, 'fix',
                                     patterns=SESSION_FILE_PATTERNS)
        if name is None:
            return
        click.echo(fix_session_file(context, os.path.join(sessions_path, name),
                                    out))


@cli.command()
@click.option('--keep-minutes', '-k', type=click.IntRange(min=0),
              envvar=config.env_var('QUTEBROWSER_SESSIONS_KEEP_MINUTES'),
              required=True,
              help="Remove timed sessions older than this many minutes.")
@click.pass_obj
def rotate(obj, keep_minutes):
    """Remove old automatically saved sessions."""
    context = obj['context']
    with reported_failures(context, TITLE):
        removed = locate.rotate_older_than(
            obj['sessions_path'], datetime.timedelta(minutes=keep_minutes),
            pattern=locate.TIMED_SESSION_NAME,
        )
    for path in removed:
        click.echo(path)
