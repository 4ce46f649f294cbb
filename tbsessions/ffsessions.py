# A script for dumping and managing Firefox sessions.

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

from . import config, locate
from .cli import common_options, reported_failures
from .model import Format
from .pipeline import dump_session
from .render import OutputMode


TITLE = '[ffsessions]'


@click.group()
@click.option('--dumps-path', '-d',
              type=click.Path(exists=True, file_okay=False, writable=True),
              required=True,
              help="Directory to store session dumps under.")
@common_options
@click.pass_context
def cli(ctx, context, dumps_path):
    """Firefox sessions management tool."""
    ctx.obj = {'context': context, 'dumps_path': dumps_path}


@cli.command()
@click.option('--sessions-path', '-s',
              type=click.Path(exists=True, file_okay=False),
              default=config.firefox_sessions_path,
              help="Directory holding Firefox's session backups.")
@click.option('--raw', is_flag=True,
              help="Dump raw URLs without descriptions/titles.")
@click.option('--json', '-j', 'as_json', is_flag=True,
              help="Dump session in JSON format.")
@click.option('--flat', is_flag=True,
              help="Dump flat Org session layout, without windows breakdown.")
@click.option('--out', '-o', help="Dump file name.")
@click.option('--dump-basename', default='firefox-session-auto',
              show_default=True, help="Dump file name prefix.")
@click.option('--keep-tabs-history', '-k', is_flag=True,
              help="Also dump links from tab history.")
@click.pass_obj
def dump(obj, sessions_path, raw, as_json, flat, out, dump_basename,
         keep_tabs_history):
    """Dump the latest Firefox session."""
    context = obj['context']
    if as_json:
        mode, extension = OutputMode.NATIVE, 'json'
    elif flat:
        mode, extension = OutputMode.ORG_FLAT, 'org'
    else:
        mode, extension = OutputMode.ORG, 'org'
    name = out or f'{dump_basename}-{locate.timestamp()}.{extension}'
    source = locate.latest_session_file(sessions_path)
    with reported_failures(context, TITLE):
        destination = dump_session(
            context,
            source,
            os.path.join(obj['dumps_path'], name),
            Format.FIREFOX,
            mode,
            raw_urls=raw,
            with_history=keep_tabs_history,
        )
    click.echo(destination)


@cli.command()
@click.pass_obj
def remove(obj):
    """Select and remove one of the saved sessions."""
    context = obj['context']
    dumps_path = obj['dumps_path']
    with reported_failures(context, TITLE):
        name = locate.select_session(context, dumps_path, 'remove',
                                     patterns=[r'org$'])
        if name is None:
            return
        path = os.path.join(dumps_path, name)
        os.remove(path)
    context.logger.info("Removed {0}", path)
    context.notify(TITLE, f"Removed {path}")


@cli.command()
@click.option('--keep-minutes', '-k', type=click.IntRange(min=0),
              envvar=config.env_var('FIREFOX_SESSIONS_KEEP_MINUTES'),
              required=True,
              help="Remove session dumps older than this many minutes.")
@click.pass_obj
def rotate(obj, keep_minutes):
    """Remove old session dumps."""
    context = obj['context']
    with reported_failures(context, TITLE):
        removed = locate.rotate_older_than(
            obj['dumps_path'], datetime.timedelta(minutes=keep_minutes)
        )
    for path in removed:
        click.echo(path)
