# Exceptions raised by the session dump pipeline.

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


class SessionError(Exception):
    """Base class for errors of the session dump pipeline."""


class FormatError(SessionError):
    """The session container is not in the expected format or is truncated."""


class ParseError(SessionError):
    """The session payload could not be deserialized.

    The underlying decode error is available as ``error`` (and as the
    exception's ``__cause__`` when raised with ``raise ... from``).

    """

    def __init__(self, msg, error=None):
        super().__init__(msg)
        self.error = error


class EmptySessionError(SessionError):
    """Rendering was requested without a session."""


class SelectorError(Exception):
    """The selector tool could not be run."""
