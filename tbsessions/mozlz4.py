# Reading and writing Mozilla's mozLz4 session containers.

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

# NOTE: A mozLz4 file is an 8 byte magic header, followed by the size of the
# uncompressed data as a 4 byte little-endian unsigned integer, followed by a
# single raw (unframed) LZ4 block.

import struct

import lz4.block

from .errors import FormatError
from .log import get_logger


logger = get_logger(__name__)

MAGIC = b'mozLz40\0'
_SIZE = struct.Struct('<I')
HEADER_SIZE = len(MAGIC) + _SIZE.size


def decompress(data):
    """Return the payload of the given mozLz4 container."""
    header = data[:len(MAGIC)]
    if header != MAGIC:
        raise FormatError(f"Wrong mozLz4 header: {header!r}")
    if len(data) < HEADER_SIZE:
        raise FormatError("Truncated mozLz4 container: missing size header")
    size, = _SIZE.unpack_from(data, len(MAGIC))
    logger.debug("Decompressing {0} bytes into {1} bytes...",
                 len(data) - HEADER_SIZE, size)
    # python-lz4 also fails when the block decompresses to anything other than
    # exactly ``size`` bytes, e.g. when the file was cut short.
    try:
        return lz4.block.decompress(data[HEADER_SIZE:],
                                    uncompressed_size=size)
    except lz4.block.LZ4BlockError as e:
        raise FormatError(
            f"Corrupt or truncated mozLz4 block (expected {size} bytes): {e}"
        ) from e


def compress(payload):
    """Return a mozLz4 container holding the given payload."""
    block = lz4.block.compress(payload, store_size=False)
    return MAGIC + _SIZE.pack(len(payload)) + block
