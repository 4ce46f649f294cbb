import json
import struct

import lz4.block
import pytest

from tbsessions import mozlz4
from tbsessions.errors import FormatError


PAYLOAD = json.dumps(
    {'windows': [{'tabs': [{'entries': [{'url': 'http://a', 'title': 'a'}]}]}]}
).encode('utf-8')


def _container(payload, magic=mozlz4.MAGIC, size=None):
    block = lz4.block.compress(payload, store_size=False)
    size = len(payload) if size is None else size
    return magic + struct.pack('<I', size) + block


def test_decompress_raw_block():
    assert mozlz4.decompress(_container(PAYLOAD)) == PAYLOAD


def test_compress_produces_readable_container():
    data = mozlz4.compress(PAYLOAD)
    assert data.startswith(b'mozLz40\0')
    assert struct.unpack_from('<I', data, 8)[0] == len(PAYLOAD)
    assert mozlz4.decompress(data) == PAYLOAD


@pytest.mark.parametrize('magic', [b'mozLz41\0', b'MOZLZ40\0', b'\0' * 8])
def test_wrong_header(magic):
    with pytest.raises(FormatError):
        mozlz4.decompress(_container(PAYLOAD, magic=magic))


@pytest.mark.parametrize('length', [0, 5, 8, 11])
def test_truncated_header(length):
    with pytest.raises(FormatError):
        mozlz4.decompress(_container(PAYLOAD)[:length])


def test_plain_json_is_not_a_container():
    with pytest.raises(FormatError):
        mozlz4.decompress(PAYLOAD)


def test_size_hint_larger_than_payload():
    data = _container(PAYLOAD, size=len(PAYLOAD) + 100)
    with pytest.raises(FormatError) as excinfo:
        mozlz4.decompress(data)
    assert isinstance(excinfo.value.__cause__, lz4.block.LZ4BlockError)


def test_truncated_block():
    data = mozlz4.compress(PAYLOAD)
    with pytest.raises(FormatError) as excinfo:
        mozlz4.decompress(data[:-10])
    assert isinstance(excinfo.value.__cause__, lz4.block.LZ4BlockError)
