import struct
import zlib

import pytest

from cezedit.cezformat import (
    HEADER_SIZE,
    ChecksumError,
    FileHeader,
    Flags,
    InvalidFileError,
    build_container,
    parse_header,
    split_container,
)


def _header(**overrides):
    fields = dict(
        original_size=10,
        compressed_size=8,
        crc32_checksum=0xDEADBEEF,
        timestamp=1700000000,
        filename="documento.cez",
    )
    fields.update(overrides)
    return FileHeader(**fields)


def test_header_is_64_bytes():
    assert len(_header().to_bytes()) == HEADER_SIZE == 64


def test_header_fixed_fields_layout():
    raw = _header().to_bytes()
    assert raw[:4] == b"CEZ\x00"
    assert raw[4] == 1
    assert raw[5] == Flags.COMPRESSED
    assert struct.unpack_from("<H", raw, 6)[0] == HEADER_SIZE
    assert struct.unpack_from("<I", raw, 16)[0] == 0xDEADBEEF
    assert struct.unpack_from("<Q", raw, 20)[0] == 1700000000
    assert raw[28 : 28 + len("documento.cez")] == b"documento.cez"
    assert raw[56:64] == bytes(8)


def test_header_round_trip():
    header = _header(flags=Flags.COMPRESSED | Flags.RICH_TEXT)
    assert parse_header(header.to_bytes()) == header


def test_filename_truncated_to_field():
    long_name = "n" * 40
    parsed = parse_header(_header(filename=long_name).to_bytes())
    assert parsed.filename == long_name[:27]


def test_parse_short_data_raises():
    with pytest.raises(InvalidFileError):
        parse_header(b"CEZ\x00" + bytes(10))


def test_parse_bad_magic_raises():
    raw = bytearray(_header().to_bytes())
    raw[0:3] = b"ZIP"
    with pytest.raises(InvalidFileError):
        parse_header(bytes(raw))


def test_container_round_trip():
    payload = zlib.compress(b"texto de prueba")
    data = build_container(payload, 15, "doc.cez", timestamp=42)
    header, out = split_container(data)
    assert out == payload
    assert header.original_size == 15
    assert header.compressed_size == len(payload)
    assert header.crc32_checksum == zlib.crc32(payload)
    assert header.timestamp == 42
    assert header.filename == "doc.cez"
    assert header.flags == Flags.COMPRESSED


def test_container_length():
    payload = b"\x01\x02\x03"
    assert len(build_container(payload, 3)) == HEADER_SIZE + len(payload)


def test_corrupted_payload_raises_checksum_error():
    data = bytearray(build_container(zlib.compress(b"hola"), 4, "x", timestamp=1))
    data[-1] ^= 0xFF
    with pytest.raises(ChecksumError):
        split_container(bytes(data))


def test_checksum_error_is_invalid_file_error():
    data = build_container(b"abc", 3, timestamp=1) + b"extra"
    with pytest.raises(InvalidFileError):
        split_container(data)