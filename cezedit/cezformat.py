"""The .cez container: a 64-byte header followed by a compressed payload."""

from __future__ import annotations

import enum
import struct
import time
import zlib
from dataclasses import dataclass

MAGIC = b"CEZ"
VERSION = 1
HEADER_SIZE = 64
FILENAME_FIELD_SIZE = 28

_HEADER_STRUCT = struct.Struct("<4sBBHIIIQ28s8s")


class Flags(enum.IntFlag):
    """Option bits stored in the header."""

    NONE = 0
    RICH_TEXT = 0x01
    COMPRESSED = 0x02


class InvalidFileError(ValueError):
    """The data is not a valid .cez container."""


class ChecksumError(InvalidFileError):
    """The payload does not match the CRC32 stored in the header."""


@dataclass
class FileHeader:
    """Metadata stored at the start of a .cez file."""

    original_size: int
    compressed_size: int
    crc32_checksum: int
    timestamp: int
    filename: str = ""
    flags: Flags = Flags.COMPRESSED
    version: int = VERSION
    header_size: int = HEADER_SIZE

    def to_bytes(self) -> bytes:
        """Pack the header into its 64-byte on-disk form."""
        name = self.filename.encode("utf-8")[: FILENAME_FIELD_SIZE - 1]
        return _HEADER_STRUCT.pack(
            MAGIC + b"\0",
            self.version,
            int(self.flags),
            self.header_size,
            self.original_size,
            self.compressed_size,
            self.crc32_checksum,
            self.timestamp,
            name,
            bytes(8),
        )


def parse_header(data: bytes) -> FileHeader:
    """Read the header from the start of data."""
    if len(data) < HEADER_SIZE or data[: len(MAGIC)] != MAGIC:
        raise InvalidFileError("not a CEZ file")
    (
        _magic,
        version,
        flags,
        header_size,
        original_size,
        compressed_size,
        checksum,
        timestamp,
        raw_name,
        _reserved,
    ) = _HEADER_STRUCT.unpack_from(data)
    name = raw_name.split(b"\0", 1)[0].decode("utf-8", errors="replace")
    return FileHeader(
        original_size=original_size,
        compressed_size=compressed_size,
        crc32_checksum=checksum,
        timestamp=timestamp,
        filename=name,
        flags=Flags(flags),
        version=version,
        header_size=header_size,
    )


def build_container(
    payload: bytes,
    original_size: int,
    filename: str = "",
    timestamp: int | None = None,
    flags: Flags = Flags.COMPRESSED,
) -> bytes:
    """Return the header followed by payload, with its CRC32 filled in."""
    header = FileHeader(
        original_size=original_size,
        compressed_size=len(payload),
        crc32_checksum=zlib.crc32(payload),
        timestamp=int(time.time()) if timestamp is None else timestamp,
        filename=filename,
        flags=flags,
    )
    return header.to_bytes() + bytes(payload)


def split_container(data: bytes) -> tuple[FileHeader, bytes]:
    """Parse a container and return its header and verified payload."""
    header = parse_header(data)
    payload = bytes(data[HEADER_SIZE:])
    if zlib.crc32(payload) != header.crc32_checksum:
        raise ChecksumError("CRC32 mismatch")
    return header, payload