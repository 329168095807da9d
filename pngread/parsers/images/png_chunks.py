import enum
import logging
import struct
import zlib
from dataclasses import dataclass

from pngread.parsers.errors import (
    ChunkCrcReadError,
    ChunkDataReadError,
    ChunkHeaderReadError,
    CrcMismatch,
)

l = logging.getLogger("pngread")

CHUNK_HEADER_SIZE = 8   # length (4) + type tag (4)
CHUNK_CRC_SIZE = 4


class ChunkType(enum.Enum):
    IHDR = b'IHDR'
    IDAT = b'IDAT'
    IEND = b'IEND'
    UNKNOWN = None

    @classmethod
    def from_tag(cls, tag):
        try:
            return cls(tag)
        except ValueError:
            return cls.UNKNOWN


@dataclass
class Chunk:
    length: int
    tag: bytes
    data: bytes
    crc: int

    @property
    def kind(self):
        return ChunkType.from_tag(self.tag)

    @property
    def name(self):
        return self.tag.decode('ascii', 'replace')

    def verify_crc(self):
        """
        Compare the stored CRC against the one computed over tag + data.
        Raises CrcMismatch when they differ.
        """
        computed = compute_crc(self.tag, self.data)
        if computed != self.crc:
            raise CrcMismatch(self.name, self.crc, computed)


def compute_crc(tag, data):
    return zlib.crc32(data, zlib.crc32(tag)) & 0xFFFFFFFF


def read_exact(stream, size):
    """
    Read up to 'size' bytes from 'stream', calling read() as many times as it
    takes. Fewer bytes are returned only when the source is exhausted.
    """
    buf = bytearray()
    while len(buf) < size:
        piece = stream.read(size - len(buf))
        if not piece:
            break
        buf += piece
    return bytes(buf)


def read_chunk(stream):
    """
    Read a single chunk from the current position:
    1) 4 bytes chunk length (big-endian)
    2) 4 bytes chunk type
    3) 'length' bytes of chunk data
    4) 4 bytes CRC (big-endian)

    Returns None on a clean end of stream, i.e. when not a single byte of a
    new chunk header is available.
    """
    header = read_exact(stream, CHUNK_HEADER_SIZE)
    if not header:
        return None
    if len(header) < CHUNK_HEADER_SIZE:
        raise ChunkHeaderReadError(CHUNK_HEADER_SIZE, len(header))

    length, tag = struct.unpack(">I4s", header)

    data = read_exact(stream, length)
    if len(data) < length:
        raise ChunkDataReadError(length, len(data))

    crc_bytes = read_exact(stream, CHUNK_CRC_SIZE)
    if len(crc_bytes) < CHUNK_CRC_SIZE:
        raise ChunkCrcReadError(CHUNK_CRC_SIZE, len(crc_bytes))
    (crc,) = struct.unpack(">I", crc_bytes)

    l.debug("chunk %r length=%d", tag, length)
    return Chunk(length, tag, data, crc)
