import logging
import struct
from dataclasses import dataclass, replace
from typing import Optional

from pngread.parsers.codecs.inflate import DataAccumulator, IDAT_MODE_CHUNK, IDAT_MODES
from pngread.parsers.errors import (
    BadSignature,
    ChunkOrderError,
    CrcMismatch,
    DuplicateChunkError,
    IhdrSizeError,
    MissingChunk,
)
from pngread.parsers.images.png_chunks import ChunkType, read_chunk, read_exact
from pngread.parsers.models import Header, Image

l = logging.getLogger("pngread")

PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'
IHDR_SIZE = 13


@dataclass(frozen=True)
class ParserState:
    accumulator: DataAccumulator
    header: Optional[Header] = None
    header_seen: bool = False
    data_seen: bool = False
    end_seen: bool = False


class PNGParser:
    def __init__(self, stream, idat_mode=IDAT_MODE_CHUNK, strict_crc=False, strict_ihdr=False):
        self.stream = stream
        self.idat_mode = idat_mode
        self.strict_crc = strict_crc
        self.strict_ihdr = strict_ihdr
        if idat_mode not in IDAT_MODES:
            raise ValueError(f"unknown IDAT mode {idat_mode!r}, expected one of {IDAT_MODES}")

    def parse(self):
        """
        Parse the PNG stream. This method orchestrates:
        1) Checking the PNG signature.
        2) Reading chunks until IEND or the end of the stream, skipping the
           ones whose CRC does not match.
        3) Checking that IHDR, IDAT and IEND were all seen.
        4) Returning the header and the decompressed image data.
        """
        # 1) Parse the PNG signature
        self._parse_signature()

        # 2) Read chunks until IEND or end of data
        state = ParserState(accumulator=DataAccumulator(self.idat_mode))
        while not state.end_seen:
            chunk = read_chunk(self.stream)
            if chunk is None:
                break
            try:
                chunk.verify_crc()
            except CrcMismatch as e:
                if self.strict_crc:
                    raise
                l.warning("skipping chunk: %s", e)
                continue
            state = self._dispatch(state, chunk)

        # 3) Every mandatory chunk must have been seen
        if not state.header_seen:
            raise MissingChunk(ChunkType.IHDR)
        if not state.data_seen:
            raise MissingChunk(ChunkType.IDAT)
        if not state.end_seen:
            raise MissingChunk(ChunkType.IEND)

        # 4) Build the result
        return Image(header=state.header, image_data=state.accumulator.finish())

    def _parse_signature(self):
        """
        Read the 8-byte PNG signature and check it against b'\\x89PNG\\r\\n\\x1a\\n'.
        """
        signature = read_exact(self.stream, len(PNG_SIGNATURE))
        if signature != PNG_SIGNATURE:
            raise BadSignature(signature)

    def _dispatch(self, state, chunk):
        """
        Apply one chunk to 'state' and return the resulting state. The
        accumulator is carried over and keeps growing across steps.
        """
        kind = chunk.kind
        if kind is ChunkType.IHDR:
            if state.header_seen:
                if self.strict_ihdr:
                    raise DuplicateChunkError("IHDR chunk defined more than once")
                l.warning("IHDR chunk defined more than once, replacing the previous header")
            return replace(state, header=self._parse_ihdr(chunk.data), header_seen=True)
        elif kind is ChunkType.IDAT:
            if not state.header_seen:
                raise ChunkOrderError("IDAT chunk before IHDR chunk")
            state.accumulator.feed(chunk.data)
            return replace(state, data_seen=True)
        elif kind is ChunkType.IEND:
            return replace(state, end_seen=True)
        else:
            l.debug("ignoring unsupported chunk %r", chunk.name)
            return state

    def _parse_ihdr(self, chunk_data):
        """
        Parse the IHDR chunk (13 bytes):
        - width (4 bytes)
        - height (4 bytes)
        - bit_depth (1 byte)
        - color_type (1 byte)
        - compression (1 byte)
        - filter_method (1 byte)
        - interlace (1 byte)
        """
        if len(chunk_data) != IHDR_SIZE:
            raise IhdrSizeError(len(chunk_data))
        width, height, bit_depth, color_type, comp, f_method, interlace = struct.unpack(">IIBBBBB", chunk_data)
        return Header(
            width=width,
            height=height,
            bit_depth=bit_depth,
            color_type=color_type,
            compression_method=comp,
            filter_method=f_method,
            interlace_method=interlace,
        )
