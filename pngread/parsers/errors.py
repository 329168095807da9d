class PNGError(Exception):
    """Base class for every failure raised while parsing a PNG stream."""


class BadSignature(PNGError):
    def __init__(self, signature):
        super().__init__(f"not a PNG file (signature {signature.hex()!r})")
        self.signature = signature


class ChunkReadError(PNGError):
    """The chunk stream ended in the middle of a chunk."""

    segment = "chunk"

    def __init__(self, expected, got):
        super().__init__(f"truncated {self.segment}: expected {expected} bytes, got {got}")
        self.expected = expected
        self.got = got


class ChunkHeaderReadError(ChunkReadError):
    segment = "chunk header"


class ChunkDataReadError(ChunkReadError):
    segment = "chunk data"


class ChunkCrcReadError(ChunkReadError):
    segment = "chunk CRC"


class CrcMismatch(PNGError):
    """
    Stored and computed CRC differ. The parser discards the chunk and keeps
    going unless it was built with strict_crc=True.
    """

    def __init__(self, tag, expected, computed):
        super().__init__(
            f"CRC mismatch in {tag!r} chunk: stored 0x{expected:08x}, computed 0x{computed:08x}"
        )
        self.tag = tag
        self.expected = expected
        self.computed = computed


class ChunkOrderError(PNGError):
    pass


class DuplicateChunkError(ChunkOrderError):
    pass


class IhdrSizeError(PNGError):
    def __init__(self, size):
        super().__init__(f"IHDR chunk must be 13 bytes, got {size}")
        self.size = size


class MissingChunk(PNGError):
    def __init__(self, which):
        super().__init__(f"missing {which.name} chunk")
        self.which = which


class InflateError(PNGError):
    pass
