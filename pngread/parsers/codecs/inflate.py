import logging
import zlib

from pngread.parsers.errors import InflateError

l = logging.getLogger("pngread")

IDAT_MODE_CHUNK = "chunk"    # every IDAT payload is a complete zlib stream
IDAT_MODE_STREAM = "stream"  # IDAT payloads are fragments of one zlib stream
IDAT_MODES = (IDAT_MODE_CHUNK, IDAT_MODE_STREAM)


def inflate(data):
    try:
        return zlib.decompress(data)
    except zlib.error as e:
        raise InflateError(f"cannot decompress IDAT data: {e}") from e


class DataAccumulator:
    """
    Collects the decompressed IDAT data of one image, in file order.

    In "chunk" mode each payload is inflated on its own, which only works
    when the encoder ended a zlib stream at every chunk boundary. In "stream"
    mode the payloads are fed to a single decompressor, as the PNG format
    defines them.
    """

    def __init__(self, mode=IDAT_MODE_CHUNK):
        if mode not in IDAT_MODES:
            raise ValueError(f"unknown IDAT mode {mode!r}, expected one of {IDAT_MODES}")
        self.mode = mode
        self.buffer = bytearray()
        self._decompressor = zlib.decompressobj() if mode == IDAT_MODE_STREAM else None

    def feed(self, payload):
        if self._decompressor is None:
            self.buffer += inflate(payload)
            return
        if self._decompressor.eof:
            l.warning("ignoring %d bytes of extra IDAT data after end of zlib stream", len(payload))
            return
        try:
            self.buffer += self._decompressor.decompress(payload)
        except zlib.error as e:
            raise InflateError(f"cannot decompress IDAT data: {e}") from e

    def finish(self):
        if self._decompressor is not None:
            try:
                self.buffer += self._decompressor.flush()
            except zlib.error as e:
                raise InflateError(f"cannot decompress IDAT data: {e}") from e
            if not self._decompressor.eof:
                raise InflateError("IDAT data ends before the end of the zlib stream")
        return bytes(self.buffer)
