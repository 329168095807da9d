from dataclasses import dataclass


@dataclass(frozen=True)
class Header:
    width: int               # pixels, u32
    height: int              # pixels, u32
    bit_depth: int           # bits per sample
    color_type: int          # 0, 2, 3, 4 or 6 in a valid file
    compression_method: int  # 0 = zlib/deflate
    filter_method: int       # 0 = adaptive filtering
    interlace_method: int    # 0 = none, 1 = Adam7


@dataclass(frozen=True)
class Image:
    header: Header
    image_data: bytes        # decompressed, still filtered scanlines
