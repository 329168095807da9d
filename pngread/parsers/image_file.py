from pngread.parsers.codecs.inflate import IDAT_MODE_CHUNK
from pngread.parsers.images.png_parser import PNGParser


class ImageFile:
    def __init__(self, file_path, idat_mode=IDAT_MODE_CHUNK, strict_crc=False, strict_ihdr=False):
        self.file_path = file_path
        self.options = {
            'idat_mode': idat_mode,
            'strict_crc': strict_crc,
            'strict_ihdr': strict_ihdr,
        }
        self.image = None
        self.data = {}

    def parse(self):
        with open(self.file_path, 'rb') as f:
            self.image = PNGParser(f, **self.options).parse()

        self.data = {
            'file_path': str(self.file_path),
            'image': self.image
        }
        return self.image


def parse_png(file_path, **options):
    """Parse the PNG file at 'file_path' and return its Image."""
    return ImageFile(file_path, **options).parse()
