import os
import sys
import logging
import argparse
from datetime import datetime

from pngread.export.export_to_csv import export_to_csv
from pngread.export.export_to_json import export_to_json
from pngread.parsers.codecs.inflate import IDAT_MODES, IDAT_MODE_CHUNK
from pngread.parsers.errors import PNGError
from pngread.parsers.image_file import ImageFile

from pngread.utils.file_utils import find_png_files


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="PNG chunk stream parser")
    parser.add_argument("-i", "--input", type=str, required=True, help='PNG file or directory containing PNG files')
    parser.add_argument("-o", "--output", type=str, default=".", help='Output directory')
    parser.add_argument("-e", '--export', type=str, choices=['csv', 'json'], help='Export parsed data to CSV or JSON')
    parser.add_argument("--idat-mode", type=str, choices=IDAT_MODES, default=IDAT_MODE_CHUNK,
                        help="Decompress each IDAT chunk on its own (chunk) or as one zlib stream (stream)")
    parser.add_argument("--strict-crc", action='store_true', help="Fail on a CRC mismatch instead of skipping the chunk")
    parser.add_argument("--strict-ihdr", action='store_true', help="Fail when IHDR appears more than once")
    parser.add_argument("-v", "--verbose", action='store_true', help="Log every chunk")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    now = datetime.now()
    print(f"[{now.strftime('%Y-%m-%d-%H.%M.%S')}] Start parsing.")

    if not os.path.exists(args.input):
        print(f"  failed: {args.input} does not exist")
        return 1

    all_parsed_data = []
    failed = 0
    for image_file in find_png_files(args.input):
        print(f"Parsing image file: {image_file}")
        image = ImageFile(image_file, idat_mode=args.idat_mode,
                          strict_crc=args.strict_crc, strict_ihdr=args.strict_ihdr)
        try:
            image.parse()
        except (PNGError, OSError) as e:
            print(f"  failed: {e}")
            failed += 1
            continue

        header = image.image.header
        print(f"  {header.width}x{header.height} bit_depth={header.bit_depth} "
              f"color_type={header.color_type} image_data={len(image.image.image_data)} bytes")
        all_parsed_data.append(image.data)

    if args.export:
        output_file = os.path.join(args.output, f"{now.strftime('%Y-%m-%d-%H.%M.%S')}-output.{args.export}")
        if args.export == 'csv':
            export_to_csv(all_parsed_data, output_file)
        elif args.export == 'json':
            export_to_json(all_parsed_data, output_file)
        print(f"Exported data to {output_file}")

    end = datetime.now()
    print(f"[{end.strftime('%Y-%m-%d-%H.%M.%S')}] Finished.")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
