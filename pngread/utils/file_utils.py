import os

from pngread.parsers.images.png_parser import PNG_SIGNATURE


def get_file_signature(file_path, num_bytes=8):
    with open(file_path, "rb") as f:
        return f.read(num_bytes)


def is_png_file(file_path):
    try:
        return get_file_signature(file_path, len(PNG_SIGNATURE)) == PNG_SIGNATURE
    except OSError:
        return False


def find_png_files(input_path):
    """
    Return 'input_path' itself when it is a file, otherwise every file below
    it that starts with the PNG signature, in a stable order.
    """
    if os.path.isfile(input_path):
        return [input_path]

    png_files = []
    for root, dirs, files in os.walk(input_path):
        dirs.sort()
        for file in sorted(files):
            path = os.path.join(root, file)
            if is_png_file(path):
                png_files.append(path)
    return png_files
