import pytest


@pytest.fixture
def png_file(tmp_path):
    """Write PNG bytes to a temporary file and return its path."""
    def write(data, name="image.png"):
        path = tmp_path / name
        path.write_bytes(data)
        return path
    return write
