from pathlib import Path
from typing import Tuple

import pytest
from PIL import Image


def write_png(path: Path, size: Tuple[int, int], color=(255, 0, 0, 255)) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGBA", size, color).save(path, "PNG")
    return path


@pytest.fixture
def make_png():
    return write_png
