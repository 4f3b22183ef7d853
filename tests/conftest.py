import logging
from pathlib import Path

import pytest
from PIL import Image


RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


def write_image(
    path: Path,
    size: tuple[int, int],
    color: tuple[int, ...] = RED,
    fmt: str = "PNG",
    mode: str = "RGBA",
) -> Path:
    Image.new(mode, size, color[: len(mode)]).save(path, format=fmt)
    return path


@pytest.fixture(autouse=True)
def _reset_pixweave_logger():
    yield
    logger = logging.getLogger("pixweave")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
