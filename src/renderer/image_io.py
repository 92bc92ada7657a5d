# renderer/image_io.py
import logging
import os
import tempfile
from contextlib import contextmanager
from typing import Iterator

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

PPM_MAX_VALUE = 255

def ppm_lines(image: np.ndarray) -> Iterator[str]:
    """
    Yields the plain (P3) PPM encoding of a uint8 image, one line at a time:
    the header lines "P3", "<width> <height>", "255", then one "r g b" line
    per pixel in raster order.
    """
    height, width = image.shape[:2]
    yield "P3"
    yield f"{width} {height}"
    yield str(PPM_MAX_VALUE)
    for row in image:
        for r, g, b in row:
            yield f"{r} {g} {b}"

def _current_umask() -> int:
    # os.umask can only be read by setting it
    umask = os.umask(0)
    os.umask(umask)
    return umask

@contextmanager
def _atomic_output(path: str, mode: str):
    """
    Opens a temporary file next to `path` and moves it into place only if
    the block completes. On failure the temporary file is removed and the
    error propagates, so no partial image is ever left at `path`.
    The finished file gets the usual 0666 & ~umask permissions rather than
    mkstemp's private 0600.
    """
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".", suffix=".tmp")
    try:
        with os.fdopen(fd, mode) as handle:
            yield handle
        os.chmod(tmp_path, 0o666 & ~_current_umask())
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise

def write_ppm(path: str, image: np.ndarray) -> int:
    """
    Writes `image` as a plain PPM file. Returns the file size in bytes.
    """
    with _atomic_output(path, "w") as handle:
        for line in ppm_lines(image):
            handle.write(line)
            handle.write("\n")
    size = os.path.getsize(path)
    logger.info("Image written to %s (%d bytes)", path, size)
    return size

def write_pillow(path: str, image: np.ndarray, image_format: str = "PNG") -> int:
    """
    Writes `image` through Pillow in `image_format`. Returns the file size in bytes.
    """
    pil_image = Image.fromarray(np.ascontiguousarray(image, dtype=np.uint8))
    with _atomic_output(path, "wb") as handle:
        pil_image.save(handle, format=image_format)
    size = os.path.getsize(path)
    logger.info("Image written to %s (%d bytes)", path, size)
    return size

def write_image(path: str, image: np.ndarray) -> int:
    """
    Writes `image` in the format implied by the file extension: plain PPM
    for .ppm, otherwise whatever Pillow associates with the extension.
    """
    extension = os.path.splitext(path)[1].lower()
    if extension in ("", ".ppm"):
        return write_ppm(path, image)
    image_format = Image.registered_extensions().get(extension)
    if image_format is None:
        raise ValueError(f"Unsupported image extension: {extension}")
    return write_pillow(path, image, image_format)
