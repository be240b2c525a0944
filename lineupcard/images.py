"""Decoding image files into the raw buffers the renderer takes."""
import logging

from PIL import Image

from .models import RasterImage

logger = logging.getLogger(__name__)


def load_image(path: str) -> RasterImage:
    """Decode an image file to an RGBA ``RasterImage``.

    Decoding errors (missing file, unknown format) propagate as ``OSError``.
    """
    with Image.open(path) as img:
        img.load()
        raster = RasterImage.from_pil(img)
    logger.debug("Loaded %s (%dx%d)", path, raster.width, raster.height)
    return raster
