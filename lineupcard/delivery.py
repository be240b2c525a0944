"""Writing rendered cards to PNG/JPEG files or a single-page PDF."""
import logging
import os

from PIL import Image
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

logger = logging.getLogger(__name__)

PDF_EXTENSIONS = {".pdf"}
FLAT_EXTENSIONS = {".jpg", ".jpeg"}


def draw_image_in_rect(c, pil_img, x, y, width, height):
    """Draw a PIL image scaled to exactly fit the given rectangle (x, y, width, height).
    Coordinates are ReportLab points.
    """
    img_reader = ImageReader(pil_img)
    c.drawImage(img_reader, x, y, width=width, height=height)


def save_pdf(image: Image.Image, path: str, dpi: int = 300) -> str:
    """Write ``image`` as a single PDF page sized to the image at ``dpi``."""
    page_width = image.width * 72.0 / dpi
    page_height = image.height * 72.0 / dpi
    c = canvas.Canvas(str(path), pagesize=(page_width, page_height))
    draw_image_in_rect(c, image.convert("RGB"), 0, 0, page_width, page_height)
    c.showPage()
    c.save()
    return str(path)


def save_image(image: Image.Image, path: str) -> str:
    """Write ``image`` as a raster file; JPEG output is flattened to RGB."""
    ext = os.path.splitext(str(path))[1].lower()
    if ext in FLAT_EXTENSIONS:
        image.convert("RGB").save(path, quality=95)
    else:
        image.save(path)
    return str(path)


def deliver(image: Image.Image, path: str, dpi: int = 300) -> str:
    """Write ``image`` to ``path``, choosing the format from the extension."""
    directory = os.path.dirname(os.path.abspath(str(path)))
    os.makedirs(directory, exist_ok=True)
    ext = os.path.splitext(str(path))[1].lower()
    if ext in PDF_EXTENSIONS:
        written = save_pdf(image, path, dpi=dpi)
    else:
        written = save_image(image, path)
    logger.info("Wrote %dx%d card to %s", image.width, image.height, written)
    return written
