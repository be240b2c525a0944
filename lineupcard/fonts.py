import logging
import os
from enum import Enum
from functools import lru_cache
from typing import List, Optional

from PIL import ImageFont

logger = logging.getLogger(__name__)


class Weight(str, Enum):
    REGULAR = "regular"
    MEDIUM = "medium"
    SEMIBOLD = "semibold"
    BOLD = "bold"
    BLACK = "black"


# Weights without a dedicated face fall back to the nearest one we look for
_FACE_FOR_WEIGHT = {
    Weight.REGULAR: "regular",
    Weight.MEDIUM: "regular",
    Weight.SEMIBOLD: "bold",
    Weight.BOLD: "bold",
    Weight.BLACK: "black",
}

# Candidate families as (regular, bold, black) file names
_CANDIDATES = [
    ("Arial", ["arial.ttf", "ARIAL.TTF", "Arial.ttf"], ["arialbd.ttf", "ARIALBD.TTF", "Arial Bold.ttf"], ["ariblk.ttf", "ARIBLK.TTF", "Arial Black.ttf"]),
    ("LiberationSans", ["LiberationSans-Regular.ttf"], ["LiberationSans-Bold.ttf"], []),
    ("DejaVuSans", ["DejaVuSans.ttf"], ["DejaVuSans-Bold.ttf"], []),
    ("NotoSans", ["NotoSans-Regular.ttf"], ["NotoSans-Bold.ttf"], ["NotoSans-Black.ttf"]),
    ("Roboto", ["Roboto-Regular.ttf"], ["Roboto-Bold.ttf"], ["Roboto-Black.ttf"]),
]


def _font_dirs() -> List[str]:
    dirs = [os.path.abspath("."), os.path.join(os.path.abspath("."), "fonts")]
    dirs.append(os.path.join(os.environ.get("WINDIR", r"C:\\Windows"), "Fonts"))
    dirs += ["/Library/Fonts", "/System/Library/Fonts", os.path.expanduser("~/.fonts")]
    for root in ("/usr/share/fonts", "/usr/local/share/fonts"):
        if os.path.isdir(root):
            for path, _, _ in os.walk(root):
                dirs.append(path)
    return dirs


def _find_file(font_dirs: List[str], possible_names: List[str]) -> Optional[str]:
    for d in font_dirs:
        for name in possible_names:
            p = os.path.join(d, name)
            if os.path.isfile(p):
                return p
    return None


@lru_cache(maxsize=1)
def font_faces() -> dict:
    """Locate a TrueType family on this machine.

    Returns a mapping of face ("regular", "bold", "black") to a file path, or
    to ``None`` when no usable family was found and Pillow's bundled default
    font should be used.
    """
    font_dirs = _font_dirs()
    for family, reg_list, bold_list, black_list in _CANDIDATES:
        reg_path = _find_file(font_dirs, reg_list)
        if not reg_path:
            continue
        bold_path = _find_file(font_dirs, bold_list) or reg_path
        black_path = _find_file(font_dirs, black_list) or bold_path
        logger.debug("Using font family %s (%s)", family, reg_path)
        return {"regular": reg_path, "bold": bold_path, "black": black_path}
    logger.warning("No TrueType font family found; falling back to Pillow's default font")
    return {"regular": None, "bold": None, "black": None}


@lru_cache(maxsize=256)
def load_font(size: float, weight: Weight = Weight.REGULAR) -> ImageFont.FreeTypeFont:
    """Return a font of ``size`` pixels for ``weight``; fractional sizes are kept."""
    size = max(1.0, float(size))
    path = font_faces()[_FACE_FOR_WEIGHT[Weight(weight)]]
    if path:
        try:
            return ImageFont.truetype(path, size)
        except OSError:
            logger.warning("Could not load font %s; using default font", path)
    return ImageFont.load_default(size=size)
