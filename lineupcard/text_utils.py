"""Single-line text measurement and shrink-to-fit, independent of canvas size."""
from .constants import FONT_REFERENCE_SIZE
from .fonts import Weight, load_font


def text_width(text: str, font_size: float, weight: Weight = Weight.REGULAR, tracking: float = 0.0) -> float:
    """Width of ``text`` at ``font_size``, measured at a fixed reference size.

    Measuring at one reference size and scaling linearly keeps layout
    geometry exactly proportional to the canvas, whatever the font hinting
    does at small sizes. ``tracking`` is added between characters.
    """
    if not text:
        return 0.0
    font = load_font(FONT_REFERENCE_SIZE, weight)
    width = font.getlength(text) * font_size / FONT_REFERENCE_SIZE
    return width + tracking * (len(text) - 1)


def fit_scale(
    text: str,
    font_size: float,
    weight: Weight,
    max_width: float,
    min_scale: float,
    tracking: float = 0.0,
) -> float:
    """Scale in ``[min_scale, 1]`` that makes ``text`` fit ``max_width`` on one line."""
    width = text_width(text, font_size, weight, tracking)
    if width <= max_width or width <= 0:
        return 1.0
    return max(min_scale, max_width / width)
