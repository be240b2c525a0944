"""Export adapter: renders a card to a complete pixel buffer or fails as a whole."""
from __future__ import annotations

import logging

from PIL import Image

from .constants import EXPORT_HEIGHT, EXPORT_WIDTH
from .layout import compose
from .models import Card
from .raster import rasterize
from .themes import resolve

logger = logging.getLogger(__name__)

EXPORT_SIZE = (EXPORT_WIDTH, EXPORT_HEIGHT)


class RenderFailed(Exception):
    """The card could not be rendered into a complete image."""


def render_card(card: Card, width: int, height: int) -> Image.Image:
    """Render ``card`` at any size (previews, thumbnails).

    Raises ``RenderFailed`` if layout or rasterization fails; no partial
    image is returned.
    """
    try:
        theme = resolve(card.theme_ref)
        primitives = compose(card, theme, width, height)
        image = rasterize(primitives, width, height)
    except Exception as exc:
        logger.exception("Failed to render card %s at %dx%d", card.id, width, height)
        raise RenderFailed(f"Failed to render card {card.id}: {exc}") from exc
    logger.debug("Rendered card %s (%d primitives) at %dx%d", card.id, len(primitives), width, height)
    return image


def export_card(card: Card) -> Image.Image:
    """Render ``card`` at the fixed 1080x1350 export resolution."""
    return render_card(card, EXPORT_WIDTH, EXPORT_HEIGHT)
