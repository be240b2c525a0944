"""Rasterizer: paints layout primitives into a Pillow image."""
from __future__ import annotations

import logging
import math
from typing import Iterable, Optional, Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFilter

from .fonts import load_font
from .primitives import FillRect, LinearGradient, MaskedImage, Primitive, Rect, TextAlign, TextRun

logger = logging.getLogger(__name__)

CANVAS_COLOR = (0, 0, 0, 255)


def _pixel_box(rect: Rect) -> Tuple[int, int, int, int]:
    """Round a float rect to integer (left, top, right, bottom) pixel edges."""
    left, top = int(round(rect.x)), int(round(rect.y))
    right, bottom = int(round(rect.right)), int(round(rect.bottom))
    return left, top, max(right, left), max(bottom, top)


def _composite(canvas: Image.Image, layer: Image.Image, left: int, top: int) -> None:
    """Alpha-composite ``layer`` at (left, top), clipped to the canvas."""
    src_left, src_top = max(0, -left), max(0, -top)
    dst_left, dst_top = max(0, left), max(0, top)
    width = min(layer.width - src_left, canvas.width - dst_left)
    height = min(layer.height - src_top, canvas.height - dst_top)
    if width <= 0 or height <= 0:
        return
    if (src_left, src_top, width, height) != (0, 0, layer.width, layer.height):
        layer = layer.crop((src_left, src_top, src_left + width, src_top + height))
    canvas.alpha_composite(layer, (dst_left, dst_top))


def _cover_fit(img: Image.Image, width: int, height: int) -> Image.Image:
    """Resize ``img`` to cover (width x height) and center-crop the overflow."""
    scale = max(width / img.width, height / img.height)
    nw, nh = max(width, math.ceil(img.width * scale)), max(height, math.ceil(img.height * scale))
    resized = img.resize((nw, nh), Image.LANCZOS)
    left = (nw - width) // 2
    top = (nh - height) // 2
    return resized.crop((left, top, left + width, top + height))


def _fill_rect(canvas: Image.Image, prim: FillRect) -> None:
    left, top, right, bottom = _pixel_box(prim.rect)
    if right - left <= 0 or bottom - top <= 0:
        # Hairlines still cover one pixel row/column
        right, bottom = max(right, left + 1), max(bottom, top + 1)
    layer = Image.new("RGBA", (right - left, bottom - top), (0, 0, 0, 0))
    draw = ImageDraw.Draw(layer)
    if prim.radius > 0:
        radius = min(prim.radius, (layer.width - 1) / 2, (layer.height - 1) / 2)
        draw.rounded_rectangle((0, 0, layer.width - 1, layer.height - 1), radius=radius, fill=tuple(prim.color))
    else:
        draw.rectangle((0, 0, layer.width - 1, layer.height - 1), fill=tuple(prim.color))
    _composite(canvas, layer, left, top)


def _gradient(canvas: Image.Image, prim: LinearGradient) -> None:
    left, top, right, bottom = _pixel_box(prim.rect)
    width, height = right - left, bottom - top
    if width <= 0 or height <= 0:
        return
    u = (np.arange(width, dtype=np.float64) + 0.5) / width
    v = (np.arange(height, dtype=np.float64) + 0.5) / height
    (sx, sy), (ex, ey) = prim.start, prim.end
    dx, dy = ex - sx, ey - sy
    length_sq = dx * dx + dy * dy or 1.0
    # Projection of every pixel onto the start -> end axis
    t = ((u[None, :] - sx) * dx + (v[:, None] - sy) * dy) / length_sq
    t = np.clip(t, 0.0, 1.0)
    positions = [pos for pos, _ in prim.stops]
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    for channel in range(4):
        values = [color[channel] for _, color in prim.stops]
        pixels[:, :, channel] = np.round(np.interp(t, positions, values)).astype(np.uint8)
    _composite(canvas, Image.fromarray(pixels), left, top)


def _alpha_ramp(width: int, stops) -> np.ndarray:
    x = (np.arange(width, dtype=np.float64) + 0.5) / width
    return np.interp(x, [pos for pos, _ in stops], [opacity for _, opacity in stops])


def _masked_image(canvas: Image.Image, prim: MaskedImage) -> None:
    left, top, right, bottom = _pixel_box(prim.rect)
    width, height = right - left, bottom - top
    if width <= 0 or height <= 0:
        return
    img = prim.image.to_pil()
    img = _cover_fit(img, width, height) if prim.cover else img.resize((width, height), Image.LANCZOS)
    if prim.blur_radius > 0:
        img = img.filter(ImageFilter.GaussianBlur(radius=prim.blur_radius))
    if prim.alpha_stops is not None or prim.opacity < 1.0:
        alpha = np.asarray(img.getchannel("A"), dtype=np.float64) * prim.opacity
        if prim.alpha_stops is not None:
            alpha = alpha * _alpha_ramp(width, prim.alpha_stops)[None, :]
        img.putalpha(Image.fromarray(np.round(alpha).astype(np.uint8)))
    _composite(canvas, img, left, top)


def _text(canvas: Image.Image, prim: TextRun) -> None:
    if not prim.text:
        return
    left, top, right, bottom = _pixel_box(prim.rect)
    width, height = right - left, bottom - top
    if width <= 0 or height <= 0:
        return
    font = load_font(prim.font_size, prim.weight)
    advances = [font.getlength(ch) for ch in prim.text]
    text_w = sum(advances) + prim.tracking * (len(prim.text) - 1)
    if prim.align is TextAlign.RIGHT:
        x = width - text_w
    elif prim.align is TextAlign.CENTER:
        x = (width - text_w) / 2
    else:
        x = 0.0
    # Hinting can make a run a pixel or two wider than measured; keep the first glyph
    x = max(0.0, x)

    # Drawing into a layer the size of the rect clips the run to it
    layer = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    draw = ImageDraw.Draw(layer)
    fill = tuple(prim.color)
    if prim.tracking:
        for ch, advance in zip(prim.text, advances):
            draw.text((x, height / 2), ch, font=font, fill=fill, anchor="lm")
            x += advance + prim.tracking
    else:
        draw.text((x, height / 2), prim.text, font=font, fill=fill, anchor="lm")
    _composite(canvas, layer, left, top)


_PAINTERS = {
    FillRect: _fill_rect,
    LinearGradient: _gradient,
    MaskedImage: _masked_image,
    TextRun: _text,
}


def rasterize(primitives: Iterable[Primitive], width: int, height: int, background: Optional[Tuple[int, int, int, int]] = None) -> Image.Image:
    """Paint ``primitives`` back to front onto a new ``width`` x ``height`` RGBA image.

    Raises ``ValueError`` when an image primitive's pixel data cannot be
    decoded.
    """
    canvas = Image.new("RGBA", (int(width), int(height)), background or CANVAS_COLOR)
    count = 0
    for prim in primitives:
        painter = _PAINTERS[type(prim)]
        painter(canvas, prim)
        count += 1
    logger.debug("Rasterized %d primitives at %dx%d", count, width, height)
    return canvas
