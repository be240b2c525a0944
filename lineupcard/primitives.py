"""Positioned draw instructions produced by the layout and consumed by the rasterizer."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Tuple, Union

from .fonts import Weight
from .models import RasterImage
from .themes import Color


class Rect(NamedTuple):
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def relative_to(self, canvas_width: float, canvas_height: float) -> Tuple[float, float, float, float]:
        """The rectangle as fractions of the canvas size."""
        return (
            self.x / canvas_width,
            self.y / canvas_height,
            self.width / canvas_width,
            self.height / canvas_height,
        )


class TextAlign(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class FillRect:
    rect: Rect
    color: Color
    radius: float = 0.0
    tag: str = ""


@dataclass(frozen=True)
class LinearGradient:
    rect: Rect
    stops: Tuple[Tuple[float, Color], ...]
    # Direction in unit coordinates of ``rect``
    start: Tuple[float, float] = (0.0, 0.0)
    end: Tuple[float, float] = (1.0, 1.0)
    tag: str = ""


@dataclass(frozen=True)
class MaskedImage:
    """An image cover-fitted into ``rect`` with an optional blur and alpha ramp.

    ``alpha_stops`` are ``(position, opacity)`` pairs across the width of
    ``rect``; ``None`` means fully opaque.
    """

    rect: Rect
    image: RasterImage
    blur_radius: float = 0.0
    alpha_stops: Optional[Tuple[Tuple[float, float], ...]] = None
    opacity: float = 1.0
    cover: bool = True
    tag: str = ""


@dataclass(frozen=True)
class TextRun:
    rect: Rect
    text: str
    font_size: float
    weight: Weight
    color: Color
    tracking: float = 0.0
    align: TextAlign = TextAlign.LEFT
    tag: str = ""


Primitive = Union[FillRect, LinearGradient, MaskedImage, TextRun]
