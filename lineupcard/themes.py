"""Theme presets, custom themes and resolution to a concrete ``Theme``."""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, NamedTuple, Union

from PIL import ImageColor

_HEX_RE = re.compile(r"^#?[0-9A-Fa-f]{6}$")


class Color(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255

    def with_opacity(self, opacity: float) -> "Color":
        """Return the color with its alpha multiplied by ``opacity``."""
        opacity = max(0.0, min(1.0, float(opacity)))
        return Color(self.r, self.g, self.b, int(round(self.a * opacity)))


WHITE = Color(255, 255, 255)


def parse_hex(text: str) -> Color:
    """Parse a six-hex-digit color string such as ``"CC0000"`` or ``"#cc0000"``."""
    if not isinstance(text, str) or not _HEX_RE.match(text.strip()):
        raise ValueError(f"Invalid hex color {text!r}: expected exactly 6 hex digits")
    r, g, b = ImageColor.getrgb("#" + text.strip().lstrip("#"))
    return Color(r, g, b)


class BackgroundStyle(str, Enum):
    SOLID = "solid"
    GRADIENT = "gradient"
    BLURRED_PHOTO = "blurredPhoto"


class NumberPlacement(str, Enum):
    LEFT_INTEGER = "leftInteger"     # "31  PLAYER"
    RIGHT_DECIMAL = "rightDecimal"   # "PLAYER .31"


class ListAlignment(str, Enum):
    LEADING = "leading"
    CENTER = "center"
    TRAILING = "trailing"


class ThemePreset(str, Enum):
    MAN_UTD_DARK = "manUtdDark"
    MAN_UTD_AWAY = "manUtdAway"
    LIVERPOOL = "liverpool"
    NORWICH = "norwich"
    REAL_MADRID = "realMadrid"
    BARCELONA = "barcelona"
    CUSTOM = "custom"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    ThemePreset.MAN_UTD_DARK: "Man Utd",
    ThemePreset.MAN_UTD_AWAY: "Man Utd Away",
    ThemePreset.LIVERPOOL: "Liverpool",
    ThemePreset.NORWICH: "Norwich",
    ThemePreset.REAL_MADRID: "Real Madrid",
    ThemePreset.BARCELONA: "Barcelona",
    ThemePreset.CUSTOM: "Custom",
}


def alignment_for(placement: NumberPlacement) -> ListAlignment:
    if placement is NumberPlacement.RIGHT_DECIMAL:
        return ListAlignment.TRAILING
    return ListAlignment.LEADING


@dataclass(frozen=True)
class Theme:
    background: Color
    accent: Color
    text: Color
    number: Color
    subtext: Color
    background_style: BackgroundStyle
    number_placement: NumberPlacement
    list_alignment: ListAlignment
    show_left_panel: bool
    left_panel_width: float

    def __post_init__(self):
        width = max(0.0, min(1.0, float(self.left_panel_width)))
        if not self.show_left_panel:
            width = 0.0
        object.__setattr__(self, "left_panel_width", width)


@dataclass(frozen=True)
class CustomTheme:
    """User-authored theme stored inline on a card."""

    background_hex: str = "0A0A0A"
    accent_hex: str = "CC0000"
    text_hex: str = "FFFFFF"
    number_hex: str = "FFFFFF"
    player_photo_enabled: bool = True
    background_style: BackgroundStyle = BackgroundStyle.SOLID
    number_placement: NumberPlacement = NumberPlacement.RIGHT_DECIMAL

    def validate(self) -> "CustomTheme":
        for value in (self.background_hex, self.accent_hex, self.text_hex, self.number_hex):
            parse_hex(value)
        return self

    def to_dict(self) -> Dict[str, object]:
        return {
            "backgroundHex": self.background_hex,
            "accentHex": self.accent_hex,
            "textHex": self.text_hex,
            "numberHex": self.number_hex,
            "playerPhotoEnabled": self.player_photo_enabled,
            "backgroundStyle": self.background_style.value,
            "numberPlacement": self.number_placement.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "CustomTheme":
        defaults = cls()
        theme = cls(
            background_hex=str(data.get("backgroundHex", defaults.background_hex)),
            accent_hex=str(data.get("accentHex", defaults.accent_hex)),
            text_hex=str(data.get("textHex", defaults.text_hex)),
            number_hex=str(data.get("numberHex", defaults.number_hex)),
            player_photo_enabled=bool(data.get("playerPhotoEnabled", defaults.player_photo_enabled)),
            background_style=BackgroundStyle(data.get("backgroundStyle", defaults.background_style.value)),
            number_placement=NumberPlacement(data.get("numberPlacement", defaults.number_placement.value)),
        )
        return theme.validate()

    def as_theme(self) -> Theme:
        text = parse_hex(self.text_hex)
        return Theme(
            background=parse_hex(self.background_hex),
            accent=parse_hex(self.accent_hex),
            text=text,
            number=parse_hex(self.number_hex),
            subtext=text.with_opacity(0.75),
            background_style=self.background_style,
            number_placement=self.number_placement,
            list_alignment=alignment_for(self.number_placement),
            show_left_panel=self.player_photo_enabled,
            left_panel_width=0.45,
        )


def _preset(background, accent, text, number, subtext, placement, panel_width, style=BackgroundStyle.SOLID) -> Theme:
    return Theme(
        background=background,
        accent=accent,
        text=text,
        number=number,
        subtext=subtext,
        background_style=style,
        number_placement=placement,
        list_alignment=alignment_for(placement),
        show_left_panel=panel_width > 0,
        left_panel_width=panel_width,
    )


# Existing entries must never change: persisted cards refer to them by tag.
PRESETS: Dict[ThemePreset, Theme] = {
    ThemePreset.MAN_UTD_DARK: _preset(
        parse_hex("0A0A0A"), parse_hex("CC0000"), WHITE,
        WHITE.with_opacity(0.65), WHITE.with_opacity(0.6),
        NumberPlacement.RIGHT_DECIMAL, 0.48,
    ),
    ThemePreset.MAN_UTD_AWAY: _preset(
        parse_hex("080808"), parse_hex("D4AF37"), WHITE,
        parse_hex("D4AF37"), parse_hex("D4AF37").with_opacity(0.7),
        NumberPlacement.RIGHT_DECIMAL, 0.48,
    ),
    ThemePreset.LIVERPOOL: _preset(
        parse_hex("C8102E"), WHITE, WHITE,
        WHITE.with_opacity(0.55), WHITE.with_opacity(0.75),
        NumberPlacement.LEFT_INTEGER, 0.0,
    ),
    ThemePreset.NORWICH: _preset(
        parse_hex("FFF200"), parse_hex("00A651"), parse_hex("1A1A1A"),
        parse_hex("00A651"), parse_hex("1A1A1A").with_opacity(0.7),
        NumberPlacement.LEFT_INTEGER, 0.42,
    ),
    ThemePreset.REAL_MADRID: _preset(
        parse_hex("0D1B4B"), parse_hex("1E6FDB"), WHITE,
        WHITE.with_opacity(0.55), WHITE.with_opacity(0.7),
        NumberPlacement.LEFT_INTEGER, 0.44, style=BackgroundStyle.BLURRED_PHOTO,
    ),
    ThemePreset.BARCELONA: _preset(
        parse_hex("0A1628"), parse_hex("A50044"), WHITE,
        parse_hex("0057A8"), WHITE.with_opacity(0.65),
        NumberPlacement.LEFT_INTEGER, 0.44,
    ),
    ThemePreset.CUSTOM: _preset(
        parse_hex("0A0A0A"), parse_hex("CC0000"), WHITE,
        WHITE, WHITE.with_opacity(0.7),
        NumberPlacement.RIGHT_DECIMAL, 0.45,
    ),
}

ThemeRef = Union[ThemePreset, CustomTheme]


def resolve(theme_ref: ThemeRef) -> Theme:
    """Return the concrete theme for a preset or an inline custom theme."""
    if isinstance(theme_ref, CustomTheme):
        return theme_ref.as_theme()
    return PRESETS[ThemePreset(theme_ref)]
