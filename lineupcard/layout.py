"""Layout composer: turns a card and its theme into positioned draw primitives.

All geometry is computed from fractions of the canvas size, so composing the
same card at two different 4:5 sizes yields similar rectangles.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, List, Sequence, Tuple

from . import constants as C
from .fonts import Weight
from .models import Card, ImageRole, Player
from .packing import RowPacking, pack, split_bench
from .primitives import FillRect, LinearGradient, MaskedImage, Primitive, Rect, TextAlign, TextRun
from .text_utils import fit_scale, text_width
from .themes import BackgroundStyle, Color, ListAlignment, NumberPlacement, Theme

logger = logging.getLogger(__name__)

RowLayout = Callable[[Player, Rect, float, Theme, str], List[Primitive]]

_TEXT_ALIGN = {
    ListAlignment.LEADING: TextAlign.LEFT,
    ListAlignment.CENTER: TextAlign.CENTER,
    ListAlignment.TRAILING: TextAlign.RIGHT,
}


def photo_mask_stops() -> Tuple[Tuple[float, float], ...]:
    """Alpha stops across the photo panel: solid, then a three-stop fade."""
    solid = C.PHOTO_SOLID_FRACTION
    fade = 1.0 - solid
    stops = [(0.0, 1.0)]
    for position, opacity in C.PHOTO_FADE_STOPS:
        stops.append((round(solid + fade * position, 6), opacity))
    return tuple(stops)


def text_panel_bounds(theme: Theme, width: float) -> Tuple[float, float]:
    """Return (x, width) of the text panel."""
    if theme.show_left_panel:
        x = width * theme.left_panel_width * C.TEXT_PANEL_OFFSET_RATIO
    else:
        x = width * C.TEXT_PANEL_LEFT_MARGIN_W
    return x, width - x - width * C.TEXT_PANEL_RIGHT_MARGIN_W


# --- Background and photo -------------------------------------------------

def _background(card: Card, theme: Theme, w: float, h: float) -> List[Primitive]:
    canvas = Rect(0.0, 0.0, w, h)
    if theme.background_style is BackgroundStyle.GRADIENT:
        stops = (
            (0.0, theme.background),
            (0.5, theme.background.with_opacity(C.GRADIENT_MID_OPACITY)),
            (1.0, theme.accent.with_opacity(C.GRADIENT_ACCENT_OPACITY)),
        )
        return [LinearGradient(canvas, stops, tag="background")]

    layers: List[Primitive] = [FillRect(canvas, theme.background, tag="background")]
    if theme.background_style is BackgroundStyle.BLURRED_PHOTO:
        photo = card.image(ImageRole.BACKGROUND) or card.image(ImageRole.PLAYER)
        if photo is not None:
            layers.append(MaskedImage(canvas, photo, blur_radius=h * C.BLUR_RADIUS_H, tag="background.photo"))
            layers.append(FillRect(canvas, theme.background.with_opacity(C.BLUR_OVERLAY_OPACITY), tag="background.overlay"))
    return layers


def _photo_panel(card: Card, theme: Theme, w: float, h: float) -> List[Primitive]:
    photo = card.image(ImageRole.PLAYER)
    if not theme.show_left_panel or photo is None:
        return []
    photo_w = w * theme.left_panel_width * C.PHOTO_PANEL_OVERSIZE
    return [MaskedImage(Rect(0.0, 0.0, photo_w, h), photo, alpha_stops=photo_mask_stops(), tag="photo")]


# --- Player rows ------------------------------------------------------------

def _captain_badge(x: float, row: Rect, font_size: float, theme: Theme, tag: str) -> List[Primitive]:
    size = font_size * C.CAPTAIN_BADGE_RATIO
    box = Rect(x, row.y + (row.height - size) / 2, size, size)
    return [
        FillRect(box, theme.accent, radius=size / 2, tag=f"{tag}.captain"),
        TextRun(box, C.CAPTAIN_LETTER, font_size * C.CAPTAIN_LETTER_RATIO, Weight.BLACK,
                theme.background, align=TextAlign.CENTER, tag=f"{tag}.captain.letter"),
    ]


def number_before_name_row(player: Player, row: Rect, font_size: float, theme: Theme, tag: str) -> List[Primitive]:
    """``31  SURNAME (C)``: number in a right-aligned gutter, content packed left."""
    gap = font_size * C.LEFT_ROW_GAP_RATIO
    gutter = font_size * C.NUMBER_GUTTER_RATIO
    badge = font_size * C.CAPTAIN_BADGE_RATIO if player.is_captain else 0.0

    prims: List[Primitive] = [
        TextRun(Rect(row.x, row.y, gutter, row.height), str(player.number),
                font_size * C.NUMBER_SIZE_RATIO, Weight.MEDIUM, theme.number,
                align=TextAlign.RIGHT, tag=f"{tag}.number"),
    ]
    name_x = row.x + gutter + gap
    available = max(0.0, row.right - name_x - (gap + badge if player.is_captain else 0.0))
    name = player.surname.upper()
    scale = fit_scale(name, font_size, Weight.BOLD, available, C.SURNAME_MIN_SCALE)
    name_size = font_size * scale
    prims.append(TextRun(Rect(name_x, row.y, available, row.height), name, name_size, Weight.BOLD,
                         theme.text, tag=f"{tag}.name"))
    if player.is_captain:
        name_w = min(text_width(name, name_size, Weight.BOLD), available)
        prims += _captain_badge(name_x + name_w + gap, row, font_size, theme, tag)
    return prims


def name_before_decimal_row(player: Player, row: Rect, font_size: float, theme: Theme, tag: str) -> List[Primitive]:
    """``(C) SURNAME .31``: content packed right, decimal number as a suffix."""
    gap = font_size * C.RIGHT_ROW_GAP_RATIO
    badge = font_size * C.CAPTAIN_BADGE_RATIO if player.is_captain else 0.0

    suffix = f".{player.number}"
    suffix_size = font_size * C.DECIMAL_SIZE_RATIO
    suffix_w = text_width(suffix, suffix_size, Weight.REGULAR)
    prims: List[Primitive] = [
        TextRun(Rect(row.right - suffix_w, row.y, suffix_w, row.height), suffix, suffix_size,
                Weight.REGULAR, theme.number, align=TextAlign.RIGHT, tag=f"{tag}.number"),
    ]
    name_right = row.right - suffix_w - gap
    available = max(0.0, name_right - row.x - (badge + gap if player.is_captain else 0.0))
    name = player.surname.upper()
    scale = fit_scale(name, font_size, Weight.BOLD, available, C.SURNAME_MIN_SCALE)
    name_size = font_size * scale
    name_w = min(text_width(name, name_size, Weight.BOLD), available)
    prims.append(TextRun(Rect(name_right - name_w, row.y, name_w, row.height), name, name_size,
                         Weight.BOLD, theme.text, align=TextAlign.RIGHT, tag=f"{tag}.name"))
    if player.is_captain:
        prims += _captain_badge(name_right - name_w - gap - badge, row, font_size, theme, tag)
    return prims


ROW_LAYOUTS: Dict[NumberPlacement, RowLayout] = {
    NumberPlacement.LEFT_INTEGER: number_before_name_row,
    NumberPlacement.RIGHT_DECIMAL: name_before_decimal_row,
}


# --- Text panel -------------------------------------------------------------

class _Column:
    """Top-to-bottom cursor over the text panel."""

    def __init__(self, x: float, width: float, y: float, align: TextAlign):
        self.x = x
        self.width = width
        self.y = y
        self.align = align
        self.prims: List[Primitive] = []

    def line(self, text: str, font_size: float, weight: Weight, color: Color, tag: str,
             tracking: float = 0.0, scale: float = 1.0) -> None:
        line_h = font_size * C.LINE_HEIGHT_RATIO
        if text:
            self.prims.append(TextRun(Rect(self.x, self.y, self.width, line_h), text, font_size * scale,
                                      weight, color, tracking * scale, self.align, tag))
        self.y += line_h

    def skip(self, amount: float) -> None:
        self.y += amount


def _title_block(card: Card, theme: Theme, col: _Column, h: float) -> None:
    gap = h * C.TITLE_LINE_GAP_H
    col.line(card.title_word.upper(), h * C.TITLE_WORD_SIZE_H, Weight.BOLD, theme.text, "title",
             tracking=h * C.TITLE_WORD_TRACKING_H)

    numeral = card.roman_numeral
    numeral_size = h * C.NUMERAL_SIZE_H
    col.skip(gap)
    col.line(numeral, numeral_size, Weight.BLACK, theme.accent, "numeral",
             scale=fit_scale(numeral, numeral_size, Weight.BLACK, col.width, C.NUMERAL_MIN_SCALE))

    if card.sponsor_line:
        col.skip(gap)
        col.line(card.sponsor_line, h * C.SPONSOR_SIZE_H, Weight.MEDIUM,
                 theme.text.with_opacity(C.SPONSOR_OPACITY), "sponsor", tracking=h * C.SPONSOR_TRACKING_H)
    if card.manager_name:
        col.skip(gap)
        col.line(C.MANAGER_PREFIX + card.manager_name.upper(), h * C.MANAGER_SIZE_H, Weight.SEMIBOLD,
                 theme.text.with_opacity(C.MANAGER_OPACITY), "manager")


def _divider(theme: Theme, col: _Column, h: float) -> None:
    col.skip(h * C.DIVIDER_PADDING_H)
    thickness = h * C.DIVIDER_THICKNESS_H
    col.prims.append(FillRect(Rect(col.x, col.y, col.width, thickness),
                              theme.accent.with_opacity(C.DIVIDER_OPACITY), tag="divider"))
    col.skip(thickness + h * C.DIVIDER_PADDING_H)


def _rows(players: Sequence[Player], x: float, y: float, width: float, row_h: float, spacing: float,
          font_size: float, theme: Theme, row_layout: RowLayout, tag: str) -> Tuple[List[Primitive], float]:
    prims: List[Primitive] = []
    for i, player in enumerate(players):
        if i:
            y += spacing
        prims += row_layout(player, Rect(x, y, width, row_h), font_size, theme, tag)
        y += row_h
    return prims, y


def _starter_list(card: Card, theme: Theme, col: _Column, packing: RowPacking, row_layout: RowLayout) -> None:
    row_h = packing.row_height
    if not card.starters:
        # An empty lineup still reserves one nominal row
        col.skip(row_h)
        return
    prims, col.y = _rows(card.starters, col.x, col.y, col.width, row_h, row_h * C.STARTER_SPACING_RATIO,
                         packing.starter_font_size, theme, row_layout, "starter")
    col.prims += prims


def _bench_section(card: Card, theme: Theme, col: _Column, packing: RowPacking, row_layout: RowLayout, w: float, h: float) -> None:
    row_h = packing.row_height
    spacing = row_h * C.BENCH_SPACING_RATIO
    font_size = packing.bench_font_size

    # Header: accent bar + letter-spaced label, aligned like the rest of the list
    col.skip(row_h * C.SUBS_TOP_PADDING_RATIO)
    header_h = font_size * C.SUBS_BAR_HEIGHT_RATIO
    bar_w = w * C.SUBS_BAR_WIDTH_W
    label_gap = w * C.SUBS_GAP_W
    label_size = font_size * C.SUBS_LABEL_RATIO
    tracking = h * C.SUBS_TRACKING_H
    header_w = bar_w + label_gap + text_width(C.SUBS_LABEL, label_size, Weight.BOLD, tracking)
    if col.align is TextAlign.RIGHT:
        bar_x = col.x + col.width - header_w
    elif col.align is TextAlign.CENTER:
        bar_x = col.x + (col.width - header_w) / 2
    else:
        bar_x = col.x
    label_x = bar_x + bar_w + label_gap
    col.prims.append(FillRect(Rect(bar_x, col.y, bar_w, header_h), theme.accent, tag="subs.bar"))
    col.prims.append(TextRun(Rect(label_x, col.y, col.x + col.width - label_x, header_h), C.SUBS_LABEL,
                             label_size, Weight.BOLD, theme.accent, tracking, TextAlign.LEFT, "subs.label"))
    col.skip(header_h + spacing)

    left, right = split_bench(card.bench)
    if packing.bench_columns == 2:
        gap = col.width * C.BENCH_COLUMN_GAP_RATIO
        column_w = (col.width - gap) / 2
        left_prims, left_end = _rows(left, col.x, col.y, column_w, packing.bench_row_height, spacing,
                                     font_size, theme, row_layout, "bench.left")
        right_prims, right_end = _rows(right, col.x + column_w + gap, col.y, column_w, packing.bench_row_height,
                                       spacing, font_size, theme, row_layout, "bench.right")
        col.prims += left_prims + right_prims
        col.y = max(left_end, right_end)
    else:
        prims, col.y = _rows(left, col.x, col.y, col.width, packing.bench_row_height, spacing,
                             font_size, theme, row_layout, "bench")
        col.prims += prims


def _text_panel(card: Card, theme: Theme, w: float, h: float) -> List[Primitive]:
    panel_x, panel_w = text_panel_bounds(theme, w)
    col = _Column(panel_x, panel_w, h * C.TEXT_PANEL_TOP_H, _TEXT_ALIGN[theme.list_alignment])

    packing = pack(len(card.starters), len(card.bench), h * C.ROWS_AVAILABLE_H, h * C.ROW_CAP_H)
    row_layout = ROW_LAYOUTS[theme.number_placement]
    logger.debug("Row packing for %d starters / %d bench: %s", len(card.starters), len(card.bench), packing)

    _title_block(card, theme, col, h)
    _divider(theme, col, h)
    _starter_list(card, theme, col, packing, row_layout)
    if card.bench:
        _bench_section(card, theme, col, packing, row_layout, w, h)
    return col.prims


# --- Bottom strip -----------------------------------------------------------

def _bottom_strip(card: Card, theme: Theme, w: float, h: float) -> List[Primitive]:
    strip = Rect(0.0, h * C.STRIP_TOP_H, w, h * C.STRIP_HEIGHT_H)
    prims: List[Primitive] = [FillRect(strip, theme.accent.with_opacity(C.STRIP_OPACITY), tag="strip")]
    padding = w * C.STRIP_PADDING_W
    spacing = w * C.BADGE_SPACING_W
    badge_h = strip.height * C.BADGE_HEIGHT_RATIO

    badges = [(role, card.image(role)) for role in (ImageRole.BADGE1, ImageRole.BADGE2)]
    badges = [(role, image) for role, image in badges if image is not None]
    widths = [badge_h * image.aspect for _, image in badges]
    badges_w = sum(widths) + spacing * max(len(badges) - 1, 0)

    x = w - padding - badges_w
    badge_y = strip.y + (strip.height - badge_h) / 2
    for (role, image), badge_w in zip(badges, widths):
        prims.append(MaskedImage(Rect(x, badge_y, badge_w, badge_h), image, cover=False, tag=f"strip.{role.value}"))
        x += badge_w + spacing

    if card.match_label:
        label = card.match_label.upper()
        size = h * C.MATCH_LABEL_SIZE_H
        tracking = h * C.MATCH_LABEL_TRACKING_H
        available = max(0.0, w - padding - badges_w - (spacing if badges else 0.0) - padding)
        scale = fit_scale(label, size, Weight.SEMIBOLD, available, C.MATCH_LABEL_MIN_SCALE, tracking)
        prims.append(TextRun(Rect(padding, strip.y, available, strip.height), label, size * scale,
                             Weight.SEMIBOLD, theme.text.with_opacity(C.MATCH_LABEL_OPACITY),
                             tracking * scale, TextAlign.LEFT, "strip.match"))
    return prims


def compose(card: Card, theme: Theme, width: float, height: float) -> List[Primitive]:
    """Return the card's draw primitives in back-to-front paint order."""
    w, h = float(width), float(height)
    primitives: List[Primitive] = []
    primitives += _background(card, theme, w, h)
    primitives += _photo_panel(card, theme, w, h)
    primitives += _text_panel(card, theme, w, h)
    primitives += _bottom_strip(card, theme, w, h)
    return primitives
