import argparse
import logging
import sys

from lineupcard.export import RenderFailed
from lineupcard.generator import build_custom_theme, main
from lineupcard.themes import BackgroundStyle, NumberPlacement, ThemePreset


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Render a 1080x1350 starting lineup card")
    parser.add_argument("roster_csv", nargs="?", help="Path to the roster CSV (number, surname, captain, role)")
    parser.add_argument("output", nargs="?", help="Output file (.png, .jpg or .pdf). Defaults to output/<roster>.png")
    parser.add_argument("--title", default="STARTING", help="Title word shown above the numeral")
    parser.add_argument("--match", default="", help="Match label for the bottom strip, e.g. 'MUN v LIV - Old Trafford'")
    parser.add_argument("--manager", default="", help="Manager name")
    parser.add_argument("--sponsor", default="", help="Sponsor line under the numeral")
    parser.add_argument("--theme", default=ThemePreset.MAN_UTD_DARK.value, choices=[p.value for p in ThemePreset], help="Theme preset")
    parser.add_argument("--bg-hex", help="Custom theme background color (6 hex digits); any custom flag selects the custom theme")
    parser.add_argument("--accent-hex", help="Custom theme accent color")
    parser.add_argument("--text-hex", help="Custom theme text color")
    parser.add_argument("--number-hex", help="Custom theme number color")
    parser.add_argument("--background-style", choices=[s.value for s in BackgroundStyle], help="Custom theme background style")
    parser.add_argument("--number-placement", choices=[n.value for n in NumberPlacement], help="Custom theme number placement")
    parser.add_argument("--no-photo-panel", action="store_true", help="Custom theme without the left photo panel")
    parser.add_argument("--player-photo", help="Path to the player photo")
    parser.add_argument("--background", help="Path to the background photo (blurred-photo themes)")
    parser.add_argument("--badge1", help="Path to the first badge image")
    parser.add_argument("--badge2", help="Path to the second badge image")
    parser.add_argument("--dpi", type=int, default=300, help="Page resolution used for PDF output")
    parser.add_argument("--store", help="Save the card into this card store (JSON)")
    parser.add_argument("--from-store", help="Render a card from this card store instead of a roster")
    parser.add_argument("--card-id", help="Card id to render with --from-store (defaults to the newest card)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if not args.roster_csv and not args.from_store:
        parser.error("a roster CSV or --from-store is required")

    # configure basic logging to console so users are kept up-to-date
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")

    custom_flags = (args.bg_hex, args.accent_hex, args.text_hex, args.number_hex,
                    args.background_style, args.number_placement, args.no_photo_panel)
    try:
        custom_theme = None
        if any(custom_flags):
            custom_theme = build_custom_theme(
                bg_hex=args.bg_hex,
                accent_hex=args.accent_hex,
                text_hex=args.text_hex,
                number_hex=args.number_hex,
                background_style=args.background_style,
                number_placement=args.number_placement,
                photo_panel=not args.no_photo_panel,
            )
        card_options = {}
        if args.roster_csv and not args.from_store:
            card_options = dict(
                title_word=args.title,
                match_label=args.match,
                manager_name=args.manager,
                sponsor_line=args.sponsor,
                theme=args.theme,
                custom_theme=custom_theme,
                player_photo=args.player_photo,
                background=args.background,
                badge1=args.badge1,
                badge2=args.badge2,
            )
        main(
            args.roster_csv,
            args.output,
            store_path=args.store,
            from_store=args.from_store,
            card_id=args.card_id,
            dpi=args.dpi,
            **card_options,
        )
    except (ValueError, KeyError, OSError, RenderFailed) as exc:
        logging.getLogger(__name__).error("Could not generate card: %s", exc)
        sys.exit(1)
