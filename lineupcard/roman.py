"""Roman numeral text for the card title."""
from typing import List, Tuple

# A card with no starters still reads as a conventional eleven
EMPTY_LINEUP_NUMERAL = "XI"

_NUMERALS: List[Tuple[int, str]] = [
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"),
    (1, "I"),
]


def to_roman(number: int) -> str:
    """Return the uppercase subtractive Roman numeral for ``number``.

    Values of zero or below return ``"XI"``. There is no upper bound; large
    values simply repeat ``M``.
    """
    if number <= 0:
        return EMPTY_LINEUP_NUMERAL
    parts: List[str] = []
    remaining = number
    for value, numeral in _NUMERALS:
        count, remaining = divmod(remaining, value)
        if count:
            parts.append(numeral * count)
    return "".join(parts)
