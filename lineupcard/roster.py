"""Reading starters and bench players from a roster CSV.

Column names are matched case-insensitively. A roster needs a number column
(``number``, ``no``, ``shirt``) and a surname column (``surname``, ``name``,
``player``); ``captain`` and ``role`` are optional. Role values containing
"sub" or "bench" put the player on the bench, anything else is a starter.
Rows keep their file order, which becomes the display order.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import pandas as pd

from .models import Player

NUMBER_CANDIDATES = ("number", "no", "shirt", "#")
SURNAME_CANDIDATES = ("surname", "name", "player")
CAPTAIN_CANDIDATES = ("captain", "c", "is_captain")
ROLE_CANDIDATES = ("role", "side", "group")

_TRUE_VALUES = {"1", "true", "yes", "y", "x", "c"}


def _find_column(columns: List[str], candidates) -> Optional[str]:
    lcmap = {str(c).strip().lower(): c for c in columns}
    return next((lcmap[k] for k in candidates if k in lcmap), None)


def _is_bench(value) -> bool:
    text = "" if pd.isna(value) else str(value).strip().lower()
    return "sub" in text or "bench" in text


def _is_captain(value) -> bool:
    if pd.isna(value):
        return False
    if isinstance(value, (int, float)):
        # A column of 1s and blanks is read as floats
        return value != 0
    return str(value).strip().lower() in _TRUE_VALUES


def _single_captain(players: List[Player], side: str, logger: logging.Logger) -> List[Player]:
    """Keep the first captain on a side and clear the rest."""
    seen = False
    result = []
    for p in players:
        if p.is_captain and seen:
            logger.warning("Roster: extra %s captain %s #%d cleared", side, p.surname, p.number)
            p = Player(number=p.number, surname=p.surname, is_captain=False, id=p.id)
        seen = seen or p.is_captain
        result.append(p)
    return result


def read_roster(
    csv_path: str,
    logger: Optional[logging.Logger] = None,
) -> Tuple[Tuple[Player, ...], Tuple[Player, ...]]:
    """Read a roster CSV and return ``(starters, bench)``.

    Rows with a blank surname or number are skipped and duplicate
    ``(role, number)`` rows are removed keeping the first. Raises
    ``ValueError`` if the number or surname column is missing.
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    df = pd.read_csv(csv_path)
    df = df.map(lambda x: x.strip() if isinstance(x, str) else x)

    columns = list(df.columns)
    ncol = _find_column(columns, NUMBER_CANDIDATES)
    scol = _find_column(columns, SURNAME_CANDIDATES)
    ccol = _find_column(columns, CAPTAIN_CANDIDATES)
    rcol = _find_column(columns, ROLE_CANDIDATES)
    if ncol is None or scol is None:
        raise ValueError(f"Roster {csv_path} needs a number and a surname column, found {columns}")

    numbers = pd.to_numeric(df[ncol], errors="coerce")
    valid = numbers.notna() & (numbers > 0) & df[scol].notna() & (df[scol].astype(str).str.len() > 0)
    skipped = int((~valid).sum())
    if skipped:
        logger.info("Roster: skipped %d row(s) with a missing name or number", skipped)
    df = df[valid].copy()
    df["_number"] = numbers[valid].astype(int)
    df["_bench"] = df[rcol].map(_is_bench) if rcol else False

    duplicated = df.duplicated(subset=["_bench", "_number"], keep="first")
    if duplicated.any():
        logger.info("Roster: removed %d duplicate row(s): %s", int(duplicated.sum()), df[duplicated].index.tolist())
        df = df[~duplicated]

    starters: List[Player] = []
    bench: List[Player] = []
    for _, row in df.iterrows():
        player = Player(
            number=int(row["_number"]),
            surname=str(row[scol]),
            is_captain=_is_captain(row[ccol]) if ccol else False,
        )
        (bench if row["_bench"] else starters).append(player)

    starters = _single_captain(starters, "starting", logger)
    bench = _single_captain(bench, "bench", logger)
    logger.info("Roster: %d starter(s), %d bench player(s) from %s", len(starters), len(bench), csv_path)
    return tuple(starters), tuple(bench)
