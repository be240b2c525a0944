"""Row packing for the starter and bench lists."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple, TypeVar

from .constants import (
    BENCH_FONT_RATIO,
    BENCH_ROW_RATIO,
    MIN_PACKED_ROWS,
    STARTER_FONT_RATIO,
    TWO_COLUMN_BENCH_MIN,
)

T = TypeVar("T")


@dataclass(frozen=True)
class RowPacking:
    row_height: float
    starter_font_size: float
    bench_font_size: float
    bench_row_height: float
    bench_columns: int


def effective_row_count(starter_count: int, bench_count: int) -> int:
    """Rows the lists occupy; a non-empty bench adds one row for its header."""
    rows = max(starter_count, 1)
    if bench_count > 0:
        rows += bench_count + 1
    return rows


def bench_column_count(bench_count: int) -> int:
    return 2 if bench_count >= TWO_COLUMN_BENCH_MIN else 1


def pack(starter_count: int, bench_count: int, available_height: float, cap_height: float) -> RowPacking:
    """Compute a uniform row height and font sizes that fit every row.

    The divisor never drops below ``MIN_PACKED_ROWS`` so short lists do not
    get oversized rows, and no row is taller than ``cap_height``.
    """
    rows = effective_row_count(starter_count, bench_count)
    row_height = min(available_height / max(rows, MIN_PACKED_ROWS), cap_height)
    return RowPacking(
        row_height=row_height,
        starter_font_size=row_height * STARTER_FONT_RATIO,
        bench_font_size=row_height * BENCH_FONT_RATIO,
        bench_row_height=row_height * BENCH_ROW_RATIO,
        bench_columns=bench_column_count(bench_count),
    )


def split_bench(players: Sequence[T]) -> Tuple[Tuple[T, ...], Tuple[T, ...]]:
    """Split bench players into (left, right) columns, keeping display order.

    Single-column benches come back whole on the left with an empty right
    column; otherwise the left column gets ``ceil(n / 2)`` players.
    """
    players = tuple(players)
    if bench_column_count(len(players)) == 1:
        return players, ()
    half = math.ceil(len(players) / 2)
    return players[:half], players[half:]
