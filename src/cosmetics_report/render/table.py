from __future__ import annotations

from typing import Callable, List, Sequence, TextIO

from ..config import PADDING
from ..db.results import ResultSet
from .width import display_width

Measure = Callable[[str], int]

NO_DATA = "No data found"


def column_widths(
    result: ResultSet,
    measure: Measure = display_width,
    padding: int = PADDING,
) -> List[int]:
    widths = [measure(name) for name in result.columns]
    for row in result.rows:
        for j, value in enumerate(row):
            widths[j] = max(widths[j], measure(value))
    return [w + padding for w in widths]


def format_row(values: Sequence[str], widths: Sequence[int], measure: Measure = display_width) -> str:
    """Left-align each value and pad it with spaces to its column width."""
    out: List[str] = []
    for v, w in zip(values, widths):
        out.append(v + " " * max(0, w - measure(v)))
    return "".join(out)


def render_table(
    result: ResultSet,
    out: TextIO,
    *,
    measure: Measure = display_width,
    padding: int = PADDING,
) -> None:
    if result.row_count == 0:
        out.write(f"{NO_DATA}\n")
        return

    widths = column_widths(result, measure=measure, padding=padding)

    out.write(format_row(result.columns, widths, measure) + "\n")
    out.write("-" * sum(widths) + "\n")
    for row in result.rows:
        out.write(format_row(row, widths, measure) + "\n")

    out.write(f"\nRows returned: {result.row_count}\n")
