from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence, Tuple


def cell_text(value: Any) -> str:
    """
    Text for one cell: NULL, booleans and binary follow the PostgreSQL
    text format, everything else is str() of the driver value.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "t" if value else "f"
    if isinstance(value, (bytes, bytearray, memoryview)):
        return "\\x" + bytes(value).hex()
    return str(value)


@dataclass(frozen=True)
class ResultSet:
    columns: Tuple[str, ...] = ()
    rows: Tuple[Tuple[str, ...], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))
        object.__setattr__(self, "rows", tuple(tuple(r) for r in self.rows))

        n = len(self.columns)
        for i, row in enumerate(self.rows):
            if len(row) != n:
                raise ValueError(f"Row {i} has {len(row)} cells, expected {n} (columns: {list(self.columns)})")

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @classmethod
    def from_records(cls, columns: Sequence[str], records: Iterable[Sequence[Any]]) -> "ResultSet":
        return cls(
            columns=tuple(str(c) for c in columns),
            rows=tuple(tuple(cell_text(v) for v in rec) for rec in records),
        )
