from __future__ import annotations

import argparse
import sys
import textwrap
from typing import TextIO

from ..db.results import ResultSet
from ..queries.catalog import all_entries
from ..render.table import render_table


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="cosmetics_report list",
        description="Show the report catalog without connecting to the database.",
    )
    ap.add_argument("--sql", action="store_true", help="Print the statement text under each entry")
    return ap


def main(argv: list[str] | None = None, out: TextIO | None = None) -> int:
    args = build_argparser().parse_args(argv)
    out = out or sys.stdout

    entries = all_entries()

    if not args.sql:
        render_table(ResultSet(columns=("key", "title"), rows=[(e.key, e.title) for e in entries]), out)
        return 0

    for e in entries:
        out.write(f"[{e.key}] {e.title}\n")
        out.write(textwrap.indent(textwrap.dedent(e.sql).strip(), "    ") + "\n\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
