# src/cosmetics_report/cli/run_report.py
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence, TextIO

from ..config import load_settings
from ..db.results import ResultSet
from ..db.session import Database
from ..errors import ConnectError, QueryError
from ..logs import configure_logging
from ..queries.catalog import INJECTION_BANNER, QuerySpec, select, split
from ..render.format import Ansi, banner, hr, title_block
from ..render.table import Measure, render_table
from ..render.width import display_width, terminal_width

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryOutcome:
    spec: QuerySpec
    result: Optional[ResultSet] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def run_entry(db: Database, spec: QuerySpec, out: TextIO, *, measure: Measure, a: Ansi) -> QueryOutcome:
    out.write("\n" + banner(spec.title, a))

    try:
        result = db.run(spec.sql)
    except QueryError as exc:
        logger.error("%s failed: %s", spec.key, exc)
        logger.debug("Failed statement for %s: %s", spec.key, exc.sql.strip())
        out.write(a.red(f"ERROR: {exc}") + "\n")
        return QueryOutcome(spec=spec, error=str(exc))

    out.write("\n")
    render_table(result, out, measure=measure)
    return QueryOutcome(spec=spec, result=result)


def run_report(
    db: Database,
    out: TextIO,
    *,
    entries: Sequence[QuerySpec],
    measure: Measure = display_width,
    a: Ansi | None = None,
) -> List[QueryOutcome]:
    """Run every entry in order; a failing entry never stops the rest."""
    a = a or Ansi(out)
    queries, injections = split(entries)

    outcomes: List[QueryOutcome] = []
    for spec in queries:
        outcomes.append(run_entry(db, spec, out, measure=measure, a=a))

    if injections:
        out.write("\n" + banner(INJECTION_BANNER, a))
        for spec in injections:
            outcomes.append(run_entry(db, spec, out, measure=measure, a=a))

    return outcomes


def closing_line(outcomes: Sequence[QueryOutcome], a: Ansi) -> str:
    failed = sum(1 for o in outcomes if not o.ok)
    if failed == 0:
        return a.green("SUCCESS: All queries executed successfully!")
    return a.red(f"FINISHED: {failed} of {len(outcomes)} queries failed")


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="cosmetics_report run",
        description="Run the cosmetics shop report queries and print each result as a text table.",
    )
    ap.add_argument("--dsn", type=str, default=None, help="SQLAlchemy URL or libpq conninfo. Defaults to $COSMETICS_DSN.")
    ap.add_argument("--only", nargs="+", metavar="KEY", default=None, help="Run only these catalog entries (e.g. q1 q5 inj3)")
    ap.add_argument("--skip-injections", action="store_true", help="Leave out the SQL injection demonstrations")
    ap.add_argument("--wide-chars", action="store_true", help="Measure double-width glyphs as two columns")
    ap.add_argument("--echo-sql", action="store_true", help="Log every statement sent to the database")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return ap


def main(argv: list[str] | None = None, out: TextIO | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    out = out or sys.stdout

    settings = load_settings()
    configure_logging("debug" if args.verbose else settings.log_level)

    try:
        entries = select(args.only)
    except KeyError as exc:
        logger.error("%s", exc.args[0])
        return 1
    if args.skip_injections:
        _, injections = split(entries)
        entries = [e for e in entries if e not in injections]

    measure: Measure = terminal_width if args.wide_chars else display_width
    dsn = args.dsn or settings.dsn
    a = Ansi(out)

    try:
        with Database.connect(dsn, echo=args.echo_sql) as db:
            out.write(a.green(f"OK: {db.backend} connected") + "\n")
            out.write("\n" + title_block(a))
            outcomes = run_report(db, out, entries=entries, measure=measure, a=a)
    except ConnectError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        logger.debug("Connection failed", exc_info=True)
        return 1

    out.write("\n" + hr() + "\n")
    out.write(closing_line(outcomes, a) + "\n")
    out.write(hr() + "\n\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
