from __future__ import annotations

import sys

from .cli.list_queries import main as list_main
from .cli.run_report import main as run_main


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Default behavior: run the whole report
    if not argv:
        return run_main([])

    cmd = argv[0].lower()
    rest = argv[1:]

    if cmd in {"run", "report"}:
        return run_main(rest)

    if cmd in {"list", "ls", "catalog"}:
        return list_main(rest)

    # Flags only: treat as run
    if cmd.startswith("-"):
        return run_main(argv)

    print("Usage:")
    print("  python -m cosmetics_report run [--dsn ...] [--only q1 q5 ...] [--skip-injections]")
    print("  python -m cosmetics_report list [--sql]")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
