from __future__ import annotations

import os
from typing import List, TextIO

from ..config import RULE_WIDTH, SHOP_SUBTITLE, SHOP_TITLE


class Ansi:
    def __init__(self, stream: TextIO | None = None) -> None:
        isatty = getattr(stream, "isatty", None)
        self.enabled = (
            stream is not None
            and callable(isatty)
            and bool(isatty())
            and os.environ.get("NO_COLOR") is None
            and os.environ.get("TERM") not in (None, "", "dumb")
        )

    def _wrap(self, s: str, code: str) -> str:
        if not self.enabled:
            return s
        return f"\x1b[{code}m{s}\x1b[0m"

    def bold(self, s: str) -> str: return self._wrap(s, "1")
    def dim(self, s: str) -> str: return self._wrap(s, "2")

    def red(self, s: str) -> str: return self._wrap(s, "31")
    def green(self, s: str) -> str: return self._wrap(s, "32")
    def cyan(self, s: str) -> str: return self._wrap(s, "36")


def hr(char: str = "=", n: int = RULE_WIDTH) -> str:
    return char * n


def banner(title: str, a: Ansi | None = None) -> str:
    a = a or Ansi()
    rule = hr()
    return f"{rule}\n{a.bold(title)}\n{rule}\n"


def title_block(a: Ansi | None = None) -> str:
    a = a or Ansi()
    lines: List[str] = [
        hr(),
        a.cyan(a.bold(SHOP_TITLE.center(RULE_WIDTH).rstrip())),
        a.cyan(SHOP_SUBTITLE.center(RULE_WIDTH).rstrip()),
        hr(),
    ]
    return "\n".join(lines) + "\n"
