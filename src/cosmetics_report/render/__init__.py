from .format import Ansi, banner, hr, title_block
from .table import NO_DATA, column_widths, format_row, render_table
from .width import display_width, terminal_width

__all__ = [
    "Ansi",
    "banner",
    "hr",
    "title_block",
    "NO_DATA",
    "column_widths",
    "format_row",
    "render_table",
    "display_width",
    "terminal_width",
]
