"""Terminal Output Formatting Package"""

import os
import sys

from rich import box
from rich.console import Console
from rich.table import Table


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'


def _supports_color() -> bool:
    if os.environ.get('NO_COLOR') is not None:
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(sys.stdout, 'isatty') or not sys.stdout.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
            return True
        except Exception:
            return False
    return True


def _supports_unicode() -> bool:
    if sys.platform == 'win32':
        try:
            '✓'.encode(sys.stdout.encoding or 'utf-8')
            return True
        except (UnicodeEncodeError, LookupError):
            return False
    return True


COLORS_ENABLED = _supports_color()
UNICODE_ENABLED = _supports_unicode()

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'


def set_colors(enabled: bool) -> None:
    """Turn colour on or off for everything printed afterwards."""
    global COLORS_ENABLED
    COLORS_ENABLED = enabled and _supports_color()


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def success(text: str) -> str:
    return _colorize(text, Colors.GREEN)


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def warning(text: str) -> str:
    return _colorize(text, Colors.YELLOW)


def info(text: str) -> str:
    return _colorize(text, Colors.CYAN)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def bold(text: str) -> str:
    return _colorize(text, Colors.BOLD)


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}")


def print_error(message: str) -> None:
    print(f"{error(CROSS)} {error(message)}", file=sys.stderr)


def print_warning(message: str) -> None:
    print(f"{warning('⚠')} {warning(message)}" if UNICODE_ENABLED else f"[!] {message}")


def render_coauthor_table(title: str, coauthors, get_alias=None) -> None:
    """Print co-authors as a numbered table (#, Alias, Name, Email).

    *get_alias* maps a co-author to the alias shown; defaults to the
    co-author's own alias.
    """
    console = Console(no_color=not COLORS_ENABLED, highlight=False, soft_wrap=False)

    if COLORS_ENABLED:
        table = Table(box=box.SQUARE, header_style="bold green", row_styles=["white"])
    else:
        table = Table(box=box.SQUARE if UNICODE_ENABLED else box.ASCII, header_style="", show_edge=True)

    table.add_column("#", justify="right")
    table.add_column("Alias")
    table.add_column("Name")
    table.add_column("Email")

    for i, coauthor in enumerate(coauthors):
        alias = get_alias(coauthor) if get_alias else (coauthor.alias or "")
        table.add_row(str(i), alias, coauthor.name, coauthor.email)

    print(bold(title))
    console.print(table)


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK", "CROSS",
    "set_colors",
    "success", "error", "warning", "info", "dim", "bold",
    "print_success", "print_error", "print_warning",
    "render_coauthor_table",
]
