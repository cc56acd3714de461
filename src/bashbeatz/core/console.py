"""Rich console used outside the Textual UI.

The `tree` command and console log messages share one themed Console, so
library styles are referred to by name (e.g. "[library.artist]").
"""

from rich.console import Console
from rich.theme import Theme

LIBRARY_THEME = Theme(
    {
        "library.root": "bold cyan",
        "library.artist": "bold magenta",
        "library.album": "green",
        "library.directory": "dim",
        "library.summary": "dim",
    }
)

_console: Console | None = None


def get_console() -> Console:
    """Get or create the shared Console."""
    global _console
    if _console is None:
        # Titles are full of numbers and dates; no automatic highlighting
        _console = Console(theme=LIBRARY_THEME, highlight=False)
    return _console


def safe_print(message, style: str | None = None) -> None:
    """Print text or a Rich renderable, optionally with a style or theme name."""
    get_console().print(message, style=style)
