from __future__ import annotations

from rich.console import Console
from rich.theme import Theme

# curlparse color theme
CURLPARSE_THEME = Theme({
    "success": "bold green",
    "error": "bold red",
    "warning": "bold yellow",
    "info": "cyan",
    "url": "blue underline",
    "option": "magenta",
    "number": "bright_blue",
    "curlparse": "bold green",
})

# Shared console instances
console = Console(theme=CURLPARSE_THEME, stderr=True)
stdout_console = Console(theme=CURLPARSE_THEME, stderr=False)


def get_console(use_stderr: bool = True) -> Console:
    """Get a themed console instance.

    Args:
        use_stderr: If True, output to stderr (default). If False, output to stdout.

    Returns:
        Console instance with curlparse theme.
    """
    return console if use_stderr else stdout_console
