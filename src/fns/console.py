"""Rich consoles for program output and diagnostics."""

from rich.console import Console


def plain_console(stderr: bool = False) -> Console:
    """Console that prints text verbatim: no markup, emoji codes, highlighting or wrapping."""
    return Console(stderr=stderr, markup=False, emoji=False, highlight=False, soft_wrap=True)
