"""
Interactive shell for the fns language.

Each line runs on top of the environment left by the previous successful
line, so bindings carry forward. A line that fails leaves the environment
untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from rich.console import Console

from fns.console import plain_console
from fns.core.errors import FnsError
from fns.core.lang.builtins import LANGUAGE_NAME, LANGUAGE_VERSION
from fns.core.lang.environment import Environment
from fns.core.pipeline import display_result, run_source
from fns.core.settings import get_prompt

logger = logging.getLogger(__name__)


class Repl:
    """Line-oriented read-eval-print loop."""

    def __init__(
        self,
        console: Console | None = None,
        error_console: Console | None = None,
        prompt: str | None = None,
    ) -> None:
        self.console = console or plain_console()
        self.error_console = error_console or plain_console(stderr=True)
        self.prompt = prompt if prompt is not None else get_prompt()
        self.environment = Environment()

    @property
    def banner(self) -> str:
        return f"{LANGUAGE_NAME} repl v{LANGUAGE_VERSION}\npress [ctrl + c] to exit\n"

    def eval_line(self, line: str) -> str:
        """Run one line and return the text to print.

        Raises:
            FnsError: If the line fails; the carried environment is unchanged.
        """
        value, environment = run_source(line, self.environment)
        output = display_result(value, line)
        self.environment = environment
        return output

    def run(self, read_line: Callable[[str], str] = input) -> None:
        """Loop until end of input or Ctrl+C."""
        self.console.print(self.banner)
        while True:
            try:
                line = read_line(self.prompt)
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                return

            try:
                output = self.eval_line(line)
            except FnsError as e:
                logger.debug("Line failed: %r", e)
                self.error_console.print(e.report(line))
                continue
            self.console.print(output)
