"""
fns command line.

Commands:
  • run FILE       Run a program; exit 65 on a language error
  • check FILE     Tokenize and parse only
  • inspect FILE   Print the parsed program (or tokens) as JSON
  • repl           Interactive shell (also the default with no command)
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import typer

from fns import __version__
from fns.console import plain_console
from fns.core.errors import FnsError
from fns.core.lang.builtins import LANGUAGE_NAME, LANGUAGE_VERSION
from fns.core.lang.parser import parse
from fns.core.lang.tokenizer import tokenize
from fns.core.pipeline import display_result, run_source
from fns.core.settings import LogLevel, configure_logging, get_log_level
from fns.repl import Repl

logger = logging.getLogger(__name__)

# sysexits.h
EXIT_DATAERR = 65
EXIT_NOINPUT = 66

app = typer.Typer(
    help=f"{LANGUAGE_NAME} – a small expression language",
    invoke_without_command=True,
    add_completion=False,
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{LANGUAGE_NAME} {__version__} (language {LANGUAGE_VERSION})")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
    log_level: LogLevel | None = typer.Option(
        None,
        "--log-level",
        help="Log level (overrides FNS_LOG_LEVEL)",
        case_sensitive=False,
    ),
) -> None:
    """Run fns programs or start the interactive shell."""
    configure_logging(log_level or get_log_level())
    if ctx.invoked_subcommand is None:
        Repl().run()


def _read_source(file: Path) -> str:
    try:
        return file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Could not read %s: %s", file, e)
        typer.echo(f"Error: Could not read source code file from '{file}': {e}", err=True)
        raise typer.Exit(code=EXIT_NOINPUT)


def _report(error: FnsError, source: str, verbose: bool) -> None:
    console = plain_console(stderr=True)
    console.print(error.report(source))
    if verbose:
        width = error.span.end - error.span.start
        console.print(error.context(source).format_snippet(width))


@app.command()
def run(
    file: Path = typer.Argument(..., help="Program to run"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show the offending source line"),
    show_result: bool = typer.Option(
        False, "--print", "-p", help="Print the value of the last statement"
    ),
) -> None:
    """Run a program file."""
    source = _read_source(file)
    try:
        value, _ = run_source(source)
        output = display_result(value, source) if show_result else None
    except FnsError as e:
        logger.info("%s failed: %s", file, e.message)
        _report(e, source, verbose)
        raise typer.Exit(code=EXIT_DATAERR)

    if output is not None:
        plain_console().print(output)


@app.command()
def check(
    file: Path = typer.Argument(..., help="Program to check"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show the offending source line"),
) -> None:
    """Tokenize and parse a program without running it."""
    source = _read_source(file)
    try:
        program = parse(tokenize(source))
    except FnsError as e:
        _report(e, source, verbose)
        raise typer.Exit(code=EXIT_DATAERR)

    typer.echo(f"OK ({len(program)} statements)")


@app.command()
def inspect(
    file: Path = typer.Argument(..., help="Program to inspect"),
    tokens: bool = typer.Option(False, "--tokens", "-t", help="Dump tokens instead of the AST"),
) -> None:
    """Print the token list or the parsed program as JSON."""
    source = _read_source(file)
    try:
        token_list = tokenize(source)
        if tokens:
            payload = [t.model_dump(mode="json") for t in token_list]
        else:
            payload = parse(token_list).model_dump(mode="json")
    except FnsError as e:
        _report(e, source, verbose=False)
        raise typer.Exit(code=EXIT_DATAERR)

    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command()
def repl() -> None:
    """Start the interactive shell."""
    Repl().run()


def main(argv: list[str] | None = None) -> None:
    app(args=argv if argv is not None else sys.argv[1:])


if __name__ == "__main__":
    main()
