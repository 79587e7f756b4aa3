"""Tests for CLI commands."""

import json

import pytest
from typer.testing import CliRunner

from fns.cli import EXIT_DATAERR, EXIT_NOINPUT, app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


class TestVersion:
    def test_version_flag(self, cli_runner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert result.output.startswith("fns ")
        assert "(language 0.0.1)" in result.output


class TestRun:
    def test_runs_silently(self, cli_runner, write_program) -> None:
        path = write_program("let a = 1\na + 1")
        result = cli_runner.invoke(app, ["run", str(path)])
        assert result.exit_code == 0
        assert result.output == ""

    def test_print_last_value(self, cli_runner, write_program) -> None:
        path = write_program('let lang = {name: "fns"}\nlang.name + "!"')
        result = cli_runner.invoke(app, ["run", str(path), "--print"])
        assert result.exit_code == 0
        assert result.output.strip() == "fns!"

    def test_print_object(self, cli_runner, write_program) -> None:
        path = write_program('{n: 1.5, s: "x", ok: none}')
        result = cli_runner.invoke(app, ["run", "-p", str(path)])
        assert result.output.strip() == '{n: 1.5, s: "x", ok: none}'

    def test_language_error(self, cli_runner, write_program) -> None:
        path = write_program("let a = 1\na / 0")
        result = cli_runner.invoke(app, ["run", str(path)])
        assert result.exit_code == EXIT_DATAERR
        assert "[error in line: 2, column: 1]" in result.output
        assert "Error: Can't divide by 0" in result.output

    def test_verbose_shows_source_line(self, cli_runner, write_program) -> None:
        path = write_program("let a = 1\nb + 1")
        result = cli_runner.invoke(app, ["run", "--verbose", str(path)])
        assert result.exit_code == EXIT_DATAERR
        assert "   2 | b + 1" in result.output
        assert "^" in result.output

    def test_value_too_deep_to_print(self, cli_runner, write_program) -> None:
        path = write_program("let a = 1\n" + "a = {x: a}\n" * 1000 + "a")
        result = cli_runner.invoke(app, ["run", "--print", str(path)])
        assert result.exit_code == EXIT_DATAERR
        assert "Error: Expression is nested too deeply" in result.output

    def test_missing_file(self, cli_runner, tmp_path) -> None:
        result = cli_runner.invoke(app, ["run", str(tmp_path / "nope.fns")])
        assert result.exit_code == EXIT_NOINPUT
        assert "Could not read source code file" in result.output


class TestCheck:
    def test_ok(self, cli_runner, write_program) -> None:
        path = write_program("let a = 1\nconst b = 2\nmissing + 1")
        result = cli_runner.invoke(app, ["check", str(path)])
        assert result.exit_code == 0
        assert result.output.strip() == "OK (3 statements)"

    def test_syntax_error(self, cli_runner, write_program) -> None:
        path = write_program("let = 1")
        result = cli_runner.invoke(app, ["check", str(path)])
        assert result.exit_code == EXIT_DATAERR
        assert "Unexpected token '=', expected 'identifier'" in result.output


class TestInspect:
    def test_ast(self, cli_runner, write_program) -> None:
        path = write_program("let a = 1 + 2")
        result = cli_runner.invoke(app, ["inspect", str(path)])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        statement = payload["statements"][0]
        assert statement["node"] == "let"
        assert statement["expression"]["node"] == "binary"

    def test_tokens(self, cli_runner, write_program) -> None:
        path = write_program("a.b")
        result = cli_runner.invoke(app, ["inspect", "--tokens", str(path)])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert [t["lexeme"] for t in payload] == ["a", ".", "b", ""]
        assert payload[-1]["span"] == {"start": 3, "end": 3}

    def test_lexical_error(self, cli_runner, write_program) -> None:
        path = write_program("@")
        result = cli_runner.invoke(app, ["inspect", "-t", str(path)])
        assert result.exit_code == EXIT_DATAERR
        assert "Invalid character '@'" in result.output


class TestRepl:
    def test_repl_command(self, cli_runner) -> None:
        result = cli_runner.invoke(app, ["repl"], input="let a = 2\na * 21\n")
        assert result.exit_code == 0
        assert "fns repl v0.0.1" in result.output
        assert "42" in result.output

    def test_repl_is_default(self, cli_runner) -> None:
        result = cli_runner.invoke(app, [], input="fns.version\n")
        assert result.exit_code == 0
        assert "0.0.1" in result.output

    def test_repl_reports_and_continues(self, cli_runner) -> None:
        result = cli_runner.invoke(app, ["repl"], input="x\n1 + 1\n")
        assert result.exit_code == 0
        assert "Can't access the variable 'x' as it's not defined" in result.output
        assert "2" in result.output
