"""
Error type and diagnostic rendering for the fns language.

Every failure in the tokenizer, parser and evaluator is reported as a single
``FnsError`` carrying a message and the span of source text it refers to.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class Span(BaseModel):
    """Half-open ``[start, end)`` interval of character offsets into the source."""

    start: int = Field(description="Offset of the first character")
    end: int = Field(description="Offset one past the last character")

    model_config = ConfigDict(frozen=True)

    def __add__(self, other: Span) -> Span:
        """Combine two spans into one running from ``self.start`` to ``other.end``."""
        return Span(start=self.start, end=other.end)

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


class FnsError(Exception):
    """Lexical, syntactic or runtime error in an fns program."""

    def __init__(self, message: str, span: Span) -> None:
        self.message = message
        self.span = span
        super().__init__(message)

    def context(self, source: str) -> ErrorContext:
        """Locate this error inside ``source``."""
        return ErrorContext.from_span(self.span, source)

    def report(self, source: str) -> str:
        """Render the two-line diagnostic shown by the shell and the CLI."""
        ctx = self.context(source)
        return f"{ctx.format()}\nError: {self.message}"

    def __repr__(self) -> str:
        return f"FnsError({self.message!r}, span={self.span})"


@dataclass
class ErrorContext:
    """
    Source location of an error.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: The full text of the offending line
    """

    line: int
    column: int
    snippet: str | None = None

    @classmethod
    def from_span(cls, span: Span, source: str) -> ErrorContext:
        line = 1
        column = 1
        line_start = 0
        for index, char in enumerate(source):
            if index == span.start:
                break
            if char == "\n":
                line += 1
                column = 1
                line_start = index + 1
            else:
                column += 1

        line_end = source.find("\n", line_start)
        if line_end == -1:
            line_end = len(source)
        return cls(line=line, column=column, snippet=source[line_start:line_end])

    def format(self) -> str:
        return f"[error in line: {self.line}, column: {self.column}]"

    def format_snippet(self, width: int = 1) -> str:
        """Format the offending line with a caret marker under the error column."""
        if self.snippet is None:
            return ""
        prefix = f"{self.line:4d} | "
        marker = " " * (len(prefix) + self.column - 1) + "^" * max(width, 1)
        return f"{prefix}{self.snippet}\n{marker}"
