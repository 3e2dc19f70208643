"""
Console read/write primitives.

``Terminal`` wraps a rich Console for output and either standard input or an
explicit text stream for input. Every operation returns a ``Result`` so that
console failures travel up to the CLI entry point like any other stage error.
"""

from __future__ import annotations

from typing import Optional, TextIO

from rich.console import Console

from cbct_preset_selector.core.errors import AppError, Result


class Terminal:
    """
    Line oriented console used by the prompts.

    Parameters
    ----------
    console : Console, optional
        Output console (default: a new stdout Console)
    stream : TextIO, optional
        Input stream; standard input is used when omitted

    Notes
    -----
    Text is printed with markup and highlighting disabled so that table values
    such as ``[Head & Neck]`` are shown verbatim.
    """

    def __init__(self, console: Optional[Console] = None, stream: Optional[TextIO] = None):
        self.console = console or Console()
        self.stream = stream

    def write_str(self, text: str) -> Result[None]:
        try:
            self.console.print(text, end="", markup=False, emoji=False, highlight=False, soft_wrap=True)
        except OSError as e:
            return Result.fail(AppError.terminal(str(e)))
        return Result.ok()

    def write_line(self, text: str = "") -> Result[None]:
        return self.write_str(f"{text}\n")

    def read_line(self) -> Result[str]:
        """Read one line without its trailing newline. End of input is an error."""
        try:
            if self.stream is None:
                line = self.console.input()
            else:
                line = self.stream.readline()
                if not line:
                    raise EOFError("end of input")
        except (EOFError, OSError) as e:
            return Result.fail(AppError.terminal(str(e) or "end of input"))
        return Result.ok(line.rstrip("\r\n"))
