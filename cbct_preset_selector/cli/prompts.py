"""
Question helpers built on ``Terminal``.

- question: free text, re-asked while the answer is empty
- question_yes_no: y/yes (any case) is True, everything else False
- question_with_options: numbered menu, returns the 0-based index
"""

from __future__ import annotations

from typing import Sequence

from cbct_preset_selector.cli.terminal import Terminal
from cbct_preset_selector.core.errors import AppError, Result


NO_ANSWER_NOTICE = "No answer was given.\n"

AFFIRMATIVE_ANSWERS = ("y", "yes")


def question(terminal: Terminal, msg: str) -> Result[str]:
    """Ask ``msg`` until a non-empty (trimmed) answer is given."""
    while True:
        written = terminal.write_str(f"{msg}: ")
        if not written.is_ok:
            return Result.fail(written.error)

        read = terminal.read_line()
        if not read.is_ok:
            return Result.fail(read.error)

        answer = read.value.strip()
        if answer:
            return Result.ok(answer)

        written = terminal.write_line(NO_ANSWER_NOTICE)
        if not written.is_ok:
            return Result.fail(written.error)


def question_yes_no(terminal: Terminal, msg: str) -> Result[bool]:
    answer = question(terminal, f"{msg} [y/n]")
    if not answer.is_ok:
        return Result.fail(answer.error)
    return Result.ok(answer.value.lower() in AFFIRMATIVE_ANSWERS)


def question_with_options(terminal: Terminal, msg: str, options: Sequence[object]) -> Result[int]:
    """
    Render ``options`` as a 1-indexed menu and read the user's choice.

    Parameters
    ----------
    terminal : Terminal
        Console to talk to
    msg : str
        Prompt shown after the menu (e.g., "Select")
    options : sequence
        Menu entries, shown with ``str()``

    Returns
    -------
    Result[int]
        0-based index of the chosen option. A non-numeric answer is a
        Terminal error; a number outside the menu shows the menu again.
    """
    if not options:
        return Result.fail(AppError.terminal("There are no options to choose from."))

    while True:
        for number, option in enumerate(options, start=1):
            written = terminal.write_line(f"{number}. {option}")
            if not written.is_ok:
                return Result.fail(written.error)

        written = terminal.write_str(f"{msg}: ")
        if not written.is_ok:
            return Result.fail(written.error)

        read = terminal.read_line()
        if not read.is_ok:
            return Result.fail(read.error)

        try:
            choice = int(read.value.strip())
        except ValueError as e:
            return Result.fail(AppError.terminal(str(e)))

        if 1 <= choice <= len(options):
            return Result.ok(choice - 1)

        written = terminal.write_line(
            f"Invalid option {choice}: choose a number between 1 and {len(options)}.\n"
        )
        if not written.is_ok:
            return Result.fail(written.error)
