"""
Interactive preset resolution.

One cycle: choose a machine, choose one of its pathologies, print the matching
preset. ``run_session`` repeats cycles until the user declines.
"""

from __future__ import annotations

from typing import Sequence

from cbct_preset_selector.cli.logging_config import get_logger
from cbct_preset_selector.cli.prompts import question_with_options, question_yes_no
from cbct_preset_selector.cli.terminal import Terminal
from cbct_preset_selector.core.errors import Result
from cbct_preset_selector.core.records import PresetTable, Record, format_record
from cbct_preset_selector.core.selection import derive_machine_keys, filter_by_machine


logger = get_logger(__name__)

CONTINUE_QUESTION = "Do you want to obtain another preset?"
FAREWELL = "Bye"


def find_preset(terminal: Terminal, machines: Sequence[str], table: PresetTable) -> Result[Record]:
    """
    Run one machine -> pathology selection and print the resolved record.

    Parameters
    ----------
    terminal : Terminal
        Console to talk to
    machines : sequence of str
        Sorted machine names, as returned by ``derive_machine_keys``
    table : PresetTable
        Loaded preset table

    Returns
    -------
    Result[Record]
        The selected record, or the first Terminal error met on the way
    """
    written = terminal.write_line("\nMachine:")
    if not written.is_ok:
        return Result.fail(written.error)

    machine_idx = question_with_options(terminal, "Select", machines)
    if not machine_idx.is_ok:
        return Result.fail(machine_idx.error)
    machine = machines[machine_idx.value]

    entries = filter_by_machine(table, machine)
    logger.debug(f"{len(entries)} presets for machine {machine!r}")

    written = terminal.write_line("\nPathology:")
    if not written.is_ok:
        return Result.fail(written.error)

    pathology_idx = question_with_options(terminal, "Select", [e.pathology for e in entries])
    if not pathology_idx.is_ok:
        return Result.fail(pathology_idx.error)
    record = entries[pathology_idx.value]

    written = terminal.write_line(f"\nSelected parameters and preset:\n{format_record(record)}\n")
    if not written.is_ok:
        return Result.fail(written.error)

    logger.debug(f"Resolved preset {record.preset!r} for {record.machine!r} / {record.pathology!r}")
    return Result.ok(record)


def run_session(terminal: Terminal, table: PresetTable) -> Result[int]:
    """
    Repeat selection cycles until the user answers no.

    Returns
    -------
    Result[int]
        Number of presets resolved during the session
    """
    machines = derive_machine_keys(table)
    resolved = 0

    while True:
        found = find_preset(terminal, machines, table)
        if not found.is_ok:
            return Result.fail(found.error)
        resolved += 1

        again = question_yes_no(terminal, CONTINUE_QUESTION)
        if not again.is_ok:
            return Result.fail(again.error)
        if not again.value:
            break

    written = terminal.write_line(FAREWELL)
    if not written.is_ok:
        return Result.fail(written.error)
    return Result.ok(resolved)
