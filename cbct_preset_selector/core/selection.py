"""
Key extraction and exact-match filtering over a loaded preset table.

All functions are pure: they read the table and never modify it.
"""

from __future__ import annotations

from typing import List, Optional

import polars as pl

from cbct_preset_selector.core.records import PresetTable, Record, records_from_frame


def derive_machine_keys(table: PresetTable) -> List[str]:
    """
    Return the distinct machine names, sorted lexicographically.

    Parameters
    ----------
    table : PresetTable
        Loaded preset table

    Returns
    -------
    list[str]
        Each machine exactly once; empty for an empty table
    """
    machines = table.frame.get_column("machine").unique(maintain_order=True)
    return machines.sort().to_list()


def filter_by_machine(table: PresetTable, machine: str) -> List[Record]:
    """
    Select every record of ``machine``, stable-sorted by pathology.

    Duplicate (machine, pathology) rows are all kept, in file order.
    """
    filtered = (
        table.frame
        .filter(pl.col("machine") == machine)
        .sort("pathology", maintain_order=True)
    )
    return records_from_frame(filtered)


def resolve_preset(table: PresetTable, machine: str, pathology: str) -> Optional[Record]:
    """Return the first record matching both fields exactly, or None."""
    for record in filter_by_machine(table, machine):
        if record.pathology == pathology:
            return record
    return None
