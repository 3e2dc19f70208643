"""Record and table types for the preset dataset."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

import polars as pl


COLUMNS = ("machine", "pathology", "preset")

TABLE_SCHEMA = {name: pl.Utf8 for name in COLUMNS}


@dataclass(frozen=True)
class Record:
    """One (machine, pathology, preset) row of the preset table."""
    machine: str
    pathology: str
    preset: str

    def __str__(self) -> str:
        return format_record(self)


def format_record(record: Record) -> str:
    """Render a record as the labeled block shown after a selection."""
    return (
        f"machine: {record.machine}\n"
        f"pathology: {record.pathology}\n"
        f"preset: {record.preset}"
    )


@dataclass(frozen=True, eq=False)
class PresetTable:
    """
    Ordered, read-only collection of records.

    Backed by a polars DataFrame with one Utf8 column per field. Row order
    is the order of the source file.
    """
    frame: pl.DataFrame

    @classmethod
    def from_records(cls, records: Iterable[Record]) -> PresetTable:
        columns: dict[str, list[str]] = {name: [] for name in COLUMNS}
        for record in records:
            columns["machine"].append(record.machine)
            columns["pathology"].append(record.pathology)
            columns["preset"].append(record.preset)
        return cls(pl.DataFrame(columns, schema=TABLE_SCHEMA))

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[str]]) -> PresetTable:
        return cls.from_records(Record(*row) for row in rows)

    def __len__(self) -> int:
        return self.frame.height

    def records(self) -> List[Record]:
        return records_from_frame(self.frame)


def records_from_frame(frame: pl.DataFrame) -> List[Record]:
    return [Record(**row) for row in frame.select(list(COLUMNS)).iter_rows(named=True)]
