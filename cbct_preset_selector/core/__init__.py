"""Core data handling: records, loading and selection."""

from cbct_preset_selector.core.errors import AppError, ErrorKind, Result
from cbct_preset_selector.core.loader import EXPECTED_COLUMNS, load_table
from cbct_preset_selector.core.records import COLUMNS, PresetTable, Record, format_record
from cbct_preset_selector.core.selection import (
    derive_machine_keys,
    filter_by_machine,
    resolve_preset,
)

__all__ = [
    "AppError",
    "ErrorKind",
    "Result",
    "EXPECTED_COLUMNS",
    "load_table",
    "COLUMNS",
    "PresetTable",
    "Record",
    "format_record",
    "derive_machine_keys",
    "filter_by_machine",
    "resolve_preset",
]
