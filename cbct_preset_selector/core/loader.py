"""
Preset table loading.

Reads a delimited text file whose first line is a header (read and discarded)
and whose remaining lines each hold exactly three fields:
machine, pathology and preset. Blank lines are skipped. Any other field count
aborts the load; no partial table is ever returned.

Usage:
    from cbct_preset_selector.core.loader import load_table

    result = load_table(Path("data.csv"))
    if result.is_ok:
        table = result.value
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import List

from cbct_preset_selector.core.errors import AppError, Result
from cbct_preset_selector.core.records import COLUMNS, PresetTable


logger = logging.getLogger(__name__)

EXPECTED_COLUMNS = len(COLUMNS)


def load_table(
    path: Path | str,
    delimiter: str = ",",
    encoding: str = "utf-8-sig",
) -> Result[PresetTable]:
    """
    Load the preset table from a delimited text file.

    Parameters
    ----------
    path : Path or str
        Location of the CSV file
    delimiter : str
        Single field separator character (default: ",")
    encoding : str
        Text encoding; the default also drops a leading byte order mark

    Returns
    -------
    Result[PresetTable]
        The table in file order, or an IO error when the file cannot be read
        or a data line does not have exactly three fields
    """
    path = Path(path)
    rows: List[List[str]] = []

    try:
        with open(path, "r", newline="", encoding=encoding) as handle:
            reader = csv.reader(handle, delimiter=delimiter, strict=True)
            header = next(reader, None)
            logger.debug(f"Header of {path}: {header}")

            for row in reader:
                if not row:
                    continue
                if len(row) != EXPECTED_COLUMNS:
                    return Result.fail(AppError.io(
                        f"Expected each line to contain {EXPECTED_COLUMNS} columns "
                        f"but instead were detected: {len(row)} "
                        f"(line {reader.line_num} of {path})"
                    ))
                rows.append(row)
    except (OSError, UnicodeDecodeError, LookupError, csv.Error) as e:
        return Result.fail(AppError.io(f"{path}: {e}"))

    table = PresetTable.from_rows(rows)
    logger.info(f"Loaded {len(table)} presets from {path}")
    return Result.ok(table)
