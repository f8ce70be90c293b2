# src/pingpong_sim/reporting.py
"""
Reference rendering of iteration records for human consumption.

The simulation core never prints; it yields `IterationRecord` objects and this module
turns them into text lines:

    run 0 in:  1,0,0,0,0,0,0,0
    run 0 out: 0,1,0,0,0,0,0,0
    =========================
"""
import logging
from typing import Iterable, List, TextIO

import numpy as np

from .constants import RECORD_SEPARATOR
from .simulation.results import IterationRecord

logger = logging.getLogger(__name__)


def format_cells(cells: np.ndarray) -> str:
    """Comma-joins cell values; whole-valued floats print without a fractional part."""
    return ",".join(_format_cell(cell) for cell in np.asarray(cells).tolist())


def _format_cell(cell) -> str:
    if isinstance(cell, float) and cell.is_integer():
        return str(int(cell))
    return str(cell)


def format_record(record: IterationRecord) -> List[str]:
    """Returns the three report lines for a single iteration."""
    i = record.iteration_index
    return [
        f"run {i} in:  {format_cells(record.source_snapshot)}",
        f"run {i} out: {format_cells(record.destination_snapshot)}",
        RECORD_SEPARATOR,
    ]


def render_records(records: Iterable[IterationRecord], stream: TextIO) -> int:
    """
    Writes each record to `stream` as soon as it is produced, so lines for completed
    iterations are already out if a later iteration fails.

    Returns:
        The number of records written.
    """
    count = 0
    for record in records:
        for line in format_record(record):
            stream.write(line + "\n")
        stream.flush()
        count += 1
    logger.debug(f"Rendered {count} iteration record(s).")
    return count
