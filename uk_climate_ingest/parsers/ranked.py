"""
Ranked table parser.

In ranked tables every column is sorted by value, so a single line holds
values from different years. Each fixed-width cell therefore carries its
own year:

       JAN  Year     FEB  Year  ...     ANN  Year
       9.7  1916     9.6  1998  ...    14.9  2014
       9.5  1921                ...    14.8  2022

Cell ``j`` of a line (characters ``j*w .. (j+1)*w``) belongs to
period ``j``. Blank cells mean the column has run out of entries.

Because a year's 17 values are scattered over many lines, decoding is
two-pass: accumulate values per year across the whole body, then emit
every discovered year inside the layout's year range in ascending order.
"""

from __future__ import annotations

import logging

from uk_climate_ingest.layout_registry import Layout
from uk_climate_ingest.parsers.base import BaseParser, Observation
from uk_climate_ingest.periods import (
    MISSING_VALUE,
    PERIOD_COUNT,
    PERIOD_LABELS,
    normalize_value,
)

logger = logging.getLogger(__name__)


def _split_cell(cell: str) -> tuple[str, int] | None:
    """Split a non-blank cell into (value, year); None if malformed."""
    tokens = cell.split()
    if len(tokens) != 2:
        return None
    value, year_token = tokens
    try:
        return value, int(year_token)
    except ValueError:
        return None


def accumulate_years(body: str, cell_width: int) -> dict[int, list[str | None]]:
    """Collect values per year from all lines of a ranked body.

    Returns:
        Mapping year -> list of 17 slots (None where no cell named that year).
        When the same (year, period) appears twice, the later cell wins.
    """
    table: dict[int, list[str | None]] = {}
    for line in body.splitlines():
        for ordinal in range(PERIOD_COUNT):
            start = ordinal * cell_width
            if start >= len(line):
                break
            cell = line[start:start + cell_width]
            if not cell.strip():
                continue
            parsed = _split_cell(cell)
            if parsed is None:
                logger.warning(
                    "Skipping malformed %s cell %r", PERIOD_LABELS[ordinal], cell
                )
                continue
            value, year = parsed
            slots = table.setdefault(year, [None] * PERIOD_COUNT)
            slots[ordinal] = normalize_value(value)
    return table


class RankedParser(BaseParser):
    """Parser for ranked (value-sorted) tables."""

    def parse(self, body: str, layout: Layout) -> list[Observation]:
        table = accumulate_years(body, layout.cell_width)

        dropped = sorted(y for y in table if not layout.year_from <= y <= layout.year_to)
        if dropped:
            logger.debug(
                "Dropping %d year(s) outside %d-%d: %s",
                len(dropped), layout.year_from, layout.year_to, dropped,
            )

        observations: list[Observation] = []
        for year in range(layout.year_from, layout.year_to + 1):
            slots = table.get(year)
            if slots is None:
                continue
            for label, value in zip(PERIOD_LABELS, slots):
                observations.append(
                    Observation(
                        year=year,
                        period=label,
                        value=MISSING_VALUE if value is None else value,
                    )
                )

        logger.info(
            "Decoded %d ranked observations (%d years)",
            len(observations), len(observations) // PERIOD_COUNT,
        )
        return observations
