"""
Chronological (year-ordered) table parser.

Input structure (after the header locator):
  1884    8.3    7.9   10.2  ...    ---   13.0   19.5   13.3   13.9
  1885    6.1    9.7    9.8  ...   7.55  12.37  19.93  12.23  12.98

One line per year. Cells are separated by runs of whitespace, so
irregular spacing is harmless. Cell 0 is the year, cells 1..17 follow
PERIOD_LABELS order. A short row yields fewer observations; nothing is
padded.
"""

from __future__ import annotations

import logging

from uk_climate_ingest.layout_registry import Layout
from uk_climate_ingest.parsers.base import BaseParser, Observation
from uk_climate_ingest.periods import PERIOD_COUNT, normalize_value, period_label

logger = logging.getLogger(__name__)


class ChronologicalParser(BaseParser):
    """Parser for year-per-row tables."""

    def parse(self, body: str, layout: Layout) -> list[Observation]:
        observations: list[Observation] = []
        for line in body.splitlines():
            cells = line.split()
            if not cells:
                continue
            try:
                year = int(cells[0])
            except ValueError:
                logger.warning("Skipping line without a leading year: %r", line[:40])
                continue

            values = cells[1:]
            if len(values) > PERIOD_COUNT:
                logger.warning(
                    "Year %d has %d value cells, ignoring the last %d",
                    year, len(values), len(values) - PERIOD_COUNT,
                )
                values = values[:PERIOD_COUNT]

            for index, token in enumerate(values):
                observations.append(
                    Observation(year=year, period=period_label(index), value=normalize_value(token))
                )

        logger.info("Decoded %d chronological observations", len(observations))
        return observations
