"""
Base parser protocol / ABC for uk-climate-ingest.

All layout-specific parsers implement this interface. The contract is:
1. parse() takes the data body returned by the header locator and the
   matched Layout, and returns a list of Observation.
2. An Observation is one (year, period, value) cell. Region and
   parameter are attached later by the batch orchestrator, which turns
   observations into output Records.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from uk_climate_ingest.layout_registry import Layout

RECORD_COLUMNS = ["region_code", "weather_param", "year", "key", "value"]


@dataclass(frozen=True)
class Observation:
    """One decoded table cell.

    Attributes:
        year: Calendar year of the value.
        period: One of the 17 period labels (JAN..DEC, WIN..AUT, ANN).
        value: The source token verbatim, or the ``N/A`` sentinel.
    """
    year: int
    period: str
    value: str


@dataclass(frozen=True)
class Record:
    """One output row. Field names match the CSV header."""
    region_code: str
    weather_param: str
    year: int
    key: str
    value: str

    def as_row(self) -> list[str]:
        return [self.region_code, self.weather_param, str(self.year), self.key, self.value]


class BaseParser(ABC):
    """Abstract base class for table layout parsers."""

    @abstractmethod
    def parse(self, body: str, layout: Layout) -> list[Observation]:
        """Decode a data body into observations.

        Args:
            body: Text after the header row, blank lines already removed.
            layout: The Layout the body was located with.

        Returns:
            Observations in emission order for this unit.
        """
