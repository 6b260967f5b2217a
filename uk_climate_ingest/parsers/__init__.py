"""
Parsers sub-package for uk-climate-ingest.

Contains layout-specific parsers that decode the data body of a Met
Office climate table into (year, period, value) observations.

Design: Strategy Pattern
- base.py defines the BaseParser ABC (protocol) and the Observation/Record types.
- chronological.py implements ChronologicalParser for year-per-row tables.
- ranked.py implements RankedParser for value-sorted fixed-width tables.

get_parser() selects the strategy from the layout's mode.
"""

from __future__ import annotations

from uk_climate_ingest.layout_registry import Layout
from uk_climate_ingest.parsers.base import BaseParser, Observation, Record
from uk_climate_ingest.parsers.chronological import ChronologicalParser
from uk_climate_ingest.parsers.ranked import RankedParser

__all__ = [
    "BaseParser",
    "ChronologicalParser",
    "Observation",
    "RankedParser",
    "Record",
    "get_parser",
]

_PARSER_MAP: dict[str, type[BaseParser]] = {
    "chronological": ChronologicalParser,
    "ranked": RankedParser,
}


def get_parser(layout: Layout) -> BaseParser:
    """Instantiate the parser for *layout*'s mode."""
    return _PARSER_MAP[layout.mode]()
