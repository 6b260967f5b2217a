"""
Header location and layout detection for Met Office climate tables.

Every source text starts with a free-form preamble (title, station notes,
"Last updated" line) followed by a header row and the data. The header
row differs per layout, so each layout YAML carries a regex for it:

- chronological: ``WIN SPR SUM AUT ANN`` (end of the year-row header)
- ranked:        ``AUT Year ANN Year`` (end of the value/year pair header)

Detection algorithm (``detect_layout``):
1. Load all layout YAML files from uk_climate_ingest/layouts/.
2. For each layout (ordered by priority), search its header pattern.
3. Return the first layout whose pattern matches.
4. Fallback: raise UnknownFormatError.
"""

from __future__ import annotations

import logging

from uk_climate_ingest.exceptions import NoDataError, UnknownFormatError
from uk_climate_ingest.layout_registry import Layout, load_all_layouts

logger = logging.getLogger(__name__)


def _strip_blank_lines(text: str) -> str:
    """Drop empty and whitespace-only lines, keep line-leading spaces."""
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    return "\n".join(line for line in lines if line.strip())


def locate_data_body(raw_text: str, layout: Layout) -> str:
    """Return the data body that follows the layout's header row.

    Only the first header match is used. Everything after the match end is
    returned with blank lines removed. Leading whitespace of the remaining
    lines is kept because the ranked decoder works on character positions.

    Args:
        raw_text: The complete source text for one region/parameter.
        layout: The layout whose header pattern should be searched.

    Returns:
        The data body, one data line per ``\\n``-separated line.

    Raises:
        NoDataError: If the header pattern does not occur in *raw_text*.
    """
    match = layout.header_regex.search(raw_text)
    if match is None:
        raise NoDataError(
            f"No '{layout.mode}' header found (pattern {layout.header_pattern!r})"
        )
    body = _strip_blank_lines(raw_text[match.end():])
    logger.debug(
        "Header for '%s' ends at offset %d, %d data lines",
        layout.mode, match.end(), body.count("\n") + 1 if body else 0,
    )
    return body


def detect_layout(
    raw_text: str,
    layouts: list[Layout] | None = None,
) -> Layout:
    """Detect which layout a source text is written in.

    Args:
        raw_text: The complete source text.
        layouts: Pre-loaded layouts (optional; loads from disk if None).

    Returns:
        The first matching layout in priority order.

    Raises:
        UnknownFormatError: If no layout header occurs in the text.
    """
    if layouts is None:
        layouts = load_all_layouts()

    if not layouts:
        raise UnknownFormatError("No layout YAML files found. Cannot detect format.")

    if not raw_text.strip():
        raise UnknownFormatError("Source text is empty")

    for layout in layouts:
        if layout.header_regex.search(raw_text):
            logger.info("Detected layout '%s'", layout.mode)
            return layout

    first_lines = "\n".join(raw_text.splitlines()[:10])
    raise UnknownFormatError(
        f"Could not detect layout.\n"
        f"Tried {len(layouts)} layouts, none matched.\n"
        f"First few lines:\n{first_lines}"
    )
