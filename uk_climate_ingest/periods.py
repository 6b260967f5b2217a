"""
Fixed vocabularies shared by the parsers and the exporter.

The position of a value inside a source row (chronological layout) or
inside a line of fixed-width cells (ranked layout) is the only thing
that tells which month or season it belongs to, so ``PERIOD_LABELS`` is
an immutable tuple whose order must never change.
"""

from __future__ import annotations

REGIONS: tuple[str, ...] = ("UK", "England", "Wales", "Scotland")

PARAMETERS: tuple[str, ...] = ("Tmax", "Tmin", "Tmean", "Sunshine", "Rainfall")

PERIOD_LABELS: tuple[str, ...] = (
    "JAN", "FEB", "MAR", "APR", "MAY", "JUN",
    "JUL", "AUG", "SEP", "OCT", "NOV", "DEC",
    "WIN", "SPR", "SUM", "AUT", "ANN",
)

PERIOD_COUNT = len(PERIOD_LABELS)

# Placeholder used in the source tables, and what we write instead
PLACEHOLDER = "---"
MISSING_VALUE = "N/A"

_DISPLAY_NAMES = {
    "Tmin": "Min temp",
    "Tmax": "Max temp",
    "Tmean": "Mean temp",
}


def period_label(index: int) -> str:
    """Return the period label for a 0-based column index.

    Raises:
        IndexError: If *index* is outside 0..16.
    """
    if not 0 <= index < PERIOD_COUNT:
        raise IndexError(f"Period index out of range: {index}")
    return PERIOD_LABELS[index]


def display_name(parameter: str) -> str:
    """Map a parameter code to the name written in the output.

    Only the three temperature codes are renamed; everything else is
    returned unchanged.
    """
    return _DISPLAY_NAMES.get(parameter, parameter)


def normalize_value(token: str) -> str:
    """Replace the source placeholder with the missing-value sentinel."""
    return MISSING_VALUE if token == PLACEHOLDER else token
