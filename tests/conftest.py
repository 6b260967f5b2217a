"""
Shared test fixtures, sample tables and path constants for uk-climate-ingest tests.

Sample tables are built from small helpers so that column alignment of
the fixed-width ranked layout is always exact. The local mirror under
``inputs/mirror`` has the same directory structure as the Met Office
datasets tree (``{parameter}/{date|ranked}/{region}.txt``).
"""

from pathlib import Path

import pytest

from uk_climate_ingest.periods import PERIOD_LABELS

# ---------------------------------------------------------------------------
# Input file paths -- edit here if files move or new ones are added
# ---------------------------------------------------------------------------
INPUT_DIR = Path(__file__).resolve().parent.parent / "inputs"
MIRROR_DIR = INPUT_DIR / "mirror"

TMAX_DATE_UK = MIRROR_DIR / "Tmax" / "date" / "UK.txt"
TMAX_RANKED_UK = MIRROR_DIR / "Tmax" / "ranked" / "UK.txt"

PREAMBLE = (
    "UK Maximum Temperature (Degrees C)\n"
    "Areal series, starting from 1910\n"
    "Allowances have been made for topographic, coastal and urban effects.\n"
    "Last updated 01/01/2018\n"
)

CHRONO_HEADER = (
    "Year    JAN    FEB    MAR    APR    MAY    JUN    JUL    AUG    SEP"
    "    OCT    NOV    DEC    WIN    SPR    SUM    AUT     ANN\n"
)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def chrono_row(year: int, values: list[str]) -> str:
    """One chronological data line with irregular spacing."""
    return f"{year}  " + "   ".join(values) + "\n"


def chrono_text(rows: dict[int, list[str]], line_end: str = "\n") -> str:
    text = PREAMBLE + "\n" + CHRONO_HEADER + "".join(
        chrono_row(year, values) for year, values in rows.items()
    )
    return text.replace("\n", line_end)


def ranked_cell(value: str, year: int, width: int = 14) -> str:
    """A fixed-width ranked cell: value right-aligned, then the year."""
    return f"{value:>{width - 6}}{year:>6}"


def ranked_line(cells: list[tuple[str, int] | None], width: int = 14) -> str:
    """A ranked data line; ``None`` cells are left blank."""
    return "".join(
        " " * width if cell is None else ranked_cell(cell[0], cell[1], width)
        for cell in cells
    ) + "\n"


def ranked_header() -> str:
    return "".join(f"{label:>8}{'Year':>6}" for label in PERIOD_LABELS) + "\n"


def ranked_text(lines: list[list[tuple[str, int] | None]]) -> str:
    return PREAMBLE + "\n" + ranked_header() + "".join(ranked_line(l) for l in lines)


def full_row(start: float = 4.0) -> list[str]:
    """17 distinct values, one per period."""
    return [f"{start + i / 10:.1f}" for i in range(17)]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def chrono_sample() -> str:
    """Three years; 1911 has a placeholder winter value, 1912 is short."""
    row_1911 = full_row(5.0)
    row_1911[12] = "---"
    return chrono_text({
        1910: full_row(4.0),
        1911: row_1911,
        1912: ["3.1", "4.2", "---"],
    })


@pytest.fixture()
def ranked_sample() -> str:
    """Two lines of a ranked table.

    Line 1: JAN 9.7/1916, FEB 9.6/1998, ANN 14.9/2014
    Line 2: JAN 9.5/1921, FEB 9.1/1916, ANN 14.8/1909 (out of range)
    """
    line1: list[tuple[str, int] | None] = [None] * 17
    line1[0] = ("9.7", 1916)
    line1[1] = ("9.6", 1998)
    line1[16] = ("14.9", 2014)
    line2: list[tuple[str, int] | None] = [None] * 17
    line2[0] = ("9.5", 1921)
    line2[1] = ("9.1", 1916)
    line2[16] = ("14.8", 1909)
    return ranked_text([line1, line2])


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs against the local mirror)",
    )
