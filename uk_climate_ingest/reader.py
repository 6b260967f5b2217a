"""
Read-side counterpart to ``export.py``.

Loads a records file back into a DataFrame, with optional filtering.
Values stay strings: the sentinel ``N/A`` is kept as text rather than
turned into NaN, so a CSV round trip reproduces exactly what was written.
Use ``to_numeric_values`` when a float column is wanted for analysis.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from uk_climate_ingest.parsers.base import RECORD_COLUMNS

logger = logging.getLogger(__name__)

_STRING_COLUMNS = {c: str for c in RECORD_COLUMNS if c != "year"}


def read_records(
    path: str | Path,
    output_format: str = "csv",
    *,
    regions: list[str] | None = None,
    parameters: list[str] | None = None,
    year_from: int | None = None,
    year_to: int | None = None,
) -> pd.DataFrame:
    """Read a records file with optional filtering.

    Args:
        path: File written by ``export_records``.
        output_format: ``"csv"`` or ``"parquet"``.
        regions: Keep only these region codes.
        parameters: Keep only these parameter display names (e.g. ``"Max temp"``).
        year_from: Inclusive lower year bound.
        year_to: Inclusive upper year bound.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError: If *output_format* is unsupported.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Records file not found: {path}")

    if output_format == "csv":
        df = pd.read_csv(path, dtype=_STRING_COLUMNS, keep_default_na=False)
    elif output_format == "parquet":
        df = pd.read_parquet(path)
    else:
        raise ValueError(
            f"Unsupported output format: '{output_format}'. "
            "Supported formats: ['csv', 'parquet']"
        )

    if regions is not None:
        df = df[df["region_code"].isin(regions)]
    if parameters is not None:
        df = df[df["weather_param"].isin(parameters)]
    if year_from is not None:
        df = df[df["year"] >= year_from]
    if year_to is not None:
        df = df[df["year"] <= year_to]

    logger.debug("Read %d records from %s", len(df), path)
    return df.reset_index(drop=True)


def to_numeric_values(df: pd.DataFrame) -> pd.Series:
    """Return the ``value`` column as floats; ``N/A`` and other non-numeric tokens become NaN."""
    return pd.to_numeric(df["value"], errors="coerce")
