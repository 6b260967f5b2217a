"""
Exporter for uk-climate-ingest.

Writes the long-format records of a batch to a single output file.

CSV layout (the reference format)::

    region_code,weather_param,year,key,value
    UK,Max temp,1884,JAN,8.3
    UK,Max temp,1884,WIN,N/A

Rows end with a bare ``\\n`` and no field is ever quoted. Region codes,
display names, labels and numeric tokens never contain commas, so a
field that would need quoting means something upstream went wrong and
raises ExportError instead of silently producing a different format.

Parquet is supported for analytical use; every column is stored as a
string except ``year`` (int64).
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, Literal

import pandas as pd

from uk_climate_ingest.exceptions import ExportError
from uk_climate_ingest.parsers.base import RECORD_COLUMNS, Record

logger = logging.getLogger(__name__)

_SUPPORTED_FORMATS = {"csv", "parquet"}


def records_to_frame(records: Iterable[Record]) -> pd.DataFrame:
    """Build a DataFrame with one row per record, in record order."""
    df = pd.DataFrame([r.as_row() for r in records], columns=RECORD_COLUMNS)
    return df.astype({"year": "int64"})


def _write_dataframe(df: pd.DataFrame, path: Path, output_format: str) -> None:
    """Write a single DataFrame to disk in the specified format.

    Raises:
        ExportError: If writing fails for any reason.
    """
    try:
        if output_format == "csv":
            df.to_csv(
                path,
                index=False,
                encoding="utf-8",
                lineterminator="\n",
                quoting=csv.QUOTE_NONE,
            )
        else:  # parquet
            df.to_parquet(path, index=False, engine="pyarrow")
    except Exception as exc:
        raise ExportError(
            f"Failed to write {path.name} as {output_format}: {exc}"
        ) from exc


def export_records(
    records: Iterable[Record],
    output_path: str | Path,
    output_format: Literal["csv", "parquet"] = "csv",
) -> str:
    """Write records to *output_path*.

    The parent directory is created if needed and an existing file is
    overwritten. An empty record list still produces a file with the
    header row only.

    Returns:
        The written path as a string.

    Raises:
        ExportError: If *output_format* is unsupported, or if the write fails.
    """
    if output_format not in _SUPPORTED_FORMATS:
        raise ExportError(
            f"Unsupported output format: '{output_format}'. "
            f"Supported formats: {sorted(_SUPPORTED_FORMATS)}"
        )

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = records_to_frame(records)
    _write_dataframe(df, path, output_format)
    logger.info("Exported %d records -> %s", len(df), path)
    return str(path)
