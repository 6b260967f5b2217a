"""
uk-climate-ingest: turn Met Office UK climate tables into long-format records.

The Met Office publishes one plain-text table per weather parameter and
region, in two layouts: year-ordered ("date") and value-ranked. This
package locates the data body under each table's header, decodes it,
and emits one record per (region, parameter, year, period).

Public API surface:

- ``run(config)`` -- fetch and decode every region/parameter unit of an
  ``IngestConfig`` and write the records file. Returns a ``BatchResult``.

- ``ingest(config_path)`` -- same as ``run`` with the config loaded from YAML.

- ``parse_text(raw_text, ...)`` -- decode a single table already in memory
  (no network, no output file). Returns a list of ``Record``.
"""

from __future__ import annotations

import logging

from uk_climate_ingest._pipeline import BatchResult, decode_unit, run_batch
from uk_climate_ingest.config import IngestConfig, load_config
from uk_climate_ingest.detect import detect_layout
from uk_climate_ingest.export import export_records
from uk_climate_ingest.layout_registry import get_layout
from uk_climate_ingest.parsers import Record

__all__ = ["run", "ingest", "parse_text", "BatchResult", "IngestConfig", "Record"]

logger = logging.getLogger(__name__)


def parse_text(
    raw_text: str,
    mode: str | None = None,
    region: str = "UK",
    parameter: str = "Tmax",
) -> list[Record]:
    """Decode one table's raw text into records.

    Args:
        raw_text: Complete table text, preamble included.
        mode: ``"chronological"`` or ``"ranked"``. If ``None``, the layout
            is detected from the header row.
        region: Region code written into every record.
        parameter: Parameter code; written as its display name.

    Raises:
        NoDataError: If *mode* is given and its header is not found.
        UnknownFormatError: If *mode* is ``None`` and no layout matches.
    """
    layout = get_layout(mode) if mode is not None else detect_layout(raw_text)
    return decode_unit(raw_text, layout, region, parameter)


def run(config: IngestConfig | None = None, fetch=None) -> BatchResult:
    """Run a full batch and write the records file.

    The output file is written even when the batch stops early, so the
    records of every unit processed before the failure are kept.

    Args:
        config: Batch configuration; ``IngestConfig()`` defaults when ``None``.
        fetch: Optional replacement for ``fetch.fetch_text`` (used by tests
            and for custom transports).

    Returns:
        The ``BatchResult`` of the run.

    Raises:
        ExportError: If the records file cannot be written.
    """
    if config is None:
        config = IngestConfig()
    logger.info(
        "run() -- mode=%s, output=%s", config.mode, config.output.output_path
    )
    result = run_batch(config, fetch=fetch)
    export_records(
        result.records,
        config.output.output_path,
        output_format=config.output.output_format,
    )
    return result


def ingest(config_path: str = "ukclimate.yaml", fetch=None) -> BatchResult:
    """Load a YAML config and run the batch it describes.

    Raises:
        FileNotFoundError: If *config_path* does not exist.
        pydantic.ValidationError: If the config fails validation.
    """
    logger.info("ingest() -- config_path=%s", config_path)
    config = load_config(config_path)
    return run(config, fetch=fetch)
