"""
Internal batch orchestration for uk-climate-ingest.

Runs every (region, parameter) unit of a config through
fetch -> locate header -> decode -> records, in config order.

Error policy per unit:
- NoDataError: the unit has no table; skip it, emit nothing for it.
- ConnectivityError: the source host is unreachable; stop the batch.
- Other RetrievalError, or an OSError raised by a custom fetcher: stop
  the batch when ``on_retrieval_error`` is ``"abort"`` (the default),
  otherwise skip the unit.

Records produced before a stop are kept in the result.

This module is **not** part of the public API.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from uk_climate_ingest.config import IngestConfig, source_url
from uk_climate_ingest.detect import locate_data_body
from uk_climate_ingest.exceptions import ConnectivityError, NoDataError, RetrievalError
from uk_climate_ingest.layout_registry import Layout, get_layout
from uk_climate_ingest.parsers import Record, get_parser
from uk_climate_ingest.periods import display_name

logger = logging.getLogger(__name__)

Fetcher = Callable[[str, float], str]


@dataclass
class BatchResult:
    """Outcome of one batch run.

    Attributes:
        records: All records, grouped by unit in processing order.
        units_total: Number of units in the config.
        units_ok: Units that produced records (possibly zero, for an empty body).
        units_no_data: Units skipped because no header was found.
        units_failed: Units whose retrieval failed (skipped or aborting).
        aborted: True if a retrieval error stopped the batch.
        abort_reason: Message of the error that stopped the batch.
    """

    records: list[Record] = field(default_factory=list)
    units_total: int = 0
    units_ok: int = 0
    units_no_data: int = 0
    units_failed: int = 0
    aborted: bool = False
    abort_reason: str | None = None


def decode_unit(raw_text: str, layout: Layout, region: str, parameter: str) -> list[Record]:
    """Turn the raw text of one table into output records.

    Raises:
        NoDataError: If the layout's header is not in *raw_text*.
    """
    body = locate_data_body(raw_text, layout)
    observations = get_parser(layout).parse(body, layout)
    weather_param = display_name(parameter)
    return [
        Record(
            region_code=region,
            weather_param=weather_param,
            year=obs.year,
            key=obs.period,
            value=obs.value,
        )
        for obs in observations
    ]


def run_batch(config: IngestConfig, fetch: Fetcher | None = None) -> BatchResult:
    """Fetch and decode every unit named by *config*.

    Args:
        config: The validated IngestConfig.
        fetch: ``fetch(location, timeout) -> text``. Defaults to
            ``uk_climate_ingest.fetch.fetch_text``.

    Returns:
        A BatchResult; never raises for per-unit failures.
    """
    if fetch is None:
        from uk_climate_ingest.fetch import fetch_text
        fetch = fetch_text

    layout = get_layout(config.mode)
    units = [(r, p) for r in config.regions for p in config.parameters]
    result = BatchResult(units_total=len(units))
    logger.info("Starting %s batch: %d units", layout.mode, len(units))

    for region, parameter in units:
        location = source_url(config, layout, region, parameter)
        try:
            raw_text = fetch(location, config.source.timeout)
            records = decode_unit(raw_text, layout, region, parameter)
        except NoDataError:
            result.units_no_data += 1
            logger.warning("No data available for %s / %s", region, parameter)
            continue
        except ConnectivityError as exc:
            result.units_failed += 1
            result.aborted = True
            result.abort_reason = str(exc)
            logger.error("Could not connect to the source, stopping batch: %s", exc)
            break
        except RetrievalError as exc:
            result.units_failed += 1
            if config.on_retrieval_error == "abort":
                result.aborted = True
                result.abort_reason = str(exc)
                logger.exception("Retrieval failed for %s / %s, stopping batch", region, parameter)
                break
            logger.warning("Retrieval failed for %s / %s, skipping: %s", region, parameter, exc)
            continue
        except OSError as exc:
            result.units_failed += 1
            if config.on_retrieval_error == "abort":
                result.aborted = True
                result.abort_reason = str(exc)
                logger.exception("I/O error for %s / %s, stopping batch", region, parameter)
                break
            logger.warning("I/O error for %s / %s, skipping: %s", region, parameter, exc)
            continue

        result.records.extend(records)
        result.units_ok += 1
        logger.info("%s / %s: %d records", region, parameter, len(records))

    logger.info(
        "Batch finished: %d ok, %d without data, %d failed, %d records%s",
        result.units_ok,
        result.units_no_data,
        result.units_failed,
        len(result.records),
        " (aborted)" if result.aborted else "",
    )
    return result
