"""
Command-line runner for uk-climate-ingest.

Usage:
    uv run python scripts/run_ingest.py                          # all units, date tables -> weather.csv
    uv run python scripts/run_ingest.py --mode ranked -o ranked.csv
    uv run python scripts/run_ingest.py --config ukclimate.yaml
    uv run python scripts/run_ingest.py --base-url ./mirror      # read a local copy of the datasets tree
    uv run python scripts/run_ingest.py --parse Tmax_UK.txt --parameter Tmax

Flags given on the command line override the values of --config.
Exit status is 1 when the batch stopped on a retrieval error or the
configuration is invalid.
"""

from __future__ import annotations

import argparse
import logging
import sys

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_ingest")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Met Office UK climate table ingest")
    parser.add_argument("--config", help="YAML config file to start from.")
    parser.add_argument(
        "--mode",
        choices=["chronological", "ranked"],
        help="Table layout to fetch (default: chronological).",
    )
    parser.add_argument("-o", "--output", help="Output file path.")
    parser.add_argument("--format", choices=["csv", "parquet"], help="Output format.")
    parser.add_argument("--base-url", help="Dataset root URL or local directory.")
    parser.add_argument("--regions", nargs="+", help="Subset of regions to fetch.")
    parser.add_argument("--parameters", nargs="+", help="Subset of parameters to fetch.")
    parser.add_argument(
        "--skip-failed",
        action="store_true",
        help="Skip tables that fail to download instead of stopping the batch.",
    )
    parser.add_argument("--parse", metavar="FILE", help="Decode one local table and exit.")
    parser.add_argument("--region", default="UK", help="Region code for --parse.")
    parser.add_argument("--parameter", default="Tmax", help="Parameter code for --parse.")
    return parser


def _parse_one(args: argparse.Namespace) -> int:
    import uk_climate_ingest
    from uk_climate_ingest.export import export_records
    from uk_climate_ingest.fetch import fetch_text

    raw_text = fetch_text(args.parse)
    records = uk_climate_ingest.parse_text(
        raw_text, mode=args.mode, region=args.region, parameter=args.parameter
    )
    if args.output:
        export_records(records, args.output, output_format=args.format or "csv")
        log.info("Wrote %d records to %s", len(records), args.output)
    else:
        print("region_code,weather_param,year,key,value")
        for record in records:
            print(",".join(record.as_row()))
    return 0


def _batch_config(args: argparse.Namespace):
    from uk_climate_ingest.config import IngestConfig, load_config

    config = load_config(args.config) if args.config else IngestConfig()
    updates: dict = {}
    if args.mode:
        updates["mode"] = args.mode
    if args.regions:
        updates["regions"] = args.regions
    if args.parameters:
        updates["parameters"] = args.parameters
    if args.skip_failed:
        updates["on_retrieval_error"] = "skip"
    data = config.model_dump()
    data.update(updates)
    if args.base_url:
        data["source"]["base_url"] = args.base_url
    if args.output:
        data["output"]["output_path"] = args.output
    if args.format:
        data["output"]["output_format"] = args.format
    return IngestConfig.model_validate(data)


def main(argv: list[str] | None = None) -> int:
    from pydantic import ValidationError

    import uk_climate_ingest
    from uk_climate_ingest.exceptions import ClimateIngestError

    args = _build_parser().parse_args(argv)

    try:
        if args.parse:
            return _parse_one(args)

        config = _batch_config(args)
        log.info("Please wait, populating %s ...", config.output.output_path)
        result = uk_climate_ingest.run(config)
    except (ClimateIngestError, FileNotFoundError) as exc:
        log.error("%s", exc)
        return 1
    except ValidationError as exc:
        log.error("Invalid configuration: %s", exc)
        return 1

    if result.aborted:
        log.error("Batch stopped early: %s", result.abort_reason)
        return 1
    log.info(
        "Done: %d records from %d/%d tables written to %s",
        len(result.records),
        result.units_ok,
        result.units_total,
        config.output.output_path,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
