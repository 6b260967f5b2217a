"""
Configuration models and YAML I/O for uk-climate-ingest.

This module defines the Pydantic models that map 1:1 to the run config
YAML, plus helper functions for loading, saving, and building source URLs.

Key models:
- IngestConfig: Top-level config (mode + regions + parameters + source + output).
- SourceConfig: Where tables are fetched from and how long to wait.
- OutputConfig: Output path and format.

Key functions:
- load_config(path) -> IngestConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
- source_url(config, layout, region, parameter) -> str: Resolve one unit's URL.

Every field has a default, so ``IngestConfig()`` reproduces the full
Met Office batch: all four regions, all five parameters, chronological
tables, written to ``weather.csv``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from uk_climate_ingest.exceptions import ConfigValidationError
from uk_climate_ingest.layout_registry import Layout, LayoutMode
from uk_climate_ingest.periods import PARAMETERS, REGIONS

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.metoffice.gov.uk/pub/data/weather/uk/climate/datasets"


class SourceConfig(BaseModel):
    """Source location settings."""

    base_url: str = Field(
        DEFAULT_BASE_URL,
        description="Dataset root; an http(s) URL or a local directory",
    )
    url_template: str = Field(
        "{base_url}/{parameter}/{segment}/{region}.txt",
        description="Path of one table relative to base_url",
    )
    timeout: float = Field(30.0, gt=0, description="HTTP timeout in seconds")

    @field_validator("url_template")
    @classmethod
    def _check_placeholders(cls, value: str) -> str:
        for name in ("{parameter}", "{region}"):
            if name not in value:
                raise ValueError(f"url_template must contain {name}")
        try:
            value.format(base_url="", parameter="", segment="", region="")
        except KeyError as exc:
            raise ValueError(
                f"url_template has unknown placeholder {exc}; allowed: "
                "{base_url}, {parameter}, {segment}, {region}"
            ) from exc
        except (IndexError, ValueError) as exc:
            raise ValueError(f"url_template is not a valid format string: {exc}") from exc
        return value


class OutputConfig(BaseModel):
    """Output settings."""

    output_path: str = Field("weather.csv", description="File to write records to")
    output_format: Literal["csv", "parquet"] = Field("csv", description="Output format")


class IngestConfig(BaseModel):
    """Top-level configuration for one batch run."""

    mode: LayoutMode = Field(
        "chronological", description="Table layout to fetch and decode"
    )
    regions: list[str] = Field(default_factory=lambda: list(REGIONS))
    parameters: list[str] = Field(default_factory=lambda: list(PARAMETERS))
    on_retrieval_error: Literal["abort", "skip"] = Field(
        "abort",
        description=(
            "What to do when a table cannot be fetched: 'abort' stops the "
            "batch, 'skip' moves on to the next table. Connection failures "
            "always abort."
        ),
    )
    source: SourceConfig = Field(default_factory=SourceConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("regions")
    @classmethod
    def _check_regions(cls, value: list[str]) -> list[str]:
        return _check_members("regions", value, REGIONS)

    @field_validator("parameters")
    @classmethod
    def _check_parameters(cls, value: list[str]) -> list[str]:
        return _check_members("parameters", value, PARAMETERS)


def _check_members(name: str, value: list[str], allowed: tuple[str, ...]) -> list[str]:
    if not value:
        raise ValueError(f"'{name}' must contain at least one entry")
    unknown = [v for v in value if v not in allowed]
    if unknown:
        raise ValueError(f"Unknown {name}: {unknown}. Allowed: {list(allowed)}")
    return value


def load_config(path: str | Path) -> IngestConfig:
    """Load and validate a config YAML into an IngestConfig model.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded config from %s", path)
    return IngestConfig.model_validate(raw)


def save_config(config: IngestConfig, path: str | Path) -> None:
    """Serialize an IngestConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# uk-climate-ingest configuration\n\n")
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
    logger.info("Saved config to %s", path)


def source_url(config: IngestConfig, layout: Layout, region: str, parameter: str) -> str:
    """Build the location of one region/parameter table.

    Example::

        https://www.metoffice.gov.uk/pub/data/weather/uk/climate/datasets/Tmax/date/UK.txt
    """
    return config.source.url_template.format(
        base_url=config.source.base_url.rstrip("/"),
        parameter=parameter,
        segment=layout.source_segment,
        region=region,
    )
