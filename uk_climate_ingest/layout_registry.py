"""
Layout loader for uk-climate-ingest.

Loads layout YAML files from uk_climate_ingest/layouts/ and provides
structured access via Pydantic models. Each layout defines:
- mode: unique identifier ("chronological" | "ranked")
- header_pattern: regex whose match end separates preamble from data
- source_segment: the path segment used in the source URL ("date" | "ranked")
- cell_width / year_from / year_to: fixed-width geometry (ranked only)
- priority: order in which layouts are tried by detect_layout()

Why YAML instead of hardcoded:
- Header patterns and year bounds are easily editable when the Met Office
  changes its file headers or extends the ranked tables.
- Separation of structure knowledge (YAML) from parsing logic (Python).
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, model_validator

logger = logging.getLogger(__name__)

# Directory containing layout YAML files (sibling package)
_LAYOUTS_DIR = Path(__file__).parent / "layouts"

LayoutMode = Literal["chronological", "ranked"]


class Layout(BaseModel):
    """A complete layout definition loaded from YAML."""
    mode: LayoutMode
    description: str = ""
    priority: int = 99
    source_segment: str
    header_pattern: str
    ignore_case: bool = True
    cell_width: int | None = None
    year_from: int | None = None
    year_to: int | None = None

    @model_validator(mode="after")
    def _check_ranked_geometry(self) -> Layout:
        if self.mode == "ranked":
            if not self.cell_width or self.cell_width <= 0:
                raise ValueError("Ranked layouts need a positive cell_width")
            if self.year_from is None or self.year_to is None:
                raise ValueError("Ranked layouts need year_from and year_to")
            if self.year_from > self.year_to:
                raise ValueError(
                    f"year_from ({self.year_from}) is after year_to ({self.year_to})"
                )
        return self

    @property
    def header_regex(self) -> re.Pattern[str]:
        flags = re.IGNORECASE if self.ignore_case else 0
        return re.compile(self.header_pattern, flags)


def load_layout(path: Path) -> Layout:
    """Load a single layout YAML file."""
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    return Layout.model_validate(raw)


def load_all_layouts(layouts_dir: Path | None = None) -> list[Layout]:
    """Load all layout YAML files, sorted by detection priority.

    Args:
        layouts_dir: Directory to scan for .yaml files. Defaults to
            the built-in layouts/ directory.

    Returns:
        List of Layout objects, chronological first.
    """
    layouts_dir = layouts_dir or _LAYOUTS_DIR
    layouts: list[Layout] = []
    for yaml_path in sorted(layouts_dir.glob("*.yaml")):
        try:
            layout = load_layout(yaml_path)
            layouts.append(layout)
            logger.debug("Loaded layout: %s from %s", layout.mode, yaml_path)
        except Exception as e:
            logger.warning("Failed to load layout from %s: %s", yaml_path, e)
    layouts.sort(key=lambda l: l.priority)
    logger.debug("Loaded %d layouts", len(layouts))
    return layouts


def get_layout(mode: str, layouts_dir: Path | None = None) -> Layout:
    """Return the layout for *mode*.

    Raises:
        KeyError: If no layout file defines that mode.
    """
    for layout in load_all_layouts(layouts_dir):
        if layout.mode == mode:
            return layout
    raise KeyError(f"No layout defined for mode '{mode}'")
