"""
Custom exception hierarchy for uk-climate-ingest.

Callers can tell a missing table (``NoDataError``) apart from a network
failure (``ConnectivityError``) or a broken config without relying on
generic ValueError/RuntimeError. The batch orchestrator uses the split
to decide whether a unit is skipped or the whole run stops.
"""


class ClimateIngestError(Exception):
    """Base exception for all uk-climate-ingest errors."""


class NoDataError(ClimateIngestError):
    """Raised when a source text does not contain the layout's header.

    The Met Office publishes no table for some region/parameter pairs;
    the server then returns a page without the expected header row.
    """


class UnknownFormatError(ClimateIngestError):
    """Raised when a text matches none of the known table layouts.

    Includes a snippet of the first few lines to aid debugging.
    """


class RetrievalError(ClimateIngestError):
    """Raised when a source text cannot be fetched (HTTP error, timeout,
    missing local file)."""


class ConnectivityError(RetrievalError):
    """Raised when the source host cannot be reached at all."""


class ConfigValidationError(ClimateIngestError):
    """Raised when a config file is empty or fails validation."""


class ExportError(ClimateIngestError):
    """Raised when the exporter fails to write output files.

    For example, permission errors, unsupported format, or a field that
    would need CSV quoting.
    """
