"""
Layout definitions sub-package for uk-climate-ingest.

Contains one YAML file per source table layout (chronological, ranked)
with the header pattern, URL path segment and cell geometry. The loader
module (layout_registry.py in the parent package) reads these files at
runtime.
"""
