"""Render configuration — the data model for embeddable charts.

Architecture:
- schemas.py          - RenderConfig union and its blocks (pydantic)
- catalog_schemas.py  - Chart types, palettes and presets on offer
- catalog_registry.py - CatalogRegistry backed by definitions/catalog.yaml
- builder.py          - Merge parser output and authoring options into configs
"""
