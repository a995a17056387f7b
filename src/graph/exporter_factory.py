# src/graph/exporter_factory.py - v1
"""Factory for graph exporter instantiation.

The GEXF exporter is always included regardless of configuration.
"""

from __future__ import annotations

import importlib

from collabgraph.config.settings import Settings
from collabgraph.graph.base_graph_exporter import BaseGraphExporter

_EXPORTERS: dict[str, str] = {
    "gexf": "collabgraph.graph.exporters.gexf_exporter.GexfExporter",
    "graphml": "collabgraph.graph.exporters.graphml_exporter.GraphMLExporter",
}


def create_exporters(settings: Settings | None = None) -> list[BaseGraphExporter]:
    """Create all configured graph exporters.

    Unknown format names are ignored.

    Returns:
        List of exporter instances, sorted by format name.
    """
    formats: set[str] = {"gexf"}

    if settings is not None:
        formats.update(settings.graph_export_formats_list)

    exporters: list[BaseGraphExporter] = []
    for fmt in sorted(formats):
        fqcn = _EXPORTERS.get(fmt)
        if fqcn is None:
            continue
        module_path, class_name = fqcn.rsplit(".", 1)
        mod = importlib.import_module(module_path)
        exporters.append(getattr(mod, class_name)())

    return exporters


def exporter_for_path(path: str) -> BaseGraphExporter:
    """Pick an exporter from the file extension (defaults to GEXF)."""
    for fmt in _EXPORTERS:
        if path.lower().endswith(f".{fmt}"):
            module_path, class_name = _EXPORTERS[fmt].rsplit(".", 1)
            return getattr(importlib.import_module(module_path), class_name)()
    from collabgraph.graph.exporters.gexf_exporter import GexfExporter
    return GexfExporter()
