# src/graph/exporters/gexf_exporter.py - v1
"""GEXF topology exporter for Gephi visualization.

Edge weights are written with exactly two decimals and a '.' separator,
independent of the process locale.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import networkx as nx

from collabgraph.graph.base_graph_exporter import BaseGraphExporter
from collabgraph.graph.networkx_adapter import to_networkx

if TYPE_CHECKING:
    from collabgraph.graph.base_graph import BaseGraph
    from collabgraph.graph.identity import IdentityMap


class GexfExporter(BaseGraphExporter):
    """Export graph to GEXF 1.2 (Gephi compatible)."""

    @property
    def format_name(self) -> str:
        return "gexf"

    @property
    def file_extension(self) -> str:
        return ".gexf"

    def export(
        self,
        graph: BaseGraph,
        output_path: str,
        identities: IdentityMap | None = None,
    ) -> str:
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        # GEXF writes the weight attribute via str(), so pre-format it
        g = to_networkx(graph, identities, weight_format=".2f")
        nx.write_gexf(g, str(path))
        return str(path)
