# src/graph/exporters/graphml_exporter.py - v1
"""GraphML topology exporter for standard interchange."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import networkx as nx

from collabgraph.graph.base_graph_exporter import BaseGraphExporter
from collabgraph.graph.networkx_adapter import to_networkx

if TYPE_CHECKING:
    from collabgraph.graph.base_graph import BaseGraph
    from collabgraph.graph.identity import IdentityMap


class GraphMLExporter(BaseGraphExporter):
    """Export graph to GraphML with numeric weight and vertex weight attributes."""

    @property
    def format_name(self) -> str:
        return "graphml"

    @property
    def file_extension(self) -> str:
        return ".graphml"

    def export(
        self,
        graph: BaseGraph,
        output_path: str,
        identities: IdentityMap | None = None,
    ) -> str:
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        g = to_networkx(graph, identities)
        for v in g.nodes:
            g.nodes[v]["vertex_weight"] = graph.get_vertex_weight(v)
        nx.write_graphml(g, str(path))
        return str(path)
