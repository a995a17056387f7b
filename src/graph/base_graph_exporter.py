# src/graph/base_graph_exporter.py - v1
"""Abstract topology export interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collabgraph.graph.base_graph import BaseGraph
    from collabgraph.graph.identity import IdentityMap


class BaseGraphExporter(ABC):
    """Unified interface for graph file formats."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Export format identifier (e.g., 'gexf', 'graphml')."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Output file extension (e.g., '.gexf', '.graphml')."""

    @abstractmethod
    def export(
        self,
        graph: BaseGraph,
        output_path: str,
        identities: IdentityMap | None = None,
    ) -> str:
        """Export graph to file, return path to exported file."""
