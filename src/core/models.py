# src/core/models.py - v1
"""Shared Pydantic domain models used across modules.

No module redefines these types; all imports come from core.models.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


# === INTERACTION EDGES ===


class InteractionEvent(BaseModel):
    """One raw collaboration event between two logins.

    Without a weight the event takes the configured weight of its tag.
    """

    source: str
    target: str
    weight: float | None = Field(default=None, gt=0)
    tag: str | None = None


class AggregatedEdge(BaseModel):
    """All events of one ordered (source, target) pair collapsed together."""

    source: str
    target: str
    weight: float = 0.0
    count: int = 0
    tag_counts: dict[str, int] = Field(default_factory=dict)

    def add(self, weight: float, tag: str | None = None) -> None:
        """Accumulate one more event on this pair."""
        self.weight += weight
        self.count += 1
        if tag is not None and tag.strip():
            self.tag_counts[tag] = self.tag_counts.get(tag, 0) + 1

    def merge(self, other: AggregatedEdge) -> None:
        """Fold another aggregate of the same pair into this one."""
        self.weight += other.weight
        self.count += other.count
        for tag, n in other.tag_counts.items():
            self.tag_counts[tag] = self.tag_counts.get(tag, 0) + n


# === COMMUNITY MODELS ===


class BridgingTie(BaseModel):
    """Directed edge whose endpoints fall in two different communities."""

    source: int
    target: int
    source_community: int
    target_community: int


class LabeledBridgingTie(BaseModel):
    """BridgingTie translated back to logins."""

    source: str
    target: str
    source_community: int
    target_community: int


# === REPORT MODELS ===


class RankedVertex(BaseModel):
    """A vertex and its score in a top-N ranking."""

    index: int
    login: str
    score: float


class GraphSummary(BaseModel):
    vertex_count: int
    edge_count: int
    backend: str
    is_connected: bool


class CentralityReport(BaseModel):
    pagerank: list[RankedVertex] = Field(default_factory=list)
    closeness: list[RankedVertex] = Field(default_factory=list)
    betweenness: list[RankedVertex] = Field(default_factory=list)
    degree: list[RankedVertex] = Field(default_factory=list)


class StructureReport(BaseModel):
    density: float = 0.0
    average_clustering: float = 0.0
    assortativity: float = 0.0
    assortativity_pattern: str = "disassortative"


class CommunityReport(BaseModel):
    max_splits: int
    communities: list[list[str]] = Field(default_factory=list)
    sizes: list[int] = Field(default_factory=list)
    bridging_ties: list[LabeledBridgingTie] = Field(default_factory=list)


class AnalysisReport(BaseModel):
    """Full result of one analysis run."""

    repository: str | None = None
    run_id: str
    generated_at: datetime
    graph: GraphSummary
    centrality: CentralityReport
    structure: StructureReport
    communities: CommunityReport
    durations_ms: dict[str, int] = Field(default_factory=dict)
