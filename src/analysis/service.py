# src/analysis/service.py - v1
"""Full analysis run over one loaded interaction graph.

Runs centrality, structure and community stages in sequence, translates
vertex indices back to logins and assembles an AnalysisReport.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path

from collabgraph.analysis import centrality, community, structure
from collabgraph.config.settings import Settings
from collabgraph.core.models import (
    AnalysisReport,
    CentralityReport,
    CommunityReport,
    GraphSummary,
    LabeledBridgingTie,
    RankedVertex,
    StructureReport,
)
from collabgraph.graph.identity import IdentityMap
from collabgraph.graph.loader import LoadedGraph
from collabgraph.logging.context import set_run_context, set_stage_context

logger = logging.getLogger(__name__)

MAX_SUMMARY_BRIDGES = 5
MAX_SUMMARY_COMMUNITIES = 3


class AnalysisService:
    """Runs every metric family on a LoadedGraph."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or Settings(_env_file=None)  # type: ignore[call-arg]
        self._durations: dict[str, int] = {}

    @contextmanager
    def _stage(self, name: str) -> Iterator[None]:
        set_stage_context(name)
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = int((time.perf_counter() - start) * 1000)
            self._durations[name] = elapsed
            logger.info("Stage %s finished in %d ms", name, elapsed)
            set_stage_context(None)

    def run(
        self,
        loaded: LoadedGraph,
        repository: str | None = None,
        max_splits: int | None = None,
        top_n: int | None = None,
    ) -> AnalysisReport:
        """Compute the full report.

        Args:
            loaded: Graph and identity map.
            repository: Optional "owner/name" label for the report.
            max_splits: Girvan-Newman split budget (defaults to settings).
            top_n: Ranking length (defaults to settings).
        """
        s = self._settings
        max_splits = s.community_max_splits if max_splits is None else max_splits
        top_n = s.report_top_n if top_n is None else top_n
        graph, identities = loaded.graph, loaded.identities

        run_id = uuid.uuid4().hex[:12]
        set_run_context(run_id, repository)
        self._durations = {}
        logger.info(
            "Starting analysis: %d vertices, %d edges",
            graph.vertex_count, graph.edge_count,
        )

        with self._stage("centrality"):
            pr = centrality.pagerank(
                graph, s.pagerank_damping, s.pagerank_max_iter, s.pagerank_tol,
            )
            closeness = centrality.closeness_centrality(graph)
            betweenness = centrality.betweenness_centrality(graph)
            degree = centrality.degree_centrality(graph)
            centrality_report = CentralityReport(
                pagerank=_ranked(pr, identities, top_n),
                closeness=_ranked(closeness, identities, top_n),
                betweenness=_ranked(betweenness, identities, top_n),
                degree=_ranked(degree, identities, top_n),
            )

        with self._stage("structure"):
            assortativity = structure.degree_assortativity(graph)
            structure_report = StructureReport(
                density=structure.density(graph),
                average_clustering=structure.average_clustering(graph),
                assortativity=assortativity,
                assortativity_pattern=(
                    "assortative" if assortativity > 0 else "disassortative"
                ),
            )

        with self._stage("community"):
            communities = community.girvan_newman(graph, max_splits)
            ties = community.find_bridging_ties(graph, communities)
            community_report = CommunityReport(
                max_splits=max_splits,
                communities=[identities.logins(c) for c in communities],
                sizes=[len(c) for c in communities],
                bridging_ties=[
                    LabeledBridgingTie(
                        source=identities.login_of(t.source),
                        target=identities.login_of(t.target),
                        source_community=t.source_community,
                        target_community=t.target_community,
                    )
                    for t in ties
                ],
            )

        summary = GraphSummary(
            vertex_count=graph.vertex_count,
            edge_count=graph.edge_count,
            backend=graph.backend_name,
            is_connected=graph.is_connected(),
        )
        return AnalysisReport(
            repository=repository,
            run_id=run_id,
            generated_at=datetime.now(timezone.utc),
            graph=summary,
            centrality=centrality_report,
            structure=structure_report,
            communities=community_report,
            durations_ms=dict(self._durations),
        )

    @staticmethod
    def render_summary(report: AnalysisReport) -> str:
        """Human-readable text summary of a report."""
        g = report.graph
        title = report.repository or "interaction graph"
        lines: list[str] = [
            f"=== Network analysis: {title} ===",
            f"Vertices   : {g.vertex_count}",
            f"Edges      : {g.edge_count}",
            f"Backend    : {g.backend}",
            f"Connected  : {'yes' if g.is_connected else 'no'}",
        ]

        sections = (
            ("Influence (PageRank)", report.centrality.pagerank),
            ("Reach (Closeness)", report.centrality.closeness),
            ("Brokers (Betweenness)", report.centrality.betweenness),
            ("Activity (Degree)", report.centrality.degree),
        )
        for heading, ranking in sections:
            lines.append(f"\n--- Top {len(ranking)} {heading} ---")
            for rv in ranking:
                lines.append(f"  {rv.login:30s} {rv.score:.5f}")

        st = report.structure
        lines += [
            "\n--- Structure ---",
            f"  Density             : {st.density:.6f}",
            f"  Average clustering  : {st.average_clustering:.6f}",
            f"  Assortativity       : {st.assortativity:.6f} ({st.assortativity_pattern})",
        ]

        cm = report.communities
        lines.append(
            f"\n--- Communities (Girvan-Newman, max splits {cm.max_splits}) ---"
        )
        lines.append(f"  Detected: {len(cm.communities)}")
        for i, size in enumerate(cm.sizes[:MAX_SUMMARY_COMMUNITIES]):
            lines.append(f"  Group {i + 1}: {size} members")
        lines.append(f"  Bridging ties: {len(cm.bridging_ties)}")
        for tie in cm.bridging_ties[:MAX_SUMMARY_BRIDGES]:
            lines.append(
                f"    {tie.source} -> {tie.target} "
                f"(community {tie.source_community} to {tie.target_community})"
            )

        return "\n".join(lines)


def _ranked(
    scores: dict[int, float], identities: IdentityMap, top_n: int
) -> list[RankedVertex]:
    return [
        RankedVertex(index=v, login=identities.login_of(v), score=score)
        for v, score in centrality.rank_vertices(scores, top_n)
    ]


def export_report_json(report: AnalysisReport, path: str | Path) -> Path:
    """Write the report as formatted JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(report.model_dump_json(indent=2), encoding="utf-8")
    return path
