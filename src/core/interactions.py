# src/core/interactions.py - v1
"""Collapse raw collaboration events into one weighted edge per ordered pair.

Weights sum, the event count increments, and each interaction tag keeps its
own occurrence count. Blank logins and self-interactions are dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from collabgraph.core.models import AggregatedEdge, InteractionEvent

if TYPE_CHECKING:
    from collabgraph.config.settings import Settings

logger = logging.getLogger(__name__)

TAG_ISSUE_COMMENT = "issue_comment"
TAG_PR_COMMENT = "pr_comment"
TAG_PR_REVIEW_COMMENT = "pr_review_comment"
TAG_PR_REVIEW = "pr_review"
TAG_PR_APPROVED = "pr_approved"
TAG_PR_CHANGES_REQUESTED = "pr_changes_requested"
TAG_PR_MERGED = "pr_merged"
TAG_ISSUE_CLOSED = "issue_closed"


@dataclass(frozen=True)
class InteractionWeights:
    """Default weight of each interaction kind."""

    pr_comment: float = 2.0
    issue_comment: float = 3.0
    review: float = 4.0
    merge: float = 5.0
    issue_closed: float = 3.0

    @classmethod
    def from_settings(cls, settings: Settings) -> InteractionWeights:
        return cls(
            pr_comment=settings.weight_pr_comment,
            issue_comment=settings.weight_issue_comment,
            review=settings.weight_review,
            merge=settings.weight_merge,
            issue_closed=settings.weight_issue_closed,
        )

    def for_tag(self, tag: str) -> float:
        """Weight associated with an interaction tag."""
        mapping = {
            TAG_ISSUE_COMMENT: self.issue_comment,
            TAG_PR_COMMENT: self.pr_comment,
            TAG_PR_REVIEW_COMMENT: self.pr_comment,
            TAG_PR_REVIEW: self.review,
            TAG_PR_APPROVED: self.review,
            TAG_PR_CHANGES_REQUESTED: self.review,
            TAG_PR_MERGED: self.merge,
            TAG_ISSUE_CLOSED: self.issue_closed,
        }
        try:
            return mapping[tag]
        except KeyError:
            raise ValueError(f"Unknown interaction tag: {tag!r}") from None


class InteractionAggregator:
    """Accumulates events into AggregatedEdge records."""

    def __init__(self, weights: InteractionWeights | None = None) -> None:
        self._weights = weights or InteractionWeights()
        self._edges: dict[tuple[str, str], AggregatedEdge] = {}
        self._skipped = 0

    def __len__(self) -> int:
        return len(self._edges)

    @property
    def skipped(self) -> int:
        """Events dropped for blank logins or self-interaction."""
        return self._skipped

    def _edge_for(self, source: str | None, target: str | None) -> AggregatedEdge | None:
        """Accumulator of one ordered pair; None when the pair is dropped."""
        if not source or not target or not source.strip() or not target.strip():
            self._skipped += 1
            return None
        if source == target:
            self._skipped += 1
            return None
        key = (source, target)
        edge = self._edges.get(key)
        if edge is None:
            edge = AggregatedEdge(source=source, target=target)
            self._edges[key] = edge
        return edge

    def add(
        self,
        source: str | None,
        target: str | None,
        weight: float,
        tag: str | None = None,
    ) -> None:
        edge = self._edge_for(source, target)
        if edge is not None:
            edge.add(weight, tag)

    def add_tagged(self, source: str | None, target: str | None, tag: str) -> None:
        """Add an event weighted by its tag's default weight."""
        self.add(source, target, self._weights.for_tag(tag), tag)

    def add_event(self, event: InteractionEvent) -> None:
        """Add one event; events without a weight take their tag's weight."""
        if event.weight is None:
            self.add_tagged(event.source, event.target, event.tag or "")
        else:
            self.add(event.source, event.target, event.weight, event.tag)

    def add_aggregated(self, aggregated: AggregatedEdge) -> None:
        """Merge an already aggregated edge, keeping its count and tag counts."""
        edge = self._edge_for(aggregated.source, aggregated.target)
        if edge is not None:
            edge.merge(aggregated)

    def extend(self, events: Iterable[InteractionEvent]) -> None:
        for event in events:
            self.add_event(event)

    def nodes(self) -> set[str]:
        found: set[str] = set()
        for source, target in self._edges:
            found.add(source)
            found.add(target)
        return found

    def edges(self) -> list[AggregatedEdge]:
        """Aggregated edges in insertion order."""
        return list(self._edges.values())


def aggregate(
    events: Iterable[InteractionEvent],
    weights: InteractionWeights | None = None,
) -> list[AggregatedEdge]:
    """Collapse a sequence of events into aggregated edges."""
    aggregator = InteractionAggregator(weights)
    aggregator.extend(events)
    if aggregator.skipped:
        logger.debug("Dropped %d blank or self-referencing events", aggregator.skipped)
    return aggregator.edges()
