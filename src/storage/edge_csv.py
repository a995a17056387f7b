# src/storage/edge_csv.py - v1
"""Edge-list CSV interchange: ``source,target,weight,count,tags``.

Fields containing the delimiter, a quote or a newline are quoted with
doubled inner quotes (csv.QUOTE_MINIMAL). Tags are encoded ``tag:n;tag:n``.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable
from pathlib import Path

from collabgraph.core.models import AggregatedEdge

logger = logging.getLogger(__name__)

FIELDNAMES = ["source", "target", "weight", "count", "tags"]


class EdgeListFormatError(ValueError):
    """Raised when an edge-list row cannot be parsed."""

    def __init__(self, path: str | Path, line: int, reason: str) -> None:
        self.path = str(path)
        self.line = line
        super().__init__(f"{path}:{line}: {reason}")


def encode_tags(tag_counts: dict[str, int]) -> str:
    return ";".join(f"{tag}:{count}" for tag, count in sorted(tag_counts.items()))


def decode_tags(encoded: str) -> dict[str, int]:
    """Inverse of encode_tags. A tag without ``:n`` counts once."""
    tag_counts: dict[str, int] = {}
    for item in encoded.split(";"):
        item = item.strip()
        if not item:
            continue
        tag, sep, count = item.rpartition(":")
        if not sep or not count.isdigit():
            tag, count = item, "1"
        tag_counts[tag] = tag_counts.get(tag, 0) + int(count)
    return tag_counts


def write_edges_csv(edges: Iterable[AggregatedEdge], path: str | Path) -> Path:
    """Write aggregated edges with a header row.

    Args:
        edges: Aggregated edges to serialize.
        path: Output file path; parent directories are created.

    Returns:
        Path of the written file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    rows = 0
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
        writer.writerow(FIELDNAMES)
        for edge in edges:
            writer.writerow([
                edge.source,
                edge.target,
                f"{edge.weight:.1f}",
                edge.count,
                encode_tags(edge.tag_counts),
            ])
            rows += 1

    logger.debug("Wrote %d edges to %s", rows, path)
    return path


def read_edges_csv(path: str | Path) -> list[AggregatedEdge]:
    """Read an edge-list CSV written by write_edges_csv or a compatible tool.

    Only the first three columns are required. Rows with fewer fields are
    skipped; a non-numeric weight or count raises EdgeListFormatError.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Edge list not found: {path}")

    edges: list[AggregatedEdge] = []
    skipped = 0
    with path.open("r", newline="", encoding="utf-8") as f:
        reader = csv.reader(f)
        header = next(reader, None)
        if header is None:
            return edges
        for row in reader:
            line = reader.line_num
            if len(row) < 3:
                skipped += 1
                continue
            source, target = row[0].strip(), row[1].strip()
            try:
                weight = float(row[2])
            except ValueError:
                raise EdgeListFormatError(path, line, f"invalid weight {row[2]!r}") from None
            count = 1
            if len(row) > 3 and row[3].strip():
                try:
                    count = int(row[3])
                except ValueError:
                    raise EdgeListFormatError(path, line, f"invalid count {row[3]!r}") from None
            tags = decode_tags(row[4]) if len(row) > 4 else {}
            edges.append(AggregatedEdge(
                source=source, target=target, weight=weight,
                count=count, tag_counts=tags,
            ))

    if skipped:
        logger.warning("Skipped %d short rows in %s", skipped, path)
    return edges
