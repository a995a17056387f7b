# src/main.py - v1
"""CLI entry point: info and analyze commands.

Usage:
    collabgraph info <edges.csv> [--backend sparse|dense]
    collabgraph analyze <edges.csv> [options]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from collabgraph.version import __version__

if TYPE_CHECKING:
    from collabgraph.config.settings import Settings

logger = logging.getLogger(__name__)

TOPOLOGY_STEM = "topology"


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        from collabgraph.config.settings import load_settings
        from collabgraph.logging.logger import setup_logging

        # Console logging until settings are known, so config errors are formatted
        setup_logging("DEBUG" if args.verbose else "INFO")
        settings = load_settings()
        _setup_logging(settings, args.verbose)
        return args.func(args, settings)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="collabgraph",
        description=f"collabgraph v{__version__} - repository interaction network analysis",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- info ---
    p_info = subparsers.add_parser(
        "info", help="Load an edge list and print basic graph facts",
    )
    p_info.add_argument("edges", type=Path, help="Edge-list CSV")
    p_info.add_argument(
        "--backend", choices=["sparse", "dense"], default=None,
        help="Graph backend (default: from settings, sparse)",
    )
    p_info.set_defaults(func=_cmd_info)

    # --- analyze ---
    p_analyze = subparsers.add_parser(
        "analyze", help="Run centrality, structure and community analysis",
    )
    p_analyze.add_argument("edges", type=Path, help="Edge-list CSV")
    p_analyze.add_argument(
        "--backend", choices=["sparse", "dense"], default=None,
        help="Graph backend (default: from settings, sparse)",
    )
    p_analyze.add_argument(
        "--max-splits", type=int, default=None,
        help="Girvan-Newman edge removals (default: 10)",
    )
    p_analyze.add_argument(
        "--top", type=int, default=None,
        help="Length of each ranking (default: 5)",
    )
    p_analyze.add_argument(
        "--repository", default=None,
        help="Repository label for the report (e.g. owner/name)",
    )
    p_analyze.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Write the JSON report to this path",
    )
    p_analyze.add_argument(
        "--export", type=Path, default=None,
        help="Export the topology to a .gexf or .graphml file, or to every "
             "configured format when given a directory",
    )
    p_analyze.set_defaults(func=_cmd_analyze)

    return parser


def _cmd_info(args: argparse.Namespace, settings: Settings) -> int:
    """Print vertex/edge counts, connectivity and density."""
    from collabgraph.analysis.structure import density
    from collabgraph.graph.loader import load_graph

    edges_path: Path = args.edges
    if not edges_path.is_file():
        logger.error("File not found: %s", edges_path)
        return 1

    loaded = load_graph(edges_path, backend=args.backend, settings=settings)
    g = loaded.graph
    print(f"Vertices:  {g.vertex_count}")
    print(f"Edges:     {g.edge_count}")
    print(f"Backend:   {g.backend_name}")
    print(f"Connected: {'yes' if g.is_connected() else 'no'}")
    print(f"Density:   {density(g):.6f}")
    return 0


def _cmd_analyze(args: argparse.Namespace, settings: Settings) -> int:
    """Run the full analysis and print a summary."""
    from collabgraph.analysis.service import AnalysisService, export_report_json
    from collabgraph.graph.exporter_factory import create_exporters, exporter_for_path
    from collabgraph.graph.loader import load_graph

    edges_path: Path = args.edges
    if not edges_path.is_file():
        logger.error("File not found: %s", edges_path)
        return 1

    loaded = load_graph(edges_path, backend=args.backend, settings=settings)
    service = AnalysisService(settings)
    report = service.run(
        loaded,
        repository=args.repository,
        max_splits=args.max_splits,
        top_n=args.top,
    )
    print(service.render_summary(report))

    if args.output is not None:
        path = export_report_json(report, args.output)
        logger.info("Report written to %s", path)

    if args.export is not None:
        export: Path = args.export
        if export.is_dir() or not export.suffix:
            exporters = create_exporters(settings)
            targets = [export / f"{TOPOLOGY_STEM}{e.file_extension}" for e in exporters]
        else:
            exporters = [exporter_for_path(str(export))]
            targets = [export]
        for exporter, target in zip(exporters, targets):
            path = exporter.export(loaded.graph, str(target), identities=loaded.identities)
            logger.info("Topology exported to %s (%s)", path, exporter.format_name)

    return 0


def _setup_logging(settings: Settings, verbose: bool) -> None:
    """Configure logging for CLI usage."""
    from collabgraph.logging.logger import setup_logging

    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )


if __name__ == "__main__":
    sys.exit(main())
