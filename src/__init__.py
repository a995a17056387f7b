"""collabgraph: interaction-network analysis of repository collaboration history."""

from collabgraph.version import __version__

__all__ = ["__version__"]
