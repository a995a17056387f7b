# src/config/settings.py - v1
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for analysis defaults. Every field can be set through
an environment variable prefixed with COLLABGRAPH_ (e.g. COLLABGRAPH_GRAPH_BACKEND).
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="COLLABGRAPH_",
        extra="ignore",
    )

    # === Graph ===
    graph_backend: Literal["sparse", "dense"] = "sparse"
    graph_export_formats: str = "gexf"

    # === PageRank ===
    pagerank_damping: float = 0.85
    pagerank_max_iter: int = 20
    pagerank_tol: float = 1e-6

    # === Community detection ===
    community_max_splits: int = 10

    # === Report ===
    report_top_n: int = 5

    # === Interaction weights ===
    weight_pr_comment: float = 2.0
    weight_issue_comment: float = 3.0
    weight_review: float = 4.0
    weight_merge: float = 5.0
    weight_issue_closed: float = 3.0

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("pagerank_damping")
    @classmethod
    def validate_damping(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError("pagerank_damping must be within [0, 1]")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Collect cross-field violations into one ConfigurationError."""
        errors: list[str] = []

        if self.pagerank_max_iter < 0:
            errors.append("PAGERANK_MAX_ITER must be >= 0")
        if self.pagerank_tol <= 0:
            errors.append("PAGERANK_TOL must be > 0")
        if self.community_max_splits < 0:
            errors.append("COMMUNITY_MAX_SPLITS must be >= 0")
        if self.report_top_n < 0:
            errors.append("REPORT_TOP_N must be >= 0")

        weights = (
            self.weight_pr_comment, self.weight_issue_comment,
            self.weight_review, self.weight_merge, self.weight_issue_closed,
        )
        if any(w <= 0 for w in weights):
            errors.append("Interaction weights must be > 0")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def graph_export_formats_list(self) -> list[str]:
        """Parse comma-separated graph export formats."""
        return [f.strip() for f in self.graph_export_formats.split(",") if f.strip()]


def load_settings(**overrides: object) -> Settings:
    """Load settings from environment with optional overrides.

    Args:
        **overrides: Field values that take precedence over .env.

    Returns:
        Validated Settings instance.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
