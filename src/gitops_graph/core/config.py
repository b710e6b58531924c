"""Gitops configuration for multi-repo publishing.

The configuration is stored in gitops.config.yaml at the workspace root:

    repos:
      - https://github.com/fuzdev/fuz_util
      - repo_url: https://github.com/fuzdev/fuz_gitops
        branch: main
    max_iterations: 10
    concurrency: 5

Only ``max_iterations`` matters to graph computation, and only to the
orchestrator that re-runs it; the graph itself never enforces the bound.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from gitops_graph.core.constants import (
    GITOPS_CONCURRENCY_DEFAULT,
    GITOPS_MAX_ITERATIONS_DEFAULT,
    GITOPS_NPM_WAIT_TIMEOUT_DEFAULT,
)

logger = logging.getLogger(__name__)


class GitopsConfigError(RuntimeError):
    """Raised when gitops.config.yaml cannot be parsed or validated."""


class RepoConfig(BaseModel):
    """A single repository tracked by the workspace."""

    repo_url: str = Field(..., min_length=1)
    branch: str = "main"

    @property
    def name(self) -> str:
        """Repository name derived from the last URL path segment."""
        tail = self.repo_url.rstrip("/").rsplit("/", 1)[-1]
        return tail.removesuffix(".git")


class GitopsConfig(BaseModel):
    """Top-level gitops configuration."""

    repos: list[RepoConfig] = Field(default_factory=list)
    max_iterations: int = Field(default=GITOPS_MAX_ITERATIONS_DEFAULT, ge=1)
    concurrency: int = Field(default=GITOPS_CONCURRENCY_DEFAULT, ge=1)
    npm_wait_timeout_ms: int = Field(default=GITOPS_NPM_WAIT_TIMEOUT_DEFAULT, ge=1)

    @field_validator("repos", mode="before")
    @classmethod
    def _expand_repo_shorthand(cls, value: Any) -> Any:
        # A bare URL string is shorthand for {repo_url: <url>}.
        if isinstance(value, list):
            return [{"repo_url": item} if isinstance(item, str) else item for item in value]
        return value


def load_gitops_config(config_path: Path) -> GitopsConfig:
    """Load gitops configuration from a YAML file.

    Args:
        config_path: Path to gitops.config.yaml

    Returns:
        GitopsConfig instance (defaults if the file does not exist)

    Raises:
        GitopsConfigError: If the file is not valid YAML or fails validation
    """
    if not config_path.exists():
        logger.warning(f"Config file not found: {config_path}")
        return GitopsConfig()

    yaml = YAML(typ="safe")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.load(f) or {}
    except (OSError, YAMLError) as e:
        logger.error(f"Failed to load config: {e}")
        raise GitopsConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise GitopsConfigError(
            f"Invalid config in {config_path}: expected a mapping at the top level"
        )

    try:
        config = GitopsConfig.model_validate(data)
    except ValidationError as e:
        raise GitopsConfigError(f"Invalid config in {config_path}: {e}") from e

    logger.debug(
        f"Loaded config from {config_path}: {len(config.repos)} repos, "
        f"max_iterations={config.max_iterations}"
    )
    return config


__all__ = [
    "GitopsConfig",
    "GitopsConfigError",
    "RepoConfig",
    "load_gitops_config",
]
