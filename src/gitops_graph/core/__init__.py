"""Core configuration and constant exports."""

from .config import GitopsConfig, GitopsConfigError, RepoConfig, load_gitops_config
from .constants import (
    DEFAULT_PACKAGE_VERSION,
    GITOPS_CONCURRENCY_DEFAULT,
    GITOPS_CONFIG_PATH_DEFAULT,
    GITOPS_MAX_ITERATIONS_DEFAULT,
    GITOPS_NPM_WAIT_TIMEOUT_DEFAULT,
    WILDCARD_VERSION,
)

__all__ = [
    "DEFAULT_PACKAGE_VERSION",
    "GITOPS_CONCURRENCY_DEFAULT",
    "GITOPS_CONFIG_PATH_DEFAULT",
    "GITOPS_MAX_ITERATIONS_DEFAULT",
    "GITOPS_NPM_WAIT_TIMEOUT_DEFAULT",
    "WILDCARD_VERSION",
    "GitopsConfig",
    "GitopsConfigError",
    "RepoConfig",
    "load_gitops_config",
]
