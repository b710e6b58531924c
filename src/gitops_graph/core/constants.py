"""Shared constants for gitops graph tasks and operations.

Naming convention: GITOPS_{NAME}_DEFAULT for user-facing defaults.
"""

from __future__ import annotations

# Upper bound on fixed-point iterations while resolving transitive version
# cascades. Most repo sets converge in 2-3 iterations; deep chains need more.
GITOPS_MAX_ITERATIONS_DEFAULT = 10

GITOPS_CONFIG_PATH_DEFAULT = "gitops.config.yaml"

GITOPS_CONCURRENCY_DEFAULT = 5

# Milliseconds to wait for registry propagation after a publish (10 minutes).
GITOPS_NPM_WAIT_TIMEOUT_DEFAULT = 600_000

WILDCARD_VERSION = "*"
DEFAULT_PACKAGE_VERSION = "0.0.0"

__all__ = [
    "DEFAULT_PACKAGE_VERSION",
    "GITOPS_CONCURRENCY_DEFAULT",
    "GITOPS_CONFIG_PATH_DEFAULT",
    "GITOPS_MAX_ITERATIONS_DEFAULT",
    "GITOPS_NPM_WAIT_TIMEOUT_DEFAULT",
    "WILDCARD_VERSION",
]
