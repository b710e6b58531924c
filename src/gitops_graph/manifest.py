"""Package manifest model for the graph's input boundary.

A manifest is the package.json-shaped description of one package: its
name, version, private flag and the three dependency sections. Loading
manifests from disk or the registry happens elsewhere; this module only
validates already-decoded mappings so the graph can trust its input.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ManifestError(ValueError):
    """Raised when a manifest payload fails validation."""


class PackageManifest(BaseModel):
    """Validated manifest metadata for a single package."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    name: str = Field(..., min_length=1, description="Unique package name")
    version: Optional[str] = Field(None, description="Package version, if declared")
    private: bool = Field(False, description="Private packages are never published")
    dependencies: dict[str, str] = Field(default_factory=dict)
    peer_dependencies: dict[str, str] = Field(default_factory=dict, alias="peerDependencies")
    dev_dependencies: dict[str, str] = Field(default_factory=dict, alias="devDependencies")


def parse_manifest(data: Mapping[str, Any]) -> PackageManifest:
    """Validate one decoded manifest mapping.

    Raises:
        ManifestError: naming the package (when known) and each failing field
    """
    if not isinstance(data, Mapping):
        raise ManifestError(f"Invalid manifest: expected an object, got {type(data).__name__}")
    try:
        return PackageManifest.model_validate(dict(data))
    except ValidationError as exc:
        label = data.get("name")
        problems = "; ".join(
            f"{' -> '.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        prefix = f"Invalid manifest for {label!r}" if label else "Invalid manifest"
        raise ManifestError(f"{prefix}: {problems}") from exc


def parse_manifests(items: Iterable[Mapping[str, Any]]) -> list[PackageManifest]:
    """Validate a sequence of decoded manifest mappings, preserving order."""
    manifests: list[PackageManifest] = []
    for index, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise ManifestError(
                f"Invalid manifest at index {index}: expected an object, got {type(item).__name__}"
            )
        manifests.append(parse_manifest(item))
    return manifests


__all__ = ["ManifestError", "PackageManifest", "parse_manifest", "parse_manifests"]
