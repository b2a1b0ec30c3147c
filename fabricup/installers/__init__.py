"""Installer metadata and cache."""

from .cache import InstallerCache, cache_key, ensure_cached
from .models import ArtifactReference, CachedArtifact, InstallationRequest, InstallerVersion, ProcessResult
from .resolver import InstallerResolver

__all__ = [
    "InstallerCache", "cache_key", "ensure_cached", "InstallerResolver",
    "ArtifactReference", "CachedArtifact", "InstallationRequest", "InstallerVersion", "ProcessResult",
]
