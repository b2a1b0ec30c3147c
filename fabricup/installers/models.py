"""Data models for Fabric installer metadata and cache entries."""

from pathlib import Path
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError, field_validator


class InstallerVersion(BaseModel):
    """One entry of the installer metadata list."""
    url: StrictStr
    maven: Optional[str] = None
    version: Optional[str] = None
    stable: Optional[bool] = None

    @field_validator("maven", "version", "stable", mode="wrap")
    @classmethod
    def _informational(cls, value: Any, handler):
        # only url is required; unreadable extras are dropped
        try:
            return handler(value)
        except ValidationError:
            return None


class ArtifactReference(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str


class CachedArtifact(BaseModel):
    path: Path


class InstallationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: str


class ProcessResult(BaseModel):
    command: List[str]
    returncode: int
