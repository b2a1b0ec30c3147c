"""Installer metadata resolver."""

import logging
from typing import Any, Optional

import aiohttp
from pydantic import ValidationError

from ..errors import MetadataError
from ..utils import AsyncHTTPClient
from .models import ArtifactReference, InstallerVersion

logger = logging.getLogger(__name__)


class InstallerResolver:
    META_URL = "https://meta.fabricmc.net/v2/versions/installer"

    def __init__(self, client: AsyncHTTPClient, meta_url: Optional[str] = None):
        self.client = client
        self.meta_url = meta_url or self.META_URL

    async def fetch_metadata(self) -> Any:
        """Fetch the raw installer list, newest first."""
        try:
            return await self.client.get(self.meta_url)
        except (aiohttp.ContentTypeError, ValueError) as e:
            raise MetadataError(f"Installer metadata from {self.meta_url} is not valid JSON: {e}") from e

    async def fetch_latest(self) -> InstallerVersion:
        """Return the first (latest) entry; later entries are never inspected."""
        data = await self.fetch_metadata()
        if not isinstance(data, list):
            raise MetadataError(f"Expected a JSON array from {self.meta_url}, got {type(data).__name__}")
        if not data:
            raise MetadataError(f"No installer versions listed at {self.meta_url}")
        if not isinstance(data[0], dict):
            raise MetadataError(f"Latest installer entry is not an object: {data[0]!r}")

        try:
            return InstallerVersion(**data[0])
        except ValidationError as e:
            raise MetadataError(f"Latest installer entry has no usable url: {e}") from e

    async def resolve_latest(self) -> ArtifactReference:
        latest = await self.fetch_latest()
        logger.debug("Latest installer %s at %s", latest.version or "<unknown>", latest.url)
        return ArtifactReference(url=latest.url)

    async def resolve_latest_installer_url(self) -> str:
        """Get the download URL of the newest installer."""
        return (await self.resolve_latest()).url
