"""Single-slot installer cache."""

import logging
from pathlib import Path
from typing import List, Optional

import aiofiles

from ..errors import InvalidArtifactUrl
from ..utils import AsyncHTTPClient
from ..utils.async_http import ProgressCallback
from .models import CachedArtifact

logger = logging.getLogger(__name__)

PARTIAL_SUFFIX = ".part"


def cache_key(url: str) -> str:
    """File name an artifact is cached under: the last path segment of its URL.

    Assumes the metadata service never reuses a file name for different content.
    """
    name = url.rsplit("/", 1)[-1]
    if not name or name in (".", ".."):
        raise InvalidArtifactUrl(f"Cannot derive an installer file name from {url!r}")
    return name


class InstallerCache:
    """Keeps at most one installer file in cache_dir."""

    def __init__(self, cache_dir: Path):
        self.cache_dir = Path(cache_dir)

    def target_path(self, url: str) -> Path:
        return self.cache_dir / cache_key(url)

    def cached_files(self) -> List[Path]:
        return [p for p in self.cache_dir.iterdir() if p.is_file()]

    def purge_stale(self) -> int:
        """Delete every file directly inside the cache dir. Subdirectories are kept."""
        removed = 0
        for path in self.cached_files():
            logger.debug("Removing %s", path)
            path.unlink()
            removed += 1
        return removed

    async def download(self, client: AsyncHTTPClient, url: str, dest: Path,
                       progress_callback: Optional[ProgressCallback] = None) -> None:
        """Stream url into dest, which only appears once the body is complete."""
        partial = dest.with_name(dest.name + PARTIAL_SUFFIX)
        try:
            async with aiofiles.open(partial, 'wb') as f:
                async for chunk in client.stream(url, dest.name, progress_callback):
                    await f.write(chunk)
            partial.replace(dest)
        except BaseException:
            partial.unlink(missing_ok=True)
            raise

    async def ensure_cached(self, client: AsyncHTTPClient, url: str,
                            progress_callback: Optional[ProgressCallback] = None) -> CachedArtifact:
        """Return the cached installer for url, downloading it on a miss."""
        target = self.target_path(url)
        self.cache_dir.mkdir(parents=True, exist_ok=True)

        if target.exists():
            logger.info("You already have the newest installer, skipping download...")
            return CachedArtifact(path=target)

        removed = self.purge_stale()
        if removed:
            logger.info("Found an old installer, removed %d file(s)", removed)

        logger.info("Downloading to %s from %s", target, url)
        await self.download(client, url, target, progress_callback)
        logger.info("Downloaded!")
        return CachedArtifact(path=target)


async def ensure_cached(client: AsyncHTTPClient, url: str, cache_dir: Path,
                        progress_callback: Optional[ProgressCallback] = None) -> Path:
    return (await InstallerCache(cache_dir).ensure_cached(client, url, progress_callback)).path
