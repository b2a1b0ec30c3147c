"""Resolve, cache and run the latest Fabric installer."""

import logging
from pathlib import Path
from typing import Optional

from ..config import Settings
from ..installers import InstallationRequest, InstallerCache, InstallerResolver
from ..installers.models import ProcessResult
from ..runtime import JavaRunner
from ..utils import AsyncHTTPClient
from ..utils.async_http import ProgressCallback

logger = logging.getLogger(__name__)


async def fetch_latest_installer(settings: Settings,
                                 progress_callback: Optional[ProgressCallback] = None) -> Path:
    """Make sure the newest installer is in the cache and return its path."""
    async with AsyncHTTPClient() as client:
        url = await InstallerResolver(client, settings.meta_url).resolve_latest_installer_url()
        cached = await InstallerCache(settings.cache_dir).ensure_cached(client, url, progress_callback)
    return cached.path


async def install(request: InstallationRequest, settings: Settings,
                  progress_callback: Optional[ProgressCallback] = None) -> Path:
    installer_path = await fetch_latest_installer(settings, progress_callback)
    # Blocks the loop until the installer exits; nothing else is scheduled.
    result: ProcessResult = JavaRunner(settings.java_home).run_installer(
        installer_path, request.version, timeout=settings.installer_timeout
    )
    logger.debug("Installer finished: %s", result.command)
    return installer_path
