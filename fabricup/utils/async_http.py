"""Async HTTP client utilities."""

import aiohttp
from typing import Any, AsyncIterator, Callable, Dict, Optional, Awaitable

from .. import __version__

ProgressCallback = Callable[[str, int, int], Awaitable[None]]

CHUNK_SIZE = 64 * 1024

# Requests wait as long as the server takes.
NO_TIMEOUT = aiohttp.ClientTimeout(total=None)


class AsyncHTTPClient:
    """Reusable async HTTP client."""

    def __init__(self, headers: Optional[Dict[str, str]] = None):
        self.default_headers = {"User-Agent": f"fabricup/{__version__}", **(headers or {})}
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        self.session = aiohttp.ClientSession(headers=self.default_headers, timeout=NO_TIMEOUT)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if self.session:
            await self.session.close()

    async def get(self, url: str, headers: Optional[Dict[str, str]] = None) -> Any:
        """GET request, decoded as JSON."""
        async with self.session.get(url, headers=headers) as resp:
            resp.raise_for_status()
            return await resp.json()

    async def stream(self, url: str, name: str = "",
                     progress_callback: Optional[ProgressCallback] = None) -> AsyncIterator[bytes]:
        """Yield the body of a GET request chunk by chunk, following redirects."""
        async with self.session.get(url, allow_redirects=True) as resp:
            resp.raise_for_status()
            total_size = int(resp.headers.get('Content-Length', 0))
            downloaded = 0

            async for chunk in resp.content.iter_chunked(CHUNK_SIZE):
                downloaded += len(chunk)
                yield chunk
                if progress_callback:
                    await progress_callback(name, downloaded, total_size)
