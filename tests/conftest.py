"""Shared fixtures: a local stand-in for the Fabric meta and maven servers."""

from collections import Counter

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from fabricup.config import Settings

INSTALLER_BYTES = {
    "installer-1.2.3.jar": b"PK\x03\x04 fabric installer 1.2.3",
    "installer-1.2.2.jar": b"PK\x03\x04 fabric installer 1.2.2",
}


class StubFabricServer:
    """Serves installer metadata and installer jars, counting downloads."""

    def __init__(self):
        self.metadata = None
        self.raw_metadata = None
        self.metadata_status = 200
        self.downloads = Counter()
        self.server = None

        self.app = web.Application()
        self.app.router.add_get("/v2/versions/installer", self.handle_metadata)
        self.app.router.add_get("/maven/{name}", self.handle_jar)
        self.app.router.add_get("/redirect/{name}", self.handle_redirect)

    def url(self, path: str) -> str:
        return str(self.server.make_url(path))

    @property
    def meta_url(self) -> str:
        return self.url("/v2/versions/installer")

    def jar_url(self, name: str) -> str:
        return self.url(f"/maven/{name}")

    async def handle_metadata(self, request):
        if self.metadata_status != 200:
            return web.Response(status=self.metadata_status, text="unavailable")
        if self.raw_metadata is not None:
            return web.Response(body=self.raw_metadata, content_type="application/json")
        return web.json_response(self.metadata)

    async def handle_jar(self, request):
        name = request.match_info["name"]
        if name not in INSTALLER_BYTES:
            raise web.HTTPNotFound()
        self.downloads[name] += 1
        return web.Response(body=INSTALLER_BYTES[name], content_type="application/java-archive")

    async def handle_redirect(self, request):
        raise web.HTTPFound(f"/maven/{request.match_info['name']}")


@pytest_asyncio.fixture
async def fabric_server():
    stub = StubFabricServer()
    stub.server = TestServer(stub.app)
    await stub.server.start_server()
    stub.metadata = [
        {"url": stub.jar_url("installer-1.2.3.jar"), "maven": "net.fabricmc:fabric-installer:1.2.3",
         "version": "1.2.3", "stable": True},
        {"url": stub.jar_url("installer-1.2.2.jar"), "maven": "net.fabricmc:fabric-installer:1.2.2",
         "version": "1.2.2", "stable": True},
    ]
    yield stub
    await stub.server.close()


@pytest.fixture
def settings(tmp_path, fabric_server):
    return Settings(home=tmp_path, meta_url=fabric_server.meta_url)
