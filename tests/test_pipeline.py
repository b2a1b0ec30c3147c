"""End-to-end tests of resolve, cache and run against a local stub server."""

import subprocess
from unittest.mock import patch

import pytest

from fabricup.core.pipeline import fetch_latest_installer, install
from fabricup.errors import InstallerFailedError, MetadataError
from fabricup.installers import InstallationRequest
from tests.conftest import INSTALLER_BYTES


@pytest.mark.asyncio
async def test_install_runs_latest_installer(fabric_server, settings):
    completed = subprocess.CompletedProcess(args=[], returncode=0)
    with patch("fabricup.runtime.java_runner.subprocess.run", return_value=completed) as run:
        path = await install(InstallationRequest(version="1.20.4"), settings)

    assert path == settings.cache_dir / "installer-1.2.3.jar"
    assert path.read_bytes() == INSTALLER_BYTES["installer-1.2.3.jar"]
    run.assert_called_once_with(
        ["java", "-jar", str(path), "client", "-snapshot", "-mcversion", "1.20.4"], timeout=None
    )


@pytest.mark.asyncio
async def test_repeat_fetch_downloads_once(fabric_server, settings):
    first = await fetch_latest_installer(settings)
    second = await fetch_latest_installer(settings)

    assert first == second
    assert fabric_server.downloads["installer-1.2.3.jar"] == 1


@pytest.mark.asyncio
async def test_newer_release_evicts_cached_installer(fabric_server, settings):
    fabric_server.metadata = fabric_server.metadata[1:]
    await fetch_latest_installer(settings)

    fabric_server.metadata = [{"url": fabric_server.jar_url("installer-1.2.3.jar")}]
    await fetch_latest_installer(settings)

    assert [p.name for p in settings.cache_dir.iterdir()] == ["installer-1.2.3.jar"]


@pytest.mark.asyncio
async def test_bad_metadata_stops_before_download(fabric_server, settings):
    fabric_server.metadata = [{"version": "1.2.3"}]

    with patch("fabricup.runtime.java_runner.subprocess.run") as run:
        with pytest.raises(MetadataError):
            await install(InstallationRequest(version="1.20.4"), settings)

    assert not fabric_server.downloads
    assert not settings.cache_dir.exists()
    run.assert_not_called()


@pytest.mark.asyncio
async def test_installer_failure_propagates(fabric_server, settings):
    completed = subprocess.CompletedProcess(args=[], returncode=1)
    with patch("fabricup.runtime.java_runner.subprocess.run", return_value=completed):
        with pytest.raises(InstallerFailedError):
            await install(InstallationRequest(version="1.20.4"), settings)

    # the installer itself stays cached for the next attempt
    assert (settings.cache_dir / "installer-1.2.3.jar").exists()
