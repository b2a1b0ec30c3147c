"""Errors raised by the install pipeline."""

from typing import List


class FabricupError(Exception):
    """Base class for every failure the pipeline reports."""


class ConfigError(FabricupError):
    pass


class MetadataError(FabricupError):
    """The installer metadata response could not be used."""


class InvalidArtifactUrl(FabricupError):
    """The artifact URL has no usable file name."""


class InstallerLaunchError(FabricupError):
    """The Java launcher could not be started."""


class InstallerFailedError(FabricupError):
    def __init__(self, command: List[str], returncode: int):
        self.command = command
        self.returncode = returncode
        super().__init__(f"Installer exited with status {returncode}")


class InstallerTimeoutError(FabricupError):
    def __init__(self, command: List[str], timeout: float):
        self.command = command
        self.timeout = timeout
        super().__init__(f"Installer did not finish within {timeout:g}s and was killed")
