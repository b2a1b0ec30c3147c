"""Runs installer JARs with a Java runtime."""

import logging
import platform
import subprocess
from pathlib import Path
from typing import List, Optional

from ..errors import InstallerFailedError, InstallerLaunchError, InstallerTimeoutError
from ..installers.models import ProcessResult

logger = logging.getLogger(__name__)


def build_installer_args(installer_path: Path, version: str) -> List[str]:
    """Arguments passed to the launcher for a client install of `version`."""
    return ["-jar", str(installer_path), "client", "-snapshot", "-mcversion", version]


class JavaRunner:
    def __init__(self, java_home: Optional[Path] = None):
        self.java_home = java_home

    def get_java_executable(self) -> str:
        """JAVA_HOME's java when configured, otherwise whatever `java` is on PATH."""
        if self.java_home:
            name = "java.exe" if platform.system() == "Windows" else "java"
            return str(self.java_home / "bin" / name)
        return "java"

    def build_command(self, installer_path: Path, version: str) -> List[str]:
        return [self.get_java_executable()] + build_installer_args(installer_path, version)

    def run_installer(self, installer_path: Path, version: str,
                      timeout: Optional[float] = None) -> ProcessResult:
        """Run the installer and block until it exits.

        The child shares stdout/stderr with this process. Raises
        InstallerLaunchError if java can't be started, InstallerTimeoutError if
        `timeout` elapses (the child is killed), and InstallerFailedError on a
        non-zero exit.
        """
        command = self.build_command(installer_path, version)
        logger.info("Running installer %s", installer_path)
        logger.debug("Command: %s", command)

        try:
            result = subprocess.run(command, timeout=timeout)
        except subprocess.TimeoutExpired as e:
            raise InstallerTimeoutError(command, timeout) from e
        except OSError as e:
            raise InstallerLaunchError(f"Could not start {command[0]}: {e}") from e

        if result.returncode != 0:
            raise InstallerFailedError(command, result.returncode)
        return ProcessResult(command=command, returncode=result.returncode)
