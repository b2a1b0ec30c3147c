"""Java runtime handling."""

from .java_runner import JavaRunner, build_installer_args

__all__ = ["JavaRunner", "build_installer_args"]
