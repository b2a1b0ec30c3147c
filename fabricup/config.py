"""Runtime configuration, read once from the environment."""

import os
from pathlib import Path
from typing import ClassVar, Mapping, Optional

from pydantic import BaseModel, PositiveFloat, ValidationError

from .errors import ConfigError
from .installers.resolver import InstallerResolver


class Settings(BaseModel):
    CACHE_DIR_NAME: ClassVar[str] = "fabric-installers"
    LOG_DIR_NAME: ClassVar[str] = "fabricup"

    home: Path
    meta_url: str = InstallerResolver.META_URL
    java_home: Optional[Path] = None
    installer_timeout: Optional[PositiveFloat] = None

    @property
    def cache_dir(self) -> Path:
        return self.home / ".cache" / self.CACHE_DIR_NAME

    @property
    def log_dir(self) -> Path:
        return self.home / ".cache" / self.LOG_DIR_NAME

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        environ = os.environ if environ is None else environ

        home = environ.get("HOME")
        if not home:
            raise ConfigError("HOME is not set; cannot locate the installer cache")

        values = {"home": home}
        if environ.get("FABRICUP_META_URL"):
            values["meta_url"] = environ["FABRICUP_META_URL"]
        if environ.get("JAVA_HOME"):
            values["java_home"] = environ["JAVA_HOME"]
        if environ.get("FABRICUP_INSTALLER_TIMEOUT"):
            values["installer_timeout"] = environ["FABRICUP_INSTALLER_TIMEOUT"]

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e
