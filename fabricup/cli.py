"""Command-line entry point."""

import asyncio
import logging
import sys
from typing import List, Optional

import aiohttp

from .config import Settings
from .core.pipeline import install
from .errors import FabricupError
from .installers import InstallationRequest
from .utils import setup_logging

logger = logging.getLogger(__name__)

USAGE = "Usage: fabricup <minecraft-version>"

EXIT_USAGE = 1
EXIT_FAILURE = 2


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print(f"Expected 1 argument, got {len(args)}")
        print(USAGE)
        return EXIT_USAGE

    request = InstallationRequest(version=args[0])

    try:
        settings = Settings.from_env()
    except FabricupError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        log_file = setup_logging(settings.log_dir)
    except OSError as e:
        print(f"Error: cannot set up logging in {settings.log_dir}: {e}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        installer_path = asyncio.run(install(request, settings))
    except (FabricupError, aiohttp.ClientError, OSError) as e:
        logger.error("%s", e)
        logger.debug("Install of Fabric %s failed", request.version, exc_info=True)
        logger.error("Failed to run installer! Aborting... (details in %s)", log_file)
        return EXIT_FAILURE

    print(f"Successfully installed Fabric {request.version} with {installer_path}")
    return 0


def run():
    sys.exit(main())
