"""Fetch, cache and run the latest Fabric installer."""

__version__ = "0.1.0"
