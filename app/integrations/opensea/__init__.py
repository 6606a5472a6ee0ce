"""OpenSea integration module."""

from .client import OpenSeaClient

__all__ = ["OpenSeaClient"]
