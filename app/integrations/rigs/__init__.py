"""Tableland Rigs metadata integration module."""

from .client import GraphQLError, Rig, RigsClient

__all__ = ["GraphQLError", "Rig", "RigsClient"]
