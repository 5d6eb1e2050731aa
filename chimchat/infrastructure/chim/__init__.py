"""Chim infrastructure package."""

from .chim_client import ChimClient

__all__ = ["ChimClient"]
