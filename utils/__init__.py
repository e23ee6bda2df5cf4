"""Utility subpackages exposed for convenient importing."""

from utils import http, logging, replay

__all__ = [
    "http",
    "logging",
    "replay",
]
