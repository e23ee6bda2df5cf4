"""Configuration package exposing provider settings."""

from config import providers

__all__ = ["providers"]
