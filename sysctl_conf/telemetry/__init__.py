"""Run logging for CLI commands."""

from .logger import RunLogger

__all__ = ["RunLogger"]
