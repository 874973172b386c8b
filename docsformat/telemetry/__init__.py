"""Telemetry helpers for deterministic CLI run logs."""

from .logger import RunLogger

__all__ = ["RunLogger"]
