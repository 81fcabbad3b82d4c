"""
Error types raised while reading the integration-test inputs.

Every error is fatal: the generator never recovers locally, it lets the
exception reach the CLI which reports it and exits non-zero.
"""
from __future__ import annotations


class DbbenchError(Exception):
    """Base class for domain errors raised by the generator."""


class SkipListFormatError(DbbenchError, ValueError):
    """The integration tests YAML could not be parsed or has an unexpected shape."""


class MetadataFormatError(DbbenchError, ValueError):
    """The dataset ingest metadata JSON could not be parsed."""


__all__ = ["DbbenchError", "MetadataFormatError", "SkipListFormatError"]
