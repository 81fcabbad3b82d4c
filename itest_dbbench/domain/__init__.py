"""
Domain package for the dbbench config generator.

Exports the records and error types shared by the readers, the writer and the
generator. Keep this package focused on data definitions and validation concerns.
"""

from itest_dbbench.domain.errors import DbbenchError, MetadataFormatError, SkipListFormatError
from itest_dbbench.domain.models import (
    CountQuery,
    DatasetPaths,
    GenerationResult,
    QueryFile,
    SkipList,
    Stanza,
)

__all__ = [
    "CountQuery",
    "DatasetPaths",
    "DbbenchError",
    "GenerationResult",
    "MetadataFormatError",
    "QueryFile",
    "SkipList",
    "SkipListFormatError",
    "Stanza",
]
