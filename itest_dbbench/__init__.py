"""
itest-dbbench - dbbench configuration generator for Qserv integration tests.

This package reads the datasets used by the Qserv integration tests and emits
an INI-like configuration file for the dbbench load tool:

- Skipped queries are read from `integration_tests.yaml`
- Row count queries are generated from the ingest `metadata.json`
- Every remaining `.sql` query is folded into a single-line stanza
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "GPL-3.0-or-later"

# Public API exports
from itest_dbbench.config import Settings, get_settings
from itest_dbbench.domain import (
    CountQuery,
    DbbenchError,
    GenerationResult,
    MetadataFormatError,
    QueryFile,
    SkipList,
    SkipListFormatError,
    Stanza,
)
from itest_dbbench.generator import generate, resolve_paths
from itest_dbbench.metadata import generate_count_queries
from itest_dbbench.queries import collect_queries, normalize_sql
from itest_dbbench.skip_list import get_skipped_queries, load_skip_list
from itest_dbbench.utils.logging import configure_logging, get_logger
from itest_dbbench.writer import write_config

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Pipeline
    "generate",
    "resolve_paths",
    "get_skipped_queries",
    "load_skip_list",
    "generate_count_queries",
    "collect_queries",
    "normalize_sql",
    "write_config",
    # Domain
    "CountQuery",
    "GenerationResult",
    "QueryFile",
    "SkipList",
    "Stanza",
    "DbbenchError",
    "MetadataFormatError",
    "SkipListFormatError",
    # Logging
    "configure_logging",
    "get_logger",
]
