"""
Row count queries derived from a case's ingest metadata.

The ingest `metadata.json` of a dataset describes each table with the name of
its schema file:

    {"database": "qservTest_case01_qserv",
     "tables": [{"schema": "Object.json", "indexes": [...]}, ...]}

For every `.tables.*.schema` entry a `SELECT count(*) FROM <table>` query is
generated, the table name being the schema file name without `.json`.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterator, List

from itest_dbbench.domain.errors import MetadataFormatError
from itest_dbbench.domain.models import CountQuery
from itest_dbbench.utils.logging import get_logger

log = get_logger(__name__)

SCHEMA_SUFFIX = ".json"


def _wildcard(node: Any) -> Iterator[Any]:
    if isinstance(node, dict):
        yield from node.values()
    elif isinstance(node, list):
        yield from node


def iter_table_schemas(document: Any) -> Iterator[Any]:
    """Yield the values matched by `.tables.*.schema`, in document order."""
    if not isinstance(document, dict):
        return
    for table in _wildcard(document.get("tables")):
        if isinstance(table, dict) and "schema" in table:
            yield table["schema"]


def _format_scalar(value: Any) -> str:
    """Render a JSON scalar as text: `true`, `<nil>`, integral floats without a fraction."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "<nil>"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def table_name(schema: Any) -> str:
    name = _format_scalar(schema)
    if name.endswith(SCHEMA_SUFFIX):
        name = name[: -len(SCHEMA_SUFFIX)]
    return name


def count_query(table: str) -> CountQuery:
    return CountQuery(table=table, query=f"SELECT count(*) FROM {table}")


def generate_count_queries(filename: Path | str) -> List[CountQuery]:
    """
    Parse the ingest metadata and build one row count query per table.

    Order follows the document and duplicates are kept.
    """
    path = Path(filename)
    text = path.read_text(encoding="utf-8")
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MetadataFormatError(f"in file {str(path)!r}: {exc}") from exc

    queries = [count_query(table_name(schema)) for schema in iter_table_schemas(document)]
    log.info(
        f"Generated {len(queries)} count queries",
        extra={"metadata": str(path), "tables": [q.table for q in queries]},
    )
    return queries


__all__ = ["count_query", "generate_count_queries", "iter_table_schemas", "table_name"]
