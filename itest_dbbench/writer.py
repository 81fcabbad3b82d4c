"""
Serialization of the dbbench configuration file.

Row count stanzas come first, named `count<table>`. Query stanzas follow,
numbered from 0 in the order they are given, each commented with its source
file name. Every stanza runs once (`count=1`) and saves its results under
`results_dir`.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from itest_dbbench.domain.models import CountQuery, QueryFile, Stanza
from itest_dbbench.queries import FILE_ERRORS
from itest_dbbench.utils.logging import get_logger

log = get_logger(__name__)


def count_stanza(query: CountQuery, results_dir: Path) -> Stanza:
    section = f"count{query.table}"
    return Stanza(section=section, query=query.query, results_file=results_dir / f"{section}.csv")


def query_stanza(index: int, query: QueryFile, results_dir: Path) -> Stanza:
    return Stanza(
        section=str(index),
        comment=query.name,
        query=query.sql,
        results_file=results_dir / f"{index}.csv",
    )


def build_stanzas(
    count_queries: Iterable[CountQuery],
    query_files: Iterable[QueryFile],
    results_dir: Path | str,
) -> List[Stanza]:
    results = Path(results_dir)
    stanzas = [count_stanza(q, results) for q in count_queries]
    stanzas.extend(query_stanza(i, q, results) for i, q in enumerate(query_files))
    return stanzas


def write_config(
    path: Path | str,
    count_queries: Iterable[CountQuery],
    query_files: Iterable[QueryFile],
    results_dir: Path | str,
) -> List[Stanza]:
    """
    Write the dbbench configuration to `path`, replacing any existing file.

    Returns the stanzas in the order they were written.
    """
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    stanzas = build_stanzas(count_queries, query_files, results_dir)

    log.info(f"Generate {output}", extra={"output": str(output), "stanzas": len(stanzas)})
    with output.open("w", encoding="utf-8", errors=FILE_ERRORS) as f:
        for stanza in stanzas:
            f.write(stanza.render())
            f.flush()
    return stanzas


__all__ = ["build_stanzas", "count_stanza", "query_stanza", "write_config"]
