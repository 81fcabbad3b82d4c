"""
Collection and normalization of the SQL files of an integration test case.

dbbench expects every query on a single `query=` line, so each file is folded
into one line: trailing `--` comments and everything after a `;` are dropped,
whitespace runs collapse to a single space and lines are joined with spaces.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import List

from itest_dbbench.domain.models import QueryFile, SkipList
from itest_dbbench.utils.logging import get_logger

log = get_logger(__name__)

SQL_SUFFIX = ".sql"
COMMENT_MARKER = "--"
STATEMENT_END = ";"

# ASCII whitespace only; non-breaking and other Unicode spaces are kept.
_WHITESPACE = re.compile(r"[\t\n\f\r ]+")
# Undecodable bytes survive as surrogate escapes and are written back unchanged.
FILE_ERRORS = "surrogateescape"


def normalize_sql(text: str) -> str:
    """
    Fold SQL text into a single line.

    >>> normalize_sql("SELECT *\\n  FROM t -- comment\\n;")
    'SELECT * FROM t'
    """
    parts: List[str] = []
    for line in text.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        data = line.split(COMMENT_MARKER, 1)[0]
        data = data.split(STATEMENT_END, 1)[0]
        data = data.strip()
        if data:
            parts.append(_WHITESPACE.sub(" ", data))
    return " ".join(parts)


def list_query_files(directory: Path | str, skip_list: SkipList) -> List[Path]:
    """
    List the `.sql` files of `directory` sorted by name, minus the skipped ones.
    """
    query_dir = Path(directory)
    if not query_dir.is_dir():
        raise FileNotFoundError(f"Query directory not found: {query_dir}")

    selected: List[Path] = []
    for path in sorted(query_dir.iterdir(), key=lambda p: p.name):
        if path.suffix != SQL_SUFFIX or not path.is_file():
            continue
        if skip_list.is_skipped(path.name):
            log.debug(f"Skipping {path.name}", extra={"case_id": skip_list.case_id})
            continue
        selected.append(path)
    return selected


def read_query(path: Path) -> QueryFile:
    with path.open("r", encoding="utf-8", errors=FILE_ERRORS, newline="") as f:
        raw_text = f.read()
    return QueryFile(name=path.name, path=path, raw_text=raw_text, sql=normalize_sql(raw_text))


def collect_queries(directory: Path | str, skip_list: SkipList) -> List[QueryFile]:
    """Read and normalize every query of `directory` not excluded by `skip_list`."""
    queries = [read_query(path) for path in list_query_files(directory, skip_list)]
    log.info(
        f"Collected {len(queries)} queries",
        extra={"queries_dir": str(directory), "case_id": skip_list.case_id},
    )
    return queries


__all__ = ["collect_queries", "list_query_files", "normalize_sql", "read_query"]
