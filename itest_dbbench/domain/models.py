"""
Domain models for the dbbench config generator.

Defines the immutable records that flow through the pipeline: the skip list
read from the integration tests YAML, the SQL query files and generated row
count queries, and the stanzas serialized into the dbbench configuration.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

from pydantic import BaseModel, Field, SkipValidation

_FROZEN = {
    "frozen": True,
    "populate_by_name": True,
    "arbitrary_types_allowed": False,
}

# Text taken from disk; undecodable bytes are kept as surrogate escapes,
# which pydantic's str validation rejects.
RawText = SkipValidation[str]


class SkipList(BaseModel):
    """
    Query identifiers excluded from benchmark generation for one case.
    """

    case_id: str = Field(..., description="Integration test case identifier.")
    query_ids: Tuple[str, ...] = Field((), description="Skipped query id prefixes, in order.")

    model_config = _FROZEN

    def is_skipped(self, file_name: str) -> bool:
        return any(file_name.startswith(query_id) for query_id in self.query_ids)


class QueryFile(BaseModel):
    """
    A `.sql` file from the case queries directory with its normalized text.
    """

    name: RawText = Field(..., description="File name, e.g. `0001_fetchObjectById.sql`.")
    path: Path = Field(..., description="Location of the file on disk.")
    raw_text: RawText = Field(..., description="File content as read.")
    sql: RawText = Field(..., description="Single-line SQL without comments or semicolons.")

    model_config = _FROZEN


class CountQuery(BaseModel):
    """
    Row count query generated for a table listed in the ingest metadata.
    """

    table: str
    query: str

    model_config = _FROZEN


class Stanza(BaseModel):
    """
    One bracketed section of the dbbench configuration file.
    """

    section: str = Field(..., description="Section name: sequential index or `count<table>`.")
    comment: SkipValidation[Optional[str]] = Field(None, description="Source file name, if any.")
    query: RawText
    results_file: Path
    count: int = 1

    model_config = _FROZEN

    def render(self) -> str:
        lines = [f"[{self.section}]"]
        if self.comment is not None:
            lines.append(f"; {self.comment}")
        lines.append(f"query={self.query}")
        lines.append(f"query-results-file={self.results_file}")
        lines.append(f"count={self.count}")
        return "\n".join(lines) + "\n\n"


class DatasetPaths(BaseModel):
    """
    Input locations of one integration test case inside a Qserv source tree.
    """

    queries_dir: Path
    metadata_file: Path
    integration_config: Path

    model_config = _FROZEN


class GenerationResult(BaseModel):
    """
    Outcome of a generator run.
    """

    case_id: str
    output_path: Path
    skipped_query_ids: Tuple[str, ...] = ()
    stanzas: Tuple[Stanza, ...] = ()

    model_config = _FROZEN

    @property
    def count_stanzas(self) -> Tuple[Stanza, ...]:
        return tuple(s for s in self.stanzas if s.comment is None)

    @property
    def query_stanzas(self) -> Tuple[Stanza, ...]:
        return tuple(s for s in self.stanzas if s.comment is not None)


__all__ = [
    "CountQuery",
    "DatasetPaths",
    "GenerationResult",
    "QueryFile",
    "SkipList",
    "Stanza",
]
