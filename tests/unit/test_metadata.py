from __future__ import annotations

import json
from pathlib import Path

import pytest

from itest_dbbench.domain.errors import MetadataFormatError
from itest_dbbench.metadata import generate_count_queries, table_name


def _write(tmp_path: Path, document: object) -> Path:
    path = tmp_path / "metadata.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def test_one_count_query_per_table_mapping(tmp_path: Path) -> None:
    path = _write(tmp_path, {"tables": {"a": {"schema": "a.json"}, "b": {"schema": "b.json"}}})

    queries = generate_count_queries(path)

    assert [q.table for q in queries] == ["a", "b"]
    assert queries[0].query == "SELECT count(*) FROM a"
    assert queries[1].query == "SELECT count(*) FROM b"


def test_table_list_keeps_document_order_and_duplicates(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        {"tables": [{"schema": "Source.json"}, {"schema": "Object.json"}, {"schema": "Source.json"}]},
    )
    assert [q.table for q in generate_count_queries(path)] == ["Source", "Object", "Source"]


def test_entries_without_schema_are_ignored(tmp_path: Path) -> None:
    path = _write(tmp_path, {"tables": [{"indexes": []}, {"schema": "Filter.json"}, "junk"]})
    assert [q.table for q in generate_count_queries(path)] == ["Filter"]


def test_missing_tables_yields_no_queries(tmp_path: Path) -> None:
    assert generate_count_queries(_write(tmp_path, {"database": "db"})) == []


def test_table_name_strips_json_suffix_once() -> None:
    assert table_name("Object.json") == "Object"
    assert table_name("Object.json.json") == "Object.json"
    assert table_name("Object") == "Object"


def test_malformed_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "metadata.json"
    path.write_text("{'tables':", encoding="utf-8")
    with pytest.raises(MetadataFormatError, match="metadata.json"):
        generate_count_queries(path)


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        generate_count_queries(tmp_path / "metadata.json")


@pytest.mark.parametrize(
    ("schema", "expected"),
    [(True, "true"), (False, "false"), (None, "<nil>"), (1000.0, "1000"), (1.5, "1.5"), (42, "42")],
)
def test_table_name_formats_non_string_schema(schema: object, expected: str) -> None:
    assert table_name(schema) == expected
