"""
Pytest configuration for the dbbench config generator.

Provides fixtures for:
- A minimal Qserv source tree with one integration test case
- Settings isolated from the developer environment
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from itest_dbbench.config import Settings, get_settings

CASE_ID = "case01"

INTEGRATION_TESTS_YAML = """\
version: 1
testdata:
  run_tests: true
  load_datasets:
    - id: case01
      skip_numbers:
        - "0003"
        - "1012"
    - id: case02
      skip_numbers: []
    - id: case03
"""

METADATA = {
    "database": "qservTest_case01_qserv",
    "tables": [
        {"schema": "Object.json", "indexes": ["idx_object.json"]},
        {"schema": "Source.json"},
        {"schema": "Filter.json"},
    ],
}

QUERIES = {
    "0001_fetchObjectById.sql": (
        "-- Fetch an object\n"
        "SELECT objectId, ra_PS\n"
        "FROM   Object\n"
        "WHERE  objectId = 430213989000;  -- known id\n"
    ),
    "0003_selectMetadataForOneGalaxy.sql": "SELECT * FROM Object WHERE objectId = 1;\n",
    "0002_fetchRunAndFieldById.sql": "SELECT run, field\n  FROM Science_Ccd_Exposure\n;\n",
    "1012_orderByClause.sql": "SELECT * FROM Source ORDER BY sourceId;\n",
    "1051_nn.sql": "SELECT count(*)\nFROM\tSource\n",
    "README.txt": "not a query\n",
}


def build_qserv_tree(root: Path, case_id: str = CASE_ID) -> Path:
    etc = root / "src" / "admin" / "etc"
    etc.mkdir(parents=True)
    (etc / "integration_tests.yaml").write_text(INTEGRATION_TESTS_YAML, encoding="utf-8")

    dataset = root / "itest_src" / "datasets" / case_id
    ingest = dataset / "data" / "ingest"
    ingest.mkdir(parents=True)
    (ingest / "metadata.json").write_text(json.dumps(METADATA), encoding="utf-8")

    queries = dataset / "queries"
    queries.mkdir()
    for name, text in QUERIES.items():
        (queries / name).write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def qserv_tree(tmp_path: Path) -> Path:
    """
    Qserv source tree with case01: 5 queries (2 skipped), 3 tables.
    """
    return build_qserv_tree(tmp_path / "qserv")


@pytest.fixture
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """
    Settings without environment overrides; the cache is reset around the test.
    """
    for var in (
        "QSERV_SRC_PATH",
        "CASE_ID",
        "DBBENCH_CONF",
        "DBBENCH_RESULTS_DIR",
        "LOG_LEVEL",
        "LOG_JSON",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield Settings()
    get_settings.cache_clear()


@pytest.fixture
def qserv_tree_factory(tmp_path: Path):
    """
    Build additional Qserv trees holding a single, arbitrarily named case.
    """

    def _build(case_id: str) -> Path:
        return build_qserv_tree(tmp_path / f"qserv-{case_id}", case_id=case_id)

    return _build
