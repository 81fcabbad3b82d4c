"""
Generator turning one Qserv integration test case into a dbbench configuration.

Usage (example from CLI):
    from itest_dbbench.generator import generate

    result = generate(case_id="case01", dbbench_conf="/tmp/dbbench.ini")
    print(len(result.stanzas))

Inputs are looked up inside the Qserv source tree:
- `itest_src/datasets/<case>/queries/*.sql`
- `itest_src/datasets/<case>/data/ingest/metadata.json`
- `src/admin/etc/integration_tests.yaml`
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from itest_dbbench.config import get_settings
from itest_dbbench.domain.models import DatasetPaths, GenerationResult
from itest_dbbench.metadata import generate_count_queries
from itest_dbbench.queries import collect_queries
from itest_dbbench.skip_list import load_skip_list
from itest_dbbench.utils.logging import get_logger
from itest_dbbench.writer import write_config

log = get_logger(__name__)


def resolve_paths(qserv_src_path: Path | str, case_id: str) -> DatasetPaths:
    root = Path(qserv_src_path).expanduser()
    dataset = root / "itest_src" / "datasets" / case_id
    return DatasetPaths(
        queries_dir=dataset / "queries",
        metadata_file=dataset / "data" / "ingest" / "metadata.json",
        integration_config=root / "src" / "admin" / "etc" / "integration_tests.yaml",
    )


def generate(
    qserv_src_path: Optional[Path | str] = None,
    case_id: Optional[str] = None,
    dbbench_conf: Optional[Path | str] = None,
    results_dir: Optional[Path | str] = None,
) -> GenerationResult:
    """
    Build the dbbench configuration for one test case.

    Parameters
    ----------
    qserv_src_path : Path | str | None
        Root of the Qserv source tree. Defaults to settings.qserv_src_path.
    case_id : str | None
        Test case to extract (e.g. "case01"). Defaults to settings.case_id.
    dbbench_conf : Path | str | None
        Output file, overwritten if present. Defaults to settings.dbbench_conf.
    results_dir : Path | str | None
        Directory dbbench writes query results into. Defaults to settings.results_dir.

    Returns
    -------
    GenerationResult
        The skipped ids and every stanza written, in file order.

    Any read, parse or write error propagates unchanged; nothing is retried.
    """
    settings = get_settings()
    src_path = qserv_src_path if qserv_src_path is not None else settings.qserv_src_path
    case = case_id or settings.case_id
    output = Path(dbbench_conf if dbbench_conf is not None else settings.dbbench_conf)
    results = Path(results_dir if results_dir is not None else settings.results_dir)

    paths = resolve_paths(src_path, case)
    log.info(f"Use input queries path {paths.queries_dir}", extra={"case_id": case})

    skip_list = load_skip_list(paths.integration_config, case)
    count_queries = generate_count_queries(paths.metadata_file)
    query_files = collect_queries(paths.queries_dir, skip_list)
    stanzas = write_config(output, count_queries, query_files, results)

    log.info(
        f"[GENERATOR COMPLETE] {len(stanzas)} stanza(s) written to {output}",
        extra={
            "case_id": case,
            "count_queries": len(count_queries),
            "queries": len(query_files),
            "skipped": len(skip_list.query_ids),
        },
    )
    return GenerationResult(
        case_id=case,
        output_path=output,
        skipped_query_ids=skip_list.query_ids,
        stanzas=tuple(stanzas),
    )


__all__ = ["generate", "resolve_paths"]
