from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from itest_dbbench.config import get_settings
from itest_dbbench.generator import generate as run_generator
from itest_dbbench.generator import resolve_paths
from itest_dbbench.reporter import print_stanzas
from itest_dbbench.skip_list import get_skipped_queries
from itest_dbbench.utils.logging import configure_logging

app = typer.Typer(help="Generate dbbench configuration from Qserv integration test datasets.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"qserv_src_path={settings.qserv_src_path} | case_id={settings.case_id} | "
        f"dbbench_conf={settings.dbbench_conf} | results_dir={settings.results_dir}"
    )


@app.command()
def generate(
    qserv_src_path: Optional[Path] = typer.Option(
        None,
        "--qserv-src-path",
        "-p",
        help="Path to Qserv source code (default from settings).",
    ),
    case_id: Optional[str] = typer.Option(
        None,
        "--case-id",
        "-c",
        help="Test case to extract, e.g. case01 (default from settings).",
    ),
    dbbench_conf: Optional[Path] = typer.Option(
        None,
        "--dbbench-conf",
        "-o",
        help="Path to dbbench output file (default from settings).",
    ),
    results_dir: Optional[Path] = typer.Option(
        None,
        "--results-dir",
        help="Directory dbbench writes query results into (default from settings).",
    ),
    summary: bool = typer.Option(
        False,
        "--summary/--no-summary",
        help="Print a table of the generated stanzas.",
    ),
) -> None:
    """
    Write the dbbench configuration for one integration test case.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)

    result = run_generator(
        qserv_src_path=qserv_src_path,
        case_id=case_id,
        dbbench_conf=dbbench_conf,
        results_dir=results_dir,
    )
    if summary:
        print_stanzas(result.stanzas, title=f"dbbench configuration for {result.case_id}")
    typer.echo(f"Wrote {len(result.stanzas)} stanza(s) to {result.output_path}")


@app.command()
def skipped(
    qserv_src_path: Optional[Path] = typer.Option(
        None,
        "--qserv-src-path",
        "-p",
        help="Path to Qserv source code (default from settings).",
    ),
    case_id: Optional[str] = typer.Option(
        None,
        "--case-id",
        "-c",
        help="Test case to inspect (default from settings).",
    ),
) -> None:
    """
    List the query ids skipped for a test case, one per line.
    """
    settings = get_settings()
    configure_logging(level="WARNING", json_logs=settings.json_logs)

    case = case_id or settings.case_id
    paths = resolve_paths(qserv_src_path or settings.qserv_src_path, case)
    for query_id in get_skipped_queries(paths.integration_config, case):
        typer.echo(query_id)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
