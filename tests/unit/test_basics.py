from pathlib import Path

from itest_dbbench import config
from itest_dbbench.domain.models import Stanza
from itest_dbbench.generator import resolve_paths


def test_get_settings_defaults(clean_settings):
    settings = config.get_settings()
    assert settings.case_id == "case01"
    assert settings.dbbench_conf == Path("/tmp/dbbench.ini")
    assert settings.results_dir == Path("/tmp/dbbench")
    assert settings.qserv_src_path == Path.home() / "src" / "qserv"
    assert settings.log_level == "INFO"
    assert settings.json_logs is False


def test_settings_read_environment(clean_settings, monkeypatch):
    monkeypatch.setenv("CASE_ID", "case03")
    monkeypatch.setenv("DBBENCH_CONF", "/var/tmp/bench.ini")
    settings = config.Settings()
    assert settings.case_id == "case03"
    assert settings.dbbench_conf == Path("/var/tmp/bench.ini")


def test_resolve_paths_layout():
    paths = resolve_paths("/src/qserv", "case02")
    assert paths.queries_dir == Path("/src/qserv/itest_src/datasets/case02/queries")
    assert paths.metadata_file == Path(
        "/src/qserv/itest_src/datasets/case02/data/ingest/metadata.json"
    )
    assert paths.integration_config == Path("/src/qserv/src/admin/etc/integration_tests.yaml")


def test_stanza_render_without_comment():
    stanza = Stanza(section="countA", query="SELECT count(*) FROM A", results_file=Path("/r/countA.csv"))
    assert stanza.render() == (
        "[countA]\nquery=SELECT count(*) FROM A\nquery-results-file=/r/countA.csv\ncount=1\n\n"
    )
