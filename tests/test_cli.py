import json

import pytest
from typer.testing import CliRunner

from bedrock_tracker.api.client import BedrockLinksClient
from bedrock_tracker.cli.app import app
from bedrock_tracker.exceptions import FetchError
from tests.conftest import make_url

runner = CliRunner()


@pytest.fixture
def paths(tmp_path):
    return {
        "config": tmp_path / "config.ini",
        "ledger": tmp_path / "ledger.json",
    }


@pytest.fixture
def fake_fetch(monkeypatch, raw_links):
    def _install(links=None, error=None):
        async def fetch_links(self):
            if error is not None:
                raise error
            return links if links is not None else raw_links

        monkeypatch.setattr(BedrockLinksClient, "fetch_links", fetch_links)

    return _install


def invoke(paths, *args):
    return runner.invoke(
        app,
        ["--config", str(paths["config"]), *args, "--ledger", str(paths["ledger"])],
    )


def test_update_writes_new_versions(paths, fake_fetch, raw_links):
    fake_fetch()

    result = invoke(paths, "update")

    assert result.exit_code == 0, result.output
    data = json.loads(paths["ledger"].read_text(encoding="utf-8"))
    assert data["release"]["1.21.50"]["windows"]["url"] == raw_links[
        "serverBedrockWindows"
    ]
    assert data["preview"]["1.21.60"]["linux"]["url"] == raw_links[
        "serverBedrockPreviewLinux"
    ]


def test_update_twice_leaves_ledger_unchanged(paths, fake_fetch):
    fake_fetch()
    assert invoke(paths, "update").exit_code == 0
    first = paths["ledger"].read_text(encoding="utf-8")

    assert invoke(paths, "update").exit_code == 0
    assert paths["ledger"].read_text(encoding="utf-8") == first


def test_dry_run_does_not_write(paths, fake_fetch):
    fake_fetch()
    result = invoke(paths, "update", "--dry-run")
    assert result.exit_code == 0, result.output
    assert not paths["ledger"].exists()


def test_missing_link_fails_without_writing(paths, fake_fetch, raw_links):
    paths["ledger"].write_text('{"release": {}, "preview": {}}', encoding="utf-8")
    del raw_links["serverBedrockLinux"]
    fake_fetch(raw_links)

    result = invoke(paths, "update")

    assert result.exit_code == 1
    assert "serverBedrockLinux" in result.output
    assert paths["ledger"].read_text(encoding="utf-8") == (
        '{"release": {}, "preview": {}}'
    )


def test_version_mismatch_fails_without_writing(paths, fake_fetch, raw_links):
    raw_links["serverBedrockWindows"] = make_url("win", "1.21.50")
    raw_links["serverBedrockLinux"] = make_url("linux", "1.21.51")
    fake_fetch(raw_links)

    result = invoke(paths, "update")

    assert result.exit_code == 1
    assert not paths["ledger"].exists()


def test_fetch_error_exits_non_zero(paths, fake_fetch):
    fake_fetch(error=FetchError("boom"))
    result = invoke(paths, "update")
    assert result.exit_code == 1
    assert not paths["ledger"].exists()


def test_corrupt_ledger_is_replaced(paths, fake_fetch):
    paths["ledger"].write_text("{{{", encoding="utf-8")
    fake_fetch()

    result = invoke(paths, "update")

    assert result.exit_code == 0, result.output
    data = json.loads(paths["ledger"].read_text(encoding="utf-8"))
    assert list(data["release"]) == ["1.21.50"]


def test_list_shows_recorded_versions(paths, fake_fetch):
    fake_fetch()
    invoke(paths, "update")

    result = invoke(paths, "list", "--channel", "preview")

    assert result.exit_code == 0, result.output
    assert "1.21.60" in result.output
    assert "1.21.50" not in result.output


def test_invalid_config_exits_non_zero(paths, fake_fetch):
    paths["config"].write_text("[DEFAULT]\ntimeout = nope\n", encoding="utf-8")
    fake_fetch()
    result = invoke(paths, "update")
    assert result.exit_code == 1
    assert not paths["ledger"].exists()


def test_init_writes_config(paths):
    result = invoke(paths, "init", "--force")
    assert result.exit_code == 0, result.output
    text = paths["config"].read_text(encoding="utf-8")
    assert f"ledger_path = {paths['ledger']}" in text


def test_version_flag():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "bedrock-tracker" in result.output


def test_update_keeps_history_next_to_a_damaged_entry(paths, fake_fetch):
    good = {"windows": {"url": "w"}, "linux": {"url": "l"}}
    paths["ledger"].write_text(
        json.dumps(
            {
                "release": {
                    "1.0.0": good,
                    "1.1.0": good,
                    "1.2.0": {"windows": {"url": "w"}},
                },
                "preview": {"1.3.0": good},
            }
        ),
        encoding="utf-8",
    )
    fake_fetch()

    result = invoke(paths, "update")

    assert result.exit_code == 0, result.output
    data = json.loads(paths["ledger"].read_text(encoding="utf-8"))
    assert set(data["release"]) == {"1.0.0", "1.1.0", "1.21.50"}
    assert set(data["preview"]) == {"1.3.0", "1.21.60"}
