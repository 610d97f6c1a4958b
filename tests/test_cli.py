# File: tests/test_cli.py
"""CLI tests (`appcast_scout.cli`) using click.testing.CliRunner.
Covers `scan`, `bundle`, `config`, `--version` and error handling.
"""
import json

import pytest
from click.testing import CliRunner

import appcast_scout.cli as cli_module
from appcast_scout.cli import cli
from appcast_scout.logger import init_logging

FEED = b"https://example.com/appcast.xml"
BETA = b"https://example.com/download/beta-1.2.zip"


@pytest.fixture()
def runner(tmp_path, monkeypatch):
    # keep configs/default.yaml of the working tree out of the way
    monkeypatch.chdir(tmp_path)
    yield CliRunner()
    # the CLI binds its log handler to the runner streams
    init_logging(level="WARNING")


def test_version_option(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "AppcastScout" in result.output


def test_show_config(runner, tmp_path):
    cfg_file = tmp_path / "custom.json"
    cfg_file.write_text(json.dumps({"extractor": {"max_urls": 7}}), encoding="utf-8")
    result = runner.invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["extractor"]["max_urls"] == 7
    assert "rules" not in data["extractor"]


def test_bad_config(runner, tmp_path):
    cfg_file = tmp_path / "bad.yaml"
    cfg_file.write_text("extractor:\n  max_urls: -1\n", encoding="utf-8")
    result = runner.invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 1
    assert "Failed to load configuration" in result.output


def test_scan_stdout(runner, write_binary):
    path = write_binary(BETA + b"\x00" + FEED)
    result = runner.invoke(cli, ["scan", str(path)])
    assert result.exit_code == 0
    assert result.output == (FEED + b"\n" + BETA + b"\n").decode()


def test_scan_several_files(runner, write_binary):
    first = write_binary(FEED)
    second = write_binary(b"\x00\x01")
    result = runner.invoke(cli, ["scan", str(first), str(second)])
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        f"==> {first} <==",
        FEED.decode(),
        f"==> {second} <==",
    ]


def test_scan_json_file(runner, write_binary, tmp_path):
    path = write_binary(FEED)
    out = tmp_path / "out.json"
    result = runner.invoke(cli, ["scan", str(path), "--json", str(out), "--pretty"])
    assert result.exit_code == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["files"][0]["urls"] == [{"url": FEED.decode(), "priority": 1}]


def test_scan_html_file(runner, write_binary, tmp_path):
    path = write_binary(FEED)
    out = tmp_path / "report.html"
    result = runner.invoke(cli, ["scan", str(path), "--html", str(out)])
    assert result.exit_code == 0
    assert out.exists()
    assert FEED.decode() in out.read_text(encoding="utf-8")


def test_scan_report_failure(runner, write_binary, tmp_path, monkeypatch):
    def broken(report, path, pretty=False):
        raise OSError("disk full")

    monkeypatch.setattr(cli_module, "render_json", broken)
    path = write_binary(FEED)
    result = runner.invoke(cli, ["scan", str(path), "--json", str(tmp_path / "x.json")])
    assert result.exit_code == 1
    assert "Failed to save JSON report" in result.output


def test_scan_missing_file(runner, tmp_path):
    result = runner.invoke(cli, ["scan", str(tmp_path / "missing.bin")])
    assert result.exit_code == 1
    assert "Cannot scan" in result.output


def test_bundle_command(runner, make_app):
    app = make_app(main=b"\x00" + FEED + b"\x00")
    result = runner.invoke(cli, ["bundle", str(app)])
    assert result.exit_code == 0
    assert result.output.splitlines() == [FEED.decode()]


def test_bundle_without_urls(runner, make_app):
    app = make_app(main=b"nothing")
    result = runner.invoke(cli, ["bundle", str(app)])
    assert result.exit_code == 0
    assert "No appcast URLs found" in result.output
    assert "http" not in result.output


def test_config_cannot_raise_url_limit(runner, tmp_path, write_binary):
    cfg_file = tmp_path / "loose.yaml"
    cfg_file.write_text("extractor:\n  max_urls: 1000\n", encoding="utf-8")
    path = write_binary(b"\x00".join(b"https://example.com/updates/%03d" % i for i in range(80)))
    result = runner.invoke(cli, ["--config", str(cfg_file), "scan", str(path)])
    assert result.exit_code == 1
    assert "Failed to load configuration" in result.output

    result = runner.invoke(cli, ["scan", str(path)])
    assert result.exit_code == 0
    assert len(result.output.splitlines()) == 50
