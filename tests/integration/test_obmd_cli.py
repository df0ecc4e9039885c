"""Integration tests for the obmd CLI."""

import json

import yaml
from typer.testing import CliRunner

from obmd.cli import main
from obmd.cli._create_app import _create_app
from obmd.cli.link import link

runner = CliRunner()


class TestRenderCli:
    def test_render_json(self, note_file, index_file):
        result = runner.invoke(_create_app(), ["--display", "json", "render", str(note_file), "--index", str(index_file)])
        assert result.exit_code == 0, result.stderr
        output = json.loads(result.stdout)
        assert '<a href="/docs/home">首页</a>' in output["html"]
        assert "Rendered note.md" in result.stderr

    def test_render_yaml_default(self, note_file):
        result = runner.invoke(_create_app(), ["render", str(note_file), "-b", "/media"])
        assert result.exit_code == 0
        output = yaml.safe_load(result.stdout)
        assert 'src="/media/diagram.png"' in output["html"]

    def test_render_output_file(self, note_file, tmp_path):
        out = tmp_path / "note.html"
        result = runner.invoke(_create_app(), ["-d", "json", "render", str(note_file), "-o", str(out)])
        assert result.exit_code == 0
        assert "<h1>Note</h1>" in out.read_text(encoding="utf-8")

    def test_render_missing_file(self, tmp_path):
        result = runner.invoke(_create_app(), ["-d", "json", "render", str(tmp_path / "nope.md")])
        assert result.exit_code == 1
        assert json.loads(result.stdout)["errors"]

    def test_global_config(self, note_file, tmp_path, wire_index):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"render": {"link_index": wire_index}}))
        result = runner.invoke(_create_app(), ["-d", "json", "--config", str(config), "render", str(note_file)])
        assert result.exit_code == 0
        assert 'href="/docs/home"' in json.loads(result.stdout)["html"]

    def test_preprocess(self, note_file):
        result = runner.invoke(_create_app(), ["-d", "json", "preprocess", str(note_file)])
        assert result.exit_code == 0
        assert "{.obsidian-embed}" in json.loads(result.stdout)["markdown"]


class TestLinkCli:
    def test_resolve(self, index_file):
        result = runner.invoke(_create_app(), ["-d", "json", "link", "resolve", "test/a", "--index", str(index_file)])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["resolved"] == "/test/a"

    def test_resolve_unmatched_exits_nonzero(self, index_file):
        result = runner.invoke(link(), ["resolve", "nowhere", "--index", str(index_file)])
        assert result.exit_code == 1
        assert yaml.safe_load(result.stdout)["matched"] is False

    def test_audit(self, note_file, index_file):
        result = runner.invoke(_create_app(), ["-d", "json", "link", "audit", str(note_file), "-i", str(index_file)])
        assert result.exit_code == 1
        assert json.loads(result.stdout)["issues"][0]["path"] == "missing"

    def test_index(self, tmp_path):
        vault = tmp_path / "vault"
        vault.mkdir()
        (vault / "home.md").write_text("[[home]]")
        result = runner.invoke(_create_app(), ["-d", "json", "link", "index", str(vault)])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["index"] == {"home": "/home"}

    def test_link_without_subcommand_shows_help(self):
        result = runner.invoke(link(), [])
        assert result.exit_code == 0
        assert "resolve" in result.stderr


class TestApp:
    def test_version(self):
        result = runner.invoke(_create_app(), ["--version"])
        assert result.exit_code == 0
        assert result.stdout.startswith("obmd ")

    def test_invalid_display(self, note_file):
        result = runner.invoke(_create_app(), ["--display", "xml", "render", str(note_file)])
        assert result.exit_code == 1
        assert "--display must be 'json' or 'yaml'" in result.stderr

    def test_no_command_shows_help(self):
        result = runner.invoke(_create_app(), [])
        assert result.exit_code == 0
        assert "render" in result.stdout


class TestMain:
    def test_success_exit_code(self, capsys, index_file):
        assert main(["-d", "json", "link", "resolve", "home", "--index", str(index_file)]) == 0
        assert json.loads(capsys.readouterr().out)["resolved"] == "/docs/home"

    def test_failure_exit_code(self, index_file):
        assert main(["link", "resolve", "nowhere", "--index", str(index_file)]) == 1

    def test_usage_error(self, capsys):
        assert main(["render"]) == 2
        assert "Usage error" in capsys.readouterr().err

    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert capsys.readouterr().out.startswith("obmd ")
