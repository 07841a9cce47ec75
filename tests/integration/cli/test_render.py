"""Integration tests for the render, toc and welcome commands"""

import json

from typer.testing import CliRunner

from mdpage.cli.cli import app


runner = CliRunner()


def test_render_cmd_single_file(tmp_path, monkeypatch):
    """render writes <stem>.html with the TOC and initial fragment from 'file#anchor'."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "hello.md").write_text("# Hello\n\n## World\n", encoding="utf-8")

    result = runner.invoke(app, ["render", "hello.md#world", "--out-dir", str(tmp_path / "site")])

    assert result.exit_code == 0, result.output
    html = (tmp_path / "site" / "hello.html").read_text(encoding="utf-8")
    assert '<h2 id="world">World</h2>' in html
    assert 'const initialFragment = "world";' in html
    assert "Rendered 1 document(s)" in result.output


def test_render_cmd_directory(tmp_path, monkeypatch):
    """A directory renders every Markdown file under it; other files are skipped."""
    monkeypatch.chdir(tmp_path)
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "a.md").write_text("# A\n")
    (docs / "b.markdown").write_text("# B\n")
    (docs / "c.txt").write_text("C\n")

    result = runner.invoke(app, ["render", "docs"])

    assert result.exit_code == 0, result.output
    assert sorted(p.name for p in (tmp_path / "dist").iterdir()) == ["a.html", "b.html"]


def test_render_cmd_wrong_type_writes_error_page(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "notes.txt").write_text("x")

    result = runner.invoke(app, ["render", "notes.txt"])

    assert result.exit_code == 1
    html = (tmp_path / "dist" / "notes.html").read_text(encoding="utf-8")
    assert "Only Markdown files are supported." in html


def test_render_cmd_missing_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["render", "nope.md"])
    assert result.exit_code == 1
    assert "Path not found" in result.output


def test_toc_cmd_prints_json(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "doc.md").write_text("# Intro\n\n# Intro\n")

    result = runner.invoke(app, ["toc", "doc.md"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == [
        {"level": 1, "id": "intro", "title": "Intro"},
        {"level": 1, "id": "intro-2", "title": "Intro"},
    ]


def test_welcome_cmd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["welcome", "--out-dir", "out"])
    assert result.exit_code == 0, result.output
    assert "<h1>mdpage</h1>" in (tmp_path / "out" / "index.html").read_text()


def test_invalid_config_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    result = runner.invoke(app, ["welcome"])
    assert result.exit_code == 1
    assert "Invalid config.yaml" in result.output


def test_unknown_parser_preset_fails(tmp_path, monkeypatch):
    """An unknown --parser-config is reported as an error before anything is written."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "a.md").write_text("# A\n")

    result = runner.invoke(app, ["render", "a.md", "--parser-config", "bogus"])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Error: Unknown parser preset: bogus" in result.output
    assert not (tmp_path / "dist").exists()


def test_toc_cmd_unknown_parser_preset_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "a.md").write_text("# A\n")
    result = runner.invoke(app, ["toc", "a.md", "--parser-config", "bogus"])
    assert result.exit_code == 1
    assert "Unknown parser preset" in result.output
