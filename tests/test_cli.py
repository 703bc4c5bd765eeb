import json

from typer.testing import CliRunner

from javafmt_cli.main import app

runner = CliRunner()


def test_cli_show_help():
    result = runner.invoke(app, ["show", "--help"])
    assert result.exit_code == 0
    assert "Show the formatting parameters" in result.stdout


def test_cli_show_default(tmp_path):
    result = runner.invoke(app, ["show", "--config-file", str(tmp_path / "missing.toml")])
    assert result.exit_code == 0
    assert "style: google" in result.stdout
    assert "max_line_length = 100" in result.stdout


def test_cli_show_aosp_flag(tmp_path):
    result = runner.invoke(
        app, ["show", "--aosp", "--json", "--config-file", str(tmp_path / "missing.toml")]
    )
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["style"] == "aosp"
    assert data["indentation_multiplier"] == 2


def test_cli_show_from_config(tmp_path):
    path = tmp_path / ".javafmt.toml"
    path.write_text('[tool.javafmt]\nstyle = "ataccama"\n')

    result = runner.invoke(app, ["show", "--json", "--config-file", str(path)])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["style"] == "ataccama"
    assert data["null_annotations"] is True
    assert data["max_preserve_blanks"] == 2


def test_cli_show_unknown_style(tmp_path):
    result = runner.invoke(
        app, ["show", "--style", "gnu", "--config-file", str(tmp_path / "missing.toml")]
    )
    assert result.exit_code == 1
    assert "Unknown style 'gnu'" in result.stdout


def test_cli_styles(tmp_path):
    result = runner.invoke(app, ["styles", "--config-file", str(tmp_path / "missing.toml")])
    assert result.exit_code == 0
    assert "google (default)" in result.stdout
    assert "aosp:" in result.stdout
    assert "ataccama:" in result.stdout


def test_cli_styles_default_from_config(tmp_path):
    path = tmp_path / ".javafmt.toml"
    path.write_text('[tool.javafmt]\nstyle = "aosp"\n')

    result = runner.invoke(app, ["styles", "--config-file", str(path)])
    assert result.exit_code == 0
    assert "aosp (default)" in result.stdout
    assert "google (default)" not in result.stdout


def test_cli_show_bad_config_value(tmp_path):
    path = tmp_path / ".javafmt.toml"
    path.write_text("[tool.javafmt]\nstyle = 2\n")

    result = runner.invoke(app, ["show", "--config-file", str(path)])
    assert result.exit_code == 1
    assert "Error:" in result.stdout
    assert "'style' must be a string" in result.stdout


def test_cli_show_config_section_not_a_table(tmp_path):
    path = tmp_path / ".javafmt.toml"
    path.write_text("[tool]\njavafmt = 3\n")

    result = runner.invoke(app, ["show", "--config-file", str(path)])
    assert result.exit_code == 1
    assert "'tool.javafmt' must be a table" in result.stdout


def test_cli_show_undecodable_config(tmp_path):
    path = tmp_path / ".javafmt.toml"
    path.write_bytes(b'[tool.javafmt]\nstyle = "\xff\xfe"\n')

    result = runner.invoke(app, ["show", "--config-file", str(path)])
    assert result.exit_code == 0
    assert "style: google" in result.stdout
