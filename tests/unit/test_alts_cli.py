"""Unit tests for the alts Typer app."""

import json
import os

import pytest
from typer.testing import CliRunner

from alts.cli._create_app import _create_app

pytestmark = pytest.mark.cli

runner = CliRunner()


@pytest.fixture
def dirs_args(registry_dir, link_dir) -> list[str]:
    return ["--registry-dir", str(registry_dir), "--link-dir", str(link_dir)]


def test_help_without_command(dirs_args):
    result = runner.invoke(_create_app(), dirs_args)
    assert result.exit_code == 0
    assert "add" in result.output


def test_add_creates_record_and_link(dirs_args, registry_dir, link_dir):
    result = runner.invoke(
        _create_app(), [*dirs_args, "add", "--target", "/bin/vim", "--name", "editor", "--weight", "10"]
    )
    assert result.exit_code == 0, result.output
    assert (registry_dir / "editor.json").exists()
    assert os.readlink(link_dir / "editor") == "/bin/vim"


def test_add_negative_weight(dirs_args, registry_dir):
    result = runner.invoke(
        _create_app(), [*dirs_args, "add", "--target", "/bin/ed", "--name", "editor", "--weight", "-3"]
    )
    assert result.exit_code == 0, result.output
    record = json.loads((registry_dir / "editor.json").read_text())
    assert record["candidates"] == [{"target": "/bin/ed", "priority": -3}]


def test_add_non_integer_weight_is_usage_error(dirs_args, registry_dir):
    result = runner.invoke(
        _create_app(), [*dirs_args, "add", "--target", "/bin/vim", "--name", "editor", "--weight", "high"]
    )
    assert result.exit_code == 2
    assert not registry_dir.exists()


def test_list_unknown_name_exits_nonzero(dirs_args):
    result = runner.invoke(_create_app(), [*dirs_args, "list", "--name", "editor"])
    assert result.exit_code == 1
    assert "No alternatives for editor" in result.output


def test_list_json_display(dirs_args):
    app = _create_app()
    runner.invoke(app, [*dirs_args, "add", "--target", "/bin/vim", "--name", "editor", "--weight", "10"])
    result = runner.invoke(app, ["--display", "json", *dirs_args, "list", "--name", "editor"])
    assert result.exit_code == 0
    assert '"winner": "/bin/vim"' in result.output


def test_remove_noop_exits_zero(dirs_args):
    result = runner.invoke(_create_app(), [*dirs_args, "remove", "--target", "/bin/vim", "--name", "editor"])
    assert result.exit_code == 0
    assert "not registered" in result.output


def test_sync(dirs_args, link_dir):
    app = _create_app()
    runner.invoke(app, [*dirs_args, "add", "--target", "/bin/vim", "--name", "editor", "--weight", "10"])
    (link_dir / "editor").unlink()

    result = runner.invoke(app, [*dirs_args, "sync"])

    assert result.exit_code == 0
    assert os.readlink(link_dir / "editor") == "/bin/vim"


def test_invalid_display(dirs_args):
    result = runner.invoke(_create_app(), ["--display", "xml", *dirs_args, "sync"])
    assert result.exit_code == 1


def test_invalid_config_file(alts_home, dirs_args):
    alts_home.mkdir(parents=True)
    (alts_home / "config.json").write_text("{broken")
    result = runner.invoke(_create_app(), [*dirs_args, "sync"])
    assert result.exit_code == 1
    assert "Invalid JSON" in result.output


def test_version():
    result = runner.invoke(_create_app(), ["--version"])
    assert result.exit_code == 0
    assert result.output.startswith("alts ")


@pytest.mark.parametrize("name", ["", ".", "..", "a/b", "../escaped"])
def test_add_path_like_name_exits_nonzero(dirs_args, registry_dir, link_dir, tmp_path, name):
    result = runner.invoke(
        _create_app(), [*dirs_args, "add", "--target", "/bin/vim", "--name", name, "--weight", "10"]
    )

    assert result.exit_code == 1
    assert "Invalid name" in result.output
    assert not registry_dir.exists()
    assert link_dir.is_dir() and not link_dir.is_symlink()
    assert not os.path.lexists(tmp_path / "escaped")
    assert not os.path.lexists(tmp_path / "escaped.json")
