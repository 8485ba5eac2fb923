"""End-to-end flows through the alts main entry point."""

import json
import os

from alts.cli import main


def test_editor_scenario(registry_dir, link_dir, capsys):
    base = ["--registry-dir", str(registry_dir), "--link-dir", str(link_dir)]

    assert main([*base, "add", "--target", "/bin/vim", "--name", "editor", "--weight", "10"]) == 0
    assert main([*base, "add", "--target", "/bin/nano", "--name", "editor", "--weight", "5"]) == 0
    capsys.readouterr()

    assert main(["--display", "json", *base, "list", "--name", "editor"]) == 0
    listed = json.loads(capsys.readouterr().out)

    assert listed["candidates"] == [
        {"target": "/bin/vim", "priority": 10},
        {"target": "/bin/nano", "priority": 5},
    ]
    assert os.readlink(link_dir / "editor") == "/bin/vim"


def test_remove_winner_then_readd(registry_dir, link_dir):
    base = ["--registry-dir", str(registry_dir), "--link-dir", str(link_dir)]

    main([*base, "add", "--target", "/bin/vim", "--name", "editor", "--weight", "10"])
    main([*base, "add", "--target", "/bin/nano", "--name", "editor", "--weight", "5"])
    assert main([*base, "remove", "--target", "/bin/vim", "--name", "editor"]) == 0
    assert os.readlink(link_dir / "editor") == "/bin/nano"

    assert main([*base, "add", "--target", "/bin/vim", "--name", "editor", "--weight", "10"]) == 0
    assert os.readlink(link_dir / "editor") == "/bin/vim"


def test_list_unknown_name_exit_code(registry_dir, link_dir):
    assert main(["--registry-dir", str(registry_dir), "--link-dir", str(link_dir), "list", "--name", "x"]) == 1


def test_usage_error_exit_code():
    assert main(["add", "--name", "editor"]) == 2
