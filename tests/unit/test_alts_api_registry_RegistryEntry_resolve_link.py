"""Unit tests for RegistryEntry.resolve_link."""

import os

import pytest

from alts.api.registry.LinkConflictError import LinkConflictError
from alts.api.registry.LinkOutcome import LinkOutcome
from alts.api.registry.RegistryEntry import RegistryEntry
from tests.conftest import make_entry

pytestmark = pytest.mark.registry


def test_empty_entry_creates_nothing(link_dir):
    link = link_dir / "editor"
    assert RegistryEntry(link_path=str(link)).resolve_link() is LinkOutcome.NO_LINK
    assert not os.path.lexists(link)


def test_missing_link_is_created(link_dir):
    link = link_dir / "editor"
    entry = make_entry(link, ("/bin/vim", 10), ("/bin/nano", 5))
    assert entry.resolve_link() is LinkOutcome.CREATED
    assert os.readlink(link) == "/bin/vim"


def test_missing_parent_directory_is_created(tmp_path):
    link = tmp_path / "deep" / "bin" / "editor"
    entry = make_entry(link, ("/bin/vim", 10))
    assert entry.resolve_link() is LinkOutcome.CREATED
    assert os.readlink(link) == "/bin/vim"


def test_matching_link_is_unchanged(link_dir):
    link = link_dir / "editor"
    os.symlink("/bin/vim", link)
    before = os.lstat(link)
    entry = make_entry(link, ("/bin/vim", 10))
    assert entry.resolve_link() is LinkOutcome.UNCHANGED
    assert os.lstat(link).st_ino == before.st_ino


def test_dangling_matching_link_is_unchanged(link_dir, tmp_path):
    target = str(tmp_path / "does-not-exist")
    link = link_dir / "editor"
    os.symlink(target, link)
    assert make_entry(link, (target, 1)).resolve_link() is LinkOutcome.UNCHANGED


def test_different_link_is_replaced(link_dir):
    link = link_dir / "editor"
    os.symlink("/bin/nano", link)
    entry = make_entry(link, ("/bin/vim", 10), ("/bin/nano", 5))
    assert entry.resolve_link() is LinkOutcome.UPDATED
    assert os.readlink(link) == "/bin/vim"


def test_regular_file_is_replaced(link_dir):
    link = link_dir / "editor"
    link.write_text("#!/bin/sh\n")
    assert make_entry(link, ("/bin/vim", 10)).resolve_link() is LinkOutcome.UPDATED
    assert os.readlink(link) == "/bin/vim"


def test_empty_directory_is_replaced(link_dir):
    link = link_dir / "editor"
    link.mkdir()
    assert make_entry(link, ("/bin/vim", 10)).resolve_link() is LinkOutcome.UPDATED
    assert os.readlink(link) == "/bin/vim"


def test_non_empty_directory_is_an_error(link_dir):
    link = link_dir / "editor"
    link.mkdir()
    (link / "keep").write_text("data")
    with pytest.raises(OSError):
        make_entry(link, ("/bin/vim", 10)).resolve_link()
    assert (link / "keep").read_text() == "data"


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="requires mkfifo")
def test_fifo_is_a_conflict(link_dir):
    link = link_dir / "editor"
    os.mkfifo(link)
    with pytest.raises(LinkConflictError):
        make_entry(link, ("/bin/vim", 10)).resolve_link()


def test_tie_resolves_to_first_inserted(link_dir):
    link = link_dir / "editor"
    make_entry(link, ("A", 10), ("B", 10)).resolve_link()
    assert os.readlink(link) == "A"
