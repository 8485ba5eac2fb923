"""Shared pytest configuration and fixtures for all tests."""

from pathlib import Path

import pytest

from alts.api.config.AltsConfig import AltsConfig
from alts.api.registry.Candidate import Candidate
from alts.api.registry.RegistryEntry import RegistryEntry


def pytest_configure(config):
    for marker in ("unit", "integration", "registry", "config", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def make_entry(link_path: Path | str, *pairs: tuple[str, int]) -> RegistryEntry:
    """Build a RegistryEntry from (target, priority) pairs in order."""
    return RegistryEntry(
        link_path=str(link_path),
        candidates=[Candidate(target=target, priority=priority) for target, priority in pairs],
    )


def write_record(registry_dir: Path, name: str, entry: RegistryEntry) -> Path:
    """Write ``entry`` as ``<registry_dir>/<name>.json`` and return its path."""
    registry_dir.mkdir(parents=True, exist_ok=True)
    path = registry_dir / f"{name}.json"
    path.write_text(entry.to_json(), encoding="utf-8")
    return path


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def alts_home(tmp_path: Path, monkeypatch) -> Path:
    """Isolate ALTS_HOME so no test touches ~/.alts."""
    home = tmp_path / ".alts"
    monkeypatch.setenv("ALTS_HOME", str(home))
    return home


@pytest.fixture
def registry_dir(tmp_path: Path) -> Path:
    return tmp_path / "alternatives"


@pytest.fixture
def link_dir(tmp_path: Path) -> Path:
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def alts_config(registry_dir: Path, link_dir: Path) -> AltsConfig:
    """AltsConfig pointing at per-test registry and link directories."""
    return AltsConfig(registry_dir=str(registry_dir), link_dir=str(link_dir))
