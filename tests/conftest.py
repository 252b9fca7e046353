"""
Pytest configuration and fixtures for climbset tests.
"""

import pytest
import yaml

from climbset.config import clear_config_cache
from climbset.drafts import MemoryDraftStore
from climbset.editor import HoldEditor
from climbset.models import Ascent, Hold


@pytest.fixture(autouse=True)
def clear_cache():
    """Clear the configuration cache before and after each test."""
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def sample_holds():
    """Three well-separated holds, one of each of start/hand/finish."""
    return (
        Hold(id="h-start", x=20.0, y=80.0, type="start"),
        Hold(id="h-hand", x=45.0, y=50.0, type="hand", size="large"),
        Hold(id="h-finish", x=70.0, y=10.0, type="finish", sequence=9),
    )


@pytest.fixture
def memory_store():
    """Empty in-memory draft store."""
    return MemoryDraftStore()


@pytest.fixture
def editor(memory_store):  # pylint: disable=redefined-outer-name
    """Editor session backed by an in-memory draft store."""
    return HoldEditor(memory_store)


@pytest.fixture
def sample_ascents():
    """Ascents with a mix of graded, ungraded and rated entries."""
    return [
        Ascent(id="a1", grade_v="V2", rating=4),
        Ascent(id="a2", grade_v="V2", rating=2),
        Ascent(id="a3", grade_v=None),
    ]


def _write_config(path, drafts_dir, **editor_overrides):
    editor = {
        "add_tolerance": 3.0,
        "remove_margin": 2.0,
        "default_hold_type": "hand",
        "default_hold_size": "medium",
    }
    editor.update(editor_overrides)
    config = {
        "editor": editor,
        "drafts": {"directory": str(drafts_dir), "key": "test-draft"},
        "logging": {"level": "DEBUG", "json_output": False},
    }
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(config, f)
    return path


@pytest.fixture
def test_config_yaml(tmp_path):
    """Create a temporary configuration YAML file for testing."""
    return _write_config(tmp_path / "test_config.yaml", tmp_path / "drafts")


@pytest.fixture
def config_writer(tmp_path):
    """Factory writing config files with editor overrides."""

    def _factory(**editor_overrides):
        return _write_config(
            tmp_path / "custom_config.yaml", tmp_path / "drafts", **editor_overrides
        )

    return _factory


@pytest.fixture
def invalid_config_yaml(tmp_path):
    """Create an invalid configuration YAML file for testing."""
    config_file = tmp_path / "invalid_config.yaml"
    config_file.write_text("{ invalid yaml content: [")
    return config_file


@pytest.fixture
def empty_config_yaml(tmp_path):
    """Create an empty configuration YAML file for testing."""
    config_file = tmp_path / "empty_config.yaml"
    config_file.write_text("")
    return config_file
