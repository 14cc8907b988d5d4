"""Tests for the plugin loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from mallard.archetypes import spawn_archetype
from mallard.capabilities import VOCALIZE
from mallard.errors import PluginError
from mallard.plugins import PluginLoader
from mallard.registry import BehaviorRegistry

REPO_PLUGINS = Path(__file__).parent.parent / "plugins"

PLUGIN_SOURCE = '''
from mallard.registry import BehaviorRegistry


@BehaviorRegistry.register_behavior("vocalize", "honk")
class Honk:
    def vocalize(self):
        return "Honk"


BehaviorRegistry.register_archetype("goose", vocalize="honk", locomote="wings")
'''


@pytest.fixture
def temp_plugin_dir(tmp_path):
    """Create temporary plugin directory."""
    plugin_dir = tmp_path / "test_plugins"
    plugin_dir.mkdir()
    return plugin_dir


def test_load_plugin_file(temp_plugin_dir):
    plugin_file = temp_plugin_dir / "honk.py"
    plugin_file.write_text(PLUGIN_SOURCE)

    PluginLoader.load_plugin_file(str(plugin_file))

    assert BehaviorRegistry.get_behavior(VOCALIZE, "honk") is not None
    assert spawn_archetype("goose").perform_quack() == "Honk"


def test_load_plugin_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        PluginLoader.load_plugin_file(str(tmp_path / "missing.py"))


def test_load_plugin_file_not_python(temp_plugin_dir):
    text_file = temp_plugin_dir / "notes.txt"
    text_file.write_text("not a plugin")

    with pytest.raises(ValueError):
        PluginLoader.load_plugin_file(str(text_file))


def test_load_from_directory_counts(temp_plugin_dir):
    (temp_plugin_dir / "honk.py").write_text(PLUGIN_SOURCE)

    stats = PluginLoader.load_from_directory(str(temp_plugin_dir))

    assert stats["behaviors"] == 1
    assert stats["archetypes"] == 1
    assert stats["errors"] == []


def test_load_from_directory_skips_private_files(temp_plugin_dir):
    (temp_plugin_dir / "__init__.py").write_text("raise RuntimeError('should not load')")
    (temp_plugin_dir / "_private.py").write_text("raise RuntimeError('should not load')")

    stats = PluginLoader.load_from_directory(str(temp_plugin_dir))

    assert stats["errors"] == []
    assert stats["behaviors"] == 0


def test_broken_plugin_is_reported_not_raised(temp_plugin_dir):
    (temp_plugin_dir / "broken.py").write_text("raise RuntimeError('boom')")
    (temp_plugin_dir / "honk.py").write_text(PLUGIN_SOURCE)

    stats = PluginLoader.load_from_directory(str(temp_plugin_dir))

    assert len(stats["errors"]) == 1
    assert "broken.py" in stats["errors"][0]
    assert stats["behaviors"] == 1


def test_load_all_skips_missing_directories(temp_plugin_dir, tmp_path):
    (temp_plugin_dir / "honk.py").write_text(PLUGIN_SOURCE)

    stats = PluginLoader.load_all([str(tmp_path / "nowhere"), str(temp_plugin_dir)])

    assert stats["behaviors"] == 1
    assert stats["archetypes"] == 1


def test_load_plugin_unknown_module():
    with pytest.raises(PluginError):
        PluginLoader.load_plugin("mallard_plugin_that_does_not_exist")


def test_bundled_whistling_duck_plugin():
    stats = PluginLoader.load_all([str(REPO_PLUGINS)])

    assert stats["errors"] == []
    duck = spawn_archetype("whistling")
    assert duck.perform_quack() == "Wheee-oo"
    assert duck.perform_fly() == "I'm flying!!"
