"""Plugin loader for discovering and loading mallard plugins.

Scans directories for Python modules and lets them register their behaviors
and archetypes via the BehaviorRegistry.
"""

from __future__ import annotations

import importlib
import importlib.util
import logging
import sys
from pathlib import Path
from typing import Any

from mallard.errors import PluginError
from mallard.registry import BehaviorRegistry

logger = logging.getLogger(__name__)


class PluginLoader:
    """Discover and load plugins from directories."""

    @classmethod
    def load_all(cls, plugin_dirs: list[str] | None = None) -> dict[str, Any]:
        """Load all plugins from specified directories.

        Args:
            plugin_dirs: List of directory paths to scan. If None, uses default
                        'plugins/' directory at project root.

        Returns:
            Dict with loaded plugin counts by category
        """
        if plugin_dirs is None:
            plugin_dirs = ["plugins"]

        stats: dict[str, Any] = {"behaviors": 0, "archetypes": 0, "errors": []}

        for dir_path in plugin_dirs:
            path = Path(dir_path)
            if not path.exists():
                logger.warning(f"Plugin directory not found: {dir_path}")
                continue

            if not path.is_dir():
                logger.warning(f"Plugin path is not a directory: {dir_path}")
                continue

            loaded = cls.load_from_directory(str(path))
            stats["behaviors"] += loaded["behaviors"]
            stats["archetypes"] += loaded["archetypes"]
            stats["errors"].extend(loaded["errors"])

        logger.info(f"Loaded {stats['behaviors']} behaviors, {stats['archetypes']} archetypes")

        return stats

    @classmethod
    def load_from_directory(cls, directory: str) -> dict[str, Any]:
        """Load all Python files from a directory.

        A file that fails to load is logged and recorded under "errors";
        the remaining files still load.
        """
        dir_path = Path(directory)
        stats: dict[str, Any] = {"behaviors": 0, "archetypes": 0, "errors": []}

        # Skip __init__.py and private modules
        py_files = sorted(
            f
            for f in dir_path.glob("*.py")
            if f.name != "__init__.py" and not f.name.startswith("_")
        )

        logger.debug(f"Found {len(py_files)} plugin files in {directory}")

        for py_file in py_files:
            behaviors_before = BehaviorRegistry.behavior_count()
            archetypes_before = BehaviorRegistry.archetype_count()
            try:
                cls.load_plugin_file(str(py_file))
            except Exception as e:
                error_msg = f"Failed to load {py_file.name}: {e}"
                logger.error(error_msg)
                stats["errors"].append(error_msg)
                continue

            stats["behaviors"] += BehaviorRegistry.behavior_count() - behaviors_before
            stats["archetypes"] += BehaviorRegistry.archetype_count() - archetypes_before
            logger.debug(f"Loaded plugin: {py_file.name}")

        return stats

    @classmethod
    def load_plugin_file(cls, file_path: str) -> None:
        """Load a single plugin file.

        Args:
            file_path: Path to Python file to load

        Raises:
            FileNotFoundError: If file does not exist
            ValueError: If the path is not a .py file
            PluginError: If the module spec cannot be built
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Plugin file not found: {file_path}")

        if not path.is_file() or path.suffix != ".py":
            raise ValueError(f"Not a Python file: {file_path}")

        module_name = f"mallard_plugin_{path.stem}"

        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise PluginError(f"Cannot load spec for {file_path}")

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except BaseException:
            sys.modules.pop(module_name, None)
            raise

        logger.debug(f"Executed plugin module: {module_name}")

    @classmethod
    def load_plugin(cls, module_name: str) -> None:
        """Load a plugin by module name (for installed packages).

        Raises:
            PluginError: If module cannot be imported
        """
        try:
            importlib.import_module(module_name)
            logger.debug(f"Loaded plugin module: {module_name}")
        except ImportError as e:
            raise PluginError(f"Failed to import plugin {module_name}: {e}") from e
