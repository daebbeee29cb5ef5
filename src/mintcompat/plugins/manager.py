"""Plugin discovery, loading, and contribution collection.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints
for the ``mintcompat.plugins`` group, plus single-file plugins from a
local directory (``.mintcompat/plugins/`` by default).
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from pathlib import Path

import pluggy

from mintcompat.domain.rules import RewriteRule
from mintcompat.plugins.hookspecs import MintcompatHookSpec

PROJECT_NAME = "mintcompat"
ENTRY_POINT_GROUP = "mintcompat.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(MintcompatHookSpec)
        self._loaded: bool = False

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Discover plugins from entry points and an optional local directory.

        Returns a list of loaded plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        if local_dir is not None:
            self._discover_local(local_dir)
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def get_plugins(self) -> list[object]:
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    # ------------------------------------------------------------------
    # Contributions
    # ------------------------------------------------------------------

    def collect_rules(self) -> list[RewriteRule]:
        """Gather rewrite rules from every plugin, in registration order.

        A plugin that raises, or returns something other than a list of
        :class:`RewriteRule`, is skipped with a warning.
        """
        rules: list[RewriteRule] = []
        for plugin_name, contributed in self._collect("register_rewrite_rules"):
            for rule in contributed:
                if isinstance(rule, RewriteRule):
                    rules.append(rule)
                else:
                    logger.warning(
                        "Skipping non-RewriteRule %r from plugin %s", rule, plugin_name
                    )
        return rules

    def collect_custom_elements(self) -> list[str]:
        """Gather extra custom-element names from every plugin."""
        names: list[str] = []
        for plugin_name, contributed in self._collect("register_custom_elements"):
            for name in contributed:
                if isinstance(name, str) and name:
                    names.append(name)
                else:
                    logger.warning(
                        "Skipping invalid element name %r from plugin %s", name, plugin_name
                    )
        return names

    def notify_transform(self, identifier: str, changed: bool) -> None:
        """Fire ``post_transform``. Plugin failures are logged, never raised."""
        try:
            self._pm.hook.post_transform(identifier=identifier, changed=changed)
        except Exception:
            logger.warning("post_transform hook failed for %s", identifier, exc_info=True)

    def _collect(self, hook_name: str) -> list[tuple[str, list[object]]]:
        """Call a setup hook on each plugin individually.

        A plugin that raises loses only its own contribution.
        """
        results: list[tuple[str, list[object]]] = []
        for plugin in self._pm.get_plugins():
            plugin_name = self._pm.get_name(plugin) or plugin.__class__.__name__
            hook = getattr(plugin, hook_name, None)
            if hook is None:
                continue
            try:
                contributed = hook()
            except Exception:
                logger.warning(
                    "Plugin %s failed in %s", plugin_name, hook_name, exc_info=True
                )
                continue
            if contributed is None:
                continue
            if not isinstance(contributed, list | tuple):
                logger.warning(
                    "Plugin %s returned non-list from %s", plugin_name, hook_name
                )
                continue
            results.append((plugin_name, list(contributed)))
        return results

    # ------------------------------------------------------------------
    # Local directory discovery
    # ------------------------------------------------------------------

    def _discover_local(self, local_dir: Path) -> None:
        """Load ``*.py`` files in *local_dir* and register their plugin classes.

        Files starting with ``_`` are skipped. Every class defined in the
        module that carries a ``@hookimpl`` method is instantiated and
        registered. Broken files are logged as warnings.
        """
        if not local_dir.is_dir():
            return

        for py_file in sorted(local_dir.glob("*.py")):
            if py_file.name.startswith("_"):
                continue
            module_name = f"mintcompat_local_plugin_{py_file.stem}"
            try:
                spec = importlib.util.spec_from_file_location(module_name, py_file)
                if spec is None or spec.loader is None:
                    logger.warning("Could not create module spec for %s", py_file)
                    continue
                module = importlib.util.module_from_spec(spec)
                sys.modules[module_name] = module
                spec.loader.exec_module(module)
            except Exception:
                logger.warning("Failed to load local plugin %s", py_file, exc_info=True)
                sys.modules.pop(module_name, None)
                continue

            for _attr_name, obj in inspect.getmembers(module, inspect.isclass):
                if obj.__module__ != module_name:
                    continue
                if not self._has_hook_impls(obj):
                    continue
                try:
                    self.register_plugin(obj(), name=f"{module_name}.{obj.__name__}")
                except Exception:
                    logger.warning(
                        "Failed to instantiate plugin class %s from %s",
                        obj.__name__,
                        py_file,
                        exc_info=True,
                    )

    def _normalize_plugin_instances(self) -> None:
        """Replace plugin classes registered via entry points with instances."""
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin) or not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue
            self._pm.register(instance, name=plugin_name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any ``@hookimpl``-decorated methods.

        ``HookimplMarker("mintcompat")`` sets a ``mintcompat_impl``
        attribute on decorated functions.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, "mintcompat_impl", None):
                return True
        return False
