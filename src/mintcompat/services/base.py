"""BaseService and the settings -> transformer wiring.

Every service receives the resolved :class:`MintSettings` and, optionally,
a loaded :class:`PluginManager`. Host build integrations that only need
the transformer can call :func:`build_compat` directly.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mintcompat.domain.elements import allowed_elements
from mintcompat.domain.rules import default_rules
from mintcompat.domain.transform import MarkdownCompat
from mintcompat.plugins.manager import PluginManager

if TYPE_CHECKING:
    from mintcompat.config.settings import MintSettings

logger = logging.getLogger(__name__)


def load_plugins(settings: MintSettings) -> PluginManager | None:
    """Discover plugins per ``[plugins]``; None when plugins are disabled."""
    if not settings.plugins.enabled:
        return None
    pm = PluginManager()
    names = pm.discover_and_load(local_dir=settings.resolve(settings.plugins.local_dir))
    if names:
        logger.debug("Loaded plugins: %s", ", ".join(names))
    return pm


def build_compat(
    settings: MintSettings,
    plugins: PluginManager | None = None,
) -> MarkdownCompat:
    """Build the transformer for *settings*, plugin rules after built-ins."""
    cfg = settings.transform
    rules = list(
        default_rules(
            self_closing_tags=cfg.self_closing_tags,
            attribute_renames=cfg.attribute_renames,
        )
    )
    if plugins is not None:
        rules.extend(plugins.collect_rules())
    return MarkdownCompat(
        rules=tuple(rules),
        suffixes=tuple(cfg.suffixes),
        unterminated=cfg.unterminated_fence,
    )


class BaseService:
    """Base for service classes.

    Usage::

        class TransformService(BaseService):
            def run(self, ...) -> ServiceResult:
                compat = self.compat
                ...
    """

    def __init__(self, settings: MintSettings, plugins: PluginManager | None = None) -> None:
        self._settings = settings
        self._plugins = plugins
        self._compat: MarkdownCompat | None = None

    @property
    def compat(self) -> MarkdownCompat:
        """The transformer (built lazily, once per service)."""
        if self._compat is None:
            self._compat = build_compat(self._settings, self._plugins)
        return self._compat

    def custom_elements(self) -> list[str]:
        """Built-in allow-list plus configured and plugin-provided names."""
        extra = list(self._settings.elements.extra)
        if self._plugins is not None:
            extra.extend(self._plugins.collect_custom_elements())
        return allowed_elements(extra)

    def _notify_transform(self, identifier: str, changed: bool) -> None:
        """Fire ``post_transform``. No-op without plugins."""
        if self._plugins is not None:
            self._plugins.notify_transform(identifier, changed)
