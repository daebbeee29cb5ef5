"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Plugins are discovered lazily so ``--help`` and
``--version`` never import third-party plugin code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mintcompat.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from mintcompat.config.settings import MintSettings
    from mintcompat.plugins.manager import PluginManager
    from mintcompat.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: MintSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None
        self._plugins_loaded = False

        from mintcompat.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def plugins(self) -> PluginManager | None:
        """Loaded plugin manager, or None when ``[plugins] enabled = false``."""
        if not self._plugins_loaded:
            from mintcompat.services.base import load_plugins

            self._plugins = load_plugins(self.settings)
            self._plugins_loaded = True
        return self._plugins

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout, warnings on stderr (human mode only).
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
