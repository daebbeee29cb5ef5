"""Command: rewrite Mintlify-flavored markdown for VitePress."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from mintcompat.commands._options import examples_option

if TYPE_CHECKING:
    from mintcompat.commands._context import AppContext


@click.command()
@examples_option(
    """
      mintcompat transform
      mintcompat transform docs/
      mintcompat transform docs/guide/install.md --dry-run
      mintcompat transform docs/ --out build/docs
      mintcompat --json transform --check
    """
)
@click.argument(
    "path",
    required=False,
    type=click.Path(path_type=Path),
)
@click.option(
    "-o",
    "--out",
    "out_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Mirror eligible files into DIR instead of rewriting in place.",
)
@click.option("--check", is_flag=True, help="Write nothing; exit 1 if any file would change.")
@click.option("--dry-run", is_flag=True, help="Report changes without writing.")
@click.pass_obj
def transform(
    app: AppContext,
    path: Path | None,
    out_dir: Path | None,
    check: bool,
    dry_run: bool,
) -> None:
    """Rewrite markdown under PATH (default: [sources] root)."""
    from mintcompat.services.transform import TransformService

    # PATH is relative to the shell's CWD, not the project root.
    if path is not None:
        path = path.resolve()
    svc = TransformService(app.settings, app.plugins)
    app.emit(svc.run(path, out_dir=out_dir, check=check, dry_run=dry_run))
