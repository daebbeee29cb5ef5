"""TransformService — run the compat transform over a documentation tree.

Four modes:

- in place (default): rewrite changed files where they are
- ``out_dir``: mirror every eligible file into another directory,
  rewritten where needed
- ``dry_run``: report what would change, write nothing
- ``check``: like ``dry_run``, but fail when anything would change

Log records emitted while a file is processed carry its relative path
under the ``document`` key.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from structlog.contextvars import bound_contextvars

from mintcompat.infrastructure.filesystem import find_documents, read_document, write_document
from mintcompat.services.base import BaseService
from mintcompat.services.result import ErrorCode, ServiceResult

logger = logging.getLogger(__name__)


class TransformService(BaseService):
    """Rewrites Mintlify-flavored markdown under a source root."""

    def run(
        self,
        path: Path | None = None,
        *,
        out_dir: Path | None = None,
        check: bool = False,
        dry_run: bool = False,
    ) -> ServiceResult:
        """Transform every eligible document under *path*.

        Args:
            path: File or directory to scan. Defaults to ``[sources] root``.
            out_dir: Write results here instead of in place.
            check: Write nothing; fail with ``WOULD_CHANGE`` if any file
                would be rewritten.
            dry_run: Write nothing.
        """
        op = "check" if check else "transform"
        root = self._settings.resolve(path if path is not None else self._settings.sources.root)
        if not root.exists():
            return ServiceResult.failure(
                op, ErrorCode.NOT_FOUND, f"Source path does not exist: {root}", path=str(root)
            )

        documents = find_documents(
            root,
            suffixes=self._settings.transform.suffixes,
            exclude=self._settings.sources.exclude,
        )
        compat = self.compat
        write = not (check or dry_run)
        warnings: list[str] = []
        changed: list[str] = []

        for doc in documents:
            relative = doc.name if root.is_file() else doc.relative_to(root).as_posix()
            with bound_contextvars(document=relative):
                try:
                    source = read_document(doc)
                except UnicodeDecodeError:
                    warnings.append(f"Skipped non-UTF-8 file: {relative}")
                    logger.warning("Skipping non-UTF-8 file")
                    continue
                except OSError as exc:
                    return self._io_error(op, relative, exc)

                result = compat.transform(source, doc.as_posix())
                is_changed = result is not None
                self._notify_transform(doc.as_posix(), is_changed)
                if is_changed:
                    changed.append(relative)
                logger.debug("Transformed (changed=%s)", is_changed)

                if not write:
                    continue
                try:
                    if out_dir is not None:
                        write_document(out_dir / relative, result if is_changed else source)
                    elif is_changed:
                        write_document(doc, result)
                except OSError as exc:
                    return self._io_error(op, relative, exc)

        data: dict[str, Any] = {
            "root": str(root),
            "mode": self._mode(out_dir=out_dir, check=check, dry_run=dry_run),
            "scanned": len(documents),
            "changed": len(changed),
            "files": changed,
        }
        if out_dir is not None and write:
            data["out_dir"] = str(out_dir)
        logger.info("Scanned %d documents, %d changed", len(documents), len(changed))

        if check and changed:
            return ServiceResult.failure(
                op,
                ErrorCode.WOULD_CHANGE,
                f"{len(changed)} of {len(documents)} files need rewriting",
                data=data,
                warnings=warnings,
                files=changed,
            )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    @staticmethod
    def _mode(*, out_dir: Path | None, check: bool, dry_run: bool) -> str:
        if check:
            return "check"
        if dry_run:
            return "dry-run"
        if out_dir is not None:
            return "out-dir"
        return "in-place"

    @staticmethod
    def _io_error(op: str, relative: str, exc: OSError) -> ServiceResult:
        logger.error("I/O error: %s", exc)
        return ServiceResult.failure(op, ErrorCode.IO_ERROR, f"{relative}: {exc}", path=relative)
