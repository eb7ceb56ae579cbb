"""Read-only filesystem access to a rules library.

INVARIANT: Every path handed out resolves to an existing file inside the
library root. Queries that escape the root (``..``, absolute paths,
symlinks pointing outside) are treated as missing, never read or listed.
"""

from __future__ import annotations

import fnmatch
import logging
import os
from collections.abc import Iterable, Sequence
from pathlib import Path

from airules.config.settings import RulesSettings

logger = logging.getLogger(__name__)


class LibraryError(Exception):
    """Base class for filesystem failures inside the rules library."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


class RootNotFoundError(LibraryError):
    """The library root does not exist or is not a directory."""


class DocumentReadError(LibraryError):
    """A rule file exists but could not be read or decoded."""


class RuleLibrary:
    """A directory tree of rule documents.

    Constructed from :class:`RulesSettings`; holds no state beyond the
    resolved settings, so every call reflects the filesystem as it is now.
    """

    def __init__(self, settings: RulesSettings) -> None:
        self.settings = settings
        self.root = settings.root

    # ------------------------------------------------------------------
    # Root
    # ------------------------------------------------------------------

    def ensure_root(self) -> None:
        """Raise :class:`RootNotFoundError` unless the root is a directory."""
        if not self.root.is_dir():
            msg = f"Rules directory not found: {self.root}"
            raise RootNotFoundError(msg, path=self.root)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def resolve_path(self, relative: str) -> Path:
        """Join *relative* onto the root, refusing paths that escape it."""
        result = self.root / relative
        if not self._inside_root(result):
            msg = f"Path escapes rules root: {relative}"
            raise ValueError(msg)
        return result

    def locate(self, candidates: Iterable[str]) -> str | None:
        """Return the first candidate that names an existing file, or None.

        Raises :class:`DocumentReadError` when a candidate cannot be
        checked for lack of permission. Any other OS error (an over-long
        name, say) makes that candidate a miss.
        """
        for candidate in candidates:
            if not candidate:
                continue
            try:
                path = self.resolve_path(candidate)
            except ValueError:
                logger.warning("Ignoring path outside the rules root: %s", candidate)
                continue
            try:
                if path.is_file():
                    return candidate
            except PermissionError as exc:
                msg = f"Cannot read rule file {candidate}: {exc.strerror or exc}"
                raise DocumentReadError(msg, path=path) from exc
            except OSError as exc:
                logger.warning("Cannot check %s: %s", candidate, exc.strerror or exc)
        return None

    def read(self, relative: str) -> str:
        """Return the full text of the rule file at *relative*."""
        path = self.resolve_path(relative)
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            msg = f"Rule file is not valid UTF-8: {relative}"
            raise DocumentReadError(msg, path=path) from exc
        except OSError as exc:
            msg = f"Cannot read rule file {relative}: {exc.strerror or exc}"
            raise DocumentReadError(msg, path=path) from exc

    # ------------------------------------------------------------------
    # Discovery
    # ------------------------------------------------------------------

    def find_documents(
        self,
        *,
        extensions: Sequence[str],
        exclude: Sequence[str] = (),
        skip_dirs: Sequence[str] = (),
    ) -> tuple[list[str], list[str]]:
        """Walk the root and collect rule document paths.

        Returns ``(paths, skipped)``: *paths* are sorted, slash-separated
        and relative to the root; *skipped* names directories that could
        not be read. Files at the top level whose name matches an
        *exclude* pattern (case-insensitive) are left out.
        """
        self.ensure_root()
        skipped: list[str] = []
        wanted = {ext.lower() for ext in extensions}
        patterns = [p.lower() for p in exclude]
        skip = set(skip_dirs)

        def on_error(exc: OSError) -> None:
            where = Path(exc.filename) if exc.filename else self.root
            rel = self._relative(where)
            logger.warning("Skipping unreadable directory: %s", rel)
            skipped.append(rel)

        found: set[str] = set()
        for dirpath, dirnames, filenames in os.walk(self.root, onerror=on_error):
            dirnames[:] = sorted(d for d in dirnames if d not in skip)
            current = Path(dirpath)
            top_level = current == self.root
            for filename in filenames:
                if Path(filename).suffix.lower() not in wanted:
                    continue
                if top_level and any(fnmatch.fnmatch(filename.lower(), p) for p in patterns):
                    continue
                path = current / filename
                if not self._inside_root(path):
                    logger.debug("Not listing link outside the rules root: %s", path)
                    continue
                found.add(self._relative(path))

        return sorted(found), skipped

    def _inside_root(self, path: Path) -> bool:
        """True when *path*, with symlinks followed, stays under the root."""
        try:
            return path.resolve().is_relative_to(self.root.resolve())
        except (OSError, RuntimeError):
            # RuntimeError: symlink loop on Python < 3.13
            return False

    def _relative(self, path: Path) -> str:
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return path.as_posix()
