"""LookupService: resolve queries to rule documents, list the library.

Resolution order for a query:

1. a known alias keyword resolves to the alias target;
2. otherwise the query as a path relative to the root;
3. otherwise the query with each configured suffix appended (``.md``).

A query that resolves nowhere is a ``NOT_FOUND`` result, never an
exception; whether that is fatal is decided by the CLI.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from airules.domain.documents import RuleDocument, candidate_paths, normalize_query
from airules.infrastructure.library import DocumentReadError, RootNotFoundError
from airules.services.base import BaseService
from airules.services.result import (
    NOT_FOUND,
    READ_FAILED,
    ROOT_NOT_FOUND,
    ServiceResult,
)

logger = logging.getLogger(__name__)

LIST_HINT = "Use 'airules list' to see available rules"


@dataclass(frozen=True)
class Resolution:
    """Where a query landed: the relative path and how it got there."""

    path: str
    via: str  # "alias" or "path"


class LookupService(BaseService):
    """Read-only queries against a :class:`RuleLibrary`."""

    def usage(self) -> ServiceResult:
        """Describe the known aliases for the usage screen."""
        aliases = [
            {
                "keyword": alias.keyword,
                "path": alias.target_path,
                "description": alias.description,
            }
            for alias in self.settings.alias_table.values()
        ]
        return ServiceResult(ok=True, op="usage", data={"aliases": aliases}, meta=self._meta())

    def resolve(self, query: str) -> Resolution | None:
        """Resolve *query* to a document path without reading it.

        Returns None when neither an alias nor a file matches. An alias
        whose target is missing also returns None; it never falls back
        to a same-named file. A candidate that cannot be checked for lack
        of permission raises :class:`DocumentReadError`.
        """
        normalized = normalize_query(query)
        if not normalized:
            return None

        alias = self.settings.alias_table.get(normalized)
        if alias is not None:
            found = self._library.locate([alias.target_path])
            if found is None:
                logger.debug("Alias %s points to missing %s", alias.keyword, alias.target_path)
                return None
            return Resolution(path=found, via="alias")

        found = self._library.locate(candidate_paths(normalized, self.settings.lookup.suffixes))
        if found is None:
            return None
        return Resolution(path=found, via="path")

    def show(self, query: str) -> ServiceResult:
        """Return the full content of the document *query* resolves to.

        A blank query yields the usage result, matching the bare command.
        """
        if not normalize_query(query):
            return self.usage()

        try:
            self._library.ensure_root()
        except RootNotFoundError as exc:
            return ServiceResult.failure("show", ROOT_NOT_FOUND, str(exc), path=str(exc.path))

        try:
            resolution = self.resolve(query)
        except DocumentReadError as exc:
            logger.warning("Lookup failed for %r", query)
            return ServiceResult.failure(
                "show", READ_FAILED, str(exc), query=query, path=str(exc.path)
            )
        if resolution is None:
            return self._not_found(query)

        try:
            content = self._library.read(resolution.path)
        except DocumentReadError as exc:
            logger.warning("Read failed for %s", resolution.path)
            return ServiceResult.failure(
                "show", READ_FAILED, str(exc), query=query, path=resolution.path
            )

        doc = RuleDocument(path=resolution.path, content=content)
        logger.debug("Resolved %r to %s via %s", query, doc.path, resolution.via)
        return ServiceResult(
            ok=True,
            op="show",
            data={
                "query": query,
                "path": doc.path,
                "via": resolution.via,
                "content": doc.content,
            },
            meta=self._meta(),
        )

    def list_rules(self) -> ServiceResult:
        """List every rule document under the root, sorted."""
        listing = self.settings.listing
        try:
            paths, skipped = self._library.find_documents(
                extensions=listing.extensions,
                exclude=listing.exclude,
                skip_dirs=listing.skip_dirs,
            )
        except RootNotFoundError as exc:
            return ServiceResult.failure("list", ROOT_NOT_FOUND, str(exc), path=str(exc.path))

        warnings = [f"Skipped unreadable directory: {rel}" for rel in skipped]
        return ServiceResult(
            ok=True,
            op="list",
            data={"items": paths, "count": len(paths)},
            warnings=warnings,
            meta=self._meta(),
        )

    def _not_found(self, query: str) -> ServiceResult:
        normalized = normalize_query(query)
        alias = self.settings.alias_table.get(normalized)
        detail: dict[str, str] = {"query": query, "hint": LIST_HINT}
        message = f"Rule not found: {query}"
        if alias is not None:
            detail["alias"] = alias.keyword
            detail["target"] = alias.target_path
            message = f"Rule not found: {query} (alias for {alias.target_path})"
        return ServiceResult.failure("show", NOT_FOUND, message, **detail)
