"""Shared Jinja2 template loading with per-library override support."""

from __future__ import annotations

from pathlib import Path

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader

# Suffix stripped from template names when rendering to disk.
TEMPLATE_SUFFIX = ".j2"


def build_template_environment(group: str, *, root: Path | None = None) -> Environment:
    """Build a Jinja2 environment with user overrides before packaged defaults.

    User overrides are loaded from ``.airules/templates/<group>/`` inside
    the library root, so a team can ship its own starter documents.
    """

    loaders: list[BaseLoader] = []
    if root is not None:
        loaders.append(FileSystemLoader(str(root / ".airules" / "templates" / group)))

    loaders.append(PackageLoader("airules", f"templates/{group}"))
    return Environment(loader=ChoiceLoader(loaders), keep_trailing_newline=True)


def output_name(template_name: str) -> str:
    """Map a template name to the file it renders (``README.md.j2`` -> ``README.md``)."""
    if template_name.endswith(TEMPLATE_SUFFIX):
        return template_name[: -len(TEMPLATE_SUFFIX)]
    return template_name
