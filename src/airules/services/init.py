"""InitService: scaffold a starter rules library.

Creates the standard directory layout, renders the packaged starter
documents (``airules/templates/library``) and writes ``airules.toml`` so
later invocations from inside the library find their root. Existing
files are never overwritten.
"""

from __future__ import annotations

import logging
from pathlib import Path

from airules.config.discovery import CONFIG_FILENAME
from airules.infrastructure.templates import build_template_environment, output_name
from airules.services.result import ALREADY_INITIALIZED, INIT_FAILED, ServiceResult

logger = logging.getLogger(__name__)

TEMPLATE_GROUP = "library"

LIBRARY_DIRS: tuple[str, ...] = (
    "ascii-art/examples/good",
    "ascii-art/examples/bad",
    "ascii-art/templates",
    "claude-code/prompts",
    "claude-code/patterns",
    "claude-code/fixes",
    "reference/charts",
    "reference/diagrams",
    "reference/tables",
)

# Standard .gitignore content for a rules library
_GITIGNORE_CONTENT = """\
# OS Files
.DS_Store
Thumbs.db

# Editor Files
*.swp
*.swo
*~
.vscode/
.idea/

# Temporary Files
*.tmp
*.bak
"""


class InitService:
    """Library creation. Stateless; there is no library to hand it yet."""

    @staticmethod
    def init_library(path: Path, *, name: str | None = None) -> ServiceResult:
        """Create a rules library at *path*.

        Fails with ``ALREADY_INITIALIZED`` if *path* already holds an
        ``airules.toml``.
        """
        op = "init_library"
        path = path.resolve()
        config_file = path / CONFIG_FILENAME
        if config_file.exists():
            return ServiceResult.failure(
                op,
                ALREADY_INITIALIZED,
                f"Rules library already initialized at {path}",
                path=str(config_file),
            )

        library_name = name or path.name or "airules"
        env = build_template_environment(TEMPLATE_GROUP, root=path)
        context = {"name": library_name, "root": str(path)}

        # airules.toml goes last so a half-written library is not mistaken
        # for a finished one.
        templates = sorted(env.list_templates(), key=lambda t: output_name(t) == CONFIG_FILENAME)

        dirs_created: list[str] = []
        files_created: list[str] = []
        files_kept: list[str] = []
        try:
            path.mkdir(parents=True, exist_ok=True)
            for rel in LIBRARY_DIRS:
                directory = path / rel
                if not directory.is_dir():
                    directory.mkdir(parents=True, exist_ok=True)
                    dirs_created.append(rel)

            gitignore = path / ".gitignore"
            if gitignore.exists():
                files_kept.append(".gitignore")
            else:
                gitignore.write_text(_GITIGNORE_CONTENT, encoding="utf-8")
                files_created.append(".gitignore")

            for template_name in templates:
                rel = output_name(template_name)
                target = path / rel
                if target.exists():
                    files_kept.append(rel)
                    continue
                rendered = env.get_template(template_name).render(**context)
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(rendered, encoding="utf-8")
                files_created.append(rel)
                logger.debug("Created %s", target)
        except OSError as exc:
            return ServiceResult.failure(
                op,
                INIT_FAILED,
                f"Cannot create rules library at {path}: {exc.strerror or exc}",
                path=str(path),
                files_created=files_created,
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "root": str(path),
                "name": library_name,
                "dirs_created": dirs_created,
                "files_created": files_created,
                "files_kept": files_kept,
            },
            warnings=[f"Kept existing file: {rel}" for rel in files_kept],
        )
