"""Materializes a template on disk and patches its package.json."""

from __future__ import annotations

import json
import shutil
from dataclasses import dataclass
from pathlib import Path

from create_react_tailwind_app_router.cli._errors import (
    CopyError,
    ManifestError,
    TargetExistsError,
    TemplateNotFoundError,
)
from create_react_tailwind_app_router.cli._logging import get_logger
from create_react_tailwind_app_router.cli._types import Catalog, ScaffoldRequest

logger = get_logger(__name__)

# Skipped at every depth of the template tree.
EXCLUDED_DIRS: frozenset[str] = frozenset(
    {"node_modules", ".git", "dist", "build", ".vite", "coverage"}
)

MANIFEST = "package.json"


@dataclass(frozen=True)
class RenderResult:
    files: list[str]
    manifest_patched: bool


def _ignore_excluded(directory: str, names: list[str]) -> set[str]:
    return {name for name in names if name in EXCLUDED_DIRS}


def copy_template(source: Path, target: Path, catalog: Catalog | None = None) -> list[str]:
    """Copy *source* into the new directory *target*, skipping EXCLUDED_DIRS.

    Returns the copied file paths relative to *target*, sorted.
    """
    if target.exists():
        raise TargetExistsError(f"Directory '{target}' already exists.")

    if not source.is_dir():
        valid = ", ".join(k.value for k in catalog) if catalog else "none"
        raise TemplateNotFoundError(
            f"Template directory not found at '{source}'. Valid templates: {valid}."
        )

    logger.debug(f"Copying {source} -> {target}")
    try:
        shutil.copytree(source, target, ignore=_ignore_excluded)
    except (OSError, shutil.Error) as e:
        raise CopyError(f"Copying template files failed: {e}") from e

    return sorted(p.relative_to(target).as_posix() for p in target.rglob("*") if p.is_file())


def patch_manifest(project_dir: Path, project_name: str) -> bool:
    """Set the ``name`` field of the copied package.json.

    Returns False when the template has no manifest.
    """
    manifest = project_dir / MANIFEST
    if not manifest.is_file():
        return False

    try:
        data = json.loads(manifest.read_text(encoding="utf-8"))
    except OSError as e:
        raise ManifestError(f"Could not read {manifest}: {e}") from e
    except ValueError as e:
        raise ManifestError(
            f"Could not parse {manifest}: {e}. The project files were copied to "
            f"'{project_dir}', only the name was not updated."
        ) from e

    if not isinstance(data, dict):
        raise ManifestError(
            f"{manifest} does not contain a JSON object. The project files were copied "
            f"to '{project_dir}', only the name was not updated."
        )

    data["name"] = project_name
    try:
        manifest.write_text(
            json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )
    except OSError as e:
        raise ManifestError(f"Could not write {manifest}: {e}") from e
    logger.debug(f"Set {MANIFEST} name to {project_name!r}")
    return True


def render_project(request: ScaffoldRequest, catalog: Catalog | None = None) -> RenderResult:
    """Copy the chosen template and patch its manifest. Returns what was written."""
    files = copy_template(request.template.source_dir, request.target_dir, catalog)
    patched = patch_manifest(request.target_dir, request.project_name)
    return RenderResult(files=files, manifest_patched=patched)
