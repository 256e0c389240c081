"""Enums and dataclasses shared by the CLI."""

from __future__ import annotations

import importlib.resources as ilr
import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType

from create_react_tailwind_app_router.cli._errors import InvalidProjectNameError

PROJECT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

DEFAULT_PROJECT_NAME = "my-app"


class TemplateKey(str, Enum):
    """Available project templates."""

    JSX_BASIC = "jsx-basic"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"

    @property
    def label(self) -> str:
        labels: dict[TemplateKey, str] = {
            TemplateKey.JSX_BASIC: "JavaScript (JSX) - Basic",
            TemplateKey.JAVASCRIPT: "JavaScript (JSX)",
            TemplateKey.TYPESCRIPT: "TypeScript (TSX)",
        }
        return labels[self]

    @property
    def description(self) -> str:
        descriptions: dict[TemplateKey, str] = {
            TemplateKey.JSX_BASIC: "Minimal React + JSX starter with a single page and navbar.",
            TemplateKey.JAVASCRIPT: "React with JavaScript and JSX, pages, services and theming.",
            TemplateKey.TYPESCRIPT: "React with TypeScript and TSX, typed hooks and context.",
        }
        return descriptions[self]


DEFAULT_TEMPLATE = TemplateKey.JAVASCRIPT

_TEMPLATE_DIRS: dict[TemplateKey, str] = {
    TemplateKey.JSX_BASIC: "template-jsx-basic",
    TemplateKey.JAVASCRIPT: "template-jsx",
    TemplateKey.TYPESCRIPT: "template-tsx",
}

_HIGHLIGHTS: dict[TemplateKey, tuple[str, ...]] = {
    TemplateKey.JSX_BASIC: (
        "Familiar JavaScript syntax",
        "Smallest possible starting point",
        "Tailwind CSS and React Router preconfigured",
    ),
    TemplateKey.JAVASCRIPT: (
        "Familiar JavaScript syntax",
        "Dark/Light theme system",
        "Responsive navigation and pre-built components",
    ),
    TemplateKey.TYPESCRIPT: (
        "Type safety and IntelliSense",
        "Dark/Light theme system with typed context",
        "Better refactoring and error detection",
    ),
}


@dataclass(frozen=True, kw_only=True)
class TemplateSpec:
    """
    A single catalog entry.

    Attributes:
        key: Catalog key used on the command line.
        label: Human readable name shown in menus and the summary.
        description: One-line description shown next to the label.
        source_dir: Directory copied into the new project.
        highlights: Feature bullets printed after a successful scaffold.
    """

    key: TemplateKey
    label: str
    description: str
    source_dir: Path
    highlights: tuple[str, ...] = ()


Catalog = Mapping[TemplateKey, TemplateSpec]


def templates_root() -> Path:
    """Directory holding the bundled template trees."""
    root = ilr.files("create_react_tailwind_app_router.cli").joinpath("templates")
    return Path(str(root))


def build_catalog(root: Path, keys: list[TemplateKey] | None = None) -> Catalog:
    """Build a read-only catalog whose entries live under *root*."""
    entries = {
        key: TemplateSpec(
            key=key,
            label=key.label,
            description=key.description,
            source_dir=root / _TEMPLATE_DIRS[key],
            highlights=_HIGHLIGHTS[key],
        )
        for key in (keys if keys is not None else list(TemplateKey))
    }
    return MappingProxyType(entries)


def default_catalog() -> Catalog:
    return build_catalog(templates_root())


def validate_project_name(name: str) -> str | None:
    """Return a message naming the violated rule, or None when *name* is valid."""
    if name.strip() == "":
        return "Project name cannot be empty."
    if not PROJECT_NAME_PATTERN.fullmatch(name):
        return (
            f"Project name {name!r} may only contain letters, digits, "
            "hyphens and underscores."
        )
    return None


@dataclass(frozen=True, kw_only=True)
class Flags:
    """Raw command-line input before any prompting."""

    project_name: str | None = None
    template: str | None = None
    typescript: bool = False
    js: bool = False
    basic: bool = False
    yes: bool = False
    install: bool = False
    git: bool = False


@dataclass(frozen=True, kw_only=True)
class ScaffoldRequest:
    """Fully resolved choices for one invocation."""

    project_name: str
    template: TemplateSpec
    target_dir: Path
    install: bool = False
    init_git: bool = False

    def __post_init__(self) -> None:
        if (problem := validate_project_name(self.project_name)) is not None:
            raise InvalidProjectNameError(problem)
