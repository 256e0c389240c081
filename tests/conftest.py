"""Shared fixtures for the scaffolder test suite."""

from __future__ import annotations

import importlib
import json
from collections.abc import Sequence
from pathlib import Path

import pytest

from create_react_tailwind_app_router.cli._runner import CommandResult
from create_react_tailwind_app_router.cli._types import Catalog, TemplateKey, build_catalog

_MANIFEST = {
    "name": "template-placeholder",
    "private": True,
    "version": "0.0.0",
    "type": "module",
    "scripts": {"dev": "vite", "build": "vite build"},
    "dependencies": {"react": "^18.3.1"},
}

_EXTENSIONS: dict[str, str] = {
    "template-jsx-basic": "jsx",
    "template-jsx": "jsx",
    "template-tsx": "tsx",
}


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)


def make_template(root: Path, folder: str) -> Path:
    """Write a small template tree, including directories that must never be copied."""
    tdir = root / folder
    ext = _EXTENSIONS.get(folder, "jsx")

    manifest = {**_MANIFEST, "description": f"fixture for {folder}"}
    _write(tdir / "package.json", json.dumps(manifest, indent=2) + "\n")
    _write(tdir / "index.html", f'<script type="module" src="/src/main.{ext}"></script>\n')
    _write(tdir / "src" / f"main.{ext}", "import App from './App'\n")
    _write(tdir / "src" / "components" / f"Navbar.{ext}", "export default function Navbar() {}\n")
    _write(tdir / ".prettierrc", '{ "semi": false }\n')

    # Excluded at the top level and nested
    _write(tdir / "node_modules" / "react" / "index.js", "module.exports = {}\n")
    _write(tdir / ".git" / "HEAD", "ref: refs/heads/main\n")
    _write(tdir / "dist" / "index.html", "<html></html>\n")
    _write(tdir / "src" / "node_modules" / "local.js", "// nested\n")
    _write(tdir / "src" / "components" / "build" / "out.js", "// nested build output\n")
    return tdir


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    root = tmp_path / "templates"
    for folder in _EXTENSIONS:
        make_template(root, folder)
    return root


@pytest.fixture
def catalog(template_root: Path) -> Catalog:
    return build_catalog(template_root)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


class FakePrompter:
    """Answers prompts from canned values and records what was asked."""

    def __init__(
        self,
        name: str = "prompted-app",
        template: TemplateKey = TemplateKey.TYPESCRIPT,
        answers: dict[str, bool] | None = None,
    ) -> None:
        self.name = name
        self.template_choice = template
        self.answers = answers or {}
        self.asked: list[str] = []
        self.template_default: TemplateKey | None = None

    def project_name(self) -> str:
        self.asked.append("project_name")
        return self.name

    def template(self, catalog: Catalog, default: TemplateKey) -> TemplateKey:
        self.asked.append("template")
        self.template_default = default
        return self.template_choice

    def confirm(self, question: str, default: bool) -> bool:
        self.asked.append(question)
        return self.answers.get(question, default)


class FakeRunner:
    """Records commands instead of running them."""

    def __init__(self, exit_codes: dict[tuple[str, ...], int] | None = None) -> None:
        self.exit_codes = exit_codes or {}
        self.calls: list[tuple[tuple[str, ...], Path]] = []

    def run(self, command: Sequence[str], cwd: Path) -> CommandResult:
        key = tuple(command)
        self.calls.append((key, cwd))
        code = self.exit_codes.get(key, 0)
        return CommandResult(code, stderr="boom" if code else "")

    @property
    def commands(self) -> list[tuple[str, ...]]:
        return [c for c, _ in self.calls]


@pytest.fixture
def prompter() -> FakePrompter:
    return FakePrompter()


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def cli(
    monkeypatch: pytest.MonkeyPatch,
    catalog: Catalog,
    prompter: FakePrompter,
    fake_runner: FakeRunner,
):
    """The CLI module wired to the fixture catalog, prompter and runner."""
    module = importlib.import_module("create_react_tailwind_app_router.cli.app")
    monkeypatch.setattr(module, "_catalog_factory", lambda: catalog)
    monkeypatch.setattr(module, "_prompter", prompter)
    monkeypatch.setattr(module, "_runner", fake_runner)
    return module


def relative_files(root: Path) -> set[str]:
    return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()}
