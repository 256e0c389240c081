"""Typer CLI application for create-react-tailwind-app-router."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, NoReturn

from rich.console import Console
from rich.markup import escape
from typer import Argument, Exit, Option, Typer

import create_react_tailwind_app_router
from create_react_tailwind_app_router.cli._errors import ScaffoldError
from create_react_tailwind_app_router.cli._logging import setup_logging
from create_react_tailwind_app_router.cli._prompts import Prompter, TerminalPrompter
from create_react_tailwind_app_router.cli._renderer import render_project
from create_react_tailwind_app_router.cli._resolver import resolve_request
from create_react_tailwind_app_router.cli._runner import (
    CommandRunner,
    SubprocessRunner,
    run_post_scaffold,
)
from create_react_tailwind_app_router.cli._types import (
    Catalog,
    Flags,
    ScaffoldRequest,
    default_catalog,
)

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()

# Collaborators swapped out by the tests.
_catalog_factory = default_catalog
_prompter: Prompter = TerminalPrompter()
_runner: CommandRunner = SubprocessRunner()

_SCRIPTS: dict[str, str] = {
    "npm run dev": "Start development server",
    "npm run build": "Build for production",
    "npm run preview": "Preview production build",
    "npm run lint": "Check code with ESLint",
    "npm run format": "Format code with Prettier",
}


def _print_templates(catalog: Catalog) -> None:
    _console.print()
    _console.print("[bold cyan]◆[/]  Available templates")
    _console.print("[dim]│[/]")
    for spec in catalog.values():
        _console.print(f"[dim]│[/]  [bold cyan]{spec.key.value:<12}[/] [bold]{spec.label}[/]")
        _console.print(f"[dim]│[/]  {' ' * 12} [dim]{spec.description}[/]")
        _console.print("[dim]│[/]")
    _console.print()


def _list_templates_callback(value: bool) -> None:
    if value:
        _print_templates(_catalog_factory())
        raise Exit()


def _version_callback(value: bool) -> None:
    if value:
        version = create_react_tailwind_app_router.__version__
        _console.print(f"create-react-tailwind-app-router v{version}")
        raise Exit()


def _fail(error: ScaffoldError) -> NoReturn:
    _console.print(f"[bold red]Error ({error.step}):[/] {escape(error.message)}")
    raise Exit(code=1)


def _print_summary(request: ScaffoldRequest, installed: bool, warnings: list[str]) -> None:
    name = request.project_name
    _console.print("[dim]│[/]")
    _console.print(
        f"[bold cyan]●[/]  Project [bold]{name}[/] created with {request.template.label}"
    )
    _console.print()

    _console.print("[yellow]Next steps:[/]")
    _console.print(f"[cyan]   cd {name}[/]")
    if not installed:
        _console.print("[cyan]   npm install[/]")
    _console.print("[cyan]   npm run dev[/]")

    _console.print()
    _console.print("[yellow]Available scripts:[/]")
    for command, desc in _SCRIPTS.items():
        _console.print(f"[cyan]   {command:<17}[/] [dim]# {desc}[/]")

    if request.template.highlights:
        _console.print()
        _console.print("[yellow]Features included:[/]")
        for item in request.template.highlights:
            _console.print(f"[cyan]   • {item}[/]")

    if warnings:
        _console.print()
        for warning in warnings:
            _console.print(f"[bold yellow]Warning:[/] {escape(warning)}")
    _console.print()


@app.command()
def create(
    project_name: Annotated[
        str | None,
        Argument(help="Name for the new project directory", show_default=False),
    ] = None,
    template_str: Annotated[
        str | None,
        Option(
            "--template",
            "-t",
            help="Project template. Run with --list-templates / -l to see all options.",
            show_default=False,
        ),
    ] = None,
    typescript: Annotated[
        bool, Option("--typescript", help="Shorthand for --template typescript")
    ] = False,
    js: Annotated[bool, Option("--js", help="Shorthand for --template javascript")] = False,
    basic: Annotated[bool, Option("--basic", help="Shorthand for --template jsx-basic")] = False,
    yes: Annotated[
        bool, Option("--yes", "-y", help="Skip all prompts and use defaults")
    ] = False,
    install: Annotated[
        bool, Option("--install", help="Run npm install after copying")
    ] = False,
    git: Annotated[
        bool, Option("--git", help="Initialize a git repository after copying")
    ] = False,
    verbose: Annotated[bool, Option("--verbose", "-v", help="Show debug logs")] = False,
    list_templates: Annotated[
        bool,
        Option(
            "--list-templates",
            "-l",
            help="List all available templates and exit.",
            callback=_list_templates_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
    version: Annotated[
        bool,
        Option(
            "--version",
            "-V",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Create a new React app with Vite, React Router and Tailwind CSS."""
    setup_logging(verbose)

    flags = Flags(
        project_name=project_name,
        template=template_str,
        typescript=typescript,
        js=js,
        basic=basic,
        yes=yes,
        install=install,
        git=git,
    )
    catalog = _catalog_factory()

    # Header
    _console.print()
    _console.print(
        f"[bold cyan]●[/]  create-react-tailwind-app-router "
        f"v{create_react_tailwind_app_router.__version__}"
    )
    _console.print("[dim]│[/]")

    try:
        request = resolve_request(flags, _prompter, catalog, Path.cwd())

        _console.print(
            f"[bold green]◇[/]  Creating {request.project_name}/ "
            f"from {request.template.label}..."
        )
        result = render_project(request, catalog)
    except ScaffoldError as e:
        _fail(e)

    _console.print(f"[dim]│[/]  {len(result.files)} files copied")

    warnings: list[str] = []
    if not result.manifest_patched:
        warnings.append(
            "The template has no package.json; the project name was not written to it."
        )

    report = run_post_scaffold(request, _runner)
    warnings += report.warnings

    _print_summary(request, report.installed, warnings)
