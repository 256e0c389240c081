"""Clack-style interactive prompts using Rich + simple-term-menu."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Protocol, TypeVar

from rich.console import Console
from simple_term_menu import TerminalMenu

from create_react_tailwind_app_router.cli._types import (
    Catalog,
    TemplateKey,
    validate_project_name,
)

_console = Console()

T = TypeVar("T")


class Prompter(Protocol):
    """Answers the questions asked while resolving a scaffold request."""

    def project_name(self) -> str: ...

    def template(self, catalog: Catalog, default: TemplateKey) -> TemplateKey: ...

    def confirm(self, question: str, default: bool) -> bool: ...


def _print_bar() -> None:
    _console.print("[dim]│[/]")


def _clear_lines(n: int) -> None:
    """Move cursor up *n* lines and clear to end of screen."""
    sys.stdout.write(f"\033[{n}A\033[J")
    sys.stdout.flush()


def _select(question: str, options: list[T], labels: list[str], default: int = 0) -> T:
    """Display a clack-style selection prompt and return the chosen option."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    menu = TerminalMenu(
        labels,
        cursor_index=default,
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
    )
    raw_index = menu.show()

    if raw_index is None:
        raise SystemExit(1)

    index: int = int(raw_index)
    selected = options[index]

    # Overwrite the ◆ question + │ bar that stayed on screen
    _clear_lines(2)

    _console.print(f"[bold green]◇[/]  {question}")
    for i, lbl in enumerate(labels):
        if i == index:
            _console.print(f"[dim]│[/]  [bold green]●[/] {lbl}")
        else:
            _console.print(f"[dim]│[/]    [dim s]{lbl}[/]")
    _print_bar()

    return selected


def _confirm(question: str, default: bool = True) -> bool:
    """Display a clack-style yes/no prompt."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    suffix = " [Y/n] " if default else " [y/N] "
    _console.print("[dim]│[/]  ", end="")
    answer = input(suffix).strip().lower()

    result = default if answer == "" else answer in ("y", "yes")

    display = "Yes" if result else "No"

    # Overwrite the ◆ question + │ bar + │ [Y/n] input line
    _clear_lines(3)

    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {display}")
    _print_bar()

    return result


def _text(question: str, validate: Callable[[str], str | None]) -> str:
    """Display a clack-style text prompt, asking again until *validate* passes."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()
    printed = 2

    while True:
        _console.print("[dim]│[/]  ", end="")
        answer = input(" ").strip()
        printed += 1

        problem = validate(answer)
        if problem is None:
            break
        _console.print(f"[dim]│[/]  [yellow]▲ {problem}[/]")
        printed += 1

    _clear_lines(printed)

    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {answer}")
    _print_bar()

    return answer


class TerminalPrompter:
    """Prompter that talks to a real terminal."""

    def project_name(self) -> str:
        return _text("What is the name of your project?", validate_project_name)

    def template(self, catalog: Catalog, default: TemplateKey) -> TemplateKey:
        keys = list(catalog)
        labels = [f"{catalog[k].label} - {catalog[k].description}" for k in keys]
        start = keys.index(default) if default in keys else 0
        return _select("Which template would you like to use?", keys, labels, default=start)

    def confirm(self, question: str, default: bool) -> bool:
        return _confirm(question, default=default)
