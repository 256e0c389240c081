"""Turns command-line flags and prompt answers into a ScaffoldRequest."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from create_react_tailwind_app_router.cli._errors import (
    InvalidProjectNameError,
    TemplateNotFoundError,
)
from create_react_tailwind_app_router.cli._logging import get_logger
from create_react_tailwind_app_router.cli._prompts import Prompter
from create_react_tailwind_app_router.cli._types import (
    DEFAULT_PROJECT_NAME,
    DEFAULT_TEMPLATE,
    Catalog,
    Flags,
    ScaffoldRequest,
    TemplateKey,
    validate_project_name,
)

logger = get_logger(__name__)

INSTALL_QUESTION = "Install dependencies now (npm install)?"
GIT_QUESTION = "Initialize a git repository?"


def resolve_template_key(flags: Flags, catalog: Catalog) -> TemplateKey | None:
    """Pick a template from the flags alone.

    An explicit ``--template`` naming a catalog entry wins. Otherwise the
    shorthand flags are checked in the order ``--typescript``, ``--js``,
    ``--basic``. Returns None when nothing usable was given.
    """
    if flags.template is not None:
        try:
            key = TemplateKey(flags.template)
        except ValueError:
            key = None
        if key is not None and key in catalog:
            return key
        valid = ", ".join(k.value for k in catalog)
        logger.warning(f"Unknown template {flags.template!r} (valid: {valid}); ignoring it.")

    shorthands = (
        (flags.typescript, TemplateKey.TYPESCRIPT),
        (flags.js, TemplateKey.JAVASCRIPT),
        (flags.basic, TemplateKey.JSX_BASIC),
    )
    for enabled, key in shorthands:
        if enabled and key in catalog:
            return key

    return None


def _resolve_name(flags: Flags, prompter: Prompter) -> str:
    if flags.project_name is not None:
        if (problem := validate_project_name(flags.project_name)) is not None:
            raise InvalidProjectNameError(problem)
        return flags.project_name

    if flags.yes:
        return DEFAULT_PROJECT_NAME

    # The prompter re-asks until the answer is valid; check anyway.
    name = prompter.project_name()
    if (problem := validate_project_name(name)) is not None:
        raise InvalidProjectNameError(problem)
    return name


def _resolve_template(flags: Flags, prompter: Prompter, catalog: Catalog) -> TemplateKey:
    key = resolve_template_key(flags, catalog)
    if key is not None:
        return key

    default = DEFAULT_TEMPLATE if DEFAULT_TEMPLATE in catalog else next(iter(catalog))
    if flags.yes:
        return default
    return prompter.template(catalog, default)


def _resolve_toggle(forced: bool, skip_prompts: bool, ask: Callable[[], bool]) -> bool:
    if forced:
        return True
    if skip_prompts:
        return False
    return ask()


def resolve_request(
    flags: Flags,
    prompter: Prompter,
    catalog: Catalog,
    cwd: Path,
) -> ScaffoldRequest:
    """Resolve every field of a ScaffoldRequest, prompting for what is missing.

    Nothing is written to disk here.
    """
    if not catalog:
        raise TemplateNotFoundError("Template catalog is empty.")

    name = _resolve_name(flags, prompter)
    key = _resolve_template(flags, prompter, catalog)

    install = _resolve_toggle(
        flags.install, flags.yes, lambda: prompter.confirm(INSTALL_QUESTION, True)
    )
    init_git = _resolve_toggle(
        flags.git, flags.yes, lambda: prompter.confirm(GIT_QUESTION, False)
    )

    request = ScaffoldRequest(
        project_name=name,
        template=catalog[key],
        target_dir=cwd / name,
        install=install,
        init_git=init_git,
    )
    logger.debug(f"Resolved request: {request}")
    return request
