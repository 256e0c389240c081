"""Fatal errors raised while scaffolding a project."""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for errors that abort the scaffold with a non-zero exit."""

    step = "scaffold"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidProjectNameError(ScaffoldError, ValueError):
    step = "project name"


class TargetExistsError(ScaffoldError, FileExistsError):
    step = "target directory"


class TemplateNotFoundError(ScaffoldError):
    step = "template"


class CopyError(ScaffoldError):
    step = "copy"


class ManifestError(ScaffoldError):
    step = "package.json"
