"""Command-line interface for create-react-tailwind-app-router."""

from create_react_tailwind_app_router.cli.app import app

__all__ = ["app"]
