"""create-react-tailwind-app-router: scaffold React + Vite + Tailwind projects."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("create-react-tailwind-app-router")
except PackageNotFoundError:
    __version__ = "0.0.0"
