"""Version lookup for the force-schema distribution."""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DISTRIBUTION = "force-schema"
UNKNOWN_VERSION = "0.0.0"

# src/force/_version.py -> repository root
SOURCE_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _pyproject_version(pyproject: Path) -> str | None:
    """Version from a checkout's pyproject.toml, if it declares this distribution."""
    try:
        with pyproject.open("rb") as f:
            project = tomllib.load(f).get("project", {})
    except (OSError, tomllib.TOMLDecodeError):
        return None
    if project.get("name") != DISTRIBUTION:
        return None
    value = project.get("version")
    return value if isinstance(value, str) else None


def get_version(pyproject: Path | None = None) -> str:
    """
    Resolve the running version.

    Installed metadata wins; a source checkout that was never installed falls
    back to its pyproject.toml, and anything else reports ``0.0.0``.
    """
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        pass
    return _pyproject_version(pyproject or SOURCE_PYPROJECT) or UNKNOWN_VERSION
