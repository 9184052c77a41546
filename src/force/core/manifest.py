"""
Project manifest (force.toml) loading.

Example:

    [project]
    name = "social"
    version = "0.1.0"

    [schema]
    sources = ["schema/**/*.force"]
"""

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import make_manifest_error

logger = logging.getLogger(__name__)

MANIFEST_NAME = "force.toml"
DEFAULT_SOURCES = ["**/*.force"]


@dataclass
class ForceManifest:
    """Parsed force.toml."""

    name: str
    version: str = "0.1.0"
    sources: list[str] = field(default_factory=lambda: list(DEFAULT_SOURCES))

    def source_files(self, root: Path) -> list[Path]:
        """Resolve source globs against the project root, sorted and de-duplicated."""
        files: set[Path] = set()
        for pattern in self.sources:
            matched = [p for p in root.glob(pattern) if p.is_file()]
            if not matched:
                logger.debug("Source pattern %r matched nothing under %s", pattern, root)
            files.update(matched)
        return sorted(files)


def load_manifest(path: Path) -> ForceManifest:
    """
    Load and validate a force.toml file.

    Raises:
        ManifestError: If the file is missing, not valid TOML, or malformed
    """
    if not path.exists():
        raise make_manifest_error("manifest not found", path)

    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise make_manifest_error(f"invalid TOML: {e}", path) from e

    project = data.get("project")
    if not isinstance(project, dict) or not project.get("name"):
        raise make_manifest_error("[project] table with a 'name' is required", path)

    schema = data.get("schema", {})
    if not isinstance(schema, dict):
        raise make_manifest_error("[schema] must be a table", path)
    sources = schema.get("sources", list(DEFAULT_SOURCES))
    if not isinstance(sources, list) or not all(isinstance(s, str) for s in sources):
        raise make_manifest_error("[schema].sources must be a list of glob strings", path)

    return ForceManifest(
        name=str(project["name"]),
        version=str(project.get("version", "0.1.0")),
        sources=sources,
    )


def find_manifest(start: Path) -> Path | None:
    """Walk up from ``start`` looking for force.toml."""
    current = start.resolve()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        candidate = directory / MANIFEST_NAME
        if candidate.exists():
            return candidate
    return None
