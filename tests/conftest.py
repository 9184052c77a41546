"""Shared pytest fixtures for FORCE tests."""

from pathlib import Path

import pytest


@pytest.fixture
def schema_file() -> Path:
    """Path used for error reporting in tests that never touch disk."""
    return Path("test.force")


@pytest.fixture
def social_schema() -> str:
    """A small, complete schema exercising every type."""
    return """
# People and the groups they join
Person {
  OneLine name
  Number age
  Text /^[a-z0-9_]+$/ handle
  Text bio
  Bond[*] friend
}

Group {
  OneLine title
  Bond[Person, Group] member
}
"""


@pytest.fixture
def project_dir(tmp_path: Path, social_schema: str) -> Path:
    """Create a temporary project with a force.toml and one schema file."""
    schema_dir = tmp_path / "schema"
    schema_dir.mkdir()
    (schema_dir / "social.force").write_text(social_schema, encoding="utf-8")

    (tmp_path / "force.toml").write_text(
        """
[project]
name = "social"
version = "0.2.0"

[schema]
sources = ["schema/*.force"]
""",
        encoding="utf-8",
    )
    return tmp_path
