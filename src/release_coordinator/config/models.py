"""Configuration models for release-coordinator.

Values come from the ``[tool.release-coordinator]`` table of
pyproject.toml; every field has a default matching the package scaffold
layout, so the table is optional.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GitIdentityConfig(BaseModel):
    """Committer identity written to the repository's git config.

    The identity is only configured when both fields are set, e.g. for CI:

        [tool.release-coordinator.git]
        user_name = "github-actions[bot]"
        user_email = "github-actions[bot]@users.noreply.github.com"
    """

    model_config = ConfigDict(extra="forbid")

    user_name: str | None = None
    user_email: str | None = None

    @property
    def is_configured(self) -> bool:
        return bool(self.user_name and self.user_email)


class CoordinatorConfig(BaseModel):
    """Root configuration for a release run."""

    model_config = ConfigDict(extra="forbid")

    project_root: Path = Field(default_factory=Path.cwd)
    version_file: Path = Path("src/MyPackage/MyPackage.csproj")
    changelog_path: Path = Path("CHANGELOG.md")
    fragments_dir: Path = Path("changelog.d")
    fragments_index: str = "README.md"
    fragment_suffix: str = ".md"
    tag_prefix: str = "v"
    strict_tag_lookup: bool = False
    git: GitIdentityConfig = Field(default_factory=GitIdentityConfig)
    output_file: Path | None = None

    @field_validator("fragment_suffix")
    @classmethod
    def _suffix_has_dot(cls, value: str) -> str:
        if not value.startswith("."):
            raise ValueError("fragment_suffix must start with '.'")
        return value

    def resolve(self, path: Path) -> Path:
        """Resolve a configured path against the project root."""
        return path if path.is_absolute() else self.project_root / path

    @property
    def effective_version_file(self) -> Path:
        return self.resolve(self.version_file)

    @property
    def effective_changelog_path(self) -> Path:
        return self.resolve(self.changelog_path)

    @property
    def effective_fragments_dir(self) -> Path:
        return self.resolve(self.fragments_dir)
