"""
Configuration models for package loading and path resolution.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pkgtree.resolution.path_resolver import SourceRootResolver


class LoaderConfig(BaseModel):
    """Settings for reading source files from a directory."""

    model_config = ConfigDict(frozen=True)

    source_suffix: str = Field(
        default=".go", description="Filename suffix of the source files to parse"
    )
    encoding: str = Field(default="utf-8", description="Text encoding of source files")

    @field_validator("source_suffix")
    @classmethod
    def _suffix_starts_with_dot(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError(f"source_suffix must look like '.ext', got {value!r}")
        return value


class ResolverConfig(BaseModel):
    """
    Settings for resolving import-style package paths.

    Params:
        source_roots: Roots searched in order; an import path ``a/b`` resolves
            to ``<root>/src/a/b``
        working_dir: Base directory for local paths such as ``./pkg``;
            defaults to the process working directory at resolution time
    """

    model_config = ConfigDict(frozen=True)

    source_roots: list[Path] = Field(default_factory=list)
    working_dir: Path | None = None

    def build_resolver(self) -> SourceRootResolver:
        """Create a SourceRootResolver from these settings."""
        return SourceRootResolver(self.source_roots, working_dir=self.working_dir)
