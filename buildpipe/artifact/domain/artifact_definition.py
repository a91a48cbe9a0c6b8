"""Artifact definition model."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ArtifactDefinition(BaseModel):
    """
    Declares an output a task wants materialized when it succeeds.

    Definitions are immutable so a generator can never alter what the task
    declared.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        description="Name of the artifact",
        examples=["dist", "coverage"],
    )
    glob_patterns: tuple[str, ...] = Field(
        description=(
            "Glob patterns relative to the artifact root. "
            "Patterns starting with '!' exclude files"
        ),
        examples=[("dist/**", "!dist/**/*.map")],
    )
    root_dir: str | None = Field(
        default=None,
        description="Sub-directory of the context path the patterns resolve from",
    )
    context: Literal["component", "env"] = Field(
        default="component",
        description="Resolve patterns from each component's directory or from the environment's",
    )
    description: str | None = Field(default=None, description="Human-readable description")

    @field_validator("name")
    @classmethod
    def _name_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("artifact name must not be empty")
        return value

    @field_validator("glob_patterns")
    @classmethod
    def _has_include_pattern(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not any(pattern and not pattern.startswith("!") for pattern in value):
            raise ValueError("at least one include glob pattern is required")
        for pattern in value:
            if pattern.lstrip("!").startswith("/"):
                raise ValueError(f"glob pattern '{pattern}' must be relative")
        return value

    @property
    def include_patterns(self) -> list[str]:
        """Get the patterns selecting files."""
        return [
            pattern for pattern in self.glob_patterns if pattern and not pattern.startswith("!")
        ]

    @property
    def exclude_patterns(self) -> list[str]:
        """Get the patterns removing files, without their '!' prefix."""
        return [pattern[1:] for pattern in self.glob_patterns if pattern.startswith("!")]
