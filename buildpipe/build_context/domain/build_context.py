"""Build context for an environment."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class Component:
    """A component built by the pipe.

    Attributes:
        id: Unique component identifier
        root_dir: Directory holding the component's build output
        metadata: Additional data about the component
    """

    id: str
    root_dir: Path
    metadata: dict[str, Any] = field(default_factory=dict, hash=False, compare=False)

    def __post_init__(self) -> None:
        """Validate the component."""
        if not self.id:
            raise ValueError("component id must not be empty")
        object.__setattr__(self, "root_dir", Path(self.root_dir))


@dataclass
class BuildContext:
    """Everything tasks of one environment operate on.

    One instance exists per environment id. Tasks read it; the pipe never
    modifies it.

    Attributes:
        env_id: Id of the environment
        components: Components handled by the environment
        root_dir: Environment-wide directory (artifacts with "env" context resolve here)
        metadata: Additional data about the environment
    """

    env_id: str
    components: list[Component] = field(default_factory=list)
    root_dir: Path | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate the build context."""
        if not self.env_id:
            raise ValueError("env_id must not be empty")
        if self.root_dir is not None:
            self.root_dir = Path(self.root_dir)

        ids = [component.id for component in self.components]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Build context '{self.env_id}' has duplicate components")

    def get_component(self, component_id: str) -> Component | None:
        """
        Get a component by id.

        Args:
            component_id: Component identifier

        Returns:
            The component if found, None otherwise
        """
        for component in self.components:
            if component.id == component_id:
                return component
        return None

    def get_component_ids(self) -> list[str]:
        """Get the ids of all components in order."""
        return [component.id for component in self.components]
