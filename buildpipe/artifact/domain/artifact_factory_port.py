"""Artifact factory port interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from buildpipe.artifact.domain.artifact import ArtifactList
    from buildpipe.artifact.domain.artifact_definition import ArtifactDefinition
    from buildpipe.build_context.domain.build_context import BuildContext
    from buildpipe.build_task.domain.build_task import BuildTask


class ArtifactFactoryPort(ABC):
    """
    Abstract port turning artifact definitions into per-component artifacts.

    The build pipe calls it only for tasks that finished without component
    errors. Implementations must not modify the definitions they receive.
    """

    @abstractmethod
    def generate(
        self,
        context: BuildContext,
        definitions: Sequence[ArtifactDefinition],
        task: BuildTask,
    ) -> dict[str, ArtifactList]:
        """
        Generate the artifacts of a successful task.

        Args:
            context: Build context the task ran in.
            definitions: Artifact definitions returned by the task.
            task: The task that produced the artifacts.

        Returns:
            Mapping of component id to that component's artifacts. Every
            component of the context has an entry, possibly empty.
        """
        raise NotImplementedError
