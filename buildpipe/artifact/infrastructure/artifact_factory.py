"""Filesystem glob based artifact factory."""

import logging
from collections.abc import Sequence
from fnmatch import fnmatchcase
from pathlib import Path

from buildpipe.artifact.domain.artifact import Artifact, ArtifactList
from buildpipe.artifact.domain.artifact_definition import ArtifactDefinition
from buildpipe.artifact.domain.artifact_factory_port import ArtifactFactoryPort
from buildpipe.build_context.domain.build_context import BuildContext, Component
from buildpipe.build_task.domain.build_task import BuildTask

logger = logging.getLogger(__name__)


class ArtifactFactory(ArtifactFactoryPort):
    """
    Filesystem implementation of ArtifactFactoryPort.

    For every component of the context, each definition's glob patterns are
    resolved from a context path:
    {component.root_dir}/{definition.root_dir} for "component" definitions,
    {context.root_dir}/{definition.root_dir} for "env" definitions.

    A definition that resolves to no files adds nothing to the component's
    list; it is never an error.
    """

    def generate(
        self,
        context: BuildContext,
        definitions: Sequence[ArtifactDefinition],
        task: BuildTask,
    ) -> dict[str, ArtifactList]:
        """
        Generate the artifacts of every component in the context.

        Args:
            context: Build context the task ran in.
            definitions: Artifact definitions returned by the task.
            task: The task that produced the artifacts.

        Returns:
            Mapping of component id to its ArtifactList.
        """
        definitions = list(definitions)
        artifacts: dict[str, ArtifactList] = {}

        for component in context.components:
            component_artifacts = [
                artifact
                for definition in definitions
                if (artifact := self.create_from_component(context, component, definition, task))
                is not None
            ]
            artifacts[component.id] = ArtifactList.from_artifacts(component_artifacts)

        logger.debug(
            "Generated artifacts: env=%s, task=%s, definitions=%d, components=%d",
            context.env_id,
            task.task_id,
            len(definitions),
            len(artifacts),
        )
        return artifacts

    def create_from_component(
        self,
        context: BuildContext,
        component: Component,
        definition: ArtifactDefinition,
        task: BuildTask,
    ) -> Artifact | None:
        """
        Resolve one definition for one component.

        Args:
            context: Build context the task ran in.
            component: Component to resolve the definition for.
            definition: Artifact definition.
            task: The task that produced the artifact.

        Returns:
            The artifact, or None if the definition matched no files.
        """
        root_dir = self._get_root_dir(context, component, definition)
        if root_dir is None:
            return None

        files = self.resolve_paths(root_dir, definition)
        if not files:
            return None

        return Artifact(
            definition=definition,
            files=tuple(files),
            root_dir=root_dir,
            task_id=task.task_id,
        )

    def resolve_paths(self, root_dir: Path, definition: ArtifactDefinition) -> list[str]:
        """
        Expand a definition's patterns under a directory.

        Args:
            root_dir: Directory patterns are relative to.
            definition: Artifact definition.

        Returns:
            Sorted POSIX paths relative to root_dir.
        """
        if not root_dir.is_dir():
            return []

        matched: set[str] = set()
        for pattern in definition.include_patterns:
            for path in root_dir.glob(_normalize_pattern(pattern)):
                if path.is_file():
                    matched.add(path.relative_to(root_dir).as_posix())

        excludes = definition.exclude_patterns
        return sorted(
            file for file in matched if not any(_is_excluded(file, pattern) for pattern in excludes)
        )

    def _get_root_dir(
        self,
        context: BuildContext,
        component: Component,
        definition: ArtifactDefinition,
    ) -> Path | None:
        if definition.context == "env":
            if context.root_dir is None:
                logger.debug(
                    "Env '%s' has no root_dir, skipping artifact '%s'",
                    context.env_id,
                    definition.name,
                )
                return None
            base = context.root_dir
        else:
            base = component.root_dir

        if definition.root_dir:
            return base / definition.root_dir
        return base


def _normalize_pattern(pattern: str) -> str:
    """
    Rewrite a glob so Path.glob accepts it.

    "**" inside a segment ("dist/**.js") becomes its own segment
    ("dist/**/*.js"), and a trailing "**" selects every file below the directory.
    """
    segments: list[str] = []
    for segment in pattern.split("/"):
        if "**" in segment and segment != "**":
            segments.extend(["**", segment.replace("**", "*")])
        else:
            segments.append(segment)
    if segments[-1] == "**":
        segments.append("*")
    return "/".join(segments)


def _is_excluded(file: str, pattern: str) -> bool:
    # "**/" may also stand for zero directories
    return fnmatchcase(file, pattern) or fnmatchcase(file, pattern.replace("**/", ""))
