"""
Build context registry.
Immutable mapping from environment id to its build context.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from buildpipe.build_context.domain.build_context import BuildContext
from buildpipe.errors import BuildContextNotFoundError


class BuildContextRegistry(Mapping[str, BuildContext]):
    """
    Read-only registry of build contexts, keyed by environment id.

    The registry is fully populated on construction and never changes
    afterwards, so it can be shared by every phase of a run.

    Example:
        registry = BuildContextRegistry({
            "teambit.react/react": BuildContext(env_id="teambit.react/react"),
        })
        context = registry.get_context("teambit.react/react")
    """

    def __init__(self, contexts: Mapping[str, BuildContext] | None = None) -> None:
        """
        Initialize the registry.

        Args:
            contexts: Mapping of environment id to build context.

        Raises:
            ValueError: If a key does not match its context's env_id.
        """
        contexts = dict(contexts or {})
        for env_id, context in contexts.items():
            if env_id != context.env_id:
                raise ValueError(
                    f"Build context registered as '{env_id}' belongs to '{context.env_id}'"
                )
        self._contexts = MappingProxyType(contexts)

    @classmethod
    def from_contexts(cls, *contexts: BuildContext) -> "BuildContextRegistry":
        """Create a registry keyed by each context's own env_id."""
        return cls({context.env_id: context for context in contexts})

    def get_context(self, env_id: str) -> BuildContext:
        """
        Get the build context of an environment.

        Args:
            env_id: Environment identifier.

        Returns:
            The environment's build context.

        Raises:
            BuildContextNotFoundError: If the environment is not registered.
        """
        context = self._contexts.get(env_id)
        if context is None:
            raise BuildContextNotFoundError(env_id)
        return context

    def __getitem__(self, env_id: str) -> BuildContext:
        return self._contexts[env_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._contexts)

    def __len__(self) -> int:
        return len(self._contexts)

    def __repr__(self) -> str:
        return f"BuildContextRegistry({list(self._contexts)})"
