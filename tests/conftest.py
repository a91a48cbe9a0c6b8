"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from buildpipe.build_context.domain.build_context import BuildContext, Component
from buildpipe.build_context.domain.build_context_registry import BuildContextRegistry
from tests.pipeline.fixtures import RecordingArtifactFactory, RecordingBuildLogger


@pytest.fixture
def env1_context(tmp_path: Path) -> BuildContext:
    """Create a build context with two components."""
    return BuildContext(
        env_id="env1",
        components=[
            Component(id="acme/button", root_dir=tmp_path / "env1" / "button"),
            Component(id="acme/card", root_dir=tmp_path / "env1" / "card"),
        ],
        root_dir=tmp_path / "env1",
    )


@pytest.fixture
def env2_context(tmp_path: Path) -> BuildContext:
    """Create a build context with a single component."""
    return BuildContext(
        env_id="env2",
        components=[Component(id="acme/server", root_dir=tmp_path / "env2" / "server")],
        root_dir=tmp_path / "env2",
    )


@pytest.fixture
def registry(env1_context: BuildContext, env2_context: BuildContext) -> BuildContextRegistry:
    """Create a registry holding env1 and env2."""
    return BuildContextRegistry.from_contexts(env1_context, env2_context)


@pytest.fixture
def build_logger() -> RecordingBuildLogger:
    """Create a build logger recording its calls."""
    return RecordingBuildLogger()


@pytest.fixture
def artifact_factory() -> RecordingArtifactFactory:
    """Create an artifact factory recording its calls."""
    return RecordingArtifactFactory()


@pytest.fixture
def events() -> list[str]:
    """Return a list collecting task lifecycle calls."""
    return []
