"""End-to-end runs with the filesystem artifact factory and the logging build logger."""

import logging
from pathlib import Path

import pytest

from buildpipe.artifact.domain.artifact_definition import ArtifactDefinition
from buildpipe.artifact.infrastructure.artifact_factory import ArtifactFactory
from buildpipe.build_context.domain.build_context_registry import BuildContextRegistry
from buildpipe.main import ENV_ID, create_queue, create_workspace, main
from buildpipe.pipeline.domain.build_pipe import BuildPipe
from buildpipe.pipeline.domain.task_status import TaskStatus
from buildpipe.pipeline.domain.tasks_queue import TasksQueue
from buildpipe.pipeline.infrastructure.logging_build_logger import LoggingBuildLogger
from tests.pipeline.fixtures import make_task


class TestDemoBuild:
    """Test the demo build shipped with the package."""

    @pytest.mark.asyncio
    async def test_successful_build(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that every task runs and the transpiled files become artifacts."""
        with caplog.at_level(logging.INFO):
            results = await main()

        assert results.is_successful
        assert len(results) == 3

        dist = results.get_artifacts_of_component("acme.demo/button")
        assert [artifact.name for artifact in dist] == ["dist"]
        assert dist[0].files == ("dist/index.js",)

        assert "✔ executing pre-build for all tasks" in caplog.messages
        assert "Build succeeded" in caplog.messages

    @pytest.mark.asyncio
    async def test_failed_compile_skips_the_rest(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that a failed compile skips pack and everything after it."""
        with caplog.at_level(logging.INFO):
            results = await main(fail_compile=True)

        assert not results.is_successful
        assert len(results) == 1
        assert results[0].artifacts is None
        assert results.get_status("teambit.pkg/pkg:PackComponents", ENV_ID) == TaskStatus.SKIPPED
        assert results.get_status("teambit.pipelines/builder:Report", ENV_ID) == TaskStatus.SKIPPED

        cause = "teambit.compilation/compiler:TranspileComponents (Transpile TypeScript sources.)"
        warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
        assert warnings == [
            f'env: {ENV_ID}, task "teambit.pkg/pkg:PackComponents '
            '(Pack components into tarballs.)" '
            f'has skipped due to "{cause}" failure',
            f'env: {ENV_ID}, task "teambit.pipelines/builder:Report (Report the build.)" '
            f'has skipped due to "{cause}" failure',
        ]
        failures = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
        assert failures[0] == f'env: {ENV_ID}, task "{cause}" has failed'
        assert any("TS2304: cannot find name" in message for message in caplog.messages)


class TestFilesystemBuild:
    """Test a pipe wired to real artifacts on disk."""

    @pytest.mark.asyncio
    async def test_artifacts_resolved_after_execute(self, tmp_path: Path) -> None:
        """Test that files written by a task are collected as its artifacts."""
        context = create_workspace(tmp_path, ["acme/button"])
        queue = create_queue(fail_compile=False)
        pipe = BuildPipe.from_queue(
            queue,
            BuildContextRegistry.from_contexts(context),
            LoggingBuildLogger(),
            ArtifactFactory(),
        )

        results = await pipe.execute()

        transpile = results.get("teambit.compilation/compiler:TranspileComponents", ENV_ID)
        assert transpile is not None
        assert transpile.artifacts is not None
        artifact = transpile.artifacts["acme/button"].get_by_name("dist")
        assert artifact is not None
        assert artifact.absolute_paths() == [tmp_path / "acme_button" / "dist" / "index.js"]

    @pytest.mark.asyncio
    async def test_definition_without_matches(self, tmp_path: Path) -> None:
        """Test that a definition matching nothing leaves an empty artifact list."""
        context = create_workspace(tmp_path, ["acme/button"])
        task = make_task(
            "acme.tester",
            artifacts=[ArtifactDefinition(name="coverage", glob_patterns=("coverage/**",))],
        )
        pipe = BuildPipe.from_queue(
            TasksQueue([(task, ENV_ID)]),
            BuildContextRegistry.from_contexts(context),
            LoggingBuildLogger(),
            ArtifactFactory(),
        )

        results = await pipe.execute()

        assert results[0].artifacts is not None
        assert results[0].artifacts["acme/button"].is_empty()

    @pytest.mark.asyncio
    async def test_double_star_inside_segment(self, tmp_path: Path) -> None:
        """Test that a "dist/**.js" definition collects files instead of aborting the run."""
        context = create_workspace(tmp_path, ["acme/button"])
        dist = tmp_path / "acme_button" / "dist"
        (dist / "lib").mkdir(parents=True)
        (dist / "index.js").write_text("")
        (dist / "lib" / "util.js").write_text("")
        (dist / "index.js.map").write_text("")
        task = make_task(
            "acme.compiler",
            artifacts=[ArtifactDefinition(name="dist", glob_patterns=("dist/**.js",))],
        )
        pipe = BuildPipe.from_queue(
            TasksQueue([(task, ENV_ID)]),
            BuildContextRegistry.from_contexts(context),
            LoggingBuildLogger(),
            ArtifactFactory(),
        )

        results = await pipe.execute()

        assert results.is_successful
        assert results[0].artifacts is not None
        artifact = results[0].artifacts["acme/button"].get_by_name("dist")
        assert artifact is not None
        assert artifact.files == ("dist/index.js", "dist/lib/util.js")
