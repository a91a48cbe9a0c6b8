import asyncio
import json
import logging
import sys
import tempfile
from pathlib import Path

from buildpipe.artifact import ArtifactDefinition, ArtifactFactory
from buildpipe.build_context import BuildContext, BuildContextRegistry, Component
from buildpipe.build_task import ComponentResult, ExecuteResult, build_task
from buildpipe.pipeline import BuildPipe, LoggingBuildLogger, TaskResultsList, TasksQueue

logger = logging.getLogger(__name__)

ENV_ID = "teambit.harmony/node"


def create_workspace(root: Path, component_ids: list[str]) -> BuildContext:
    """
    Create component directories for the demo build.
    """
    components: list[Component] = []
    for component_id in component_ids:
        component_dir = root / component_id.replace("/", "_")
        (component_dir / "src").mkdir(parents=True)
        (component_dir / "src" / "index.ts").write_text(f"export const name = '{component_id}';\n")
        components.append(Component(id=component_id, root_dir=component_dir))
    return BuildContext(env_id=ENV_ID, components=components, root_dir=root)


def create_queue(fail_compile: bool) -> TasksQueue:
    """
    Define the demo tasks: compile, then pack (depends on compile), then a report.
    """

    @build_task("teambit.compilation/compiler", "TranspileComponents")
    def transpile(context: BuildContext) -> ExecuteResult:
        """Transpile TypeScript sources."""
        results: list[ComponentResult] = []
        for component in context.components:
            if fail_compile:
                results.append(
                    ComponentResult(component_id=component.id, errors=["TS2304: cannot find name"])
                )
                continue
            dist = component.root_dir / "dist"
            dist.mkdir(exist_ok=True)
            for source in (component.root_dir / "src").glob("*.ts"):
                (dist / source.with_suffix(".js").name).write_text(source.read_text())
                (dist / source.with_suffix(".js.map").name).write_text("{}")
            results.append(ComponentResult(component_id=component.id))

        return ExecuteResult(
            components_results=results,
            artifacts=[ArtifactDefinition(name="dist", glob_patterns=("dist/**", "!**/*.map"))],
        )

    @build_task("teambit.pkg/pkg", "PackComponents", dependencies=["teambit.compilation/compiler"])
    async def pack(context: BuildContext) -> ExecuteResult:
        """Pack components into tarballs."""
        await asyncio.sleep(0.01)
        return ExecuteResult(
            components_results=[
                ComponentResult(component_id=component.id) for component in context.components
            ]
        )

    def print_summary(context: BuildContext, tasks_results: TaskResultsList) -> None:
        print(json.dumps(tasks_results.to_dict(), indent=2))

    @build_task("teambit.pipelines/builder", "Report", post_build=print_summary)
    def report(context: BuildContext) -> ExecuteResult:
        """Report the build."""
        return ExecuteResult(components_results=[])

    return TasksQueue([(transpile, ENV_ID), (pack, ENV_ID), (report, ENV_ID)])


async def main(fail_compile: bool = False) -> TaskResultsList:
    """
    Run the demo build pipe.
    """
    with tempfile.TemporaryDirectory() as tmp_dir:
        context = create_workspace(Path(tmp_dir), ["acme.demo/button", "acme.demo/card"])
        pipe = BuildPipe.from_queue(
            create_queue(fail_compile),
            BuildContextRegistry.from_contexts(context),
            LoggingBuildLogger(),
            ArtifactFactory(),
        )
        tasks_results = await pipe.execute()

    if tasks_results.is_successful:
        logger.info("Build succeeded")
    else:
        logger.error(tasks_results.get_errors_message_formatted())
    return tasks_results


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    # --fail makes the compile task report component errors
    asyncio.run(main(fail_compile="--fail" in sys.argv[1:]))
