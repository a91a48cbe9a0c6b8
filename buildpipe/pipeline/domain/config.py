"""Build pipe configuration."""

from pydantic import BaseModel, ConfigDict, Field


class BuildPipeConfig(BaseModel):
    """
    Settings of a build pipe run.

    All fields have defaults, so ``BuildPipeConfig()`` is the standard setup.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    process_description: str = Field(
        default="running tasks",
        min_length=1,
        description="Title of the progress tracker of the main task loop",
        examples=["running tasks", "building components"],
    )
    validate_queue: bool = Field(
        default=True,
        description="Reject queues listing the same task twice for one environment",
    )
    throw_on_error: bool = Field(
        default=False,
        description="Raise BuildTaskFailedError after the post-build phase if any task failed",
    )
