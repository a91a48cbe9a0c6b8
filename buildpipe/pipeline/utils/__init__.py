"""Utilities for the build pipe."""

from buildpipe.pipeline.utils.time_format import pretty_time

__all__ = ["pretty_time"]
