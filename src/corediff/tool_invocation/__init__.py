"""Tool invocation domain exports."""

from .diff_tool_runner import CommandRunner, ToolLaunchError, run_diff_tool

__all__ = ["CommandRunner", "ToolLaunchError", "run_diff_tool"]
