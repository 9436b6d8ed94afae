"""Meta tools registered at startup and never removed by scope changes."""

from __future__ import annotations

from . import batch, scope_tools, video
from .common import ToolEnvironment

__all__ = ["ToolEnvironment", "batch", "scope_tools", "video"]
