"""Tool scopes: named groups of generated tools loaded and unloaded as a unit."""

from __future__ import annotations

from .catalog import (
    CURATED_SCOPES,
    CuratedScope,
    UnknownScopeError,
    available_scopes,
    describe,
    scope_tools,
)
from .manager import ScopeChange, ScopeManager

__all__ = [
    "CURATED_SCOPES",
    "CuratedScope",
    "ScopeChange",
    "ScopeManager",
    "UnknownScopeError",
    "available_scopes",
    "describe",
    "scope_tools",
]
