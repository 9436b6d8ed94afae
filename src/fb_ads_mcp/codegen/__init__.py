"""Build-time generator turning the vendor API specification into tool modules.

Run ``python -m fb_ads_mcp.codegen`` to regenerate ``fb_ads_mcp.generated``.
"""

from __future__ import annotations

from .loader import ApiCatalog, load_catalog
from .render import GenerationError, ToolNameCollision, render_package, write_package

__all__ = [
    "ApiCatalog",
    "GenerationError",
    "ToolNameCollision",
    "load_catalog",
    "render_package",
    "write_package",
]
