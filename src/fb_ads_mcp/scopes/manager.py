"""Runtime loading and unloading of tool scopes."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Iterable

from ..logging import get_logger
from ..registry import ToolRegistry
from . import catalog

logger = get_logger(__name__)

Notifier = Callable[[], Awaitable[Any]]


@dataclass(slots=True)
class ScopeChange:
    loaded: list[str]
    added: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    registered: int = 0
    unregistered: int = 0
    warnings: list[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.registered or self.unregistered)

    def to_dict(self) -> dict[str, Any]:
        return {
            "loaded_scopes": self.loaded,
            "added": self.added,
            "removed": self.removed,
            "registered_tools": self.registered,
            "unregistered_tools": self.unregistered,
            "warnings": self.warnings,
        }


class ScopeManager:
    """Tracks loaded scopes and keeps the registry equal to their union.

    A tool contributed by two loaded scopes stays registered until neither
    is loaded. Mutations are serialized by one lock; the tools-list-changed
    notification is sent after the lock is released and only when the
    registry actually changed.
    """

    def __init__(self, registry: ToolRegistry) -> None:
        self._registry = registry
        self._loaded: set[str] = set()
        self._lock = asyncio.Lock()

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    async def get(self) -> list[str]:
        async with self._lock:
            return sorted(self._loaded)

    async def set(self, scopes: Iterable[str], *, notify: Notifier | None = None) -> ScopeChange:
        target = catalog.validate(list(scopes))
        async with self._lock:
            added = [name for name in target if name not in self._loaded]
            removed = sorted(self._loaded - set(target))
            change = self._apply(set(target), added, removed)
        logger.info("scopes_set", loaded=change.loaded, added=added, removed=removed)
        await self._notify(change, notify)
        return change

    async def add(self, scopes: Iterable[str], *, notify: Notifier | None = None) -> ScopeChange:
        requested = catalog.validate(list(scopes))
        async with self._lock:
            added = [name for name in requested if name not in self._loaded]
            change = self._apply(self._loaded | set(added), added, [])
        if added:
            logger.info("scopes_added", added=added, loaded=change.loaded)
        await self._notify(change, notify)
        return change

    async def remove(self, scopes: Iterable[str], *, notify: Notifier | None = None) -> ScopeChange:
        requested = catalog.validate(list(scopes))
        async with self._lock:
            removed = [name for name in requested if name in self._loaded]
            change = self._apply(self._loaded - set(removed), [], removed)
        if removed:
            logger.info("scopes_removed", removed=removed, loaded=change.loaded)
        await self._notify(change, notify)
        return change

    def preload(self, scopes: Iterable[str]) -> ScopeChange:
        """Load the startup scopes before the transport starts.

        Unknown names are logged and skipped instead of failing startup.
        """

        known: list[str] = []
        for raw in scopes:
            name = catalog.normalize(raw)
            if not catalog.is_known(name):
                logger.warning("unknown_startup_scope", scope=raw, available=catalog.available_scopes())
                continue
            if name not in known:
                known.append(name)
        added = [name for name in known if name not in self._loaded]
        change = self._apply(self._loaded | set(added), added, [])
        logger.info("startup_scopes_loaded", loaded=change.loaded, tools=len(self._registry))
        return change

    async def reset(self, *, notify: Notifier | None = None) -> ScopeChange:
        return await self.set([], notify=notify)

    def tool_names(self, scopes: Iterable[str]) -> set[str]:
        return {tool.name for name in scopes for tool in catalog.scope_tools(name)}

    def _apply(self, target: set[str], added: list[str], removed: list[str]) -> ScopeChange:
        wanted = {tool.name: tool for name in target for tool in catalog.scope_tools(name)}
        stale = [name for name in self._registry.endpoint_names() if name not in wanted]
        unregistered = self._registry.unregister(*stale)

        registered = 0
        for name in sorted(target):
            registered += self._registry.register_all(
                tool for tool in catalog.scope_tools(name) if tool.name not in self._registry
            )
            self._loaded.add(name)
        self._loaded.intersection_update(target)

        warnings = [warning for name in added if (warning := catalog.scope_warning(name))]
        return ScopeChange(
            loaded=sorted(self._loaded),
            added=added,
            removed=removed,
            registered=registered,
            unregistered=unregistered,
            warnings=warnings,
        )

    async def _notify(self, change: ScopeChange, notify: Notifier | None) -> None:
        if notify is None or not change.changed:
            return
        try:
            await notify()
        except Exception as exc:
            logger.warning("tool_list_notification_failed", error=str(exc))


__all__ = ["Notifier", "ScopeChange", "ScopeManager"]
