"""Asynchronous child loading for the current tree node.

Each request is tagged with the load generation it was issued for; the owner
compares that token against its own state when the result arrives, so an
older request that finishes late is dropped instead of overwriting newer
children. In-flight work is never aborted mid-session.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass

from .item import Item, resolve_children
from .state import ChildrenFailed, ChildrenLoaded

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChildLoadRequest:
    """One child resolution job."""

    generation: int
    node: Item
    parent: Item | None


@dataclass(frozen=True)
class ChildLoadResult:
    """Completed resolution, successful or failed."""

    request: ChildLoadRequest
    children: ChildrenLoaded | ChildrenFailed


class ChildLoader:
    """Runs child resolutions as asyncio tasks and reports each completion."""

    def __init__(self, on_result: Callable[[ChildLoadResult], None]) -> None:
        self._on_result = on_result
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def schedule(self, generation: int, node: Item, parent: Item | None) -> asyncio.Task[None]:
        """Start resolving ``node``'s children on the next loop iteration."""
        request = ChildLoadRequest(generation=generation, node=node, parent=parent)
        task = asyncio.get_running_loop().create_task(
            self._run(request),
            name=f"treeselect-load-{generation}",
        )
        self._tasks.add(task)
        task.add_done_callback(self._task_done)
        return task

    def _task_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("applying children failed in %s", task.get_name(), exc_info=exc)

    async def _run(self, request: ChildLoadRequest) -> None:
        try:
            items = await resolve_children(request.node, request.parent)
        except Exception as exc:
            logger.warning("loading children of %r failed", request.node.name, exc_info=True)
            children: ChildrenLoaded | ChildrenFailed = ChildrenFailed(exc)
        else:
            children = ChildrenLoaded(items)
        self._on_result(ChildLoadResult(request=request, children=children))

    async def wait_idle(self) -> None:
        """Wait until every scheduled load, including ones started meanwhile, finished.

        Re-raises the first error raised while applying a result; canceled
        loads are skipped.
        """
        while self._tasks:
            outcomes = await asyncio.gather(*tuple(self._tasks), return_exceptions=True)
            for outcome in outcomes:
                if isinstance(outcome, Exception):
                    raise outcome

    def close(self) -> None:
        """Cancel loads still running when the prompt session ends."""
        for task in tuple(self._tasks):
            task.cancel()
        self._tasks.clear()


__all__ = ["ChildLoadRequest", "ChildLoadResult", "ChildLoader"]
