"""Ready-made trees: lazily listed directories and JSON documents."""

from __future__ import annotations

import asyncio
import json
import os
from dataclasses import dataclass
from pathlib import Path

from .item import DeferredChildren, Item


@dataclass(frozen=True)
class DirectoryChild:
    """One visible directory entry."""

    name: str
    path: Path
    is_dir: bool


def list_directory_children(directory: Path, show_hidden: bool) -> list[DirectoryChild]:
    """List ``directory`` with directories first, then by case-folded name.

    Scan errors propagate so the prompt can show them as a failed load.
    """
    children: list[DirectoryChild] = []
    with os.scandir(directory) as entries:
        for entry in entries:
            if not show_hidden and entry.name.startswith("."):
                continue
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False
            children.append(DirectoryChild(name=entry.name, path=Path(entry.path), is_dir=is_dir))
    children.sort(key=lambda child: (not child.is_dir, child.name.lower()))
    return children


def _directory_item(path: Path, name: str, show_hidden: bool) -> Item:
    async def resolve(_parent: Item | None) -> list[Item]:
        listed = await asyncio.to_thread(list_directory_children, path, show_hidden)
        return [_entry_item(child, show_hidden) for child in listed]

    return Item(name=name, value=str(path), children=DeferredChildren(resolve))


def _entry_item(child: DirectoryChild, show_hidden: bool) -> Item:
    if child.is_dir:
        return _directory_item(child.path, f"{child.name}/", show_hidden)
    return Item(name=child.name, value=str(child.path))


def directory_tree(root: Path, show_hidden: bool = False) -> Item:
    """Return a tree rooted at ``root`` whose levels are listed on demand.

    Every entry is selectable with its path as value; directories are also
    navigable. Listing runs in a worker thread.
    """
    root = root.resolve()
    return _directory_item(root, str(root), show_hidden)


def json_tree(path: Path) -> Item:
    """Load a tree from a JSON document in ``Item.from_data`` form."""
    return Item.from_data(json.loads(path.read_text(encoding="utf-8")))


__all__ = [
    "DirectoryChild",
    "list_directory_children",
    "directory_tree",
    "json_tree",
]
