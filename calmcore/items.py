"""Menu entries and the list they are collected in."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class MenuItem:
    """One entry of a menu.

    ``text`` is what the entry matches on. ``display`` is the line shown
    for it, filled in by a print function. ``ctx`` is the object the entry
    stands for. ``dummy`` marks an entry made up from the typed search
    rather than chosen from the list. ``abort`` marks a cancelled menu.
    """

    text: str = ""
    ctx: Any = None
    display: str = ""
    dummy: bool = False
    abort: bool = False


def menu_add(items: list[MenuItem], ctx: Any, text: str | None) -> MenuItem:
    """Append a new entry for ``ctx`` with ``text`` to ``items`` and return it."""
    item = MenuItem(text=text if text is not None else "", ctx=ctx)
    items.append(item)
    return item