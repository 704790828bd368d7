"""Matching typed searches against menu entries and formatting entries."""

from __future__ import annotations

import glob
import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from fnmatch import fnmatchcase

from calmcore.items import MenuItem


@dataclass
class Group:
    """A numbered, named group of windows."""

    num: int
    name: str
    only_hidden: bool = False


@dataclass
class SearchClient:
    """The parts of a managed window that searches look at.

    ``names`` is the window's name history, oldest first.
    """

    name: str = ""
    label: str | None = None
    names: list[str] = field(default_factory=list)
    res_class: str | None = None
    group: Group | None = None
    active: bool = False
    hidden: bool = False


@dataclass
class Command:
    """A named command with the path it runs."""

    name: str
    path: str = ""


_TIERS = 3


def match_substr(sub: str | None, text: str | None, zeroidx: bool) -> bool:
    """Case-insensitive match of ``sub`` in ``text``.

    With ``zeroidx`` the match must start at the beginning of ``text``.
    """
    if sub is None or text is None:
        return False
    if len(sub) > len(text):
        return False
    needle = sub.lower()
    if zeroidx:
        return text[: len(sub)].lower() == needle
    return needle in text.lower()


def _client_tier(client: SearchClient, search: str) -> int | None:
    if match_substr(search, client.label, False):
        tier = 0
    elif any(match_substr(search, name, False) for name in reversed(client.names)):
        tier = 1
    elif match_substr(search, client.res_class, False):
        tier = 2
    else:
        return None
    # The current window is ranked down, a hidden one up.
    if tier < _TIERS - 1 and client.active:
        tier += 1
    if tier > 0 and client.hidden:
        tier -= 1
    return tier


def match_client(items: Iterable[MenuItem], search: str) -> list[MenuItem]:
    """Entries whose client matches, ordered by how well they match.

    Label matches come first, then name history, then resource class;
    within a tier the original order is kept.
    """
    ranked = []
    for item in items:
        tier = _client_tier(item.ctx, search)
        if tier is not None:
            ranked.append((tier, item))
    ranked.sort(key=lambda pair: pair[0])
    return [item for _, item in ranked]


def match_cmd(items: Iterable[MenuItem], search: str) -> list[MenuItem]:
    """Entries whose command name contains ``search``."""
    return [item for item in items if match_substr(search, item.ctx.name, False)]


def match_group(items: Iterable[MenuItem], search: str) -> list[MenuItem]:
    """Entries whose group's "number name" contains ``search``."""
    return [
        item
        for item in items
        if match_substr(search, f"{item.ctx.num} {item.ctx.name}", False)
    ]


def match_path_type(search: str, executable_only: bool) -> list[MenuItem]:
    """New entries for the paths starting with ``search``, sorted.

    Directories are marked with a trailing separator. With
    ``executable_only`` only paths that may be executed are kept.
    """
    results = []
    for path in sorted(glob.glob(f"{search}*")):
        if os.path.isdir(path) and not path.endswith(os.sep):
            path += os.sep
        if executable_only and not os.access(path, os.X_OK):
            continue
        results.append(MenuItem(text=path))
    return results


def match_exec(items: Iterable[MenuItem], search: str) -> list[MenuItem]:
    """Entries starting with or matching the pattern ``search``, sorted.

    Entries with the same text appear once. When nothing matches, the
    executable paths starting with ``search`` are offered instead.
    """
    chosen: dict[str, MenuItem] = {}
    for item in items:
        if not match_substr(search, item.text, True) and not fnmatchcase(
            item.text, search
        ):
            continue
        chosen.setdefault(item.text, item)
    results = [chosen[text] for text in sorted(chosen)]
    if not results:
        results = match_path_type(search, True)
    return results


def match_path(items: Iterable[MenuItem], search: str) -> list[MenuItem]:
    """Entries for all paths starting with ``search``; ``items`` is unused."""
    return match_path_type(search, False)


def match_text(items: Iterable[MenuItem], search: str) -> list[MenuItem]:
    """Entries whose text contains ``search``."""
    return [item for item in items if match_substr(search, item.text, False)]


def match_wm(items: Iterable[MenuItem], search: str) -> list[MenuItem]:
    """Entries whose command name or path contains ``search``."""
    return [
        item
        for item in items
        if match_substr(search, item.ctx.name, False)
        or match_substr(search, item.ctx.path, False)
    ]


def print_client(item: MenuItem, listing: bool) -> str:
    """Show a client as "(group) flag[label] name"."""
    client: SearchClient = item.ctx
    if client.active:
        flag = "!"
    elif client.hidden:
        flag = "&"
    else:
        flag = " "
    num = client.group.num if client.group is not None else 0
    item.display = f"({num}) {flag}[{client.label or ''}] {client.name}"
    return item.display


def print_cmd(item: MenuItem, listing: bool) -> str:
    """Show a command by its name."""
    item.display = item.ctx.name
    return item.display


def print_group(item: MenuItem, listing: bool) -> str:
    """Show a group as "num: name", bracketing the name if all are hidden."""
    group: Group = item.ctx
    name = f"[{group.name}]" if group.only_hidden else group.name
    item.display = f"{group.num}: {name}"
    return item.display


def print_text(item: MenuItem, listing: bool) -> str:
    """Show an entry by its text."""
    item.display = item.text
    return item.display


def print_wm(item: MenuItem, listing: bool) -> str:
    """Show a window manager as "name [path]"."""
    item.display = f"{item.ctx.name} [{item.ctx.path}]"
    return item.display