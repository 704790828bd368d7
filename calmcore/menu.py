"""Interactive menu state: key handling, listing, placement and hit testing."""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace

from calmcore.geometry import Geom
from calmcore.items import MenuItem
from calmcore.search import match_text, print_text

PROMPT_START = "\u00bb"
PROMPT_END = "\u00ab"


class Ctl(enum.IntEnum):
    """Editing and navigation actions a key press can stand for."""

    NONE = -1
    ERASEONE = 0
    WIPE = 1
    UP = 2
    DOWN = 3
    RETURN = 4
    TAB = 5
    ABORT = 6
    ALL = 7


_PLAIN_KEYS = {
    "BackSpace": Ctl.ERASEONE,
    "KP_Enter": Ctl.RETURN,
    "Return": Ctl.RETURN,
    "Tab": Ctl.TAB,
    "Up": Ctl.UP,
    "Down": Ctl.DOWN,
    "Escape": Ctl.ABORT,
}

_CONTROL_KEYS = {
    "s": Ctl.DOWN,
    "S": Ctl.DOWN,
    "r": Ctl.UP,
    "R": Ctl.UP,
    "u": Ctl.WIPE,
    "U": Ctl.WIPE,
    "h": Ctl.ERASEONE,
    "H": Ctl.ERASEONE,
    "a": Ctl.ALL,
    "A": Ctl.ALL,
    "bracketleft": Ctl.ABORT,
}

_ALT_KEYS = {
    "j": Ctl.DOWN,
    "J": Ctl.DOWN,
    "k": Ctl.UP,
    "K": Ctl.UP,
}


def control_for_key(keysym: str, control: bool, alt: bool) -> Ctl:
    """The action for a key named ``keysym`` with the given modifiers held.

    Plain keys are checked first, then Emacs-style bindings with Control,
    then vi-style bindings with Alt. ``Ctl.NONE`` means the key is text.
    """
    ctl = _PLAIN_KEYS.get(keysym, Ctl.NONE)
    if ctl is Ctl.NONE and control:
        ctl = _CONTROL_KEYS.get(keysym, Ctl.NONE)
    if ctl is Ctl.NONE and alt:
        ctl = _ALT_KEYS.get(keysym, Ctl.NONE)
    return ctl


def place_menu(geom: Geom, area: Geom, bwidth: int) -> Geom:
    """Move a menu of ``geom`` so that it fits inside ``area``.

    The menu is pushed left and up so it does not run past the right or
    bottom edge, but never so far that its top or left side is hidden; in
    that case it is shrunk instead.
    """
    right = area.w + area.x - bwidth * 2
    bottom = area.h + area.y - bwidth * 2
    placed = replace(geom)
    if placed.x + placed.w >= right:
        placed.x = right - placed.w
    if placed.x < area.x:
        placed.x = area.x
        placed.w = min(placed.w, right - area.x)
    if placed.y + placed.h >= bottom:
        placed.y = bottom - placed.h
    if placed.y < area.y:
        placed.y = area.y
        placed.h = min(placed.h, bottom - area.y)
    return placed


@dataclass
class MenuState:
    """The state of one open menu.

    ``match`` narrows the entries to those fitting the search and
    ``display`` formats one entry. ``show_all`` lists every entry while the
    search is empty. ``file_mode`` lets Tab open path completion through
    ``complete_path``, which is given the search and returns the entry
    chosen there. Unless ``allow_dummy`` is set, an entry made up from the
    search rather than chosen from the list is not returned.
    """

    prompt: str = ""
    search: str = ""
    match: Callable[[Sequence[MenuItem], str], list[MenuItem]] = match_text
    display: Callable[[MenuItem, bool], str] = print_text
    show_all: bool = False
    file_mode: bool = False
    allow_dummy: bool = False
    complete_path: Callable[[str], MenuItem | None] | None = None
    line_height: int = 1
    text_width: Callable[[str], int] = len
    geom: Geom = field(default_factory=Geom)
    results: list[MenuItem] = field(default_factory=list)
    listing: bool = False
    changed: bool = False
    entry: int = -1
    prev: int = -1
    num: int = 1
    done: bool = False
    selected: MenuItem | None = None

    @property
    def header(self) -> str:
        """The prompt line with the search between its markers."""
        return f"{self.prompt}{PROMPT_START}{self.search}{PROMPT_END}"

    def _finish(self, item: MenuItem) -> MenuItem | None:
        self.done = True
        self.selected = None if item.dummy and not self.allow_dummy else item
        return self.selected

    def _complete(self) -> MenuItem:
        result = MenuItem()
        chosen = self.complete_path(self.search) if self.complete_path else None
        if chosen is not None:
            result.abort = chosen.abort
            result.dummy = chosen.dummy
            if chosen.text:
                result.text = f'{self.search} "{chosen.text}"'
            elif not result.abort:
                result.text = self.search
        return result

    def _common_prefix(self) -> None:
        first, *others = self.results
        prefix = first.text
        for item in others:
            length = 0
            for a, b in zip(prefix, item.text):
                if a.lower() != b.lower():
                    break
                length += 1
            prefix = prefix[:length]
        self.search = prefix

    def handle_key(
        self, ctl: Ctl, chars: str, items: Sequence[MenuItem]
    ) -> MenuItem | None:
        """Apply one key press.

        Returns the chosen entry once the menu closes, which also sets
        ``done``; ``None`` while it stays open or when a made-up entry is
        refused.
        """
        self.changed = False
        if ctl is Ctl.ERASEONE:
            if self.search:
                self.search = self.search[:-1]
                self.changed = True
        elif ctl is Ctl.UP:
            if self.results:
                self.results.insert(0, self.results.pop())
        elif ctl is Ctl.DOWN:
            if self.results:
                self.results.append(self.results.pop(0))
        elif ctl is Ctl.RETURN:
            if self.results:
                item = self.results[0]
            else:
                item = MenuItem(text=self.search, dummy=True)
            item.abort = False
            return self._finish(item)
        elif ctl is Ctl.WIPE:
            self.search = ""
            self.changed = True
        elif ctl is Ctl.TAB:
            if self.results:
                first = self.results[0]
                if self.file_mode and self.search.startswith(first.text):
                    return self._finish(self._complete())
                self._common_prefix()
                self.changed = True
        elif ctl is Ctl.ALL:
            self.show_all = not self.show_all
        elif ctl is Ctl.ABORT:
            return self._finish(MenuItem(text="", dummy=True, abort=True))

        if chars:
            self.changed = True
            self.search += chars

        if self.changed:
            if self.search:
                self.results = list(self.match(items, self.search))
        elif not self.show_all and self.listing:
            self.results = []
            self.listing = False
        return None

    def prepare_draw(self, items: Sequence[MenuItem]) -> list[str]:
        """Format the menu and size it; return the header and entry lines."""
        if self.show_all:
            if not self.results:
                self.results = list(items)
                self.listing = True
            elif self.changed:
                self.listing = False
        lines = [self.header]
        lines.extend(self.display(item, self.listing) for item in self.results)
        self.geom.w = max(self.text_width(line) for line in lines)
        self.geom.h = self.line_height * len(lines)
        self.num = len(lines)
        return lines

    def calc_entry(self, x: int, y: int) -> int:
        """The entry number under the point, counted from 1, or -1 for none."""
        if (
            x < 0
            or x > self.geom.w
            or y < 0
            or y > self.line_height * self.num
        ):
            return -1
        entry = y // self.line_height
        if entry <= 0 or entry >= self.num:
            return -1
        return entry

    def release(self, x: int, y: int) -> MenuItem | None:
        """Choose the entry under the point when the mouse button is let go."""
        entry = self.calc_entry(x, y)
        if 1 <= entry <= len(self.results):
            item = self.results[entry - 1]
        else:
            item = MenuItem(text="", dummy=True)
        return self._finish(item)