"""Screen, region and window geometry."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace


@dataclass
class Geom:
    """A rectangle with origin ``(x, y)`` and size ``w`` by ``h``."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    def contains(self, x: int, y: int) -> bool:
        """True when the point lies inside; right and bottom edges excluded."""
        return self.x <= x < self.x + self.w and self.y <= y < self.y + self.h


@dataclass(frozen=True)
class Gap:
    """Space reserved at the screen edges."""

    top: int = 0
    bottom: int = 0
    left: int = 0
    right: int = 0

    def apply(self, geom: Geom) -> Geom:
        """Return ``geom`` shrunk by the gap on every side."""
        return Geom(
            geom.x + self.left,
            geom.y + self.top,
            geom.w - (self.left + self.right),
            geom.h - (self.top + self.bottom),
        )


@dataclass
class Region:
    """One output of a screen, with its full and usable areas."""

    num: int
    view: Geom
    work: Geom


@dataclass
class Window:
    """A managed window's frame geometry and border width."""

    geom: Geom
    bwidth: int = 0
    screen: Screen | None = None


@dataclass
class Screen:
    """A screen with its display area, gap and output regions."""

    which: int = 0
    gap: Gap = field(default_factory=Gap)
    view: Geom = field(default_factory=Geom)
    work: Geom = field(default_factory=Geom)
    regions: list[Region] = field(default_factory=list)

    def find_region(self, x: int, y: int) -> Region | None:
        """The first region containing the point, if any."""
        return next((rc for rc in self.regions if rc.view.contains(x, y)), None)

    def area(self, x: int, y: int, apply_gap: bool) -> Geom:
        """The area of the region holding the point, or the whole screen."""
        region = self.find_region(x, y)
        area = replace(region.view if region is not None else self.view)
        if apply_gap:
            area = self.gap.apply(area)
        return area

    def update_geometry(
        self, width: int, height: int, outputs: Sequence[Geom | None] | None
    ) -> None:
        """Reset the screen to ``width`` by ``height`` and rebuild its regions.

        ``outputs`` lists the output areas by index, ``None`` for an index
        with nothing connected; when ``outputs`` itself is ``None`` the whole
        display is one region.
        """
        self.view = Geom(0, 0, width, height)
        self.work = self.gap.apply(self.view)
        self.regions = []
        if outputs is None:
            view = Geom(0, 0, width, height)
            self.regions.append(Region(0, view, self.gap.apply(view)))
            return
        for num, output in enumerate(outputs):
            if output is None:
                continue
            view = replace(output)
            self.regions.append(Region(num, view, self.gap.apply(view)))

    def assert_clients_within(self, windows: Iterable[Window]) -> list[Window]:
        """Move windows lying wholly off the screen back to its top left.

        Windows bound to another screen are left alone.  Returns the
        windows that were moved.
        """
        moved = []
        for win in windows:
            if win.screen is not None and win.screen is not self:
                continue
            g = win.geom
            top = g.y
            left = g.x
            right = g.x + g.w + win.bwidth * 2 - 1
            bottom = g.y + g.h + win.bwidth * 2 - 1
            if top > self.view.h or left > self.view.w or bottom < 0 or right < 0:
                g.x = self.gap.left
                g.y = self.gap.top
                moved.append(win)
        return moved