"""Screen geometry: positions, window rectangles, size hints and viewports."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field, replace

# ICCCM WM_NORMAL_HINTS flag bits.
P_MIN_SIZE = 1 << 4
P_MAX_SIZE = 1 << 5
P_RESIZE_INC = 1 << 6
P_ASPECT = 1 << 7
P_BASE_SIZE = 1 << 8


class Direction(enum.IntFlag):
    """Directions for moving, resizing and snapping windows."""

    NORTH = 1
    EAST = 2
    SOUTH = 4
    WEST = 8


class Coordinates(enum.Enum):
    """Reference frame for a point: the root window or the window itself."""

    ROOT = "root"
    WINDOW = "window"


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _cmod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    return a - b * _cdiv(a, b)


def _ratio(a: float, b: float) -> float:
    if b == 0:
        if a == 0:
            return math.nan
        return math.inf if a > 0 else -math.inf
    return a / b


@dataclass
class Position:
    """A point in pixels."""

    x: int = 0
    y: int = 0

    def move_inside(self, geom: Geometry) -> None:
        """Clamp the point to lie within a rectangle of the given size."""
        if self.x < 0:
            self.x = 0
        elif self.x > geom.w - 1:
            self.x = geom.w - 1
        if self.y < 0:
            self.y = 0
        elif self.y > geom.h - 1:
            self.y = geom.h - 1

    def move(self, direction: Direction, amount: int) -> None:
        """Move the point by ``amount`` pixels in each given direction."""
        if direction & Direction.WEST:
            self.x -= amount
        if direction & Direction.EAST:
            self.x += amount
        if direction & Direction.NORTH:
            self.y -= amount
        if direction & Direction.SOUTH:
            self.y += amount


@dataclass
class SizeHints:
    """Normalised window size hints."""

    flags: int = 0
    basew: int = 0
    baseh: int = 0
    minw: int = 1
    minh: int = 1
    maxw: int = 0
    maxh: int = 0
    incw: int = 1
    inch: int = 1
    mina: float = 0.0
    maxa: float = 0.0

    @classmethod
    def from_hints(
        cls,
        flags: int,
        base: tuple[int, int] = (0, 0),
        minimum: tuple[int, int] = (0, 0),
        maximum: tuple[int, int] = (0, 0),
        increment: tuple[int, int] = (0, 0),
        min_aspect: tuple[int, int] = (0, 0),
        max_aspect: tuple[int, int] = (0, 0),
    ) -> SizeHints:
        """Build hints from raw WM_NORMAL_HINTS values, applying fallbacks."""
        basew = baseh = 0
        if flags & P_BASE_SIZE:
            basew, baseh = base
        elif flags & P_MIN_SIZE:
            basew, baseh = minimum

        minw = minh = 0
        if flags & P_MIN_SIZE:
            minw, minh = minimum
        elif flags & P_BASE_SIZE:
            minw, minh = base

        maxw = maxh = 0
        if flags & P_MAX_SIZE:
            maxw, maxh = maximum

        incw = inch = 0
        if flags & P_RESIZE_INC:
            incw, inch = increment

        mina = maxa = 0.0
        if flags & P_ASPECT:
            if min_aspect[0] > 0:
                mina = min_aspect[1] / min_aspect[0]
            if max_aspect[1] > 0:
                maxa = max_aspect[0] / max_aspect[1]

        return cls(
            flags=flags,
            basew=basew,
            baseh=baseh,
            minw=max(1, minw),
            minh=max(1, minh),
            maxw=maxw,
            maxh=maxh,
            incw=max(1, incw),
            inch=max(1, inch),
            mina=mina,
            maxa=maxa,
        )


@dataclass
class BorderGap:
    """Gaps kept free at the edges of a screen."""

    top: int = 0
    bottom: int = 0
    left: int = 0
    right: int = 0


@dataclass
class Geometry:
    """A rectangle: origin and size in pixels."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    def center(self, coords: Coordinates) -> Position:
        """Return the centre in root or window coordinates."""
        if coords is Coordinates.ROOT:
            return Position(self.x + _cdiv(self.w, 2), self.y + _cdiv(self.h, 2))
        return Position(_cdiv(self.w, 2), _cdiv(self.h, 2))

    def contains(self, p: Position, coords: Coordinates) -> bool:
        """Whether ``p`` lies inside the rectangle."""
        if coords is Coordinates.ROOT:
            return (
                self.x <= p.x < self.x + self.w
                and self.y <= p.y < self.y + self.h
            )
        return 0 <= p.x < self.w and 0 <= p.y < self.h

    def intersects(self, view: Geometry, border: int) -> bool:
        """Whether the rectangle, with its border, overlaps ``view``."""
        if self.x + self.w + 2 * border - 1 < view.x:
            return False
        if self.y + self.h + 2 * border - 1 < view.y:
            return False
        if view.x + view.w < self.x:
            return False
        if view.y + view.h < self.y:
            return False
        return True

    def set_pos(self, p: Position) -> None:
        self.x = p.x
        self.y = p.y

    def set_menu_placement(self, p: Position, area: Geometry, border: int) -> None:
        """Place a top-level menu at ``p``, kept inside ``area``."""
        self.x = p.x
        self.y = p.y
        if self.x + self.w + 2 * border > area.x + area.w:
            self.x = area.x + area.w - self.w - 2 * border
        if self.y + self.h + 2 * border > area.y + area.h:
            self.y = area.y + area.h - self.h - 2 * border

    def set_submenu_placement(
        self, parent: Geometry, area: Geometry, ypos: int, border: int
    ) -> None:
        """Place a submenu beside its parent, flipping left when out of room."""
        self.x = parent.x + parent.w - 2 * border
        self.y = parent.y + ypos
        if self.x + self.w > area.x + area.w:
            self.x = parent.x - self.w + 2 * border
        if self.y + self.h > area.y + area.h:
            self.y = area.y + area.h - self.h

    def set_placement(self, p: Position, area: Geometry, border: int) -> None:
        """Place a new window near ``p``, kept inside ``area`` where it fits."""
        xpos = max(max(p.x, area.x) - _cdiv(self.w, 2), area.x) + 10
        ypos = max(max(p.y, area.y) - _cdiv(self.h, 2), area.y) + 10

        xspace = area.x + area.w - self.w - border * 2
        yspace = area.y + area.h - self.h - border * 2

        self.x = max(min(xpos, xspace), area.x) if xspace >= area.x else area.x
        self.y = max(min(ypos, yspace), area.y) if yspace >= area.y else area.y

    def set_user_placement(self, area: Geometry, border: int) -> None:
        """Keep a user-placed window at least partly on screen."""
        if self.x >= area.w:
            self.x = area.w - border - 1
        if self.x + self.w + border <= 0:
            self.x = -(self.w - border - 1)
        if self.y >= area.h:
            self.y = area.h - border - 1
        if self.y + self.h + border <= 0:
            self.y = -(self.h - border - 1)

    def adjust_for_maximized(self, area: Geometry, border: int) -> None:
        """Grow over the border where the window reaches the area's edge."""
        if self.x + self.w + border * 2 == area.w:
            self.w += border * 2
        if self.y + self.h + border * 2 == area.h:
            self.h += border * 2

    def move(self, direction: Direction, area: Geometry, border: int, amount: int) -> None:
        """Move by ``amount`` pixels, keeping part of the window visible."""
        if direction & Direction.WEST:
            self.x -= amount
        if direction & Direction.EAST:
            self.x += amount
        if direction & Direction.NORTH:
            self.y -= amount
        if direction & Direction.SOUTH:
            self.y += amount

        self.x = min(max(self.x, -(self.w - border - 1)), area.w - border - 1)
        self.y = min(max(self.y, -(self.h - border - 1)), area.h - border - 1)

    def resize(
        self, direction: Direction, hints: SizeHints, border: int, amount: int
    ) -> None:
        """Resize in steps: one increment if the hints give one, else ``amount``."""
        amt = 1 if hints.flags & P_RESIZE_INC else amount
        mx = my = 0
        if direction & Direction.WEST:
            mx = -amt
        if direction & Direction.EAST:
            mx = amt
        if direction & Direction.NORTH:
            my = -amt
        if direction & Direction.SOUTH:
            my = amt

        self.w += mx * hints.incw
        if self.w < hints.minw:
            self.w = hints.minw
        self.h += my * hints.inch
        if self.h < hints.minh:
            self.h = hints.minh
        if self.x + self.w + border - 1 < 0:
            self.x = -(self.w + border - 1)
        if self.y + self.h + border - 1 < 0:
            self.y = -(self.h + border - 1)

    def warp_to_edge(self, direction: Direction, area: Geometry, border: int) -> None:
        """Move flush against the given edges of ``area``."""
        if direction & Direction.WEST:
            self.x = area.x
        if direction & Direction.EAST:
            self.x = area.x + area.w - self.w - border
        if direction & Direction.NORTH:
            self.y = area.y
        if direction & Direction.SOUTH:
            self.y = area.y + area.h - self.h - border

    def snap_to_edge(self, area: Geometry, snapdist: int) -> None:
        """Snap to the nearest edges of ``area`` lying within ``snapdist``."""
        leftsnap = rightsnap = topsnap = bottomsnap = 0
        if abs(self.x - area.x) <= snapdist:
            leftsnap = area.x - self.x
        if abs(self.y - area.y) <= snapdist:
            topsnap = area.y - self.y
        if abs(self.x + self.w - area.x - area.w) <= snapdist:
            rightsnap = area.x + area.w - self.x - self.w
        if abs(self.y + self.h - area.y - area.h) <= snapdist:
            bottomsnap = area.y + area.h - self.y - self.h

        self.x += _pick_snap(leftsnap, rightsnap)
        self.y += _pick_snap(topsnap, bottomsnap)

    def apply_border_gap(self, gap: BorderGap) -> None:
        self.x += gap.left
        self.y += gap.top
        self.w -= gap.left + gap.right
        self.h -= gap.top + gap.bottom

    def apply_size_hints(self, hints: SizeHints) -> None:
        """Constrain the size to the hints (ICCCM 4.1.2.3)."""
        baseismin = hints.basew == hints.minw and hints.baseh == hints.minh

        if not baseismin:
            self.w -= hints.basew
            self.h -= hints.baseh

        if hints.mina and hints.maxa:
            if hints.maxa < _ratio(self.w, self.h):
                self.w = int(self.h * hints.maxa)
            elif hints.mina < _ratio(self.h, self.w):
                self.h = int(self.w * hints.mina)

        if baseismin:
            self.w -= hints.basew
            self.h -= hints.baseh

        self.w -= _cmod(self.w, hints.incw)
        self.h -= _cmod(self.h, hints.inch)

        self.w += hints.basew
        self.h += hints.baseh

        self.w = max(self.w, hints.minw)
        self.h = max(self.h, hints.minh)

        if hints.maxw:
            self.w = min(self.w, hints.maxw)
        if hints.maxh:
            self.h = min(self.h, hints.maxh)


def _pick_snap(near: int, far: int) -> int:
    if near and far:
        return near if abs(near) < abs(far) else far
    return near or far


@dataclass
class Viewport:
    """A monitor's area and its work area after the border gap."""

    num: int
    view: Geometry
    gap: BorderGap = field(default_factory=BorderGap)
    work: Geometry = field(init=False)

    def __post_init__(self) -> None:
        self.view = replace(self.view)
        self.work = replace(self.view)
        self.work.apply_border_gap(self.gap)

    def contains(self, p: Position) -> bool:
        return (
            self.view.x <= p.x < self.view.x + self.view.w
            and self.view.y <= p.y < self.view.y + self.view.h
        )