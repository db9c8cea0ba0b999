"""Axis-aligned rectangle primitives in screen pixels."""

from dataclasses import dataclass

from drumjot.units import Pixels


@dataclass(frozen=True)
class Point:
    x: Pixels
    y: Pixels

    def translate(self, x: float, y: float) -> "Point":
        return Point(Pixels(self.x + x), Pixels(self.y + y))


@dataclass(frozen=True)
class Box:
    """Rectangle anchored at its top-left corner."""

    x: Pixels
    y: Pixels
    width: Pixels
    height: Pixels

    @property
    def x1(self) -> Pixels:
        return self.x

    @property
    def x2(self) -> Pixels:
        return Pixels(self.x + self.width)

    @property
    def y1(self) -> Pixels:
        return self.y

    @property
    def y2(self) -> Pixels:
        return Pixels(self.y + self.height)

    def encloses(self, p: Point) -> bool:
        """True if ``p`` lies strictly inside the box (edges excluded)."""
        return self.x1 < p.x < self.x2 and self.y1 < p.y < self.y2

    @classmethod
    def create(cls, p1: Point, p2: Point) -> "Box":
        """Box spanning two opposite corners given in any order."""
        left, right = sorted((p1.x, p2.x))
        top, bottom = sorted((p1.y, p2.y))
        return cls(left, top, Pixels(right - left), Pixels(bottom - top))
