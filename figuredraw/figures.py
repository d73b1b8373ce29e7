"""Drawable figures: rectangles, ellipses and triangles on an integer grid."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, ClassVar, Iterable, NamedTuple


class Point(NamedTuple):
    """A point on the integer drawing grid."""

    x: int
    y: int

    def translated(self, dx: int, dy: int) -> Point:
        """Return this point shifted by ``dx`` and ``dy``."""
        return Point(self.x + dx, self.y + dy)


class FigureClass(IntEnum):
    """Kind of figure, as stored in saved drawings."""

    ELLIPSE = 0
    RECTANGLE = 1
    TRIANGLE = 2


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _span_contains(value: int, start: int, end: int) -> bool:
    """Whether ``value`` lies in the inclusive span of a rectangle side."""
    low, high = (end, start) if end < start - 1 else (start, end)
    return low <= value <= high


class Painter:
    """Receives drawing commands; this base class records them in order."""

    def __init__(self) -> None:
        self.commands: list[tuple[Any, ...]] = []

    def draw_rect(self, leftup: Point, rightdown: Point) -> None:
        """Draw the outline of the rectangle spanned by two corners."""
        self.commands.append(("rect", leftup, rightdown))

    def draw_ellipse(self, leftup: Point, rightdown: Point) -> None:
        """Draw the ellipse inscribed in the rectangle spanned by two corners."""
        self.commands.append(("ellipse", leftup, rightdown))

    def draw_polygon(self, points: Iterable[Point]) -> None:
        """Draw a closed polygon through the given points."""
        self.commands.append(("polygon", tuple(points)))

    def draw_line(self, start: Point, end: Point) -> None:
        """Draw a straight line between two points."""
        self.commands.append(("line", start, end))


class Figure(ABC):
    """A figure placed by its bounding corners."""

    kind: ClassVar[FigureClass]

    def __init__(self, leftup: Iterable[int], rightdown: Iterable[int]) -> None:
        self.leftup = Point(*leftup)
        self.rightdown = Point(*rightdown)
        self.center = Point(
            _trunc_div(self.leftup.x + self.rightdown.x, 2),
            _trunc_div(self.leftup.y + self.rightdown.y, 2),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.leftup!r}, {self.rightdown!r})"

    def to_json(self, figure_id: int) -> dict[str, int]:
        """Return the figure as a JSON-ready mapping tagged with ``figure_id``."""
        return {
            "id": figure_id,
            "lu_x": self.leftup.x,
            "lu_y": self.leftup.y,
            "rd_x": self.rightdown.x,
            "rd_y": self.rightdown.y,
            "class": int(self.kind),
        }

    def move(self, dx: int, dy: int) -> None:
        """Shift the figure by ``dx`` and ``dy``."""
        self.leftup = self.leftup.translated(dx, dy)
        self.rightdown = self.rightdown.translated(dx, dy)
        self.center = self.center.translated(dx, dy)

    def _in_bounds(self, point: Point) -> bool:
        return _span_contains(point.x, self.leftup.x, self.rightdown.x) and _span_contains(
            point.y, self.leftup.y, self.rightdown.y
        )

    @abstractmethod
    def contains(self, point: Point) -> bool:
        """Whether ``point`` hits the figure."""

    @abstractmethod
    def draw(self, painter: Painter) -> None:
        """Draw the figure with ``painter``."""


class Rectangle(Figure):
    """An axis-aligned rectangle."""

    kind = FigureClass.RECTANGLE

    def move(self, dx: int, dy: int) -> None:
        super().move(dx, dy)

    def contains(self, point: Point) -> bool:
        return self._in_bounds(Point(*point))

    def draw(self, painter: Painter) -> None:
        painter.draw_rect(self.leftup, self.rightdown)


class Ellipse(Figure):
    """An ellipse inscribed in its bounding rectangle."""

    kind = FigureClass.ELLIPSE

    def move(self, dx: int, dy: int) -> None:
        super().move(dx, dy)

    def contains(self, point: Point) -> bool:
        point = Point(*point)
        if not self._in_bounds(point):
            return False
        a = abs(self.rightdown.x - self.leftup.x + 1) // 2
        b = abs(self.rightdown.y - self.leftup.y + 1) // 2
        if a == 0 or b == 0:
            return True
        x = point.x - self.center.x
        y = point.y - self.center.y
        return (x * x) // (a * a) + (y * y) // (b * b) <= 1

    def draw(self, painter: Painter) -> None:
        painter.draw_ellipse(self.leftup, self.rightdown)


class Triangle(Figure):
    """An isosceles triangle with its apex at the top of its bounding box."""

    kind = FigureClass.TRIANGLE

    def __init__(self, leftup: Iterable[int], rightdown: Iterable[int]) -> None:
        super().__init__(leftup, rightdown)
        lu, rd = self.leftup, self.rightdown
        center_x = _trunc_div(lu.x + rd.x, 2)
        center_y = _trunc_div((rd.y - lu.y) * 2, 3) + lu.y
        self.center = Point(center_x, center_y)
        self.polygon: tuple[Point, ...] = (rd, Point(lu.x, rd.y), Point(center_x, lu.y))

    def move(self, dx: int, dy: int) -> None:
        super().move(dx, dy)
        self.polygon = tuple(p.translated(dx, dy) for p in self.polygon)

    def contains(self, point: Point) -> bool:
        point = Point(*point)
        winding = 0
        for (x1, y1), (x2, y2) in zip(self.polygon, self.polygon[1:] + self.polygon[:1]):
            if y1 == y2:
                continue
            direction = 1
            if y2 < y1:
                x1, x2, y1, y2 = x2, x1, y2, y1
                direction = -1
            if y1 <= point.y < y2:
                crossing = x1 + (x2 - x1) / (y2 - y1) * (point.y - y1)
                if crossing <= point.x:
                    winding += direction
        return winding % 2 != 0

    def draw(self, painter: Painter) -> None:
        painter.draw_polygon(self.polygon)


_FIGURE_TYPES: dict[FigureClass, type[Figure]] = {
    FigureClass.ELLIPSE: Ellipse,
    FigureClass.RECTANGLE: Rectangle,
    FigureClass.TRIANGLE: Triangle,
}


def create_figure(figure_class: int, leftup: Iterable[int], rightdown: Iterable[int]) -> Figure | None:
    """Build a figure of the given class, or return None for an unknown class."""
    try:
        kind = FigureClass(figure_class)
    except ValueError:
        return None
    return _FIGURE_TYPES[kind](leftup, rightdown)