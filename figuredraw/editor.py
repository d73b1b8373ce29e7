"""Interactive editing state: drawing, linking, moving and erasing figures."""

from __future__ import annotations

import json
from enum import Enum, auto
from os import PathLike
from pathlib import Path
from typing import Any, Callable, Iterable

from figuredraw.connection import Connection
from figuredraw.figures import Ellipse, Figure, Painter, Point, Rectangle, Triangle, create_figure


class Mode(Enum):
    """What a left click on the canvas does."""

    NONE = auto()
    DRAW_TRIANGLE = auto()
    DRAW_ELLIPSE = auto()
    DRAW_RECTANGLE = auto()
    CONNECT = auto()
    MOVE = auto()
    ERASE = auto()


class MouseButton(Enum):
    """Mouse buttons the editor distinguishes."""

    LEFT = auto()
    MIDDLE = auto()
    RIGHT = auto()


class Cursor(Enum):
    """Pointer shape the editor asks for."""

    ARROW = auto()
    CLOSED_HAND = auto()


_DRAW_MODES: dict[Mode, type[Figure]] = {
    Mode.DRAW_RECTANGLE: Rectangle,
    Mode.DRAW_ELLIPSE: Ellipse,
    Mode.DRAW_TRIANGLE: Triangle,
}

_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def _to_int(value: Any) -> int:
    """Read a JSON value as an integer, defaulting to 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value if _INT_MIN <= value <= _INT_MAX else 0
    if isinstance(value, float) and value.is_integer() and _INT_MIN <= value <= _INT_MAX:
        return int(value)
    return 0


def _as_object(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_array(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


class Editor:
    """Holds the drawing and reacts to mouse and keyboard input."""

    def __init__(self, on_change: Callable[[], None] | None = None) -> None:
        self.figures: list[Figure] = []
        self.connections: list[Connection] = []
        self.mode = Mode.NONE
        self.drawing = False
        self.start_point = Point(0, 0)
        self.temp_point = Point(0, 0)
        self.first_connection: Figure | None = None
        self.moving_figure: Figure | None = None
        self.cursor = Cursor.ARROW
        self._on_change = on_change

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()

    def set_mode(self, mode: Mode) -> None:
        """Cancel any action in progress and switch to ``mode``."""
        self.abort_current_action()
        self.mode = mode

    def save(self, path: str | PathLike[str]) -> None:
        """Write the drawing to ``path`` as JSON."""
        self.abort_current_action()
        document = {
            "figures": [figure.to_json(i) for i, figure in enumerate(self.figures)],
            "connections": [
                {"first": self.figures.index(c.first), "second": self.figures.index(c.second)}
                for c in self.connections
            ],
        }
        Path(path).write_text(json.dumps(document, indent=4, sort_keys=True) + "\n", encoding="utf-8")

    def load(self, path: str | PathLike[str]) -> None:
        """Replace the drawing with the one stored in ``path``.

        Raises OSError if the file cannot be read and ValueError if a
        connection refers to a figure id that is not in the file. A file
        that is not valid JSON leaves the drawing empty.
        """
        self.abort_current_action()
        self.figures.clear()
        self.connections.clear()

        data = Path(path).read_bytes()
        try:
            document = json.loads(data)
        except ValueError:
            return
        if not isinstance(document, (dict, list)):
            return
        root = _as_object(document)

        by_id: dict[int, Figure] = {}
        for entry in map(_as_object, _as_array(root.get("figures"))):
            figure = create_figure(
                _to_int(entry.get("class")),
                Point(_to_int(entry.get("lu_x")), _to_int(entry.get("lu_y"))),
                Point(_to_int(entry.get("rd_x")), _to_int(entry.get("rd_y"))),
            )
            if figure is not None:
                self.figures.append(figure)
                by_id[_to_int(entry.get("id"))] = figure

        for entry in map(_as_object, _as_array(root.get("connections"))):
            try:
                first = by_id[_to_int(entry.get("first"))]
                second = by_id[_to_int(entry.get("second"))]
            except KeyError as exc:
                raise ValueError(f"connection refers to unknown figure id {exc.args[0]}") from None
            self.connections.append(Connection(first, second))

        self._changed()

    def mouse_press(self, point: Iterable[int], button: MouseButton) -> None:
        """Handle a mouse button going down at ``point``."""
        if button is MouseButton.RIGHT:
            self.abort_current_action()
            return
        if button is not MouseButton.LEFT:
            return
        point = Point(*point)

        if self.mode in _DRAW_MODES:
            self.start_point = point
            self.temp_point = point
            self.drawing = True
        elif self.mode is Mode.CONNECT:
            figure = self.figure_at(point)
            if figure is None:
                self.first_connection = None
            elif self.first_connection is None:
                self.temp_point = point
                self.first_connection = figure
            elif self.first_connection is not figure:
                self.add_connection(self.first_connection, figure)
                self.first_connection = None
            else:
                self.first_connection = None
            self._changed()
        elif self.mode is Mode.MOVE:
            figure = self.figure_at(point)
            if figure is not None:
                self.moving_figure = figure
                self.start_point = point
                self.cursor = Cursor.CLOSED_HAND
        elif self.mode is Mode.ERASE:
            figure = self.figure_at(point)
            if figure is not None:
                self.erase_figure(figure)
            self._changed()

    def mouse_move(self, point: Iterable[int], left_held: bool) -> None:
        """Handle the pointer moving to ``point``."""
        point = Point(*point)
        if self.mode in _DRAW_MODES:
            if self.drawing:
                self.temp_point = point
                self._changed()
        elif self.mode is Mode.CONNECT:
            if self.first_connection is not None:
                self.temp_point = point
                self._changed()
        elif self.mode is Mode.MOVE:
            if self.moving_figure is not None and left_held:
                self.moving_figure.move(point.x - self.start_point.x, point.y - self.start_point.y)
                self.start_point = point
                self._changed()

    def mouse_release(self, point: Iterable[int], button: MouseButton) -> None:
        """Handle a mouse button going up; finishes drawing or moving."""
        if button is not MouseButton.LEFT:
            return
        if self.drawing:
            figure_type = _DRAW_MODES.get(self.mode)
            if figure_type is not None:
                self.figures.append(figure_type(self.start_point, self.temp_point))
            self.drawing = False
            self._changed()
        if self.moving_figure is not None and self.mode is Mode.MOVE:
            self.moving_figure = None
            self.cursor = Cursor.ARROW

    def key_press(self, key: str) -> None:
        """Handle a key press; Escape cancels the current action."""
        if key == "Escape":
            self.abort_current_action()

    def paint(self, painter: Painter) -> None:
        """Draw figures, connections and any action in progress."""
        for figure in self.figures:
            figure.draw(painter)
        for connection in self.connections:
            connection.draw(painter)

        if self.drawing:
            if self.mode is Mode.DRAW_RECTANGLE:
                painter.draw_rect(self.start_point, self.temp_point)
            elif self.mode is Mode.DRAW_ELLIPSE:
                painter.draw_ellipse(self.start_point, self.temp_point)
            elif self.mode is Mode.DRAW_TRIANGLE:
                Triangle(self.start_point, self.temp_point).draw(painter)

        if self.first_connection is not None:
            painter.draw_line(self.first_connection.center, self.temp_point)

    def abort_current_action(self) -> None:
        """Cancel drawing, linking or moving."""
        self.drawing = False
        self.first_connection = None
        self.moving_figure = None
        self.cursor = Cursor.ARROW
        self._changed()

    def figure_at(self, point: Iterable[int]) -> Figure | None:
        """Return the topmost figure under ``point``, if any."""
        point = Point(*point)
        return next((f for f in reversed(self.figures) if f.contains(point)), None)

    def add_connection(self, first: Figure, second: Figure) -> None:
        """Link two figures unless they are linked already."""
        if any(c.contains(first) and c.contains(second) for c in self.connections):
            return
        self.connections.append(Connection(first, second))

    def erase_figure(self, figure: Figure) -> None:
        """Remove ``figure`` and every connection that touches it."""
        self.connections[:] = [c for c in self.connections if not c.contains(figure)]
        self.figures.remove(figure)