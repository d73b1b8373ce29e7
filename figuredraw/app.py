"""Tk window for drawing and linking figures."""

from __future__ import annotations

import tkinter as tk
from functools import partial
from tkinter import filedialog, messagebox
from typing import Any, Iterable, Sequence

from figuredraw.editor import Cursor, Editor, Mode, MouseButton
from figuredraw.figures import Painter, Point

_JSON_FILES = [("JSON Files", "*.json")]
_MOUSE_BUTTONS = {1: MouseButton.LEFT, 2: MouseButton.MIDDLE, 3: MouseButton.RIGHT}
_CURSORS = {Cursor.ARROW: "arrow", Cursor.CLOSED_HAND: "fleur"}
_BUTTON1_MASK = 0x0100


class TkPainter(Painter):
    """Paints onto a Tk canvas."""

    def __init__(self, canvas: Any, colour: str = "black") -> None:
        super().__init__()
        self.canvas = canvas
        self.colour = colour

    def draw_rect(self, leftup: Point, rightdown: Point) -> None:
        self.canvas.create_rectangle(*leftup, *rightdown, outline=self.colour)

    def draw_ellipse(self, leftup: Point, rightdown: Point) -> None:
        self.canvas.create_oval(*leftup, *rightdown, outline=self.colour)

    def draw_polygon(self, points: Iterable[Point]) -> None:
        coords = [c for point in points for c in point]
        self.canvas.create_polygon(*coords, outline=self.colour, fill="")

    def draw_line(self, start: Point, end: Point) -> None:
        self.canvas.create_line(*start, *end, fill=self.colour)


class MainWindow:
    """Toolbar and canvas wired to an editor."""

    _MODE_BUTTONS = (
        ("Прямоугольник", Mode.DRAW_RECTANGLE),
        ("Эллипс", Mode.DRAW_ELLIPSE),
        ("Треугольник", Mode.DRAW_TRIANGLE),
        ("Связь", Mode.CONNECT),
        ("Переместить", Mode.MOVE),
        ("Удалить", Mode.ERASE),
    )

    def __init__(self, root: Any) -> None:
        self.root = root
        root.title("Фигуры")

        toolbar = tk.Frame(root)
        toolbar.pack(side=tk.TOP, fill=tk.X)
        for label, mode in self._MODE_BUTTONS:
            tk.Button(toolbar, text=label, command=partial(self.set_mode, mode)).pack(side=tk.LEFT)
        tk.Button(toolbar, text="Сохранить", command=self.save_dialog).pack(side=tk.LEFT)
        tk.Button(toolbar, text="Загрузить", command=self.load_dialog).pack(side=tk.LEFT)

        self.canvas = tk.Canvas(root, background="white", width=800, height=600, highlightthickness=0)
        self.canvas.pack(side=tk.TOP, fill=tk.BOTH, expand=True)
        self.painter = TkPainter(self.canvas)
        self.editor = Editor(on_change=self.redraw)

        self.canvas.bind("<ButtonPress>", self._on_press)
        self.canvas.bind("<ButtonRelease>", self._on_release)
        self.canvas.bind("<Motion>", self._on_motion)
        self.canvas.bind("<Key>", self._on_key)

    def set_mode(self, mode: Mode) -> None:
        """Switch the editor to ``mode``."""
        self.editor.set_mode(mode)

    def save_dialog(self) -> None:
        """Ask for a file name and save the drawing there."""
        path = filedialog.asksaveasfilename(parent=self.root, title="Сохранить рисунок", filetypes=_JSON_FILES)
        if not path:
            return
        try:
            self.editor.save(path)
        except OSError:
            messagebox.showerror("Ошибка сохранения", "Файл не был сохранён!", parent=self.root)

    def load_dialog(self) -> None:
        """Ask for a file and load the drawing from it."""
        path = filedialog.askopenfilename(parent=self.root, title="Открыть рисунок", filetypes=_JSON_FILES)
        if not path:
            return
        try:
            self.editor.load(path)
        except (OSError, ValueError):
            messagebox.showerror("Ошибка загрузки", "Не получается открыть рисунок!", parent=self.root)

    def redraw(self) -> None:
        """Repaint the canvas from the editor's state."""
        self.canvas.delete("all")
        self.editor.paint(self.painter)
        self._sync_cursor()

    def _sync_cursor(self) -> None:
        self.canvas.configure(cursor=_CURSORS[self.editor.cursor])

    def _on_press(self, event: Any) -> None:
        self.canvas.focus_set()
        button = _MOUSE_BUTTONS.get(event.num)
        if button is not None:
            self.editor.mouse_press(Point(event.x, event.y), button)
        self._sync_cursor()

    def _on_release(self, event: Any) -> None:
        button = _MOUSE_BUTTONS.get(event.num)
        if button is not None:
            self.editor.mouse_release(Point(event.x, event.y), button)
        self._sync_cursor()

    def _on_motion(self, event: Any) -> None:
        self.editor.mouse_move(Point(event.x, event.y), bool(event.state & _BUTTON1_MASK))

    def _on_key(self, event: Any) -> None:
        self.editor.key_press(event.keysym)
        self._sync_cursor()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the drawing window and run until it is closed."""
    root = tk.Tk()
    MainWindow(root)
    root.mainloop()
    return 0