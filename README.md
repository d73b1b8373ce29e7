# figuredraw

figuredraw is a small desktop editor for simple diagrams. You can draw rectangles,
ellipses and triangles, join them with connecting lines, and move them around the
canvas. A connection runs between the centres of two figures, so it follows a
figure when you move it. Drawings are saved to JSON files and loaded back from them.

## Installing

```
pip install .
```

The window uses tkinter, which is part of the standard library. On some Linux
distributions it comes in a separate system package, for example `python3-tk`.

## Running

```
figuredraw
```

This opens an 800×600 window with a toolbar above a white canvas. The toolbar
labels are in Russian:

- **Прямоугольник** (rectangle), **Эллипс** (ellipse), **Треугольник** (triangle):
  press the left mouse button, drag and release to draw the figure inside the
  dragged box. A triangle has its apex at the middle of the top edge of the box.
- **Связь** (connect): click one figure, then another, to join them with a line.
  If you click the same figure again, or click empty space, the pending
  connection is dropped. The same two figures are never connected twice.
- **Переместить** (move): drag a figure with the left mouse button.
- **Удалить** (delete): click a figure to remove it together with its connections.
- **Сохранить** / **Загрузить** (save / load): write the drawing to a JSON file,
  or read one back. If a file cannot be written or read, an error box appears.

When figures overlap, a click acts on the one drawn last. The right mouse button
cancels whatever you are doing. So does the Escape key, once the canvas has the
keyboard focus; it gets the focus when you click on it.

## Using it as a library

The editing logic in `figuredraw.editor` and `figuredraw.figures` does not depend
on any GUI toolkit:

```python
from figuredraw.editor import Editor, Mode, MouseButton
from figuredraw.figures import Painter, Point

editor = Editor()
editor.set_mode(Mode.DRAW_RECTANGLE)
editor.mouse_press(Point(10, 10), MouseButton.LEFT)
editor.mouse_move(Point(60, 40), left_held=True)
editor.mouse_release(Point(60, 40), MouseButton.LEFT)
editor.save("drawing.json")

painter = Painter()
editor.paint(painter)
print(painter.commands)  # [('rect', Point(x=10, y=10), Point(x=60, y=40))]
```

`Editor` has these members:

- `figures` and `connections`: the current drawing.
- `mode`: the current `Mode`.
- `cursor`: the `Cursor` the editor asks for.
- `figure_at(point)`: returns the topmost figure under a point.
- `add_connection(first, second)` and `erase_figure(figure)`: change the drawing directly.
- `on_change`: an optional callback, passed to the constructor. The editor calls
  it whenever the picture should be repainted.

To render a drawing, pass any object that has the methods of
`figuredraw.figures.Painter` to `Editor.paint`. Those methods are `draw_rect`,
`draw_ellipse`, `draw_polygon` and `draw_line`. The base `Painter` only records
the calls in its `commands` list. `figuredraw.app.TkPainter` draws them on a Tk
canvas.

`figuredraw.figures.create_figure(figure_class, leftup, rightdown)` builds a
`Rectangle`, `Ellipse` or `Triangle` from a `FigureClass` value. It returns
`None` for an unknown class.

## File format

A saved drawing is a JSON object with two arrays:

- `figures`: each entry has `id`, `class` (0 = ellipse, 1 = rectangle,
  2 = triangle) and the bounding box corners `lu_x`, `lu_y`, `rd_x`, `rd_y`.
  On saving, a figure's id is its position in the drawing.
- `connections`: each entry has `first` and `second`, which are the ids of the
  two figures it joins.

When a file is loaded, figures with an unknown `class` are skipped. A file that
is not valid JSON gives an empty drawing. `Editor.load` raises `ValueError` if a
connection refers to an id that no figure in the file has, and `OSError` if the
file cannot be read.

## Limitations

Figures are drawn as black outlines only. There are no colours, fills or text
labels. Figures cannot be resized once drawn, and there is no undo. Drawings can
be stored only in the JSON format above; there is no export to image files.