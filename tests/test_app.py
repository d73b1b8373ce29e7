import json
from unittest.mock import MagicMock, patch

import pytest

from figuredraw.app import MainWindow, TkPainter, main
from figuredraw.editor import Editor, Mode
from figuredraw.figures import Point, Rectangle


@pytest.fixture
def window():
    with patch("figuredraw.app.tk") as tk_mock:
        yield MainWindow(tk_mock.Tk())


def test_painter_rect_and_ellipse():
    canvas = MagicMock()
    painter = TkPainter(canvas)
    painter.draw_rect(Point(1, 2), Point(3, 4))
    painter.draw_ellipse(Point(5, 6), Point(7, 8))
    canvas.create_rectangle.assert_called_once_with(1, 2, 3, 4, outline="black")
    canvas.create_oval.assert_called_once_with(5, 6, 7, 8, outline="black")


def test_painter_polygon_and_line():
    canvas = MagicMock()
    painter = TkPainter(canvas)
    painter.draw_polygon([Point(0, 0), Point(4, 0), Point(2, 3)])
    painter.draw_line(Point(1, 1), Point(9, 9))
    canvas.create_polygon.assert_called_once_with(0, 0, 4, 0, 2, 3, outline="black", fill="")
    canvas.create_line.assert_called_once_with(1, 1, 9, 9, fill="black")


def test_set_mode(window):
    window.set_mode(Mode.MOVE)
    assert window.editor.mode is Mode.MOVE


def test_redraw_paints_figures(window):
    window.editor.figures.append(Rectangle(Point(0, 0), Point(10, 10)))
    window.redraw()
    window.canvas.delete.assert_called_with("all")
    window.canvas.create_rectangle.assert_called_with(0, 0, 10, 10, outline="black")
    window.canvas.configure.assert_called_with(cursor="arrow")


def test_save_dialog_writes_file(window, tmp_path):
    path = tmp_path / "drawing.json"
    window.editor.figures.append(Rectangle(Point(5, 6), Point(10, 10)))
    with patch("figuredraw.app.filedialog") as dialog:
        dialog.asksaveasfilename.return_value = str(path)
        window.save_dialog()
    document = json.loads(path.read_text(encoding="utf-8"))
    assert len(document["figures"]) == 1
    loaded = Editor()
    loaded.load(path)
    assert [(f.leftup, f.rightdown) for f in loaded.figures] == [(Point(5, 6), Point(10, 10))]


def test_save_dialog_cancel_writes_nothing(window, tmp_path):
    window.editor.figures.append(Rectangle(Point(0, 0), Point(10, 10)))
    with patch("figuredraw.app.filedialog") as dialog:
        dialog.asksaveasfilename.return_value = ""
        window.save_dialog()
    assert list(tmp_path.iterdir()) == []
    assert [f.leftup for f in window.editor.figures] == [Point(0, 0)]


def test_load_dialog_loads_file(window, tmp_path):
    path = tmp_path / "drawing.json"
    source = Editor()
    source.figures.append(Rectangle(Point(2, 3), Point(20, 30)))
    source.save(path)
    with patch("figuredraw.app.filedialog") as dialog:
        dialog.askopenfilename.return_value = str(path)
        window.load_dialog()
    assert [f.leftup for f in window.editor.figures] == [Point(2, 3)]


def test_load_dialog_reports_error(window, tmp_path):
    window.set_mode(Mode.CONNECT)
    with patch("figuredraw.app.filedialog") as dialog, patch("figuredraw.app.messagebox") as box:
        dialog.askopenfilename.return_value = str(tmp_path / "missing.json")
        window.load_dialog()
    assert box.showerror.call_count == 1
    assert box.showerror.call_args.args[0] == "Ошибка загрузки"
    assert window.editor.mode is Mode.CONNECT
    assert window.editor.figures == []


def test_main_runs_event_loop():
    with patch("figuredraw.app.tk") as tk_mock:
        assert main([]) == 0
    tk_mock.Tk.return_value.mainloop.assert_called_once_with()