from figuredraw.connection import Connection
from figuredraw.figures import Ellipse, Painter, Point, Rectangle


def test_contains_both_ends_only():
    a = Rectangle(Point(0, 0), Point(10, 10))
    b = Ellipse(Point(20, 20), Point(30, 30))
    c = Rectangle(Point(40, 40), Point(50, 50))
    link = Connection(a, b)
    assert link.contains(a)
    assert link.contains(b)
    assert not link.contains(c)


def test_contains_uses_identity():
    a = Rectangle(Point(0, 0), Point(10, 10))
    twin = Rectangle(Point(0, 0), Point(10, 10))
    link = Connection(a, a)
    assert not link.contains(twin)


def test_draw_line_between_centers():
    a = Rectangle(Point(0, 0), Point(10, 10))
    b = Rectangle(Point(20, 20), Point(30, 30))
    painter = Painter()
    Connection(a, b).draw(painter)
    assert painter.commands == [("line", a.center, b.center)]


def test_draw_follows_moved_figure():
    a = Rectangle(Point(0, 0), Point(10, 10))
    b = Rectangle(Point(20, 20), Point(30, 30))
    link = Connection(a, b)
    old_center = b.center
    b.move(3, 4)
    painter = Painter()
    link.draw(painter)
    assert painter.commands[0][2] == old_center.translated(3, 4)