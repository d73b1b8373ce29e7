"""Lines joining the centres of two figures."""

from __future__ import annotations

from dataclasses import dataclass

from figuredraw.figures import Figure, Painter


@dataclass(eq=False)
class Connection:
    """A link between two figures, drawn centre to centre."""

    first: Figure
    second: Figure

    def contains(self, figure: Figure) -> bool:
        """Whether ``figure`` is one of the two linked figures."""
        return figure is self.first or figure is self.second

    def draw(self, painter: Painter) -> None:
        """Draw the line between the centres of both figures."""
        painter.draw_line(self.first.center, self.second.center)