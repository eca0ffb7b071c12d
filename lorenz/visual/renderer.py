"""
Trail renderer using QPainter
"""

from typing import Iterable

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPainter, QColor

from ..core.integrator import TrailPoint


def render(painter: QPainter, history: Iterable[TrailPoint], diameter: int = 3, antialias: bool = True):
    """
    Draw every trail point as a filled disc, oldest first

    Args:
        painter: Active painter on the target surface
        history: Trail points in insertion order
        diameter: Disc size in pixels; each point is the disc's top-left corner
        antialias: Enable antialiased edges
    """
    painter.setRenderHint(QPainter.RenderHint.Antialiasing, antialias)
    painter.setPen(Qt.PenStyle.NoPen)

    # Only swap brushes when the colour changes
    last_color = None
    for point in history:
        if point.color != last_color:
            painter.setBrush(QColor(*point.color))
            last_color = point.color
        painter.drawEllipse(point.screen_x, point.screen_y, diameter, diameter)
