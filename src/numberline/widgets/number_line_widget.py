import logging
from typing import Literal, Optional
from PySide6.QtWidgets import QWidget
from PySide6.QtCore import Qt
from PySide6.QtGui import QPainter, QBrush

from numberline.colors.modes import ColorMap
from numberline.renderers.number_line import NumberLineRenderer
from numberline.scale.number_line import NumberLine

logger = logging.getLogger(__name__)


class NumberLineWidget(QWidget):
    def __init__(self, number_line: NumberLine, color_map: ColorMap, orientation: Literal['x', 'y'] = 'x', thickness: int = 40, zoom_speed: float = 0.5, parent: Optional[QWidget] = None) -> None:
        """
        Create a ruler widget showing number_line.

        Ctrl + wheel zooms around the mouse position, changing the magnification by
        zoom_speed per wheel notch. The plain wheel pans.
        """
        super().__init__(parent)
        self.number_line: NumberLine = number_line
        self.color_map: ColorMap = color_map
        self.orientation: Literal['x', 'y'] = orientation
        self.thickness: int = thickness
        self.zoom_speed: float = zoom_speed
        self.renderer = NumberLineRenderer(color_map, orientation)

        if orientation == 'x':
            self.setFixedHeight(thickness)
        else:
            self.setFixedWidth(thickness)

    def view_length(self) -> float:
        return self.width() if self.orientation == 'x' else self.height()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setBrush(QBrush(self.color_map.get_object_color("surface-base")))
        painter.setPen(Qt.PenStyle.NoPen)
        painter.drawRect(self.rect())

        view_model = self.number_line.build_view_model(self.view_length())
        self.renderer.draw(painter, view_model, self.thickness)
        painter.end()

    def wheelEvent(self, event):
        notches = event.angleDelta().y() / 120
        mouse_pos = event.position().x() if self.orientation == 'x' else event.position().y()

        if event.modifiers() & Qt.KeyboardModifier.ControlModifier:
            self.number_line.zoom_at(self.number_line.magnification + notches * self.zoom_speed, mouse_pos)
        else:
            delta = (event.angleDelta().x() or event.angleDelta().y()) if self.orientation == 'x' else event.angleDelta().y()
            self.number_line.pan_by(delta)

        logger.debug(f"Visible range: {self.number_line.get_visible_range_str(self.view_length())}")
        self.update()
        event.accept()
