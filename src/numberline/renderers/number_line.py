from typing import List, Literal, Tuple
from PySide6.QtCore import QLineF, QRectF, Qt
from PySide6.QtGui import QPainter, QPen

from numberline.colors.modes import ColorMap
from numberline.scale.functions import range_mapper
from numberline.ticks.view_model import NumberLineViewModel, TickMark


class NumberLineRenderer:
    """
    Paints a NumberLineViewModel with a QPainter.

    Tick marks grow from the far edge of the ruler (bottom for 'x', right for 'y')
    and their heights are scaled so the tallest height in the pattern fills
    tick_extent of the ruler thickness.
    """

    label_extent = 100  # Do not use more space than this for a label text

    def __init__(self, color_map: ColorMap, orientation: Literal['x', 'y'] = 'x', tick_extent: float = 0.5) -> None:
        self.color_map = color_map
        self.orientation = orientation
        self.tick_extent = tick_extent

    def tick_length(self, tick: TickMark, view_model: NumberLineViewModel, thickness: float) -> float:
        tallest = max(view_model.number_line.options.pattern)
        return range_mapper(tick.height, 0, tallest, 0, thickness * self.tick_extent)

    def tick_lines(self, view_model: NumberLineViewModel, thickness: float) -> List[QLineF]:
        lines = []
        for tick in view_model.tick_marks:
            top = thickness - self.tick_length(tick, view_model, thickness)
            if self.orientation == 'x':
                lines.append(QLineF(tick.position, top, tick.position, thickness))
            else:
                lines.append(QLineF(top, tick.position, thickness, tick.position))
        return lines

    def label_rects(self, view_model: NumberLineViewModel, thickness: float) -> List[Tuple[QRectF, str]]:
        """Rectangles, in unrotated ruler coordinates, centred above each labelled tick."""
        text_height = thickness * (1 - self.tick_extent)
        rects = []
        for tick in view_model.labelled_tick_marks:
            rect = QRectF(tick.position - self.label_extent / 2, 0, self.label_extent, text_height)
            rects.append((rect, tick.label))
        return rects

    def draw(self, painter: QPainter, view_model: NumberLineViewModel, thickness: float) -> None:
        tallest = max(view_model.number_line.options.pattern)
        for tick, line in zip(view_model.tick_marks, self.tick_lines(view_model, thickness)):
            color = "tick-major" if tick.height == tallest else "tick-minor"
            painter.setPen(QPen(self.color_map.get_object_color(color), 1))
            painter.drawLine(line)

        painter.setPen(QPen(self.color_map.get_object_color("text-base"), 1))
        for rect, text in self.label_rects(view_model, thickness):
            if self.orientation == 'x':
                painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, text)
            else:
                painter.save()
                painter.rotate(-90)
                painter.drawText(QRectF(-rect.x() - rect.width(), rect.y(), rect.width(), rect.height()), Qt.AlignmentFlag.AlignCenter, text)
                painter.restore()
