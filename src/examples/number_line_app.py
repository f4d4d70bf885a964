import logging

from PySide6.QtWidgets import QMainWindow, QApplication, QVBoxLayout, QWidget, QLabel

from numberline import NumberLine, NumberLineOptions, MajorTickLabelStrategy, setup_logging
from numberline.colors.modes import ColorMap
from numberline.widgets import NumberLineWidget


class NumberLineWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Number Line")
        self.setMinimumSize(800, 200)
        self.color_map = ColorMap(darkmode=True)

        # Labelled major tick every 10 ticks, a medium tick halfway between
        self.number_line = NumberLine(NumberLineOptions(
            pattern=[10, 5, 5, 5, 5, 7, 5, 5, 5, 5],
            base_coverage=100,
            base_length=100,
            breakpoint_lower_bound=10,
            breakpoint_upper_bound=30,
            label_strategy=MajorTickLabelStrategy(),
            initial_displacement=400,
        ))

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.addWidget(NumberLineWidget(self.number_line, self.color_map, 'x', parent=central))
        layout.addWidget(QLabel("Ctrl + wheel zooms, wheel pans", central))
        self.setCentralWidget(central)


if __name__ == "__main__":
    setup_logging(logging.DEBUG)
    app = QApplication([])
    window = NumberLineWindow()
    window.show()
    app.exec()
