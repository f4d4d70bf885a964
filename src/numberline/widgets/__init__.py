from .number_line_widget import NumberLineWidget

__all__ = ['NumberLineWidget']
