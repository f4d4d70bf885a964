from .functions import sawtooth, staircase, range_mapper
from .options import NumberLineOptions
from .state import ScaleState, zoom_state, pan_state
from .number_line import NumberLine

__all__ = [
    "sawtooth",
    "staircase",
    "range_mapper",
    "NumberLineOptions",
    "ScaleState",
    "zoom_state",
    "pan_state",
    "NumberLine",
]
