"""Numberline public API."""

from .errors import NumberLineError, ConfigurationError, InvalidScaleError
from .scale import NumberLine, NumberLineOptions, ScaleState, sawtooth, staircase, range_mapper
from .ticks import TickMark, NumberLineViewModel, build_view_model
from .labels import TickMarkLabelStrategy, SILabelStrategy, MajorTickLabelStrategy, as_label_strategy
from .logging_config import setup_logging

__all__ = [
    "NumberLineError",
    "ConfigurationError",
    "InvalidScaleError",
    "NumberLine",
    "NumberLineOptions",
    "ScaleState",
    "sawtooth",
    "staircase",
    "range_mapper",
    "TickMark",
    "NumberLineViewModel",
    "build_view_model",
    "TickMarkLabelStrategy",
    "SILabelStrategy",
    "MajorTickLabelStrategy",
    "as_label_strategy",
    "setup_logging",
]
