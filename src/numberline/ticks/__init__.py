from .view_model import TickMark, NumberLineViewModel
from .generator import build_view_model

__all__ = ["TickMark", "NumberLineViewModel", "build_view_model"]
