import logging
from typing import Tuple

from numberline.labels import TickMarkLabelStrategy, as_label_strategy
from numberline.scale.options import NumberLineOptions
from numberline.scale.state import ScaleState, initial_state, pan_state, zoom_state
from numberline.ticks.generator import build_view_model
from numberline.ticks.view_model import NumberLineViewModel

logger = logging.getLogger(__name__)


class NumberLine:
    """
    A stretchable, zoomable number line that can be used to construct rulers and graphs.

    Zooming moves the unit length through the breakpoint range while the unit value
    changes in discrete steps every zoom_factor of magnification. Panning moves the
    visual position of the value 0.
    """

    def __init__(self, options: NumberLineOptions) -> None:
        """Validate options and zoom/pan to the initial magnification and displacement."""
        options.validate()
        self._options: NumberLineOptions = options
        self._label_strategy: TickMarkLabelStrategy = as_label_strategy(options.label_strategy)
        self._state: ScaleState = initial_state(options)
        self.zoom_to(options.initial_magnification)
        self.pan_to(options.initial_displacement)

    @property
    def options(self) -> NumberLineOptions:
        return self._options

    @property
    def state(self) -> ScaleState:
        return self._state

    @property
    def label_strategy(self) -> TickMarkLabelStrategy:
        return self._label_strategy

    @property
    def base_unit_value(self) -> float:
        return self._options.base_unit_value

    @property
    def unit_length(self) -> float:
        return self._state.unit_length

    @property
    def unit_value(self) -> float:
        return self._state.unit_value

    @property
    def magnification(self) -> float:
        return self._state.magnification

    @property
    def displacement(self) -> float:
        return self._state.displacement

    def zoom_to(self, magnification: float) -> None:
        """Set the magnification. Negative numbers zoom out, positive numbers zoom in."""
        self._state = zoom_state(self._state, self._options, magnification)

    def zoom_by(self, delta: float) -> None:
        self.zoom_to(self.magnification + delta)

    def zoom_at(self, magnification: float, anchor: float) -> None:
        """Zoom to magnification while keeping the value at visual position anchor fixed in place."""
        value_at_anchor = self.value_at(anchor)
        self.zoom_to(magnification)
        self.pan_to(anchor - self._state.pixels_per_value * value_at_anchor)

    def pan_to(self, position: float) -> None:
        """Move the value 0 to visual position. No bounds are applied."""
        self._state = pan_state(self._state, position)
        logger.debug(f"Pan to {position}")

    def pan_by(self, delta: float) -> None:
        """Pan by delta. Positive moves the line right/down, negative moves it left/up."""
        self.pan_to(self.displacement + delta)

    def position_of(self, value: float) -> float:
        return self._state.position_of(value)

    def value_at(self, position: float) -> float:
        return self._state.value_at(position)

    def visible_range(self, length: float) -> Tuple[float, float]:
        """Values at the start and the end of a view of the given length."""
        return self.value_at(0), self.value_at(length)

    def get_visible_range_str(self, length: float) -> str:
        start, stop = self.visible_range(length)
        return f"{start} - {stop}"

    def build_view_model(self, length: float) -> NumberLineViewModel:
        """
        Build a view model describing this number line over length.

        The view model is useful for rendering the line through any rendering technology.
        """
        return build_view_model(self, length)

    def __repr__(self) -> str:
        return f"NumberLine(unit_length={self.unit_length}, unit_value={self.unit_value}, magnification={self.magnification}, displacement={self.displacement})"
