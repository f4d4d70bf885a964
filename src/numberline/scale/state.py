import logging
from dataclasses import dataclass, replace

from numberline.scale.functions import sawtooth, staircase
from numberline.scale.options import NumberLineOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScaleState:
    """
    Snapshot of a number line's scale.

    unit_length is the visual length that represents unit_value. displacement is
    the visual position where the value 0 is drawn.
    """

    unit_length: float
    unit_value: float
    magnification: float = 0.0
    displacement: float = 0.0

    @property
    def pixels_per_value(self) -> float:
        return self.unit_length / self.unit_value

    def position_of(self, value: float) -> float:
        """Convert a value on the line to a visual position."""
        return self.displacement + self.pixels_per_value * value

    def value_at(self, position: float) -> float:
        """Convert a visual position to the value drawn there."""
        return (position - self.displacement) / self.pixels_per_value


def initial_state(options: NumberLineOptions) -> ScaleState:
    """State of a freshly configured line, before the initial zoom and pan."""
    return ScaleState(unit_length=options.breakpoint_lower_bound, unit_value=options.base_unit_value)


def zoom_state(state: ScaleState, options: NumberLineOptions, magnification: float) -> ScaleState:
    """Return state zoomed to magnification. The result only depends on magnification and options."""
    unit_length = sawtooth(magnification, options.breakpoint_lower_bound, options.breakpoint_upper_bound, options.zoom_factor)
    level = staircase(magnification, options.zoom_step, options.zoom_factor)
    base_unit_value = options.base_unit_value
    if level == 0:
        unit_value = base_unit_value
    elif level > 0:
        unit_value = base_unit_value / level
    else:
        unit_value = base_unit_value * abs(level)
    logger.debug(f"Zoom to {magnification}: level={level}, unit_length={unit_length}, unit_value={unit_value}")
    return replace(state, unit_length=unit_length, unit_value=unit_value, magnification=magnification)


def pan_state(state: ScaleState, position: float) -> ScaleState:
    """Return state with the value 0 moved to position."""
    return replace(state, displacement=position)
