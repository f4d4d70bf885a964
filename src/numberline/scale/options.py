import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from numberline.errors import ConfigurationError
from numberline.labels import LabelStrategyLike

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NumberLineOptions:
    """
    Configurational description of a number line.

    pattern is the sequence of tick heights repeated over the length of the line.
    base_coverage is the value covered by base_length, which together set the
    starting scale. The unit length cycles within
    [breakpoint_lower_bound, breakpoint_upper_bound) as the magnification grows,
    zoom_factor is the period of that cycle and zoom_step the amount the value
    scale changes per cycle.
    """

    pattern: Sequence[float]
    base_coverage: float
    base_length: float
    breakpoint_lower_bound: float
    breakpoint_upper_bound: float
    label_strategy: Optional[LabelStrategyLike] = None
    zoom_factor: float = 10
    zoom_step: float = 1
    initial_displacement: float = 0
    initial_magnification: float = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "pattern", tuple(self.pattern))

    @property
    def base_unit_value(self) -> float:
        """Value represented by one unit of length before any zooming."""
        return self.base_coverage / self.base_length

    def validate(self) -> None:
        """Raise ConfigurationError for the first invalid field found."""
        if self.breakpoint_lower_bound > self.breakpoint_upper_bound:
            self._fail(f"Breakpoint lower bound ({self.breakpoint_lower_bound}) cannot be greater than breakpoint upper bound ({self.breakpoint_upper_bound})")
        if self.zoom_factor <= 0:
            self._fail(f"Zoom factor cannot be negative or zero, got {self.zoom_factor}")
        if self.zoom_step <= 0:
            self._fail(f"Zoom step cannot be negative or zero, got {self.zoom_step}")
        if not self.pattern:
            self._fail("Tick mark pattern must contain at least one height")
        for index, height in enumerate(self.pattern):
            if height <= 0:
                self._fail(f"Tick mark heights must be positive, pattern[{index}] is {height}")
        if self.base_coverage <= 0 or self.base_length <= 0:
            self._fail(f"Base coverage and base length must be positive, got {self.base_coverage} and {self.base_length}")

    @staticmethod
    def _fail(message: str) -> None:
        logger.error(message)
        raise ConfigurationError(message)
