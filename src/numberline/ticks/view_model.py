from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from numberline.scale.number_line import NumberLine


@dataclass(frozen=True)
class TickMark:
    """What a tick mark looks like."""

    height: float  # as governed by the tick mark pattern
    label: Optional[str]  # None for blank tick marks
    value: float
    position: float  # from the start of the view
    index: int = 0  # index in the tick mark pattern


@dataclass(frozen=True)
class NumberLineViewModel:
    """
    What a number line looks like over a given length.

    offset is the gap before the first tick mark and leftover_space the space left
    between the last tick mark and length. Tick marks are gap apart.
    """

    offset: float
    leftover_space: float
    gap: float
    tick_marks: Tuple[TickMark, ...]
    length: float
    starting_value: float
    ending_value: float
    number_line: "NumberLine" = field(repr=False, compare=False)

    @property
    def labelled_tick_marks(self) -> Tuple[TickMark, ...]:
        return tuple(tick for tick in self.tick_marks if tick.label is not None)
