import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from numberline.errors import InvalidScaleError
from numberline.ticks.view_model import NumberLineViewModel, TickMark

if TYPE_CHECKING:
    from numberline.scale.number_line import NumberLine

logger = logging.getLogger(__name__)


def first_tick(origin: float, gap: float) -> tuple[int, float]:
    """
    Step index and position of the first tick mark at or after position 0.

    Tick marks sit at origin + k * gap for every integer k, origin being the
    position of the value 0.
    """
    step = math.ceil(-origin / gap)
    # The quotient can round either way, settle on the tick itself
    while origin + (step - 1) * gap >= 0:
        step -= 1
    position = origin + step * gap
    while position < 0:
        step += 1
        position = origin + step * gap
    return step, position


def build_view_model(number_line: "NumberLine", length: float) -> NumberLineViewModel:
    """
    Lay out the tick marks of number_line over a view of the given length.

    Depends only on the current scale of number_line, so it can be called any
    number of times with different lengths. Labels are requested from the label
    strategy once per tick mark, in order of position.
    """
    gap = number_line.unit_length
    if gap <= 0:
        raise InvalidScaleError(f"Unit length must be positive to lay out tick marks, got {gap}")
    if length < 0:
        raise InvalidScaleError(f"View length cannot be negative, got {length}")

    pattern = number_line.options.pattern
    label_strategy = number_line.label_strategy
    first_step, offset = first_tick(number_line.position_of(0), gap)

    count = math.floor((length - offset) / gap) + 1 if length >= offset else 0
    if count and offset + count * gap <= length:
        count += 1
    # Closed form per step, no running sum
    positions = offset + np.arange(count, dtype=float) * gap
    while count and positions[count - 1] > length:
        count -= 1
    positions = positions[:count]

    tick_marks = []
    for step, position in enumerate(positions.tolist(), start=first_step):
        index = step % len(pattern)
        value = number_line.value_at(position)
        label = label_strategy.label_for(value, index, position, number_line)
        tick_marks.append(TickMark(height=pattern[index], label=label, value=value, position=position, index=index))

    leftover_space = length - tick_marks[-1].position if tick_marks else length
    logger.debug(f"Built view model of length {length}: {len(tick_marks)} tick marks, offset={offset}, gap={gap}")

    return NumberLineViewModel(
        offset=offset,
        leftover_space=leftover_space,
        gap=gap,
        tick_marks=tuple(tick_marks),
        length=length,
        starting_value=number_line.value_at(0),
        ending_value=number_line.value_at(length),
        number_line=number_line,
    )
