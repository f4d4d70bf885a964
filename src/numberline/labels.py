import math
from typing import TYPE_CHECKING, Callable, Optional, Protocol, Union, runtime_checkable

if TYPE_CHECKING:
    from numberline.scale.number_line import NumberLine


@runtime_checkable
class TickMarkLabelStrategy(Protocol):
    """Lets the user of a NumberLine define their own tick mark labels."""

    def label_for(self, value: float, index: int, position: float, number_line: "NumberLine") -> Optional[str]:
        """
        Return the label of a tick mark, or None for a blank tick mark.

        value is the value of the tick mark, index its index in the tick mark pattern
        and position its visual position from the start of the view.
        """
        ...


LabelFunction = Callable[[float, int, float, "NumberLine"], Optional[str]]
LabelStrategyLike = Union[TickMarkLabelStrategy, LabelFunction]


class FunctionLabelStrategy:
    """Adapts a plain function with the label_for signature."""

    def __init__(self, function: LabelFunction) -> None:
        self.function = function

    def label_for(self, value, index, position, number_line):
        return self.function(value, index, position, number_line)


class BlankLabelStrategy:
    def label_for(self, value, index, position, number_line):
        return None


def as_label_strategy(strategy: Optional[LabelStrategyLike]) -> TickMarkLabelStrategy:
    """Return strategy as an object with label_for. None gives blank tick marks."""
    if strategy is None:
        return BlankLabelStrategy()
    if isinstance(strategy, TickMarkLabelStrategy):
        return strategy
    if callable(strategy):
        return FunctionLabelStrategy(strategy)
    raise TypeError(f"Expected a label strategy or a callable, got {type(strategy).__name__}")


class SILabelStrategy:
    """Label every tick mark with its value, scaled to an SI prefix (1.5k, 20m, ...)."""

    suffixes = {15: 'P', 12: 'T', 9: 'G', 6: 'M', 3: 'k', 0: '', -3: 'm', -6: 'µ', -9: 'n'}

    def __init__(self, significant_digits: int = 6) -> None:
        self.significant_digits = significant_digits

    def label_for(self, value, index, position, number_line):
        # Values derived from positions carry rounding noise around 0
        if math.isclose(value, 0.0, abs_tol=number_line.unit_value * 1e-9):
            return "0"
        return self.format_value(value)

    def format_value(self, value: float) -> str:
        if value == 0:
            return "0"
        # Round first so 999999.9999999 picks the M prefix
        value = float(f"{value:.{self.significant_digits}g}")
        magnitude = int(math.floor(math.log10(abs(value)) / 3) * 3)
        magnitude = max(min(magnitude, 15), -9)
        scaled = float(f"{value / (10 ** magnitude):.{self.significant_digits}g}")
        suffix = self.suffixes[magnitude]
        return f"{int(scaled)}{suffix}" if scaled.is_integer() else f"{scaled:.{self.significant_digits}g}{suffix}"


class MajorTickLabelStrategy:
    """Only label the tick marks that start the pattern, the rest stay blank."""

    def __init__(self, inner: Optional[LabelStrategyLike] = None) -> None:
        self.inner = as_label_strategy(inner if inner is not None else SILabelStrategy())

    def label_for(self, value, index, position, number_line):
        if index != 0:
            return None
        return self.inner.label_for(value, index, position, number_line)
