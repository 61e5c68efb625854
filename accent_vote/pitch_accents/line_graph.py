# Copyright: Ajatt-Tools and contributors; https://github.com/Ajatt-Tools
# License: GNU AGPL, version 3 or later; http://www.gnu.org/licenses/agpl.html

import typing
from collections.abc import Sequence
from typing import Optional

from ..config_view import LineGraphConfigView, default_config
from .basic_types import PitchLevel, PitchPattern
from .errors import InvalidInput


class Point(typing.NamedTuple):
    x: float
    y: float

    def shift_by(self, *, x: float = 0, y: float = 0) -> "Point":
        return Point(x=self.x + x, y=self.y + y)

    def replace(self, *, x: Optional[float] = None, y: Optional[float] = None) -> "Point":
        return Point(x=x if x is not None else self.x, y=y if y is not None else self.y)


class LineGraphData(typing.NamedTuple):
    points: tuple[Point, ...]
    # 1-based positions of the last high mora before each fall,
    # i.e. 0-based positions of the first low mora after it.
    drop_markers: tuple[int, ...]
    moras: tuple[str, ...]
    width: float
    height: float
    high_y: float
    low_y: float

    @property
    def mora_width(self) -> float:
        return self.width / len(self.points)


def find_drop_markers(levels: Sequence[int]) -> tuple[int, ...]:
    """Find every place where a high mora is followed by a low one."""
    return tuple(
        idx + 1
        for idx in range(len(levels) - 1)
        if levels[idx] == PitchLevel.high and levels[idx + 1] == PitchLevel.low
    )


def to_line_graph(
    pattern: PitchPattern,
    canvas_width: Optional[float] = None,
    canvas_height: Optional[float] = None,
    moras: Optional[Sequence[str]] = None,
    options: Optional[LineGraphConfigView] = None,
) -> LineGraphData:
    """
    Place one point per mora on the canvas.
    Moras are spaced evenly, each point sits in the middle of its slot.
    Odaka words produce no drop markers because the fall happens after the word.
    """
    opts = options or default_config().line_graph
    width = opts.canvas_width if canvas_width is None else canvas_width
    height = opts.canvas_height if canvas_height is None else canvas_height

    if width <= 0 or height <= 0:
        raise InvalidInput(f"canvas must have a positive size, got {width}x{height}")
    if moras is not None and len(moras) != pattern.mora_count:
        raise InvalidInput(f"got {len(moras)} moras for a pattern of {pattern.mora_count}")

    mora_width = width / pattern.mora_count
    y_high = height * opts.high_level_ratio
    y_low = height * opts.low_level_ratio
    points = tuple(
        Point(
            x=idx * mora_width + mora_width / 2,
            y=y_high if level == PitchLevel.high else y_low,
        )
        for idx, level in enumerate(pattern.pitch_pattern)
    )
    return LineGraphData(
        points=points,
        drop_markers=find_drop_markers(pattern.pitch_pattern),
        moras=tuple(moras or ()),
        width=width,
        height=height,
        high_y=y_high,
        low_y=y_low,
    )
