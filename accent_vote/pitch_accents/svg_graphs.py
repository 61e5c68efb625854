# Copyright: Ajatt-Tools and contributors; https://github.com/Ajatt-Tools
# License: GNU AGPL, version 3 or later; http://www.gnu.org/licenses/agpl.html

import enum
import html
from collections.abc import Iterable
from math import hypot
from typing import Optional

from ..config_view import SvgGraphConfigView, default_config
from .basic_types import AccentClass, PitchColor, PitchPattern
from .errors import InvalidInput
from .line_graph import LineGraphData, Point


@enum.unique
class SvgColor(enum.Enum):
    trail = "gray"
    text = "black"


def make_group(elements: Iterable[str], class_name: str) -> str:
    return f'<g class="{class_name}">{"".join(elements)}</g>'


class Line:
    is_trailing: bool
    start: Point
    end: Point

    def __init__(self, start: Point, end: Point, is_trailing: bool = False) -> None:
        self.start = start
        self.end = end
        self.is_trailing = is_trailing

    def adjust_to_radius(self, r: float) -> "Line":
        """
        Shorten the line on both ends so that it touches the circles instead of crossing them.
        """
        length = hypot(self.end.x - self.start.x, self.end.y - self.start.y)
        if length <= 2 * r:
            return self
        offset_x = r * (self.end.x - self.start.x) / length
        offset_y = r * (self.end.y - self.start.y) / length
        self.start = self.start.shift_by(x=offset_x, y=offset_y)
        self.end = self.end.shift_by(x=-offset_x, y=-offset_y)
        return self

    def draw(self, color: str, stroke_width: float) -> str:
        def attrs_line() -> str:
            if self.is_trailing:
                return f'class="{SvgColor.trail.name}" stroke="{SvgColor.trail.value}"'
            return f'stroke="{color}"'

        return (
            f'<line {attrs_line()} stroke-width="{stroke_width:.2f}" '
            f'x1="{self.start.x:.3f}" y1="{self.start.y:.3f}" '
            f'x2="{self.end.x:.3f}" y2="{self.end.y:.3f}" />'
        )


class SvgPitchGraphMaker:
    def __init__(self, options: Optional[SvgGraphConfigView] = None) -> None:
        self._opts = options or default_config().svg_graph

    def make_circle(self, pos: Point, color: str, is_trailing: bool = False) -> str:
        def attrs_circle() -> str:
            if is_trailing:
                return f'class="{SvgColor.trail.name}" fill="none" stroke="{SvgColor.trail.value}"'
            return f'fill="{color}" stroke="{color}"'

        return (
            f'<circle {attrs_circle()} stroke-width="{self._opts.stroke_width:.2f}" '
            f'cx="{pos.x:.3f}" cy="{pos.y:.3f}" r="{self._opts.circle_radius:.2f}" />'
        )

    def make_text(self, mora: str, pos: Point) -> str:
        return (
            f'<text fill="{SvgColor.text.value}" font-size="{self._opts.font_size}px" '
            f'text-anchor="middle" x="{pos.x:.0f}" y="{pos.y:.0f}">{html.escape(mora)}</text>'
        )

    def make_svg(self, contents: str, *, width: float, height: float) -> str:
        return (
            f'<svg class="accent_vote__pitch_svg" style="font-family: {self._opts.graph_font}" '
            f'viewBox="0 0 {width:.0f} {height:.0f}" xmlns="http://www.w3.org/2000/svg">{contents}</svg>'
        )

    def trailing_point(self, graph: LineGraphData, pattern: PitchPattern) -> Point:
        """
        Where the particle that follows the word goes.
        It stays high only after heiban words.
        """
        last = graph.points[-1]
        return Point(
            x=last.x + graph.mora_width,
            y=graph.high_y if pattern.accent_class == AccentClass.heiban else graph.low_y,
        )

    def make_graph(self, graph: LineGraphData, pattern: PitchPattern) -> str:
        if len(graph.points) != pattern.mora_count:
            raise InvalidInput(f"graph has {len(graph.points)} points for a pattern of {pattern.mora_count}")

        opts = self._opts
        color = PitchColor.of(pattern.accent_class).value
        lines: list[Line] = [Line(start, end) for start, end in zip(graph.points, graph.points[1:])]
        circles: list[str] = [self.make_circle(point, color) for point in graph.points]
        width = graph.width

        if opts.include_trailing:
            trailing = self.trailing_point(graph, pattern)
            lines.append(Line(graph.points[-1], trailing, is_trailing=True))
            circles.append(self.make_circle(trailing, color, is_trailing=True))
            width += graph.mora_width

        content: list[str] = [
            make_group(
                (line.adjust_to_radius(opts.circle_radius).draw(color, opts.stroke_width) for line in lines),
                "lines",
            ),
            make_group(circles, "circles"),
        ]

        height = graph.height
        if opts.include_text and graph.moras:
            text_y = graph.height + opts.text_height / 2
            content.append(
                make_group(
                    (self.make_text(mora, point.replace(y=text_y)) for mora, point in zip(graph.moras, graph.points)),
                    "text",
                )
            )
            height += opts.text_height

        return self.make_svg(
            make_group(content, pattern.accent_class.code),
            width=width,
            height=height,
        )
