# Copyright: Ajatt-Tools and contributors; https://github.com/Ajatt-Tools
# License: GNU AGPL, version 3 or later; http://www.gnu.org/licenses/agpl.html

import re

import pytest

from accent_vote.config_view import AccentConfig
from accent_vote.helpers.moras import segment
from accent_vote.pitch_accents.basic_types import AccentClass, PitchColor
from accent_vote.pitch_accents.errors import InvalidInput
from accent_vote.pitch_accents.generator import generate
from accent_vote.pitch_accents.line_graph import Point, to_line_graph
from accent_vote.pitch_accents.svg_graphs import Line, SvgPitchGraphMaker
from tests.default_config import accent_config


def count_tags(svg: str, tag: str) -> int:
    return len(re.findall(rf"<{tag}\b", svg))


@pytest.mark.parametrize("accent_class", list(AccentClass))
def test_make_svg(accent_class: AccentClass) -> None:
    moras = segment("トウキョウ")
    pattern = generate(len(moras), accent_class)
    svg = SvgPitchGraphMaker().make_graph(to_line_graph(pattern, moras=moras), pattern)

    assert svg.startswith('<svg class="accent_vote__pitch_svg"')
    assert svg.endswith("</svg>")
    assert f'<g class="{accent_class.code}">' in svg
    assert PitchColor.of(accent_class).value in svg
    # One circle per mora plus the particle.
    assert count_tags(svg, "circle") == len(moras) + 1
    assert count_tags(svg, "line") == len(moras)
    assert count_tags(svg, "text") == len(moras)
    assert ">キョ</text>" in svg
    assert 'viewBox="0 0 350 104"' in svg


def test_make_svg_without_extras(accent_config: AccentConfig) -> None:
    accent_config.svg_graph["include_trailing"] = False
    accent_config.svg_graph["include_text"] = False
    pattern = generate(3, AccentClass.atamadaka)
    svg = SvgPitchGraphMaker(accent_config.svg_graph).make_graph(
        to_line_graph(pattern, moras=segment("サクラ")),
        pattern,
    )
    assert count_tags(svg, "circle") == 3
    assert count_tags(svg, "line") == 2
    assert count_tags(svg, "text") == 0
    assert 'class="gray"' not in svg
    assert 'viewBox="0 0 280 80"' in svg


def test_trailing_particle() -> None:
    maker = SvgPitchGraphMaker()
    heiban = generate(2, AccentClass.heiban)
    odaka = generate(2, AccentClass.odaka)
    heiban_graph = to_line_graph(heiban)
    odaka_graph = to_line_graph(odaka)
    assert maker.trailing_point(heiban_graph, heiban).y == heiban_graph.high_y
    assert maker.trailing_point(odaka_graph, odaka).y == odaka_graph.low_y
    assert maker.trailing_point(odaka_graph, odaka).x == pytest.approx(odaka_graph.points[-1].x + 140)


def test_mora_text_is_escaped() -> None:
    pattern = generate(1, AccentClass.heiban)
    svg = SvgPitchGraphMaker().make_graph(to_line_graph(pattern, moras=["<"]), pattern)
    assert ">&lt;</text>" in svg


def test_line_touches_circles() -> None:
    line = Line(Point(0, 0), Point(10, 0)).adjust_to_radius(2)
    assert line.start == Point(2, 0)
    assert line.end == Point(8, 0)


def test_make_svg_mismatch() -> None:
    with pytest.raises(InvalidInput):
        SvgPitchGraphMaker().make_graph(to_line_graph(generate(2, AccentClass.heiban)), generate(3, AccentClass.heiban))
