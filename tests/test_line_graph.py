# Copyright: Ajatt-Tools and contributors; https://github.com/Ajatt-Tools
# License: GNU AGPL, version 3 or later; http://www.gnu.org/licenses/agpl.html

import pytest

from accent_vote.config_view import AccentConfig
from accent_vote.helpers.moras import segment
from accent_vote.pitch_accents.basic_types import AccentClass
from accent_vote.pitch_accents.errors import InvalidInput
from accent_vote.pitch_accents.generator import generate, generate_all
from accent_vote.pitch_accents.line_graph import Point, find_drop_markers, to_line_graph
from tests.default_config import accent_config


def test_line_graph_atamadaka() -> None:
    graph = to_line_graph(generate(3, AccentClass.atamadaka), 300, 80)
    assert graph.points == (Point(50, 20), Point(150, 50), Point(250, 50))
    # The pitch falls after the first mora.
    assert graph.drop_markers == (1,)
    assert graph.moras == ()


def test_line_graph_default_canvas() -> None:
    moras = segment("サクラ")
    graph = to_line_graph(generate(len(moras), AccentClass.heiban), moras=moras)
    assert graph.width == 280
    assert graph.height == 80
    assert graph.moras == ("サ", "ク", "ラ")
    assert [point.y for point in graph.points] == [50, 20, 20]
    assert graph.points[0].x == pytest.approx(280 / 6)
    assert graph.drop_markers == ()


def test_line_graph_custom_canvas() -> None:
    graph = to_line_graph(generate(4, AccentClass.nakadaka), canvas_width=400, canvas_height=160)
    assert [point.x for point in graph.points] == [50, 150, 250, 350]
    assert [point.y for point in graph.points] == [100, 40, 40, 100]
    assert graph.mora_width == 100
    assert graph.drop_markers == (3,)


def test_line_graph_uses_config(accent_config: AccentConfig) -> None:
    accent_config.line_graph["canvas_width"] = 100
    accent_config.line_graph["high_level_ratio"] = 0.5
    graph = to_line_graph(generate(2, AccentClass.atamadaka), options=accent_config.line_graph)
    assert graph.width == 100
    assert graph.points == (Point(25, 40), Point(75, 50))


@pytest.mark.parametrize("mora_count", range(1, 13))
def test_odaka_has_no_drop_markers(mora_count: int) -> None:
    pattern = generate(mora_count, AccentClass.odaka)
    assert pattern.drop_position == mora_count
    assert to_line_graph(pattern).drop_markers == ()


@pytest.mark.parametrize("mora_count", range(1, 13))
def test_drop_markers_agree_with_drop_position(mora_count: int) -> None:
    for pattern in generate_all(mora_count):
        markers = to_line_graph(pattern).drop_markers
        if pattern.has_internal_drop():
            assert markers == (pattern.drop_position,)
        else:
            # Heiban, odaka and one-mora words fall outside the word, if at all.
            assert markers == ()


@pytest.mark.parametrize("mora_count", range(2, 13))
def test_drop_markers_for_atamadaka_and_nakadaka(mora_count: int) -> None:
    pattern = generate(mora_count, AccentClass.atamadaka)
    assert to_line_graph(pattern).drop_markers == (1,)
    if mora_count >= 3:
        pattern = generate(mora_count, AccentClass.nakadaka)
        assert to_line_graph(pattern).drop_markers == (pattern.drop_position,)


def test_find_drop_markers() -> None:
    assert find_drop_markers([1, 0, 1, 0]) == (1, 3)
    assert find_drop_markers([0, 1, 1]) == ()
    assert find_drop_markers([1]) == ()
    assert find_drop_markers([]) == ()


def test_line_graph_rejects_bad_input() -> None:
    pattern = generate(3, AccentClass.heiban)
    with pytest.raises(InvalidInput):
        to_line_graph(pattern, canvas_width=0)
    with pytest.raises(InvalidInput):
        to_line_graph(pattern, canvas_height=-80)
    with pytest.raises(InvalidInput):
        to_line_graph(pattern, moras=["サ", "ク"])
