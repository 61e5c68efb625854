# Copyright: Ajatt-Tools and contributors; https://github.com/Ajatt-Tools
# License: GNU AGPL, version 3 or later; http://www.gnu.org/licenses/agpl.html

import itertools
from collections.abc import Iterable, Sequence

from .basic_types import PitchLevel, PitchPattern
from .errors import InvalidInput
from .styles import XmlTags


def level_runs(moras: Sequence[str], levels: Sequence[PitchLevel]) -> list[tuple[PitchLevel, str]]:
    """
    Join neighboring moras that share a pitch level.
    E.g., [ア, イ, ウ, エ] with [0, 1, 1, 0] -> [(low, ア), (high, イウ), (low, エ)].
    """
    return [
        (level, "".join(mora for _, mora in group))
        for level, group in itertools.groupby(zip(levels, moras), key=lambda pair: pair[0])
    ]


def tags_for_run(level: PitchLevel, is_last: bool, is_only: bool, falls_after_word: bool) -> tuple[str, str]:
    if level == PitchLevel.low:
        # A low run in the middle is always followed by a rise.
        return (XmlTags.low_start, XmlTags.low_end) if is_last else (XmlTags.low_rise_start, XmlTags.low_rise_end)
    if not is_last or falls_after_word:
        # ‾‾‾\
        return XmlTags.high_drop_start, XmlTags.high_drop_end
    if is_only:
        # 1-mora heiban word, rises onto the particle.
        return XmlTags.low_rise_start, XmlTags.low_rise_end
    return XmlTags.high_start, XmlTags.high_end


def wrap_runs(runs: Sequence[tuple[PitchLevel, str]], falls_after_word: bool) -> Iterable[str]:
    for idx, (level, text) in enumerate(runs):
        start, end = tags_for_run(
            level,
            is_last=(idx == len(runs) - 1),
            is_only=(len(runs) == 1),
            falls_after_word=falls_after_word,
        )
        yield start
        yield text
        yield end


def format_pattern(moras: Sequence[str], pattern: PitchPattern) -> str:
    """
    Wrap moras in tags that tell where the pitch is high and where it falls.
    The shape follows the pitch levels, so a 2-mora nakadaka word is written like an odaka one.
    """
    if len(moras) != pattern.mora_count:
        raise InvalidInput(f"got {len(moras)} moras for a pattern of {pattern.mora_count}")
    return "".join(
        wrap_runs(
            level_runs(moras, pattern.pitch_pattern),
            falls_after_word=(pattern.drop_position is not None),
        )
    )
