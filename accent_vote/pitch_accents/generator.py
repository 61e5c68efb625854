# Copyright: Ajatt-Tools and contributors; https://github.com/Ajatt-Tools
# License: GNU AGPL, version 3 or later; http://www.gnu.org/licenses/agpl.html

"""
Builds pitch patterns out of a mora count and an accent class.

Levels are 0 for low and 1 for high, drop positions are 1-based:
the drop position is the last high mora before the pitch falls.
"""

import logging
import math
from typing import Optional, Union

from .basic_types import (
    AccentClass,
    PitchLevel,
    PitchPattern,
    check_drop_position_type,
    check_mora_count,
    make_levels,
)
from .errors import ConflictingParameter, InvalidInput

log = logging.getLogger(__name__)


def default_nakadaka_drop(mora_count: int) -> int:
    """
    Where a nakadaka plateau ends when the caller doesn't say.
    ceil(n / 2) + 1, capped so that the pitch still falls inside the word.
    4 -> 3, 5 -> 4, 6 -> 4, 7 -> 5. A 3-mora word falls after the 2nd mora.
    """
    return min(math.ceil(mora_count / 2) + 1, mora_count - 1)


def _check_drop_position(mora_count: int, accent_class: AccentClass, drop_position: int) -> None:
    if accent_class == AccentClass.heiban:
        raise ConflictingParameter("heiban words have no drop position")
    check_drop_position_type(drop_position)
    if not 1 <= drop_position <= mora_count:
        raise InvalidInput(f"drop position must be in [1, {mora_count}], got {drop_position}")

    if accent_class == AccentClass.atamadaka and drop_position != 1:
        raise InvalidInput(f"atamadaka always drops after the first mora, got {drop_position}")
    if accent_class == AccentClass.odaka and drop_position != mora_count:
        raise InvalidInput(f"odaka always drops after the last mora ({mora_count}), got {drop_position}")
    if accent_class == AccentClass.nakadaka and not 2 <= drop_position < mora_count:
        raise InvalidInput(
            f"nakadaka must drop inside the word, i.e. in [2, {mora_count - 1}], got {drop_position}"
        )


def _atamadaka(mora_count: int) -> PitchPattern:
    # ‾\___
    return PitchPattern(
        accent_class=AccentClass.atamadaka,
        pitch_pattern=make_levels([1] + [0] * (mora_count - 1)),
        drop_position=1,
    )


def _heiban(mora_count: int) -> PitchPattern:
    # _/‾‾‾
    levels = [1] * mora_count
    if mora_count > 1:
        levels[0] = 0
    return PitchPattern(
        accent_class=AccentClass.heiban,
        pitch_pattern=make_levels(levels),
        drop_position=None,
    )


def _nakadaka(mora_count: int, drop_position: Optional[int]) -> PitchPattern:
    # _/‾‾‾\___
    if mora_count == 1:
        # Nothing can rise and fall inside one mora. Same as atamadaka.
        log.debug("nakadaka requested for a 1-mora word, falling back to the atamadaka shape")
        return PitchPattern(
            accent_class=AccentClass.nakadaka,
            pitch_pattern=(PitchLevel.high,),
            drop_position=1,
        )
    if mora_count == 2:
        # Looks exactly like a 2-mora odaka word.
        return PitchPattern(
            accent_class=AccentClass.nakadaka,
            pitch_pattern=(PitchLevel.low, PitchLevel.high),
            drop_position=2,
        )
    if drop_position is None:
        drop_position = default_nakadaka_drop(mora_count)
    levels = [0] + [1] * (drop_position - 1) + [0] * (mora_count - drop_position)
    return PitchPattern(
        accent_class=AccentClass.nakadaka,
        pitch_pattern=make_levels(levels),
        drop_position=drop_position,
    )


def _odaka(mora_count: int) -> PitchPattern:
    # _/‾‾‾\ (the fall happens on the particle)
    levels = [1] * mora_count
    if mora_count > 1:
        levels[0] = 0
    return PitchPattern(
        accent_class=AccentClass.odaka,
        pitch_pattern=make_levels(levels),
        drop_position=mora_count,
    )


def generate(
    mora_count: int,
    accent_class: Union[AccentClass, str],
    drop_position: Optional[int] = None,
) -> PitchPattern:
    """
    Make the pitch pattern of a word with the given number of moras.
    The accent class can be passed as a member of AccentClass or as its code, e.g. "nakadaka".
    Only nakadaka words can drop in more than one place,
    for other classes the drop position is either fixed or absent.
    """
    check_mora_count(mora_count)
    accent_class = AccentClass.from_code(accent_class)
    if drop_position is not None:
        _check_drop_position(mora_count, accent_class, drop_position)

    if accent_class == AccentClass.atamadaka:
        return _atamadaka(mora_count)
    elif accent_class == AccentClass.heiban:
        return _heiban(mora_count)
    elif accent_class == AccentClass.nakadaka:
        return _nakadaka(mora_count, drop_position)
    elif accent_class == AccentClass.odaka:
        return _odaka(mora_count)
    raise AssertionError(f"unhandled accent class: {accent_class}")


def generate_all(mora_count: int) -> list[PitchPattern]:
    """One pattern per accent class, in the order the vote options are shown."""
    return [generate(mora_count, accent_class) for accent_class in AccentClass]
