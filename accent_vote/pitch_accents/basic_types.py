# Copyright: Ajatt-Tools and contributors; https://github.com/Ajatt-Tools
# License: GNU AGPL, version 3 or later; http://www.gnu.org/licenses/agpl.html

import enum
from collections.abc import Sequence
from typing import NamedTuple, Optional, Union

from .errors import InvalidInput, UnknownAccentClass
from .styles import VisualMarks

SEP_PITCH_TYPE_NUM = "-"


@enum.unique
class AccentClass(enum.Enum):
    # Declaration order is the order in which vote options are shown.
    atamadaka = "atamadaka"
    heiban = "heiban"
    nakadaka = "nakadaka"
    odaka = "odaka"

    @property
    def code(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return _ACCENT_CLASS_INFO[self].display_name

    @property
    def description(self) -> str:
        return _ACCENT_CLASS_INFO[self].description

    @classmethod
    def from_code(cls, code: Union[str, "AccentClass"]) -> "AccentClass":
        if isinstance(code, cls):
            return code
        try:
            return cls(code)
        except ValueError:
            raise UnknownAccentClass(f"unknown accent class: {code!r}") from None


class AccentClassInfo(NamedTuple):
    display_name: str
    description: str


_ACCENT_CLASS_INFO: dict[AccentClass, AccentClassInfo] = {
    AccentClass.atamadaka: AccentClassInfo("頭高型", "第1モーラが高く、第2モーラ以降が低い"),
    AccentClass.heiban: AccentClassInfo("平板型", "第1モーラが低く、第2モーラ以降が高く平坦"),
    AccentClass.nakadaka: AccentClassInfo("中高型", "語の中間で高→低に下がる"),
    AccentClass.odaka: AccentClassInfo("尾高型", "語末モーラが高く、助詞で下がる"),
}


@enum.unique
class PitchLevel(enum.IntEnum):
    low = 0
    high = 1


@enum.unique
class PitchColor(enum.Enum):
    heiban = "#3366CC"  # blue
    atamadaka = "red"
    nakadaka = "#eb8500"  # orange
    odaka = "green"

    @classmethod
    def of(cls, accent_class: AccentClass) -> "PitchColor":
        return cls[accent_class.name]


class PitchPattern(NamedTuple):
    accent_class: AccentClass
    pitch_pattern: tuple[PitchLevel, ...]
    # 1-based index of the last high mora before the fall. None for heiban.
    drop_position: Optional[int]

    @property
    def mora_count(self) -> int:
        return len(self.pitch_pattern)

    def has_internal_drop(self) -> bool:
        """
        True if the fall can be seen inside the word itself.
        Odaka words drop on the following particle, so they never have one.
        """
        return self.drop_position is not None and self.drop_position < self.mora_count

    def describe(self) -> str:
        if self.accent_class == AccentClass.nakadaka:
            return f"{self.accent_class.code}{SEP_PITCH_TYPE_NUM}{self.drop_position}"
        return self.accent_class.code

    def to_visual_string(self) -> str:
        return "".join(
            VisualMarks.high if level == PitchLevel.high else VisualMarks.low for level in self.pitch_pattern
        )


def make_levels(levels: Sequence[int]) -> tuple[PitchLevel, ...]:
    return tuple(PitchLevel(level) for level in levels)


def is_strict_int(value: object) -> bool:
    # bool is a subclass of int, but True is not a mora count.
    return isinstance(value, int) and not isinstance(value, bool)


def check_mora_count(mora_count: int) -> None:
    if not is_strict_int(mora_count):
        raise InvalidInput(f"mora count must be an integer, got {mora_count!r}")
    if mora_count <= 0:
        raise InvalidInput(f"word must consist of at least 1 mora, got {mora_count}")


def check_drop_position_type(drop_position: int) -> None:
    if not is_strict_int(drop_position):
        raise InvalidInput(f"drop position must be an integer, got {drop_position!r}")


def classify_drop_position(mora_count: int, drop_position: Optional[int]) -> AccentClass:
    """
    Find out which accent class a drop position belongs to.
    Used to validate patterns that were entered by hand.
    """
    check_mora_count(mora_count)
    if drop_position is not None:
        check_drop_position_type(drop_position)
    if drop_position is None or drop_position == 0:
        return AccentClass.heiban
    if drop_position == 1:
        return AccentClass.atamadaka
    if drop_position == mora_count:
        return AccentClass.odaka
    if 1 < drop_position < mora_count:
        return AccentClass.nakadaka
    raise InvalidInput(f"pitch must drop inside the word or right after it, got {drop_position} for {mora_count} moras")


def classify_pitch_number(mora_count: int, pitch_number: str) -> AccentClass:
    """
    Same as classify_drop_position, but takes the number the way accent dictionaries write it.
    E.g., "0" is heiban, "1" is atamadaka.
    """
    try:
        drop_position = int(pitch_number.strip())
    except ValueError:
        raise InvalidInput(f"pitch number is not a number: {pitch_number!r}") from None
    return classify_drop_position(mora_count, drop_position)
