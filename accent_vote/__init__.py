# Copyright: Ajatt-Tools and contributors; https://github.com/Ajatt-Tools
# License: GNU AGPL, version 3 or later; http://www.gnu.org/licenses/agpl.html

from .helpers.kana_conv import normalize, to_hiragana
from .helpers.moras import count_mora, segment, segment_normalized
from .pitch_accents.basic_types import (
    AccentClass,
    PitchLevel,
    PitchPattern,
    classify_drop_position,
)
from .pitch_accents.errors import (
    AccentEngineError,
    ConflictingParameter,
    InvalidInput,
    UnknownAccentClass,
)
from .pitch_accents.generator import generate, generate_all
from .pitch_accents.line_graph import LineGraphData, to_line_graph

__all__ = [
    "AccentClass",
    "AccentEngineError",
    "ConflictingParameter",
    "InvalidInput",
    "LineGraphData",
    "PitchLevel",
    "PitchPattern",
    "UnknownAccentClass",
    "classify_drop_position",
    "count_mora",
    "generate",
    "generate_all",
    "normalize",
    "segment",
    "segment_normalized",
    "to_hiragana",
    "to_line_graph",
]
