# Copyright: Ajatt-Tools and contributors; https://github.com/Ajatt-Tools
# License: GNU AGPL, version 3 or later; http://www.gnu.org/licenses/agpl.html

import logging

from .consts import CONTRACTION_TARGETS, GEMINATE_MARK, LONG_VOWEL_MARKS
from .kana_conv import is_kana_str, normalize, split_graphemes

log = logging.getLogger(__name__)


def is_contraction_target(cluster: str) -> bool:
    return cluster in CONTRACTION_TARGETS


def is_long_vowel_mark(cluster: str) -> bool:
    return cluster in LONG_VOWEL_MARKS


def segment(reading: str) -> list[str]:
    """
    Split a katakana reading into moras.
    E.g., キャベツ -> [キャ, ベ, ツ], コーヒー -> [コー, ヒー], ガッコウ -> [ガ, ッ, コ, ウ].

    Small kana merge with the preceding kana, ッ is always a mora of its own,
    and long vowel marks extend the previous mora.
    Hiragana is not converted, call normalize() first if the input may contain it.
    Characters that aren't kana are passed through as standalone moras.
    """
    moras: list[str] = []
    clusters = split_graphemes(reading)
    idx = 0

    if reading and not is_kana_str(reading):
        log.debug("segmenting non-kana input: %r", reading)

    while idx < len(clusters):
        current = clusters[idx]
        following = clusters[idx + 1] if idx + 1 < len(clusters) else None

        if is_contraction_target(current) and moras:
            moras[-1] += current
        elif current == GEMINATE_MARK:
            moras.append(current)
        elif is_long_vowel_mark(current):
            if moras:
                moras[-1] += current
            else:
                moras.append(current)
        elif following is not None and is_contraction_target(following):
            moras.append(current + following)
            idx += 1
        else:
            moras.append(current)
        idx += 1

    return moras


def segment_normalized(reading: str) -> list[str]:
    return segment(normalize(reading))


def count_mora(reading: str) -> int:
    return len(segment(reading))
