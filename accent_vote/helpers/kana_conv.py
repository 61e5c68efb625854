# Copyright: Ajatt-Tools and contributors; https://github.com/Ajatt-Tools
# License: GNU AGPL, version 3 or later; http://www.gnu.org/licenses/agpl.html

import re
import unicodedata

import jaconv

from .consts import EMOJI_MODIFIERS, EMOJI_TAGS, MARK_CATEGORIES, REGIONAL_INDICATORS, ZERO_WIDTH_JOINER

RE_KANA = re.compile(r"[\u3041-\u3096\u3099-\u309f\u30a0-\u30ff\uff5e]+")


def normalize(reading: str) -> str:
    """
    Convert hiragana to katakana, leaving everything else as is.
    E.g., きゃべつ -> キャベツ, かタカナ -> カタカナ.
    """
    return jaconv.hira2kata(reading)


def to_hiragana(reading: str) -> str:
    return jaconv.kata2hira(reading)


def is_kana_str(text: str) -> bool:
    """Returns True if the text consists of hiragana, katakana and long vowel marks only."""
    return bool(text) and re.fullmatch(RE_KANA, text) is not None


def is_extending(char: str) -> bool:
    """True for characters that attach to the one before them, e.g. U+3099 or U+FE0F."""
    return (
        char == ZERO_WIDTH_JOINER
        or unicodedata.category(char) in MARK_CATEGORIES
        or ord(char) in EMOJI_MODIFIERS
        or ord(char) in EMOJI_TAGS
    )


def is_regional_indicator(char: str) -> bool:
    return ord(char) in REGIONAL_INDICATORS


def starts_flag_pair(cluster: str, char: str) -> bool:
    return len(cluster) == 1 and is_regional_indicator(cluster) and is_regional_indicator(char)


def split_graphemes(text: str) -> list[str]:
    """
    Split text into user-perceived characters.
    Combining marks and variation selectors stay attached to the preceding base character (e.g. カ + U+309A),
    characters joined by ZWJ are kept together, and regional indicators are paired up into flags.
    """
    clusters: list[str] = []
    join_next = False
    for char in text:
        if clusters and (join_next or is_extending(char) or starts_flag_pair(clusters[-1], char)):
            clusters[-1] += char
        else:
            clusters.append(char)
        join_next = char == ZERO_WIDTH_JOINER
    return clusters
