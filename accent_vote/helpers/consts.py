# Copyright: Ajatt-Tools and contributors; https://github.com/Ajatt-Tools
# License: GNU AGPL, version 3 or later; http://www.gnu.org/licenses/agpl.html

from typing import Final

# Small kana that merge with the preceding kana into one mora (キャ, ファ, クヮ).
CONTRACTION_TARGETS: Final[frozenset[str]] = frozenset("ャュョァィゥェォヮヵヶ")
# Small tsu. Always a mora of its own.
GEMINATE_MARK: Final[str] = "ッ"
LONG_VOWEL_MARK: Final[str] = "ー"
LONG_VOWEL_MARKS: Final[frozenset[str]] = frozenset((LONG_VOWEL_MARK, "～"))
ZERO_WIDTH_JOINER: Final[str] = "\u200d"
# Unicode categories of marks that never start a character of their own
# (combining dakuten, variation selectors, etc.)
MARK_CATEGORIES: Final[frozenset[str]] = frozenset(("Mn", "Mc", "Me"))
EMOJI_MODIFIERS: Final[range] = range(0x1F3FB, 0x1F3FF + 1)
EMOJI_TAGS: Final[range] = range(0xE0020, 0xE007F + 1)
# Flags are written as pairs of these.
REGIONAL_INDICATORS: Final[range] = range(0x1F1E6, 0x1F1FF + 1)
