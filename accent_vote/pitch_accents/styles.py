# Copyright: Ajatt-Tools and contributors; https://github.com/Ajatt-Tools
# License: GNU AGPL, version 3 or later; http://www.gnu.org/licenses/agpl.html


class XmlTags:
    # low accent, underline ___
    low_start = "<low>"
    low_end = "</low>"
    # low accent, rising _/
    low_rise_start = "<low_rise>"
    low_rise_end = "</low_rise>"
    # high accent, overline ‾‾‾
    high_start = "<high>"
    high_end = "</high>"
    # high accent, going down ‾‾‾\
    high_drop_start = "<high_drop>"
    high_drop_end = "</high_drop>"


class VisualMarks:
    high = "￣"
    low = "＿"
