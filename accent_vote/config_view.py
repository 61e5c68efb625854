# Copyright: Ajatt-Tools and contributors; https://github.com/Ajatt-Tools
# License: GNU AGPL, version 3 or later; http://www.gnu.org/licenses/agpl.html

import copy
import functools
import json
from collections.abc import MutableMapping
from typing import Any, Optional, final

from .helpers.file_ops import find_config_json


class ConfigViewBase:
    """
    Gives access to one section of the config, e.g. "line_graph".
    """

    _view_key: Optional[str] = None
    _config: MutableMapping[str, Any]
    _default_config: MutableMapping[str, Any]

    def __init__(self, config: "AccentConfig") -> None:
        assert self._view_key is not None, "sub-view must define a key."
        self._config = config.raw[self._view_key]
        self._default_config = config.raw_default[self._view_key]

    def __getitem__(self, key: str) -> Any:
        try:
            return self._config[key]
        except KeyError:
            return self._default_config[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._config[key] = value


@final
class LineGraphConfigView(ConfigViewBase):
    _view_key: str = "line_graph"

    @property
    def canvas_width(self) -> int:
        return int(self["canvas_width"])

    @property
    def canvas_height(self) -> int:
        return int(self["canvas_height"])

    @property
    def high_level_ratio(self) -> float:
        """Where high moras sit, as a fraction of the canvas height from the top."""
        return float(self["high_level_ratio"])

    @property
    def low_level_ratio(self) -> float:
        return float(self["low_level_ratio"])


@final
class SvgGraphConfigView(ConfigViewBase):
    _view_key: str = "svg_graph"

    @property
    def stroke_width(self) -> float:
        return float(self["stroke_width"])

    @property
    def circle_radius(self) -> float:
        return float(self["circle_radius"])

    @property
    def font_size(self) -> int:
        return int(self["font_size"])

    @property
    def graph_font(self) -> str:
        return self["graph_font"]

    @property
    def text_height(self) -> int:
        """Extra room below the graph reserved for mora text."""
        return int(self["text_height"])

    @property
    def include_text(self) -> bool:
        return self["include_text"] is True

    @property
    def include_trailing(self) -> bool:
        """Draw a hollow circle for the particle that follows the word."""
        return self["include_trailing"] is True


@final
class AccentConfig:
    """
    Presentational settings. The engine itself has nothing to configure.
    """

    def __init__(self) -> None:
        self._set_underlying_dicts()
        self._line_graph = LineGraphConfigView(self)
        self._svg_graph = SvgGraphConfigView(self)

    def _set_underlying_dicts(self) -> None:
        with open(find_config_json(), encoding="utf-8") as f:
            self._default_config = json.load(f)
        self._config = copy.deepcopy(self._default_config)

    @property
    def raw(self) -> MutableMapping[str, Any]:
        return self._config

    @property
    def raw_default(self) -> MutableMapping[str, Any]:
        return self._default_config

    @property
    def line_graph(self) -> LineGraphConfigView:
        return self._line_graph

    @property
    def svg_graph(self) -> SvgGraphConfigView:
        return self._svg_graph


@functools.cache
def default_config() -> AccentConfig:
    return AccentConfig()
