# Copyright: Ajatt-Tools and contributors; https://github.com/Ajatt-Tools
# License: GNU AGPL, version 3 or later; http://www.gnu.org/licenses/agpl.html

import pathlib

PACKAGE_DIR = pathlib.Path(__file__).resolve().parent.parent


def find_config_json() -> pathlib.Path:
    """The default config is shipped inside the package, next to __init__.py."""
    if not (path := PACKAGE_DIR.joinpath("config.json")).is_file():
        raise RuntimeError(f"couldn't find file '{path}'")
    return path
