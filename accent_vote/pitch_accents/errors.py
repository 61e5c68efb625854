# Copyright: Ajatt-Tools and contributors; https://github.com/Ajatt-Tools
# License: GNU AGPL, version 3 or later; http://www.gnu.org/licenses/agpl.html


class AccentEngineError(ValueError):
    """Base class for errors raised while building pitch patterns."""


class InvalidInput(AccentEngineError):
    """Mora count is not positive, or the drop position is illegal for the accent class."""


class UnknownAccentClass(AccentEngineError):
    """Accent class code is not one of atamadaka, heiban, nakadaka, odaka."""


class ConflictingParameter(AccentEngineError):
    """A drop position was given for heiban, which has none."""
