# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""String enum whose members carry a colorizer.

Members are declared as ``(text, colorizer)`` pairs; ``.value`` is the plain
text and ``.color`` decorates text for terminal display::

    class Outcome(ColoredStrEnum):
        OK = ("ok", chalk.green)

    Outcome.OK.color("done")  # green "done"
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable decorating text, compatible with `yachalk.ChalkBuilder.__call__`."""

    def __call__(self, *args: object, sep: str = " ") -> str: ...


class ColoredStrEnum(str, Enum):
    """`str` enum keeping its text in ``_value_`` and its colorizer in ``_color``."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """The textual value of the member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """The colorizer associated with the member."""
        return self._color

    def colored(self, text: str | None = None) -> str:
        """Return ``text`` (default: the member's value) decorated with its color."""
        return self._color(self._value_ if text is None else text)
