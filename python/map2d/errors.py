###############################################################################
# Copyright (C) 2023 Oliver Michael Kamperis
# Email: olliekampo@gmail.com
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or any later version.
#
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for details.
#
# You should have received a copy of the GNU General Public License along with
# this program. If not, see <https://www.gnu.org/licenses/>.

"""Module for all two-dimensional mapping related errors."""

from typing import Any, Literal, TypeAlias

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"
__version__ = "1.0.0"

__all__ = (
    "Map2DError",
    "InvalidKeyError"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


Axis: TypeAlias = Literal["row", "column"]


class Map2DError(Exception):
    """Base class for all errors raised by two-dimensional mappings."""
    pass


class InvalidKeyError(Map2DError, ValueError):
    """
    Raised when a row or column key cannot be used to store a value.

    A key is invalid if it is None or is not hashable.
    """

    def __init__(self, axis: Axis, key: Any, reason: str | None = None) -> None:
        """
        Create a new invalid key error.

        Parameters
        ----------
        `axis: Literal["row", "column"]` - The axis of the offending key.

        `key: Any` - The offending key.

        `reason: str | None = None` - Why the key is invalid. If not given or
        None, a reason is derived from the key.
        """
        if reason is None:
            if key is None:
                reason = "keys cannot be None"
            else:
                reason = f"keys must be hashable, got {type(key).__name__}"
        super().__init__(f"Invalid {axis} key {key!r}: {reason}.")
        self.axis: Axis = axis
        self.key: Any = key
