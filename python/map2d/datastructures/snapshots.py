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

"""
Module containing immutable snapshot mapping types.

Unlike a view, a snapshot owns a private copy of the data it was created
from. It cannot be modified, and it does not reflect changes made to its
source after it was created.
"""

import collections.abc
from typing import (Generic, Hashable, Iterable, Iterator, Mapping, Optional,
                    TypeVar, final, overload)

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"
__version__ = "1.0.0"

__all__ = (
    "frozendict",
    "freeze_nested"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


KT = TypeVar("KT", bound=Hashable)
IKT = TypeVar("IKT", bound=Hashable)
VT_co = TypeVar("VT_co", covariant=True)


@final
class frozendict(  # pylint: disable=invalid-name
    collections.abc.Mapping,
    Generic[KT, VT_co]
):
    """
    A frozen dictionary type.

    A frozen dictionary is an immutable snapshot of a standard dictionary. It
    is hashable if all of its values are hashable.

    Example Usage
    -------------
    ```
    >>> source = {"one": 1, "two": 2}
    >>> fdict = frozendict(source)
    >>> source["three"] = 3
    >>> fdict
    frozendict({'one': 1, 'two': 2})
    >>> fdict["three"] = 3
    TypeError: 'frozendict' object does not support item assignment
    ```
    """

    __slots__ = {
        "__dict": "The dictionary mapping.",
        "__hash": "The hash of the dictionary."
    }

    @overload
    def __init__(self) -> None:
        """Create a new empty frozen dictionary."""
        ...

    @overload
    def __init__(self, mapping: Mapping[KT, VT_co], /) -> None:
        """
        Create a new frozen dictionary from a
        mapping object's (key, value) pairs.

        For example:
        ```
        >>> fdict = frozendict({"one": 1, "two": 2})
        >>> fdict
        frozendict({'one': 1, 'two': 2})
        ```
        """
        ...

    @overload
    def __init__(self, iterable: Iterable[tuple[KT, VT_co]], /) -> None:
        """
        Create a new frozen dictionary from an iterable
        of tuples defining (key, value) pairs.

        For example:
        ```
        >>> fdict = frozendict([("one", 1), ("two", 2)])
        >>> fdict
        frozendict({'one': 1, 'two': 2})
        ```
        """
        ...

    def __init__(self, *args, **kwargs) -> None:
        """Create a new frozen dictionary."""
        self.__dict: dict[KT, VT_co] = dict(*args, **kwargs)
        self.__hash: Optional[int] = None

    def __repr__(self) -> str:
        """Get an instantiable string representation of the dictionary."""
        return f"frozendict({self.__dict!r})"

    def __getitem__(self, key: KT, /) -> VT_co:
        """Get the value associated with the given key."""
        return self.__dict[key]

    def __contains__(self, key: object, /) -> bool:
        """Check if the given key is in the dictionary."""
        return key in self.__dict

    def __iter__(self) -> Iterator[KT]:
        """Iterate over the keys in the dictionary."""
        return iter(self.__dict)

    def __len__(self) -> int:
        """Get the number of items in the dictionary."""
        return len(self.__dict)

    def __eq__(self, other: object, /) -> bool:
        """Check if the dictionary has the same items as another mapping."""
        if isinstance(other, frozendict):
            return self.__dict == other.__dict
        if isinstance(other, Mapping):
            return self.__dict == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        """
        Get the hash of the dictionary.

        Raises a TypeError if any of the values are not hashable.
        """
        if self.__hash is None:
            hash_: int = 0
            for item in self.__dict.items():
                hash_ ^= hash(item)
            self.__hash = hash_
        return self.__hash

    def __copy__(self) -> "frozendict[KT, VT_co]":
        """Get the dictionary itself, since it cannot be modified."""
        return self

    def copy(self) -> "frozendict[KT, VT_co]":
        """Get the dictionary itself, since it cannot be modified."""
        return self

    def thaw(self) -> dict[KT, VT_co]:
        """Get a new mutable dictionary with the same items."""
        return dict(self.__dict)


def freeze_nested(
    mapping: Mapping[KT, Mapping[IKT, VT_co]], /
) -> frozendict[KT, frozendict[IKT, VT_co]]:
    """
    Take a deep snapshot of a mapping of mappings.

    Each inner mapping is copied into its own frozen dictionary, and the outer
    mapping is copied into a frozen dictionary of those. Neither level shares
    any state with the given mapping.
    """
    return frozendict(
        (key, frozendict(inner))
        for key, inner in mapping.items()
    )
