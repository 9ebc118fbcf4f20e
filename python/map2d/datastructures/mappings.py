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

"""Module containing two-dimensional mapping structures."""

import logging
from abc import ABCMeta, abstractmethod
from typing import (Any, Callable, Final, Generic, Hashable, Iterable,
                    Mapping, MutableMapping, NamedTuple, Optional, TypeAlias,
                    TypeVar, final, overload)

from typing_extensions import Self, override

from map2d.datastructures.snapshots import freeze_nested, frozendict
from map2d.errors import Axis, InvalidKeyError

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"
__version__ = "1.0.0"

__all__ = (
    "Entry",
    "Map2D",
    "MutableMap2D",
    "DualIndexMap",
    "FrozenDualIndexMap"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


RK = TypeVar("RK", bound=Hashable)
CK = TypeVar("CK", bound=Hashable)
VT = TypeVar("VT")
RK2 = TypeVar("RK2", bound=Hashable)
CK2 = TypeVar("CK2", bound=Hashable)
VT2 = TypeVar("VT2")
DT = TypeVar("DT")
HK = TypeVar("HK", bound=Hashable)

# Marks a missing value, since None is a valid value.
_MISSING: Final[Any] = object()


def _lookup(mapping: Mapping[HK, DT], key: object, default: Any = None) -> Any:
    """Get the value of a key, treating unhashable keys as missing."""
    try:
        return mapping.get(key, default)  # type: ignore[arg-type]
    except TypeError:
        return default


def _check_key(axis: Axis, key: object) -> None:
    """Raise an invalid key error if the key cannot be stored."""
    if key is None:
        raise InvalidKeyError(axis, key)
    try:
        hash(key)
    except TypeError as error:
        raise InvalidKeyError(axis, key) from error


def _split_key(key: object) -> tuple[Any, Any] | None:
    """Split a (row, column) pair, or get None if the key is not a pair."""
    if isinstance(key, tuple) and len(key) == 2:
        return key
    return None


def _format_rows(rows: Mapping[Any, Mapping[Any, Any]]) -> str:
    """Format a row-major nested mapping as a nested dictionary."""
    return repr({row: dict(inner) for row, inner in rows.items()})


class Entry(NamedTuple):
    """A single (row key, column key, value) triple of a two-dimensional map."""

    row: Hashable
    column: Hashable
    value: Any


class Map2D(Generic[RK, CK, VT], metaclass=ABCMeta):
    """
    Abstract base class for two-dimensional mappings.

    A two-dimensional mapping maps composite keys, made of an ordered pair of
    a row key and a column key, to a single value. Values can be looked up by
    full key, and a whole row or a whole column can be looked up at once.

    Sub-classes must implement the abstract query methods. All other methods,
    including `len()`, truth testing, `in` for (row, column) pairs, and
    subscripting with (row, column) pairs, are built on those.
    """

    __slots__ = ()

    @abstractmethod
    def size(self) -> int:
        """Get the number of (row, column) pairs that hold a value."""
        ...

    @abstractmethod
    def get(self, row: RK, column: CK, default: DT | None = None, /
            ) -> VT | DT | None:
        """
        Get the value at the given row and column.

        If there is no value at the given row and column, return `default`.
        """
        ...

    @abstractmethod
    def contains_key(self, row: RK, column: CK, /) -> bool:
        """Check if there is a value at the given row and column."""
        ...

    @abstractmethod
    def contains_row(self, row: RK, /) -> bool:
        """Check if there is at least one value in the given row."""
        ...

    @abstractmethod
    def contains_column(self, column: CK, /) -> bool:
        """Check if there is at least one value in the given column."""
        ...

    @abstractmethod
    def contains_value(self, value: object, /) -> bool:
        """Check if any (row, column) pair holds a value equal to the given."""
        ...

    @abstractmethod
    def row_view(self, row: RK, /) -> frozendict[CK, VT]:
        """
        Get an immutable snapshot of the given row, mapping column keys to
        values.

        The snapshot is empty if the row does not exist. Later changes to the
        mapping are not reflected in the snapshot.
        """
        ...

    @abstractmethod
    def column_view(self, column: CK, /) -> frozendict[RK, VT]:
        """
        Get an immutable snapshot of the given column, mapping row keys to
        values.

        The snapshot is empty if the column does not exist. Later changes to
        the mapping are not reflected in the snapshot.
        """
        ...

    @abstractmethod
    def row_map_view(self) -> frozendict[RK, frozendict[CK, VT]]:
        """
        Get a deep immutable snapshot of the mapping, as a mapping of row keys
        to mappings of column keys to values.
        """
        ...

    @abstractmethod
    def column_map_view(self) -> frozendict[CK, frozendict[RK, VT]]:
        """
        Get a deep immutable snapshot of the mapping, as a mapping of column
        keys to mappings of row keys to values.
        """
        ...

    @abstractmethod
    def row_keys(self) -> frozenset[RK]:
        """Get a snapshot of the keys of all rows that hold a value."""
        ...

    @abstractmethod
    def column_keys(self) -> frozenset[CK]:
        """Get a snapshot of the keys of all columns that hold a value."""
        ...

    @abstractmethod
    def fill_map_from_row(
        self,
        target: MutableMapping[CK, VT],
        row: RK, /
    ) -> Self:
        """
        Copy all (column key, value) pairs of the given row into the target
        mapping, overwriting existing keys, and return this mapping.
        """
        ...

    @abstractmethod
    def fill_map_from_column(
        self,
        target: MutableMapping[RK, VT],
        column: CK, /
    ) -> Self:
        """
        Copy all (row key, value) pairs of the given column into the target
        mapping, overwriting existing keys, and return this mapping.
        """
        ...

    @abstractmethod
    def copy_with_conversion(
        self,
        row_function: Callable[[RK], RK2],
        column_function: Callable[[CK], CK2],
        value_function: Callable[[VT], VT2], /
    ) -> "Map2D[RK2, CK2, VT2]":
        """
        Create a new mapping by converting every row key, column key, and
        value of this mapping with the given functions.
        """
        ...

    def __len__(self) -> int:
        """Get the number of (row, column) pairs that hold a value."""
        return self.size()

    def __bool__(self) -> bool:
        """Check if the mapping holds any values."""
        return self.non_empty()

    def __contains__(self, key: object, /) -> bool:
        """Check if the given (row, column) pair holds a value."""
        if (pair := _split_key(key)) is None:
            return False
        return self.contains_key(*pair)

    def __getitem__(self, key: tuple[RK, CK], /) -> VT:
        """
        Get the value at the given (row, column) pair.

        Raises a KeyError if the pair does not hold a value, or the key is not
        a (row, column) pair.
        """
        if (pair := _split_key(key)) is None:
            raise KeyError(key)
        value = self.get(*pair, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value  # type: ignore[return-value]

    def __eq__(self, other: object, /) -> bool:
        """Check if both mappings hold the same (row, column, value) triples."""
        if not isinstance(other, Map2D):
            return NotImplemented
        return (self.size() == other.size()
                and self.row_map_view() == other.row_map_view())

    def is_empty(self) -> bool:
        """Check if the mapping holds no values."""
        return self.size() == 0

    def non_empty(self) -> bool:
        """Check if the mapping holds at least one value."""
        return self.size() > 0

    def get_or_default(self, row: RK, column: CK, default: DT, /) -> VT | DT:
        """
        Get the value at the given row and column, or `default` if there is
        no value there.

        Unlike `get`, the default must be given. A stored None is returned as
        is, and is not replaced by the default.
        """
        return self.get(row, column, default)  # type: ignore[return-value]

    def entries(self) -> tuple[Entry, ...]:
        """Get a snapshot of all (row key, column key, value) triples."""
        return tuple(
            Entry(row, column, value)
            for row, columns in self.row_map_view().items()
            for column, value in columns.items()
        )

    def row_count(self) -> int:
        """Get the number of rows that hold a value."""
        return len(self.row_keys())

    def column_count(self) -> int:
        """Get the number of columns that hold a value."""
        return len(self.column_keys())


class MutableMap2D(Map2D[RK, CK, VT]):
    """
    Abstract base class for mutable two-dimensional mappings.

    Sub-classes must implement `put`, `remove`, `remove_row`,
    `remove_column` and `clear`. The bulk insertion methods, `pop`, and
    assignment and deletion by (row, column) pairs, are built on those.
    """

    __slots__ = ()

    @abstractmethod
    def put(self, row: RK, column: CK, value: VT, /) -> VT | None:
        """
        Put a value at the given row and column, replacing any existing value.

        Return the value that was replaced, or None if there was none.

        Raises an InvalidKeyError if the row or column key is None or
        unhashable.
        """
        ...

    @abstractmethod
    def remove(self, row: RK, column: CK, /) -> VT | None:
        """
        Remove the value at the given row and column.

        Return the value that was removed, or None if there was none.
        """
        ...

    @abstractmethod
    def remove_row(self, row: RK, /) -> frozendict[CK, VT]:
        """
        Remove all values in the given row.

        Return a snapshot of the removed row, which is empty if the row did
        not exist.
        """
        ...

    @abstractmethod
    def remove_column(self, column: CK, /) -> frozendict[RK, VT]:
        """
        Remove all values in the given column.

        Return a snapshot of the removed column, which is empty if the column
        did not exist.
        """
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove all values from the mapping."""
        ...

    def __setitem__(self, key: tuple[RK, CK], value: VT, /) -> None:
        """
        Put a value at the given (row, column) pair.

        Raises a TypeError if the key is not a (row, column) pair.
        """
        if (pair := _split_key(key)) is None:
            raise TypeError(f"Key must be a (row, column) pair, got {key!r}.")
        self.put(*pair, value)

    def __delitem__(self, key: tuple[RK, CK], /) -> None:
        """
        Remove the value at the given (row, column) pair.

        Raises a KeyError if the pair does not hold a value, or the key is not
        a (row, column) pair.
        """
        if (pair := _split_key(key)) is None or not self.contains_key(*pair):
            raise KeyError(key)
        self.remove(*pair)

    @overload
    def pop(self, row: RK, column: CK, /) -> VT:
        ...

    @overload
    def pop(self, row: RK, column: CK, default: DT, /) -> VT | DT:
        ...

    def pop(self, row: RK, column: CK, default: Any = _MISSING, /) -> Any:
        """
        Remove the value at the given row and column and return it.

        If the pair does not hold a value, return `default` if given;
        otherwise, raise a KeyError.
        """
        if not self.contains_key(row, column):
            if default is _MISSING:
                raise KeyError((row, column))
            return default
        return self.remove(row, column)

    def put_all(self, source: Map2D[RK, CK, VT], /) -> Self:
        """
        Put all (row, column, value) triples of the source mapping into this
        mapping, and return this mapping.

        The source is read through a snapshot, so it can be this mapping.
        """
        for row, columns in source.row_map_view().items():
            for column, value in columns.items():
                self.put(row, column, value)
        return self

    def put_all_to_row(self, source: Mapping[CK, VT], row: RK, /) -> Self:
        """
        Put all (column key, value) pairs of the source mapping into the given
        row of this mapping, and return this mapping.
        """
        for column, value in source.items():
            self.put(row, column, value)
        return self

    def put_all_to_column(
        self,
        source: Mapping[RK, VT],
        column: CK, /
    ) -> Self:
        """
        Put all (row key, value) pairs of the source mapping into the given
        column of this mapping, and return this mapping.
        """
        for row, value in source.items():
            self.put(row, column, value)
        return self


Map2DInit: TypeAlias = (Map2D[RK, CK, VT]
                        | Mapping[RK, Mapping[CK, VT]]
                        | Iterable[tuple[RK, CK, VT]])


@final
class DualIndexMap(MutableMap2D[RK, CK, VT]):
    """
    Class defining a mutable two-dimensional mapping with a dual index.

    The mapping keeps two indexes of the same (row, column, value) triples;
    a row index mapping row keys to dictionaries of column keys to values,
    and a column index mapping column keys to dictionaries of row keys to
    values. Both indexes are updated together by every mutating operation,
    so whole rows and whole columns can both be looked up without scanning.
    Insertions are therefore slower, and memory usage is higher, than for a
    dictionary keyed by (row, column) pairs.

    The indexes are never exposed. Rows, columns, and the whole mapping can
    only be read through immutable snapshots, which do not change when the
    mapping does. Rows and columns that become empty are removed from their
    index straight away.

    Row and column keys must be hashable and not None. Values can be anything,
    including None. Use `contains_key` to tell a stored None from a missing
    value.

    The mapping is not thread-safe.

    Example Usage
    -------------
    ```
    >>> from map2d.datastructures.mappings import DualIndexMap
    >>> dim = DualIndexMap[str, str, int]()
    >>> dim.put("a", "x", 1)
    >>> dim.put("a", "y", 2)
    >>> dim.put("b", "x", 3)
    >>> dim
    DualIndexMap({'a': {'x': 1, 'y': 2}, 'b': {'x': 3}})

    # Look up by full key, by row, or by column.
    >>> dim.get("a", "y")
    2
    >>> dim.row_view("a")
    frozendict({'x': 1, 'y': 2})
    >>> dim.column_view("x")
    frozendict({'a': 1, 'b': 3})

    # Removing the last value in a row removes the row.
    >>> dim.remove("a", "x")
    1
    >>> dim.remove("a", "y")
    2
    >>> dim.contains_row("a")
    False

    # Mutating methods that return the mapping can be chained.
    >>> target = {}
    >>> dim.put_all_to_row({"z": 4}, "b").fill_map_from_row(target, "b")
    DualIndexMap({'b': {'x': 3, 'z': 4}})
    >>> target
    {'x': 3, 'z': 4}
    ```
    """

    __DUAL_INDEX_MAP_LOGGER = logging.getLogger("DualIndexMap")

    __slots__ = {
        "__rows": "The row index, mapping rows to columns to values.",
        "__columns": "The column index, mapping columns to rows to values.",
        "__size": "The number of (row, column) pairs that hold a value.",
        "__debug": "Whether to log debug messages."
    }

    @overload
    def __init__(self, *, debug: bool = False) -> None:
        """
        Create a new empty dual index map.

        For example:
        ```
        >>> dim = DualIndexMap()
        >>> dim
        DualIndexMap({})
        ```
        """
        ...

    @overload
    def __init__(
        self,
        map_: Map2D[RK, CK, VT], /, *,
        debug: bool = False
    ) -> None:
        """
        Create a new dual index map holding the same triples as the given
        two-dimensional mapping.
        """
        ...

    @overload
    def __init__(
        self,
        mapping: Mapping[RK, Mapping[CK, VT]], /, *,
        debug: bool = False
    ) -> None:
        """
        Create a new dual index map from a mapping of row keys to mappings of
        column keys to values.

        For example:
        ```
        >>> dim = DualIndexMap({"a": {"x": 1, "y": 2}, "b": {"x": 3}})
        >>> dim.column_view("x")
        frozendict({'a': 1, 'b': 3})
        ```
        """
        ...

    @overload
    def __init__(
        self,
        iterable: Iterable[tuple[RK, CK, VT]], /, *,
        debug: bool = False
    ) -> None:
        """
        Create a new dual index map from an iterable of (row key, column key,
        value) triples.

        For example:
        ```
        >>> dim = DualIndexMap([("a", "x", 1), ("a", "y", 2), ("b", "x", 3)])
        >>> dim.row_view("a")
        frozendict({'x': 1, 'y': 2})
        ```
        """
        ...

    def __init__(  # type: ignore[misc]
        self,
        init: Map2DInit | None = None, /, *,
        debug: bool = False
    ) -> None:
        """
        Create a new dual index map.

        Parameters
        ----------
        `init: Map2D | Mapping[RK, Mapping[CK, VT]] | Iterable[tuple[RK, CK,
        VT]] | None = None` - The initial contents of the mapping. Either a
        two-dimensional mapping, a row-major nested mapping, or an iterable of
        (row key, column key, value) triples. Every triple is added with
        `put`, so an InvalidKeyError is raised for any invalid key.

        `debug: bool = False` - Whether to log debug messages.
        """
        self.__rows: dict[RK, dict[CK, VT]] = {}
        self.__columns: dict[CK, dict[RK, VT]] = {}
        self.__size: int = 0
        self.__debug: bool = debug
        if self.__debug:
            self.__DUAL_INDEX_MAP_LOGGER.debug(
                "Creating new dual index map with: init=%s, debug=%s",
                type(init).__name__, debug
            )
        if init is not None:
            if isinstance(init, Map2D):
                self.put_all(init)
            elif isinstance(init, Mapping):
                for row, columns in init.items():
                    self.put_all_to_row(columns, row)
            else:
                for row, column, value in init:
                    self.put(row, column, value)

    def __repr__(self) -> str:
        """Get an instantiable string representation of the mapping."""
        return f"{self.__class__.__name__}({self.__rows!r})"

    def __copy__(self) -> "DualIndexMap[RK, CK, VT]":
        """Get a shallow copy of the mapping."""
        return self.copy()

    def copy(self) -> "DualIndexMap[RK, CK, VT]":
        """
        Get a shallow copy of the mapping.

        The copy has its own indexes, but keys and values are shared.
        """
        copy_: DualIndexMap[RK, CK, VT] = DualIndexMap(debug=self.__debug)
        copy_.__rows = {row: dict(columns)
                        for row, columns in self.__rows.items()}
        copy_.__columns = {column: dict(rows)
                           for column, rows in self.__columns.items()}
        copy_.__size = self.__size
        return copy_

    def freeze(self) -> "FrozenDualIndexMap[RK, CK, VT]":
        """Get a frozen copy of the mapping."""
        return FrozenDualIndexMap(self)

    @property
    def debug(self) -> bool:
        """Get whether debug messages are logged."""
        return self.__debug

    @override
    def size(self) -> int:
        return self.__size

    @override
    def put(self, row: RK, column: CK, value: VT, /) -> VT | None:
        # Both keys are checked before either index is touched, so that a
        # failed put never leaves the indexes inconsistent.
        _check_key("row", row)
        _check_key("column", column)
        columns = self.__rows.setdefault(row, {})
        rows = self.__columns.setdefault(column, {})
        old_value = columns.get(column, _MISSING)
        columns[column] = value
        rows[row] = value
        if old_value is _MISSING:
            self.__size += 1
        if self.__debug:
            self.__DUAL_INDEX_MAP_LOGGER.debug(
                "%s value at (%r, %r): size=%s",
                "Inserted" if old_value is _MISSING else "Replaced",
                row, column, self.__size
            )
        return None if old_value is _MISSING else old_value

    @override
    def get(self, row: RK, column: CK, default: DT | None = None, /
            ) -> VT | DT | None:
        columns = _lookup(self.__rows, row)
        if columns is None:
            return default
        return _lookup(columns, column, default)

    @override
    def remove(self, row: RK, column: CK, /) -> VT | None:
        columns = _lookup(self.__rows, row)
        if columns is None:
            return None
        value = _lookup(columns, column, _MISSING)
        if value is _MISSING:
            return None
        rows = self.__columns[column]
        del columns[column]
        del rows[row]
        self.__size -= 1
        if not columns:
            del self.__rows[row]
        if not rows:
            del self.__columns[column]
        if self.__debug:
            self.__DUAL_INDEX_MAP_LOGGER.debug(
                "Removed value at (%r, %r): size=%s",
                row, column, self.__size
            )
        return value

    def __remove_line(
        self,
        axis: Axis,
        key: Any,
        side: dict[Any, dict[Any, VT]],
        other_side: dict[Any, dict[Any, VT]]
    ) -> frozendict[Any, VT]:
        """Remove a whole row or column from both sides of the index."""
        others = _lookup(side, key)
        if others is None:
            return frozendict()
        del side[key]
        for other_key in others:
            other_keys = other_side[other_key]
            del other_keys[key]
            if not other_keys:
                del other_side[other_key]
        self.__size -= len(others)
        if self.__debug:
            self.__DUAL_INDEX_MAP_LOGGER.debug(
                "Removed %s %r with %s values: size=%s",
                axis, key, len(others), self.__size
            )
        return frozendict(others)

    @override
    def remove_row(self, row: RK, /) -> frozendict[CK, VT]:
        return self.__remove_line("row", row, self.__rows, self.__columns)

    @override
    def remove_column(self, column: CK, /) -> frozendict[RK, VT]:
        return self.__remove_line(
            "column", column, self.__columns, self.__rows
        )

    @override
    def clear(self) -> None:
        if self.__debug:
            self.__DUAL_INDEX_MAP_LOGGER.debug(
                "Clearing %s values.", self.__size
            )
        self.__size = 0
        self.__rows.clear()
        self.__columns.clear()

    @override
    def contains_key(self, row: RK, column: CK, /) -> bool:
        columns = _lookup(self.__rows, row)
        if columns is None:
            return False
        return _lookup(columns, column, _MISSING) is not _MISSING

    @override
    def contains_row(self, row: RK, /) -> bool:
        return _lookup(self.__rows, row) is not None

    @override
    def contains_column(self, column: CK, /) -> bool:
        return _lookup(self.__columns, column) is not None

    @override
    def contains_value(self, value: object, /) -> bool:
        return any(value in columns.values()
                   for columns in self.__rows.values())

    @override
    def row_view(self, row: RK, /) -> frozendict[CK, VT]:
        columns = _lookup(self.__rows, row)
        if columns is None:
            return frozendict()
        return frozendict(columns)

    @override
    def column_view(self, column: CK, /) -> frozendict[RK, VT]:
        rows = _lookup(self.__columns, column)
        if rows is None:
            return frozendict()
        return frozendict(rows)

    @override
    def row_map_view(self) -> frozendict[RK, frozendict[CK, VT]]:
        return freeze_nested(self.__rows)

    @override
    def column_map_view(self) -> frozendict[CK, frozendict[RK, VT]]:
        return freeze_nested(self.__columns)

    @override
    def row_keys(self) -> frozenset[RK]:
        return frozenset(self.__rows)

    @override
    def column_keys(self) -> frozenset[CK]:
        return frozenset(self.__columns)

    @override
    def row_count(self) -> int:
        return len(self.__rows)

    @override
    def column_count(self) -> int:
        return len(self.__columns)

    @override
    def fill_map_from_row(
        self,
        target: MutableMapping[CK, VT],
        row: RK, /
    ) -> Self:
        columns = _lookup(self.__rows, row)
        if columns is not None:
            target.update(columns)
        return self

    @override
    def fill_map_from_column(
        self,
        target: MutableMapping[RK, VT],
        column: CK, /
    ) -> Self:
        rows = _lookup(self.__columns, column)
        if rows is not None:
            target.update(rows)
        return self

    @override
    def put_all(self, source: Map2D[RK, CK, VT], /) -> Self:
        if self.__debug:
            self.__DUAL_INDEX_MAP_LOGGER.debug(
                "Putting all %s values from %s.",
                source.size(), type(source).__name__
            )
        return super().put_all(source)

    @override
    def copy_with_conversion(
        self,
        row_function: Callable[[RK], RK2],
        column_function: Callable[[CK], CK2],
        value_function: Callable[[VT], VT2], /
    ) -> "DualIndexMap[RK2, CK2, VT2]":
        """
        Create a new dual index map by converting every row key, column key,
        and value of this mapping with the given functions.

        Each function is called once per (row, column, value) triple, and the
        converted triple is put into the new mapping. This mapping is not
        modified.

        If converting the keys makes two or more triples share the same
        (row, column) pair, the new mapping holds one value for that pair,
        the one that was put last. Rows are visited in the order they were
        first added to this mapping, and columns within each row likewise.
        That order is an implementation detail and should not be relied upon.

        Raises an InvalidKeyError if a key function returns None or an
        unhashable key.
        """
        converted: DualIndexMap[RK2, CK2, VT2] = DualIndexMap(
            debug=self.__debug
        )
        for row, columns in self.__rows.items():
            for column, value in columns.items():
                converted.put(
                    row_function(row),
                    column_function(column),
                    value_function(value)
                )
        if self.__debug:
            self.__DUAL_INDEX_MAP_LOGGER.debug(
                "Converted %s values into %s values.",
                self.__size, converted.size()
            )
        return converted


@final
class FrozenDualIndexMap(Map2D[RK, CK, VT]):
    """
    Class defining a frozen two-dimensional mapping with a dual index.

    A frozen dual index map is an immutable and hashable version of a dual
    index map. It is hashable only if all of its values are hashable.
    """

    __slots__ = {
        "__map": "The dual index map being frozen.",
        "__hash": "The hash of the mapping."
    }

    def __init__(self, init: Map2DInit | None = None, /) -> None:
        """
        Create a new frozen dual index map.

        Takes the same initial contents as `DualIndexMap`.
        """
        self.__map: DualIndexMap[RK, CK, VT] = DualIndexMap(init)
        self.__hash: Optional[int] = None

    def __repr__(self) -> str:
        """Get an instantiable string representation of the mapping."""
        return (f"{self.__class__.__name__}"
                f"({_format_rows(self.__map.row_map_view())})")

    def __hash__(self) -> int:
        """Get the hash of the mapping."""
        if self.__hash is None:
            hash_: int = 0
            for entry in self.__map.entries():
                hash_ ^= hash(entry)
            self.__hash = hash_
        return self.__hash

    def __copy__(self) -> "FrozenDualIndexMap[RK, CK, VT]":
        """Get the mapping itself, since it cannot be modified."""
        return self

    def thaw(self, *, debug: bool = False) -> DualIndexMap[RK, CK, VT]:
        """Get a mutable copy of the mapping."""
        return DualIndexMap(self, debug=debug)

    # pylint: disable=missing-function-docstring
    @override
    def size(self) -> int:
        return self.__map.size()
    size.__doc__ = Map2D.size.__doc__

    @override
    def get(self, row: RK, column: CK, default: DT | None = None, /
            ) -> VT | DT | None:
        return self.__map.get(row, column, default)
    get.__doc__ = Map2D.get.__doc__

    @override
    def get_or_default(self, row: RK, column: CK, default: DT, /) -> VT | DT:
        return self.__map.get_or_default(row, column, default)
    get_or_default.__doc__ = Map2D.get_or_default.__doc__

    @override
    def contains_key(self, row: RK, column: CK, /) -> bool:
        return self.__map.contains_key(row, column)
    contains_key.__doc__ = Map2D.contains_key.__doc__

    @override
    def contains_row(self, row: RK, /) -> bool:
        return self.__map.contains_row(row)
    contains_row.__doc__ = Map2D.contains_row.__doc__

    @override
    def contains_column(self, column: CK, /) -> bool:
        return self.__map.contains_column(column)
    contains_column.__doc__ = Map2D.contains_column.__doc__

    @override
    def contains_value(self, value: object, /) -> bool:
        return self.__map.contains_value(value)
    contains_value.__doc__ = Map2D.contains_value.__doc__

    @override
    def row_view(self, row: RK, /) -> frozendict[CK, VT]:
        return self.__map.row_view(row)
    row_view.__doc__ = Map2D.row_view.__doc__

    @override
    def column_view(self, column: CK, /) -> frozendict[RK, VT]:
        return self.__map.column_view(column)
    column_view.__doc__ = Map2D.column_view.__doc__

    @override
    def row_map_view(self) -> frozendict[RK, frozendict[CK, VT]]:
        return self.__map.row_map_view()
    row_map_view.__doc__ = Map2D.row_map_view.__doc__

    @override
    def column_map_view(self) -> frozendict[CK, frozendict[RK, VT]]:
        return self.__map.column_map_view()
    column_map_view.__doc__ = Map2D.column_map_view.__doc__

    @override
    def row_keys(self) -> frozenset[RK]:
        return self.__map.row_keys()
    row_keys.__doc__ = Map2D.row_keys.__doc__

    @override
    def column_keys(self) -> frozenset[CK]:
        return self.__map.column_keys()
    column_keys.__doc__ = Map2D.column_keys.__doc__

    @override
    def row_count(self) -> int:
        return self.__map.row_count()
    row_count.__doc__ = Map2D.row_count.__doc__

    @override
    def column_count(self) -> int:
        return self.__map.column_count()
    column_count.__doc__ = Map2D.column_count.__doc__

    @override
    def fill_map_from_row(
        self,
        target: MutableMapping[CK, VT],
        row: RK, /
    ) -> Self:
        self.__map.fill_map_from_row(target, row)
        return self
    fill_map_from_row.__doc__ = Map2D.fill_map_from_row.__doc__

    @override
    def fill_map_from_column(
        self,
        target: MutableMapping[RK, VT],
        column: CK, /
    ) -> Self:
        self.__map.fill_map_from_column(target, column)
        return self
    fill_map_from_column.__doc__ = Map2D.fill_map_from_column.__doc__

    @override
    def copy_with_conversion(
        self,
        row_function: Callable[[RK], RK2],
        column_function: Callable[[CK], CK2],
        value_function: Callable[[VT], VT2], /
    ) -> "FrozenDualIndexMap[RK2, CK2, VT2]":
        return FrozenDualIndexMap(
            self.__map.copy_with_conversion(
                row_function, column_function, value_function
            )
        )
    copy_with_conversion.__doc__ = DualIndexMap.copy_with_conversion.__doc__
    # pylint: enable=missing-function-docstring


def __main() -> None:
    """Execute the main routine."""
    logging.basicConfig(level=logging.DEBUG)
    dim = DualIndexMap[str, str, int](debug=True)
    dim.put("a", "x", 1)
    dim.put("a", "y", 2)
    dim.put("b", "x", 3)
    print(dim)
    print(dim.row_view("a"))
    print(dim.column_view("x"))
    rows = dim.row_map_view()
    dim.remove("a", "x")
    print(rows)
    print(dim.row_map_view())
    dim.remove("a", "y")
    print(dim.contains_row("a"))
    print(dim.copy_with_conversion(str.upper, str.upper, lambda v: v * 10))
    frozen = dim.freeze()
    print(frozen, hash(frozen))


if __name__ == "__main__":
    __main()
