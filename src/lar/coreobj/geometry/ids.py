# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
"""
Hierarchical identifiers of geometry elements.

An identifier denotes the path from a cryostat down to one element of the
detector geometry, e.g. the wire ``C:1 T:3 P:2 W:9`` is wire 9 of plane 2 of
TPC 3 in cryostat 1.
Each identifier type holds the index of its own level and a private copy of the
identifier of its parent level; only the root (cryostat) level carries the
validity flag.

Identifiers are plain values. They are ordered lexicographically from the root
level down, and equality and ordering ignore the validity flag: validity is a
separate property from identity. An identifier built from an invalid parent is
accepted and reports itself as invalid, but its indices still take part in
comparison and formatting.
"""

from __future__ import annotations

import functools
import operator
from abc import ABC, abstractmethod
from typing import Any, ClassVar, TypeVar

from .levels import ElementLevel

UINT32_MAX = 2**32 - 1
UINT16_MAX = 2**16 - 1

ID = TypeVar('ID', bound='HierarchicalID')

# marks a root constructed without arguments, the invalid identifier
_NO_INDEX: Any = object()


def three_way_comparison(a: int, b: int) -> int:
    """Return -1 if ``a < b``, 0 if ``a == b`` and +1 if ``a > b``."""
    return 0 if a == b else (-1 if a < b else 1)


def _as_index(value: Any, invalid_id: int | None = None) -> int:
    # bool is an int, but never a meaningful element index
    if isinstance(value, bool):
        raise TypeError("Element index must be an integer, got bool")
    try:
        index = operator.index(value)
    except TypeError:
        raise TypeError(
            f"Element index must be an integer, got {type(value).__name__}"
        ) from None
    if invalid_id is not None and not 0 <= index <= invalid_id:
        raise ValueError(f"Element index {index} is outside 0 to {invalid_id}")
    return index


def _index_property(level: int, name: str) -> property:
    def getter(self: HierarchicalID) -> int:
        return self.get_index(level)

    def setter(self: HierarchicalID, value: int) -> None:
        self.write_index(level, value)

    return property(getter, setter, doc=f"Index of the {name} level.")


@functools.total_ordering
class HierarchicalID(ABC):
    """
    Common behaviour of all hierarchical identifiers.

    Concrete identifier types derive from :class:`RootID` or :class:`ChildID` and
    describe their place in the hierarchy with class keywords::

        class TPCID(ChildID, parent=CryostatID, tag='T', index_name='tpc'):
            __slots__ = ()

    The depth of the new type is derived from its parent and checked against the
    optional ``level`` keyword when the class is defined.
    This class is abstract: subclasses provide ``cmp`` and ``_copy``, and only the
    concrete identifier types are instantiated. Every index lies in ``0`` to
    ``INVALID_ID`` of its level.
    """

    __slots__ = ('_index',)

    LEVEL: ClassVar[int]
    TAG: ClassVar[str]
    TAGS: ClassVar[tuple[str, ...]]
    INDEX_NAMES: ClassVar[tuple[str, ...]]
    INVALID_ID: ClassVar[int]
    PARENT_TYPE: ClassVar[type[HierarchicalID] | None] = None

    _index: int

    def __init_subclass__(
        cls,
        *,
        tag: str | None = None,
        index_name: str | None = None,
        parent: type[HierarchicalID] | None = None,
        level: int | None = None,
        invalid_id: int = UINT32_MAX,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if tag is None:
            # abstract intermediate base
            return
        if index_name is None:
            raise TypeError(f"{cls.__name__}: index_name is required")
        if issubclass(cls, ChildID) != (parent is not None):
            raise TypeError(
                f"{cls.__name__}: child identifiers need a parent type, "
                "root identifiers must not have one"
            )
        depth = 0 if parent is None else parent.LEVEL + 1
        if level is not None and level != depth:
            raise TypeError(
                f"{cls.__name__} is declared at level {level} "
                f"but its parent chain puts it at level {depth}"
            )
        cls.LEVEL = depth
        cls.TAG = tag
        cls.PARENT_TYPE = parent
        cls.INVALID_ID = invalid_id
        cls.TAGS = (parent.TAGS if parent else ()) + (tag,)
        cls.INDEX_NAMES = (parent.INDEX_NAMES if parent else ()) + (index_name,)
        for lvl, name in enumerate(cls.INDEX_NAMES):
            setattr(cls, name, _index_property(lvl, name))

    @classmethod
    def get_invalid_id(cls) -> int:
        """Return the index value reserved for "no such element" at this level."""
        return cls.INVALID_ID

    # --- index access -------------------------------------------------------

    @property
    def deepest_index(self) -> int:
        """Index of this identifier's own level."""
        return self._index

    @deepest_index.setter
    def deepest_index(self, value: int) -> None:
        self._index = _as_index(value, self.INVALID_ID)

    def _check_level(self, level: int) -> int:
        level = _as_index(level)
        if not 0 <= level <= self.LEVEL:
            raise IndexError(
                f"{type(self).__name__} has no level {level} "
                f"(levels 0 to {self.LEVEL})"
            )
        return level

    def _node(self, level: int) -> HierarchicalID:
        node: HierarchicalID = self
        for _ in range(self.LEVEL - self._check_level(level)):
            node = node._parent  # type: ignore[attr-defined]
        return node

    def get_index(self, level: int) -> int:
        """
        Return the index stored at absolute depth ``level``.

        Raises
        ------
        IndexError:
            If ``level`` is deeper than this identifier.
        """
        return self._node(level)._index

    def write_index(self, level: int, value: int) -> None:
        """Set the index stored at absolute depth ``level``."""
        node = self._node(level)
        node._index = _as_index(value, node.INVALID_ID)

    def get_rel_index(self, up: int) -> int:
        """Return the index ``up`` levels above this one (0 is the own index)."""
        return self.get_index(self.LEVEL - _as_index(up))

    def indices(self) -> tuple[int, ...]:
        """All indices, from the cryostat down to this level."""
        return tuple(self.get_index(level) for level in range(self.LEVEL + 1))

    def ancestor_id(self, level: int) -> HierarchicalID:
        """Return a copy of the identifier of the ancestor at depth ``level``."""
        return self._node(level)._copy()

    def as_id(self, id_type: type[ID]) -> ID:
        """
        Return this identifier or its ancestor of type ``id_type``.

        Raises
        ------
        TypeError:
            If ``id_type`` is not this type nor one of its ancestor types.
        """
        node = self._node(min(self.LEVEL, getattr(id_type, 'LEVEL', self.LEVEL)))
        if type(node) is not id_type:
            raise TypeError(
                f"{type(self).__name__} can't be converted to {id_type.__name__}"
            )
        return node._copy()  # type: ignore[return-value]

    # --- validity -----------------------------------------------------------

    @property
    def is_valid(self) -> bool:
        """Whether this identifier points to an existing element."""
        return self._node(0)._valid  # type: ignore[attr-defined]

    def set_validity(self, valid: bool) -> None:
        self._node(0)._valid = bool(valid)  # type: ignore[attr-defined]

    def mark_valid(self) -> None:
        self.set_validity(True)

    def mark_invalid(self) -> None:
        self.set_validity(False)

    def __bool__(self) -> bool:
        return self.is_valid

    # --- comparison ---------------------------------------------------------

    @abstractmethod
    def cmp(self, other: HierarchicalID) -> int:
        """Return < 0 if this is smaller than ``other``, 0 if equal, > 0 if larger."""

    def _check_comparable(self, other: Any) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"Can't compare {type(self).__name__} with {type(other).__name__}"
            )

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.cmp(other) == 0  # type: ignore[arg-type]

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.cmp(other) < 0  # type: ignore[arg-type]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.indices()))

    # --- copy and formatting --------------------------------------------------

    @abstractmethod
    def _copy(self: ID) -> ID:
        """Return an independent copy, including the parent chain."""

    def __copy__(self: ID) -> ID:
        return self._copy()

    def __deepcopy__(self: ID, memo: dict[int, Any]) -> ID:
        return self._copy()

    def __str__(self) -> str:
        return ' '.join(
            f'{tag}:{index}' for tag, index in zip(self.TAGS, self.indices())
        )

    def __repr__(self) -> str:
        state = '' if self.is_valid else ', invalid'
        return f'{type(self).__name__}({self}{state})'


class RootID(HierarchicalID):
    """Base of the root level: owns the validity flag and has no parent."""

    __slots__ = ('_valid',)

    _valid: bool

    def __init__(self, index: Any = _NO_INDEX, valid: bool | None = None) -> None:
        if index is _NO_INDEX:
            if valid is not None:
                raise TypeError(
                    f"{type(self).__name__}: validity requires an explicit index"
                )
            self._index = self.INVALID_ID
            self._valid = False
            return
        if valid is not None and not isinstance(valid, bool):
            raise TypeError(f"Validity flag must be a bool, got {type(valid).__name__}")
        self._index = _as_index(index, self.INVALID_ID)
        self._valid = True if valid is None else valid

    def cmp(self, other: HierarchicalID) -> int:
        self._check_comparable(other)
        return three_way_comparison(self._index, other._index)

    def _copy(self: ID) -> ID:
        clone = object.__new__(type(self))
        clone._index = self._index
        clone._valid = self._valid  # type: ignore[attr-defined]
        return clone


class ChildID(HierarchicalID):
    """
    Base of all levels below the root.

    Construction:

    - ``XID()``: the invalid identifier, every level set to its invalid index;
    - ``XID(parent, index)``: element ``index`` inside (a copy of) ``parent``,
      which keeps its validity;
    - ``XID(ancestor, i, ..., index)``: as above, with the missing levels between
      a higher ancestor and this one given as indices;
    - ``XID(c, ..., index)``: one index per level from the cryostat down.
    """

    __slots__ = ('_parent',)

    _parent: HierarchicalID

    def __init__(self, *args: Any) -> None:
        parent_type = self.PARENT_TYPE
        if not args:
            self._parent = parent_type()
            self._index = self.INVALID_ID
            return
        if len(args) == 1:
            raise TypeError(
                f"{type(self).__name__} needs a parent or one index per level "
                f"(cryostat to {self.INDEX_NAMES[-1]}), got a single argument"
            )
        *head, index = args
        if len(head) == 1 and type(head[0]) is parent_type:
            self._parent = head[0]._copy()
        else:
            self._parent = parent_type(*head)
        self._index = _as_index(index, self.INVALID_ID)

    @property
    def parent_id(self) -> HierarchicalID:
        """Copy of the identifier one level up."""
        return self._parent._copy()

    def cmp(self, other: HierarchicalID) -> int:
        self._check_comparable(other)
        result = self._parent.cmp(other._parent)  # type: ignore[attr-defined]
        if result != 0:
            return result
        return three_way_comparison(self._index, other._index)

    def _copy(self: ID) -> ID:
        clone = object.__new__(type(self))
        clone._parent = self._parent._copy()  # type: ignore[attr-defined]
        clone._index = self._index
        return clone


# --- geometry identifiers ----------------------------------------------------


class CryostatID(
    RootID, tag='C', index_name='cryostat', level=ElementLevel.CRYOSTAT
):
    """Identifier of a cryostat."""

    __slots__ = ()

    def as_cryostat_id(self) -> CryostatID:
        return self._copy()


class TPCID(
    ChildID, parent=CryostatID, tag='T', index_name='tpc', level=ElementLevel.TPC
):
    """Identifier of a TPC within its cryostat."""

    __slots__ = ()

    def as_cryostat_id(self) -> CryostatID:
        return self.as_id(CryostatID)

    def as_tpc_id(self) -> TPCID:
        return self._copy()


class OpDetID(
    ChildID,
    parent=CryostatID,
    tag='O',
    index_name='opdet',
    level=ElementLevel.OPTICAL_DETECTOR,
):
    """Identifier of an optical detector within its cryostat."""

    __slots__ = ()

    def as_cryostat_id(self) -> CryostatID:
        return self.as_id(CryostatID)

    def as_opdet_id(self) -> OpDetID:
        return self._copy()


class PlaneID(
    ChildID, parent=TPCID, tag='P', index_name='plane', level=ElementLevel.PLANE
):
    """Identifier of a wire plane within its TPC."""

    __slots__ = ()

    def as_cryostat_id(self) -> CryostatID:
        return self.as_id(CryostatID)

    def as_tpc_id(self) -> TPCID:
        return self.as_id(TPCID)

    def as_plane_id(self) -> PlaneID:
        return self._copy()


class WireID(
    ChildID, parent=PlaneID, tag='W', index_name='wire', level=ElementLevel.WIRE
):
    """Identifier of a wire within its plane."""

    __slots__ = ()

    def as_cryostat_id(self) -> CryostatID:
        return self.as_id(CryostatID)

    def as_tpc_id(self) -> TPCID:
        return self.as_id(TPCID)

    def as_plane_id(self) -> PlaneID:
        return self.as_id(PlaneID)

    def as_wire_id(self) -> WireID:
        return self._copy()
