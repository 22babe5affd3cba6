# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
"""Enumerations describing geometry elements."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Coordinate(Enum):
    X = 0
    Y = 1
    Z = 2


class View(Enum):
    """Projection measured by a wire plane."""

    U = 0
    V = 1
    W = 2
    # planes with vertical wires; same value as W, kept for older detectors
    Z = 2
    THREE_D = 3
    UNKNOWN = 4


class Orientation(Enum):
    HORIZONTAL = 0
    VERTICAL = 1


class SignalType(Enum):
    INDUCTION = 0
    COLLECTION = 1
    MYSTERY = 2


class DriftDirection(Enum):
    """
    Sign of the drift direction.

    This does not distinguish drift axes: negative x and negative z drift are both
    ``NEG``.
    """

    UNKNOWN = 0
    POS = 1
    NEG = 2
    POS_X = 1
    NEG_X = 2


_SIGNAL_TYPE_NAMES = {
    SignalType.INDUCTION: 'induction',
    SignalType.COLLECTION: 'collection',
    SignalType.MYSTERY: 'unknown',
}


def signal_type_name(sig_type: SignalType) -> str:
    """
    Return a human-readable name for a signal type.

    Raises
    ------
    ValueError:
        If ``sig_type`` is not a :class:`SignalType`.
    """
    try:
        return _SIGNAL_TYPE_NAMES[sig_type]
    except (KeyError, TypeError):
        raise ValueError(f"Unexpected signal type {sig_type!r}") from None


@dataclass(frozen=True, slots=True)
class WireIDIntersection:
    """
    Intersection point of two wires, in the y-z plane of a TPC.

    Intersections sort by decreasing ``|y|``, which in an APA follows the direction
    of increasing wire index: moving inward vertically towards ``y = 0``.
    """

    y: float
    z: float
    tpc: int

    def __lt__(self, other: WireIDIntersection) -> bool:
        if not isinstance(other, WireIDIntersection):
            return NotImplemented
        return abs(self.y) > abs(other.y)
