# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
"""Depth taxonomy of the geometry element hierarchy."""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class ElementLevel(IntEnum):
    """
    Depth of a geometry element in the cryostat/TPC/plane/wire hierarchy.

    Optical detectors live directly inside a cryostat and therefore share the
    depth of a TPC.
    """

    CRYOSTAT = 0
    TPC = 1
    OPTICAL_DETECTOR = 1
    PLANE = 2
    WIRE = 3


N_LEVELS = 4


def level_of(id_type: Any) -> int:
    """
    Return the depth of an identifier type (or of an identifier instance).

    Parameters
    ----------
    id_type:
        An identifier class such as ``PlaneID``, or an instance of one.

    Returns
    -------
    :
        The depth, 0 for the root (cryostat) level.

    Raises
    ------
    TypeError:
        If ``id_type`` is not an identifier.
    """
    level = getattr(id_type, 'LEVEL', None)
    if not isinstance(level, int):
        raise TypeError(f"{id_type!r} is not a hierarchical identifier")
    return level
