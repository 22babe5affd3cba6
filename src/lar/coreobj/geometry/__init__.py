# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)

from .ids import (
    TPCID,
    UINT16_MAX,
    UINT32_MAX,
    ChildID,
    CryostatID,
    HierarchicalID,
    OpDetID,
    PlaneID,
    RootID,
    WireID,
    three_way_comparison,
)
from .levels import N_LEVELS, ElementLevel, level_of
from .types import (
    Coordinate,
    DriftDirection,
    Orientation,
    SignalType,
    View,
    WireIDIntersection,
    signal_type_name,
)
from .vectors import (
    CoordinateFrame,
    GlobalCoords,
    OpticalLocalCoords,
    Point,
    Rotation,
    Vector,
    global_point,
    global_vector,
    optical_point,
    optical_vector,
)

__all__ = [
    'N_LEVELS',
    'TPCID',
    'UINT16_MAX',
    'UINT32_MAX',
    'ChildID',
    'Coordinate',
    'CoordinateFrame',
    'CryostatID',
    'DriftDirection',
    'ElementLevel',
    'GlobalCoords',
    'HierarchicalID',
    'OpDetID',
    'OpticalLocalCoords',
    'Orientation',
    'PlaneID',
    'Point',
    'RootID',
    'Rotation',
    'SignalType',
    'Vector',
    'View',
    'WireID',
    'WireIDIntersection',
    'global_point',
    'global_vector',
    'level_of',
    'optical_point',
    'optical_vector',
    'signal_type_name',
    'three_way_comparison',
]
