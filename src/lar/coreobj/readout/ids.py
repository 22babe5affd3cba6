# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
"""
Identifiers of readout elements.

The readout hierarchy parallels the geometry one: a cryostat contains TPC sets
(groups of TPCs not sharing channels with any TPC outside the group), and each
TPC set contains readout planes (groups of planes sharing channels). The cryostat
level is the geometry :class:`~lar.coreobj.geometry.ids.CryostatID` itself.
"""

from __future__ import annotations

from enum import IntEnum

from ..geometry.ids import UINT16_MAX, ChildID, CryostatID


class ReadoutLevel(IntEnum):
    """Depth of a readout element. There is no detector level."""

    CRYOSTAT = 0
    TPCSET = 1
    READOUT_PLANE = 2
    CHANNEL = 3


N_READOUT_LEVELS = 4


class TPCsetID(
    ChildID,
    parent=CryostatID,
    tag='S',
    index_name='tpcset',
    level=ReadoutLevel.TPCSET,
    invalid_id=UINT16_MAX,
):
    """Identifier of a set of TPCs sharing readout channels."""

    __slots__ = ()

    def as_cryostat_id(self) -> CryostatID:
        return self.as_id(CryostatID)

    def as_tpcset_id(self) -> TPCsetID:
        return self._copy()


class ROPID(
    ChildID,
    parent=TPCsetID,
    tag='R',
    index_name='rop',
    level=ReadoutLevel.READOUT_PLANE,
):
    """Identifier of a readout plane, a set of planes sharing readout channels."""

    __slots__ = ()

    def as_cryostat_id(self) -> CryostatID:
        return self.as_id(CryostatID)

    def as_tpcset_id(self) -> TPCsetID:
        return self.as_id(TPCsetID)

    def as_rop_id(self) -> ROPID:
        return self._copy()


__all__ = [
    'N_READOUT_LEVELS',
    'ROPID',
    'CryostatID',
    'ReadoutLevel',
    'TPCsetID',
]
