# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)

from .ids import N_READOUT_LEVELS, ROPID, CryostatID, ReadoutLevel, TPCsetID

__all__ = ['N_READOUT_LEVELS', 'ROPID', 'CryostatID', 'ReadoutLevel', 'TPCsetID']
