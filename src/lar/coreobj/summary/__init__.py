# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)

from .geometry_configuration_info import GeometryConfigurationInfo
from .pot_summary import POTSummary
from .run_data import InconsistentRunDataError, RunData

__all__ = [
    'GeometryConfigurationInfo',
    'InconsistentRunDataError',
    'POTSummary',
    'RunData',
]
