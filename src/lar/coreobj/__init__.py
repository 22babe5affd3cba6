# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
# ruff: noqa: E402, I

import importlib.metadata

try:
    __version__ = importlib.metadata.version("larcoreobj")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0"

del importlib

from .geometry import (
    TPCID,
    CryostatID,
    ElementLevel,
    OpDetID,
    PlaneID,
    WireID,
)
from .logging_config import configure_logging
from .readout import ROPID, ReadoutLevel, TPCsetID
from .summary import (
    GeometryConfigurationInfo,
    InconsistentRunDataError,
    POTSummary,
    RunData,
)

__all__ = [
    "TPCID",
    "CryostatID",
    "ElementLevel",
    "GeometryConfigurationInfo",
    "InconsistentRunDataError",
    "OpDetID",
    "POTSummary",
    "PlaneID",
    "ROPID",
    "ReadoutLevel",
    "RunData",
    "TPCsetID",
    "WireID",
    "configure_logging",
]
