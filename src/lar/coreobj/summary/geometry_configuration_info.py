# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
"""Description of the geometry configuration a run was processed with."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

_RULER = '-' * 80


@dataclass(frozen=True, slots=True, kw_only=True)
class GeometryConfigurationInfo:
    """
    Geometry configuration record.

    Which fields are meaningful depends on ``data_version``:

    - version 1: ``detector_name``;
    - version 2: also ``geometry_service_configuration``, the full configuration
      of the geometry service.

    A version of 0 marks the record as invalid.
    """

    INVALID_DATA_VERSION: ClassVar[int] = 0

    data_version: int = INVALID_DATA_VERSION
    geometry_service_configuration: str = ""
    detector_name: str = ""

    def is_data_valid(self) -> bool:
        return self.data_version != self.INVALID_DATA_VERSION

    def __str__(self) -> str:
        if not self.is_data_valid():
            return "Invalid geometry configuration information"
        lines = [f"Geometry information version: {self.data_version}"]
        if self.data_version >= 1:
            lines.append(f"Detector name:               '{self.detector_name}'")
        if self.data_version >= 2:
            lines.extend(
                [
                    "Full configuration:",
                    _RULER,
                    self.geometry_service_configuration,
                    _RULER,
                ]
            )
        if self.data_version > 2:
            lines.append(
                "[this version of code can't fully decode further information]"
            )
        return '\n'.join(lines)
