# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
from __future__ import annotations

from dataclasses import dataclass

import structlog

logger = structlog.get_logger(__name__)


class InconsistentRunDataError(RuntimeError):
    """Raised when run information from different sources disagrees."""


@dataclass(frozen=True, slots=True)
class RunData:
    """
    Information about the run, stored once per run.

    Parameters
    ----------
    detector_name:
        Name of the detector the run was taken (or simulated) with.
    """

    detector_name: str = "nodetectorname"

    def aggregate(self, other: RunData) -> None:
        """
        Merge with the run data of another source for the same run.

        There is nothing to merge, the two must simply agree.

        Raises
        ------
        InconsistentRunDataError:
            If the detector names differ.
        """
        if other.detector_name == self.detector_name:
            return
        logger.error(
            'Inconsistent run data',
            detector_name=self.detector_name,
            other_detector_name=other.detector_name,
        )
        raise InconsistentRunDataError(
            f"Can't aggregate run data of detector '{self.detector_name}' "
            f"with run data of detector '{other.detector_name}'"
        )
