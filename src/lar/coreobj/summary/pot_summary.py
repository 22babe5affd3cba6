# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
from __future__ import annotations

import dataclasses
from dataclasses import dataclass


@dataclass(slots=True)
class POTSummary:
    """Protons on target and beam spill counts, accumulated over a subrun."""

    totpot: float = 0.0
    totgoodpot: float = 0.0
    totspills: int = 0
    goodspills: int = 0

    def aggregate(self, other: POTSummary) -> POTSummary:
        """Add the counts of ``other`` to this summary, and return it."""
        self.totpot += other.totpot
        self.totgoodpot += other.totgoodpot
        self.totspills += other.totspills
        self.goodspills += other.goodspills
        return self

    def __add__(self, other: POTSummary) -> POTSummary:
        if not isinstance(other, POTSummary):
            return NotImplemented
        return dataclasses.replace(self).aggregate(other)

    def __str__(self) -> str:
        return (
            f"This sub run has {self.totspills} total spills with an exposure of "
            f"{self.totpot} POT\n"
            f"with cuts on beam quality, there are {self.goodspills} good spills "
            f"with an exposure of {self.totgoodpot}"
        )
