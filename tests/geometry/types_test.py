# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
import dataclasses

import pytest

from lar.coreobj.geometry import (
    DriftDirection,
    SignalType,
    View,
    WireIDIntersection,
    signal_type_name,
)


def test_view_z_is_alias_of_w():
    assert View.Z is View.W


def test_drift_direction_aliases():
    assert DriftDirection.POS_X is DriftDirection.POS
    assert DriftDirection.NEG_X is DriftDirection.NEG


@pytest.mark.parametrize(
    ("sig_type", "expected"),
    [
        (SignalType.INDUCTION, "induction"),
        (SignalType.COLLECTION, "collection"),
        (SignalType.MYSTERY, "unknown"),
    ],
)
def test_signal_type_name(sig_type, expected):
    assert signal_type_name(sig_type) == expected


@pytest.mark.parametrize("value", [1, "collection", None])
def test_signal_type_name_rejects_other_values(value):
    with pytest.raises(ValueError, match="Unexpected signal type"):
        signal_type_name(value)


class TestWireIDIntersection:
    def test_sorted_by_decreasing_absolute_y(self):
        points = [
            WireIDIntersection(y=1.0, z=0.0, tpc=0),
            WireIDIntersection(y=-5.0, z=0.0, tpc=0),
            WireIDIntersection(y=3.0, z=0.0, tpc=0),
        ]
        assert [p.y for p in sorted(points)] == [-5.0, 3.0, 1.0]

    def test_is_immutable(self):
        point = WireIDIntersection(y=1.0, z=2.0, tpc=3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            point.y = 0.0
