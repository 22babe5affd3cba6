# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
import pydantic
import pytest

from lar.coreobj.config import (
    OptionalPlaneID,
    OptionalWireIDSequence,
    PlaneIDConfig,
    PlaneIDSequence,
    TPCIDParameter,
    WireIDConfig,
    id_parameter_traits,
    read_field,
    read_id,
    read_id_sequence,
    read_optional_id,
    read_optional_id_sequence,
    read_parameter,
)
from lar.coreobj.geometry import TPCID, CryostatID, PlaneID, WireID


class AlgorithmConfig(pydantic.BaseModel):
    tpc: TPCIDParameter
    planes: PlaneIDSequence
    reference_plane: OptionalPlaneID = None
    dead_wires: OptionalWireIDSequence = None
    corners: tuple[PlaneIDConfig, PlaneIDConfig] | None = None
    label: str = ''


@pytest.fixture
def config() -> AlgorithmConfig:
    return AlgorithmConfig.model_validate(
        {
            'tpc': {'C': 0, 'T': 1},
            'planes': [{'C': 0, 'T': 1, 'P': 0}, {'C': 0, 'T': 1, 'P': 2}],
            'dead_wires': [],
        }
    )


def test_read_id():
    param = WireIDConfig(C=1, T=2, P=0, W=5)
    assert read_id(param) == WireID(1, 2, 0, 5)


def test_read_id_as_ancestor_type():
    param = WireIDConfig(C=1, T=2, P=0, W=5)
    assert read_id(param, PlaneID) == PlaneID(1, 2, 0)
    assert read_id(param, CryostatID) == CryostatID(1)


def test_read_id_with_converter():
    param = PlaneIDConfig(C=1, T=2, P=0)
    assert read_id(param, str) == 'C:1 T:2 P:0'


def test_read_optional_id():
    assert read_optional_id(None) is None
    assert read_optional_id(None, PlaneID(0, 0, 0)) == PlaneID(0, 0, 0)
    assert read_optional_id(PlaneIDConfig(C=1, T=2, P=0)) == PlaneID(1, 2, 0)


def test_read_id_sequence_keeps_order():
    params = [PlaneIDConfig(C=0, T=0, P=2), PlaneIDConfig(C=0, T=0, P=1)]
    assert read_id_sequence(params) == [PlaneID(0, 0, 2), PlaneID(0, 0, 1)]
    assert read_id_sequence(tuple(params), TPCID) == [TPCID(0, 0), TPCID(0, 0)]


def test_omitted_and_empty_sequences_differ():
    assert read_optional_id_sequence(None) is None
    assert read_optional_id_sequence(None, [PlaneID()]) == [PlaneID()]
    assert read_optional_id_sequence([]) == []
    assert read_optional_id_sequence([], [PlaneID()]) == []


class TestReadParameter:
    def test_table(self):
        assert read_parameter(PlaneIDConfig(C=0, T=1, P=2)) == PlaneID(0, 1, 2)

    def test_sequence(self):
        params = (PlaneIDConfig(C=0, T=1, P=2),)
        assert read_parameter(params) == [PlaneID(0, 1, 2)]

    def test_omitted(self):
        assert read_parameter(None, TPCID(0, 0)) == TPCID(0, 0)

    def test_not_a_parameter(self):
        with pytest.raises(TypeError):
            read_parameter(42)


class TestParameterTraits:
    @pytest.mark.parametrize(
        ("field", "id_type", "is_optional", "is_sequence"),
        [
            ('tpc', TPCID, False, False),
            ('planes', PlaneID, False, True),
            ('reference_plane', PlaneID, True, False),
            ('dead_wires', WireID, True, True),
            ('corners', PlaneID, True, True),
        ],
    )
    def test_shapes(self, field, id_type, is_optional, is_sequence):
        traits = id_parameter_traits(AlgorithmConfig, field)
        assert traits.id_type is id_type
        assert traits.is_optional == is_optional
        assert traits.is_sequence == is_sequence
        assert traits.is_atom != is_sequence

    def test_not_an_id_parameter(self):
        with pytest.raises(TypeError):
            id_parameter_traits(AlgorithmConfig, 'label')

    def test_unknown_field(self):
        with pytest.raises(KeyError):
            id_parameter_traits(AlgorithmConfig, 'nope')


class TestReadField:
    def test_required_atom(self, config):
        assert read_field(config, 'tpc') == TPCID(0, 1)

    def test_required_sequence(self, config):
        assert read_field(config, 'planes') == [PlaneID(0, 1, 0), PlaneID(0, 1, 2)]

    def test_omitted_optional_atom(self, config):
        assert read_field(config, 'reference_plane') is None
        assert read_field(config, 'reference_plane', PlaneID(0, 0, 0)) == PlaneID(
            0, 0, 0
        )

    def test_empty_optional_sequence(self, config):
        assert read_field(config, 'dead_wires', [WireID()]) == []

    def test_omitted_optional_sequence(self, config):
        assert read_field(config, 'corners') is None

    def test_default_for_required_parameter_is_rejected(self, config):
        with pytest.raises(TypeError):
            read_field(config, 'tpc', TPCID(0, 0))

    def test_conversion(self, config):
        assert read_field(config, 'planes', id_type=TPCID) == [TPCID(0, 1)] * 2
