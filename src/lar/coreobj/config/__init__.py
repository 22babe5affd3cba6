# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)

from .id_config import (
    CryostatIDConfig,
    CryostatIDParameter,
    CryostatIDSequence,
    IDConfig,
    OpDetIDConfig,
    OpDetIDParameter,
    OpDetIDSequence,
    OptionalCryostatID,
    OptionalCryostatIDSequence,
    OptionalOpDetID,
    OptionalOpDetIDSequence,
    OptionalPlaneID,
    OptionalPlaneIDSequence,
    OptionalROPID,
    OptionalROPIDSequence,
    OptionalTPCID,
    OptionalTPCIDSequence,
    OptionalTPCsetID,
    OptionalTPCsetIDSequence,
    OptionalWireID,
    OptionalWireIDSequence,
    PlaneIDConfig,
    PlaneIDParameter,
    PlaneIDSequence,
    ROPIDConfig,
    ROPIDParameter,
    ROPIDSequence,
    TPCIDConfig,
    TPCIDParameter,
    TPCIDSequence,
    TPCsetIDConfig,
    TPCsetIDParameter,
    TPCsetIDSequence,
    WireIDConfig,
    WireIDParameter,
    WireIDSequence,
    config_type_for,
)
from .loader import load_config, parse_config, validate_config
from .readers import (
    IDParameterTraits,
    id_parameter_traits,
    read_field,
    read_id,
    read_id_sequence,
    read_optional_id,
    read_optional_id_sequence,
    read_parameter,
)

__all__ = [
    'CryostatIDConfig',
    'CryostatIDParameter',
    'CryostatIDSequence',
    'IDConfig',
    'IDParameterTraits',
    'OpDetIDConfig',
    'OpDetIDParameter',
    'OpDetIDSequence',
    'OptionalCryostatID',
    'OptionalCryostatIDSequence',
    'OptionalOpDetID',
    'OptionalOpDetIDSequence',
    'OptionalPlaneID',
    'OptionalPlaneIDSequence',
    'OptionalROPID',
    'OptionalROPIDSequence',
    'OptionalTPCID',
    'OptionalTPCIDSequence',
    'OptionalTPCsetID',
    'OptionalTPCsetIDSequence',
    'OptionalWireID',
    'OptionalWireIDSequence',
    'PlaneIDConfig',
    'PlaneIDParameter',
    'PlaneIDSequence',
    'ROPIDConfig',
    'ROPIDParameter',
    'ROPIDSequence',
    'TPCIDConfig',
    'TPCIDParameter',
    'TPCIDSequence',
    'TPCsetIDConfig',
    'TPCsetIDParameter',
    'TPCsetIDSequence',
    'WireIDConfig',
    'WireIDParameter',
    'WireIDSequence',
    'config_type_for',
    'id_parameter_traits',
    'load_config',
    'parse_config',
    'read_field',
    'read_id',
    'read_id_sequence',
    'read_optional_id',
    'read_optional_id_sequence',
    'read_parameter',
    'validate_config',
]
