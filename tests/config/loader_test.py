# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
import pydantic
import pytest
import yaml

from lar.coreobj.config import (
    OptionalPlaneID,
    OptionalTPCIDSequence,
    PlaneIDSequence,
    load_config,
    parse_config,
    read_field,
    validate_config,
)
from lar.coreobj.geometry import TPCID, PlaneID


class ChannelMapConfig(pydantic.BaseModel):
    planes: PlaneIDSequence
    reference_plane: OptionalPlaneID = None


class OptionalConfig(pydantic.BaseModel):
    tpcs: OptionalTPCIDSequence = None


CONFIG = """
planes:
  - {C: 0, T: 1, P: 0}
  - {C: 0, T: 1, P: 1}
reference_plane: {isValid: false}
"""


def test_parse_config():
    config = parse_config(ChannelMapConfig, CONFIG)
    assert read_field(config, 'planes') == [PlaneID(0, 1, 0), PlaneID(0, 1, 1)]
    reference = read_field(config, 'reference_plane')
    assert reference == PlaneID()
    assert not reference.is_valid


def test_parse_config_with_missing_index():
    with pytest.raises(pydantic.ValidationError):
        parse_config(ChannelMapConfig, "planes:\n  - {C: 0, P: 0}\n")


def test_parse_empty_document():
    config = parse_config(OptionalConfig, "")
    assert read_field(config, 'tpcs') is None


def test_parse_empty_sequence():
    config = parse_config(OptionalConfig, "tpcs: []")
    assert read_field(config, 'tpcs') == []


def test_parse_non_table_document():
    with pytest.raises(TypeError, match="table"):
        parse_config(OptionalConfig, "- {C: 0, T: 0}")


def test_parse_malformed_yaml():
    with pytest.raises(yaml.YAMLError):
        parse_config(OptionalConfig, "tpcs: [{C: 0")


def test_validate_config():
    config = validate_config(OptionalConfig, {'tpcs': [{'C': 1, 'T': 0}]})
    assert read_field(config, 'tpcs') == [TPCID(1, 0)]
    assert validate_config(OptionalConfig, None).tpcs is None


def test_load_config(tmp_path):
    path = tmp_path / 'channels.yaml'
    path.write_text(CONFIG)
    config = load_config(ChannelMapConfig, path)
    assert len(config.planes) == 2
    assert load_config(ChannelMapConfig, str(path)) == config


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="missing.yaml"):
        load_config(ChannelMapConfig, tmp_path / 'missing.yaml')
