# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
"""
Validated configuration tables describing geometry and readout identifiers.

An identifier is configured as a table with one field per level, named after the
level tag used when printing the identifier, e.g. the plane ``C:0 T:1 P:2`` is

.. code-block:: yaml

    ReferencePlane: {C: 0, T: 1, P: 2}

An explicitly invalid identifier is written ``{isValid: false}``; in that case
the index fields may be omitted. Otherwise all of them are required.

User configuration models declare identifier parameters with the aliases defined
here, one shape per use:

.. code-block:: python

    class Config(pydantic.BaseModel):
        planes: PlaneIDSequence
        reference_plane: OptionalPlaneID = None

and read them with the functions in :mod:`lar.coreobj.config.readers`.
"""

from __future__ import annotations

from typing import Any, ClassVar, Self

import pydantic

from ..geometry.ids import (
    CryostatID,
    HierarchicalID,
    OpDetID,
    PlaneID,
    TPCID,
    WireID,
)
from ..readout.ids import ROPID, TPCsetID


def _index_field(description: str, id_type: type[HierarchicalID]) -> Any:
    return pydantic.Field(
        default=None, ge=0, le=id_type.INVALID_ID, description=description
    )


class IDConfig(pydantic.BaseModel):
    """
    Base of the identifier configuration tables.

    Subclasses set ``ID_TYPE`` and add one index field per level. The index fields
    are required only when ``isValid`` is true.
    """

    model_config = pydantic.ConfigDict(extra='forbid', frozen=True)

    ID_TYPE: ClassVar[type[HierarchicalID]]

    is_valid: bool = pydantic.Field(
        default=True, alias='isValid', description="Whether the ID is valid."
    )

    @pydantic.model_validator(mode='after')
    def indices_required_if_valid(self) -> Self:
        if self.is_valid:
            missing = [tag for tag in self.ID_TYPE.TAGS if getattr(self, tag) is None]
            if missing:
                raise ValueError(
                    f"{self.ID_TYPE.__name__} is valid but index field(s) "
                    f"{', '.join(missing)} are missing"
                )
        return self

    def to_id(self) -> HierarchicalID:
        """Return the configured identifier, the invalid one if not valid."""
        if not self.is_valid:
            return self.ID_TYPE()
        return self.ID_TYPE(*(getattr(self, tag) for tag in self.ID_TYPE.TAGS))

    @classmethod
    def from_id(cls, id_: HierarchicalID) -> Self:
        """Return the configuration table describing ``id_``."""
        if type(id_) is not cls.ID_TYPE:
            raise TypeError(
                f"{cls.__name__} describes {cls.ID_TYPE.__name__}, "
                f"got {type(id_).__name__}"
            )
        if not id_.is_valid:
            return cls.model_validate({'isValid': False})
        return cls.model_validate(dict(zip(id_.TAGS, id_.indices(), strict=True)))

    def to_dict(self) -> dict[str, Any]:
        """Return the table in the configuration file syntax."""
        return self.model_dump(by_alias=True, exclude_none=True)


class CryostatIDConfig(IDConfig):
    ID_TYPE: ClassVar[type[HierarchicalID]] = CryostatID

    C: int | None = _index_field("Cryostat number.", CryostatID)


class TPCIDConfig(CryostatIDConfig):
    ID_TYPE: ClassVar[type[HierarchicalID]] = TPCID

    T: int | None = _index_field("TPC number within the cryostat.", TPCID)


class OpDetIDConfig(CryostatIDConfig):
    ID_TYPE: ClassVar[type[HierarchicalID]] = OpDetID

    O: int | None = _index_field(  # noqa: E741
        "Optical detector number within the cryostat.", OpDetID
    )


class PlaneIDConfig(TPCIDConfig):
    ID_TYPE: ClassVar[type[HierarchicalID]] = PlaneID

    P: int | None = _index_field("Plane number within the TPC.", PlaneID)


class WireIDConfig(PlaneIDConfig):
    ID_TYPE: ClassVar[type[HierarchicalID]] = WireID

    W: int | None = _index_field("Wire number within the plane.", WireID)


class TPCsetIDConfig(CryostatIDConfig):
    ID_TYPE: ClassVar[type[HierarchicalID]] = TPCsetID

    S: int | None = _index_field("TPC set number within the cryostat.", TPCsetID)


class ROPIDConfig(TPCsetIDConfig):
    ID_TYPE: ClassVar[type[HierarchicalID]] = ROPID

    R: int | None = _index_field("Readout plane number within the TPC set.", ROPID)


_CONFIG_TYPES: dict[type[HierarchicalID], type[IDConfig]] = {
    config.ID_TYPE: config
    for config in (
        CryostatIDConfig,
        TPCIDConfig,
        OpDetIDConfig,
        PlaneIDConfig,
        WireIDConfig,
        TPCsetIDConfig,
        ROPIDConfig,
    )
}


def config_type_for(id_type: type[HierarchicalID]) -> type[IDConfig]:
    """Return the configuration table type for an identifier type."""
    try:
        return _CONFIG_TYPES[id_type]
    except KeyError:
        raise TypeError(f"No configuration table for {id_type!r}") from None


# Parameter shapes. Optional shapes must be given a default of None in the model.
CryostatIDParameter = CryostatIDConfig
OptionalCryostatID = CryostatIDConfig | None
CryostatIDSequence = list[CryostatIDConfig]
OptionalCryostatIDSequence = list[CryostatIDConfig] | None

TPCIDParameter = TPCIDConfig
OptionalTPCID = TPCIDConfig | None
TPCIDSequence = list[TPCIDConfig]
OptionalTPCIDSequence = list[TPCIDConfig] | None

OpDetIDParameter = OpDetIDConfig
OptionalOpDetID = OpDetIDConfig | None
OpDetIDSequence = list[OpDetIDConfig]
OptionalOpDetIDSequence = list[OpDetIDConfig] | None

PlaneIDParameter = PlaneIDConfig
OptionalPlaneID = PlaneIDConfig | None
PlaneIDSequence = list[PlaneIDConfig]
OptionalPlaneIDSequence = list[PlaneIDConfig] | None

WireIDParameter = WireIDConfig
OptionalWireID = WireIDConfig | None
WireIDSequence = list[WireIDConfig]
OptionalWireIDSequence = list[WireIDConfig] | None

TPCsetIDParameter = TPCsetIDConfig
OptionalTPCsetID = TPCsetIDConfig | None
TPCsetIDSequence = list[TPCsetIDConfig]
OptionalTPCsetIDSequence = list[TPCsetIDConfig] | None

ROPIDParameter = ROPIDConfig
OptionalROPID = ROPIDConfig | None
ROPIDSequence = list[ROPIDConfig]
OptionalROPIDSequence = list[ROPIDConfig] | None
