# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
"""
Reading identifiers out of validated configuration.

Four shapes of identifier parameters are supported, see
:mod:`lar.coreobj.config.id_config`:

==============================  ================================  ==============
shape                           reader                            result
==============================  ================================  ==============
``PlaneIDParameter``            :func:`read_id`                   ``PlaneID``
``OptionalPlaneID``             :func:`read_optional_id`          ``PlaneID``
                                                                  or ``None``
``PlaneIDSequence``             :func:`read_id_sequence`          ``list``
``OptionalPlaneIDSequence``     :func:`read_optional_id_sequence` ``list``
                                                                  or ``None``
==============================  ================================  ==============

:func:`read_parameter` picks the right reader from the value it is given, and
:func:`read_field` from the declared annotation of a field of a configuration
model.

None of these functions validate anything: validation is done by pydantic when
the configuration model is built, and its ``ValidationError`` is the only error
reported for bad configuration.
"""

from __future__ import annotations

import functools
import types
import typing
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

import pydantic

from ..geometry.ids import HierarchicalID
from .id_config import IDConfig

IDConverter = Callable[[HierarchicalID], Any]


def _convert(id_: HierarchicalID, id_type: type | IDConverter | None) -> Any:
    if id_type is None:
        return id_
    if isinstance(id_type, type) and issubclass(id_type, HierarchicalID):
        return id_.as_id(id_type)
    return id_type(id_)


def read_id(param: IDConfig, id_type: type | IDConverter | None = None) -> Any:
    """
    Return the identifier described by a configuration table.

    Parameters
    ----------
    param:
        The validated table.
    id_type:
        Optional type to convert the identifier into. An identifier type must be
        the configured type or one of its ancestors (a ``WireIDConfig`` can be read
        as a ``PlaneID``); any other callable is called with the identifier.
    """
    return _convert(param.to_id(), id_type)


def read_optional_id(
    param: IDConfig | None,
    default: Any = None,
    id_type: type | IDConverter | None = None,
) -> Any:
    """
    Return the identifier of an optional table, or ``default`` if it was omitted.

    With no ``default``, an omitted parameter yields ``None``.
    """
    if param is None:
        return default
    return read_id(param, id_type)


def read_id_sequence(
    param: Sequence[IDConfig], id_type: type | IDConverter | None = None
) -> list[Any]:
    """
    Return the identifiers of a sequence of tables, in order.

    Fixed (tuple) and variable length (list) sequences are both returned as a list.
    """
    return [read_id(item, id_type) for item in param]


def read_optional_id_sequence(
    param: Sequence[IDConfig] | None,
    default: list[Any] | None = None,
    id_type: type | IDConverter | None = None,
) -> list[Any] | None:
    """
    Return the identifiers of an optional sequence, or ``default`` if omitted.

    An omitted sequence and an empty one are different: the latter yields an empty
    list regardless of ``default``.
    """
    if param is None:
        return default
    return read_id_sequence(param, id_type)


@functools.singledispatch
def read_parameter(
    param: Any, default: Any = None, id_type: type | IDConverter | None = None
) -> Any:
    """
    Read an identifier parameter of any shape.

    - a table reads as an identifier;
    - a list or tuple of tables reads as a list of identifiers;
    - an omitted optional parameter (``None``) reads as ``default``.
    """
    raise TypeError(f"{type(param).__name__} is not an ID parameter")


@read_parameter.register
def _(param: IDConfig, default: Any = None, id_type: Any = None) -> Any:
    return read_id(param, id_type)


@read_parameter.register(list)
@read_parameter.register(tuple)
def _(param: Sequence[IDConfig], default: Any = None, id_type: Any = None) -> Any:
    return read_id_sequence(param, id_type)


@read_parameter.register(type(None))
def _(param: None, default: Any = None, id_type: Any = None) -> Any:
    return default


@dataclass(frozen=True, slots=True)
class IDParameterTraits:
    """Shape of an identifier parameter declared in a configuration model."""

    config_type: type[IDConfig]
    is_optional: bool
    is_sequence: bool

    @property
    def id_type(self) -> type[HierarchicalID]:
        return self.config_type.ID_TYPE

    @property
    def is_atom(self) -> bool:
        return not self.is_sequence


def _strip_optional(annotation: Any) -> tuple[Any, bool]:
    if typing.get_origin(annotation) in (typing.Union, types.UnionType):
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0], True
    return annotation, False


def _is_config_type(candidate: Any) -> bool:
    return isinstance(candidate, type) and issubclass(candidate, IDConfig)


def id_parameter_traits(
    model: type[pydantic.BaseModel], field_name: str
) -> IDParameterTraits:
    """
    Describe the shape of the identifier parameter ``field_name`` of ``model``.

    Raises
    ------
    KeyError:
        If the model has no such field.
    TypeError:
        If the field is not an identifier parameter.
    """
    annotation, is_optional = _strip_optional(model.model_fields[field_name].annotation)
    if _is_config_type(annotation):
        return IDParameterTraits(annotation, is_optional, is_sequence=False)
    if typing.get_origin(annotation) in (list, tuple):
        elements = {arg for arg in typing.get_args(annotation) if arg is not Ellipsis}
        if len(elements) == 1 and _is_config_type(element := elements.pop()):
            return IDParameterTraits(element, is_optional, is_sequence=True)
    raise TypeError(f"{model.__name__}.{field_name} is not an ID parameter")


def read_field(
    config: pydantic.BaseModel,
    field_name: str,
    default: Any = None,
    id_type: type | IDConverter | None = None,
) -> Any:
    """
    Read the identifier parameter ``field_name`` of a configuration model.

    The reader is chosen from the declared shape of the field. A ``default`` is
    accepted only for optional parameters.
    """
    traits = id_parameter_traits(type(config), field_name)
    if default is not None and not traits.is_optional:
        raise TypeError(
            f"{type(config).__name__}.{field_name} is required, "
            "a default value is meaningless"
        )
    param = getattr(config, field_name)
    if traits.is_sequence:
        return read_optional_id_sequence(param, default, id_type)
    return read_optional_id(param, default, id_type)
