# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
"""
Loading of validated configuration from YAML.

Identifier tables are written in YAML flow style, e.g.

.. code-block:: yaml

    Planes:
      - {C: 0, T: 1, P: 0}
      - {C: 0, T: 1, P: 1}
    ReferencePlane: {isValid: false}
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, TypeVar

import pydantic
import structlog
import yaml

logger = structlog.get_logger(__name__)

Model = TypeVar('Model', bound=pydantic.BaseModel)


def validate_config(model: type[Model], data: Mapping[str, Any] | None) -> Model:
    """
    Validate already parsed configuration data against ``model``.

    Raises
    ------
    pydantic.ValidationError:
        If the data does not match the model, e.g. a valid identifier is missing
        one of its indices.
    """
    return model.model_validate({} if data is None else data)


def parse_config(model: type[Model], text: str) -> Model:
    """
    Parse YAML ``text`` and validate it against ``model``.

    An empty document is an empty table.

    Raises
    ------
    yaml.YAMLError:
        If the text is not valid YAML.
    TypeError:
        If the document is not a table.
    pydantic.ValidationError:
        If the data does not match the model.
    """
    data = yaml.safe_load(text)
    if data is not None and not isinstance(data, Mapping):
        raise TypeError(f"Configuration must be a table, got {type(data).__name__}")
    return validate_config(model, data)


def load_config(model: type[Model], path: str | Path) -> Model:
    """
    Load the YAML file at ``path`` and validate it against ``model``.

    Raises
    ------
    FileNotFoundError:
        If the file does not exist.
    """
    path = Path(path)
    try:
        text = path.read_text()
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file '{path}' not found") from None
    config = parse_config(model, text)
    logger.debug('Loaded %s configuration from %s', model.__name__, path)
    return config
