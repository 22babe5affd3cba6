# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
"""
Points, displacement vectors and rotations tagged with a coordinate frame.

Coordinates are scipp ``vector3`` variables in centimetres. Points and vectors
belonging to different frames are incompatible: combining them raises
``TypeError``. Two vectors in an optical detector local frame are not checked to
belong to the *same* optical detector.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import scipp as sc
from scipp import spatial

LENGTH_UNIT = 'cm'


class CoordinateFrame:
    """Base of the coordinate frame tags."""


class GlobalCoords(CoordinateFrame):
    """
    The world coordinate system, in which the detector geometry is described.

    Any two vectors in this frame are compatible.
    """


class OpticalLocalCoords(CoordinateFrame):
    """Local coordinate system of an optical detector."""


def _as_vector3(value: sc.Variable) -> sc.Variable:
    if value.dtype != sc.DType.vector3:
        raise TypeError(f"Expected a vector3 variable, got dtype {value.dtype}")
    if value.unit != sc.Unit(LENGTH_UNIT):
        raise sc.UnitError(f"Expected unit '{LENGTH_UNIT}', got '{value.unit}'")
    return value


def _check_frame(a: _FrameTagged, b: _FrameTagged) -> None:
    if a.frame is not b.frame:
        raise TypeError(
            f"Can't combine {type(a).__name__} in {a.frame.__name__} "
            f"with {type(b).__name__} in {b.frame.__name__}"
        )


@dataclass(frozen=True, slots=True, eq=False)
class _FrameTagged:
    value: sc.Variable
    frame: type[CoordinateFrame] = GlobalCoords

    def __post_init__(self) -> None:
        _as_vector3(self.value)

    @classmethod
    def from_xyz(
        cls, x: float, y: float, z: float, frame: type[CoordinateFrame] = GlobalCoords
    ):
        return cls(sc.vector([x, y, z], unit=LENGTH_UNIT), frame)

    @property
    def x(self) -> float:
        return float(self.value.fields.x.value)

    @property
    def y(self) -> float:
        return float(self.value.fields.y.value)

    @property
    def z(self) -> float:
        return float(self.value.fields.z.value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.frame is other.frame and sc.identical(self.value, other.value)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.frame, self.x, self.y, self.z))

    def __repr__(self) -> str:
        return (
            f'{type(self).__name__}({self.x}, {self.y}, {self.z}) '
            f'[{LENGTH_UNIT}, {self.frame.__name__}]'
        )


class Vector(_FrameTagged):
    """Displacement in 3D space."""

    __slots__ = ()

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        _check_frame(self, other)
        return Vector(self.value + other.value, self.frame)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        _check_frame(self, other)
        return Vector(self.value - other.value, self.frame)

    def __mul__(self, factor: float) -> Vector:
        if not isinstance(factor, int | float):
            return NotImplemented
        return Vector(self.value * factor, self.frame)

    __rmul__ = __mul__

    def __neg__(self) -> Vector:
        return Vector(self.value * -1.0, self.frame)


class Point(_FrameTagged):
    """Position in 3D space."""

    __slots__ = ()

    def __add__(self, other: Vector) -> Point:
        if not isinstance(other, Vector):
            return NotImplemented
        _check_frame(self, other)
        return Point(self.value + other.value, self.frame)

    def __sub__(self, other: Point | Vector) -> Point | Vector:
        if isinstance(other, Point):
            _check_frame(self, other)
            return Vector(self.value - other.value, self.frame)
        if isinstance(other, Vector):
            _check_frame(self, other)
            return Point(self.value - other.value, self.frame)
        return NotImplemented


@dataclass(frozen=True, slots=True, eq=False)
class Rotation:
    """Rotation in 3D space, about the origin of the frame it is applied in."""

    value: sc.Variable

    def __post_init__(self) -> None:
        if self.value.dtype != sc.DType.rotation3:
            raise TypeError(f"Expected a rotation3 variable, got {self.value.dtype}")

    @classmethod
    def from_quaternion(cls, quaternion: Sequence[float]) -> Rotation:
        """Build a rotation from a unit quaternion given as ``(x, y, z, w)``."""
        return cls(spatial.rotation(value=list(quaternion)))

    @classmethod
    def identity(cls) -> Rotation:
        return cls.from_quaternion([0.0, 0.0, 0.0, 1.0])

    def __call__(self, target: Point | Vector) -> Point | Vector:
        return type(target)(self.value * target.value, target.frame)

    def __mul__(self, other: Rotation) -> Rotation:
        if not isinstance(other, Rotation):
            return NotImplemented
        return Rotation(self.value * other.value)


def global_point(x: float, y: float, z: float) -> Point:
    return Point.from_xyz(x, y, z, GlobalCoords)


def global_vector(x: float, y: float, z: float) -> Vector:
    return Vector.from_xyz(x, y, z, GlobalCoords)


def optical_point(x: float, y: float, z: float) -> Point:
    return Point.from_xyz(x, y, z, OpticalLocalCoords)


def optical_vector(x: float, y: float, z: float) -> Vector:
    return Vector.from_xyz(x, y, z, OpticalLocalCoords)
