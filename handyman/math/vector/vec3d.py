"""Three-dimensional vectors.

This module provides :class:`Vec3D`.
"""
from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, Tuple, TypeVar

import numpy as np

from ..num import ScalarKind, is_scalar, is_signed, one_of, zero_of

I = TypeVar("I")
O = TypeVar("O")
U = TypeVar("U")


@dataclass(frozen=True)
class Vec3D(Generic[I]):
    """Immutable vector ``[x, y, z]`` backed by the scalar type ``I``."""

    x: I
    y: I
    z: I

    @classmethod
    def from_tuple(cls, values: Tuple[I, I, I]) -> "Vec3D[I]":
        """Create ``[x, y, z]`` from the tuple ``(x, y, z)``.

        ``Vec3D.from_tuple((1, 3, 5))`` equals ``Vec3D(1, 3, 5)``.
        """

        return cls.from_iter(values)

    @classmethod
    def from_iter(cls, values: Iterable[I]) -> "Vec3D[I]":
        components = tuple(values)
        if len(components) != 3:
            raise ValueError(f"Vec3D requires exactly three components, got {len(components)}")
        x, y, z = components
        return cls(x, y, z)

    @classmethod
    def zero(cls, kind: Optional[ScalarKind] = None) -> "Vec3D[Any]":
        """The additive identity vector ``[0, 0, 0]``."""

        return cls(zero_of(kind), zero_of(kind), zero_of(kind))

    @classmethod
    def one(cls, kind: Optional[ScalarKind] = None) -> "Vec3D[Any]":
        """The multiplicative identity vector ``[1, 1, 1]``."""

        return cls(one_of(kind), one_of(kind), one_of(kind))

    def __iter__(self) -> Iterator[I]:
        yield self.x
        yield self.y
        yield self.z

    def to_tuple(self) -> Tuple[I, I, I]:
        return (self.x, self.y, self.z)

    def to_array(self, dtype: Any = None) -> np.ndarray:
        return np.array(self.to_tuple(), dtype=dtype)

    def apply(self, f: Callable[[I], U]) -> "Vec3D[U]":
        """Return ``[f(vx), f(vy), f(vz)]``, calling ``f`` in component order."""

        return Vec3D(f(self.x), f(self.y), f(self.z))

    def zip_with(self, other: "Vec3D[O]", f: Callable[[I, O], U]) -> "Vec3D[U]":
        """Return ``[f(ax, bx), f(ay, by), f(az, bz)]`` for ``a.zip_with(b, f)``."""

        if not isinstance(other, Vec3D):
            raise TypeError(f"Vec3D.zip_with expects a Vec3D, got {type(other).__name__}")
        return Vec3D(f(self.x, other.x), f(self.y, other.y), f(self.z, other.z))

    def __mul__(self, scalar: I) -> "Vec3D[I]":
        if not is_scalar(scalar):
            return NotImplemented
        return self.apply(lambda component: component * scalar)

    def __rmul__(self, scalar: I) -> "Vec3D[I]":
        if not is_scalar(scalar):
            return NotImplemented
        return self.apply(lambda component: scalar * component)

    def __neg__(self) -> "Vec3D[I]":
        if not all(is_signed(component) for component in self):
            raise TypeError("bad operand type for unary -: Vec3D with unsigned components")
        return self.apply(operator.neg)

    def __add__(self, other: "Vec3D[I]") -> "Vec3D[I]":
        if not isinstance(other, Vec3D):
            return NotImplemented
        return self.zip_with(other, operator.add)
