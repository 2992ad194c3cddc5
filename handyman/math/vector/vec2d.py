"""Two-dimensional vectors.

:class:`Vec2D` is an immutable pair of components of any scalar type.
Construction, accessors, :meth:`Vec2D.apply` and :meth:`Vec2D.zip_with`
put no requirement on the components; identities and arithmetic need the
scalar capabilities described in :mod:`handyman.math.num`.
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
class Vec2D(Generic[I]):
    """Immutable vector ``[x, y]`` backed by the scalar type ``I``.

    ``Vec2D(1, 2)`` is the preferred way to build one; use
    :meth:`from_tuple` when the components already sit in a tuple.
    """

    x: I
    y: I

    @classmethod
    def from_tuple(cls, values: Tuple[I, I]) -> "Vec2D[I]":
        """Create ``[x, y]`` from the tuple ``(x, y)``.

        ``Vec2D.from_tuple((1, 3))`` equals ``Vec2D(1, 3)``.
        """

        return cls.from_iter(values)

    @classmethod
    def from_iter(cls, values: Iterable[I]) -> "Vec2D[I]":
        components = tuple(values)
        if len(components) != 2:
            raise ValueError(f"Vec2D requires exactly two components, got {len(components)}")
        x, y = components
        return cls(x, y)

    @classmethod
    def zero(cls, kind: Optional[ScalarKind] = None) -> "Vec2D[Any]":
        """The additive identity vector ``[0, 0]`` in the scalar ``kind``."""

        return cls(zero_of(kind), zero_of(kind))

    @classmethod
    def one(cls, kind: Optional[ScalarKind] = None) -> "Vec2D[Any]":
        """The multiplicative identity vector ``[1, 1]`` in the scalar ``kind``."""

        return cls(one_of(kind), one_of(kind))

    def __iter__(self) -> Iterator[I]:
        yield self.x
        yield self.y

    def to_tuple(self) -> Tuple[I, I]:
        return (self.x, self.y)

    def to_array(self, dtype: Any = None) -> np.ndarray:
        return np.array(self.to_tuple(), dtype=dtype)

    def apply(self, f: Callable[[I], U]) -> "Vec2D[U]":
        """Apply ``f`` onto both components of this vector.

        For ``v = [vx, vy]`` the result is ``[f(vx), f(vy)]``. ``f`` is
        called once per component, ``x`` first.

        ``Vec2D(1, 2).apply(lambda c: c + 2)`` gives ``Vec2D(3, 4)``.
        """

        return Vec2D(f(self.x), f(self.y))

    def zip_with(self, other: "Vec2D[O]", f: Callable[[I, O], U]) -> "Vec2D[U]":
        """Apply ``f`` onto the corresponding components of two vectors.

        For ``a = [ax, ay]`` and ``b = [bx, by]``, ``a.zip_with(b, f)`` yields
        ``[f(ax, bx), f(ay, by)]``. The component types of ``a`` and ``b``
        may differ.

        ``Vec2D(1, 2).zip_with(Vec2D(3, 4), lambda a, b: a + b)`` gives
        ``Vec2D(4, 6)``.
        """

        if not isinstance(other, Vec2D):
            raise TypeError(f"Vec2D.zip_with expects a Vec2D, got {type(other).__name__}")
        return Vec2D(f(self.x, other.x), f(self.y, other.y))

    def __mul__(self, scalar: I) -> "Vec2D[I]":
        """Multiply this vector ``v`` by the scalar ``k``, yielding ``kv``.

        ``Vec2D(1, 3) * 2`` gives ``Vec2D(2, 6)``.
        """

        if not is_scalar(scalar):
            return NotImplemented
        return self.apply(lambda component: component * scalar)

    def __rmul__(self, scalar: I) -> "Vec2D[I]":
        if not is_scalar(scalar):
            return NotImplemented
        return self.apply(lambda component: scalar * component)

    def __neg__(self) -> "Vec2D[I]":
        if not (is_signed(self.x) and is_signed(self.y)):
            raise TypeError("bad operand type for unary -: Vec2D with unsigned components")
        return self.apply(operator.neg)

    def __add__(self, other: "Vec2D[I]") -> "Vec2D[I]":
        """Add two vectors: ``[ax, ay] + [bx, by] == [ax + bx, ay + by]``.

        ``Vec2D(1, 2) + Vec2D(3, 4)`` gives ``Vec2D(4, 6)``.
        """

        if not isinstance(other, Vec2D):
            return NotImplemented
        return self.zip_with(other, operator.add)
