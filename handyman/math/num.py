"""Scalar capabilities required by the generic vector types.

Vectors accept any component type. Individual operations only need the
scalar to support what they actually use, grouped into tiers:

* identity - the scalar kind can be called with ``0`` and ``1``
  (``int``, ``float``, ``Fraction``, ``Decimal``, ``numpy.int32``...)
* arithmetic - :class:`Num`, binary ``+`` and ``*``
* sign - :class:`Signed`, arithmetic plus unary ``-``

The protocols are structural, so scalar types never have to register or
inherit from anything.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Callable, Optional, Protocol, runtime_checkable

import numpy as np

LOGGER = logging.getLogger(__name__)

ScalarKind = Callable[[int], Any]

# Scalar kind used by ``zero()`` / ``one()`` when the caller does not pass one.
DEFAULT_SCALAR: ScalarKind = int


@runtime_checkable
class SupportsAdd(Protocol):
    def __add__(self, other: Any) -> Any:
        ...


@runtime_checkable
class SupportsMul(Protocol):
    def __mul__(self, other: Any) -> Any:
        ...


@runtime_checkable
class SupportsNeg(Protocol):
    def __neg__(self) -> Any:
        ...


@runtime_checkable
class Num(SupportsAdd, SupportsMul, Protocol):
    """Scalars closed under ``+`` and ``*``."""


@runtime_checkable
class Signed(Num, SupportsNeg, Protocol):
    """Scalars that additionally have a signed negation."""


def _resolve_kind(kind: Optional[ScalarKind]) -> ScalarKind:
    return DEFAULT_SCALAR if kind is None else kind


def zero_of(kind: Optional[ScalarKind] = None) -> Any:
    """Return the additive identity of ``kind``."""

    resolved = _resolve_kind(kind)
    value = resolved(0)
    LOGGER.debug("Resolved additive identity %r for %r", value, resolved)
    return value


def one_of(kind: Optional[ScalarKind] = None) -> Any:
    """Return the multiplicative identity of ``kind``."""

    resolved = _resolve_kind(kind)
    value = resolved(1)
    LOGGER.debug("Resolved multiplicative identity %r for %r", value, resolved)
    return value


def is_scalar(value: object) -> bool:
    """Tell whether ``value`` can scale a vector.

    A scalar supports ``+`` and ``*`` and is not itself a container, which
    keeps vectors, arrays and sequences out of scalar multiplication.
    """

    return isinstance(value, Num) and not isinstance(value, Iterable)


def is_signed(value: object) -> bool:
    """Tell whether ``value`` has a meaningful signed negation.

    ``bool`` and numpy unsigned integers implement ``__neg__`` but the
    result is not the additive inverse in their own type, so they do not
    count.
    """

    if isinstance(value, (bool, np.bool_, np.unsignedinteger)):
        LOGGER.debug("Rejected unsigned scalar %r of type %s", value, type(value).__name__)
        return False
    return isinstance(value, Signed)


__all__ = [
    "DEFAULT_SCALAR",
    "Num",
    "ScalarKind",
    "Signed",
    "SupportsAdd",
    "SupportsMul",
    "SupportsNeg",
    "is_scalar",
    "is_signed",
    "one_of",
    "zero_of",
]
