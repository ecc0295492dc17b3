"""
semilattice/instances.py
════════════════════════

Primitive instances of the capability protocols.

    ┌──────────────┬──────────┬──────────────┬──────────┬───────────┐
    │  type        │  join    │  meet        │  bottom  │  top      │
    ├──────────────┼──────────┼──────────────┼──────────┼───────────┤
    │  Unit        │  ()      │  ()          │  ()      │  ()       │
    │  Boolean     │  or      │  and         │  False   │  True     │
    │  Max         │  max     │  —           │  lower ¹ │  —        │
    │  Min         │  —       │  min         │  —       │  upper ¹  │
    │  SetLattice  │  ∪       │  ∩           │  ∅       │  — ²      │
    └──────────────┴──────────┴──────────────┴──────────┴───────────┘

    ¹ only on ``Max.bounded(b)`` / ``Min.bounded(b)``.  Python ``int`` has
      no least or greatest value, so plain ``Max`` / ``Min`` claim no bound.
    ² a universal set cannot be represented without fixing a closed
      universe, so ``SetLattice`` offers no ``top()`` at all.

Every instance is an immutable value; operations return new values.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from functools import lru_cache
from typing import (
    Any,
    Callable,
    ClassVar,
    Final,
    FrozenSet,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    Optional,
    Self,
    Type,
    TypeVar,
)

from .errors import BoundsError

logger = logging.getLogger(__name__)

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def _is_nan(value: Any) -> bool:
    # NaN is the only value unequal to itself; it breaks max()/min() symmetry
    return isinstance(value, float) and math.isnan(value)


def _check_ordered(value: Any, bounds: Optional[Bounds[Any]]) -> None:
    if _is_nan(value):
        raise BoundsError(value)
    if bounds is not None and not bounds.contains(value):
        raise BoundsError(value, bounds)


# ═══════════════════════════════════════════════════════════════════════════
#  PART 1 — UNIT
# ═══════════════════════════════════════════════════════════════════════════
#
#  The one-element lattice.  Every operation returns the single value, so
#  every law holds trivially.
# ═══════════════════════════════════════════════════════════════════════════

class Unit:
    """The single-valued type; ``UNIT`` is its only inhabitant."""
    __slots__ = ()
    _instance: ClassVar[Optional[Unit]] = None

    def __new__(cls) -> Unit:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def join(self, other: Unit) -> Unit:
        return self

    def meet(self, other: Unit) -> Unit:
        return self

    @classmethod
    def bottom(cls) -> Unit:
        return cls()

    @classmethod
    def top(cls) -> Unit:
        return cls()

    def __repr__(self) -> str:
        return "Unit()"

    def __hash__(self) -> int:
        return hash("__UNIT__")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Unit)

    def __reduce__(self) -> Any:
        return (Unit, ())


UNIT: Final = Unit()


# ═══════════════════════════════════════════════════════════════════════════
#  PART 2 — BOOLEAN
# ═══════════════════════════════════════════════════════════════════════════
#
#       True   = ⊤
#        |
#       False  = ⊥
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class Boolean:
    """Two-element lattice: join is disjunction, meet is conjunction."""
    value: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", bool(self.value))

    def join(self, other: Boolean) -> Boolean:
        return Boolean(self.value or other.value)

    def meet(self, other: Boolean) -> Boolean:
        return Boolean(self.value and other.value)

    @classmethod
    def bottom(cls) -> Boolean:
        return cls(False)

    @classmethod
    def top(cls) -> Boolean:
        return cls(True)

    def __bool__(self) -> bool:
        return self.value


# ═══════════════════════════════════════════════════════════════════════════
#  PART 3 — BOUNDS
# ═══════════════════════════════════════════════════════════════════════════
#
#  A ``Bounds`` names the least and greatest representable values of a
#  totally ordered range.  Only ranges with such values may hand out a
#  bottom (for ``Max``) or a top (for ``Min``).
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class Bounds(Generic[T]):
    """
    Closed range ``[lower, upper]`` of a bounded total order.

    Parameters
    ----------
    lower, upper : T
        The minimal and maximal representable values.
    name : str
        Short label used when naming derived classes (``Max[int8]``).
    """
    lower: T
    upper: T
    name: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if _is_nan(self.lower) or _is_nan(self.upper):
            raise BoundsError(self.lower if _is_nan(self.lower) else self.upper)
        if not self.lower <= self.upper:
            raise BoundsError(
                self.lower, self,
                hint="the lower bound must not exceed the upper bound",
            )

    def contains(self, value: T) -> bool:
        return self.lower <= value <= self.upper

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    @property
    def label(self) -> str:
        return self.name or f"{self.lower!r}..{self.upper!r}"

    def __repr__(self) -> str:
        return f"Bounds({self.label})"


def _int_bounds(bits: int, signed: bool) -> Bounds[int]:
    if signed:
        return Bounds(-(1 << (bits - 1)), (1 << (bits - 1)) - 1, f"int{bits}")
    return Bounds(0, (1 << bits) - 1, f"uint{bits}")


INT8: Final = _int_bounds(8, True)
INT16: Final = _int_bounds(16, True)
INT32: Final = _int_bounds(32, True)
INT64: Final = _int_bounds(64, True)
UINT8: Final = _int_bounds(8, False)
UINT16: Final = _int_bounds(16, False)
UINT32: Final = _int_bounds(32, False)
UINT64: Final = _int_bounds(64, False)
FLOAT: Final = Bounds(-math.inf, math.inf, "float")


@lru_cache(maxsize=None)
def _bounded(
    base: type,
    bounds: Bounds[Any],
    label: str,
    witness: str,
    make: Callable[[type], Any],
) -> type:
    derived = type(
        f"{base.__name__}[{label}]",
        (base,),
        {
            "__slots__": (),
            "__module__": base.__module__,
            "bounds": bounds,
            witness: classmethod(make),
        },
    )
    logger.debug("derived %s with %s() from %r", derived.__name__, witness, bounds)
    return derived


# ═══════════════════════════════════════════════════════════════════════════
#  PART 4 — MAX / MIN
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class Max(Generic[T]):
    """
    Maximum-tracking wrapper over a total order.  ``join`` keeps the larger
    value.

    ``Max`` alone offers only ``Join``.  ``Max.bounded(bounds)`` returns a
    subclass that also offers ``LowerBound`` with ``bottom()`` equal to
    ``bounds.lower``, and rejects values outside *bounds*.

    Both operands of ``join`` must come from the same class: ``Max`` and each
    ``Max.bounded(b)`` are distinct types, and the result takes the type of
    the receiver.

    >>> Max(3).join(Max(5))
    Max(value=5)
    >>> Max.bounded(INT8).bottom().value
    -128
    """
    value: T
    bounds: ClassVar[Optional[Bounds[Any]]] = None

    def __post_init__(self) -> None:
        _check_ordered(self.value, type(self).bounds)

    def join(self, other: Self) -> Self:
        return type(self)(max(self.value, other.value))

    @classmethod
    def bounded(cls, bounds: Bounds[Any]) -> Type[Max[Any]]:
        return _bounded(cls, bounds, bounds.label, "bottom", _lower_value)


@dataclass(frozen=True, slots=True)
class Min(Generic[T]):
    """
    Minimum-tracking wrapper over a total order.  ``meet`` keeps the smaller
    value; ``Min.bounded(bounds)`` adds ``top()`` equal to ``bounds.upper``.
    As with ``Max``, both operands of ``meet`` must share a class.
    """
    value: T
    bounds: ClassVar[Optional[Bounds[Any]]] = None

    def __post_init__(self) -> None:
        _check_ordered(self.value, type(self).bounds)

    def meet(self, other: Self) -> Self:
        return type(self)(min(self.value, other.value))

    @classmethod
    def bounded(cls, bounds: Bounds[Any]) -> Type[Min[Any]]:
        return _bounded(cls, bounds, bounds.label, "top", _upper_value)


def _lower_value(cls: Any) -> Any:
    return cls(cls.bounds.lower)


def _upper_value(cls: Any) -> Any:
    return cls(cls.bounds.upper)


# ═══════════════════════════════════════════════════════════════════════════
#  PART 5 — SETS
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class SetLattice(Generic[H]):
    """
    Powerset lattice under union and intersection.

    Offers ``Join``, ``Meet`` and ``LowerBound`` (the empty set).  There is
    no ``top()``.
    """
    elements: FrozenSet[H] = frozenset()

    def __post_init__(self) -> None:
        if not isinstance(self.elements, frozenset):
            object.__setattr__(self, "elements", frozenset(self.elements))

    @classmethod
    def of(cls, *items: H) -> SetLattice[H]:
        return cls(frozenset(items))

    @classmethod
    def from_iterable(cls, items: Iterable[H]) -> SetLattice[H]:
        return cls(frozenset(items))

    def join(self, other: SetLattice[H]) -> SetLattice[H]:
        return SetLattice(self.elements | other.elements)

    def meet(self, other: SetLattice[H]) -> SetLattice[H]:
        return SetLattice(self.elements & other.elements)

    @classmethod
    def bottom(cls) -> SetLattice[H]:
        return cls(frozenset())

    def __contains__(self, item: object) -> bool:
        return item in self.elements

    def __iter__(self) -> Iterator[H]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __repr__(self) -> str:
        try:
            elems = sorted(self.elements)  # type: ignore[type-var]
        except TypeError:
            elems = list(self.elements)
        return f"SetLattice({{{', '.join(repr(e) for e in elems)}}})"


__all__ = [
    "Unit", "UNIT",
    "Boolean",
    "Bounds",
    "INT8", "INT16", "INT32", "INT64",
    "UINT8", "UINT16", "UINT32", "UINT64",
    "FLOAT",
    "Max", "Min",
    "SetLattice",
]
