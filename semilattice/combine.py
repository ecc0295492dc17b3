"""
semilattice/combine.py
══════════════════════

Adapters presenting a semilattice as "associative combine with identity".

Generic reduction code (parallel folds, tree reductions, streaming
aggregation) usually knows only the ``Monoid`` shape:

    combine(a, b)      associative
    identity()         two-sided unit of combine

``Joining.of(S)`` presents a type with ``Join`` + ``LowerBound`` in that
shape; ``Meeting.of(S)`` does the same for ``Meet`` + ``UpperBound``.
Because the underlying operation is also commutative and idempotent, a fold
over these adapters gives the same answer for any order, any grouping and any
number of repeated deliveries of the same input:

>>> from semilattice.instances import SetLattice
>>> J = Joining.of(SetLattice)
>>> parts = [J(SetLattice.of(1)), J(SetLattice.of(2)), J(SetLattice.of(1, 2, 3))]
>>> mconcat(parts, J).unwrap() == tree_fold(parts[::-1] + parts, J).unwrap()
True
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache, reduce
from typing import (
    Any,
    Callable,
    ClassVar,
    Generic,
    Iterable,
    List,
    Optional,
    Protocol,
    Self,
    Tuple,
    Type,
    TypeVar,
    runtime_checkable,
)

from .capabilities import Join, LowerBound, Meet, UpperBound, require
from .errors import CapabilityError

logger = logging.getLogger(__name__)

S = TypeVar("S")


# ═══════════════════════════════════════════════════════════════════════════
#  PART 1 — MONOID PROTOCOL
# ═══════════════════════════════════════════════════════════════════════════
#
#    a · (b · c) = (a · b) · c        (associativity)
#    e · a = a = a · e                (identity)
# ═══════════════════════════════════════════════════════════════════════════

@runtime_checkable
class Monoid(Protocol):
    """An associative operation with a two-sided identity."""

    def combine(self, other: Self) -> Self:
        ...

    @classmethod
    def identity(cls) -> Self:
        ...


MT = TypeVar("MT", bound=Monoid)


# ═══════════════════════════════════════════════════════════════════════════
#  PART 2 — ADAPTERS
# ═══════════════════════════════════════════════════════════════════════════

class _Adapter(Generic[S]):
    """
    Shared plumbing for ``Joining`` and ``Meeting``.

    Subclasses set ``requires`` (the capabilities the base must offer) and
    are specialised per base type through ``of``.
    """
    __slots__ = ()
    value: S
    base: ClassVar[Optional[type]] = None
    requires: ClassVar[Tuple[type, ...]] = ()

    def __new__(cls, value: Any = None) -> Any:
        if cls.base is None and cls in _ROOTS:
            cls = cls.of(type(value))
        return object.__new__(cls)

    def __post_init__(self) -> None:
        base = type(self).base
        if base is not None and not isinstance(self.value, base):
            raise CapabilityError(
                type(self), [base.__qualname__],
                context=f"wrapping {type(self.value).__qualname__}",
                hint=f"use {_root_of(type(self)).__name__}.wrap(value)",
            )

    @classmethod
    def of(cls, base: type) -> Any:
        """Return the adapter class over *base*, checking its capabilities."""
        return _specialise(_root_of(cls), base)

    @classmethod
    def wrap(cls, value: S) -> Any:
        return _specialise(_root_of(cls), type(value))(value)

    def unwrap(self) -> S:
        return self.value

    def map(self, fn: Callable[[S], Any]) -> Any:
        """Apply *fn* to the wrapped value and wrap the result in the same adapter."""
        return _root_of(type(self)).wrap(fn(self.value))

    @classmethod
    def _require_base(cls) -> type:
        if cls.base is None:
            raise CapabilityError(
                cls, ["a base type"], context="identity()",
                hint=f"use {cls.__name__}.of(S).identity()",
            )
        return cls.base


@dataclass(frozen=True, slots=True)
class Joining(_Adapter[S]):
    """
    ``combine`` is the base's ``join``; ``identity()`` is its ``bottom()``.

    The base must offer ``Join`` and ``LowerBound``; ``Joining.of(S)``
    raises ``CapabilityError`` otherwise.
    """
    value: S
    requires: ClassVar[Tuple[type, ...]] = (Join, LowerBound)

    def combine(self, other: Joining[S]) -> Joining[S]:
        return type(self)(self.value.join(other.value))  # type: ignore[attr-defined]

    @classmethod
    def identity(cls) -> Joining[S]:
        return cls(cls._require_base().bottom())


@dataclass(frozen=True, slots=True)
class Meeting(_Adapter[S]):
    """
    ``combine`` is the base's ``meet``; ``identity()`` is its ``top()``.

    The base must offer ``Meet`` and ``UpperBound``.
    """
    value: S
    requires: ClassVar[Tuple[type, ...]] = (Meet, UpperBound)

    def combine(self, other: Meeting[S]) -> Meeting[S]:
        return type(self)(self.value.meet(other.value))  # type: ignore[attr-defined]

    @classmethod
    def identity(cls) -> Meeting[S]:
        return cls(cls._require_base().top())


_ROOTS: Tuple[type, ...] = (Joining, Meeting)


def _root_of(cls: type) -> type:
    for root in _ROOTS:
        if issubclass(cls, root):
            return root
    raise CapabilityError(cls, ["an adapter root"])


@lru_cache(maxsize=None)
def _specialise(root: type, base: type) -> type:
    require(base, *root.requires, context=f"{root.__name__}.of()")
    derived = type(
        f"{root.__name__}[{base.__qualname__}]",
        (root,),
        {"__slots__": (), "__module__": __name__, "base": base},
    )
    logger.debug("derived %s", derived.__name__)
    return derived


# ═══════════════════════════════════════════════════════════════════════════
#  PART 3 — REDUCTIONS
# ═══════════════════════════════════════════════════════════════════════════

def mconcat(values: Iterable[MT], monoid: Type[MT]) -> MT:
    """Left fold of *values* with ``combine``, starting from ``identity()``."""
    return reduce(lambda acc, v: acc.combine(v), values, monoid.identity())


def tree_fold(values: Iterable[MT], monoid: Type[MT]) -> MT:
    """
    Balanced pairwise reduction of *values*.

    Combines neighbours level by level, the shape a parallel reduction
    takes.  Equal to ``mconcat`` for every lawful monoid.
    """
    layer: List[MT] = list(values)
    if not layer:
        return monoid.identity()
    while len(layer) > 1:
        paired = [layer[i].combine(layer[i + 1]) for i in range(0, len(layer) - 1, 2)]
        if len(layer) % 2:
            paired.append(layer[-1])
        layer = paired
    return layer[0]


__all__ = ["Monoid", "Joining", "Meeting", "mconcat", "tree_fold"]
