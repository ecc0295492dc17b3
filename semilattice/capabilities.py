"""
semilattice/capabilities.py
═══════════════════════════

Capability protocols for join- and meet-semilattices.

Each capability is an independent structural protocol, so a type can offer
any combination of them (Join without Meet, a bound without the matching
operation, and so on) instead of buying into one monolithic "lattice" class:

    ┌──────────────────────────────────────────────────────────────┐
    │  Join        — a.join(b)         idempotent commutative      │
    │  Meet        — a.meet(b)         semigroups                  │
    │  LowerBound  — S.bottom()        identity of join            │
    │  UpperBound  — S.top()           identity of meet            │
    └──────────────────────────────────────────────────────────────┘

The module-level functions ``join``, ``meet``, ``bottom`` and ``top`` are the
generic surface consumers program against; they never inspect which concrete
instance sits behind a value.

Laws are obligations on the implementing type.  They are verified by the
property tests under ``tests/`` and are never checked at call time.
"""

from __future__ import annotations

from functools import reduce
from typing import (
    Any,
    FrozenSet,
    Iterable,
    Optional,
    Protocol,
    Self,
    Tuple,
    Type,
    TypeVar,
    runtime_checkable,
)

from .errors import CapabilityError


# ═══════════════════════════════════════════════════════════════════════════
#  PART 1 — CAPABILITY PROTOCOLS
# ═══════════════════════════════════════════════════════════════════════════
#
#  Laws that MUST hold (checked by the Hypothesis suite):
#
#    Join                       Meet
#    ────                       ────
#    x ⊔ x = x                  x ⊓ x = x                 (idempotence)
#    a ⊔ (b ⊔ c) = (a ⊔ b) ⊔ c  a ⊓ (b ⊓ c) = (a ⊓ b) ⊓ c (associativity)
#    a ⊔ b = b ⊔ a              a ⊓ b = b ⊓ a             (commutativity)
#
#    with LowerBound:  ⊥ ⊔ a = a = a ⊔ ⊥     ⊥ ⊓ a = ⊥ = a ⊓ ⊥
#    with UpperBound:  ⊤ ⊔ a = ⊤ = a ⊔ ⊤     ⊤ ⊓ a = a = a ⊓ ⊤
# ═══════════════════════════════════════════════════════════════════════════

@runtime_checkable
class Join(Protocol):
    """A join semilattice: an idempotent commutative semigroup."""

    def join(self, other: Self) -> Self:
        """
        Least upper bound:  self ⊔ other.

        Idempotent, associative and commutative.  If the type also has a
        ``LowerBound``, ``bottom()`` is its left and right identity; if it
        has an ``UpperBound``, ``top()`` is its left and right annihilator.
        """
        ...


@runtime_checkable
class Meet(Protocol):
    """A meet semilattice, the order dual of ``Join``."""

    def meet(self, other: Self) -> Self:
        """
        Greatest lower bound:  self ⊓ other.

        Idempotent, associative and commutative.  ``top()`` is its identity
        and ``bottom()`` its annihilator, where the type provides them.
        """
        ...


@runtime_checkable
class LowerBound(Protocol):
    """Types with a least element ⊥."""

    @classmethod
    def bottom(cls) -> Self:
        """
        The least element of the type.

        If the type is totally ordered, ``bottom()`` compares ``<=`` every
        value.  If the type is a ``Join``, it is the identity of ``join``.
        """
        ...


@runtime_checkable
class UpperBound(Protocol):
    """Types with a greatest element ⊤."""

    @classmethod
    def top(cls) -> Self:
        """
        The greatest element of the type.

        If the type is totally ordered, ``top()`` compares ``>=`` every
        value.  If the type is a ``Meet``, it is the identity of ``meet``.
        """
        ...


CAPABILITIES: Tuple[type, ...] = (Join, Meet, LowerBound, UpperBound)

J = TypeVar("J", bound=Join)
M = TypeVar("M", bound=Meet)
L = TypeVar("L", bound=LowerBound)
U = TypeVar("U", bound=UpperBound)


# ═══════════════════════════════════════════════════════════════════════════
#  PART 2 — CAPABILITY QUERIES
# ═══════════════════════════════════════════════════════════════════════════

def _as_type(subject: Any) -> type:
    return subject if isinstance(subject, type) else type(subject)


def supports(subject: Any, capability: type) -> bool:
    """Does *subject* (a type or a value) offer *capability*?"""
    return issubclass(_as_type(subject), capability)


def capabilities_of(subject: Any) -> FrozenSet[type]:
    """Return every capability offered by *subject* (a type or a value)."""
    cls = _as_type(subject)
    return frozenset(c for c in CAPABILITIES if issubclass(cls, c))


def require(subject: Any, *capabilities: type, context: str = "") -> type:
    """
    Return the type of *subject* if it offers all *capabilities*.

    Raises
    ------
    CapabilityError
        Naming every capability that is missing.
    """
    cls = _as_type(subject)
    missing = [c.__name__ for c in capabilities if not issubclass(cls, c)]
    if missing:
        raise CapabilityError(cls, missing, context=context)
    return cls


# ═══════════════════════════════════════════════════════════════════════════
#  PART 3 — GENERIC OPERATIONS
# ═══════════════════════════════════════════════════════════════════════════

def join(a: J, b: J) -> J:
    """a ⊔ b"""
    return a.join(b)


def meet(a: M, b: M) -> M:
    """a ⊓ b"""
    return a.meet(b)


def bottom(cls: Type[L]) -> L:
    """The least element of *cls*."""
    return cls.bottom()


def top(cls: Type[U]) -> U:
    """The greatest element of *cls*."""
    return cls.top()


def joins(values: Iterable[J], cls: Optional[Type[J]] = None) -> J:
    """
    Join every value in *values*.

    When *cls* is given the fold starts from ``cls.bottom()`` and an empty
    input yields bottom; *cls* must then offer ``LowerBound``.  Without
    *cls*, *values* must be non-empty.

    The result does not depend on the order of *values*, and repeating a
    value any number of times does not change it.
    """
    it = iter(values)
    if cls is not None:
        require(cls, LowerBound, context="joins()")
        start = cls.bottom()
    else:
        try:
            start = next(it)
        except StopIteration:
            raise ValueError(
                "joins() arg is an empty iterable and no bounded type was given"
            ) from None
    return reduce(join, it, start)


def meets(values: Iterable[M], cls: Optional[Type[M]] = None) -> M:
    """Meet every value in *values*; the dual of ``joins``."""
    it = iter(values)
    if cls is not None:
        require(cls, UpperBound, context="meets()")
        start = cls.top()
    else:
        try:
            start = next(it)
        except StopIteration:
            raise ValueError(
                "meets() arg is an empty iterable and no bounded type was given"
            ) from None
    return reduce(meet, it, start)


# ---- Induced partial orders ------------------------------------------------

def join_leq(a: J, b: J) -> bool:
    """a ⊑ b in the order induced by join:  a ⊔ b = b."""
    return a.join(b) == b


def meet_leq(a: M, b: M) -> bool:
    """a ⊑ b in the order induced by meet:  a ⊓ b = a."""
    return a.meet(b) == a


__all__ = [
    # Protocols
    "Join", "Meet", "LowerBound", "UpperBound", "CAPABILITIES",
    # Queries
    "supports", "capabilities_of", "require",
    # Operations
    "join", "meet", "bottom", "top", "joins", "meets",
    "join_leq", "meet_leq",
]
