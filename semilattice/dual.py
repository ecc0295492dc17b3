"""
semilattice/dual.py
═══════════════════

The order dual of a type: join and meet trade places, as do bottom and top.

    ┌───────────────────────────────┬──────────────────────────────────┐
    │  base S offers                │  Dual.of(S) offers               │
    ├───────────────────────────────┼──────────────────────────────────┤
    │  Meet        a.meet(b)        │  Join   Dual(a).join(Dual(b))    │
    │  Join        a.join(b)        │  Meet   Dual(a).meet(Dual(b))    │
    │  UpperBound  S.top()          │  LowerBound  Dual(S.top())       │
    │  LowerBound  S.bottom()       │  UpperBound  Dual(S.bottom())    │
    └───────────────────────────────┴──────────────────────────────────┘

``Dual.of(S)`` builds (once, then caches) a subclass of ``Dual`` carrying
exactly the methods in the right-hand column for which ``S`` offers the
left-hand capability.  A capability ``S`` lacks is simply absent from the
derived class, so ``isinstance(d, Join)`` and friends answer truthfully and
nothing is decided per call.

>>> from semilattice.instances import Boolean
>>> Dual.wrap(Boolean(True)).join(Dual.wrap(Boolean(False)))
Dual[Boolean](value=Boolean(value=False))

Applying ``Dual`` twice gives back the behaviour of the base type, but the
values stay wrapped: ``Dual.of(Dual.of(S))`` is its own representation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, ClassVar, Dict, Generic, Optional, Type, TypeVar

from .capabilities import Join, LowerBound, Meet, UpperBound, capabilities_of
from .errors import CapabilityError

logger = logging.getLogger(__name__)

S = TypeVar("S")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class Dual(Generic[S]):
    """
    One-field wrapper holding a value of the base type.

    ``Dual(v)`` and ``Dual.wrap(v)`` both pick the specialisation for
    ``type(v)``; ``Dual.of(S)(v)`` additionally checks that *v* is an *S*.
    """
    value: S
    base: ClassVar[Optional[type]] = None

    def __new__(cls, value: Any = None) -> Dual[Any]:
        if cls is Dual:
            cls = Dual.of(type(value))
        return object.__new__(cls)

    def __post_init__(self) -> None:
        base = type(self).base
        if base is not None and not isinstance(self.value, base):
            raise CapabilityError(
                type(self), [base.__qualname__],
                context=f"wrapping {type(self.value).__qualname__}",
                hint="use Dual.wrap(value) to pick the matching dual",
            )

    @classmethod
    def of(cls, base: Type[S]) -> Type[Dual[S]]:
        """Return the dual wrapper class for *base*."""
        return _dual_of(base)

    @classmethod
    def wrap(cls, value: S) -> Dual[S]:
        return _dual_of(type(value))(value)

    def unwrap(self) -> S:
        return self.value

    def map(self, fn: Callable[[S], R]) -> Dual[R]:
        """Apply *fn* to the wrapped value and wrap the result."""
        return Dual.wrap(fn(self.value))


# ---- Forwarding methods ------------------------------------------------------
#
#  One method per capability: unwrap, compute with the opposite operation,
#  rewrap.

def _join_via_meet(self: Any, other: Any) -> Any:
    return type(self)(self.value.meet(other.value))


def _meet_via_join(self: Any, other: Any) -> Any:
    return type(self)(self.value.join(other.value))


def _bottom_via_top(cls: Any) -> Any:
    return cls(cls.base.top())


def _top_via_bottom(cls: Any) -> Any:
    return cls(cls.base.bottom())


_DUAL_METHODS: Dict[type, tuple] = {
    Meet: ("join", _join_via_meet),
    Join: ("meet", _meet_via_join),
    UpperBound: ("bottom", classmethod(_bottom_via_top)),
    LowerBound: ("top", classmethod(_top_via_bottom)),
}


@lru_cache(maxsize=None)
def _dual_of(base: type) -> type:
    if not isinstance(base, type):
        raise CapabilityError(base, ["a class"], context="Dual.of()")
    namespace: Dict[str, Any] = {
        "__slots__": (),
        "__module__": __name__,
        "base": base,
    }
    offered = capabilities_of(base)
    for capability, (name, method) in _DUAL_METHODS.items():
        if capability in offered:
            namespace[name] = method
    derived = type(f"Dual[{base.__qualname__}]", (Dual,), namespace)
    logger.debug(
        "derived %s offering %s",
        derived.__name__,
        sorted(c.__name__ for c in capabilities_of(derived)) or "nothing",
    )
    return derived


__all__ = ["Dual"]
