# semilattice/errors.py
"""
semilattice/errors.py
═════════════════════

Exception types for the semilattice package.

Error Hierarchy:
────────────────
    SemilatticeError (base)
    ├── CapabilityError   - a wrapper or generic operation was asked for a
    │                       capability its base type does not offer
    └── BoundsError       - a value outside a declared ``Bounds`` (or NaN)
                            was used to build a ``Max`` / ``Min``

Both are raised only when a type or value is being *built*.  Operations on
values that already claim a capability never raise; a law violation is a
defect in the instance and is caught by the property tests, not here.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Tuple


class SemilatticeError(Exception):
    """Base exception for all semilattice errors."""

    def __init__(self, message: str, hint: str = "") -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        text = super().__str__()
        if self.hint:
            return f"{text} (hint: {self.hint})"
        return text


class CapabilityError(SemilatticeError, TypeError):
    """A type lacks a capability that was required of it."""

    def __init__(
        self,
        subject: Any,
        missing: Iterable[str],
        context: str = "",
        hint: str = "",
    ) -> None:
        self.subject = subject
        self.missing: Tuple[str, ...] = tuple(missing)
        name = getattr(subject, "__qualname__", repr(subject))
        ctx = f" for {context}" if context else ""
        super().__init__(
            f"{name} does not provide {', '.join(self.missing)}{ctx}",
            hint=hint,
        )


class BoundsError(SemilatticeError, ValueError):
    """A value does not fit the bounds its wrapper declares."""

    def __init__(
        self,
        value: Any,
        bounds: Optional[Any] = None,
        hint: str = "",
    ) -> None:
        self.value = value
        self.bounds = bounds
        if bounds is None:
            message = f"{value!r} is not totally ordered"
        else:
            message = f"{value!r} lies outside {bounds!r}"
        super().__init__(message, hint=hint)


__all__ = ["SemilatticeError", "CapabilityError", "BoundsError"]
