"""
semilattice — Join/Meet Capabilities for Order-Independent Merging
==================================================================

This package provides the algebraic bedrock for code that merges state
regardless of delivery order, duplication or grouping: replicated data
types, abstract-interpretation domains, state-reconciliation protocols.

Core modules
------------
errors
    ``SemilatticeError`` and its ``CapabilityError`` / ``BoundsError``
    subclasses.
capabilities
    The ``Join``, ``Meet``, ``LowerBound`` and ``UpperBound`` protocols and
    the generic ``join`` / ``meet`` / ``bottom`` / ``top`` operations.
instances
    ``Unit``, ``Boolean``, ``Max``, ``Min`` and ``SetLattice``, plus the
    ``Bounds`` presets that let ``Max`` / ``Min`` claim a bound.
dual
    ``Dual``: swaps join with meet and bottom with top.
combine
    ``Joining`` / ``Meeting``: present a bounded semilattice as an
    associative combine with identity for generic reductions.

Quick start
-----------
>>> from semilattice import SetLattice, Joining, join, mconcat
>>> join(SetLattice.of(1, 2), SetLattice.of(2, 3))
SetLattice({1, 2, 3})
>>> J = Joining.of(SetLattice)
>>> mconcat([J(SetLattice.of(1)), J(SetLattice.of(2))], J).unwrap()
SetLattice({1, 2})

Package layout
--------------
::

    semilattice/
    ├── __init__.py            ← this file
    ├── errors.py
    ├── capabilities.py
    ├── instances.py
    ├── dual.py
    └── combine.py
"""

from __future__ import annotations

import importlib
import logging
import sys
from typing import TYPE_CHECKING, Dict, List

# ---------------------------------------------------------------------------
# Package metadata
# ---------------------------------------------------------------------------

__version__ = "0.1.0"
__author__ = "semilattice contributors"
__license__ = "MIT"
__all__: List[str] = []          # populated incrementally below

_log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Internal registry: module_name -> list_of_names_to_import
#
# Order matters: leaves first, so each module's own imports are already
# loaded when it is bound here.
# ---------------------------------------------------------------------------

_CORE_MODULES: Dict[str, List[str]] = {
    "errors": [
        "SemilatticeError",
        "CapabilityError",
        "BoundsError",
    ],
    "capabilities": [
        "Join",
        "Meet",
        "LowerBound",
        "UpperBound",
        "CAPABILITIES",
        "supports",
        "capabilities_of",
        "require",
        "join",
        "meet",
        "bottom",
        "top",
        "joins",
        "meets",
        "join_leq",
        "meet_leq",
    ],
    "instances": [
        "Unit",
        "UNIT",
        "Boolean",
        "Bounds",
        "INT8",
        "INT16",
        "INT32",
        "INT64",
        "UINT8",
        "UINT16",
        "UINT32",
        "UINT64",
        "FLOAT",
        "Max",
        "Min",
        "SetLattice",
    ],
    "dual": [
        "Dual",
    ],
    "combine": [
        "Monoid",
        "Joining",
        "Meeting",
        "mconcat",
        "tree_fold",
    ],
}

# ---------------------------------------------------------------------------
# Import helper
# ---------------------------------------------------------------------------

def _import_names(module_rel_name: str, names: List[str]) -> None:
    """Import *names* from a submodule and bind them in the package namespace.

    Parameters
    ----------
    module_rel_name:
        Module name relative to this package (e.g. ``"dual"``).
    names:
        Public symbols to re-export.
    """
    fq_name = f"{__name__}.{module_rel_name}"
    try:
        mod = importlib.import_module(fq_name)
    except ImportError as exc:
        raise ImportError(
            f"semilattice: required submodule '{module_rel_name}' "
            f"failed to import: {exc}"
        ) from exc

    current_module = sys.modules[__name__]
    for name in names:
        if not hasattr(mod, name):
            raise AttributeError(
                f"semilattice.{module_rel_name} does not export '{name}'"
            )
        setattr(current_module, name, getattr(mod, name))
        __all__.append(name)

    # Also expose the submodule itself so that
    #   semilattice.dual.Dual
    # works in addition to
    #   semilattice.Dual
    setattr(current_module, module_rel_name, mod)
    if module_rel_name not in __all__:
        __all__.append(module_rel_name)
    _log.debug("bound %d names from %s", len(names), fq_name)


for _mod, _names in _CORE_MODULES.items():
    _import_names(_mod, _names)

del _mod, _names

# ---------------------------------------------------------------------------
# Package-level utilities
# ---------------------------------------------------------------------------

def list_submodules() -> List[str]:
    """Return the names of all submodules in the package."""
    return sorted(_CORE_MODULES)


def library_info() -> dict:
    """Return a dict of metadata about the installed library.

    Useful for logging/diagnostics in downstream code.
    """
    loaded = []
    missing = []
    for mod_name in list_submodules():
        if f"{__name__}.{mod_name}" in sys.modules:
            loaded.append(mod_name)
        else:
            missing.append(mod_name)

    return {
        "package": __name__,
        "version": __version__,
        "python": sys.version,
        "loaded_submodules": loaded,
        "missing_submodules": missing,
        "all_exports": list(__all__),
    }


__all__ += ["list_submodules", "library_info", "__version__"]

# ---------------------------------------------------------------------------
# TYPE_CHECKING block — gives IDEs full visibility without runtime cost
# ---------------------------------------------------------------------------

if TYPE_CHECKING:
    from .errors import (
        SemilatticeError as SemilatticeError,
        CapabilityError as CapabilityError,
        BoundsError as BoundsError,
    )
    from .capabilities import (
        Join as Join,
        Meet as Meet,
        LowerBound as LowerBound,
        UpperBound as UpperBound,
        CAPABILITIES as CAPABILITIES,
        supports as supports,
        capabilities_of as capabilities_of,
        require as require,
        join as join,
        meet as meet,
        bottom as bottom,
        top as top,
        joins as joins,
        meets as meets,
        join_leq as join_leq,
        meet_leq as meet_leq,
    )
    from .instances import (
        Unit as Unit,
        UNIT as UNIT,
        Boolean as Boolean,
        Bounds as Bounds,
        INT8 as INT8,
        INT16 as INT16,
        INT32 as INT32,
        INT64 as INT64,
        UINT8 as UINT8,
        UINT16 as UINT16,
        UINT32 as UINT32,
        UINT64 as UINT64,
        FLOAT as FLOAT,
        Max as Max,
        Min as Min,
        SetLattice as SetLattice,
    )
    from .dual import Dual as Dual
    from .combine import (
        Monoid as Monoid,
        Joining as Joining,
        Meeting as Meeting,
        mconcat as mconcat,
        tree_fold as tree_fold,
    )
