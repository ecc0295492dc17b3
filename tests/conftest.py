# tests/conftest.py
"""
Shared Hypothesis strategies and law assertions for the semilattice tests.
"""

import pytest
from hypothesis import strategies as st

from semilattice import (
    INT8,
    UINT8,
    UNIT,
    Boolean,
    Dual,
    Joining,
    Max,
    Meeting,
    Min,
    SetLattice,
)


# ── Strategies ───────────────────────────────────────────────────

units = st.just(UNIT)
booleans = st.builds(Boolean, st.booleans())
maxes = st.builds(Max, st.integers())
mins = st.builds(Min, st.integers())
int8s = st.integers(min_value=INT8.lower, max_value=INT8.upper)
bounded_maxes = st.builds(Max.bounded(INT8), int8s)
bounded_mins = st.builds(Min.bounded(UINT8), st.integers(min_value=0, max_value=255))
text_maxes = st.builds(Max, st.text(max_size=4))
sets = st.builds(SetLattice, st.frozensets(st.integers(0, 9), max_size=6))

dual_booleans = booleans.map(Dual.wrap)
dual_sets = sets.map(Dual.wrap)
dual_maxes = bounded_maxes.map(Dual.wrap)
dual_mins = bounded_mins.map(Dual.wrap)
double_dual_booleans = dual_booleans.map(Dual.wrap)

joining_sets = sets.map(Joining.wrap)
joining_booleans = booleans.map(Joining.wrap)
joining_maxes = bounded_maxes.map(Joining.wrap)
meeting_mins = bounded_mins.map(Meeting.wrap)
meeting_booleans = booleans.map(Meeting.wrap)


# Strategies keyed by test id, grouped by the capabilities their values claim.

JOINS = {
    "unit": units,
    "boolean": booleans,
    "max": maxes,
    "max-text": text_maxes,
    "max-int8": bounded_maxes,
    "set": sets,
    "dual-min": dual_mins,
    "dual-set": dual_sets,
    "dual-boolean": dual_booleans,
    "dual-dual-boolean": double_dual_booleans,
}

MEETS = {
    "unit": units,
    "boolean": booleans,
    "min": mins,
    "min-uint8": bounded_mins,
    "set": sets,
    "dual-max": dual_maxes,
    "dual-set": dual_sets,
    "dual-boolean": dual_booleans,
    "dual-dual-boolean": double_dual_booleans,
}

LOWER_BOUNDED_JOINS = {
    "unit": units,
    "boolean": booleans,
    "max-int8": bounded_maxes,
    "set": sets,
    "dual-min": dual_mins,
    "dual-boolean": dual_booleans,
}

UPPER_BOUNDED_MEETS = {
    "unit": units,
    "boolean": booleans,
    "min-uint8": bounded_mins,
    "dual-max": dual_maxes,
    "dual-set": dual_sets,
    "dual-boolean": dual_booleans,
}

JOINS_WITH_TOP = {
    "unit": units,
    "boolean": booleans,
    "dual-set": dual_sets,
    "dual-boolean": dual_booleans,
    "dual-dual-boolean": double_dual_booleans,
}

MEETS_WITH_BOTTOM = {
    "unit": units,
    "boolean": booleans,
    "set": sets,
    "dual-boolean": dual_booleans,
    "dual-dual-boolean": double_dual_booleans,
}

MONOIDS = {
    "joining-set": joining_sets,
    "joining-boolean": joining_booleans,
    "joining-max-int8": joining_maxes,
    "meeting-min-uint8": meeting_mins,
    "meeting-boolean": meeting_booleans,
}


def cases(table):
    """Turn a strategy table into ``pytest.param`` entries with readable ids."""
    return [pytest.param(strategy, id=name) for name, strategy in table.items()]


# ── Law assertions ───────────────────────────────────────────────

def assert_semilattice(op, a, b, c):
    """Idempotence, associativity and commutativity of the binary *op*."""
    assert op(a, a) == a
    assert op(a, op(b, c)) == op(op(a, b), c)
    assert op(a, b) == op(b, a)
