# tests/test_laws.py
"""
Property tests: every instance and derived wrapper satisfies the laws of
the capabilities it claims.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from semilattice import (
    Join,
    LowerBound,
    Meet,
    Monoid,
    UpperBound,
    bottom,
    join,
    meet,
    top,
)
from tests.conftest import (
    JOINS,
    JOINS_WITH_TOP,
    LOWER_BOUNDED_JOINS,
    MEETS,
    MEETS_WITH_BOTTOM,
    MONOIDS,
    UPPER_BOUNDED_MEETS,
    assert_semilattice,
    cases,
)


class TestJoinLaws:

    @pytest.mark.parametrize("values", cases(JOINS))
    @given(data=st.data())
    def test_idempotent_associative_commutative(self, values, data):
        a, b, c = (data.draw(values) for _ in range(3))
        assert isinstance(a, Join)
        assert_semilattice(join, a, b, c)

    @pytest.mark.parametrize("values", cases(LOWER_BOUNDED_JOINS))
    @given(data=st.data())
    def test_bottom_is_identity(self, values, data):
        a = data.draw(values)
        assert isinstance(a, LowerBound)
        b = bottom(type(a))
        assert join(b, a) == a
        assert join(a, b) == a

    @pytest.mark.parametrize("values", cases(JOINS_WITH_TOP))
    @given(data=st.data())
    def test_top_absorbs(self, values, data):
        a = data.draw(values)
        assert isinstance(a, Join)
        assert isinstance(a, UpperBound)
        t = top(type(a))
        assert join(t, a) == t
        assert join(a, t) == t


class TestMeetLaws:

    @pytest.mark.parametrize("values", cases(MEETS))
    @given(data=st.data())
    def test_idempotent_associative_commutative(self, values, data):
        a, b, c = (data.draw(values) for _ in range(3))
        assert isinstance(a, Meet)
        assert_semilattice(meet, a, b, c)

    @pytest.mark.parametrize("values", cases(UPPER_BOUNDED_MEETS))
    @given(data=st.data())
    def test_top_is_identity(self, values, data):
        a = data.draw(values)
        assert isinstance(a, UpperBound)
        t = top(type(a))
        assert meet(t, a) == a
        assert meet(a, t) == a

    @pytest.mark.parametrize("values", cases(MEETS_WITH_BOTTOM))
    @given(data=st.data())
    def test_bottom_absorbs(self, values, data):
        a = data.draw(values)
        assert isinstance(a, Meet)
        assert isinstance(a, LowerBound)
        b = bottom(type(a))
        assert meet(b, a) == b
        assert meet(a, b) == b


class TestMonoidLaws:

    @pytest.mark.parametrize("values", cases(MONOIDS))
    @given(data=st.data())
    def test_combine_is_associative(self, values, data):
        a, b, c = (data.draw(values) for _ in range(3))
        assert isinstance(a, Monoid)
        assert a.combine(b.combine(c)) == a.combine(b).combine(c)

    @pytest.mark.parametrize("values", cases(MONOIDS))
    @given(data=st.data())
    def test_identity_is_two_sided(self, values, data):
        a = data.draw(values)
        e = type(a).identity()
        assert e.combine(a) == a
        assert a.combine(e) == a

    @pytest.mark.parametrize("values", cases(MONOIDS))
    @given(data=st.data())
    def test_duplicated_delivery_is_absorbed(self, values, data):
        a, b = data.draw(values), data.draw(values)
        assert a.combine(b).combine(a) == a.combine(b)
