"""
Tests for dom, the degree of a term.
"""

import pytest

from subspecies.terms import ZERO, ONE, OMEGA, LOMEGA, Psi, psi, plus, numeral
from subspecies.degree import dom, is_successor, is_limit


class TestDom:

    def test_basic_values(self):
        assert dom(ZERO) == ZERO
        assert dom(ONE) == ONE
        assert dom(OMEGA) == OMEGA
        assert dom(psi(ZERO, OMEGA)) == OMEGA

    def test_numerals_are_successors(self):
        for n in range(1, 5):
            assert dom(numeral(n)) == ONE

    def test_last_addend_decides(self):
        assert dom(plus(OMEGA, ONE)) == ONE
        assert dom(plus(ONE, OMEGA)) == OMEGA
        assert dom(plus(OMEGA, LOMEGA)) == LOMEGA

    def test_own_degree(self):
        """Terms with zero argument and subscript of degree 0 or 1 are their own degree."""
        assert dom(LOMEGA) == LOMEGA
        assert dom(psi(numeral(2), ZERO)) == psi(numeral(2), ZERO)

    def test_degree_from_subscript(self):
        assert dom(psi(OMEGA, ZERO)) == OMEGA
        assert dom(psi(LOMEGA, ZERO)) == LOMEGA
        assert dom(psi(psi(numeral(2), ZERO), ZERO)) == psi(numeral(2), ZERO)

    def test_limit_argument_gives_omega(self):
        assert dom(psi(ZERO, LOMEGA)) == OMEGA
        assert dom(psi(ONE, ONE)) == OMEGA
        assert dom(psi(LOMEGA, OMEGA)) == OMEGA

    def test_shape(self, sample_terms):
        for t in sample_terms:
            d = dom(t)
            assert d == ZERO or isinstance(d, Psi)


class TestClassification:

    def test_successor(self):
        assert is_successor(ONE)
        assert is_successor(plus(OMEGA, ONE))
        assert not is_successor(OMEGA)
        assert not is_successor(ZERO)

    def test_limit(self):
        assert is_limit(OMEGA)
        assert is_limit(LOMEGA)
        assert not is_limit(ZERO)
        assert not is_limit(numeral(3))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
