"""
Tests for the ordinal order on terms.
"""

import itertools

import pytest

from subspecies.terms import ZERO, ONE, OMEGA, LOMEGA, psi, plus, numeral
from subspecies.ordering import less_than, compare, max_term


class TestLessThan:
    """Tests for individual comparisons."""

    def test_zero_is_least(self):
        assert less_than(ZERO, ONE)
        assert not less_than(ZERO, ZERO)
        assert not less_than(ONE, ZERO)
        assert not less_than(numeral(2), ZERO)

    def test_omega_below_large_omega(self):
        assert less_than(OMEGA, LOMEGA)
        assert not less_than(LOMEGA, OMEGA)

    def test_atoms_lexicographic(self):
        assert less_than(ONE, OMEGA)                       # same sub, 0 < 1
        assert less_than(psi(ZERO, LOMEGA), psi(ONE, ZERO))  # sub decides first
        assert less_than(psi(ONE, ZERO), psi(ONE, ONE))

    def test_numerals(self):
        for m in range(5):
            for n in range(5):
                assert less_than(numeral(m), numeral(n)) == (m < n)

    def test_atom_below_its_own_sum(self):
        assert less_than(OMEGA, plus(OMEGA, ONE))
        assert not less_than(plus(OMEGA, ONE), OMEGA)

    def test_sum_against_atom(self):
        assert less_than(numeral(3), OMEGA)
        assert less_than(plus(OMEGA, OMEGA), psi(ZERO, numeral(2)))
        assert not less_than(psi(ZERO, numeral(2)), plus(OMEGA, OMEGA))

    def test_sums(self):
        assert less_than(plus(OMEGA, ONE), plus(OMEGA, OMEGA))
        assert less_than(plus(OMEGA, OMEGA), plus(plus(OMEGA, OMEGA), ONE))
        assert not less_than(plus(OMEGA, OMEGA), plus(OMEGA, ONE))

    def test_irreflexive(self, sample_terms):
        for t in sample_terms:
            assert not less_than(t, t)


class TestOrderProperties:
    """The order is a strict total order on canonical terms."""

    def test_trichotomy(self, sample_terms):
        for s, t in itertools.product(sample_terms, repeat=2):
            outcomes = [less_than(s, t), s == t, less_than(t, s)]
            assert outcomes.count(True) == 1, (s, t)

    def test_antisymmetry(self, sample_terms):
        for s, t in itertools.product(sample_terms, repeat=2):
            assert not (less_than(s, t) and less_than(t, s))

    def test_transitivity(self, sample_terms):
        for r, s, t in itertools.product(sample_terms, repeat=3):
            if less_than(r, s) and less_than(s, t):
                assert less_than(r, t), (r, s, t)

    def test_sorting_is_consistent(self, sample_terms):
        ordered = sorted(sample_terms)
        for a, b in zip(ordered, ordered[1:]):
            assert less_than(a, b)


class TestCompare:
    """Tests for the three-way comparison and operators."""

    def test_compare(self):
        assert compare(ONE, OMEGA) == -1
        assert compare(OMEGA, OMEGA) == 0
        assert compare(LOMEGA, OMEGA) == 1

    def test_operators(self):
        assert ZERO < ONE
        assert OMEGA <= OMEGA
        assert LOMEGA > OMEGA
        assert LOMEGA >= plus(OMEGA, OMEGA)

    def test_max_term(self, sample_terms):
        assert max_term([ONE, LOMEGA, OMEGA]) == LOMEGA
        assert max_term(sample_terms) == sorted(sample_terms)[-1]

    def test_max_term_empty(self):
        with pytest.raises(ValueError):
            max_term([])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
