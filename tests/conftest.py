"""
Shared fixtures: a spread of canonical terms from 0 up past ψ(0,Ω).
"""

import pytest

from subspecies.terms import ZERO, ONE, OMEGA, LOMEGA, psi, plus, numeral


def build_sample_terms():
    two = numeral(2)
    return [
        ZERO,
        ONE,
        two,
        numeral(3),
        OMEGA,
        plus(OMEGA, ONE),
        plus(OMEGA, OMEGA),
        plus(ONE, OMEGA),
        psi(ZERO, two),
        psi(ZERO, OMEGA),
        psi(ZERO, plus(OMEGA, ONE)),
        LOMEGA,
        plus(LOMEGA, ONE),
        psi(ONE, ONE),
        psi(ONE, OMEGA),
        psi(ZERO, LOMEGA),
        psi(two, ZERO),
        psi(OMEGA, ZERO),
        psi(LOMEGA, ZERO),
        psi(plus(OMEGA, ONE), LOMEGA),
        plus(psi(ONE, OMEGA), OMEGA),
    ]


@pytest.fixture
def sample_terms():
    return build_sample_terms()
