"""
Ordinal Order on 亞 Terms

Terms are ordered as sequences of principal terms:
- 0 is the empty sequence and lies below everything else
- principal terms compare lexicographically on (sub, arg)
- a principal term is compared with a sum through the sum's first addend
- two sums compare their first addends, then the remaining addends

Together with structural equality this is a strict total order, so exactly
one of s < t, s == t, t < s holds for any two terms.
"""

from __future__ import annotations
from typing import Iterable

from .terms import Term, Zero, Psi, sanitize_plus


def less_than(s: Term, t: Term) -> bool:
    """Decide s < t."""
    if isinstance(s, Zero):
        return not isinstance(t, Zero)

    if isinstance(s, Psi):
        if isinstance(t, Zero):
            return False
        if isinstance(t, Psi):
            return less_than(s.sub, t.sub) or \
                (s.sub == t.sub and less_than(s.arg, t.arg))
        # A sum lies strictly above its own leading addend
        head = t.addends[0]
        return s == head or less_than(s, head)

    if isinstance(t, Zero):
        return False
    if isinstance(t, Psi):
        return less_than(s.addends[0], t)

    s_head, t_head = s.addends[0], t.addends[0]
    if less_than(s_head, t_head):
        return True
    if s_head != t_head:
        return False
    return less_than(sanitize_plus(s.addends[1:]), sanitize_plus(t.addends[1:]))


def compare(s: Term, t: Term) -> int:
    """Three-way comparison: -1 if s < t, 0 if s == t, 1 if s > t."""
    if s == t:
        return 0
    return -1 if less_than(s, t) else 1


def max_term(terms: Iterable[Term]) -> Term:
    """The largest of a non-empty collection of terms."""
    terms = list(terms)
    if not terms:
        raise ValueError("max_term() needs at least one term")
    best = terms[0]
    for t in terms[1:]:
        if less_than(best, t):
            best = t
    return best
