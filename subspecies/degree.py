"""
Degree (dom) of 亞 Terms

dom(t) classifies how the fundamental sequence of t behaves:
- dom(t) = 0: t is zero and has no fundamental sequence
- dom(t) = 1: t is a successor, t[y] drops the last 1
- dom(t) = ω: t[n] is indexed by natural numbers
- dom(t) = t': a principal term of higher degree, t[y] ranges over t' below
"""

from __future__ import annotations

from .terms import Term, Zero, Sum, ZERO, ONE, OMEGA


def dom(t: Term) -> Term:
    """The degree of t: ZERO, ONE, OMEGA or a principal term."""
    if isinstance(t, Zero):
        return ZERO
    if isinstance(t, Sum):
        return dom(t.addends[-1])

    dom_sub = dom(t.sub)
    dom_arg = dom(t.arg)
    if dom_arg == ZERO:
        if dom_sub == ZERO or dom_sub == ONE:
            return t
        return dom_sub
    return OMEGA


def is_successor(t: Term) -> bool:
    return dom(t) == ONE


def is_limit(t: Term) -> bool:
    d = dom(t)
    return d != ZERO and d != ONE
