"""
Term Representation for the 亞 (Old Subspecies) Function

A term of the notation is one of:
- 0: zero, the additive identity
- a_1 + a_2 + ... + a_k: a sum of k >= 2 principal terms, read left to right
- 亞(a, b): the principal term with subscript a and argument b

Ordinal addition is not commutative, so the order of the addends in a sum
is part of the value. Every term built by this package is kept in canonical
form:
1. A sum never contains 0 or another sum as an addend
2. A sum has at least two addends; a one-addend sum is just that addend
3. Two terms are equal exactly when they are structurally equal

Terms are immutable values. They hash, compare with < (the ordinal order of
the notation), add with +, and index with x[y] (the fundamental sequence).
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import total_ordering
from typing import Iterable, Optional, Tuple, Union


HEAD = "亞"           # designated head glyph
HEAD_ASCII = "A"      # accepted by the parser in place of HEAD


@total_ordering
class Term:
    """Base class of Zero, Sum and Psi."""

    def __lt__(self, other: Term) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        from .ordering import less_than
        return less_than(self, other)

    def __add__(self, other: Term) -> Term:
        if not isinstance(other, Term):
            return NotImplemented
        return plus(self, other)

    def __getitem__(self, index: Union[Term, int]) -> Term:
        """x[y]: the y-th element of the fundamental sequence of x."""
        from .fundamental import fund
        if isinstance(index, int):
            index = numeral(index)
        return fund(self, index)


@dataclass(frozen=True)
class Zero(Term):
    """The term 0."""

    def __repr__(self) -> str:
        return "0"


@dataclass(frozen=True)
class Psi(Term):
    """The principal term 亞(sub, arg)."""
    sub: Term
    arg: Term

    def __repr__(self) -> str:
        return f"{HEAD}({self.sub!r},{self.arg!r})"


@dataclass(frozen=True)
class Sum(Term):
    """
    A left-to-right sum of principal terms.

    Build sums through plus() or sanitize_plus(); constructing one directly
    must already respect the canonical-form rules.
    """
    addends: Tuple[Psi, ...]

    def __post_init__(self):
        assert len(self.addends) >= 2, "A sum needs at least two addends"
        assert all(isinstance(a, Psi) for a in self.addends), \
            "Addends of a sum must be principal terms"

    def __repr__(self) -> str:
        return "+".join(repr(a) for a in self.addends)


ZERO = Zero()
ONE = Psi(ZERO, ZERO)          # 亞(0,0) = 1
OMEGA = Psi(ZERO, ONE)         # 亞(0,1) = ω
LOMEGA = Psi(ONE, ZERO)        # 亞(1,0) = Ω


def psi(sub: Term, arg: Term) -> Psi:
    """Build 亞(sub, arg)."""
    return Psi(sub, arg)


def addends_of(t: Term) -> Tuple[Psi, ...]:
    """The addends of t as a tuple (empty for 0, a singleton for a principal term)."""
    if isinstance(t, Zero):
        return ()
    if isinstance(t, Sum):
        return t.addends
    return (t,)


def sanitize_plus(addends: Iterable[Psi]) -> Term:
    """Wrap already-flattened addends, collapsing the empty and singleton cases."""
    addends = tuple(addends)
    if not addends:
        return ZERO
    if len(addends) == 1:
        return addends[0]
    return Sum(addends)


def plus(a: Term, b: Term) -> Term:
    """a + b in canonical form: zeros dropped, nested sums flattened."""
    if isinstance(a, Zero):
        return b
    if isinstance(b, Zero):
        return a
    return Sum(addends_of(a) + addends_of(b))


def equal(s: Term, t: Term) -> bool:
    """Structural equality of two terms."""
    return s == t


def numeral(n: int) -> Term:
    """The numeral n = 1 + 1 + ... + 1 (n copies of 亞(0,0))."""
    if n < 0:
        raise ValueError(f"Numerals must be non-negative, got {n}")
    return sanitize_plus((ONE,) * n)


def numeral_value(t: Term) -> Optional[int]:
    """Read t as a natural number, or None when t is not a numeral."""
    if isinstance(t, Zero):
        return 0
    if all(a == ONE for a in addends_of(t)):
        return len(addends_of(t))
    return None


def is_numeral(t: Term) -> bool:
    return numeral_value(t) is not None
