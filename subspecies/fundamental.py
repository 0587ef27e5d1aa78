"""
Fundamental Sequences of 亞 Terms

fund(x, y) computes x[y], the y-th element of the fundamental sequence of x.
The case split follows the degrees of the subscript and argument of x:

    dom(arg)   dom(sub)       x[y]
    --------   --------       ----
    0          0              0
    0          1              y
    0          other          亞(sub[y], arg)
    1          -              x[y[0]] + 亞(sub, arg[0])   if y is a successor, else 0
    ω          -              亞(sub, arg[y])
    亞(c, _)   -              亞(sub, arg[亞(c[0], γ)])   γ from x[y[0]], or 0

Recursion depth grows with the size of the terms involved. There is no depth
guard: very deep terms surface Python's RecursionError to the caller.
"""

from __future__ import annotations
from typing import List

from .terms import Term, Zero, Psi, Sum, ZERO, ONE, OMEGA, psi, plus, sanitize_plus, numeral
from .degree import dom
from .errors import InvariantViolation


def fund(x: Term, y: Term) -> Term:
    """x[y]."""
    if isinstance(x, Zero):
        return ZERO

    if isinstance(x, Sum):
        # Only the last addend moves
        last = fund(x.addends[-1], y)
        remains = sanitize_plus(x.addends[:-1])
        return plus(remains, last)

    sub, arg = x.sub, x.arg
    dom_sub = dom(sub)
    dom_arg = dom(arg)

    if dom_arg == ZERO:
        if dom_sub == ZERO:
            return ZERO
        if dom_sub == ONE:
            return y
        return psi(fund(sub, y), arg)

    if dom_arg == ONE:
        if dom(y) == ONE:
            return plus(fund(x, fund(y, ZERO)), psi(sub, fund(arg, ZERO)))
        return ZERO

    if dom_arg == OMEGA:
        return psi(sub, fund(arg, y))

    if not isinstance(dom_arg, Psi):
        raise InvariantViolation(f"dom({arg!r}) = {dom_arg!r} is not a principal term")
    c = dom_arg.sub
    if dom(y) == ONE:
        prev = fund(y, ZERO)
        p = fund(x, prev)
        if not isinstance(p, Psi):
            raise InvariantViolation(f"{x!r}[{prev!r}] = {p!r} is not a principal term")
        gamma = p.arg
        return psi(sub, fund(arg, psi(fund(c, ZERO), gamma)))
    return psi(sub, fund(arg, psi(fund(c, ZERO), ZERO)))


def fund_sequence(x: Term, length: int, start: int = 0) -> List[Term]:
    """The terms x[start], x[start + 1], ..., indexed by numerals."""
    return [fund(x, numeral(n)) for n in range(start, start + length)]


if __name__ == "__main__":
    from .terms import LOMEGA

    print("=== Fundamental sequences ===\n")
    for name, x in [("ω", OMEGA), ("亞(0,2)", psi(ZERO, numeral(2))), ("亞(0,Ω)", psi(ZERO, LOMEGA))]:
        print(f"{name}:")
        for n, term in enumerate(fund_sequence(x, 4)):
            print(f"   [{n}] = {term!r}")
