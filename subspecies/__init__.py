"""
subspecies: A Calculator for the 亞 (Old Subspecies) Function

The 亞 function is a two-argument ordinal collapsing notation from googology.
Its terms are built from 0, sums and the principal terms 亞(a, b), with the
abbreviations 1 = 亞(0,0), ω = 亞(0,1) and Ω = 亞(1,0).

This package provides:
- Term, Zero, Sum, Psi: immutable canonical terms
- parse_term: read terms from text such as "亞_{ω}(Ω+1)" or "A(0,w)"
- less_than: the ordinal order of the notation
- dom: the degree of a term
- fund: fundamental sequences, x[y]
- term_to_string / abbreviate / render: print terms under RenderOptions
- term_to_hydra / HydraLayout: the hydra picture of a term
- Calculator: parse, compute and render with error reporting

Example usage:
    from subspecies import parse_term, fund, render, RenderOptions

    x = parse_term("A(0,W)")
    for n in range(4):
        print(render(fund(x, parse_term(str(n))), RenderOptions.abbreviated()))
"""

__version__ = "0.1.0"

from .terms import (
    Term,
    Zero,
    Sum,
    Psi,
    ZERO,
    ONE,
    OMEGA,
    LOMEGA,
    HEAD,
    HEAD_ASCII,
    psi,
    plus,
    sanitize_plus,
    equal,
    numeral,
    numeral_value,
    is_numeral,
)

from .errors import (
    TermSyntaxError,
    InvariantViolation,
    MissingOperand,
)

from .parser import parse_term

from .ordering import (
    less_than,
    compare,
    max_term,
)

from .degree import (
    dom,
    is_successor,
    is_limit,
)

from .fundamental import (
    fund,
    fund_sequence,
)

from .rendering import (
    RenderOptions,
    term_to_string,
    abbreviate,
    to_tex,
    render,
    format_output,
)

from .hydra import (
    term_to_hydra,
    HydraLayout,
    HYDRA_UNAVAILABLE,
)

from .calculator import (
    Calculator,
    CalculationResult,
    Operation,
)

__all__ = [
    # Terms
    "Term",
    "Zero",
    "Sum",
    "Psi",
    "ZERO",
    "ONE",
    "OMEGA",
    "LOMEGA",
    "HEAD",
    "HEAD_ASCII",
    "psi",
    "plus",
    "sanitize_plus",
    "equal",
    "numeral",
    "numeral_value",
    "is_numeral",
    # Errors
    "TermSyntaxError",
    "InvariantViolation",
    "MissingOperand",
    # Parsing
    "parse_term",
    # Order, degree, fundamental sequences
    "less_than",
    "compare",
    "max_term",
    "dom",
    "is_successor",
    "is_limit",
    "fund",
    "fund_sequence",
    # Rendering
    "RenderOptions",
    "term_to_string",
    "abbreviate",
    "to_tex",
    "render",
    "format_output",
    # Hydra
    "term_to_hydra",
    "HydraLayout",
    "HYDRA_UNAVAILABLE",
    # Calculator
    "Calculator",
    "CalculationResult",
    "Operation",
]
