"""
Parser for 亞 Term Text

Accepted syntax:
  亞(a,b)          the principal term with subscript a and argument b
  亞_{a}(b)        the same term in subscript form; _ { } are optional, so
                   亞_a(b), 亞{a}(b) and 亞a(b) also work when a is unbraced
  亞(b)            shorthand for 亞(0,b)
  a+b+...          sums
  0, 1, 2, ...     numerals, n = 亞(0,0)+...+亞(0,0) (n copies)
  ω / w            亞(0,1)
  Ω / W            亞(1,0)

The head 亞 may be typed as A. Whitespace is ignored.
"""

from __future__ import annotations
from functools import reduce

from lark import Lark, v_args
from lark.visitors import Transformer_NonRecursive
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedToken

from .terms import Term, ZERO, OMEGA, LOMEGA, psi, plus, numeral
from .errors import TermSyntaxError


GRAMMAR = r"""
    start: sum

    sum: _addend ("+" _addend)*

    _addend: numeral
           | omega
           | lomega
           | atom

    numeral: NUMBER
    omega: OMEGA
    lomega: LOMEGA

    atom: HEAD "(" sum ")"                  -> atom_arg
        | HEAD "(" sum "," sum ")"          -> atom_pair
        | HEAD subscript "(" sum ")"        -> atom_sub

    subscript: "_"? "{" sum "}"
             | "_"? sum

    HEAD: "亞" | "A"
    OMEGA: "ω" | "w"
    LOMEGA: "Ω" | "W"
    NUMBER: /[0-9]+/

    %import common.WS
    %ignore WS
"""

term_parser = Lark(GRAMMAR, parser="lalr")


@v_args(inline=True)
class TermBuilder(Transformer_NonRecursive):
    """Builds canonical terms bottom-up from the parse tree, without recursion."""

    def start(self, term):
        return term

    def sum(self, *addends):
        return reduce(plus, addends, ZERO)

    def numeral(self, tok):
        return numeral(int(tok))

    def omega(self, _tok):
        return OMEGA

    def lomega(self, _tok):
        return LOMEGA

    def atom_arg(self, _head, arg):
        return psi(ZERO, arg)

    def atom_pair(self, _head, sub, arg):
        return psi(sub, arg)

    def atom_sub(self, _head, sub, arg):
        return psi(sub, arg)

    def subscript(self, sub):
        return sub


term_builder = TermBuilder()


def parse_term(text: str) -> Term:
    """
    Parse text into a canonical term.

    Raises TermSyntaxError on any malformed input; no partial term is
    ever returned.
    """
    if not text or not text.strip():
        raise TermSyntaxError("Empty input: a term is required", text, 0)

    try:
        tree = term_parser.parse(text)
    except UnexpectedCharacters as e:
        raise TermSyntaxError(
            f"Unexpected character {e.char!r} at column {e.column}", text, e.column
        ) from e
    except UnexpectedToken as e:
        if e.token.type == "$END":
            raise TermSyntaxError("Unexpected end of input", text, len(text)) from e
        raise TermSyntaxError(
            f"Unexpected {str(e.token)!r} at column {e.column}", text, e.column
        ) from e
    except UnexpectedEOF as e:
        raise TermSyntaxError("Unexpected end of input", text, len(text)) from e

    return term_builder.transform(tree)
