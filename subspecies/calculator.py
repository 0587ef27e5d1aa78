"""
亞 Function Calculator

The user-facing boundary of the package:
1. Parses the operands A and B
2. Runs one of fund (A[B]), dom (dom(A)) or less_than (A < B)
3. Renders the result with the current RenderOptions

Every failure (bad syntax, a missing operand, an internal inconsistency or
a term too deep to evaluate) is turned into a readable message on the
CalculationResult; nothing is replaced by a default value.

Run `subspecies` for an interactive session, or e.g.
`subspecies fund "A(0,w)" 3` for a single computation.
"""

from __future__ import annotations
import argparse
import logging
import sys
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from .terms import Term
from .parser import parse_term
from .ordering import less_than
from .degree import dom
from .fundamental import fund
from .rendering import RenderOptions, format_output
from .hydra import HydraLayout, HYDRA_UNAVAILABLE
from .errors import TermSyntaxError, InvariantViolation, MissingOperand


logger = logging.getLogger(__name__)

TOO_DEEP = "The term is too deeply nested to evaluate"


class Operation(Enum):
    """The three computations offered by the calculator."""
    FUND = "fund"            # A[B]
    DOM = "dom"              # dom(A)
    LESS_THAN = "less_than"  # A < B

    @property
    def needs_b(self) -> bool:
        return self is not Operation.DOM


@dataclass
class CalculationResult:
    """Outcome of a single computation."""
    operation: Operation
    output: str = ""
    term: Optional[Term] = None       # result of FUND / DOM
    truth: Optional[bool] = None      # result of LESS_THAN
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __str__(self) -> str:
        if self.error is not None:
            return f"Error: {self.error}"
        return f"Output: {self.output}"


class Calculator:
    """Evaluates operations on term text and renders the results."""

    def __init__(self, options: Optional[RenderOptions] = None):
        self.options = options or RenderOptions()

    def evaluate(
        self,
        operation: Operation,
        input_a: str,
        input_b: Optional[str] = None,
    ) -> Union[Term, bool]:
        """
        Run an operation and return its raw value (a Term or a bool).

        Raises TermSyntaxError, MissingOperand or InvariantViolation.
        """
        x = parse_term(input_a)
        y = parse_term(input_b) if input_b else None
        if operation.needs_b and y is None:
            raise MissingOperand(f"{operation.value} needs a second term B")

        if operation is Operation.FUND:
            return fund(x, y)
        if operation is Operation.DOM:
            return dom(x)
        return less_than(x, y)

    def compute(
        self,
        operation: Operation,
        input_a: str,
        input_b: Optional[str] = None,
    ) -> CalculationResult:
        """Run an operation, reporting failures on the result instead of raising."""
        logger.debug("compute %s: A=%r B=%r", operation.value, input_a, input_b)
        try:
            value = self.evaluate(operation, input_a, input_b)
            if operation is Operation.LESS_THAN:
                return CalculationResult(
                    operation=operation,
                    output="true" if value else "false",
                    truth=value,
                )
            return CalculationResult(
                operation=operation,
                output=format_output(value, self.options),
                term=value,
            )
        except (TermSyntaxError, MissingOperand, InvariantViolation) as e:
            logger.info("%s failed: %s", operation.value, e)
            return CalculationResult(operation=operation, error=str(e))
        except RecursionError:
            # raised while evaluating or while rendering a deep result
            logger.warning("%s exceeded the recursion limit", operation.value)
            return CalculationResult(operation=operation, error=TOO_DEEP)

    def hydra(self, text: str) -> str:
        """Text outline of the hydra of a term, or the fallback message."""
        term = parse_term(text)
        try:
            layout = HydraLayout.from_term(term)
        except RecursionError:
            logger.warning("hydra exceeded the recursion limit")
            return TOO_DEEP
        if layout is None:
            return HYDRA_UNAVAILABLE
        return layout.describe()

    def set_option(self, name: str):
        self.options = self.options.toggle(name)
        logger.debug("options: %s", self.options)

    def repl_loop(self):
        """Run the interactive command loop on stdin."""
        print("亞 function calculator")
        print("Type 'help' for commands")

        while True:
            try:
                line = input("> ").strip()
            except EOFError:
                break

            if not line:
                continue

            cmd, _, rest = line.partition(" ")
            input_a, _, input_b = rest.partition(";")
            input_a, input_b = input_a.strip(), input_b.strip()

            if cmd in ("quit", "exit"):
                break

            elif cmd == "help":
                print(REPL_HELP)

            elif cmd in COMMANDS:
                print(self.compute(COMMANDS[cmd], input_a, input_b or None))

            elif cmd == "hydra":
                try:
                    print(self.hydra(input_a))
                except TermSyntaxError as e:
                    print(f"Error: {e}")

            elif cmd == "set":
                try:
                    self.set_option(input_a)
                except ValueError as e:
                    print(f"Error: {e}")
                    continue
                print(f"{input_a} = {getattr(self.options, input_a)}")

            elif cmd == "options":
                for name in RenderOptions.flag_names():
                    print(f"  {name:25} {getattr(self.options, name)}")

            else:
                print(f"Unknown command: {cmd}")


COMMANDS = {
    "fund": Operation.FUND,
    "dom": Operation.DOM,
    "lt": Operation.LESS_THAN,
    "less_than": Operation.LESS_THAN,
}

REPL_HELP = """\
  fund A ; B      compute A[B]
  dom A           compute dom(A)
  lt A ; B        decide A < B
  hydra A         show A as a hydra
  set NAME        toggle a render option (see 'options')
  options         list render options
  quit            leave

  Terms: 亞(a,b), 亞_{a}(b), 亞(b) = 亞(0,b), sums a+b, numerals,
  ω = 亞(0,1), Ω = 亞(1,0). Type A for 亞, w for ω, W for Ω."""


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="subspecies",
        description="Calculator for the 亞 (Old Subspecies) function",
    )
    parser.add_argument("operation", nargs="?", choices=sorted(COMMANDS) + ["hydra"],
                        help="operation to run; omit for an interactive session")
    parser.add_argument("a", nargs="?", help="term A")
    parser.add_argument("b", nargs="?", help="term B")
    parser.add_argument("--omega", action="store_true", help="print 亞(0,1) as ω")
    parser.add_argument("--big-omega", action="store_true", help="print 亞(1,0) as Ω")
    parser.add_argument("--subscript", action="store_true", help="print 亞(a,b) as 亞_a(b)")
    parser.add_argument("--braces", action="store_true", help="always brace subscripts")
    parser.add_argument("--drop-zero", action="store_true", help="print 亞(0,b) as 亞(b)")
    parser.add_argument("--tex", action="store_true", help="print TeX source")
    parser.add_argument("--verbose", action="store_true", help="log debug output")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    options = RenderOptions(
        show_omega_abbrev=args.omega,
        show_omega_upper_abbrev=args.big_omega,
        use_subscript_form=args.subscript,
        always_brace_subscript=args.braces,
        drop_zero_sub=args.drop_zero,
        render_as_tex=args.tex,
    )
    calculator = Calculator(options)

    if args.operation is None:
        calculator.repl_loop()
        return 0

    if args.a is None:
        print("Error: term A is required", file=sys.stderr)
        return 1

    if args.operation == "hydra":
        try:
            print(calculator.hydra(args.a))
        except TermSyntaxError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    result = calculator.compute(COMMANDS[args.operation], args.a, args.b)
    if not result.ok:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1
    print(result.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
