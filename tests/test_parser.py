"""
Tests for parsing term text.
"""

import pytest

from subspecies.terms import ZERO, ONE, OMEGA, LOMEGA, Sum, psi, plus, numeral
from subspecies.parser import parse_term
from subspecies.rendering import RenderOptions, term_to_string, render
from subspecies.errors import TermSyntaxError


class TestBasicSyntax:
    """Tests for the individual forms of the grammar."""

    def test_one(self):
        assert parse_term("亞(0,0)") == ONE
        assert parse_term("A(0,0)") == ONE

    def test_zero(self):
        assert parse_term("0") == ZERO

    def test_numerals(self):
        assert parse_term("1") == ONE
        assert parse_term("3") == numeral(3)
        assert parse_term("12") == numeral(12)

    def test_sum_of_ones(self):
        t = parse_term("1+1+1")
        assert isinstance(t, Sum)
        assert t.addends == (ONE, ONE, ONE)

    def test_omega_constants(self):
        assert parse_term("ω") == OMEGA
        assert parse_term("w") == OMEGA
        assert parse_term("Ω") == LOMEGA
        assert parse_term("W") == LOMEGA

    def test_one_argument_form(self):
        assert parse_term("A(1)") == OMEGA
        assert parse_term("亞(W)") == psi(ZERO, LOMEGA)

    def test_subscript_forms(self):
        for text in ["A_1(0)", "A_{1}(0)", "A{1}(0)", "A1(0)", "亞_{亞(0,0)}(0)"]:
            assert parse_term(text) == LOMEGA, text

    def test_braced_sum_subscript(self):
        assert parse_term("A_{w+1}(W)") == psi(plus(OMEGA, ONE), LOMEGA)

    def test_unbraced_sum_subscript(self):
        assert parse_term("A_A_0(0)+A_0(0)(0)") == psi(numeral(2), ZERO)

    def test_whitespace_ignored(self):
        assert parse_term("  A ( 0 , w )  ") == psi(ZERO, OMEGA)
        assert parse_term("w + 2") == plus(OMEGA, numeral(2))

    def test_zero_addends_dropped(self):
        assert parse_term("A(0,0)+0") == ONE
        assert parse_term("0+0") == ZERO

    def test_nested(self):
        assert parse_term("A(A(0,1),A(0,w)+1)") == psi(OMEGA, plus(psi(ZERO, OMEGA), ONE))


class TestSyntaxErrors:
    """Malformed input raises TermSyntaxError and nothing else."""

    @pytest.mark.parametrize("text", [
        "亞(0",
        "",
        "   ",
        "A(0,0",
        "A(0,0))",
        "A(0,0,0)",
        "A_{1(0)",
        "A_{1}}(0)",
        "A_1(0,0)",
        "A()",
        "A(0,)",
        "+",
        "1+",
        "x",
        "A_(0)",
    ])
    def test_rejected(self, text):
        with pytest.raises(TermSyntaxError):
            parse_term(text)

    def test_is_a_syntax_error(self):
        with pytest.raises(SyntaxError):
            parse_term("亞(0")

    def test_unterminated_message(self):
        with pytest.raises(TermSyntaxError, match="end of input"):
            parse_term("亞(0")

    def test_unknown_character_location(self):
        with pytest.raises(TermSyntaxError) as exc:
            parse_term("A(0,x)")
        assert exc.value.column == 5
        assert exc.value.text == "A(0,x)"

    def test_trailing_input_location(self):
        with pytest.raises(TermSyntaxError) as exc:
            parse_term("A(0,0))")
        assert exc.value.column == 7


class TestRoundTrip:
    """Unabbreviated output parses back to the same term."""

    @pytest.mark.parametrize("options", [
        RenderOptions(),
        RenderOptions(use_subscript_form=True),
        RenderOptions(use_subscript_form=True, always_brace_subscript=True),
        RenderOptions(drop_zero_sub=True),
        RenderOptions(use_subscript_form=True, drop_zero_sub=True),
    ])
    def test_round_trip(self, sample_terms, options):
        for t in sample_terms:
            text = term_to_string(t, options)
            assert parse_term(text) == t, text

    def test_abbreviated_output(self):
        options = RenderOptions.abbreviated()
        for t in [numeral(3), psi(ZERO, OMEGA), psi(numeral(2), ZERO), plus(LOMEGA, OMEGA)]:
            assert parse_term(render(t, options)) == t


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
