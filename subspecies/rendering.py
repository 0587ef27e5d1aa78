"""
Rendering 亞 Terms as Text

Rendering happens in two passes:
1. term_to_string() prints the full term tree, choosing between the
   two-argument form 亞(a,b), the subscript form 亞_a(b) and the one-argument
   form 亞(b) according to RenderOptions
2. abbreviate() rewrites the printed text: 1, ω and Ω for the constants,
   decimal numerals for runs of 1+1+...+1, and optionally TeX markup

Options never change the term itself, only how it is printed.
"""

from __future__ import annotations
import re
from dataclasses import dataclass, fields, replace
from typing import List

from .terms import Term, Zero, Sum, HEAD, ONE, OMEGA, LOMEGA


@dataclass(frozen=True)
class RenderOptions:
    """Display settings for terms."""
    show_omega_abbrev: bool = False        # print 亞(0,1) as ω
    show_omega_upper_abbrev: bool = False  # print 亞(1,0) as Ω
    use_subscript_form: bool = False       # print 亞(a,b) as 亞_a(b)
    always_brace_subscript: bool = False   # subscript form: always 亞_{a}(b)
    drop_zero_sub: bool = False            # print 亞(0,b) as 亞(b)
    render_as_tex: bool = False            # emit TeX source

    @classmethod
    def plain(cls) -> RenderOptions:
        """Unabbreviated two-argument output, readable by the parser."""
        return cls()

    @classmethod
    def abbreviated(cls) -> RenderOptions:
        """The shortest output: ω, Ω, subscripts and one-argument terms."""
        return cls(
            show_omega_abbrev=True,
            show_omega_upper_abbrev=True,
            use_subscript_form=True,
            drop_zero_sub=True,
        )

    @classmethod
    def flag_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def toggle(self, name: str) -> RenderOptions:
        """Copy of these options with one flag flipped."""
        if name not in self.flag_names():
            raise ValueError(f"Unknown render option: {name}")
        return replace(self, **{name: not getattr(self, name)})


def _subscript(t: Term, options: RenderOptions) -> str:
    """The subscript part of 亞_a(b), braced unless it is short."""
    text = term_to_string(t, options)
    if options.always_brace_subscript or options.render_as_tex:
        return "{" + text + "}"
    if isinstance(t, Zero):
        return "0"
    if isinstance(t, Sum):
        if all(a == ONE for a in t.addends):
            return text
        return "{" + text + "}"
    if t == ONE or (options.show_omega_abbrev and t == OMEGA) or \
            (options.show_omega_upper_abbrev and t == LOMEGA):
        return text
    return "{" + text + "}"


def term_to_string(t: Term, options: RenderOptions = RenderOptions()) -> str:
    """Print t without abbreviations."""
    if isinstance(t, Zero):
        return "0"
    if isinstance(t, Sum):
        return "+".join(term_to_string(a, options) for a in t.addends)

    arg = term_to_string(t.arg, options)
    if options.drop_zero_sub and isinstance(t.sub, Zero):
        return f"{HEAD}({arg})"
    if options.use_subscript_form:
        return f"{HEAD}_{_subscript(t.sub, options)}({arg})"
    return f"{HEAD}({term_to_string(t.sub, options)},{arg})"


# Literal rewrites, applied in order
ONE_PATTERNS = [f"{HEAD}(0)", f"{HEAD}_{{0}}(0)", f"{HEAD}_0(0)", f"{HEAD}(0,0)"]
OMEGA_PATTERNS = [f"{HEAD}(1)", f"{HEAD}_{{0}}(1)", f"{HEAD}_0(1)", f"{HEAD}(0,1)"]
LOMEGA_PATTERNS = [f"{HEAD}_{{1}}(0)", f"{HEAD}_1(0)", f"{HEAD}(1,0)"]

NUMERAL_RUN = re.compile(r"1(\+1)+")


def to_tex(text: str) -> str:
    """Turn abbreviated output into TeX source."""
    text = text.replace(HEAD, "\\textrm{" + HEAD + "}")
    text = text.replace("ω", "\\omega")
    text = text.replace("Ω", "\\Omega")
    return text


def abbreviate(text: str, options: RenderOptions = RenderOptions()) -> str:
    """Shorten printed output: constants first, then numerals."""
    for pattern in ONE_PATTERNS:
        text = text.replace(pattern, "1")
    if options.show_omega_abbrev:
        for pattern in OMEGA_PATTERNS:
            text = text.replace(pattern, "ω")
    if options.show_omega_upper_abbrev:
        for pattern in LOMEGA_PATTERNS:
            text = text.replace(pattern, "Ω")
    if options.render_as_tex:
        text = to_tex(text)

    while True:
        match = NUMERAL_RUN.search(text)
        if match is None:
            break
        run = match.group(0)
        text = text.replace(run, str(run.count("1")), 1)
    return text


def render(t: Term, options: RenderOptions = RenderOptions()) -> str:
    """Print and abbreviate t."""
    return abbreviate(term_to_string(t, options), options)


def format_output(t: Term, options: RenderOptions = RenderOptions()) -> str:
    """render(), wrapped in $...$ when TeX output is requested."""
    text = render(t, options)
    if options.render_as_tex:
        return f"${text}$"
    return text
