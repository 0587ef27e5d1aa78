#!/usr/bin/env python3
"""
亞 Function Calculator Demo

Walks through the features of the package:
1. Reading terms from text
2. The ordinal order on terms
3. Degrees (dom)
4. Fundamental sequences (x[y])
5. Display options and abbreviations
6. Hydra pictures
7. The calculator boundary and its error messages
"""

import sys
sys.path.insert(0, '.')

print("""
╔══════════════════════════════════════════════════════════════════════════════╗
║                                                                              ║
║                 亞   Old Subspecies Function Calculator                     ║
║                                                                              ║
║          terms 0, a+b, 亞(a,b)   ·   1 = 亞(0,0)   ω = 亞(0,1)   Ω = 亞(1,0)   ║
║                                                                              ║
╚══════════════════════════════════════════════════════════════════════════════╝
""")

# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 1: PARSING
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 1: READING TERMS")
print("═" * 80)

from subspecies import parse_term, TermSyntaxError, RenderOptions, render

plain = RenderOptions()
short = RenderOptions.abbreviated()

inputs = ["A(0,0)", "1+1+1", "w", "W", "A_{w}(W+1)", "亞(0,Ω)", "A_2(0)"]

print("\n  Input text and the term it denotes:")
print("  " + "-" * 60)
for text in inputs:
    term = parse_term(text)
    print(f"  {text:14} -> {term!r}")

print("\n  Malformed input is rejected:")
print("  " + "-" * 60)
for text in ["亞(0", "A(0,0))", "A(0,x)"]:
    try:
        parse_term(text)
    except TermSyntaxError as e:
        print(f"  {text:14} -> {e}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 2: ORDER
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 2: THE ORDER ON TERMS")
print("═" * 80)

from subspecies import less_than

pairs = [("0", "1"), ("3", "w"), ("w+w", "A(0,2)"), ("w", "W"), ("A(0,W)", "A(1,1)")]
for a, b in pairs:
    result = "✓" if less_than(parse_term(a), parse_term(b)) else "✗"
    print(f"  {result} {a} < {b}")

terms = [parse_term(t) for t in ["W", "w+1", "0", "A(0,W)", "3", "w"]]
print("\n  Sorted: " + ", ".join(render(t, short) for t in sorted(terms)))


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 3: DEGREES
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 3: DEGREES")
print("═" * 80)

from subspecies import dom

for text in ["0", "5", "w+1", "A(0,w)", "W", "A(W,0)", "A_2(0)"]:
    print(f"  dom({text}) = {render(dom(parse_term(text)), short)}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 4: FUNDAMENTAL SEQUENCES
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 4: FUNDAMENTAL SEQUENCES")
print("═" * 80)

from subspecies import fund_sequence

for text in ["w", "A(0,2)", "A(0,w)", "A(W,0)", "A(0,W)", "A(1,1)"]:
    x = parse_term(text)
    seq = ", ".join(render(t, short) for t in fund_sequence(x, 4))
    print(f"  {text:8} [0..3] = {seq}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 5: DISPLAY OPTIONS
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 5: DISPLAY OPTIONS")
print("═" * 80)

from subspecies import term_to_string, format_output

x = parse_term("A_{w}(W+2)")
option_sets = [
    ("two-argument", plain),
    ("subscript", RenderOptions(use_subscript_form=True)),
    ("all braces", RenderOptions(use_subscript_form=True, always_brace_subscript=True)),
    ("ω and Ω", RenderOptions(show_omega_abbrev=True, show_omega_upper_abbrev=True)),
    ("abbreviated", short),
    ("TeX", RenderOptions(use_subscript_form=True, show_omega_abbrev=True,
                          show_omega_upper_abbrev=True, render_as_tex=True)),
]
print(f"\n  Full form: {term_to_string(x, plain)}\n")
for name, options in option_sets:
    print(f"  {name:14} {format_output(x, options)}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 6: HYDRAS
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 6: HYDRAS")
print("═" * 80)

from subspecies import HydraLayout, HYDRA_UNAVAILABLE

for text in ["A_1(A(0,1)+1)", "A(w,0)"]:
    layout = HydraLayout.from_term(parse_term(text))
    print(f"\n  {text}:")
    if layout is None:
        print(f"  {HYDRA_UNAVAILABLE}")
        continue
    for line in layout.describe().splitlines():
        print("    " + line)
    print(f"  canvas {layout.width:.0f} x {layout.height:.0f}, edges {layout.edges()}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 7: CALCULATOR
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 7: CALCULATOR")
print("═" * 80)

from subspecies import Calculator, Operation

calculator = Calculator(short)
requests = [
    (Operation.FUND, "A(0,W)", "3"),
    (Operation.DOM, "A_w(0)", None),
    (Operation.LESS_THAN, "A(0,W)", "W"),
    (Operation.FUND, "w", None),
    (Operation.DOM, "A(0,", None),
]
for operation, a, b in requests:
    result = calculator.compute(operation, a, b)
    print(f"  {operation.value:10} A={a!r:12} B={b!r:6} {result}")

print("\n  Run `subspecies` for an interactive session.\n")
