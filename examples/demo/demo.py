"""
sl Parsing Demo

Demonstrates the full lifecycle of a line of input:
1. Parse a nested expression
2. Walk the resulting tree
3. Render the canonical form and re-parse it
4. Report a malformed input

Run: pip install -e . && python examples/demo/demo.py
"""

from sl import ParseError, parse_line, render
from sl.nodes import children

print("=== sl Parsing Demo ===\n")

# 1. Parse
src = "(+ 1 (* 2 3))"
node = parse_line(src)
print(f"1. Parsed {src!r}")
print(f"   {node!r}\n")

# 2. Walk
def walk(n, depth=0):
    print("   " + "  " * depth + type(n).__name__)
    for c in children(n):
        walk(c, depth + 1)

print("2. Tree:")
walk(node)
print()

# 3. Render and re-parse
text = render(node)
print(f"3. Canonical form: {text}")
print(f"   Re-parses to the same tree: {parse_line(text) == node}\n")

# 4. Errors
for bad in ['"abc', "(+ 1 2", '"a\\qb"']:
    try:
        parse_line(bad)
    except ParseError as e:
        print(f"4. {bad!r} -> {type(e).__name__}: {e}")
