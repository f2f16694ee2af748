#!/usr/bin/env python3
"""
eprng Quickstart - Run this to verify the module and see example histograms.

Usage:
    pip install -e .
    python quickstart.py
"""

import numpy as np

print("=" * 70)
print("EPRNG - QUICKSTART")
print("=" * 70)

import eprng
from eprng import distribution, render, gen_bytes, gen_digit_chars
print("\n[OK] Module imported successfully")

offset = eprng.initial_offset()
print(f"[OK] Initial offset {offset:#x}")

# Generate test data
print("\n" + "-" * 70)
print("GENERATING TEST DATA")
print("-" * 70)

byte_data = gen_bytes(16384, offset)
print(f"  Bytes:      {len(byte_data)} values, {byte_data.min()}..{byte_data.max()}")

digit_data = gen_digit_chars(16384, offset, radix=10)
print(f"  Digits:     {len(digit_data)} chars (base 10)")

np.random.seed(42)
random_data = np.random.randint(0, 8, 1000, dtype=np.uint8)
print(f"  Random:     {len(random_data)} values in 0..7 (baseline)")

# Distributions
for label, data in [("Bytes", byte_data), ("Digits", digit_data), ("Random", random_data)]:
    print("\n" + "-" * 70)
    print(label.upper())
    print("-" * 70)
    table = distribution(data)
    print(table)
    print(f"  {len(table)} distinct values, {table.total} total")

# Determinism
assert render(distribution(gen_bytes(4096, offset))) == render(distribution(gen_bytes(4096, offset)))
print("\n[OK] Same offset renders the same histogram")

# Edge cases
print("\n" + "-" * 70)
print("EMPTY INPUT (ASCII)")
print("-" * 70)
print(render(distribution([]), **eprng.ASCII_GLYPHS))

try:
    gen_digit_chars(16, offset, radix=40)
except ValueError as e:
    print(f"[OK] Rejected bad radix: {e}")

print("\n" + "=" * 70)
print("Done.")
print("=" * 70)
