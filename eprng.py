"""
eprng: address-derived pseudo-random buffers and their distributions

Two small pieces that are used together:

  Generator:
    - fill_bytes(buf, offset): byte at position i is the number of zero bits
      in the 64-bit word (offset + i)
    - fill_digit_chars(buf, offset, radix): same zero count, reduced modulo
      radix and written as a digit character ('0'-'9', 'a'-'z')
    - gen_bytes / gen_digit_chars: allocating variants returning numpy arrays
    - initial_offset(): an address-like starting offset

  Distribution:
    - FrequencyTable: read-only mapping value -> occurrence count, iterated in
      ascending order of the value
    - Extremes: (minimum, maximum) of the counts, None for an empty table
    - HistogramRenderer: summary lines, a 10-row stepped bar chart with one
      column per distinct value, and aligned value/count label rows

Usage:
    import eprng

    buf = eprng.gen_bytes(16384)
    table = eprng.distribution(buf)
    print(table)                      # default renderer

    # Digits in base 16
    chars = eprng.gen_digit_chars(4096, radix=16)
    print(eprng.render(eprng.distribution(chars)))

    # Plain ASCII output
    print(eprng.render(table, **eprng.ASCII_GLYPHS))

    # Tables over partitions of a buffer combine into the whole
    whole = eprng.distribution(buf[:8192]) + eprng.distribution(buf[8192:])
"""

import operator
import warnings
import numpy as np
from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional


# =============================================================================
# GENERATOR
# =============================================================================

WORD_BITS = 64
_WORD_LIMIT = 1 << WORD_BITS
MAX_RADIX = 36
DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_DIGIT_TABLE = np.array(list(DIGITS))

# Any long-lived object works; only its address matters.
_ANCHOR = bytes(1)


def initial_offset() -> int:
    """Return an address-like offset to start a generator from."""
    return id(_ANCHOR)


def _check_offset(offset) -> int:
    offset = operator.index(offset)
    if not 0 <= offset < _WORD_LIMIT:
        raise ValueError(f"offset must be in [0, 2**{WORD_BITS}), got {offset}")
    return offset


def _check_radix(radix) -> int:
    radix = operator.index(radix)
    if not 1 <= radix <= MAX_RADIX:
        raise ValueError(f"radix must be between 1 and {MAX_RADIX}, got {radix}")
    return radix


def _zero_counts(offset: int, n: int) -> np.ndarray:
    """Number of zero bits in each 64-bit word offset, offset+1, ..., offset+n-1."""
    if offset + n > _WORD_LIMIT:
        warnings.warn(
            f"positions past 2**{WORD_BITS} wrap around (offset={offset}, n={n})",
            RuntimeWarning,
            stacklevel=3,
        )
    positions = np.uint64(offset) + np.arange(n, dtype=np.uint64)
    return np.uint8(WORD_BITS) - np.bitwise_count(positions)


def fill_bytes(buf, offset):
    """
    Fill a writable byte buffer in place.

    Parameters
    ----------
    buf : np.ndarray (1-D) or writable bytes-like object (bytearray, memoryview)
    offset : int in [0, 2**64)

    Returns
    -------
    buf, for chaining
    """
    offset = _check_offset(offset)
    view = buf if isinstance(buf, np.ndarray) else np.frombuffer(buf, dtype=np.uint8)
    if view.ndim != 1:
        raise ValueError(f"buffer must be one-dimensional, got shape {view.shape}")
    view[...] = _zero_counts(offset, len(view))
    return buf


def fill_digit_chars(buf, offset, radix=10):
    """
    Fill a writable sequence of characters in place with digits of the given radix.

    Parameters
    ----------
    buf : list, or 1-D numpy unicode array
    offset : int in [0, 2**64)
    radix : int in [1, 36]

    Returns
    -------
    buf, for chaining
    """
    radix = _check_radix(radix)
    offset = _check_offset(offset)
    digits = _DIGIT_TABLE[_zero_counts(offset, len(buf)) % radix]
    if isinstance(buf, np.ndarray):
        buf[...] = digits
    else:
        buf[:] = digits.tolist()
    return buf


def gen_bytes(size: int, offset: Optional[int] = None) -> np.ndarray:
    """Return a new uint8 array of `size` generated bytes."""
    if offset is None:
        offset = initial_offset()
    return fill_bytes(np.zeros(size, dtype=np.uint8), offset)


def gen_digit_chars(size: int, offset: Optional[int] = None, radix: int = 10) -> np.ndarray:
    """Return a new array of `size` single-character digit strings."""
    if offset is None:
        offset = initial_offset()
    return fill_digit_chars(np.full(size, "0", dtype="<U1"), offset, radix)


# =============================================================================
# FREQUENCY TABLE
# =============================================================================

@dataclass(frozen=True)
class Extremes:
    """Smallest and largest occurrence count in a table."""
    minimum: int
    maximum: int


@dataclass(frozen=True)
class Column:
    """One distinct value as laid out in a rendered histogram."""
    key: Any
    count: int
    key_text: str
    count_text: str
    width: int

    @classmethod
    def for_entry(cls, key, count: int) -> "Column":
        key_text = str(key)
        count_text = str(count)
        return cls(key, count, key_text, count_text,
                   max(len(key_text), len(count_text)))


class FrequencyTable(Mapping):
    """
    Read-only mapping from each distinct value to its number of occurrences.

    Iteration is always in ascending order of the values, whatever order the
    counts were supplied in.

    Usage:
        table = FrequencyTable.from_values([1, 1, 2, 3, 3, 3])
        table[3]            # 3
        list(table)         # [1, 2, 3]
        table.extremes()    # Extremes(minimum=1, maximum=3)
    """

    def __init__(self, counts: Optional[Mapping] = None):
        counts = counts or {}
        for key, count in counts.items():
            if operator.index(count) < 0:
                raise ValueError(f"count for {key!r} must be non-negative, got {count}")
        self._counts: Dict[Any, int] = {k: int(counts[k]) for k in sorted(counts)}

    @classmethod
    def from_values(cls, values: Iterable) -> "FrequencyTable":
        """Count every value of a one-dimensional array or any iterable.

        Arrays are counted with np.unique. Other iterables are counted as
        the Python objects they hold, so strings keep trailing NULs, ints
        stay ints next to floats, and tuples are single values.
        """
        if not isinstance(values, np.ndarray):
            return cls(Counter(values))
        if values.ndim != 1:
            raise ValueError(f"values must be one-dimensional, got shape {values.shape}")
        table = cls()
        if values.size == 0:
            return table
        # np.unique sorts, so keys come back ascending.
        keys, counts = np.unique(values, return_counts=True)
        table._counts = dict(zip(keys.tolist(), counts.tolist()))
        return table

    def __getitem__(self, key):
        return self._counts[key]

    def __iter__(self):
        return iter(self._counts)

    def __len__(self):
        return len(self._counts)

    def __repr__(self):
        return f"{type(self).__name__}({self._counts!r})"

    def __str__(self):
        return HistogramRenderer().render(self)

    def __add__(self, other):
        if not isinstance(other, FrequencyTable):
            return NotImplemented
        return self.merge(other)

    @property
    def total(self) -> int:
        """Number of values the table was built from."""
        return sum(self._counts.values())

    def extremes(self) -> Optional[Extremes]:
        """Minimum and maximum count, or None when the table is empty."""
        if not self._counts:
            return None
        counts = self._counts.values()
        return Extremes(min(counts), max(counts))

    def columns(self) -> List[Column]:
        """One Column per entry, in key order."""
        return [Column.for_entry(k, v) for k, v in self._counts.items()]

    def merge(self, other: Mapping) -> "FrequencyTable":
        """New table with the counts of both; matching keys are summed."""
        merged = dict(self._counts)
        for key, count in other.items():
            merged[key] = merged.get(key, 0) + count
        return FrequencyTable(merged)


# =============================================================================
# HISTOGRAM RENDERING
# =============================================================================

ROWS = 10
FULL_GLYPH = "█"   # full block
HALF_GLYPH = "▄"   # lower half block
EMPTY_GLYPH = " "
ASCII_GLYPHS = {"full": "#", "half": "."}

EMPTY, HALF, FULL = 0, 1, 2


class HistogramRenderer:
    """
    Renders a FrequencyTable as text.

    Row i (9 at the top, 0 at the bottom) covers the band from i*10 % to
    i*10+5 % of the largest count. A column reaching the upper edge of the
    band gets full glyphs, one reaching only the lower edge gets half glyphs.

    Parameters
    ----------
    full, half, empty : str
        Single characters used to fill a bar cell.
    empty_label : str
        Printed in the summary lines when the table has no entries.
    separator : str
        Placed between adjacent columns in every bar and label row.
    """

    def __init__(self, full=FULL_GLYPH, half=HALF_GLYPH, empty=EMPTY_GLYPH,
                 empty_label="none", separator=" "):
        for name, glyph in (("full", full), ("half", half), ("empty", empty)):
            if not isinstance(glyph, str) or len(glyph) != 1:
                raise ValueError(f"{name} glyph must be a single character, got {glyph!r}")
        if not isinstance(separator, str) or "\n" in separator:
            raise ValueError(f"separator must be a string without newlines, got {separator!r}")
        self.glyphs = {FULL: full, HALF: half, EMPTY: empty}
        self.empty_label = empty_label
        self.separator = separator

    @staticmethod
    def level(count: int, maximum: int, row: int) -> int:
        """FULL, HALF or EMPTY for a count in the given row.

        Thresholds are maximum/100 * (row*10 + 5) and maximum/100 * row*10,
        compared exactly so that counts on a boundary always reach it.
        """
        if 100 * count >= maximum * (row * 10 + 5):
            return FULL
        if 100 * count >= maximum * row * 10:
            return HALF
        return EMPTY

    def summary_lines(self, extremes: Optional[Extremes]) -> List[str]:
        if extremes is None:
            lo = hi = self.empty_label
        else:
            lo, hi = extremes.minimum, extremes.maximum
        return [f"Minimum Value: {lo}", f"Maximum Value: {hi}"]

    def bar_rows(self, columns: List[Column], maximum: int) -> List[str]:
        rows = []
        for i in reversed(range(ROWS)):
            cells = [self.glyphs[self.level(c.count, maximum, i)] * c.width
                     for c in columns]
            rows.append(self.separator.join(cells))
        return rows

    def label_rows(self, columns: List[Column]) -> List[str]:
        keys = self.separator.join(c.key_text.ljust(c.width) for c in columns)
        counts = self.separator.join(c.count_text.ljust(c.width) for c in columns)
        return [keys, counts]

    def render(self, table: FrequencyTable) -> str:
        extremes = table.extremes()
        columns = table.columns()
        lines = self.summary_lines(extremes)
        lines.append("")
        lines.extend(self.bar_rows(columns, extremes.maximum if extremes else 0))
        lines.extend(self.label_rows(columns))
        return "".join(line + "\n" for line in lines)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def distribution(values: Iterable) -> FrequencyTable:
    """Frequency table of a sequence of values."""
    return FrequencyTable.from_values(values)


def extremes(table: FrequencyTable) -> Optional[Extremes]:
    """Minimum and maximum count of a table, None when it is empty."""
    return table.extremes()


def render(table: FrequencyTable, **options) -> str:
    """Render with a HistogramRenderer built from `options`."""
    return HistogramRenderer(**options).render(table)


# =============================================================================
# DEMO
# =============================================================================

if __name__ == "__main__":
    print("=" * 70)
    print("EPRNG - DEMO")
    print("=" * 70)

    offset = initial_offset()
    print(f"\nInitial offset: {offset:#x}")

    print("\n--- Bytes (16384) ---")
    print(distribution(gen_bytes(16384, offset)))

    print("--- Digits, base 10 (16384) ---")
    print(distribution(gen_digit_chars(16384, offset, radix=10)))

    print("--- Digits, base 16 (4096), ASCII ---")
    print(render(distribution(gen_digit_chars(4096, offset, radix=16)), **ASCII_GLYPHS))
