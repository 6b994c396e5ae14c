"""
Domino code definitions: the bit layout of a tile and the set of legal codes.

A code is a 16-bit value split into two 8-pip columns (bits 0-7 and 8-15).
Bit 0 and bit 7 of each column are frame pips and are always set. The
remaining 12 payload bits must have exactly 6 set, and column 0 read
backwards must not equal column 1.
"""
from typing import Iterable, List, Optional, Sequence, Tuple
import random
import threading

PIPS_PER_COLUMN = 8
COLUMNS_PER_TILE = 2

COLUMN_MASK = 0xFF
CODE_MASK = 0xFFFF
FRAME_BITS = 0b10000001                 # Frame pips within one column
FRAME_MASK = 0b10000001_10000001        # Frame pips in both columns
PAYLOAD_MASK = ~FRAME_MASK & CODE_MASK  # Everything that carries data
PAYLOAD_BITS = 12
PAYLOAD_PIPS_SET = 6


class InsufficientCapacityError(ValueError):
    """Raised when more unique codes are requested than exist."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Requested {requested} unique dominoes, but only {available} valid dominoes exist."
        )


def _build_reverse_table() -> Tuple[int, ...]:
    table = []
    for i in range(256):
        v, r = i, 0
        for _ in range(8):
            r = (r << 1) | (v & 1)
            v >>= 1
        table.append(r)
    return tuple(table)


REVERSE8: Tuple[int, ...] = _build_reverse_table()


def column_bits(code: int, column: int) -> int:
    """Return the 8 pip bits of one column."""
    return (code >> (column * PIPS_PER_COLUMN)) & COLUMN_MASK


def rotate_180(code: int) -> int:
    """The code as read with the tile turned end over end."""
    col0 = column_bits(code, 0)
    col1 = column_bits(code, 1)
    return (REVERSE8[col1] << 8) | REVERSE8[col0]


def is_valid_code(code: int) -> bool:
    """Check a value against all three legality rules."""
    if code & ~CODE_MASK:
        return False
    if code & FRAME_MASK != FRAME_MASK:
        return False
    if bin(code & PAYLOAD_MASK).count('1') != PAYLOAD_PIPS_SET:
        return False
    return REVERSE8[column_bits(code, 0)] != column_bits(code, 1)


def enumerate_valid_codes() -> List[int]:
    """
    Build the ordered list of legal codes.

    Only the 12 payload bits are walked; of their 4096 combinations the
    C(12,6) = 924 with six pips set are assembled into full codes, and the
    ones that read the same from either end are dropped.
    """
    seen = set()
    codes: List[int] = []

    for payload in range(1 << PAYLOAD_BITS):
        if bin(payload).count('1') != PAYLOAD_PIPS_SET:
            continue

        # Payload bits 0-5 -> column 0 bits 1-6, bits 6-11 -> column 1 bits 1-6
        col0 = ((payload & 0x3F) << 1) | FRAME_BITS
        col1 = (((payload >> 6) & 0x3F) << 1) | FRAME_BITS
        code = col0 | (col1 << 8)

        if REVERSE8[col0] == col1:
            continue

        if code not in seen:
            seen.add(code)
            codes.append(code)

    return codes


def find_symmetric_codes(codes: Iterable[int]) -> List[int]:
    """Codes that look identical after a 180 degree turn."""
    return [code for code in codes if rotate_180(code) == code]


def format_code(code: int) -> str:
    """One-line diagnostic rendering of a code."""
    return (f"{code:04X} {code:016b} "
            f"col0={column_bits(code, 0):08b} col1={column_bits(code, 1):08b} "
            f"rotated={rotate_180(code):016b}")


def sample_unique(count: int, codes: Sequence[int], rng=None) -> List[int]:
    """
    Draw `count` distinct codes in uniformly random order.

    Partial Fisher-Yates: only the first `count` slots of a working copy are
    shuffled. `rng` only needs a `randrange(start, stop)` method.
    """
    if count < 0:
        raise ValueError(f"Cannot select a negative number of dominoes ({count})")
    if rng is None:
        rng = random

    available = list(codes)
    if count > len(available):
        raise InsufficientCapacityError(count, len(available))

    result = []
    for i in range(count):
        j = rng.randrange(i, len(available))
        result.append(available[j])
        available[j] = available[i]
    return result


def sample_repeating(count: int, codes: Sequence[int], rng=None) -> List[int]:
    """
    Draw `count` codes, unique within each pass over the set.

    Once every code has been used a fresh pass begins, so repeats only
    appear when `count` exceeds the set size.
    """
    if count < 0:
        raise ValueError(f"Cannot select a negative number of dominoes ({count})")
    if count and not codes:
        raise InsufficientCapacityError(count, 0)

    result: List[int] = []
    while len(result) < count:
        take = min(count - len(result), len(codes))
        result.extend(sample_unique(take, codes, rng))
    return result


class ValidCodeSet:
    """
    Owner of the enumerated codes.

    The list is built on first access and never changes afterwards, so
    readers share it without copying.
    """

    _default: Optional['ValidCodeSet'] = None
    _default_lock = threading.Lock()

    def __init__(self):
        self._codes: Optional[Tuple[int, ...]] = None
        self._lock = threading.Lock()

    @classmethod
    def default(cls) -> 'ValidCodeSet':
        """Process-wide instance for callers that don't build their own."""
        if cls._default is None:
            with cls._default_lock:
                if cls._default is None:
                    cls._default = cls()
        return cls._default

    @property
    def codes(self) -> Tuple[int, ...]:
        if self._codes is None:
            with self._lock:
                if self._codes is None:
                    self._codes = tuple(enumerate_valid_codes())
        return self._codes

    def sample(self, count: int, rng=None) -> List[int]:
        return sample_unique(count, self.codes, rng)

    def __len__(self):
        return len(self.codes)

    def __iter__(self):
        return iter(self.codes)

    def __contains__(self, code):
        return code in self.codes

    def __getitem__(self, index):
        return self.codes[index]

    def __repr__(self):
        state = f"{len(self._codes)} codes" if self._codes is not None else "not built"
        return f"ValidCodeSet({state})"


if __name__ == "__main__":
    code_set = ValidCodeSet()
    print(f"Total valid dominoes: {len(code_set)}")
    print(f"Symmetric dominoes found: {len(find_symmetric_codes(code_set))}")
    print()
    for i, code in enumerate(code_set.codes[:10]):
        print(f"{i + 1:2}. {format_code(code)}")
