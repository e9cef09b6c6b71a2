"""
Variable / array store: one integer and one optional array per letter A-Z.
"""

from typing import Dict, List

LETTERS = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
MAX_ARRAY_SIZE = 65536


def letter_index(ch):
    """'A'..'Z' -> 0..25, anything else -> -1 (only uppercase counts)."""
    if len(ch) == 1 and 'A' <= ch <= 'Z':
        return ord(ch) - ord('A')
    return -1


class VariableStore:
    def __init__(self, max_array_size=MAX_ARRAY_SIZE):
        self.max_array_size = max_array_size
        self.scalars: List[int] = [0] * len(LETTERS)
        # slot -> backing list; a missing key means "not dimensioned"
        self.arrays: Dict[int, List[int]] = {}

    def reset(self):
        self.scalars = [0] * len(LETTERS)
        self.arrays = {}

    # ----- scalars -----
    def get(self, slot):
        return self.scalars[slot]

    def set(self, slot, value):
        self.scalars[slot] = value

    # ----- arrays -----
    def size(self, slot):
        data = self.arrays.get(slot)
        return len(data) if data is not None else 0

    def in_range(self, slot, idx):
        return 0 <= idx < self.size(slot)

    def dim(self, slot, size):
        if not (1 <= size <= self.max_array_size):
            return False
        # fresh storage; the old list is dropped, never reused
        self.arrays[slot] = [0] * size
        return True

    def read(self, slot, idx):
        if self.in_range(slot, idx):
            return self.arrays[slot][idx]
        return 0

    def write(self, slot, idx, value):
        if self.in_range(slot, idx):
            self.arrays[slot][idx] = value
