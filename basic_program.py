"""
Program store: (line number, text) pairs kept unique and sorted by number.
"""

from typing import List, NamedTuple, Optional, Sequence, Tuple

MAX_LINES = 1000
MAX_LINE_LENGTH = 255


class ProgramLine(NamedTuple):
    number: int
    text: str


def find_line(lines: Sequence[ProgramLine], number) -> Optional[int]:
    """Linear search: index of the line carrying `number`, or None."""
    for i, line in enumerate(lines):
        if line.number == number:
            return i
    return None


class ProgramStore:
    def __init__(self, capacity=MAX_LINES):
        self.capacity = capacity
        self.lines: List[ProgramLine] = []

    def __len__(self):
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)

    def find_index_by_number(self, number) -> Optional[int]:
        return find_line(self.lines, number)

    def upsert(self, number, text):
        self.delete(number)
        if len(self.lines) >= self.capacity:
            return  # full: new line dropped
        self.lines.append(ProgramLine(number, text[:MAX_LINE_LENGTH]))
        self.lines.sort(key=lambda ln: ln.number)

    def delete(self, number):
        idx = self.find_index_by_number(number)
        if idx is not None:
            del self.lines[idx]

    def clear(self):
        self.lines = []

    def snapshot(self) -> Tuple[ProgramLine, ...]:
        return tuple(self.lines)
