"""
Statement executor.

One statement at a time: classify the leading keyword into a StmtKind, run
the statement against the variable store, and return the index of the next
line to execute (or HALT). Nothing here raises on bad input: a statement
that cannot be understood simply does nothing and falls through.
"""

from enum import Enum

from basic_expr import Cursor, Evaluator
from basic_program import find_line

HALT = -1


class StmtKind(Enum):
    PRINT = 'PRINT'
    LET = 'LET'
    GOTO = 'GOTO'
    IF = 'IF'
    END = 'END'
    DIM = 'DIM'
    UNKNOWN = None


KEYWORDS = ('PRINT', 'LET', 'GOTO', 'IF', 'END', 'DIM')


def classify(text):
    """
    -> (StmtKind, offset just past the keyword).
    Keywords are uppercase only and must be followed by a blank or the end
    of the text, so 'PRINTER' and 'ENDX' are UNKNOWN.
    """
    cur = Cursor(text)
    cur.skip_blanks()
    for kw in KEYWORDS:
        if cur.startswith(kw):
            nxt = cur.peek(len(kw))
            if nxt == '' or nxt in ' \t':
                return StmtKind(kw), cur.pos + len(kw)
    return StmtKind.UNKNOWN, cur.pos


class StatementExecutor:
    def __init__(self, store, output):
        self.store = store
        self.output = output
        self.ev = Evaluator(store)
        self._dispatch = {
            StmtKind.PRINT: self.do_print,
            StmtKind.LET: self.do_let,
            StmtKind.GOTO: self.do_goto,
            StmtKind.IF: self.do_if,
            StmtKind.END: self.do_end,
            StmtKind.DIM: self.do_dim,
        }

    def execute(self, text, index, lines):
        """Run `text` as the statement at position `index` of `lines`."""
        kind, offset = classify(text)
        handler = self._dispatch.get(kind)
        if handler is None:
            return index + 1
        return handler(Cursor(text, offset), index, lines)

    # ----- statements -----
    def do_print(self, cur, index, lines):
        parts = []
        while True:
            cur.skip_blanks()
            if cur.at_end():
                break
            if cur.match('"'):
                start = cur.pos
                while not cur.at_end() and cur.peek() != '"':
                    cur.pos += 1
                parts.append(cur.text[start:cur.pos])
                cur.match('"')
            else:
                parts.append(str(self.ev.expr(cur)))
            cur.skip_blanks()
            if cur.match(','):
                parts.append(' ')
                continue
            break
        self.output(''.join(parts) + '\n')
        return index + 1

    def do_let(self, cur, index, lines):
        slot = cur.variable()
        if slot < 0:
            return index + 1
        cur.skip_blanks()
        if cur.match('('):
            idx = self.ev.subscript(cur)
            self._skip_equals(cur)
            if self.store.in_range(slot, idx):
                self.store.write(slot, idx, self.ev.expr(cur))
        else:
            self._skip_equals(cur)
            self.store.set(slot, self.ev.expr(cur))
        return index + 1

    def do_goto(self, cur, index, lines):
        return self._jump(cur, index, lines)

    def do_if(self, cur, index, lines):
        ok = self.ev.condition(cur)
        cur.skip_blanks()
        if cur.startswith('THEN'):
            cur.pos += 4
        cur.skip_blanks()
        if cur.startswith('GOTO'):
            cur.pos += 4
        if not ok:
            return index + 1
        return self._jump(cur, index, lines)

    def do_end(self, cur, index, lines):
        return HALT

    def do_dim(self, cur, index, lines):
        slot = cur.variable()
        if slot < 0:
            return index + 1
        cur.skip_blanks()
        if cur.match('('):
            self.store.dim(slot, self.ev.subscript(cur))
        return index + 1

    # ----- helpers -----
    def _skip_equals(self, cur):
        cur.skip_blanks()
        cur.match('=')
        cur.skip_blanks()

    def _jump(self, cur, index, lines):
        target = cur.number()
        if target is None:
            return index + 1
        found = find_line(lines, target)
        return found if found is not None else index + 1
